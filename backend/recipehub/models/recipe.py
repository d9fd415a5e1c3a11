"""
RecipeHub Backend — Recipe Document Layout
============================================

What:  Field names and update rules for documents in the `recipes` collection.
Why:   MongoDB is schema-less; this module is the one place that names the
       fields the service reads, filters, sorts, and writes.
Who:   Used by RecipeService for queries and by the index bootstrap.

Document Shape:
    {
        "_id": ObjectId,            # assigned by MongoDB on insert
        "ownerEmail": str,          # required on create
        "title": str,
        "image": str,
        "ingredients": [str, ...],  # ordered
        "instructions": str,
        "cuisine": str,
        "prepTime": str | int,
        "categories": [str, ...],
        "likes": int,               # 0 on create, changed only by $inc
    }

    Any other caller-supplied fields are stored as-is on create.
"""

from typing import Any, Dict, Mapping

FIELD_ID = "_id"
FIELD_OWNER_EMAIL = "ownerEmail"
FIELD_LIKES = "likes"

# Fields PUT /recipes/{id} overwrites. ownerEmail and likes are never touched.
EDITABLE_FIELDS = (
    "image",
    "title",
    "ingredients",
    "instructions",
    "cuisine",
    "prepTime",
    "categories",
)

TOP_LIKED_LIMIT = 6

# Only integer like-counts are ranked; "int" matches BSON int32
TOP_LIKED_FILTER: Dict[str, Any] = {FIELD_LIKES: {"$exists": True, "$type": "int"}}


def new_recipe_document(body: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy of the submitted body with the like-count reset to zero."""
    document = dict(body)
    document[FIELD_LIKES] = 0
    return document


def editable_fields_update(body: Mapping[str, Any]) -> Dict[str, Any]:
    """
    `$set` update for a recipe edit.

    Every editable field is written; one missing from the body is set to
    null. Everything outside EDITABLE_FIELDS is ignored.
    """
    return {"$set": {field: body.get(field) for field in EDITABLE_FIELDS}}
