"""
RecipeHub Backend — Document Helpers
======================================

What:  ObjectId parsing and BSON → JSON conversion shared by the services.
Why:   Path identifiers arrive as strings and documents leave as JSON; both
       directions go through here so every route treats them the same way.
"""

import base64
from typing import Any, Dict, List, Mapping

from bson import ObjectId
from bson.errors import InvalidId
from fastapi.encoders import jsonable_encoder

from recipehub.exceptions import InvalidIdentifierError

# bson.Binary subclasses bytes, so stored binary fields are caught here too
BSON_ENCODERS = {
    ObjectId: str,
    bytes: lambda value: base64.b64encode(value).decode("ascii"),
}


def parse_object_id(identifier: str, resource: str = "recipe") -> ObjectId:
    """
    Convert a path identifier to an ObjectId.

    Raises:
        InvalidIdentifierError: Not a 24-character hex string (→ 400)
    """
    try:
        return ObjectId(identifier)
    except (InvalidId, TypeError):
        raise InvalidIdentifierError(identifier=identifier, resource=resource)


def document_to_json(document: Mapping[str, Any]) -> Dict[str, Any]:
    # ObjectId anywhere in the document (not only _id) becomes its hex string,
    # binary values become base64 text
    return jsonable_encoder(document, custom_encoder=BSON_ENCODERS)


def documents_to_json(documents: List[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return [document_to_json(document) for document in documents]
