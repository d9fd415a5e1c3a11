"""
RecipeHub Backend — Recipe Service
====================================

What:  One method per recipe endpoint, each issuing a single MongoDB operation.
Why:   Keeps routes limited to HTTP concerns and puts the storage rules
       (likes reset, editable-field whitelist, top-liked filter) in one place.
Who:   Called by routes/recipes.py with the request's Motor database.

Design Decision:
    RecipeService is stateless. It receives the database for each call, so
    concurrent requests share nothing in-process; per-document atomicity
    (insert, $set, $inc, delete) comes from MongoDB.

Error Handling Strategy:
    - Malformed ids raise InvalidIdentifierError (400) before touching storage
    - Driver failures are logged and wrapped in DatabaseError (500)
    - delete_recipe is the exception: every failure becomes
      InvalidIdentifierError (400), matching the behaviour clients already see
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from recipehub.exceptions import (
    DatabaseError,
    InvalidIdentifierError,
    NotFoundError,
    ValidationError,
)
from recipehub.models.recipe import (
    FIELD_ID,
    FIELD_LIKES,
    FIELD_OWNER_EMAIL,
    TOP_LIKED_FILTER,
    TOP_LIKED_LIMIT,
    editable_fields_update,
    new_recipe_document,
)
from recipehub.schemas.responses import DeleteAck, InsertAck, LikeResponse, UpdateAck
from recipehub.services.documents import (
    document_to_json,
    documents_to_json,
    parse_object_id,
)

logger = logging.getLogger(__name__)


class RecipeService:
    """
    Storage operations for the `recipes` collection.

    Responsibilities:
        - list_top_liked(): up to six recipes by like-count, highest first
        - list_recipes(): every recipe, or one owner's recipes
        - get_recipe(): a single recipe or NotFoundError
        - create_recipe(): insert with likes forced to 0
        - update_recipe(): overwrite the editable fields only
        - delete_recipe(): remove by id
        - like_recipe(): atomic likes += 1
    """

    def __init__(self, collection_name: str = "recipes"):
        self.collection_name = collection_name

    def _collection(self, db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
        return db[self.collection_name]

    async def list_top_liked(self, db: AsyncIOMotorDatabase) -> List[Dict[str, Any]]:
        """
        Recipes with an integer like-count, sorted by likes descending.

        Order among equal like-counts is whatever MongoDB returns.
        """
        try:
            cursor = (
                self._collection(db)
                .find(TOP_LIKED_FILTER)
                .sort(FIELD_LIKES, DESCENDING)
                .limit(TOP_LIKED_LIMIT)
            )
            recipes = await cursor.to_list(length=TOP_LIKED_LIMIT)
        except PyMongoError as e:
            logger.error("Error fetching top liked recipes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch top liked recipes",
                context={"error_type": type(e).__name__},
            )
        return documents_to_json(recipes)

    async def list_recipes(
        self,
        db: AsyncIOMotorDatabase,
        owner_email: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        All recipes, or only those whose ownerEmail equals `owner_email` exactly.

        An empty `owner_email` is treated as absent. No pagination.
        """
        query: Dict[str, Any] = {FIELD_OWNER_EMAIL: owner_email} if owner_email else {}
        try:
            recipes = await self._collection(db).find(query).to_list(length=None)
        except PyMongoError as e:
            logger.error("Error fetching recipes (owner=%s): %s", owner_email, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch recipes",
                context={"error_type": type(e).__name__},
            )
        return documents_to_json(recipes)

    async def get_recipe(self, db: AsyncIOMotorDatabase, recipe_id: str) -> Dict[str, Any]:
        """
        Raises:
            InvalidIdentifierError: recipe_id is not an ObjectId (→ 400)
            NotFoundError: no recipe with that id (→ 404)
            DatabaseError: query failed (→ 500)
        """
        object_id = parse_object_id(recipe_id)
        try:
            recipe = await self._collection(db).find_one({FIELD_ID: object_id})
        except PyMongoError as e:
            logger.error("Error fetching recipe %s: %s", recipe_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch recipe",
                context={"recipe_id": recipe_id},
            )

        if recipe is None:
            raise NotFoundError(resource="recipe", resource_id=recipe_id)
        return document_to_json(recipe)

    async def create_recipe(
        self,
        db: AsyncIOMotorDatabase,
        body: Mapping[str, Any],
    ) -> InsertAck:
        """
        Insert a new recipe.

        ownerEmail must be present and non-empty; nothing is written otherwise.
        Any likes value in the body is discarded and replaced with 0.
        """
        if not body.get(FIELD_OWNER_EMAIL):
            raise ValidationError(message="ownerEmail is required", field=FIELD_OWNER_EMAIL)

        document = new_recipe_document(body)
        try:
            result = await self._collection(db).insert_one(document)
        except PyMongoError as e:
            logger.error("Error adding recipe: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to add recipe",
                context={"error_type": type(e).__name__},
            )

        logger.info("Recipe created: %s (owner=%s)", result.inserted_id, document[FIELD_OWNER_EMAIL])
        return InsertAck.from_result(result)

    async def update_recipe(
        self,
        db: AsyncIOMotorDatabase,
        recipe_id: str,
        body: Mapping[str, Any],
    ) -> UpdateAck:
        """
        Overwrite image, title, ingredients, instructions, cuisine, prepTime
        and categories on one recipe.

        A well-formed id that matches nothing is not an error: the ack
        reports matchedCount == 0.
        """
        object_id = parse_object_id(recipe_id)
        try:
            result = await self._collection(db).update_one(
                {FIELD_ID: object_id},
                editable_fields_update(body),
            )
        except PyMongoError as e:
            logger.error("Error updating recipe %s: %s", recipe_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to update recipe",
                context={"recipe_id": recipe_id},
            )
        return UpdateAck.from_result(result)

    async def delete_recipe(self, db: AsyncIOMotorDatabase, recipe_id: str) -> DeleteAck:
        """
        Remove one recipe by id; deletedCount is 0 when nothing matched.

        Both a malformed id and a storage failure are reported as
        InvalidIdentifierError (400).
        """
        object_id = parse_object_id(recipe_id)
        try:
            result = await self._collection(db).delete_one({FIELD_ID: object_id})
        except PyMongoError as e:
            logger.error("Error deleting recipe %s: %s", recipe_id, str(e), exc_info=True)
            raise InvalidIdentifierError(
                identifier=recipe_id,
                context={"error_type": type(e).__name__},
            )
        return DeleteAck.from_result(result)

    async def like_recipe(self, db: AsyncIOMotorDatabase, recipe_id: str) -> LikeResponse:
        """
        Atomically add one like.

        Raises:
            InvalidIdentifierError: recipe_id is not an ObjectId (→ 400)
            NotFoundError: nothing was modified (→ 404)
            DatabaseError: update failed (→ 500)
        """
        object_id = parse_object_id(recipe_id)
        try:
            result = await self._collection(db).update_one(
                {FIELD_ID: object_id},
                {"$inc": {FIELD_LIKES: 1}},
            )
        except PyMongoError as e:
            logger.error("Error updating likes for %s: %s", recipe_id, str(e), exc_info=True)
            raise DatabaseError(message="Server error", context={"recipe_id": recipe_id})

        if result.modified_count > 0:
            return LikeResponse()
        raise NotFoundError(resource="recipe", resource_id=recipe_id)


# ── Request Dependency ────────────────────────────────────────────────────
def get_recipe_service(request: Request) -> RecipeService:
    """RecipeService bound to the collection named in the app's settings."""
    return RecipeService(request.app.state.settings.recipes_collection)
