"""
RecipeHub Backend — User Service
==================================

What:  Stores user profiles in the `users` collection.
Why:   The frontend saves a profile after sign-up; there are no read, update
       or delete endpoints, and no field is required or unique.
"""

import logging
from typing import Any, Mapping

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from recipehub.exceptions import DatabaseError
from recipehub.schemas.responses import InsertAck

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, collection_name: str = "users"):
        self.collection_name = collection_name

    async def create_user(self, db: AsyncIOMotorDatabase, profile: Mapping[str, Any]) -> InsertAck:
        """Insert the profile exactly as submitted."""
        try:
            result = await db[self.collection_name].insert_one(dict(profile))
        except PyMongoError as e:
            logger.error("Error adding user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to add user",
                context={"error_type": type(e).__name__},
            )
        return InsertAck.from_result(result)


def get_user_service(request: Request) -> UserService:
    return UserService(request.app.state.settings.users_collection)
