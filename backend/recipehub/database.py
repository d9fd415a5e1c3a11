"""
RecipeHub Backend — MongoDB Connection Management
===================================================

What:  Async Motor client wrapper, startup ping, index bootstrap, and the
       FastAPI dependency that hands the database to route handlers.
How:   The lifespan handler builds a MongoDatabase, awaits connect(), and
       stores it on app.state. Routes receive the AsyncIOMotorDatabase via
       Depends(get_database). close() runs on shutdown.
When:  One client per process, shared by all requests. Motor pools the
       underlying sockets; nothing here holds per-request state.

Connection Strategy:
    - Server API v1, strict, with deprecation errors (Atlas stable API)
    - serverSelectionTimeoutMS bounds how long a request can wait for a server
    - Startup pings `admin` with a bounded tenacity retry; if every attempt
      fails the exception escapes the lifespan and uvicorn does not serve
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from recipehub.config import Settings
from recipehub.models.recipe import FIELD_LIKES, FIELD_OWNER_EMAIL

logger = logging.getLogger(__name__)


class MongoDatabase:
    """
    Owns the Motor client for the lifetime of the application.

    Usage:
        db = MongoDatabase(settings)
        await db.connect()
        recipes = db.database[settings.recipes_collection]
        ...
        db.close()
    """

    def __init__(self, settings: Settings, client: Optional[AsyncIOMotorClient] = None):
        self.settings = settings
        self._client = client
        self._database: Optional[AsyncIOMotorDatabase] = None

    @property
    def client(self) -> AsyncIOMotorClient:
        if self._client is None:
            self._client = AsyncIOMotorClient(
                self.settings.database_uri,
                server_api=ServerApi("1", strict=True, deprecation_errors=True),
                serverSelectionTimeoutMS=self.settings.mongo_server_selection_timeout_ms,
            )
        return self._client

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise RuntimeError("MongoDB is not connected yet.")
        return self._database

    async def connect(self) -> AsyncIOMotorDatabase:
        """
        Ping the deployment until it answers, then ensure indexes.

        Raises:
            PyMongoError: The last ping failure, once all attempts are spent.
        """
        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(PyMongoError),
            stop=stop_after_attempt(self.settings.mongo_connect_attempts),
            wait=wait_fixed(self.settings.mongo_connect_wait),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                await self.client.admin.command("ping")

        self._database = self.client[self.settings.mongo_db_name]
        logger.info("Connected to MongoDB database '%s'", self.settings.mongo_db_name)

        await self.ensure_indexes()
        return self._database

    async def ensure_indexes(self) -> None:
        """Indexes backing the owner filter and the top-liked sort."""
        recipes = self.database[self.settings.recipes_collection]
        await recipes.create_index([(FIELD_OWNER_EMAIL, ASCENDING)])
        await recipes.create_index([(FIELD_LIKES, DESCENDING)])
        logger.info("Indexes ensured on '%s'", self.settings.recipes_collection)

    async def ping(self) -> Dict[str, Any]:
        return await self.client.admin.command("ping")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None
        self._database = None
        logger.info("MongoDB client closed")


# ── Request Dependencies ──────────────────────────────────────────────────
def get_mongo(request: Request) -> MongoDatabase:
    """The MongoDatabase built by the lifespan handler."""
    return request.app.state.mongo


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """
    FastAPI dependency that provides the Motor database handle.

    Example usage in a route:
        @router.get("/recipes")
        async def list_recipes(db: AsyncIOMotorDatabase = Depends(get_database)):
            ...

    Tests replace this through app.dependency_overrides.
    """
    return get_mongo(request).database
