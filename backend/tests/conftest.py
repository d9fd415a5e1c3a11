"""
RecipeHub Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Motor collections are replaced by MagicMock/AsyncMock objects and
       injected through FastAPI's dependency_overrides, so no MongoDB and no
       lifespan (httpx's ASGITransport does not run it) are involved.

Fixture Hierarchy:
    ├── recipes_collection / users_collection: mocked Motor collections
    ├── mock_db: mocked AsyncIOMotorDatabase indexing to those collections
    ├── mock_mongo: mocked MongoDatabase for /health
    ├── sample_recipe: a complete recipe body
    └── test_client: HTTPX AsyncClient wired to a fresh app
"""

import os

# Override settings for testing BEFORE any recipehub imports
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["MONGO_DB_NAME"] = "recipeDB_test"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from recipehub.config import settings
from recipehub.database import get_database, get_mongo


def make_cursor(documents: Optional[List[Dict[str, Any]]] = None) -> MagicMock:
    """
    A Motor cursor stand-in: sort()/limit() chain back to the cursor and
    to_list() is awaited for the documents.
    """
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=list(documents or []))
    return cursor


def make_collection() -> MagicMock:
    collection = MagicMock()
    collection.find = MagicMock(return_value=make_cursor())
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    collection.create_index = AsyncMock()
    return collection


@pytest.fixture
def recipes_collection():
    return make_collection()


@pytest.fixture
def users_collection():
    return make_collection()


@pytest.fixture
def mock_db(recipes_collection, users_collection):
    """
    Provides a mock Motor database.

    Usage:
        async def test_x(mock_db, recipes_collection):
            recipes_collection.find_one.return_value = {...}
            await RecipeService().get_recipe(mock_db, recipe_id)
    """
    collections = {
        settings.recipes_collection: recipes_collection,
        settings.users_collection: users_collection,
    }
    db = MagicMock()
    db.__getitem__.side_effect = lambda name: collections[name]
    return db


@pytest.fixture
def mock_mongo():
    mongo = MagicMock()
    mongo.ping = AsyncMock(return_value={"ok": 1.0})
    return mongo


@pytest.fixture
def sample_recipe():
    return {
        "ownerEmail": "chef@example.com",
        "title": "Shakshuka",
        "image": "https://img.example.com/shakshuka.jpg",
        "ingredients": ["4 eggs", "1 can tomatoes", "1 onion", "2 tsp paprika"],
        "instructions": "Simmer the sauce, crack in the eggs, cover until set.",
        "cuisine": "Middle Eastern",
        "prepTime": 25,
        "categories": ["Breakfast", "Vegetarian"],
    }


@pytest_asyncio.fixture
async def test_client(mock_db, mock_mongo):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_welcome(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from recipehub.main import create_app

    app = create_app(settings)
    app.dependency_overrides[get_database] = lambda: mock_db
    app.dependency_overrides[get_mongo] = lambda: mock_mongo

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
