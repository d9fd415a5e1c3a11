"""
RecipeHub Backend — Recipe Service Unit Tests
===============================================

What:  Tests for RecipeService against mocked Motor collections.

What we test:
    ✅ Top-liked query shape (integer likes only, likes desc, limit 6)
    ✅ Owner filter is an exact ownerEmail match
    ✅ Likes forced to 0 on create; ownerEmail required
    ✅ Update writes only the editable fields
    ✅ Malformed ids rejected before touching storage
    ✅ Storage failures: 500 everywhere except delete (400)
"""

import pytest
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from recipehub.exceptions import (
    DatabaseError,
    InvalidIdentifierError,
    NotFoundError,
    ValidationError,
)
from recipehub.models.recipe import EDITABLE_FIELDS, TOP_LIKED_FILTER
from recipehub.services.recipe_service import RecipeService

from conftest import make_cursor


class TestRecipeServiceList:
    """Tests for list_top_liked and list_recipes."""

    def setup_method(self):
        self.service = RecipeService()

    @pytest.mark.asyncio
    async def test_top_liked_query(self, mock_db, recipes_collection):
        """Only integer like-counts, sorted by likes descending, six at most."""
        cursor = make_cursor([{"_id": ObjectId(), "likes": 9}, {"_id": ObjectId(), "likes": 4}])
        recipes_collection.find.return_value = cursor

        result = await self.service.list_top_liked(mock_db)

        recipes_collection.find.assert_called_once_with(TOP_LIKED_FILTER)
        cursor.sort.assert_called_once_with("likes", DESCENDING)
        cursor.limit.assert_called_once_with(6)
        cursor.to_list.assert_awaited_once_with(length=6)
        assert [r["likes"] for r in result] == [9, 4]

    def test_top_liked_filter_requires_integer_likes(self):
        assert TOP_LIKED_FILTER == {"likes": {"$exists": True, "$type": "int"}}

    @pytest.mark.asyncio
    async def test_top_liked_ids_serialized(self, mock_db, recipes_collection):
        oid = ObjectId()
        recipes_collection.find.return_value = make_cursor([{"_id": oid, "likes": 1}])

        result = await self.service.list_top_liked(mock_db)

        assert result == [{"_id": str(oid), "likes": 1}]

    @pytest.mark.asyncio
    async def test_top_liked_storage_error(self, mock_db, recipes_collection):
        cursor = make_cursor()
        cursor.to_list.side_effect = ServerSelectionTimeoutError("no servers")
        recipes_collection.find.return_value = cursor

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_top_liked(mock_db)
        assert exc_info.value.message == "Failed to fetch top liked recipes"

    @pytest.mark.asyncio
    async def test_list_all_recipes(self, mock_db, recipes_collection):
        await self.service.list_recipes(mock_db)
        recipes_collection.find.assert_called_once_with({})

    @pytest.mark.asyncio
    async def test_list_recipes_by_owner(self, mock_db, recipes_collection):
        recipes_collection.find.return_value = make_cursor(
            [{"_id": ObjectId(), "ownerEmail": "chef@example.com"}]
        )

        result = await self.service.list_recipes(mock_db, owner_email="chef@example.com")

        recipes_collection.find.assert_called_once_with({"ownerEmail": "chef@example.com"})
        assert all(r["ownerEmail"] == "chef@example.com" for r in result)

    @pytest.mark.asyncio
    async def test_list_recipes_empty_email_means_all(self, mock_db, recipes_collection):
        await self.service.list_recipes(mock_db, owner_email="")
        recipes_collection.find.assert_called_once_with({})

    @pytest.mark.asyncio
    async def test_list_recipes_storage_error(self, mock_db, recipes_collection):
        recipes_collection.find.side_effect = PyMongoError("boom")

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_recipes(mock_db)
        assert exc_info.value.message == "Failed to fetch recipes"


class TestRecipeServiceGet:
    """Tests for get_recipe."""

    def setup_method(self):
        self.service = RecipeService()

    @pytest.mark.asyncio
    async def test_get_recipe_found(self, mock_db, recipes_collection, sample_recipe):
        oid = ObjectId()
        recipes_collection.find_one.return_value = {"_id": oid, **sample_recipe, "likes": 3}

        result = await self.service.get_recipe(mock_db, str(oid))

        recipes_collection.find_one.assert_awaited_once_with({"_id": oid})
        assert result["_id"] == str(oid)
        assert result["title"] == "Shakshuka"
        assert result["likes"] == 3

    @pytest.mark.asyncio
    async def test_get_recipe_not_found(self, mock_db, recipes_collection):
        recipes_collection.find_one.return_value = None

        with pytest.raises(NotFoundError):
            await self.service.get_recipe(mock_db, str(ObjectId()))

    @pytest.mark.asyncio
    async def test_get_recipe_malformed_id(self, mock_db, recipes_collection):
        with pytest.raises(InvalidIdentifierError):
            await self.service.get_recipe(mock_db, "top-liked")
        recipes_collection.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_recipe_storage_error_is_server_error(self, mock_db, recipes_collection):
        recipes_collection.find_one.side_effect = PyMongoError("boom")

        with pytest.raises(DatabaseError):
            await self.service.get_recipe(mock_db, str(ObjectId()))


class TestRecipeServiceCreate:
    """Tests for create_recipe."""

    def setup_method(self):
        self.service = RecipeService()

    @pytest.mark.asyncio
    async def test_create_forces_zero_likes(self, mock_db, recipes_collection, sample_recipe):
        oid = ObjectId()
        recipes_collection.insert_one.return_value = InsertOneResult(oid, acknowledged=True)

        ack = await self.service.create_recipe(mock_db, {**sample_recipe, "likes": 500})

        inserted = recipes_collection.insert_one.await_args.args[0]
        assert inserted["likes"] == 0
        assert inserted["ownerEmail"] == "chef@example.com"
        assert ack.acknowledged is True
        assert ack.insertedId == str(oid)

    @pytest.mark.asyncio
    async def test_create_does_not_mutate_body(self, mock_db, recipes_collection, sample_recipe):
        recipes_collection.insert_one.return_value = InsertOneResult(ObjectId(), acknowledged=True)
        body = {**sample_recipe, "likes": 7}

        await self.service.create_recipe(mock_db, body)

        assert body["likes"] == 7

    @pytest.mark.asyncio
    async def test_create_keeps_extra_fields(self, mock_db, recipes_collection, sample_recipe):
        recipes_collection.insert_one.return_value = InsertOneResult(ObjectId(), acknowledged=True)

        await self.service.create_recipe(mock_db, {**sample_recipe, "difficulty": "easy"})

        assert recipes_collection.insert_one.await_args.args[0]["difficulty"] == "easy"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("owner", [None, ""])
    async def test_create_requires_owner_email(self, mock_db, recipes_collection, sample_recipe, owner):
        body = dict(sample_recipe)
        if owner is None:
            body.pop("ownerEmail")
        else:
            body["ownerEmail"] = owner

        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_recipe(mock_db, body)

        assert exc_info.value.field == "ownerEmail"
        recipes_collection.insert_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_storage_error(self, mock_db, recipes_collection, sample_recipe):
        recipes_collection.insert_one.side_effect = PyMongoError("boom")

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_recipe(mock_db, sample_recipe)
        assert exc_info.value.message == "Failed to add recipe"


class TestRecipeServiceUpdate:
    """Tests for update_recipe."""

    def setup_method(self):
        self.service = RecipeService()

    @pytest.mark.asyncio
    async def test_update_sets_only_editable_fields(self, mock_db, recipes_collection, sample_recipe):
        oid = ObjectId()
        recipes_collection.update_one.return_value = UpdateResult({"n": 1, "nModified": 1}, True)
        body = {**sample_recipe, "ownerEmail": "thief@example.com", "likes": 1000, "_id": "x"}

        ack = await self.service.update_recipe(mock_db, str(oid), body)

        query, update = recipes_collection.update_one.await_args.args
        assert query == {"_id": oid}
        assert set(update["$set"]) == set(EDITABLE_FIELDS)
        assert "ownerEmail" not in update["$set"]
        assert "likes" not in update["$set"]
        assert update["$set"]["title"] == "Shakshuka"
        assert ack.matchedCount == 1
        assert ack.modifiedCount == 1

    @pytest.mark.asyncio
    async def test_update_missing_fields_written_as_null(self, mock_db, recipes_collection):
        recipes_collection.update_one.return_value = UpdateResult({"n": 1, "nModified": 1}, True)

        await self.service.update_recipe(mock_db, str(ObjectId()), {"title": "Only a title"})

        update = recipes_collection.update_one.await_args.args[1]
        assert update["$set"]["title"] == "Only a title"
        assert update["$set"]["image"] is None
        assert update["$set"]["categories"] is None

    @pytest.mark.asyncio
    async def test_update_no_match_is_not_an_error(self, mock_db, recipes_collection, sample_recipe):
        recipes_collection.update_one.return_value = UpdateResult({"n": 0, "nModified": 0}, True)

        ack = await self.service.update_recipe(mock_db, str(ObjectId()), sample_recipe)

        assert ack.matchedCount == 0
        assert ack.modifiedCount == 0
        assert ack.upsertedId is None

    @pytest.mark.asyncio
    async def test_update_malformed_id(self, mock_db, recipes_collection, sample_recipe):
        with pytest.raises(InvalidIdentifierError):
            await self.service.update_recipe(mock_db, "nope", sample_recipe)
        recipes_collection.update_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_storage_error(self, mock_db, recipes_collection, sample_recipe):
        recipes_collection.update_one.side_effect = PyMongoError("boom")

        with pytest.raises(DatabaseError):
            await self.service.update_recipe(mock_db, str(ObjectId()), sample_recipe)


class TestRecipeServiceDelete:
    """Tests for delete_recipe."""

    def setup_method(self):
        self.service = RecipeService()

    @pytest.mark.asyncio
    async def test_delete_existing(self, mock_db, recipes_collection):
        oid = ObjectId()
        recipes_collection.delete_one.return_value = DeleteResult({"n": 1}, True)

        ack = await self.service.delete_recipe(mock_db, str(oid))

        recipes_collection.delete_one.assert_awaited_once_with({"_id": oid})
        assert ack.deletedCount == 1

    @pytest.mark.asyncio
    async def test_delete_missing_reports_zero(self, mock_db, recipes_collection):
        recipes_collection.delete_one.return_value = DeleteResult({"n": 0}, True)

        ack = await self.service.delete_recipe(mock_db, str(ObjectId()))

        assert ack.deletedCount == 0

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, mock_db, recipes_collection):
        with pytest.raises(InvalidIdentifierError):
            await self.service.delete_recipe(mock_db, "12345")
        recipes_collection.delete_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_storage_error_reported_as_invalid_id(self, mock_db, recipes_collection):
        recipes_collection.delete_one.side_effect = PyMongoError("boom")

        with pytest.raises(InvalidIdentifierError):
            await self.service.delete_recipe(mock_db, str(ObjectId()))


class TestRecipeServiceLike:
    """Tests for like_recipe."""

    def setup_method(self):
        self.service = RecipeService()

    @pytest.mark.asyncio
    async def test_like_increments_by_one(self, mock_db, recipes_collection):
        oid = ObjectId()
        recipes_collection.update_one.return_value = UpdateResult({"n": 1, "nModified": 1}, True)

        result = await self.service.like_recipe(mock_db, str(oid))

        recipes_collection.update_one.assert_awaited_once_with({"_id": oid}, {"$inc": {"likes": 1}})
        assert result.success is True
        assert result.message == "Like added"

    @pytest.mark.asyncio
    async def test_like_missing_recipe(self, mock_db, recipes_collection):
        recipes_collection.update_one.return_value = UpdateResult({"n": 0, "nModified": 0}, True)

        with pytest.raises(NotFoundError):
            await self.service.like_recipe(mock_db, str(ObjectId()))

    @pytest.mark.asyncio
    async def test_like_malformed_id(self, mock_db, recipes_collection):
        with pytest.raises(InvalidIdentifierError):
            await self.service.like_recipe(mock_db, "not-an-id")

    @pytest.mark.asyncio
    async def test_like_storage_error(self, mock_db, recipes_collection):
        recipes_collection.update_one.side_effect = PyMongoError("boom")

        with pytest.raises(DatabaseError):
            await self.service.like_recipe(mock_db, str(ObjectId()))
