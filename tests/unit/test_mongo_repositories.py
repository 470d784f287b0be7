"""
Unit tests for the MongoDB repositories with mocked Motor collections (no real DB).
"""
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from task_backend.domain.exceptions import ConflictError, NotFoundError
from task_backend.domain.models.task import Task, TaskUpdate
from task_backend.infrastructure.db.mongo_connection import ensure_indexes
from task_backend.infrastructure.db.mongo_task_repository import MongoTaskRepository
from task_backend.infrastructure.db.mongo_user_repository import MongoUserRepository


TASK_OID = ObjectId("65a1b2c3d4e5f6a7b8c9d0e1")
USER_OID = ObjectId("65a1b2c3d4e5f6a7b8c9d0ff")


class _AsyncCursor:
    """Stand-in for a Motor cursor: supports sort() chaining and async iteration."""

    def __init__(self, documents):
        self._documents = list(documents)
        self.sort_args = None

    def sort(self, *args):
        self.sort_args = args
        return self

    def __aiter__(self):
        self._iterator = iter(self._documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration


def _task_document(**overrides):
    document = {
        "_id": TASK_OID,
        "user_id": "user-1",
        "title": "Stored task",
        "description": "",
        "completed": False,
        # Motor without tz_aware returns naive UTC datetimes
        "created_at": datetime(2024, 1, 1, 9, 0, 0),
        "updated_at": datetime(2024, 1, 2, 9, 0, 0),
    }
    document.update(overrides)
    return document


@pytest.fixture
def task_collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


@pytest.fixture
def user_collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    return collection


class TestMongoTaskRepository:
    """Tests for MongoTaskRepository"""

    @pytest.mark.asyncio
    async def test_find_by_id_maps_document(self, task_collection):
        task_collection.find_one.return_value = _task_document()
        repo = MongoTaskRepository(task_collection=task_collection)

        task = await repo.find_by_id(str(TASK_OID))

        assert task.id == str(TASK_OID)
        assert task.user_id == "user-1"
        assert task.created_at == datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)
        task_collection.find_one.assert_called_once_with({"_id": TASK_OID})

    @pytest.mark.asyncio
    async def test_find_by_invalid_id_returns_none(self, task_collection):
        repo = MongoTaskRepository(task_collection=task_collection)
        assert await repo.find_by_id("not-an-object-id") is None
        task_collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_all_by_user_id(self, task_collection):
        cursor = _AsyncCursor([_task_document(), _task_document(_id=ObjectId(), title="Second")])
        task_collection.find = MagicMock(return_value=cursor)
        repo = MongoTaskRepository(task_collection=task_collection)

        tasks = await repo.find_all_by_user_id("user-1")

        assert [task.title for task in tasks] == ["Stored task", "Second"]
        task_collection.find.assert_called_once_with({"user_id": "user-1"})
        assert cursor.sort_args == ("created_at", DESCENDING)

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_keeps_timestamps(self, task_collection):
        task_collection.insert_one.return_value = SimpleNamespace(inserted_id=TASK_OID)
        repo = MongoTaskRepository(task_collection=task_collection)
        stamp = datetime(2024, 1, 5, tzinfo=timezone.utc)

        created = await repo.create(
            Task(id=None, user_id="user-1", title="New", created_at=stamp, updated_at=stamp)
        )

        assert created.id == str(TASK_OID)
        assert created.created_at == stamp
        assert created.updated_at == stamp
        inserted = task_collection.insert_one.call_args.args[0]
        assert "_id" not in inserted
        assert inserted["completed"] is False

    @pytest.mark.asyncio
    async def test_update_sets_only_present_fields(self, task_collection):
        task_collection.find_one_and_update.return_value = _task_document(completed=True)
        repo = MongoTaskRepository(task_collection=task_collection)
        stamp = datetime(2024, 2, 1, tzinfo=timezone.utc)

        updated = await repo.update(str(TASK_OID), TaskUpdate(completed=True, updated_at=stamp))

        assert updated.completed is True
        query, update = task_collection.find_one_and_update.call_args.args
        assert query == {"_id": TASK_OID}
        assert update == {"$set": {"completed": True, "updated_at": stamp}}

    @pytest.mark.asyncio
    async def test_update_unknown_id_raises_not_found(self, task_collection):
        task_collection.find_one_and_update.return_value = None
        repo = MongoTaskRepository(task_collection=task_collection)
        with pytest.raises(NotFoundError):
            await repo.update(str(TASK_OID), TaskUpdate(title="x"))

    @pytest.mark.asyncio
    async def test_update_invalid_id_raises_not_found(self, task_collection):
        repo = MongoTaskRepository(task_collection=task_collection)
        with pytest.raises(NotFoundError):
            await repo.update("bad-id", TaskUpdate(title="x"))
        task_collection.find_one_and_update.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete(self, task_collection):
        task_collection.delete_one.return_value = SimpleNamespace(deleted_count=1)
        repo = MongoTaskRepository(task_collection=task_collection)
        await repo.delete(str(TASK_OID))
        task_collection.delete_one.assert_called_once_with({"_id": TASK_OID})

    @pytest.mark.asyncio
    async def test_delete_unknown_id_raises_not_found(self, task_collection):
        task_collection.delete_one.return_value = SimpleNamespace(deleted_count=0)
        repo = MongoTaskRepository(task_collection=task_collection)
        with pytest.raises(NotFoundError):
            await repo.delete(str(TASK_OID))

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_runtime_error(self, task_collection):
        task_collection.find_one.side_effect = Exception("connection reset")
        repo = MongoTaskRepository(task_collection=task_collection)
        with pytest.raises(RuntimeError, match="Error finding task by ID: connection reset"):
            await repo.find_by_id(str(TASK_OID))


class TestMongoUserRepository:
    """Tests for MongoUserRepository"""

    @pytest.mark.asyncio
    async def test_find_by_email(self, user_collection):
        user_collection.find_one.return_value = {
            "_id": USER_OID,
            "email": "a@example.com",
            "created_at": datetime(2024, 1, 1),
        }
        repo = MongoUserRepository(user_collection=user_collection)

        user = await repo.find_by_email("a@example.com")

        assert user.id == str(USER_OID)
        assert user.created_at.tzinfo is not None
        user_collection.find_one.assert_called_once_with({"email": "a@example.com"})

    @pytest.mark.asyncio
    async def test_find_by_email_missing(self, user_collection):
        user_collection.find_one.return_value = None
        repo = MongoUserRepository(user_collection=user_collection)
        assert await repo.find_by_email("a@example.com") is None

    @pytest.mark.asyncio
    async def test_find_by_invalid_id_returns_none(self, user_collection):
        repo = MongoUserRepository(user_collection=user_collection)
        assert await repo.find_by_id("usr-1") is None
        user_collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_create(self, user_collection):
        user_collection.insert_one.return_value = SimpleNamespace(inserted_id=USER_OID)
        repo = MongoUserRepository(user_collection=user_collection)

        user = await repo.create("new@example.com")

        assert user.id == str(USER_OID)
        assert user.email == "new@example.com"
        assert user.created_at is not None
        inserted = user_collection.insert_one.call_args.args[0]
        assert inserted["email"] == "new@example.com"

    @pytest.mark.asyncio
    async def test_create_duplicate_email_raises_conflict(self, user_collection):
        user_collection.insert_one.side_effect = DuplicateKeyError(
            "E11000 duplicate key error collection: task_manager.users index: uniq_email"
        )
        repo = MongoUserRepository(user_collection=user_collection)
        with pytest.raises(ConflictError, match="Email is already registered"):
            await repo.create("dup@example.com")

    @pytest.mark.asyncio
    async def test_create_failure_becomes_runtime_error(self, user_collection):
        user_collection.insert_one.side_effect = Exception("duplicate key")
        repo = MongoUserRepository(user_collection=user_collection)
        with pytest.raises(RuntimeError, match="Error creating user"):
            await repo.create("dup@example.com")


class TestEnsureIndexes:
    @pytest.mark.asyncio
    async def test_creates_unique_email_and_task_listing_indexes(self):
        collections = {"users": MagicMock(), "tasks": MagicMock()}
        for collection in collections.values():
            collection.create_index = AsyncMock()
        database = MagicMock()
        database.__getitem__.side_effect = lambda name: collections[name]

        await ensure_indexes(database)

        users_call = collections["users"].create_index.call_args
        assert users_call.args[0] == [("email", 1)]
        assert users_call.kwargs["unique"] is True
        tasks_call = collections["tasks"].create_index.call_args
        assert tasks_call.args[0] == [("user_id", 1), ("created_at", -1)]
