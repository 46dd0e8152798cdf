"""
Tests for user stores and word queues.
"""

import json

import mongomock
import pytest
from pymongo.errors import PyMongoError

from wordle_activity.errors import StorageFailure
from wordle_activity.models.progress import Progress
from wordle_activity.storage.user_store import InMemoryUserStore, MongoUserStore
from wordle_activity.storage.word_queue import JsonFileWordQueue, MongoWordQueue

from .conftest import progress_payload


@pytest.fixture(params=["memory", "mongo"])
def user_store(request):
    if request.param == "memory":
        return InMemoryUserStore()
    return MongoUserStore(mongomock.MongoClient().wordle_activity.users)


@pytest.fixture(params=["file", "mongo"])
def queue(request, tmp_path):
    if request.param == "file":
        return JsonFileWordQueue(str(tmp_path / "queue.json"))
    return MongoWordQueue(mongomock.MongoClient().wordle_activity.word_queues)


class TestUserStore:
    """Contract shared by every user store."""

    def test_missing_user(self, user_store):
        assert user_store.get("ghost") is None

    def test_insert_if_absent_only_once(self, user_store):
        assert user_store.insert_if_absent("alice", {"current_secret": "CRANE", "total_words": 1}) is True
        assert user_store.insert_if_absent("alice", {"current_secret": "SLATE", "total_words": 9}) is False

        record = user_store.get("alice")
        assert record.current_secret == "CRANE"
        assert record.total_words == 1
        assert record.total_correct == 0
        assert record.progress is None
        assert record.solved is False
        assert record.rounds_used == 0

    def test_update_sets_and_increments(self, user_store):
        user_store.insert_if_absent("alice", {"current_secret": "CRANE", "total_words": 1})

        assert user_store.update("alice", {"solved": True}, increment={"total_correct": 1}) is True
        assert user_store.update("alice", increment={"total_correct": 1, "total_words": 2}) is True

        record = user_store.get("alice")
        assert record.solved is True
        assert record.total_correct == 2
        assert record.total_words == 3

    def test_rounds_used_counter(self, user_store):
        user_store.insert_if_absent("alice", {"current_secret": "CRANE"})
        assert user_store.get("alice").rounds_used == 0

        user_store.update("alice", increment={"rounds_used": 1})
        user_store.update("alice", increment={"rounds_used": 1})
        assert user_store.get("alice").rounds_used == 2

        user_store.update("alice", {"rounds_used": 0})
        assert user_store.get("alice").rounds_used == 0

    def test_update_missing_user(self, user_store):
        assert user_store.update("ghost", {"solved": True}) is False
        assert user_store.update("ghost") is False
        assert user_store.get("ghost") is None

    def test_progress_is_stored_in_wire_form(self, user_store):
        user_store.insert_if_absent("alice", {})
        payload = progress_payload([("SLATE", ["absent"] * 5)])

        user_store.update("alice", {"progress": Progress.from_dict(payload)})

        assert user_store.get("alice").progress.to_dict() == payload

    def test_only_counters_can_be_incremented(self, user_store):
        user_store.insert_if_absent("alice", {})
        with pytest.raises(ValueError):
            user_store.update("alice", increment={"current_secret": 1})

    def test_count(self, user_store):
        user_store.insert_if_absent("alice", {})
        user_store.insert_if_absent("bob", {})
        assert user_store.count() == 2


class TestMongoUserStoreFailures:
    """Driver errors surface as StorageFailure."""

    def test_get_wraps_driver_error(self):
        class BrokenCollection:
            def find_one(self, *args, **kwargs):
                raise PyMongoError("connection refused")

        with pytest.raises(StorageFailure, match="connection refused"):
            MongoUserStore(BrokenCollection()).get("alice")


class TestWordQueue:
    """Contract shared by every word queue."""

    def test_empty_queue(self, queue):
        assert queue.pop_next("alice") is None
        assert queue.pending("alice") == 0

    def test_fifo_per_user(self, queue):
        assert queue.push_word("alice", "GRAPE") == 1
        assert queue.push_word("alice", "LIGHT") == 2
        queue.push_word("bob", "STONE")

        assert queue.pop_next("alice") == "GRAPE"
        assert queue.pending("alice") == 1
        assert queue.pending("bob") == 1
        assert queue.pop_next("alice") == "LIGHT"
        assert queue.pop_next("alice") is None
        assert queue.pop_next("bob") == "STONE"

    def test_push_front_goes_to_head(self, queue):
        queue.push_word("alice", "GRAPE")
        queue.push_word("alice", "LIGHT")

        assert queue.push_front("alice", "STONE") == 3
        assert queue.pop_next("alice") == "STONE"
        assert queue.pop_next("alice") == "GRAPE"

    def test_push_front_on_empty_queue(self, queue):
        assert queue.push_front("alice", "STONE") == 1
        assert queue.pop_next("alice") == "STONE"


class TestJsonFileWordQueue:
    """File-specific behaviour."""

    def test_survives_reopen(self, tmp_path):
        path = str(tmp_path / "queue.json")
        JsonFileWordQueue(path).push_word("alice", "GRAPE")

        reopened = JsonFileWordQueue(path)

        assert reopened.pending("alice") == 1
        assert reopened.pop_next("alice") == "GRAPE"
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == {"alice": []}

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "queue.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageFailure):
            JsonFileWordQueue(str(path)).pop_next("alice")

    def test_non_object_file(self, tmp_path):
        path = tmp_path / "queue.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(StorageFailure):
            JsonFileWordQueue(str(path)).pending("alice")

    def test_failed_write_leaves_no_temp_file(self, tmp_path):
        queue = JsonFileWordQueue(str(tmp_path / "queue.json"))
        queue.push_word("alice", "GRAPE")

        with pytest.raises(StorageFailure):
            queue.push_word("alice", object())

        assert list(tmp_path.glob("*.tmp")) == []
        assert queue.pending("alice") == 1
