import threading
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from pymongo.errors import PyMongoError

from services.content_store import InMemoryContentStore, MongoContentStore, build_store
from utils.errors import ConfigurationError, StoreError


def _create(store, session_id="s1", type="idea", content=None):
    return store.create(session_id, type, "fitness", "Brazil", "en", content or {"ideas": []})


class TestInMemoryContentStore:
    def test_three_records_listed_in_creation_order(self):
        store = InMemoryContentStore()
        created = [_create(store, content={"n": n}) for n in range(3)]

        listed = store.list_by_session("s1")

        assert [record.id for record in listed] == [record.id for record in created]
        assert [record.content["n"] for record in listed] == [0, 1, 2]
        assert listed[0].id < listed[1].id < listed[2].id
        assert listed[0].created_at <= listed[1].created_at <= listed[2].created_at

    def test_sessions_are_isolated(self):
        store = InMemoryContentStore()
        _create(store, session_id="a")
        _create(store, session_id="b")

        assert len(store.list_by_session("a")) == 1
        assert store.list_by_session("missing") == []

    def test_filter_by_type(self):
        store = InMemoryContentStore()
        _create(store, type="idea")
        validation = _create(store, type="validation", content={"idea": "x", "validation": {}})
        _create(store, type="promotion")

        assert store.list_by_session_and_type("s1", "validation") == [validation]

    def test_record_fields(self):
        record = _create(InMemoryContentStore())

        assert record.id == 1
        assert record.session_id == "s1"
        assert record.created_at.tzinfo is not None
        assert record.to_response()["sessionId"] == "s1"
        assert "createdAt" in record.to_response()

    def test_concurrent_creates_get_unique_ids(self):
        store = InMemoryContentStore()

        def worker():
            for _ in range(25):
                _create(store)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = [record.id for record in store.list_by_session("s1")]
        assert ids == list(range(1, 201))


@pytest.fixture
def mongo_db():
    return {"generated_content": MagicMock(), "counters": MagicMock()}


class TestMongoContentStore:
    def test_create_allocates_id_from_counter(self, mongo_db):
        mongo_db["counters"].find_one_and_update.return_value = {"_id": "generated_content", "seq": 7}
        store = MongoContentStore(mongo_db)

        record = _create(store)

        assert record.id == 7
        filter_doc, update_doc = mongo_db["counters"].find_one_and_update.call_args.args
        assert filter_doc == {"_id": "generated_content"}
        assert update_doc == {"$inc": {"seq": 1}}
        inserted = mongo_db["generated_content"].insert_one.call_args.args[0]
        assert inserted["id"] == 7
        assert inserted["session_id"] == "s1"
        assert inserted["content"] == {"ideas": []}

    def test_list_by_session_queries_in_id_order(self, mongo_db):
        collection = mongo_db["generated_content"]
        collection.find.return_value.sort.return_value = [
            {"id": 1, "session_id": "s1", "type": "idea", "niche": "fitness", "country": "Brazil",
             "language": "en", "content": {"ideas": []}, "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc)},
        ]
        store = MongoContentStore(mongo_db)

        records = store.list_by_session_and_type("s1", "idea")

        assert [record.id for record in records] == [1]
        collection.find.assert_called_once_with({"session_id": "s1", "type": "idea"}, {"_id": 0})
        collection.find.return_value.sort.assert_called_once_with("id", 1)

    def test_driver_errors_become_store_errors(self, mongo_db):
        mongo_db["counters"].find_one_and_update.return_value = {"seq": 1}
        mongo_db["generated_content"].insert_one.side_effect = PyMongoError("down")
        store = MongoContentStore(mongo_db)

        with pytest.raises(StoreError):
            _create(store)


class TestBuildStore:
    def test_memory_is_default(self):
        assert isinstance(build_store({}), InMemoryContentStore)

    def test_unknown_kind(self):
        with pytest.raises(ConfigurationError):
            build_store({"CONTENT_STORE": "redis"})

    def test_mongo_requires_uri(self):
        with pytest.raises(ConfigurationError):
            build_store({"CONTENT_STORE": "mongo", "MONGO_URI": None})
