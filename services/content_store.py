import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List

from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from models.generated_content import GeneratedContentCreate, GeneratedContentRecord
from utils.errors import ConfigurationError, StoreError
from utils.mongodb import get_db

logger = logging.getLogger(__name__)


class ContentStore:
    """Append-only store of generated content, grouped by session."""

    def create(self, session_id: str, type: str, niche: str, country: str, language: str,
               content: Dict[str, Any]) -> GeneratedContentRecord:
        raise NotImplementedError

    def list_by_session(self, session_id: str) -> List[GeneratedContentRecord]:
        raise NotImplementedError

    def list_by_session_and_type(self, session_id: str, type: str) -> List[GeneratedContentRecord]:
        return [record for record in self.list_by_session(session_id) if record.type == type]


class InMemoryContentStore(ContentStore):
    def __init__(self):
        self._records: List[GeneratedContentRecord] = []
        self._next_id = 1
        self._last_created_at = None
        self._lock = threading.Lock()

    def create(self, session_id, type, niche, country, language, content):
        data = GeneratedContentCreate(
            session_id=session_id, type=type, niche=niche, country=country, language=language, content=content,
        )
        with self._lock:
            created_at = datetime.now(timezone.utc)
            # keep created_at ordered with id even if the wall clock steps back
            if self._last_created_at and created_at < self._last_created_at:
                created_at = self._last_created_at
            record = GeneratedContentRecord(id=self._next_id, created_at=created_at, **data.model_dump())
            self._records.append(record)
            self._next_id += 1
            self._last_created_at = created_at
        return record

    def list_by_session(self, session_id):
        with self._lock:
            return [record for record in self._records if record.session_id == session_id]


class MongoContentStore(ContentStore):
    collection_name = "generated_content"
    counters_name = "counters"

    def __init__(self, db):
        self.collection = db[self.collection_name]
        self.counters = db[self.counters_name]
        try:
            self.collection.create_index("id", unique=True)
            self.collection.create_index([("session_id", ASCENDING), ("id", ASCENDING)])
        except PyMongoError as e:
            raise StoreError(f"Error preparing content collection: {e}") from e

    def _next_id(self):
        counter = self.counters.find_one_and_update(
            {"_id": self.collection_name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]

    def create(self, session_id, type, niche, country, language, content):
        data = GeneratedContentCreate(
            session_id=session_id, type=type, niche=niche, country=country, language=language, content=content,
        )
        try:
            record = GeneratedContentRecord(
                id=self._next_id(), created_at=datetime.now(timezone.utc), **data.model_dump(),
            )
            self.collection.insert_one(record.to_document())
        except PyMongoError as e:
            raise StoreError(f"Error creating generated content: {e}") from e

        logger.info("Generated content %s stored for session %s", record.id, session_id)
        return record

    def _find(self, query):
        try:
            cursor = self.collection.find(query, {"_id": 0}).sort("id", ASCENDING)
            return [GeneratedContentRecord(**document) for document in cursor]
        except PyMongoError as e:
            raise StoreError(f"Error fetching generated content: {e}") from e

    def list_by_session(self, session_id):
        return self._find({"session_id": session_id})

    def list_by_session_and_type(self, session_id, type):
        return self._find({"session_id": session_id, "type": type})


def build_store(config) -> ContentStore:
    kind = (config.get("CONTENT_STORE") or "memory").lower()
    if kind == "memory":
        return InMemoryContentStore()
    if kind == "mongo":
        return MongoContentStore(get_db(config.get("MONGO_URI"), config.get("MONGO_DB_NAME")))
    raise ConfigurationError(f"Unknown CONTENT_STORE '{kind}'. Expected 'memory' or 'mongo'")
