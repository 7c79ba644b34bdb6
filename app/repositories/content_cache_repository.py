"""
Storage for cached Perplexity answers, addressed by (location, topic).
find() returns the record or None; upsert() overwrites the row for the key or inserts it.
Two backings share this contract: a SQL table (shared across processes) and an in-process dict.
All operations are sync; the async orchestrator runs them in the default executor.
"""
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import Base
from app.models.perplexity_cache import PerplexityPetCareCache, PerplexityServiceCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheRecord:
    location: str
    topic: str
    content: str
    fetched_at: datetime


class ContentCacheStore(Protocol):
    def find(self, location: str, topic: str) -> CacheRecord | None: ...

    def upsert(self, location: str, topic: str, content: str, fetched_at: datetime) -> CacheRecord: ...


class SqlContentCacheStore:
    """
    Table-backed store. `location_field` / `topic_field` name the model columns that
    form the unique key (the two cache tables name them differently).
    """

    def __init__(self, db: Session, model: type[Base], location_field: str, topic_field: str):
        self._db = db
        self._model = model
        self._location_field = location_field
        self._topic_field = topic_field

    def _get_row(self, location: str, topic: str):
        return (
            self._db.query(self._model)
            .filter(
                getattr(self._model, self._location_field) == location,
                getattr(self._model, self._topic_field) == topic,
            )
            .first()
        )

    def _to_record(self, row) -> CacheRecord:
        return CacheRecord(
            location=getattr(row, self._location_field),
            topic=getattr(row, self._topic_field),
            content=row.content,
            fetched_at=row.fetched_at,
        )

    def find(self, location: str, topic: str) -> CacheRecord | None:
        row = self._get_row(location, topic)
        return self._to_record(row) if row is not None else None

    def upsert(self, location: str, topic: str, content: str, fetched_at: datetime) -> CacheRecord:
        row = self._get_row(location, topic)
        if row is None:
            row = self._model(
                **{self._location_field: location, self._topic_field: topic},
                content=content,
                fetched_at=fetched_at,
            )
            self._db.add(row)
            try:
                self._db.commit()
            except IntegrityError:
                # Another request inserted the same key first; overwrite its row instead.
                self._db.rollback()
                logger.info("Concurrent insert for %s (%s, %s); overwriting", self._model.__tablename__, location, topic)
                row = self._get_row(location, topic)
                if row is None:
                    raise
                row.content = content
                row.fetched_at = fetched_at
                self._db.commit()
        else:
            row.content = content
            row.fetched_at = fetched_at
            self._db.commit()
        self._db.refresh(row)
        return self._to_record(row)

    def count(self, location: str, topic: str) -> int:
        return (
            self._db.query(self._model)
            .filter(
                getattr(self._model, self._location_field) == location,
                getattr(self._model, self._topic_field) == topic,
            )
            .count()
        )


class InMemoryContentCacheStore:
    """Single-process store. A dict keyed by (location, topic); the lock makes each write atomic."""

    def __init__(self):
        self._records: dict[tuple[str, str], CacheRecord] = {}
        self._lock = threading.Lock()

    def find(self, location: str, topic: str) -> CacheRecord | None:
        with self._lock:
            return self._records.get((location, topic))

    def upsert(self, location: str, topic: str, content: str, fetched_at: datetime) -> CacheRecord:
        record = CacheRecord(location=location, topic=topic, content=content, fetched_at=fetched_at)
        with self._lock:
            self._records[(location, topic)] = record
        return record

    def count(self, location: str, topic: str) -> int:
        with self._lock:
            return 1 if (location, topic) in self._records else 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def service_listing_store(db: Session) -> SqlContentCacheStore:
    """Store over perplexity_services, keyed by (city, category)."""
    return SqlContentCacheStore(db, PerplexityServiceCache, location_field="city", topic_field="category")


def pet_care_store(db: Session) -> SqlContentCacheStore:
    """Store over perplexity_pet_care, keyed by (city, topic)."""
    return SqlContentCacheStore(db, PerplexityPetCareCache, location_field="city", topic_field="topic")
