"""
Cache-or-refresh for Perplexity content.
- Fresh record (younger than the freshness window): return it, no API call.
- Missing or stale: ask Perplexity once for JSON matching the content schema, validate it,
  upsert the record and return it.
Failures are never hidden behind stale content: upstream errors and unparseable answers propagate
and leave the cached record as it was. Concurrent refreshes of one key are not coordinated;
the last upsert wins.
"""
import asyncio
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from app.config import get_settings
from app.repositories.content_cache_repository import CacheRecord, ContentCacheStore
from app.schemas.perplexity import PetCareContent, ServiceListingContent
from app.services.content_errors import ContentParseError, InvalidKeyError
from app.services.perplexity_client import PerplexityClient

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"
GENERAL_LOCATION = "general"


def utcnow() -> datetime:
    """Naive UTC, matching how DateTime columns store timestamps."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class CachedContent:
    location: str
    topic: str
    content: dict[str, Any]
    fetched_at: datetime
    from_cache: bool


class ContentCacheService:
    """Base orchestrator. Subclasses set `content_model` and implement build_prompt()."""

    content_model: type[BaseModel]

    def __init__(
        self,
        store: ContentCacheStore,
        client: PerplexityClient,
        *,
        freshness_window: timedelta | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._store = store
        self._client = client
        if freshness_window is None:
            freshness_window = timedelta(hours=get_settings().content_freshness_hours)
        self.freshness_window = freshness_window
        self._clock = clock

    def build_prompt(self, location: str, topic: str) -> str:
        raise NotImplementedError

    def is_fresh(self, record: CacheRecord, now: datetime) -> bool:
        return now - record.fetched_at < self.freshness_window

    def parse(self, raw_text: str) -> BaseModel:
        """Strict parse: the whole answer must be JSON matching content_model."""
        try:
            return self.content_model.model_validate_json(raw_text)
        except ValidationError as e:
            logger.warning(
                "%s answer did not match schema (%d errors); raw starts with %r",
                self.content_model.__name__, e.error_count(), raw_text[:200],
            )
            raise ContentParseError(
                f"Perplexity answer is not valid {self.content_model.__name__}: {e.error_count()} validation error(s)",
                raw_text,
            ) from e

    async def get_or_refresh(self, location: str, topic: str) -> CachedContent:
        location = (location or "").strip()
        topic = (topic or "").strip()
        if not location:
            raise InvalidKeyError("location must not be empty")
        if not topic:
            raise InvalidKeyError("topic must not be empty")

        loop = asyncio.get_event_loop()
        record = await loop.run_in_executor(None, lambda: self._store.find(location, topic))
        now = self._clock()
        if record is not None and self.is_fresh(record, now):
            logger.debug("Content cache hit for (%s, %s), fetched %s", location, topic, record.fetched_at)
            return CachedContent(
                location=location,
                topic=topic,
                content=json.loads(record.content),
                fetched_at=record.fetched_at,
                from_cache=True,
            )

        logger.info(
            "Refreshing %s for (%s, %s): %s",
            self.content_model.__name__, location, topic, "stale" if record else "not cached",
        )
        raw = await self._client.query(
            self.build_prompt(location, topic),
            json_schema=self.content_model.model_json_schema(by_alias=True),
        )
        parsed = self.parse(raw)
        serialized = parsed.model_dump_json(by_alias=True, exclude_none=True)
        fetched_at = self._clock()
        saved = await loop.run_in_executor(
            None,
            lambda: self._store.upsert(location, topic, serialized, fetched_at),
        )
        return CachedContent(
            location=location,
            topic=topic,
            content=json.loads(saved.content),
            fetched_at=saved.fetched_at,
            from_cache=False,
        )


class ServiceListingCacheService(ContentCacheService):
    """Pet service listings for (city, category); category "all" means every kind of service."""

    content_model = ServiceListingContent

    def build_prompt(self, location: str, topic: str) -> str:
        prompt = f"Please provide a comprehensive list of pet services in {location}"
        if topic.lower() != ALL_CATEGORIES:
            prompt += f" specifically focused on {topic} services"
        prompt += (
            ". For each service, include the name, category, address, phone number, website (if available), "
            "opening hours, rating out of 5 and review count (if known), the types of animals served, "
            "and a brief description of services offered. Please ensure all information is accurate and up-to-date. "
            'Answer only with JSON of the form {"services": [...]}.'
        )
        return prompt


class PetCareCacheService(ContentCacheService):
    """Pet-care guidance for (city, topic); city "general" means no location-specific advice."""

    content_model = PetCareContent

    def build_prompt(self, location: str, topic: str) -> str:
        prompt = f"Please provide detailed information about {topic} for pet owners"
        if location.lower() != GENERAL_LOCATION:
            prompt += f" in {location}"
        prompt += (
            ". Include practical advice, best practices, common concerns, and any location-specific "
            "considerations. If there are multiple perspectives or approaches, please present them fairly. "
            "If there are relevant resources or services pet owners should know about, list them as resources. "
            'Answer only with JSON of the form {"summary": "...", "sections": [{"title": "...", "body": "..."}], '
            '"resources": [{"name": "...", "url": "...", "description": "..."}]}.'
        )
        return prompt
