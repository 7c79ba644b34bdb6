"""
Perplexity-backed content, cached per (city, category) / (topic, city) for 24 hours:
- GET /api/perplexity/services — pet service listings for a city
- GET /api/perplexity/pet-care — pet-care guidance on a topic, optionally for a city
"""
import logging
from datetime import datetime, timezone
from functools import lru_cache

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.repositories.content_cache_repository import (
    ContentCacheStore,
    InMemoryContentCacheStore,
    pet_care_store,
    service_listing_store,
)
from app.schemas.perplexity import (
    PerplexityErrorResponse,
    PerplexityPetCareResponse,
    PerplexityServicesResponse,
)
from app.services.content_cache_service import (
    ALL_CATEGORIES,
    GENERAL_LOCATION,
    PetCareCacheService,
    ServiceListingCacheService,
)
from app.services.content_errors import ContentCacheError, InvalidKeyError
from app.services.perplexity_client import PerplexityClient, get_perplexity_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/perplexity", tags=["perplexity"])

_ERROR_RESPONSES = {
    400: {"model": PerplexityErrorResponse},
    500: {"model": PerplexityErrorResponse},
}


# ---------- Dependencies: store backend + cache services ----------


@lru_cache
def _memory_store(kind: str) -> InMemoryContentCacheStore:
    """One in-process store per content kind, shared by all requests."""
    return InMemoryContentCacheStore()


def _store_for(kind: str, db: Session) -> ContentCacheStore:
    if get_settings().content_cache_backend == "memory":
        return _memory_store(kind)
    if kind == "services":
        return service_listing_store(db)
    return pet_care_store(db)


def _get_service_listing_cache_dep(
    db: Session = Depends(get_db),
    client: PerplexityClient = Depends(get_perplexity_client),
) -> ServiceListingCacheService:
    return ServiceListingCacheService(_store_for("services", db), client)


def _get_pet_care_cache_dep(
    db: Session = Depends(get_db),
    client: PerplexityClient = Depends(get_perplexity_client),
) -> PetCareCacheService:
    return PetCareCacheService(_store_for("pet_care", db), client)


def _error_response(status_code: int, error: str, exc: ContentCacheError) -> JSONResponse:
    body = {"error": error, "code": exc.code}
    if status_code >= 500:
        body["details"] = exc.message
    return JSONResponse(status_code=status_code, content=body)


def _utc_timestamp(value: datetime) -> str:
    """ISO-8601 with an explicit UTC offset; stored timestamps are naive UTC."""
    return value.replace(tzinfo=timezone.utc).isoformat()


# ---------- Endpoints ----------


@router.get("/services", response_model=PerplexityServicesResponse, responses=_ERROR_RESPONSES)
async def perplexity_services(
    city: str | None = None,
    category: str | None = None,
    cache: ServiceListingCacheService = Depends(_get_service_listing_cache_dep),
):
    """Service listings for a city. Missing category means all categories."""
    category = (category or "").strip() or ALL_CATEGORIES
    try:
        result = await cache.get_or_refresh(city or "", category)
    except InvalidKeyError as e:
        return _error_response(status.HTTP_400_BAD_REQUEST, "City parameter is required", e)
    except ContentCacheError as e:
        logger.warning("Perplexity services failed for city=%r category=%r: %s", city, category, e)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch service data", e)

    return PerplexityServicesResponse(
        city=result.location,
        category=result.topic,
        content=result.content,
        timestamp=_utc_timestamp(result.fetched_at),
        from_cache=result.from_cache,
    )


@router.get("/pet-care", response_model=PerplexityPetCareResponse, responses=_ERROR_RESPONSES)
async def perplexity_pet_care(
    topic: str | None = None,
    city: str | None = None,
    cache: PetCareCacheService = Depends(_get_pet_care_cache_dep),
):
    """Pet-care information on a topic. Missing city means general (not location-specific) advice."""
    city = (city or "").strip() or GENERAL_LOCATION
    try:
        result = await cache.get_or_refresh(city, topic or "")
    except InvalidKeyError as e:
        return _error_response(status.HTTP_400_BAD_REQUEST, "Topic parameter is required", e)
    except ContentCacheError as e:
        logger.warning("Perplexity pet-care failed for topic=%r city=%r: %s", topic, city, e)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch pet care information", e)

    return PerplexityPetCareResponse(
        topic=result.topic,
        city=result.location,
        content=result.content,
        timestamp=_utc_timestamp(result.fetched_at),
        from_cache=result.from_cache,
    )
