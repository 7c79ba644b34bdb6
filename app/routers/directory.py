"""
Local directory (read-only):
- GET /api/services — service providers in a city, optional category ("all" = no filter)
- GET /api/services/{id}
- GET /api/info — city information, optional category
- GET /api/cities — cities the community covers
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.city_information import CityInformation
from app.models.service_provider import ServiceProvider
from app.schemas.directory import ServiceProviderResponse, CityInfoResponse
from app.seed import SUPPORTED_CITIES

router = APIRouter(prefix="/api", tags=["directory"])


def _require_city(city: str | None) -> str:
    city = (city or "").strip()
    if not city:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="City parameter is required")
    return city


@router.get("/services", response_model=list[ServiceProviderResponse])
def list_services(
    city: str | None = None,
    category: str | None = None,
    db: Session = Depends(get_db),
):
    city = _require_city(city)
    q = db.query(ServiceProvider).filter(func.lower(ServiceProvider.city) == city.lower())
    if category and category.strip().lower() != "all":
        q = q.filter(func.lower(ServiceProvider.category) == category.strip().lower())
    providers = q.order_by(ServiceProvider.name).all()
    return [ServiceProviderResponse.model_validate(p) for p in providers]


@router.get("/services/{service_id}", response_model=ServiceProviderResponse)
def get_service(service_id: str, db: Session = Depends(get_db)):
    provider = db.query(ServiceProvider).filter(ServiceProvider.id == service_id).first()
    if not provider:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service provider not found")
    return ServiceProviderResponse.model_validate(provider)


@router.get("/info", response_model=list[CityInfoResponse])
def list_city_info(
    city: str | None = None,
    category: str | None = None,
    db: Session = Depends(get_db),
):
    city = _require_city(city)
    q = db.query(CityInformation).filter(func.lower(CityInformation.city) == city.lower())
    if category and category.strip():
        q = q.filter(func.lower(CityInformation.category) == category.strip().lower())
    items = q.order_by(CityInformation.category, CityInformation.title).all()
    return [CityInfoResponse.model_validate(x) for x in items]


@router.get("/cities", response_model=list[str])
def list_cities():
    return list(SUPPORTED_CITIES)
