from datetime import datetime
from pydantic import BaseModel


class ServiceProviderResponse(BaseModel):
    id: str
    name: str
    category: str
    address: str
    city: str
    phone: str | None
    website: str | None
    opening_hours: str | None
    description: str | None
    image_url: str | None
    rating: int | None  # tenths of a star
    review_count: int
    created_at: datetime

    class Config:
        from_attributes = True


class CityInfoResponse(BaseModel):
    id: str
    city: str
    category: str
    title: str
    content: str
    image_url: str | None
    source: str | None
    updated_at: datetime

    class Config:
        from_attributes = True
