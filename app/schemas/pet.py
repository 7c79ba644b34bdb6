from datetime import datetime
from typing import Any
from pydantic import BaseModel, Field
from app.models.pet_event import PetEventType


# ---- Pets ----

class PetCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    type: str = Field(..., min_length=1, max_length=50)
    breed: str | None = None
    age: int | None = Field(None, ge=0)
    age_unit: str = "years"
    gender: str | None = None
    weight: int | None = Field(None, ge=0)
    description: str | None = None
    profile_picture: str | None = None
    health_info: dict[str, Any] | None = None


class PetUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    type: str | None = Field(None, min_length=1, max_length=50)
    breed: str | None = None
    age: int | None = Field(None, ge=0)
    age_unit: str | None = None
    gender: str | None = None
    weight: int | None = Field(None, ge=0)
    description: str | None = None
    profile_picture: str | None = None
    health_info: dict[str, Any] | None = None


class PetResponse(BaseModel):
    id: str
    user_id: str
    name: str
    type: str
    breed: str | None
    age: int | None
    age_unit: str
    gender: str | None
    weight: int | None
    description: str | None
    profile_picture: str | None
    health_info: dict[str, Any] | None
    created_at: datetime

    class Config:
        from_attributes = True


# ---- Calendar events ----

class PetEventCreate(BaseModel):
    pet_id: str
    title: str = Field(..., min_length=1, max_length=255)
    type: PetEventType = PetEventType.OTHER
    description: str | None = None
    start_date: datetime
    is_all_day: bool = False
    reminder: bool = True


class PetEventUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    type: PetEventType | None = None
    description: str | None = None
    start_date: datetime | None = None
    is_all_day: bool | None = None
    reminder: bool | None = None
    completed: bool | None = None


class PetEventResponse(BaseModel):
    id: str
    pet_id: str
    title: str
    type: str
    description: str | None
    start_date: datetime
    is_all_day: bool
    reminder: bool
    completed: bool
    created_at: datetime

    class Config:
        from_attributes = True
