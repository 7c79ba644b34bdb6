"""Pet calendar: vet visits, medication, grooming and other dated events per pet."""
from datetime import date, datetime, time
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from app.auth import get_current_user
from app.database import get_db
from app.models.pet import Pet
from app.models.pet_event import PetEvent
from app.models.user import User
from app.routers.pets import get_owned_pet
from app.schemas.pet import PetEventCreate, PetEventUpdate, PetEventResponse

router = APIRouter(prefix="/api/pets/events", tags=["pet-events"])


def _get_owned_event(db: Session, event_id: str, user: User) -> PetEvent:
    row = (
        db.query(PetEvent, Pet)
        .join(Pet, PetEvent.pet_id == Pet.id)
        .filter(PetEvent.id == event_id)
        .first()
    )
    if not row:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    event, pet = row
    if pet.user_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You don't have permission to access this event")
    return event


@router.get("", response_model=list[PetEventResponse])
def list_events(
    pet_id: str | None = None,
    start: date | None = None,
    end: date | None = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Caller's events, optionally for one pet and within [start, end] (inclusive days)."""
    q = (
        db.query(PetEvent)
        .join(Pet, PetEvent.pet_id == Pet.id)
        .filter(Pet.user_id == user.id)
    )
    if pet_id:
        q = q.filter(PetEvent.pet_id == pet_id)
    if start:
        q = q.filter(PetEvent.start_date >= datetime.combine(start, time.min))
    if end:
        q = q.filter(PetEvent.start_date <= datetime.combine(end, time.max))
    events = q.order_by(PetEvent.start_date).all()
    return [PetEventResponse.model_validate(e) for e in events]


@router.post("", response_model=PetEventResponse, status_code=status.HTTP_201_CREATED)
def create_event(body: PetEventCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    get_owned_pet(db, body.pet_id, user)
    data = body.model_dump()
    data["type"] = body.type.value
    event = PetEvent(**data)
    db.add(event)
    db.commit()
    db.refresh(event)
    return PetEventResponse.model_validate(event)


@router.patch("/{event_id}", response_model=PetEventResponse)
def update_event(
    event_id: str,
    body: PetEventUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    event = _get_owned_event(db, event_id, user)
    for field, value in body.model_dump(exclude_unset=True).items():
        if value is None and field in ("title", "type", "start_date", "is_all_day", "reminder", "completed"):
            continue
        if field == "type":
            value = value.value
        setattr(event, field, value)
    db.commit()
    db.refresh(event)
    return PetEventResponse.model_validate(event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    event = _get_owned_event(db, event_id, user)
    db.delete(event)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
