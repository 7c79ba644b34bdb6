"""Calendar entries for a pet (vet visits, medication, grooming...)."""
import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from app.database import Base


class PetEventType(str, enum.Enum):
    VET = "vet"
    GROOMING = "grooming"
    MEDICATION = "medication"
    VACCINATION = "vaccination"
    TRAINING = "training"
    EXERCISE = "exercise"
    FEEDING = "feeding"
    OTHER = "other"


class PetEvent(Base):
    __tablename__ = "pet_events"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    pet_id = Column(String(36), ForeignKey("pets.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False, default=PetEventType.OTHER.value)
    description = Column(Text, nullable=True)
    start_date = Column(DateTime, nullable=False, index=True)
    is_all_day = Column(Boolean, nullable=False, default=False)
    reminder = Column(Boolean, nullable=False, default=True)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    pet = relationship("Pet", back_populates="events")
