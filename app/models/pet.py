import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Text, JSON
from sqlalchemy.orm import relationship
from app.database import Base


class Pet(Base):
    __tablename__ = "pets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    type = Column(String(50), nullable=False)  # "dog", "cat", ...
    breed = Column(String(100), nullable=True)
    age = Column(Integer, nullable=True)
    age_unit = Column(String(10), nullable=False, default="years")
    gender = Column(String(20), nullable=True)
    weight = Column(Integer, nullable=True)  # kg
    description = Column(Text, nullable=True)
    profile_picture = Column(String(512), nullable=True)
    health_info = Column(JSON, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    owner = relationship("User", back_populates="pets")
    events = relationship(
        "PetEvent",
        back_populates="pet",
        cascade="all, delete-orphan",
        order_by="PetEvent.start_date",
        lazy="select",
    )
