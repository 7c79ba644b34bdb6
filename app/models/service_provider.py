import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Text
from app.database import Base


class ServiceProvider(Base):
    __tablename__ = "service_providers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False, index=True)  # "Veterinarian", "Pet Groomer", ...
    address = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    website = Column(String(512), nullable=True)
    opening_hours = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(512), nullable=True)
    rating = Column(Integer, nullable=True)  # tenths of a star: 45 = 4.5
    review_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
