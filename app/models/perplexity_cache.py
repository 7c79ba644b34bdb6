"""
Cached Perplexity answers so repeated lookups for the same city/topic do not call the API again.
One row per (city, category) for service listings and per (topic, city) for pet-care content;
the unique constraints make concurrent inserts for the same key collapse into one row.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, UniqueConstraint
from app.database import Base


class PerplexityServiceCache(Base):
    __tablename__ = "perplexity_services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    city = Column(String(100), nullable=False)
    category = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)  # validated JSON: {"services": [...]}
    fetched_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("city", "category", name="perplexity_services_city_category_unique"),
    )


class PerplexityPetCareCache(Base):
    __tablename__ = "perplexity_pet_care"

    id = Column(Integer, primary_key=True, autoincrement=True)
    topic = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)  # validated JSON: {"summary", "sections", "resources"}
    fetched_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("topic", "city", name="perplexity_pet_care_topic_city_unique"),
    )
