"""Sample directory data inserted on startup when the tables are empty."""
import logging
from sqlalchemy.orm import Session
from app.models.city_information import CityInformation
from app.models.service_provider import ServiceProvider

logger = logging.getLogger(__name__)

SUPPORTED_CITIES = ("Amsterdam", "Dublin", "Calgary")

SAMPLE_PROVIDERS = [
    {
        "name": "Amsterdam Pet Clinic",
        "category": "Veterinarian",
        "address": "Herengracht 123, 1015",
        "city": "Amsterdam",
        "phone": "+31 20 123 4567",
        "opening_hours": "09:00 - 18:00",
        "description": "Full-service veterinary clinic in central Amsterdam",
        "rating": 45,
        "review_count": 48,
        "image_url": "https://images.unsplash.com/photo-1595776613215-fe04b78de7d0",
    },
    {
        "name": "Pawsome Grooming",
        "category": "Pet Groomer",
        "address": "Prinsengracht 456, 1016",
        "city": "Amsterdam",
        "phone": "+31 20 456 7890",
        "opening_hours": "10:00 - 17:00",
        "description": "Professional grooming services for dogs and cats",
        "rating": 40,
        "review_count": 32,
        "image_url": "https://images.unsplash.com/photo-1581888227599-779811939961",
    },
    {
        "name": "Vondelpark Dog Run",
        "category": "Dog Park",
        "address": "Vondelpark, 1071",
        "city": "Amsterdam",
        "opening_hours": "Open 24 hours",
        "description": "Large off-leash area for dogs in Amsterdam's famous park",
        "rating": 49,
        "review_count": 87,
        "image_url": "https://images.unsplash.com/photo-1541599484646-3a8705171833",
    },
    {
        "name": "Dublin Veterinary Hospital",
        "category": "Veterinarian",
        "address": "O'Connell Street 45, D01",
        "city": "Dublin",
        "phone": "+353 1 234 5678",
        "opening_hours": "08:30 - 19:00",
        "description": "Comprehensive veterinary care for all pets",
        "rating": 47,
        "review_count": 63,
        "image_url": "https://images.unsplash.com/photo-1532938911079-1b06ac7ceec7",
    },
    {
        "name": "Calgary Pet Supply",
        "category": "Pet Shop",
        "address": "17 Avenue SW 450, T2S",
        "city": "Calgary",
        "phone": "+1 403 123 4567",
        "opening_hours": "10:00 - 20:00",
        "description": "Premium pet food and supplies for all animals",
        "rating": 43,
        "review_count": 51,
        "image_url": "https://images.unsplash.com/photo-1583337130417-3346a1be7dee",
    },
]

SAMPLE_CITY_INFO = [
    {
        "city": "Amsterdam",
        "category": "Pet Regulations",
        "title": "Dog Leash Laws in Amsterdam",
        "content": (
            "Dogs must be kept on a leash in most public areas of Amsterdam, including streets and parks. "
            "There are designated off-leash areas in some parks like Vondelpark."
        ),
        "source": "City of Amsterdam Official Website",
        "image_url": "https://images.unsplash.com/photo-1625489238848-71d0df1f2899",
    },
    {
        "city": "Amsterdam",
        "category": "Pet-Friendly Spaces",
        "title": "Amsterdam Dog Parks Guide",
        "content": (
            "Amsterdam has several dog-friendly parks with designated off-leash areas. "
            "The most popular include Vondelpark, Westerpark, and Amstelpark."
        ),
        "source": "Amsterdam Tourist Board",
        "image_url": "https://images.unsplash.com/photo-1625489238848-71d0df1f2899",
    },
    {
        "city": "Dublin",
        "category": "Pet Healthcare",
        "title": "Veterinary Services in Dublin",
        "content": (
            "Dublin offers numerous veterinary clinics and emergency pet hospitals throughout the city. "
            "Most are open Monday through Saturday with emergency services available 24/7."
        ),
        "source": "Dublin Pet Owners Association",
        "image_url": "https://images.unsplash.com/photo-1584863231364-2edc166de576",
    },
    {
        "city": "Calgary",
        "category": "Pet Regulations",
        "title": "Pet Licensing in Calgary",
        "content": (
            "All dogs and cats over 3 months of age must be licensed in Calgary. Licenses can be obtained "
            "online through the City of Calgary website or at any registry office."
        ),
        "source": "City of Calgary Animal Services",
        "image_url": "https://images.unsplash.com/photo-1548199973-03cce0bbc87b",
    },
]


def seed_directory(db: Session) -> int:
    """Insert sample providers / city info into empty tables. Returns number of rows added."""
    added = 0
    if db.query(ServiceProvider.id).first() is None:
        db.add_all([ServiceProvider(**p) for p in SAMPLE_PROVIDERS])
        added += len(SAMPLE_PROVIDERS)
    if db.query(CityInformation.id).first() is None:
        db.add_all([CityInformation(**c) for c in SAMPLE_CITY_INFO])
        added += len(SAMPLE_CITY_INFO)
    if added:
        db.commit()
        logger.info("Seeded %d sample directory rows", added)
    return added
