from app.models.user import User
from app.models.pet import Pet
from app.models.pet_event import PetEvent, PetEventType
from app.models.service_provider import ServiceProvider
from app.models.city_information import CityInformation
from app.models.perplexity_cache import PerplexityServiceCache, PerplexityPetCareCache

__all__ = [
    "User", "Pet", "PetEvent", "PetEventType", "ServiceProvider", "CityInformation",
    "PerplexityServiceCache", "PerplexityPetCareCache",
]
