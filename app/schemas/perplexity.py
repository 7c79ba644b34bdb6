from pydantic import BaseModel, Field


# ---- Content returned by Perplexity (validated before caching) ----

class ServiceListing(BaseModel):
    """One pet service provider as generated by Perplexity. camelCase on the wire."""
    name: str
    category: str
    address: str
    phone: str | None = None
    website: str | None = None
    opening_hours: str | None = Field(None, alias="openingHours")
    rating: float | None = Field(None, ge=0, le=5)
    review_count: int | None = Field(None, alias="reviewCount", ge=0)
    image_url: str | None = Field(None, alias="imageUrl")
    description: str | None = None
    animals: list[str]

    class Config:
        populate_by_name = True


class ServiceListingContent(BaseModel):
    services: list[ServiceListing]


class PetCareSection(BaseModel):
    title: str
    body: str


class PetCareResource(BaseModel):
    name: str
    url: str | None = None
    description: str | None = None


class PetCareContent(BaseModel):
    summary: str
    sections: list[PetCareSection]
    resources: list[PetCareResource] = Field(default_factory=list)


# ---- HTTP responses ----

class PerplexityServicesResponse(BaseModel):
    city: str
    category: str
    content: dict
    timestamp: str
    from_cache: bool = False


class PerplexityPetCareResponse(BaseModel):
    topic: str
    city: str
    content: dict
    timestamp: str
    from_cache: bool = False


class PerplexityErrorResponse(BaseModel):
    error: str
    code: str
    details: str | None = None
