from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./app.db"

    # JWT
    secret_key: str = "your-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days

    # Frontend URL for CORS
    frontend_url: str = "http://localhost:5173"

    # Perplexity (AI search) for service listings and pet-care content
    perplexity_api_key: str = ""
    perplexity_base_url: str = "https://api.perplexity.ai/chat/completions"
    perplexity_model: str = "sonar"
    perplexity_max_tokens: int = 1000
    perplexity_timeout_seconds: float = 30.0

    # AI content cache: answers younger than this are served without calling Perplexity
    content_freshness_hours: int = 24
    content_cache_backend: str = "database"  # "database" (shared table) or "memory" (single process)

    # Insert sample providers and city info when the tables are empty
    seed_sample_data: bool = True

    log_level: str = "INFO"

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def require_perplexity_api_key(settings: Settings | None = None) -> str:
    """Fail fast at startup when the Perplexity key is missing."""
    settings = settings or get_settings()
    key = (settings.perplexity_api_key or "").strip()
    if not key:
        raise RuntimeError("PERPLEXITY_API_KEY is not configured")
    return key
