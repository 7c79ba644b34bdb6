import logging
import sys
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from app.config import get_settings, require_perplexity_api_key
from app.database import SessionLocal
from app.routers import auth, users, pets, pet_events, directory, perplexity
from app.seed import seed_directory

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Missing Perplexity key is fatal at startup, not per request
    require_perplexity_api_key(settings)
    if settings.seed_sample_data:
        db = SessionLocal()
        try:
            seed_directory(db)
        except SQLAlchemyError as e:
            logger.error("Sample data not seeded (run `alembic upgrade head` first?): %s", e)
        finally:
            db.close()
    logger.info("PawCity API started (content cache: %s)", settings.content_cache_backend)
    yield


app = FastAPI(title="PawCity API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(users.router)
# Events before pets so /api/pets/events is not captured by /api/pets/{pet_id}
app.include_router(pet_events.router)
app.include_router(pets.router)
app.include_router(directory.router)
app.include_router(perplexity.router)


@app.get("/")
def root():
    return {"message": "PawCity API", "docs": "/docs"}
