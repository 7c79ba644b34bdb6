import json
import os

# Settings are read once (lru_cache); configure the environment before importing the app.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PERPLEXITY_API_KEY"] = "test-key"
os.environ["SEED_SAMPLE_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, build_engine, get_db
from app.main import app
from app.services.content_errors import UpstreamUnavailableError
from app.services.perplexity_client import get_perplexity_client


SERVICES_JSON = json.dumps({
    "services": [
        {
            "name": "Dublin Veterinary Hospital",
            "category": "Veterinarian",
            "address": "O'Connell Street 45, D01",
            "phone": "+353 1 234 5678",
            "openingHours": "08:30 - 19:00",
            "rating": 4.7,
            "reviewCount": 63,
            "animals": ["dogs", "cats"],
        }
    ]
})

PET_CARE_JSON = json.dumps({
    "summary": "Vaccinate puppies from 8 weeks.",
    "sections": [{"title": "Core vaccines", "body": "Distemper, parvovirus, adenovirus."}],
    "resources": [{"name": "Local vet", "url": "https://example.org"}],
})


class FakePerplexityClient:
    """Stands in for PerplexityClient: returns queued answers (or raises queued errors) and records prompts."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls: list[dict] = []

    async def query(self, prompt, *, json_schema=None):
        self.calls.append({"prompt": prompt, "json_schema": json_schema})
        if not self.answers:
            raise UpstreamUnavailableError("no answer queued")
        answer = self.answers.pop(0) if len(self.answers) > 1 else self.answers[0]
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def fake_perplexity():
    return FakePerplexityClient(SERVICES_JSON)


@pytest.fixture
def client(session_factory, fake_perplexity):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_perplexity_client] = lambda: fake_perplexity
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, username="anna", email="anna@example.com", location="Amsterdam", password="secret1"):
    res = client.post(
        "/api/auth/register",
        json={
            "username": username,
            "password": password,
            "full_name": username.title(),
            "email": email,
            "location": location,
        },
    )
    assert res.status_code == 201, res.text
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register(client)
