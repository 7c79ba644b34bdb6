"""HTTP tests for /api/perplexity/*."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import app
from app.models.perplexity_cache import PerplexityPetCareCache, PerplexityServiceCache
from app.routers.perplexity import _memory_store
from app.services.content_errors import UpstreamUnavailableError
from tests.conftest import PET_CARE_JSON, SERVICES_JSON


class TestServicesEndpoint:
    def test_missing_city_is_400(self, client, fake_perplexity) -> None:
        res = client.get("/api/perplexity/services")

        assert res.status_code == 400
        assert res.json() == {"error": "City parameter is required", "code": "invalid_key"}
        assert fake_perplexity.calls == []

    def test_blank_city_is_400(self, client) -> None:
        res = client.get("/api/perplexity/services", params={"city": "  "})

        assert res.status_code == 400

    def test_returns_services_and_caches(self, client, fake_perplexity, db) -> None:
        first = client.get("/api/perplexity/services", params={"city": "Dublin", "category": "Veterinarian"})
        second = client.get("/api/perplexity/services", params={"city": "Dublin", "category": "Veterinarian"})

        assert first.status_code == 200
        body = first.json()
        assert body["city"] == "Dublin"
        assert body["category"] == "Veterinarian"
        assert body["from_cache"] is False
        service = body["content"]["services"][0]
        assert service["openingHours"] == "08:30 - 19:00"
        assert service["reviewCount"] == 63
        assert service["animals"] == ["dogs", "cats"]
        assert second.json()["from_cache"] is True
        assert second.json()["content"] == body["content"]
        assert second.json()["timestamp"] == body["timestamp"]
        assert len(fake_perplexity.calls) == 1
        assert db.query(PerplexityServiceCache).count() == 1

    def test_timestamp_is_utc(self, client) -> None:
        res = client.get("/api/perplexity/services", params={"city": "Dublin"})

        stamp = datetime.fromisoformat(res.json()["timestamp"])
        assert stamp.tzinfo is not None
        assert stamp.utcoffset() == timezone.utc.utcoffset(None)

    def test_missing_category_means_all(self, client, fake_perplexity) -> None:
        res = client.get("/api/perplexity/services", params={"city": "Calgary"})

        assert res.status_code == 200
        assert res.json()["category"] == "all"
        assert "specifically focused" not in fake_perplexity.calls[0]["prompt"]

    def test_upstream_failure_is_500(self, client, fake_perplexity) -> None:
        fake_perplexity.answers = [UpstreamUnavailableError("Perplexity API returned status 503")]

        res = client.get("/api/perplexity/services", params={"city": "Dublin"})

        assert res.status_code == 500
        assert res.json() == {
            "error": "Failed to fetch service data",
            "code": "upstream_unavailable",
            "details": "Perplexity API returned status 503",
        }

    def test_unparseable_answer_is_500(self, client, fake_perplexity, db) -> None:
        fake_perplexity.answers = ["Sure! Here are some great vets..."]

        res = client.get("/api/perplexity/services", params={"city": "Dublin"})

        assert res.status_code == 500
        assert res.json()["code"] == "content_parse_error"
        assert db.query(PerplexityServiceCache).count() == 0


class TestPetCareEndpoint:
    def test_missing_topic_is_400(self, client) -> None:
        res = client.get("/api/perplexity/pet-care", params={"city": "Dublin"})

        assert res.status_code == 400
        assert res.json()["error"] == "Topic parameter is required"

    def test_missing_city_means_general(self, client, fake_perplexity, db) -> None:
        fake_perplexity.answers = [PET_CARE_JSON]

        res = client.get("/api/perplexity/pet-care", params={"topic": "flea prevention"})

        assert res.status_code == 200
        body = res.json()
        assert body["topic"] == "flea prevention"
        assert body["city"] == "general"
        assert body["content"]["sections"][0]["title"] == "Core vaccines"
        row = db.query(PerplexityPetCareCache).one()
        assert (row.topic, row.city) == ("flea prevention", "general")

    def test_pet_care_rejects_services_shaped_answer(self, client, fake_perplexity) -> None:
        fake_perplexity.answers = [SERVICES_JSON]

        res = client.get("/api/perplexity/pet-care", params={"topic": "flea prevention", "city": "Dublin"})

        assert res.status_code == 500
        assert res.json()["error"] == "Failed to fetch pet care information"


class TestMemoryBackend:
    def test_memory_backend_does_not_touch_tables(self, client, fake_perplexity, db) -> None:
        _memory_store.cache_clear()
        with patch("app.routers.perplexity.get_settings", return_value=Settings(content_cache_backend="memory")):
            first = client.get("/api/perplexity/services", params={"city": "Amsterdam", "category": "Dog Park"})
            second = client.get("/api/perplexity/services", params={"city": "Amsterdam", "category": "Dog Park"})

        assert first.status_code == 200
        assert second.json()["from_cache"] is True
        assert db.query(PerplexityServiceCache).count() == 0


class TestStartup:
    def test_missing_api_key_prevents_startup(self) -> None:
        with patch("app.main.settings", Settings(perplexity_api_key="", seed_sample_data=False)):
            with pytest.raises(RuntimeError, match="PERPLEXITY_API_KEY"):
                with TestClient(app):
                    pass


class TestOpenApi:
    @pytest.mark.parametrize("path", ["/api/perplexity/services", "/api/perplexity/pet-care"])
    def test_error_bodies_are_documented(self, client, path) -> None:
        responses = client.get("/openapi.json").json()["paths"][path]["get"]["responses"]

        for code in ("400", "500"):
            ref = responses[code]["content"]["application/json"]["schema"]["$ref"]
            assert ref.endswith("/PerplexityErrorResponse")
