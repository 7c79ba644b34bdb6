"""Tests for the SQL and in-memory content cache stores."""

from datetime import datetime, timedelta
from unittest.mock import patch

import pytest

from app.models.perplexity_cache import PerplexityPetCareCache, PerplexityServiceCache
from app.repositories.content_cache_repository import (
    CacheRecord,
    InMemoryContentCacheStore,
    pet_care_store,
    service_listing_store,
)

T0 = datetime(2026, 3, 1, 9, 0, 0)


class TestSqlContentCacheStore:
    def test_find_missing_returns_none(self, db) -> None:
        assert service_listing_store(db).find("Dublin", "Veterinarian") is None

    def test_upsert_inserts_record(self, db) -> None:
        store = service_listing_store(db)

        record = store.upsert("Dublin", "Veterinarian", '{"services": []}', T0)

        assert record == CacheRecord("Dublin", "Veterinarian", '{"services": []}', T0)
        row = db.query(PerplexityServiceCache).one()
        assert (row.city, row.category, row.fetched_at) == ("Dublin", "Veterinarian", T0)

    def test_upsert_overwrites_existing_key(self, db) -> None:
        store = service_listing_store(db)
        store.upsert("Dublin", "Veterinarian", "old", T0)

        store.upsert("Dublin", "Veterinarian", "new", T0 + timedelta(hours=25))

        assert store.count("Dublin", "Veterinarian") == 1
        found = store.find("Dublin", "Veterinarian")
        assert found.content == "new"
        assert found.fetched_at == T0 + timedelta(hours=25)

    def test_lost_insert_race_overwrites_winner(self, session_factory) -> None:
        """A concurrent insert of the same key hits the unique constraint; the loser updates that row."""
        winner = session_factory()
        loser = session_factory()
        try:
            service_listing_store(winner).upsert("Dublin", "Veterinarian", "winner", T0)
            store = service_listing_store(loser)
            real_get_row = store._get_row
            misses = [None]

            def stale_read(location, topic):
                if misses:
                    return misses.pop()
                return real_get_row(location, topic)

            with patch.object(store, "_get_row", side_effect=stale_read):
                record = store.upsert("Dublin", "Veterinarian", "loser", T0 + timedelta(minutes=1))

            assert record.content == "loser"
            assert store.count("Dublin", "Veterinarian") == 1
        finally:
            winner.close()
            loser.close()

    def test_pet_care_store_uses_topic_city_key(self, db) -> None:
        store = pet_care_store(db)

        store.upsert("general", "dental care", "{}", T0)
        store.upsert("Calgary", "dental care", "{}", T0)

        assert db.query(PerplexityPetCareCache).count() == 2
        assert store.find("general", "dental care").topic == "dental care"
        assert store.find("Dublin", "dental care") is None

    def test_stores_are_separate_tables(self, db) -> None:
        service_listing_store(db).upsert("Dublin", "all", "{}", T0)

        assert pet_care_store(db).find("Dublin", "all") is None


class TestInMemoryContentCacheStore:
    def test_upsert_and_find(self) -> None:
        store = InMemoryContentCacheStore()

        store.upsert("Dublin", "Veterinarian", "a", T0)
        store.upsert("Dublin", "Veterinarian", "b", T0 + timedelta(hours=1))

        assert len(store) == 1
        assert store.find("Dublin", "Veterinarian").content == "b"
        assert store.find("Dublin", "Groomer") is None

    @pytest.mark.parametrize("key", [("dublin", "Veterinarian"), ("Dublin", "veterinarian")])
    def test_keys_are_case_sensitive(self, key) -> None:
        store = InMemoryContentCacheStore()
        store.upsert("Dublin", "Veterinarian", "a", T0)

        assert store.find(*key) is None
