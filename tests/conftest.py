from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from catalog.api.main import create_app
from catalog.shared.config import AppConfig, CatalogConfig, Config
from catalog.shared.repositories import ContentRepository
from catalog.shared.seed import SAMPLE_CONTENTS, seed_repository


class FakeClock:
    """Deterministic clock: every call moves one second forward"""

    def __init__(self, start=datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


def _payload(**overrides):
    """A minimal valid create payload"""
    payload = {
        "title": "Test Drama",
        "description": "A drama used in tests.",
        "genre": ["Drama"],
        "year": "2020",
        "country": "India",
        "rating": "8.0",
        "image_url": "https://example.com/image.jpg",
        "type": "drama",
        "language": "Hindi",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repository(clock):
    """An empty repository"""
    return ContentRepository(clock=clock)


@pytest.fixture
def seeded_repository(repository):
    """Repository holding the sample catalog"""
    seed_repository(repository, SAMPLE_CONTENTS)
    return repository


@pytest.fixture
def settings():
    return Config(
        app=AppConfig(version="9.9.9"),
        catalog=CatalogConfig(seed_sample_data=False, featured_min_rating=8.0, featured_limit=6, top_rated_limit=10),
    )


@pytest.fixture
def client(settings, seeded_repository):
    """FastAPI test client bound to a fresh app and seeded repository."""
    app = create_app(settings=settings, repository=seeded_repository)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_payload():
    """Factory for valid create payloads; keyword arguments override fields"""
    return _payload
