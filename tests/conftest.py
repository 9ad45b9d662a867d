# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - In-memory SQLite database shared across one test via StaticPool
# - TestClient with get_db overridden, plus an authenticated admin client
# - Builders for valid brand/mobile payloads
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately.
# Empty values are ignored by Settings, so the optional keys stay unset.

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["OPENAI_API_KEY"] = ""
os.environ["RAPIDAPI_KEY"] = ""
os.environ["MOBILEAPI_KEY"] = ""
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "true"
os.environ["SECRET_KEY"] = "test-secret-key-for-admin-jwt"
os.environ["IMPORT_REQUEST_DELAY"] = "0"

from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.auth import create_access_token
from app.dependencies import get_db
from app.main import app
from lib.database import init_db


# =============================================================================
# Database
# =============================================================================

@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# HTTP Clients
# =============================================================================

@pytest.fixture
def client(db):
    """TestClient whose routes use the test session. Lifespan is not run."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_token():
    return create_access_token("admin")


@pytest.fixture
def admin_client(client, admin_token):
    """Same client, authenticated with a Bearer token."""
    client.headers["Authorization"] = f"Bearer {admin_token}"
    return client


# =============================================================================
# Payload Builders
# =============================================================================

def make_brand(**overrides: Any) -> dict[str, Any]:
    data = {
        "name": "Samsung",
        "slug": "samsung",
        "logo": "S",
        "description": "South Korean electronics company",
    }
    data.update(overrides)
    return data


def make_mobile(**overrides: Any) -> dict[str, Any]:
    data = {
        "slug": "galaxy-s24-ultra",
        "name": "Samsung Galaxy S24 Ultra",
        "brand": "samsung",
        "model": "Galaxy S24 Ultra",
        "imageUrl": "https://example.com/s24.jpg",
        "releaseDate": "2024-01-17",
        "price": "Rs 449,999",
        "shortSpecs": {
            "ram": "12GB",
            "storage": "256GB",
            "camera": "200MP",
            "battery": "5000mAh",
        },
        "carouselImages": ["https://example.com/s24-1.jpg"],
        "specifications": [
            {
                "category": "Display",
                "specs": [
                    {"feature": "Screen Size", "value": "6.8 inches"},
                    {"feature": "Resolution", "value": "1440 x 3120"},
                ],
            },
        ],
    }
    data.update(overrides)
    return data


@pytest.fixture
def brand_payload():
    return make_brand()


@pytest.fixture
def mobile_payload():
    return make_mobile()
