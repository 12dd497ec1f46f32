"""
Shared fixtures.

Every test gets a fresh application backed by its own in-memory SQLite
database, so no state leaks between tests.
"""
import os

# seshop.main builds a module-level app from the environment on import.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

from seshop.core.auth import create_access_token
from seshop.core.config import Settings
from seshop.main import create_app

TEST_SECRET = "component-test-secret"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET=TEST_SECRET,
        _env_file=None,
    )


@pytest.fixture
def test_client(settings: Settings):
    app = create_app(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def product_payload() -> dict:
    return {
        "name": "Macbook Pro",
        "price": 2000,
        "description": "A great laptop",
        "image": "https://source.unsplash.com/random/100x100/?macbook",
        "category": "Electronics",
    }


@pytest.fixture
def cart_payload() -> dict:
    return {
        "productId": "60c5a1b2c3d4e5f6a7b8c9d0",
        "name": "Macbook Pro",
        "email": "worapakorn@gmail.com",
        "image": "https://source.unsplash.com/random/100x100/?macbook",
        "price": 2000,
        "quantity": 5,
    }


@pytest.fixture
def admin_user(test_client: TestClient) -> dict:
    response = test_client.post(
        "/users",
        json={"name": "Shop Admin", "email": "admin@seshop.dev", "role": "admin"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def regular_user(test_client: TestClient) -> dict:
    response = test_client.post(
        "/users",
        json={"name": "Regular Customer", "email": "customer@seshop.dev"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(settings: Settings):
    """Factory: bearer headers for a given email."""

    def _headers(email: str) -> dict:
        token = create_access_token(email, settings)
        return {"Authorization": f"Bearer {token}"}

    return _headers
