"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from holdem.presentation.api.app import API_V1_PREFIX, create_app
from holdem_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture(params=["memory", "sqlite"])
def api_settings(request, tmp_path) -> Settings:
    """Test API settings, once per user store backend."""
    if request.param == "memory":
        database_url = "memory://"
    else:
        database_url = f"sqlite+aiosqlite:///{tmp_path / 'api.db'}"

    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url=database_url,
        password_hash_rounds=4,  # Low rounds for fast tests
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def test_client(api_settings):
    """Create a test client; entering it runs the app lifespan."""
    with TestClient(create_app(settings=api_settings)) as client:
        yield client


@pytest.fixture
def user_url(api_v1_prefix) -> str:
    return f"{api_v1_prefix}/user"


@pytest.fixture
def charmander(test_client, user_url) -> dict:
    """Register charmander and return its sign up data."""
    data = {
        "id": "charmander@pokemon.com",
        "pwd": "Charrr",
        "name": "Charmander",
        "dateOfBirth": "1996-02-27",
    }
    response = test_client.put(f"{user_url}/signup", json=data)
    assert response.status_code == 200
    return data


@pytest.fixture
def charizard(test_client, user_url) -> dict:
    """Register charizard and return its sign up data."""
    data = {
        "id": "charizard@pokemon.com",
        "pwd": "Roarrr",
        "name": "Charizard",
        "dateOfBirth": "1995-08-30",
    }
    response = test_client.put(f"{user_url}/signup", json=data)
    assert response.status_code == 200
    return data


@pytest.fixture
def auth_headers(test_client, user_url, charizard) -> dict:
    """Get auth headers for a signed in user."""
    response = test_client.post(
        f"{user_url}/signin",
        json={"id": charizard["id"], "pwd": charizard["pwd"]},
    )
    assert response.status_code == 200

    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def jwt_secret(api_settings) -> str:
    """The signing secret the app under test verifies with."""
    return api_settings.jwt_secret_key.get_secret_value()
