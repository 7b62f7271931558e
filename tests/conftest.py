"""Root pytest configuration.

Test Structure:
    tests/
    ├── holdem/                # API and CLI tests
    │   └── integration/
    │       ├── api/
    │       └── cli/
    ├── holdem_config/         # Settings tests
    │   └── unit/
    └── holdem_identity/       # Identity domain tests (users, auth)
        ├── unit/
        └── integration/

Settings are never read from a developer's config/.env files here. Every
test runs with a fixed signing secret and the in-memory store unless a
fixture overrides it.
"""

import pytest

from holdem_config import clear_settings_cache

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture(autouse=True)
def configure_app_settings(monkeypatch):
    """Provide a clean, deterministic environment for settings."""
    monkeypatch.setenv("JWT_SECRET_KEY", TEST_JWT_SECRET)
    monkeypatch.setenv("DATABASE_URL", "memory://")
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")
    clear_settings_cache()
    yield
    clear_settings_cache()
