"""
Pytest configuration for TokenGuard tests.
Sets up the Python path and common test fixtures.
"""

import os
import sys
from pathlib import Path
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

# Add the project root to Python path for all tests
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set up test environment variables
TEST_SECRET = "test-secret-key-with-at-least-32-bytes!!"
OTHER_SECRET = "another-secret-key-also-32-bytes-long!!!"

os.environ.setdefault("JWT_SECRET_KEY", TEST_SECRET)
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

TEST_USER_ID = "u123"
TEST_PASSWORD = "SecurePass123"


class FakeClock:
    """Manually advanced time source for expiry tests."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


# ============================================================================
# TOKEN FIXTURES
# ============================================================================


@pytest.fixture
def clock():
    """Clock frozen at a whole second so iat + validity is exact."""
    return FakeClock(datetime(2026, 1, 15, 9, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def signing_key():
    from tokenguard.auth.signing_key import SigningKey

    return SigningKey.from_secret(TEST_SECRET)


@pytest.fixture
def codec(signing_key, clock):
    from tokenguard.auth.jwt_utils import TokenCodec

    return TokenCodec(signing_key, clock=clock)


@pytest.fixture
def validator(codec):
    from tokenguard.auth.token_validator import TokenValidator

    return TokenValidator(codec)


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================


@pytest.fixture
def test_settings():
    from tokenguard.core.config_manager import ApplicationSettings

    return ApplicationSettings(jwt_secret_key=TEST_SECRET, debug=True)


@pytest.fixture
def user_store():
    """In-memory store holding one known user."""
    from tokenguard.services.user_store import InMemoryUserStore
    from tokenguard.utils.password_hashing import PasswordHasher

    store = InMemoryUserStore(PasswordHasher(rounds=4))
    store.add_user(TEST_USER_ID, TEST_PASSWORD)
    return store


@pytest.fixture
def test_app(test_settings, user_store, clock):
    from tokenguard.app import create_app

    return create_app(test_settings, user_store=user_store, clock=clock)


@pytest.fixture
def client(test_app):
    """
    Test client that returns 500 responses instead of re-raising.

    Starlette re-raises unhandled exceptions after the catch-all handler has
    produced its response; the payload is what these tests inspect.
    """
    return TestClient(test_app, raise_server_exceptions=False)


@pytest.fixture
def access_token(test_app):
    return test_app.state.token_codec.generate_access_token(TEST_USER_ID)


@pytest.fixture
def auth_headers(access_token):
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def other_codec(clock):
    """Codec signing with a different key than `codec`."""
    from tokenguard.auth.jwt_utils import TokenCodec
    from tokenguard.auth.signing_key import SigningKey

    return TokenCodec(SigningKey.from_secret(OTHER_SECRET), clock=clock)
