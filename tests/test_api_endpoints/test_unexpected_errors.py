"""
Unexpected Error Tests
----------------------
Unhandled exceptions raised inside the full application still come back as
the structured error payload, whatever the debug setting.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from tokenguard.app import create_app
from tokenguard.core.config_manager import ApplicationSettings

TEST_SECRET = "test-secret-key-with-at-least-32-bytes!!"


def _client_for(app_settings: ApplicationSettings, user_store, clock) -> TestClient:
    app = create_app(app_settings, user_store=user_store, clock=clock)

    @app.get("/api/v1/explode")
    async def explode():
        raise RuntimeError("secret internals")

    return TestClient(app, raise_server_exceptions=False)


class TestUnexpectedErrors:
    """Test the catch-all path through create_app."""

    def test_debug_app_returns_json_payload(self, test_app, auth_headers):
        """The shared fixture app runs with debug enabled."""
        assert test_app.state.settings.debug is True

        @test_app.get("/api/v1/explode")
        async def explode():
            raise RuntimeError("secret internals")

        client = TestClient(test_app, raise_server_exceptions=False)
        response = client.get("/api/v1/explode", headers=auth_headers)

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/json")
        data = response.json()
        assert data["errorCode"] == 100
        assert data["message"] == "An internal server error occurred."
        assert "secret internals" not in response.text
        assert "Traceback" not in response.text

    @pytest.mark.parametrize("debug", [True, False])
    def test_generic_message_regardless_of_debug(
        self, debug, user_store, clock, codec
    ):
        app_settings = ApplicationSettings(jwt_secret_key=TEST_SECRET, debug=debug)
        client = _client_for(app_settings, user_store, clock)
        token = codec.generate_access_token("u123")

        response = client.get(
            "/api/v1/explode", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 500
        assert response.json()["errorCode"] == 100
        assert response.json()["message"] == "An internal server error occurred."

    def test_exposed_message_when_enabled(self, user_store, clock, codec):
        app_settings = ApplicationSettings(
            jwt_secret_key=TEST_SECRET, debug=True, expose_internal_errors=True
        )
        client = _client_for(app_settings, user_store, clock)
        token = codec.generate_access_token("u123")

        response = client.get(
            "/api/v1/explode", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 500
        assert response.json()["message"] == "secret internals"

    def test_failure_logged_with_traceback(self, test_app, auth_headers):
        @test_app.get("/api/v1/explode")
        async def explode():
            raise RuntimeError("secret internals")

        client = TestClient(test_app, raise_server_exceptions=False)
        with patch("tokenguard.errors.handlers.logger") as mock_logger:
            client.get("/api/v1/explode", headers=auth_headers)

        exc = mock_logger.opt.call_args[1]["exception"]
        assert isinstance(exc, RuntimeError)
        assert "secret internals" in mock_logger.opt.return_value.error.call_args[0][0]
