"""
Error Payload Model Tests
-------------------------
Test ErrorResponse serialization.
"""

from datetime import datetime, timezone

from tokenguard.models.error_models import ErrorResponse


class TestErrorResponse:
    """Test the error payload."""

    def test_payload_uses_camel_case(self):
        payload = ErrorResponse(error_code=300, message="Access denied").to_payload()

        assert payload["errorCode"] == 300
        assert payload["message"] == "Access denied"
        assert "error_code" not in payload

    def test_none_fields_omitted(self):
        payload = ErrorResponse(error_code=100).to_payload()

        assert set(payload) == {"errorCode", "time"}

    def test_time_defaults_to_utc_now(self):
        before = datetime.now(timezone.utc)
        response = ErrorResponse(error_code=100)

        assert response.time.tzinfo is not None
        assert response.time >= before

    def test_time_serialized_as_iso_string(self):
        payload = ErrorResponse(
            error_code=100, time=datetime(2026, 1, 15, 9, 0, tzinfo=timezone.utc)
        ).to_payload()

        assert payload["time"].startswith("2026-01-15T09:00:00")

    def test_add_validation_error_keeps_order(self):
        response = ErrorResponse(error_code=200, message="invalid")

        response.add_validation_error("user_id", "Field required")
        response.add_validation_error("password", "String too short")
        payload = response.to_payload()

        assert payload["validErrors"] == [
            {"field": "user_id", "message": "Field required"},
            {"field": "password", "message": "String too short"},
        ]

    def test_populate_by_alias(self):
        response = ErrorResponse(errorCode=304, message="x")

        assert response.error_code == 304
