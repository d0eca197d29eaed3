"""
Models Package
--------------
Pydantic models for token claims, auth requests/responses and error payloads.
"""

from tokenguard.models.auth_models import (
    CurrentUserResponse,
    LoginRequest,
    RefreshRequest,
    TokenClaims,
    TokenPairResponse,
)
from tokenguard.models.error_models import ErrorResponse, FieldValidationError
from tokenguard.models.response_models import HealthStatus

__all__ = [
    "CurrentUserResponse",
    "LoginRequest",
    "RefreshRequest",
    "TokenClaims",
    "TokenPairResponse",
    "ErrorResponse",
    "FieldValidationError",
    "HealthStatus",
]
