"""
Authentication Models
---------------------
Pydantic models for token claims, login/refresh requests and token responses.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class TokenClaims(BaseModel):
    """
    Verified content of a token.

    Only ever built from a token whose signature has been checked.
    The user identifier travels in the JWT ID (jti) claim.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="User identifier carried in the jti claim")
    issued_at: datetime = Field(..., description="Token issued at timestamp")
    expires_at: datetime = Field(..., description="Token expiration timestamp")


class TokenPairResponse(BaseModel):
    """
    Token generation response.

    Returned by login and refresh: a fresh access token and a fresh refresh token.
    """

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")
    token_type: str = Field(default="bearer", description="Token type (always 'bearer')")
    expires_in: int = Field(..., description="Access token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiJ9...",
                "refresh_token": "eyJhbGciOiJIUzI1NiJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
            }
        }
    )


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    user_id: str = Field(..., min_length=1, max_length=64, description="User id")
    password: str = Field(..., min_length=1, description="User's password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"user_id": "u123", "password": "SecurePass123"}}
    )


class RefreshRequest(BaseModel):
    """Request model for exchanging a refresh token for a new token pair."""

    refresh_token: str = Field(..., min_length=1, description="Valid refresh token")


class CurrentUserResponse(BaseModel):
    """Who the presented access token belongs to."""

    user_id: str
    issued_at: datetime
    expires_at: datetime
