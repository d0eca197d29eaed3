"""
Configuration Manager
--------------------
Centralized configuration management using Pydantic Settings.
All application settings are loaded from environment variables with validation.
"""

from typing import List

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# HMAC-SHA256 needs at least 256 bits of key material
MIN_SECRET_KEY_BYTES = 32

SUPPORTED_LOCALES = ["en", "ko"]


class ApplicationSettings(BaseSettings):
    """Main application configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application metadata
    app_name: str = Field(default="TokenGuard", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # FastAPI server configuration
    fastapi_host: str = Field(default="0.0.0.0", description="FastAPI host")
    fastapi_port: int = Field(default=8000, description="FastAPI port")

    # JWT configuration
    jwt_secret_key: SecretStr = Field(
        ..., description="Shared secret the HMAC signing key is derived from"
    )
    jwt_access_token_expire_hours: int = Field(
        default=1, description="Access token lifetime in hours"
    )
    jwt_refresh_token_expire_hours: int = Field(
        default=24, description="Refresh token lifetime in hours"
    )

    # Password hashing configuration
    bcrypt_rounds: int = Field(
        default=12, description="bcrypt work factor for stored passwords"
    )

    # Request filter configuration
    public_paths: List[str] = Field(
        default=[
            "/",
            "/api/v1/health",
            "/api/v1/auth/login",
            "/api/v1/auth/refresh",
            "/api/docs",
            "/api/redoc",
            "/api/openapi.json",
        ],
        description="Paths reachable without an authenticated context",
    )

    # Error response configuration
    error_message_locale: str = Field(
        default="en", description="Default locale for fixed error messages"
    )
    expose_internal_errors: bool = Field(
        default=False,
        description="Surface raw exception messages for unclassified failures",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is acceptable."""
        valid_levels = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v_upper

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret_key(cls, v: SecretStr) -> SecretStr:
        """Reject secrets too short for HMAC-SHA256."""
        if len(v.get_secret_value().encode("utf-8")) < MIN_SECRET_KEY_BYTES:
            raise ValueError(
                f"JWT secret key must be at least {MIN_SECRET_KEY_BYTES} bytes"
            )
        return v

    @field_validator("jwt_access_token_expire_hours", "jwt_refresh_token_expire_hours")
    @classmethod
    def validate_expire_hours(cls, v: int) -> int:
        """Token lifetimes must be positive."""
        if v <= 0:
            raise ValueError("Token lifetime must be a positive number of hours")
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """bcrypt accepts work factors from 4 to 31."""
        if not 4 <= v <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        return v

    @field_validator("error_message_locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Validate the default locale has a message catalog."""
        v_lower = v.lower()
        if v_lower not in SUPPORTED_LOCALES:
            raise ValueError(f"Locale must be one of {SUPPORTED_LOCALES}")
        return v_lower

    @property
    def access_token_expire_seconds(self) -> int:
        """Access token lifetime in seconds."""
        return self.jwt_access_token_expire_hours * 3600

    @property
    def refresh_token_expire_seconds(self) -> int:
        """Refresh token lifetime in seconds."""
        return self.jwt_refresh_token_expire_hours * 3600


# Global settings instance
settings = ApplicationSettings()
