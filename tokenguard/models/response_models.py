"""
Response Models
--------------
Pydantic models for non-auth API responses.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Health(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class HealthStatus(BaseModel):
    """
    Health check response schema.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2026-10-13T10:30:00Z",
                "version": "1.0.0",
            }
        }
    )

    status: str = Field(..., description="Token service health status")
    version: Optional[str] = Field(default=None, description="Application version")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp",
    )

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str) -> str:
        valid_values = [member.value for member in Health]
        if value not in valid_values:
            raise ValueError(f"Status must be one of: {', '.join(valid_values)}")
        return value
