"""
Error Models
------------
The single structured payload returned for every failed request.

Serialized with camelCase keys; fields that are None are left out, so
validErrors only appears on request validation failures.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class FieldValidationError(BaseModel):
    """One rejected request field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error response body: code, message, time and optional field errors."""

    model_config = ConfigDict(populate_by_name=True)

    error_code: int = Field(..., alias="errorCode")
    message: Optional[str] = None
    time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    valid_errors: Optional[List[FieldValidationError]] = Field(
        default=None, alias="validErrors"
    )

    def add_validation_error(self, field: str, message: str) -> None:
        """Append a field error, creating the list on first use."""
        if self.valid_errors is None:
            self.valid_errors = []
        self.valid_errors.append(FieldValidationError(field=field, message=message))

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys and null fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
