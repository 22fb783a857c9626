"""Error response schemas for consistent error handling."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned by read-only endpoints such as search."""

    error: str = Field(..., description="Short, generic, human-readable message")

    class Config:
        """Pydantic config."""

        json_schema_extra = {"example": {"error": "Failed to fetch data"}}


class FailureResponse(ErrorResponse):
    """Error body returned by endpoints that acknowledge with ``success``."""

    success: bool = Field(default=False, description="Always false for failures")

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {"success": False, "error": "Item already in favorites!"}
        }


class ValidationErrorDetail(BaseModel):
    """Details for validation errors."""

    field: str = Field(..., description="Field that failed validation")
    message: str = Field(..., description="Validation error message")
    value: Any = Field(None, description="Value that failed validation")


class ValidationErrorResponse(FailureResponse):
    """Failure body extended with per-field validation errors."""

    errors: list[ValidationErrorDetail] = Field(
        default_factory=list, description="List of validation errors"
    )

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "success": False,
                "error": "Request validation failed",
                "errors": [
                    {"field": "body.type", "message": "Input should be 'player' or 'team'", "value": "coach"},
                ],
            }
        }
