"""Shared API response models."""

from pydantic import BaseModel, ConfigDict, Field

# Re-export ToolError for convenience - this is the standard error format
from staylocal.models.errors import ErrorCode, ToolError

__all__ = [
    "ErrorCode",
    "HealthResponse",
    "ToolError",
]


class HealthResponse(BaseModel):
    """Liveness check response."""

    model_config = ConfigDict(strict=True)

    status: str = Field(default="healthy", examples=["healthy"])
    timestamp: str = Field(
        ...,
        description="Server time (ISO 8601, UTC)",
        examples=["2025-07-15T10:30:00+00:00"],
    )
    service: str = Field(default="staylocal-api")
    version: str = Field(..., examples=["0.1.0"])
