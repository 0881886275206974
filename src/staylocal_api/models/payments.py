"""API models for payment endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class PaymentStatusResponse(BaseModel):
    """Latest payment status for a booking."""

    model_config = ConfigDict(strict=True)

    booking_id: int
    status: str = Field(
        ...,
        description='Transaction status, or "unknown" if it cannot be determined',
        examples=["success", "pending", "unknown"],
    )
