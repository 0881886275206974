"""Payment models for simulated transactions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import PaymentMethod, TransactionStatus


class Payment(BaseModel):
    """A payment transaction for a booking.

    Amounts are whole INR. No real gateway is involved.
    """

    model_config = ConfigDict(
        strict=False,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: int
    booking_id: int
    amount: int = Field(..., ge=0, description="Amount in INR")
    currency: str = Field(default="INR", description="Currency code")
    payment_method: PaymentMethod
    upi_id: Optional[str] = None
    status: TransactionStatus
    transaction_id: Optional[str] = None
    created_at: Optional[datetime] = None


class PaymentCreate(BaseModel):
    """Data required to initiate a payment."""

    model_config = ConfigDict(
        # Note: strict=False so enum values coerce from JSON strings
        strict=False,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    booking_id: int
    amount: int = Field(..., gt=0)
    currency: str = "INR"
    payment_method: PaymentMethod
    upi_id: Optional[str] = None


class PaymentResult(BaseModel):
    """Result of a payment operation."""

    model_config = ConfigDict(strict=True)

    success: bool
    status: TransactionStatus
    message: str
    transaction_id: Optional[str] = None
    qr_code_url: Optional[str] = Field(
        default=None,
        description="UPI QR code image URL (UPI payments only)",
    )
