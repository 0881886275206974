"""Booking models: occupied intervals, wire records and requested ranges."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .enums import BookingStatus, PaymentStatus


class DateInterval(BaseModel):
    """One reservation's occupied span. The end date is exclusive.

    Intervals with start >= end are tolerated here and occupy no dates;
    records carrying them are rejected when parsed from the data service.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    start: date
    end: date

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end


class BookingDate(BaseModel):
    """Booking date record as returned by the data service.

    Wire format: {"checkInDate": "...", "checkOutDate": "...", "status": "..."}
    """

    model_config = ConfigDict(
        # Note: strict=False allows string-to-date coercion from JSON
        strict=False,
        frozen=True,
        populate_by_name=True,
    )

    check_in_date: date = Field(..., alias="checkInDate")
    check_out_date: date = Field(..., alias="checkOutDate")
    status: str = Field(default=BookingStatus.CONFIRMED.value)

    @model_validator(mode="after")
    def check_order(self) -> "BookingDate":
        if self.check_out_date <= self.check_in_date:
            raise ValueError("checkOutDate must be after checkInDate")
        return self

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED.value

    def to_interval(self) -> DateInterval:
        """Return the occupied span of this booking."""
        return DateInterval(start=self.check_in_date, end=self.check_out_date)


class RequestedRange(BaseModel):
    """User-supplied date range. Either end may be absent."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_date: Optional[date] = Field(default=None, alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")

    @property
    def is_complete(self) -> bool:
        """Both ends present and check-out after check-in."""
        return (
            self.from_date is not None
            and self.to_date is not None
            and self.to_date > self.from_date
        )

    @property
    def nights(self) -> Optional[int]:
        if not self.is_complete:
            return None
        return (self.to_date - self.from_date).days  # type: ignore[operator]


class Booking(BaseModel):
    """A booking as stored by the data service."""

    model_config = ConfigDict(
        strict=False,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: int
    property_id: int
    user_id: int
    check_in_date: date
    check_out_date: date
    number_of_guests: int = Field(..., ge=1)
    total_price: int = Field(..., ge=0, description="Total price in INR")
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    created_at: Optional[datetime] = None

    @property
    def nights(self) -> int:
        return (self.check_out_date - self.check_in_date).days


class BookingCreate(BaseModel):
    """Payload posted to the data service to create a booking."""

    model_config = ConfigDict(
        strict=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    property_id: int
    user_id: int
    check_in_date: date
    check_out_date: date
    number_of_guests: int = Field(..., ge=1)
    total_price: int = Field(..., ge=0)
