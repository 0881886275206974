"""Pydantic models for StayLocal booking data entities."""

from .auth import Credentials, User
from .booking import (
    Booking,
    BookingCreate,
    BookingDate,
    DateInterval,
    RequestedRange,
)
from .enums import (
    BookingStatus,
    PaymentMethod,
    PaymentStatus,
    PropertyStatus,
    TransactionStatus,
)
from .errors import (
    BookingError,
    ErrorCode,
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    InvalidRangeError,
    ToolError,
)
from .host import HostDashboardSummary
from .payment import Payment, PaymentCreate, PaymentResult
from .pricing import PriceBreakdown
from .property import Property, PropertyFilter

__all__ = [
    # Enums
    "BookingStatus",
    "PaymentMethod",
    "PaymentStatus",
    "PropertyStatus",
    "TransactionStatus",
    # Auth
    "Credentials",
    "User",
    # Booking
    "Booking",
    "BookingCreate",
    "BookingDate",
    "DateInterval",
    "RequestedRange",
    # Pricing
    "PriceBreakdown",
    # Property
    "Property",
    "PropertyFilter",
    # Payment
    "Payment",
    "PaymentCreate",
    "PaymentResult",
    # Host
    "HostDashboardSummary",
    # Errors
    "BookingError",
    "ErrorCode",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "InvalidRangeError",
    "ToolError",
]
