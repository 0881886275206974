"""Enumeration types for StayLocal data models."""

from enum import Enum


class BookingStatus(str, Enum):
    """Status of a booking."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    """Payment status recorded on a booking."""

    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


class PropertyStatus(str, Enum):
    """Listing status of a property."""

    ACTIVE = "active"
    DRAFT = "draft"
    INACTIVE = "inactive"


class PaymentMethod(str, Enum):
    """Supported (simulated) payment methods."""

    UPI = "upi"
    CARD = "card"
    NETBANKING = "netbanking"


class TransactionStatus(str, Enum):
    """Status of a payment transaction."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
