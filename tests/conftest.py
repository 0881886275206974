"""Pytest configuration and fixtures for StayLocal booking engine tests.

This module provides reusable fixtures for testing:
- Settings and singleton resets
- Sample data fixtures (properties, bookings, users, booking date records)
- Mocked data-service client
"""

import datetime as dt
from typing import Any, Generator
from unittest.mock import MagicMock

import pytest

from staylocal.models import Booking, BookingDate, Property, User


# === Singleton Fixtures ===


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset cached settings, services and the data-service client.

    Ensures every test sees environment changes it makes and gets fresh
    service instances.
    """
    from staylocal.config import reset_settings
    from staylocal.services.data_service import reset_data_service
    from staylocal.utils.logging import clear_correlation_id

    reset_settings()
    reset_data_service()
    yield
    reset_settings()
    reset_data_service()
    clear_correlation_id()


# === Sample Data Fixtures ===


@pytest.fixture
def sample_property() -> Property:
    """A ₹2,500/night listing owned by host 7."""
    return Property(
        id=12,
        host_id=7,
        title="Lakeview Cottage",
        location="Udaipur, Rajasthan",
        price_per_night=2500,
        max_guests=4,
    )


@pytest.fixture
def sample_booking_records() -> list[dict[str, Any]]:
    """Raw booking date records as returned by the data service."""
    return [
        {"checkInDate": "2025-01-10", "checkOutDate": "2025-01-13", "status": "confirmed"},
        {"checkInDate": "2025-01-20", "checkOutDate": "2025-01-22", "status": "pending"},
        {"checkInDate": "2025-01-15", "checkOutDate": "2025-01-18", "status": "cancelled"},
    ]


@pytest.fixture
def sample_booking_dates(sample_booking_records: list[dict[str, Any]]) -> list[BookingDate]:
    """Parsed booking date records."""
    return [BookingDate.model_validate(record) for record in sample_booking_records]


@pytest.fixture
def guest_user() -> User:
    """A guest (non-host) user."""
    return User(
        id=3,
        username="priya",
        email="priya@example.com",
        name="Priya Sharma",
        is_host=False,
    )


@pytest.fixture
def host_user() -> User:
    """The host of sample_property."""
    return User(
        id=7,
        username="arjun",
        email="arjun@example.com",
        name="Arjun Mehta",
        is_host=True,
    )


@pytest.fixture
def sample_booking() -> Booking:
    """Confirmed 3-night booking of sample_property."""
    return Booking(
        id=101,
        property_id=12,
        user_id=3,
        check_in_date=dt.date(2025, 1, 10),
        check_out_date=dt.date(2025, 1, 13),
        number_of_guests=2,
        total_price=10975,
        status="confirmed",
    )


# === Collaborator Fixtures ===


@pytest.fixture
def mock_data_service(
    sample_property: Property,
    sample_booking_dates: list[BookingDate],
    sample_booking: Booking,
) -> MagicMock:
    """Data-service client mock preloaded with the sample data."""
    data_service = MagicMock()
    data_service.get_property.return_value = sample_property
    data_service.get_booking_dates.return_value = sample_booking_dates
    data_service.get_booking.return_value = sample_booking
    return data_service
