"""Unit tests for host dashboard aggregation."""

import datetime as dt
from unittest.mock import MagicMock

import pytest

from staylocal.models import Booking, BookingError, ErrorCode, Property, PropertyStatus
from staylocal.services.host_dashboard import HostDashboardService, summarize_host

TODAY = dt.date(2025, 1, 15)


def make_booking(booking_id: int, status: str, check_in: dt.date, total: int = 10000) -> Booking:
    return Booking(
        id=booking_id,
        property_id=12,
        user_id=3,
        check_in_date=check_in,
        check_out_date=check_in + dt.timedelta(days=2),
        number_of_guests=2,
        total_price=total,
        status=status,
    )


@pytest.fixture
def properties(sample_property: Property) -> list[Property]:
    return [
        sample_property,
        sample_property.model_copy(update={"id": 13}),
        sample_property.model_copy(update={"id": 14, "status": PropertyStatus.DRAFT}),
    ]


@pytest.fixture
def bookings() -> list[Booking]:
    return [
        make_booking(1, "pending", dt.date(2025, 1, 20), total=5000),
        make_booking(2, "confirmed", dt.date(2025, 2, 1), total=12000),
        make_booking(3, "confirmed", TODAY, total=8000),
        make_booking(4, "confirmed", dt.date(2025, 1, 2), total=6000),
        make_booking(5, "completed", dt.date(2024, 12, 1), total=9000),
        make_booking(6, "cancelled", dt.date(2025, 1, 25), total=7000),
    ]


class TestSummarizeHost:
    """Tests for summarize_host()."""

    def test_counts(self, properties: list[Property], bookings: list[Booking]) -> None:
        summary = summarize_host(7, properties, bookings, today=TODAY)

        assert summary.host_id == 7
        assert summary.active_listings == 2
        assert summary.pending_bookings == 1
        assert summary.confirmed_bookings == 3

    def test_earnings_include_confirmed_and_completed(
        self, properties: list[Property], bookings: list[Booking]
    ) -> None:
        summary = summarize_host(7, properties, bookings, today=TODAY)
        assert summary.total_earnings == 12000 + 8000 + 6000 + 9000

    def test_upcoming_check_ins_sorted_from_today(
        self, properties: list[Property], bookings: list[Booking]
    ) -> None:
        summary = summarize_host(7, properties, bookings, today=TODAY)
        assert [b.id for b in summary.upcoming_check_ins] == [3, 2]

    def test_no_properties_or_bookings(self) -> None:
        summary = summarize_host(7, [], [], today=TODAY)

        assert summary.active_listings == 0
        assert summary.total_earnings == 0
        assert summary.upcoming_check_ins == []

    def test_accepts_generators(self, properties: list[Property], bookings: list[Booking]) -> None:
        summary = summarize_host(7, iter(properties), (b for b in bookings), today=TODAY)
        assert summary.confirmed_bookings == 3


class TestHostDashboardService:
    """Tests for HostDashboardService."""

    def test_uses_single_batched_bookings_query(
        self, properties: list[Property], bookings: list[Booking]
    ) -> None:
        data_service = MagicMock()
        data_service.list_host_properties.return_value = properties
        data_service.get_bookings_for_host.return_value = bookings

        summary = HostDashboardService(data_service).get_summary(7, today=TODAY)

        data_service.list_host_properties.assert_called_once_with(7)
        data_service.get_bookings_for_host.assert_called_once_with(7)
        data_service.get_booking_dates.assert_not_called()
        assert summary.pending_bookings == 1

    def test_data_service_errors_propagate(self) -> None:
        data_service = MagicMock()
        data_service.list_host_properties.side_effect = BookingError(
            ErrorCode.DATA_SERVICE_UNAVAILABLE
        )

        with pytest.raises(BookingError):
            HostDashboardService(data_service).get_summary(7)
