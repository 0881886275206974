"""Host dashboard aggregation."""

import datetime as dt
from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from staylocal.models import (
    Booking,
    BookingStatus,
    HostDashboardSummary,
    Property,
    PropertyStatus,
)
from staylocal.utils.logging import get_logger

if TYPE_CHECKING:
    from .data_service import DataServiceClient

logger = get_logger(__name__)

EARNING_STATUSES = frozenset({BookingStatus.CONFIRMED, BookingStatus.COMPLETED})


def summarize_host(
    host_id: int,
    properties: Iterable[Property],
    bookings: Iterable[Booking],
    today: Optional[dt.date] = None,
) -> HostDashboardSummary:
    """Aggregate a host's listings and bookings.

    Args:
        host_id: Host user ID
        properties: Properties owned by the host
        bookings: Bookings across those properties
        today: Reference date for upcoming check-ins (defaults to today)

    Returns:
        HostDashboardSummary
    """
    today = today or dt.date.today()
    bookings = list(bookings)

    active = sum(1 for p in properties if p.status == PropertyStatus.ACTIVE)
    pending = sum(1 for b in bookings if b.status == BookingStatus.PENDING)
    confirmed = [b for b in bookings if b.status == BookingStatus.CONFIRMED]
    earnings = sum(b.total_price for b in bookings if b.status in EARNING_STATUSES)

    upcoming = sorted(
        (b for b in confirmed if b.check_in_date >= today),
        key=lambda b: (b.check_in_date, b.id),
    )

    return HostDashboardSummary(
        host_id=host_id,
        active_listings=active,
        pending_bookings=pending,
        confirmed_bookings=len(confirmed),
        total_earnings=earnings,
        upcoming_check_ins=upcoming,
    )


class HostDashboardService:
    """Builds host dashboards from the data service."""

    def __init__(self, data_service: "DataServiceClient") -> None:
        self.data_service = data_service

    def get_summary(self, host_id: int, today: Optional[dt.date] = None) -> HostDashboardSummary:
        """Dashboard for one host.

        Bookings come from a single batched query over all of the host's
        properties.
        """
        properties = self.data_service.list_host_properties(host_id)
        bookings = self.data_service.get_bookings_for_host(host_id)
        summary = summarize_host(host_id, properties, bookings, today)
        logger.info(
            "Host %s dashboard: %d listings, %d pending, %d confirmed",
            host_id,
            summary.active_listings,
            summary.pending_bookings,
            summary.confirmed_bookings,
        )
        return summary
