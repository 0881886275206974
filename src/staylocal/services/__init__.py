"""Booking engine services for StayLocal."""

from .availability import (
    BlockedDateSet,
    blocked_dates_from_records,
    build_blocked_date_set,
    ensure_range_available,
    find_conflicts,
    get_dates_in_range,
    intervals_from_records,
    is_range_available,
)
from .booking import (
    BookingDraft,
    BookingService,
    build_booking_request,
    select_dates,
    set_guests,
    start_draft,
)
from .data_service import DataServiceClient, get_data_service, reset_data_service
from .date_range import parse_date_text, parse_requested_range
from .host_dashboard import HostDashboardService, summarize_host
from .payment_service import PaymentService, generate_qr_code_url, validate_upi_id
from .pricing import (
    PricingService,
    calculate_service_fee,
    compute_nights,
    compute_price_breakdown,
    quote_stay,
    round_half_up,
    validate_stay_range,
)
from .search import PropertySearchService, build_property_filter
from .session import AuthSession, HttpIdentityProvider, IdentityProvider, require_session

__all__ = [
    # Availability
    "BlockedDateSet",
    "blocked_dates_from_records",
    "build_blocked_date_set",
    "ensure_range_available",
    "find_conflicts",
    "get_dates_in_range",
    "intervals_from_records",
    "is_range_available",
    # Booking
    "BookingDraft",
    "BookingService",
    "build_booking_request",
    "select_dates",
    "set_guests",
    "start_draft",
    # Data service
    "DataServiceClient",
    "get_data_service",
    "reset_data_service",
    # Date range
    "parse_date_text",
    "parse_requested_range",
    # Host dashboard
    "HostDashboardService",
    "summarize_host",
    # Payments
    "PaymentService",
    "generate_qr_code_url",
    "validate_upi_id",
    # Pricing
    "PricingService",
    "calculate_service_fee",
    "compute_nights",
    "compute_price_breakdown",
    "quote_stay",
    "round_half_up",
    "validate_stay_range",
    # Search
    "PropertySearchService",
    "build_property_filter",
    # Session
    "AuthSession",
    "HttpIdentityProvider",
    "IdentityProvider",
    "require_session",
]
