"""Pricing engine for stay price breakdowns.

Converts a nightly rate and a check-in/check-out pair into a
PriceBreakdown:

    nights      = check_out - check_in (calendar days)
    subtotal    = nightly_rate * nights
    service_fee = override if given, else round_half_up(subtotal * 13%)
    total       = subtotal + cleaning_fee + service_fee

All amounts are whole INR. Rounding is half-up, never Python's
half-even round().
"""

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from staylocal.models import BookingError, ErrorCode, InvalidRangeError, PriceBreakdown
from staylocal.utils.logging import get_logger

if TYPE_CHECKING:
    from staylocal.config import Settings

logger = get_logger(__name__)

DEFAULT_CLEANING_FEE = 2500
SERVICE_FEE_RATE = Decimal("0.13")


def _as_date(value: dt.date) -> dt.date:
    # datetime is a date subclass; keep only the calendar day
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def round_half_up(value: Decimal | int | float) -> int:
    """Round to the nearest whole unit, halves away from zero.

    Args:
        value: Amount to round

    Returns:
        Rounded integer amount
    """
    if isinstance(value, float):
        value = Decimal(str(value))
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_nights(check_in: dt.date, check_out: dt.date) -> int:
    """Whole calendar days between check-in and check-out.

    The ordering of the two dates is not checked: the result is zero or
    negative when check_out does not follow check_in.
    """
    return (_as_date(check_out) - _as_date(check_in)).days


def calculate_service_fee(subtotal: int, rate: Decimal = SERVICE_FEE_RATE) -> int:
    """Marketplace service fee for a subtotal.

    Args:
        subtotal: Stay subtotal in INR
        rate: Fee rate (default 13%)

    Returns:
        Fee in INR, rounded half-up
    """
    return round_half_up(Decimal(subtotal) * rate)


def compute_price_breakdown(
    nightly_rate: int,
    check_in: dt.date,
    check_out: dt.date,
    cleaning_fee: int = DEFAULT_CLEANING_FEE,
    service_fee_override: int | None = None,
    *,
    service_fee_rate: Decimal = SERVICE_FEE_RATE,
) -> PriceBreakdown:
    """Calculate the price breakdown for a stay.

    A service_fee_override replaces the computed fee entirely; it is used
    to redisplay the fee persisted with an existing booking. An override
    of 0 counts as provided.

    Zero nights is accepted (the breakdown then carries only fees).

    Args:
        nightly_rate: Nightly rate in INR, must be positive
        check_in: Check-in date
        check_out: Check-out date (exclusive)
        cleaning_fee: Cleaning fee in INR, must be non-negative
        service_fee_override: Fee to use instead of the computed one
        service_fee_rate: Fee rate used when no override is given

    Returns:
        PriceBreakdown for the stay

    Raises:
        BookingError: INVALID_PRICING_INPUT for out-of-range amounts
        InvalidRangeError: If check_out is before check_in
    """
    if nightly_rate <= 0:
        raise BookingError(
            ErrorCode.INVALID_PRICING_INPUT,
            details={"nightly_rate": str(nightly_rate)},
        )
    if cleaning_fee < 0:
        raise BookingError(
            ErrorCode.INVALID_PRICING_INPUT,
            details={"cleaning_fee": str(cleaning_fee)},
        )
    if service_fee_override is not None and service_fee_override < 0:
        raise BookingError(
            ErrorCode.INVALID_PRICING_INPUT,
            details={"service_fee": str(service_fee_override)},
        )

    nights = compute_nights(check_in, check_out)
    if nights < 0:
        raise InvalidRangeError(
            details={
                "check_in": _as_date(check_in).isoformat(),
                "check_out": _as_date(check_out).isoformat(),
            }
        )

    subtotal = nightly_rate * nights
    if service_fee_override is not None:
        service_fee = service_fee_override
    else:
        service_fee = calculate_service_fee(subtotal, service_fee_rate)

    return PriceBreakdown(
        nights=nights,
        subtotal=subtotal,
        cleaning_fee=cleaning_fee,
        service_fee=service_fee,
        total=subtotal + cleaning_fee + service_fee,
    )


def validate_stay_range(check_in: dt.date, check_out: dt.date) -> int:
    """Reject stays that do not last at least one night.

    Returns:
        Number of nights

    Raises:
        InvalidRangeError: If check_out is not after check_in
    """
    nights = compute_nights(check_in, check_out)
    if nights < 1:
        raise InvalidRangeError(
            details={
                "check_in": _as_date(check_in).isoformat(),
                "check_out": _as_date(check_out).isoformat(),
            }
        )
    return nights


def quote_stay(
    nightly_rate: int,
    check_in: dt.date,
    check_out: dt.date,
    cleaning_fee: int = DEFAULT_CLEANING_FEE,
    service_fee_override: int | None = None,
    *,
    service_fee_rate: Decimal = SERVICE_FEE_RATE,
) -> PriceBreakdown:
    """Price a bookable stay: at least one night, then the full breakdown."""
    validate_stay_range(check_in, check_out)
    return compute_price_breakdown(
        nightly_rate,
        check_in,
        check_out,
        cleaning_fee,
        service_fee_override,
        service_fee_rate=service_fee_rate,
    )


class PricingService:
    """Pricing with configured defaults for cleaning fee and fee rate."""

    def __init__(self, settings: "Settings") -> None:
        """Initialize pricing service.

        Args:
            settings: Settings providing cleaning_fee and service_fee_rate
        """
        self.cleaning_fee = settings.cleaning_fee
        self.service_fee_rate = settings.service_fee_rate

    def quote(
        self,
        nightly_rate: int,
        check_in: dt.date,
        check_out: dt.date,
        cleaning_fee: int | None = None,
        service_fee_override: int | None = None,
    ) -> PriceBreakdown:
        """Quote a stay of at least one night.

        Args:
            nightly_rate: Nightly rate in INR
            check_in: Check-in date
            check_out: Check-out date (exclusive)
            cleaning_fee: Cleaning fee, defaults to the configured one
            service_fee_override: Persisted fee to reuse instead of computing

        Returns:
            PriceBreakdown for the stay
        """
        breakdown = quote_stay(
            nightly_rate,
            check_in,
            check_out,
            self.cleaning_fee if cleaning_fee is None else cleaning_fee,
            service_fee_override,
            service_fee_rate=self.service_fee_rate,
        )
        logger.debug(
            "Quoted stay: %s nights, total %s",
            breakdown.nights,
            breakdown.total,
        )
        return breakdown
