"""Booking draft and submission.

A BookingDraft holds everything the booking form needs: the property, its
blocked dates, the selected range, the guest count and the live price.
Drafts are immutable; each command returns a new draft.
"""

import datetime as dt
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from staylocal.models import (
    Booking,
    BookingCreate,
    BookingDate,
    BookingError,
    ErrorCode,
    InvalidRangeError,
    PriceBreakdown,
    Property,
)
from staylocal.utils.logging import get_logger, log_booking_operation

from .availability import (
    BlockedDateSet,
    blocked_dates_from_records,
    ensure_range_available,
    get_dates_in_range,
)
from .pricing import PricingService, quote_stay
from .session import AuthSession, require_session

if TYPE_CHECKING:
    from .data_service import DataServiceClient

logger = get_logger(__name__)


class BookingDraft(BaseModel):
    """Booking form state for one property."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    property: Property
    blocked: BlockedDateSet
    check_in: Optional[dt.date] = None
    check_out: Optional[dt.date] = None
    guests: int = Field(default=1, ge=1)
    price: Optional[PriceBreakdown] = None

    @property
    def has_valid_range(self) -> bool:
        return (
            self.check_in is not None
            and self.check_out is not None
            and self.check_out > self.check_in
        )

    @property
    def is_available(self) -> bool:
        """Selected range is complete and free of blocked dates."""
        if not self.has_valid_range:
            return False
        return not any(
            day in self.blocked
            for day in get_dates_in_range(self.check_in, self.check_out)  # type: ignore[arg-type]
        )


def start_draft(
    property: Property,
    booking_dates: Iterable[BookingDate | Mapping[str, Any]],
) -> BookingDraft:
    """Open a draft for a property given its existing booking records."""
    return BookingDraft(property=property, blocked=blocked_dates_from_records(booking_dates))


def select_dates(
    draft: BookingDraft,
    check_in: Optional[dt.date],
    check_out: Optional[dt.date],
    pricing: Optional[PricingService] = None,
) -> BookingDraft:
    """Return a draft with the new range and a recomputed price.

    The price is None while either date is missing or check-out does not
    follow check-in.

    Args:
        draft: Current draft
        check_in: Selected check-in date
        check_out: Selected check-out date (exclusive)
        pricing: Pricing service with configured fees (module defaults if None)
    """
    price: Optional[PriceBreakdown] = None
    if check_in is not None and check_out is not None and check_out > check_in:
        rate = draft.property.price_per_night
        if pricing is not None:
            price = pricing.quote(rate, check_in, check_out)
        else:
            price = quote_stay(rate, check_in, check_out)

    return draft.model_copy(
        update={"check_in": check_in, "check_out": check_out, "price": price}
    )


def set_guests(draft: BookingDraft, guests: int) -> BookingDraft:
    """Return a draft with a new guest count.

    Raises:
        BookingError: INVALID_GUEST_COUNT below 1,
            MAX_GUESTS_EXCEEDED above the property's capacity
    """
    if guests < 1:
        raise BookingError(ErrorCode.INVALID_GUEST_COUNT, details={"guests": str(guests)})
    if guests > draft.property.max_guests:
        raise BookingError(
            ErrorCode.MAX_GUESTS_EXCEEDED,
            details={
                "guests": str(guests),
                "max_guests": str(draft.property.max_guests),
            },
        )
    return draft.model_copy(update={"guests": guests})


def build_booking_request(
    draft: BookingDraft,
    session: Optional[AuthSession],
) -> BookingCreate:
    """Validate a draft and turn it into a booking payload.

    Args:
        draft: Draft to submit
        session: Session of the guest making the booking

    Returns:
        BookingCreate with total_price taken from the price breakdown

    Raises:
        BookingError: AUTH_REQUIRED without an active session
        InvalidRangeError: If dates are missing or out of order
        BookingError: DATES_UNAVAILABLE if the range overlaps a reservation
        BookingError: HOST_CANNOT_BOOK_OWN_PROPERTY for the listing's host
    """
    user = require_session(session)

    check_in, check_out = draft.check_in, draft.check_out
    if check_in is None or check_out is None or check_out <= check_in:
        raise InvalidRangeError(
            details={
                "check_in": check_in.isoformat() if check_in else "",
                "check_out": check_out.isoformat() if check_out else "",
            }
        )

    ensure_range_available(draft.blocked, check_in, check_out)

    if user.id == draft.property.host_id:
        raise BookingError(
            ErrorCode.HOST_CANNOT_BOOK_OWN_PROPERTY,
            details={"property_id": str(draft.property.id)},
        )

    price = draft.price or quote_stay(draft.property.price_per_night, check_in, check_out)

    return BookingCreate(
        property_id=draft.property.id,
        user_id=user.id,
        check_in_date=check_in,
        check_out_date=check_out,
        number_of_guests=draft.guests,
        total_price=price.total,
    )


class BookingService:
    """Loads drafts and submits bookings through the data service."""

    def __init__(
        self,
        data_service: "DataServiceClient",
        pricing: Optional[PricingService] = None,
    ) -> None:
        """Initialize booking service.

        Args:
            data_service: Data service client
            pricing: Pricing service used when selecting dates
        """
        self.data_service = data_service
        self.pricing = pricing

    def load_draft(self, property_id: int) -> BookingDraft:
        """Fetch a property and its reservations into a fresh draft."""
        property = self.data_service.get_property(property_id)
        booking_dates = self.data_service.get_booking_dates(property_id)
        return start_draft(property, booking_dates)

    def select_dates(
        self,
        draft: BookingDraft,
        check_in: Optional[dt.date],
        check_out: Optional[dt.date],
    ) -> BookingDraft:
        return select_dates(draft, check_in, check_out, self.pricing)

    def refresh_blocked_dates(self, draft: BookingDraft) -> BookingDraft:
        """Reload the draft's blocked dates from current reservations."""
        records = self.data_service.get_booking_dates(draft.property.id)
        return draft.model_copy(update={"blocked": blocked_dates_from_records(records)})

    def submit(self, draft: BookingDraft, session: Optional[AuthSession]) -> Booking:
        """Validate and create the booking.

        Blocked dates are re-fetched first so a draft opened before another
        guest's booking cannot double-book.

        Args:
            draft: Draft to submit
            session: Session of the guest

        Returns:
            Booking as stored by the data service

        Raises:
            BookingError: On validation failure or data service errors
        """
        property_id = draft.property.id
        try:
            require_session(session)
            fresh = self.refresh_blocked_dates(draft)
            payload = build_booking_request(fresh, session)
            booking = self.data_service.create_booking(
                payload,
                token=session.token if session else None,
            )
        except BookingError as e:
            log_booking_operation(
                logger,
                "submit_booking",
                property_id=property_id,
                error=e.code.value,
            )
            raise

        log_booking_operation(
            logger,
            "submit_booking",
            property_id=property_id,
            booking_id=booking.id,
            nights=booking.nights,
            total=booking.total_price,
        )
        return booking

    def get_booking(self, booking_id: int) -> Booking:
        """Get a booking by ID.

        Raises:
            BookingError: RESERVATION_NOT_FOUND if it does not exist
        """
        return self.data_service.get_booking(booking_id)

    def list_user_bookings(self, session: Optional[AuthSession]) -> list[Booking]:
        """Bookings of the session's user, newest check-in first.

        Raises:
            BookingError: AUTH_REQUIRED without an active session
        """
        user = require_session(session)
        bookings = self.data_service.list_user_bookings(
            token=session.token if session else None
        )
        logger.info("Loaded %d bookings for user %s", len(bookings), user.id)
        return sorted(bookings, key=lambda b: (b.check_in_date, b.id), reverse=True)
