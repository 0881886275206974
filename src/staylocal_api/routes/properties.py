"""Property calendar endpoints.

Provides REST endpoints for:
- Blocked dates of a property (for calendar rendering)
- Availability and price of a requested stay

Blocked dates come from the property's current bookings; cancelled
bookings do not block anything. Amounts are whole INR.
"""

import datetime as dt

from fastapi import APIRouter, Depends, Query

from staylocal.services.availability import find_conflicts
from staylocal.services.booking import BookingService
from staylocal.services.pricing import validate_stay_range
from staylocal_api.dependencies import get_booking_service
from staylocal_api.models.availability import (
    BlockedDatesResponse,
    PropertyAvailabilityResponse,
)

router = APIRouter(tags=["properties"])


@router.get(
    "/properties/{property_id}/blocked-dates",
    summary="Get blocked dates",
    description="""
Get every date that is occupied by an existing booking.

**Notes:**
- Dates are returned ascending, each once
- A booking's check-out day is not blocked
""",
    response_model=BlockedDatesResponse,
    responses={
        404: {"description": "Property not found"},
        502: {"description": "Data service unavailable"},
    },
)
def get_blocked_dates(
    property_id: int,
    service: BookingService = Depends(get_booking_service),
) -> BlockedDatesResponse:
    draft = service.load_draft(property_id)
    dates = draft.blocked.sorted_dates()
    return BlockedDatesResponse(
        property_id=property_id,
        blocked_dates=dates,
        count=len(dates),
    )


@router.get(
    "/properties/{property_id}/availability",
    summary="Check stay availability",
    description="""
Check whether a stay can be booked and what it costs.

Returns the blocked dates that conflict with the request (if any) and
the price breakdown at the property's nightly rate.

**Notes:**
- check_out is exclusive, so a stay may begin on another booking's
  check-out day
- Amounts are whole INR
""",
    response_model=PropertyAvailabilityResponse,
    responses={
        400: {"description": "Invalid date range (check_out must be after check_in)"},
        404: {"description": "Property not found"},
        502: {"description": "Data service unavailable"},
    },
)
def check_property_availability(
    property_id: int,
    check_in: dt.date = Query(
        ...,
        description="Check-in date (YYYY-MM-DD)",
        examples=["2025-01-10"],
    ),
    check_out: dt.date = Query(
        ...,
        description="Check-out date (YYYY-MM-DD)",
        examples=["2025-01-13"],
    ),
    service: BookingService = Depends(get_booking_service),
) -> PropertyAvailabilityResponse:
    validate_stay_range(check_in, check_out)

    draft = service.select_dates(service.load_draft(property_id), check_in, check_out)
    conflicts = find_conflicts(draft.blocked, check_in, check_out)

    return PropertyAvailabilityResponse(
        property_id=property_id,
        check_in=check_in,
        check_out=check_out,
        is_available=not conflicts,
        conflicts=conflicts,
        price=draft.price,
    )
