"""Search endpoints.

Search pages pass checkIn/checkOut as free text in the URL. Neither
endpoint rejects malformed dates: they come back as null, or are left out
of the listing search.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from staylocal.models.booking import RequestedRange
from staylocal.models.property import Property
from staylocal.services.date_range import parse_requested_range
from staylocal.services.search import PropertySearchService, build_property_filter
from staylocal_api.dependencies import get_search_service

router = APIRouter(tags=["search"])


@router.get(
    "/search/dates",
    summary="Parse requested search dates",
    description="""
Parse check-in/check-out query values into a requested date range.

Each side is parsed independently. A missing or unparseable value
becomes `null`; the request itself never fails because of it.
""",
    response_model=RequestedRange,
    responses={
        200: {
            "description": "Parsed range",
            "content": {
                "application/json": {
                    "examples": {
                        "valid": {
                            "summary": "Both dates parsed",
                            "value": {"from": "2025-01-10", "to": "2025-01-13"},
                        },
                        "malformed": {
                            "summary": "Unparseable check-in",
                            "value": {"from": None, "to": None},
                        },
                    }
                }
            },
        },
    },
)
async def parse_search_dates(
    check_in: Optional[str] = Query(
        None,
        alias="checkIn",
        description="Check-in date as free text",
        examples=["2025-01-10"],
    ),
    check_out: Optional[str] = Query(
        None,
        alias="checkOut",
        description="Check-out date as free text",
        examples=["2025-01-13"],
    ),
) -> RequestedRange:
    return parse_requested_range(check_in, check_out)


@router.get(
    "/properties",
    summary="Search listings",
    description="""
Search listings by location, type, guest count and nightly price.

When both `checkIn` and `checkOut` parse and `checkOut` is later, only
listings with no blocked date in that stay are returned. Unparseable or
incomplete dates are ignored rather than rejected.

**Notes:**
- `pricePerNight` is the highest nightly rate to include (default ₹50,000)
- `guests` is the number of guests the listing must hold
""",
    response_model=list[Property],
    responses={
        200: {
            "description": "Matching listings",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": 12,
                            "hostId": 7,
                            "title": "Lakeview Cottage",
                            "location": "Udaipur, Rajasthan",
                            "propertyType": "cottage",
                            "pricePerNight": 2500,
                            "maxGuests": 4,
                            "status": "active",
                        }
                    ]
                }
            },
        },
        502: {"description": "Data service unavailable"},
    },
)
def search_properties(
    location: Optional[str] = Query(None, description="City or area", examples=["Udaipur"]),
    property_type: Optional[str] = Query(
        None,
        alias="propertyType",
        description="Listing type",
        examples=["villa"],
    ),
    guests: Optional[int] = Query(None, ge=1, description="Number of guests"),
    max_price: Optional[int] = Query(
        None,
        alias="pricePerNight",
        gt=0,
        description="Highest nightly rate in INR",
    ),
    check_in: Optional[str] = Query(None, alias="checkIn", description="Check-in date as free text"),
    check_out: Optional[str] = Query(
        None, alias="checkOut", description="Check-out date as free text"
    ),
    service: PropertySearchService = Depends(get_search_service),
) -> list[Property]:
    filters = build_property_filter(
        location=location,
        property_type=property_type,
        guests=guests,
        max_price=max_price,
        check_in_text=check_in,
        check_out_text=check_out,
    )
    return service.search(filters)
