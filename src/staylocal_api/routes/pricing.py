"""Pricing endpoint for stay price breakdowns.

All amounts are whole INR (e.g., 2500 = ₹2,500).
"""

import datetime as dt
from typing import Optional

from fastapi import APIRouter, Depends, Query

from staylocal.models.pricing import PriceBreakdown
from staylocal.services.pricing import PricingService, validate_stay_range
from staylocal_api.dependencies import get_pricing_service

router = APIRouter(tags=["pricing"])


@router.get(
    "/pricing/calculate",
    summary="Quote a stay",
    description="""
Calculate the price breakdown for a stay at a given nightly rate.

Returns number of nights, subtotal, cleaning fee, service fee and total.

**Notes:**
- Amounts are whole INR
- The night of `check_out` is not charged
- The service fee is 13% of the subtotal, rounded half-up, unless
  `service_fee` is given (e.g. the fee stored with an existing booking)
- `cleaning_fee` defaults to the configured fee (₹2,500)
""",
    response_description="Nights, fees and total for the stay",
    response_model=PriceBreakdown,
    responses={
        200: {
            "description": "Breakdown for a three-night stay at ₹2,500",
            "content": {
                "application/json": {
                    "example": {
                        "nights": 3,
                        "subtotal": 7500,
                        "cleaning_fee": 2500,
                        "service_fee": 975,
                        "total": 10975,
                    }
                }
            },
        },
        400: {
            "description": "Invalid date range or negative amounts",
        },
    },
)
async def calculate_price(
    nightly_rate: int = Query(
        ...,
        description="Nightly rate in INR",
        examples=[2500],
    ),
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
    cleaning_fee: Optional[int] = Query(
        None,
        description="Cleaning fee in INR (defaults to the configured fee)",
    ),
    service_fee: Optional[int] = Query(
        None,
        description="Service fee to use instead of the computed 13%",
    ),
    service: PricingService = Depends(get_pricing_service),
) -> PriceBreakdown:
    """Calculate price for a date range."""
    validate_stay_range(check_in, check_out)

    return service.quote(
        nightly_rate,
        check_in,
        check_out,
        cleaning_fee=cleaning_fee,
        service_fee_override=service_fee,
    )
