"""API models for property availability endpoints."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from staylocal.models.pricing import PriceBreakdown


class BlockedDatesResponse(BaseModel):
    """Dates that cannot be selected for a property.

    The check-out day of an existing booking is never included, so a new
    stay may start on it.
    """

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "property_id": 12,
                    "blocked_dates": ["2025-01-10", "2025-01-11"],
                    "count": 2,
                }
            ]
        },
    )

    property_id: int
    blocked_dates: list[dt.date] = Field(
        default_factory=list,
        description="Blocked dates in ascending order",
    )
    count: int = Field(..., ge=0)


class PropertyAvailabilityResponse(BaseModel):
    """Availability and price of a requested stay at one property."""

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "property_id": 12,
                    "check_in": "2025-01-10",
                    "check_out": "2025-01-13",
                    "is_available": True,
                    "conflicts": [],
                    "price": {
                        "nights": 3,
                        "subtotal": 7500,
                        "cleaning_fee": 2500,
                        "service_fee": 975,
                        "total": 10975,
                    },
                }
            ]
        },
    )

    property_id: int
    check_in: dt.date
    check_out: dt.date
    is_available: bool
    conflicts: list[dt.date] = Field(
        default_factory=list,
        description="Blocked dates inside the requested range",
    )
    price: PriceBreakdown = Field(
        ...,
        description="Price at the property's nightly rate (INR)",
    )
