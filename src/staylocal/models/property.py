"""Property models for marketplace listings and listing search."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .booking import RequestedRange
from .enums import PropertyStatus

DEFAULT_MAX_PRICE = 50000


class Property(BaseModel):
    """A listed vacation-rental property.

    Only the fields the booking engine consumes are modelled; the data
    service may return more and they are ignored.
    """

    model_config = ConfigDict(
        strict=False,
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: int
    host_id: int
    title: str
    location: str = ""
    property_type: str = ""
    price_per_night: int = Field(..., gt=0, description="Nightly rate in INR")
    max_guests: int = Field(default=1, ge=1)
    status: PropertyStatus = PropertyStatus.ACTIVE


class PropertyFilter(BaseModel):
    """Listing search criteria.

    Location, type, guests and price are forwarded to the data service.
    The stay dates are applied locally against each property's blocked
    dates, and only when the range is complete.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "location": "Udaipur",
                    "property_type": "villa",
                    "guests": 2,
                    "max_price": 50000,
                    "stay": {"from": "2025-01-10", "to": "2025-01-13"},
                }
            ]
        },
    )

    location: Optional[str] = None
    property_type: Optional[str] = None
    guests: Optional[int] = Field(default=None, ge=1)
    max_price: Optional[int] = Field(
        default=DEFAULT_MAX_PRICE, gt=0, description="Highest nightly rate in INR"
    )
    stay: RequestedRange = Field(default_factory=RequestedRange)

    @property
    def check_in(self) -> Optional[date]:
        return self.stay.from_date

    @property
    def check_out(self) -> Optional[date]:
        return self.stay.to_date

    def to_query_params(self) -> dict[str, str]:
        """Query string for GET /api/properties on the data service."""
        params: dict[str, str] = {}
        if self.location:
            params["location"] = self.location
        if self.property_type:
            params["propertyType"] = self.property_type
        if self.guests:
            params["maxGuests"] = str(self.guests)
        if self.max_price:
            params["pricePerNight"] = str(self.max_price)
        return params
