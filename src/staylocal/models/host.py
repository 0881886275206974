"""Host dashboard models."""

from pydantic import BaseModel, ConfigDict, Field

from .booking import Booking


class HostDashboardSummary(BaseModel):
    """Aggregated view of a host's listings and bookings."""

    model_config = ConfigDict(strict=True)

    host_id: int
    active_listings: int = Field(..., ge=0)
    pending_bookings: int = Field(..., ge=0)
    confirmed_bookings: int = Field(..., ge=0)
    total_earnings: int = Field(..., ge=0, description="Confirmed and completed revenue in INR")
    upcoming_check_ins: list[Booking] = Field(default_factory=list)
