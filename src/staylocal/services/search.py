"""Listing search.

Filters on location, type, guests and price run in the data service. When
the search carries a complete stay range, listings that have a blocked
date inside it are dropped here, using the same availability rules as the
booking form.
"""

from typing import TYPE_CHECKING, Optional

from staylocal.models import Property, PropertyFilter
from staylocal.utils.logging import get_logger

from .availability import blocked_dates_from_records, is_range_available
from .date_range import parse_requested_range

if TYPE_CHECKING:
    from .data_service import DataServiceClient

logger = get_logger(__name__)


def build_property_filter(
    location: Optional[str] = None,
    property_type: Optional[str] = None,
    guests: Optional[int] = None,
    max_price: Optional[int] = None,
    check_in_text: Optional[str] = None,
    check_out_text: Optional[str] = None,
) -> PropertyFilter:
    """Assemble search criteria from raw query values.

    Dates are parsed leniently: an unreadable date is simply left out of
    the search. Blank text filters are treated as absent.
    """
    values: dict[str, object] = {
        "location": (location or "").strip() or None,
        "property_type": (property_type or "").strip() or None,
        "guests": guests,
        "stay": parse_requested_range(check_in_text, check_out_text),
    }
    if max_price is not None:
        values["max_price"] = max_price
    return PropertyFilter.model_validate(values)


class PropertySearchService:
    """Search listings, optionally restricted to a free stay range."""

    def __init__(self, data_service: "DataServiceClient") -> None:
        self.data_service = data_service

    def search(self, filters: PropertyFilter) -> list[Property]:
        """Listings matching ``filters``.

        Args:
            filters: Search criteria

        Returns:
            Matching properties in data-service order. With a complete stay
            range only properties free for every night of it are kept.

        Raises:
            BookingError: DATA_SERVICE_UNAVAILABLE if the data service fails
        """
        properties = self.data_service.search_properties(filters)
        if not filters.stay.is_complete:
            return properties

        check_in, check_out = filters.check_in, filters.check_out
        available = [
            prop
            for prop in properties
            if is_range_available(
                blocked_dates_from_records(self.data_service.get_booking_dates(prop.id)),
                check_in,  # type: ignore[arg-type]
                check_out,  # type: ignore[arg-type]
            )
        ]
        logger.info(
            "Search %s..%s kept %d of %d listings",
            check_in,
            check_out,
            len(available),
            len(properties),
        )
        return available
