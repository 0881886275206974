"""Availability engine for blocked calendar dates.

A property's existing reservations are turned into a BlockedDateSet: every
date d with interval.start <= d < interval.end for some interval. The
check-out day of a reservation is never blocked.

The set is a view recomputed from the current reservation list on every
query; nothing here caches or mutates the caller's reservations.
"""

import datetime as dt
from collections.abc import Iterable, Iterator, Mapping
from functools import cached_property
from typing import Any

from staylocal.models import BookingDate, BookingError, DateInterval, ErrorCode
from staylocal.utils.logging import get_logger

logger = get_logger(__name__)

# Maximum conflicting dates echoed back in error details
MAX_REPORTED_CONFLICTS = 10


def get_dates_in_range(start: dt.date, end: dt.date) -> Iterator[dt.date]:
    """Yield every date from start up to, but excluding, end."""
    current = start
    while current < end:
        yield current
        current += dt.timedelta(days=1)


class BlockedDateSet:
    """Read-only set of dates occupied by a collection of intervals.

    Iteration is lazy and restartable: each pass walks the intervals again
    in start order and yields each blocked date once, ascending. The first
    membership test materialises a frozenset that later tests reuse.
    """

    def __init__(self, intervals: Iterable[DateInterval] = ()) -> None:
        # Snapshot so generators can be iterated more than once
        self._intervals = tuple(intervals)

    @property
    def intervals(self) -> tuple[DateInterval, ...]:
        return self._intervals

    def __iter__(self) -> Iterator[dt.date]:
        covered_until: dt.date | None = None
        for interval in sorted(self._intervals, key=lambda i: i.start):
            if interval.is_empty:
                continue
            start = interval.start
            if covered_until is not None and covered_until > start:
                start = covered_until
            yield from get_dates_in_range(start, interval.end)
            if covered_until is None or interval.end > covered_until:
                covered_until = interval.end

    @cached_property
    def _dates(self) -> frozenset[dt.date]:
        return frozenset(self)

    def __contains__(self, day: object) -> bool:
        if isinstance(day, dt.datetime):
            day = day.date()
        return day in self._dates

    def __len__(self) -> int:
        return len(self._dates)

    def __bool__(self) -> bool:
        return any(not interval.is_empty for interval in self._intervals)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BlockedDateSet):
            return self._dates == other._dates
        if isinstance(other, (set, frozenset)):
            return self._dates == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._dates)

    def __repr__(self) -> str:
        return f"BlockedDateSet({len(self)} dates from {len(self._intervals)} intervals)"

    def as_frozenset(self) -> frozenset[dt.date]:
        """Materialised dates."""
        return self._dates

    def sorted_dates(self) -> list[dt.date]:
        return list(self)


def build_blocked_date_set(intervals: Iterable[DateInterval]) -> BlockedDateSet:
    """Build the blocked-date view for one property's reservations.

    Intervals may come in any order, may overlap, and may be empty.
    Overlapping dates are counted once; an interval with start == end
    blocks nothing.

    Args:
        intervals: Occupied spans (end exclusive)

    Returns:
        BlockedDateSet over the intervals
    """
    return BlockedDateSet(intervals)


def intervals_from_records(
    records: Iterable[BookingDate | Mapping[str, Any]],
    include_cancelled: bool = False,
) -> list[DateInterval]:
    """Convert data-service booking records into occupied intervals.

    Cancelled bookings free their dates unless include_cancelled is set.

    Args:
        records: BookingDate models or raw JSON dicts
            ({"checkInDate", "checkOutDate", "status"})
        include_cancelled: Treat cancelled bookings as occupying dates

    Returns:
        List of DateInterval

    Raises:
        pydantic.ValidationError: If a raw record is malformed or has
            checkOutDate <= checkInDate
    """
    intervals: list[DateInterval] = []
    for record in records:
        booking_date = (
            record
            if isinstance(record, BookingDate)
            else BookingDate.model_validate(record)
        )
        if booking_date.is_cancelled and not include_cancelled:
            continue
        intervals.append(booking_date.to_interval())
    return intervals


def blocked_dates_from_records(
    records: Iterable[BookingDate | Mapping[str, Any]],
    include_cancelled: bool = False,
) -> BlockedDateSet:
    """Shortcut for build_blocked_date_set(intervals_from_records(...))."""
    return build_blocked_date_set(intervals_from_records(records, include_cancelled))


def find_conflicts(
    blocked: BlockedDateSet,
    check_in: dt.date,
    check_out: dt.date,
) -> list[dt.date]:
    """Blocked dates inside the requested range [check_in, check_out).

    Returns:
        Conflicting dates, ascending (empty when the range is free)
    """
    return [day for day in get_dates_in_range(check_in, check_out) if day in blocked]


def is_range_available(
    blocked: BlockedDateSet,
    check_in: dt.date,
    check_out: dt.date,
) -> bool:
    """True when no date in [check_in, check_out) is blocked."""
    return not find_conflicts(blocked, check_in, check_out)


def ensure_range_available(
    blocked: BlockedDateSet,
    check_in: dt.date,
    check_out: dt.date,
) -> None:
    """Raise if the requested range overlaps an existing reservation.

    Raises:
        BookingError: DATES_UNAVAILABLE with the conflicting dates
    """
    conflicts = find_conflicts(blocked, check_in, check_out)
    if conflicts:
        logger.info(
            "Requested range %s..%s overlaps %d blocked dates",
            check_in.isoformat(),
            check_out.isoformat(),
            len(conflicts),
        )
        raise BookingError(
            ErrorCode.DATES_UNAVAILABLE,
            details={
                "check_in": check_in.isoformat(),
                "check_out": check_out.isoformat(),
                "conflicts": ",".join(
                    d.isoformat() for d in conflicts[:MAX_REPORTED_CONFLICTS]
                ),
            },
        )
