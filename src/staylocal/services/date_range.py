"""Parsing of untrusted date-range query parameters.

Search URLs carry check-in/check-out as free text. Each side is parsed on
its own; anything unparseable becomes None so the search degrades to
"no date filter" instead of failing.
"""

import datetime as dt

from dateutil import parser as date_parser
from dateutil.parser import ParserError

from staylocal.models import RequestedRange
from staylocal.utils.logging import get_logger

logger = get_logger(__name__)


def parse_date_text(text: object) -> dt.date | None:
    """Parse an ISO-8601 or free-text date, or return None.

    Never raises.

    Args:
        text: Raw query value (normally a string, may be None)

    Returns:
        Calendar date, or None if absent or unparseable
    """
    if not isinstance(text, str):
        return None

    value = text.strip()
    if not value:
        return None

    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        pass

    try:
        return dt.datetime.fromisoformat(value).date()
    except ValueError:
        pass

    try:
        return date_parser.parse(value).date()
    except (ParserError, ValueError, OverflowError, TypeError):
        logger.debug("Ignoring unparseable date %r", value)
        return None


def parse_requested_range(
    check_in_text: str | None = None,
    check_out_text: str | None = None,
) -> RequestedRange:
    """Parse a requested stay from raw query strings.

    Each side is parsed independently; a malformed or missing side
    resolves to None. Ordering is not checked here (see
    RequestedRange.is_complete).

    Args:
        check_in_text: Raw check-in value
        check_out_text: Raw check-out value

    Returns:
        RequestedRange with from/to dates or None
    """
    return RequestedRange(
        from_date=parse_date_text(check_in_text),
        to_date=parse_date_text(check_out_text),
    )
