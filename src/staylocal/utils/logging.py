"""Logging helpers for StayLocal.

Every log line is prefixed with the request's correlation ID so the API
logs, the booking engine logs and the data-service logs for one request
can be joined. The ID lives in a ContextVar, which keeps concurrent
requests apart under both threads and asyncio.

Typical use::

    logger = get_logger(__name__)
    logger.info("Quoting stay", extra={"property_id": 42})
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

NO_CORRELATION_ID = "no-correlation-id"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_current_correlation_id: ContextVar[str | None] = ContextVar(
    "staylocal_correlation_id", default=None
)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Bind a correlation ID to the current context, minting one if needed."""
    value = correlation_id or uuid.uuid4().hex
    _current_correlation_id.set(value)
    return value


def get_correlation_id() -> str | None:
    return _current_correlation_id.get()


def clear_correlation_id() -> None:
    _current_correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the active correlation ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return True


class StructuredFormatter(logging.Formatter):
    """Render records as ``[correlation_id] <formatted record>``.

    Records that bypassed CorrelationIdFilter (third-party loggers) are
    stamped here instead.
    """

    def format(self, record: logging.LogRecord) -> str:
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id is None:
            correlation_id = get_correlation_id() or NO_CORRELATION_ID
            record.correlation_id = correlation_id
        return f"[{correlation_id}] {super().format(record)}"


def get_logger(name: str) -> logging.Logger:
    """Return the named logger with a single CorrelationIdFilter attached."""
    logger = logging.getLogger(name)
    if not any(isinstance(existing, CorrelationIdFilter) for existing in logger.filters):
        logger.addFilter(CorrelationIdFilter())
    return logger


def configure_logging(level: str = "INFO") -> None:
    """Set the root level and put StructuredFormatter on every root handler.

    Calling it again only re-applies the level and formatter.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        root.addHandler(logging.StreamHandler())
    formatter = StructuredFormatter(LOG_FORMAT)
    for handler in root.handlers:
        handler.setFormatter(formatter)


def _emit_operation(
    logger: logging.Logger,
    category: str,
    operation: str,
    fields: dict[str, Any],
    error: str | None,
) -> None:
    context: dict[str, Any] = {"operation": operation}
    context.update({key: value for key, value in fields.items() if value is not None})
    if error:
        context["error"] = error

    summary = " | ".join(
        [f"{category} operation: {operation}"]
        + [f"{key}={value}" for key, value in context.items() if key != "operation"]
    )
    logger.log(logging.ERROR if error else logging.INFO, summary, extra=context)


def log_booking_operation(
    logger: logging.Logger,
    operation: str,
    *,
    property_id: int | None = None,
    booking_id: int | None = None,
    nights: int | None = None,
    total: int | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log a quote, draft or booking submission.

    The record is logged at ERROR when ``error`` is given and at INFO
    otherwise. Every non-None field is attached to the record as an
    attribute and repeated as ``key=value`` in the message.

    Args:
        logger: Logger to write to
        operation: Short operation name, e.g. "submit_booking"
        property_id: Property being booked
        booking_id: Booking ID once the data service assigned one
        nights: Number of nights in the stay
        total: Total price in INR
        error: Error code or message when the operation failed
        **extra: Any further context fields
    """
    fields = {
        "property_id": property_id,
        "booking_id": booking_id,
        "nights": nights,
        "total": total,
        **extra,
    }
    _emit_operation(logger, "Booking", operation, fields, error)


def log_payment_operation(
    logger: logging.Logger,
    operation: str,
    *,
    booking_id: int | None = None,
    amount: int | None = None,
    method: str | None = None,
    status: str | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log a simulated payment step. Same record layout as log_booking_operation."""
    fields = {
        "booking_id": booking_id,
        "amount": amount,
        "method": method,
        "status": status,
        **extra,
    }
    _emit_operation(logger, "Payment", operation, fields, error)
