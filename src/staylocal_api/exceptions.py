"""Turn BookingError into JSON error responses.

Every failed request carries a ToolError body. The status is chosen from
the error code: bad input is 400, missing or rejected credentials 401, a
failed payment 402, a host booking their own listing 403, unknown records
404, taken dates 409 and an unreachable data service 502.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_402_PAYMENT_REQUIRED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_502_BAD_GATEWAY,
)

from staylocal.models.errors import BookingError, ErrorCode
from staylocal.utils.logging import get_logger

logger = get_logger(__name__)

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    # Bad input
    ErrorCode.INVALID_DATE_RANGE: HTTP_400_BAD_REQUEST,
    ErrorCode.MAX_GUESTS_EXCEEDED: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_GUEST_COUNT: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PRICING_INPUT: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_UPI_ID: HTTP_400_BAD_REQUEST,
    ErrorCode.PAYMENT_AMOUNT_MISMATCH: HTTP_400_BAD_REQUEST,
    ErrorCode.DATES_UNAVAILABLE: HTTP_409_CONFLICT,
    # Identity
    ErrorCode.AUTH_REQUIRED: HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: HTTP_401_UNAUTHORIZED,
    ErrorCode.HOST_CANNOT_BOOK_OWN_PROPERTY: HTTP_403_FORBIDDEN,
    # Lookups
    ErrorCode.RESERVATION_NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorCode.RESOURCE_NOT_FOUND: HTTP_404_NOT_FOUND,
    # Upstream
    ErrorCode.PAYMENT_FAILED: HTTP_402_PAYMENT_REQUIRED,
    ErrorCode.DATA_SERVICE_UNAVAILABLE: HTTP_502_BAD_GATEWAY,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """HTTP status for ``code``; unmapped codes are treated as bad input."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    status_code = get_http_status_for_error(exc.code)

    logger.info(
        "%s %s failed with %s (%s)",
        request.method,
        request.url.path,
        exc.code.name,
        status_code,
    )

    return JSONResponse(
        status_code=status_code,
        content=exc.to_tool_error().model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the BookingError handler on ``app``."""
    app.add_exception_handler(BookingError, booking_error_handler)  # type: ignore[arg-type]
