"""Standard error codes for the booking engine.

Every domain failure is raised as a BookingError carrying one of these
codes. The API layer converts it to a ToolError JSON body.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Machine-readable failure codes returned in ToolError.error_code."""

    # Booking, pricing and payment rules
    DATES_UNAVAILABLE = "ERR_001"
    INVALID_DATE_RANGE = "ERR_002"
    MAX_GUESTS_EXCEEDED = "ERR_003"
    INVALID_GUEST_COUNT = "ERR_004"
    INVALID_PRICING_INPUT = "ERR_005"
    RESERVATION_NOT_FOUND = "ERR_006"
    HOST_CANNOT_BOOK_OWN_PROPERTY = "ERR_007"
    PAYMENT_FAILED = "ERR_008"
    INVALID_UPI_ID = "ERR_009"
    PAYMENT_AMOUNT_MISMATCH = "ERR_010"

    # Identity
    AUTH_REQUIRED = "ERR_AUTH_001"
    INVALID_CREDENTIALS = "ERR_AUTH_002"

    # Remote data service
    RESOURCE_NOT_FOUND = "ERR_DATA_001"
    DATA_SERVICE_UNAVAILABLE = "ERR_DATA_002"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DATES_UNAVAILABLE: "The requested dates are not available",
    ErrorCode.INVALID_DATE_RANGE: "Check-out date must be after check-in date",
    ErrorCode.MAX_GUESTS_EXCEEDED: "Number of guests exceeds the property's capacity",
    ErrorCode.INVALID_GUEST_COUNT: "At least one guest is required",
    ErrorCode.INVALID_PRICING_INPUT: "Pricing inputs are out of range",
    ErrorCode.RESERVATION_NOT_FOUND: "Booking not found",
    ErrorCode.HOST_CANNOT_BOOK_OWN_PROPERTY: "Hosts cannot book their own property",
    ErrorCode.PAYMENT_FAILED: "Payment processing failed",
    ErrorCode.INVALID_UPI_ID: "Please enter a valid UPI ID (e.g. username@upi)",
    ErrorCode.PAYMENT_AMOUNT_MISMATCH: "Payment amount does not match the booking total",
    ErrorCode.AUTH_REQUIRED: "Authentication required to perform this action",
    ErrorCode.INVALID_CREDENTIALS: "Invalid username or password",
    ErrorCode.RESOURCE_NOT_FOUND: "The requested resource was not found",
    ErrorCode.DATA_SERVICE_UNAVAILABLE: "The booking data service is unavailable",
}

ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.DATES_UNAVAILABLE: "Choose dates that are not blocked on the calendar",
    ErrorCode.INVALID_DATE_RANGE: "Select a check-out date after the check-in date",
    ErrorCode.MAX_GUESTS_EXCEEDED: "Reduce the number of guests",
    ErrorCode.INVALID_GUEST_COUNT: "Select at least one guest",
    ErrorCode.INVALID_PRICING_INPUT: "Use a positive nightly rate and non-negative fees",
    ErrorCode.RESERVATION_NOT_FOUND: "Verify the booking ID",
    ErrorCode.HOST_CANNOT_BOOK_OWN_PROPERTY: "Sign in with a guest account to book",
    ErrorCode.PAYMENT_FAILED: "Try again or use a different payment method",
    ErrorCode.INVALID_UPI_ID: "Check the UPI ID and try again",
    ErrorCode.PAYMENT_AMOUNT_MISMATCH: "Reload the booking and pay the current total",
    ErrorCode.AUTH_REQUIRED: "Log in and try again",
    ErrorCode.INVALID_CREDENTIALS: "Check the username and password",
    ErrorCode.RESOURCE_NOT_FOUND: "Verify the identifier and try again",
    ErrorCode.DATA_SERVICE_UNAVAILABLE: "Try again later",
}


class ToolError(BaseModel):
    """JSON body of every failed API call."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ToolError":
        """Build the error body for ``code`` with its message and recovery hint."""
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class BookingError(Exception):
    """Single domain exception of the booking engine.

    ``details`` carries string context (dates, amounts, ids) that is passed
    through to the ToolError body unchanged.
    """

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    def to_tool_error(self) -> ToolError:
        return ToolError.from_code(self.code, self.details)


class InvalidRangeError(BookingError):
    """Raised when a check-out date does not follow the check-in date."""

    def __init__(self, details: Optional[dict[str, str]] = None):
        super().__init__(ErrorCode.INVALID_DATE_RANGE, details)
