"""Payment service for simulated transactions.

No gateway is called: the payment is validated against the booking and
recorded through the data service, which decides its status. UPI payments
also get a QR code link the guest can scan.
"""

import re
from typing import TYPE_CHECKING, Optional
from urllib.parse import quote, urlencode

from staylocal.models import (
    BookingError,
    ErrorCode,
    PaymentCreate,
    PaymentMethod,
    PaymentResult,
    TransactionStatus,
)
from staylocal.utils.logging import get_logger, log_payment_operation

if TYPE_CHECKING:
    from .data_service import DataServiceClient

logger = get_logger(__name__)

UPI_ID_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9]+$")

DEFAULT_UPI_PAYEE = "staylocal@upi"
QR_CODE_SERVICE_URL = "https://api.qrserver.com/v1/create-qr-code/"

UNKNOWN_PAYMENT_STATUS = "unknown"


def validate_upi_id(upi_id: Optional[str]) -> bool:
    """Check the basic handle@provider shape of a UPI ID."""
    if not upi_id:
        return False
    return UPI_ID_PATTERN.match(upi_id) is not None


def generate_qr_code_url(amount: int, upi_id: Optional[str] = None) -> str:
    """Build a QR code image URL for a UPI payment deep link.

    The whole upi://pay link, with its own query string, is percent-encoded
    into the single ``data`` parameter of the QR service.

    Args:
        amount: Amount in INR
        upi_id: Payee UPI ID (defaults to the marketplace account)

    Returns:
        URL of a 200x200 QR image encoding the upi://pay link
    """
    payee = upi_id or DEFAULT_UPI_PAYEE
    upi_link = "upi://pay?" + urlencode(
        {
            "pa": payee,
            "pn": "StayLocal",
            "am": amount,
            "cu": "INR",
            "tn": "StayLocal Booking",
        },
        safe="@",
        quote_via=quote,
    )
    return f"{QR_CODE_SERVICE_URL}?" + urlencode({"size": "200x200", "data": upi_link})


class PaymentService:
    """Service for processing payments against bookings."""

    def __init__(self, data_service: "DataServiceClient") -> None:
        """Initialize payment service.

        Args:
            data_service: Data service client
        """
        self.data_service = data_service

    def _validate(self, data: PaymentCreate) -> None:
        if data.amount <= 0:
            raise BookingError(
                ErrorCode.PAYMENT_AMOUNT_MISMATCH,
                details={"amount": str(data.amount)},
            )

        if data.payment_method == PaymentMethod.UPI and not validate_upi_id(data.upi_id):
            raise BookingError(
                ErrorCode.INVALID_UPI_ID,
                details={"upi_id": data.upi_id or ""},
            )

        booking = self.data_service.get_booking(data.booking_id)
        if data.amount != booking.total_price:
            raise BookingError(
                ErrorCode.PAYMENT_AMOUNT_MISMATCH,
                details={
                    "amount": str(data.amount),
                    "expected": str(booking.total_price),
                },
            )

    def process_payment(self, data: PaymentCreate) -> PaymentResult:
        """Process a payment for a booking.

        Args:
            data: Payment creation data

        Returns:
            PaymentResult with status and transaction info. A data service
            failure while recording yields a FAILED result.

        Raises:
            BookingError: INVALID_UPI_ID, PAYMENT_AMOUNT_MISMATCH or
                RESERVATION_NOT_FOUND when validation fails
        """
        self._validate(data)

        qr_code_url = None
        if data.payment_method == PaymentMethod.UPI:
            qr_code_url = generate_qr_code_url(data.amount)

        try:
            payment = self.data_service.create_payment(data)
        except BookingError as e:
            if e.code != ErrorCode.DATA_SERVICE_UNAVAILABLE:
                raise
            log_payment_operation(
                logger,
                "process_payment",
                booking_id=data.booking_id,
                amount=data.amount,
                method=data.payment_method.value,
                error=e.code.value,
            )
            return PaymentResult(
                success=False,
                status=TransactionStatus.FAILED,
                message="Payment failed. Please try again.",
                qr_code_url=qr_code_url,
            )

        success = payment.status == TransactionStatus.SUCCESS
        log_payment_operation(
            logger,
            "process_payment",
            booking_id=data.booking_id,
            amount=data.amount,
            method=data.payment_method.value,
            status=payment.status.value,
        )
        return PaymentResult(
            success=success,
            status=payment.status,
            message=(
                "Payment successful"
                if success
                else "Payment processing. Please check status later."
            ),
            transaction_id=payment.transaction_id,
            qr_code_url=qr_code_url,
        )

    def get_payment_status(self, booking_id: int) -> str:
        """Current payment status for a booking, or "unknown"."""
        try:
            payment = self.data_service.get_booking_payment(booking_id)
        except BookingError as e:
            logger.warning(
                "Payment status unavailable for booking %s: %s",
                booking_id,
                e.code.value,
            )
            return UNKNOWN_PAYMENT_STATUS
        return payment.status.value
