"""Payment endpoints.

Payments are simulated: nothing is charged. The payment is checked against
the booking total and recorded with the data service. Amounts are whole INR.
"""

from fastapi import APIRouter, Depends

from staylocal.models.payment import PaymentCreate, PaymentResult
from staylocal.services.payment_service import PaymentService
from staylocal_api.dependencies import get_payment_service
from staylocal_api.models.payments import PaymentStatusResponse

router = APIRouter(tags=["payments"])


@router.post(
    "/payments",
    summary="Pay for a booking",
    description="""
Record a (simulated) payment for a booking.

**Notes:**
- `amount` must equal the booking's total price
- UPI payments require a valid UPI ID (e.g. `guest@okbank`) and return
  a QR code URL for the UPI deep link
- Supported methods: `upi`, `card`, `netbanking`
""",
    response_model=PaymentResult,
    responses={
        200: {
            "description": "Payment recorded",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "status": "success",
                        "message": "Payment successful",
                        "transaction_id": "TXN-8F3A2C1B",
                        "qr_code_url": None,
                    }
                }
            },
        },
        400: {"description": "Invalid UPI ID or amount mismatch"},
        404: {"description": "Booking not found"},
    },
)
def create_payment(
    request: PaymentCreate,
    service: PaymentService = Depends(get_payment_service),
) -> PaymentResult:
    return service.process_payment(request)


@router.get(
    "/bookings/{booking_id}/payment-status",
    summary="Get payment status",
    description="""
Latest payment status for a booking.

Returns `"unknown"` instead of failing when the status cannot be
retrieved.
""",
    response_model=PaymentStatusResponse,
)
def get_payment_status(
    booking_id: int,
    service: PaymentService = Depends(get_payment_service),
) -> PaymentStatusResponse:
    return PaymentStatusResponse(
        booking_id=booking_id,
        status=service.get_payment_status(booking_id),
    )
