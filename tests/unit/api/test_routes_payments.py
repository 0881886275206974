"""Unit tests for payment API routes.

Tests for:
- POST /api/payments - Simulated payment
- GET /api/bookings/{id}/payment-status - Payment status lookup
"""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from staylocal.models import (
    BookingError,
    ErrorCode,
    Payment,
    PaymentMethod,
    TransactionStatus,
)


def recorded_payment(status: TransactionStatus, method: PaymentMethod) -> Payment:
    return Payment(
        id=1,
        booking_id=101,
        amount=10975,
        payment_method=method,
        status=status,
        transaction_id="TXN-1",
    )


class TestCreatePayment:
    """Tests for POST /api/payments."""

    def test_card_payment(self, client: TestClient, mock_data_service: MagicMock) -> None:
        mock_data_service.create_payment.return_value = recorded_payment(
            TransactionStatus.SUCCESS, PaymentMethod.CARD
        )

        response = client.post(
            "/api/payments",
            json={"bookingId": 101, "amount": 10975, "paymentMethod": "card"},
        )

        assert response.status_code == HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["status"] == "success"
        assert data["transaction_id"] == "TXN-1"
        assert data["qr_code_url"] is None

    def test_upi_payment_returns_qr_code(
        self, client: TestClient, mock_data_service: MagicMock
    ) -> None:
        mock_data_service.create_payment.return_value = recorded_payment(
            TransactionStatus.PENDING, PaymentMethod.UPI
        )

        response = client.post(
            "/api/payments",
            json={
                "bookingId": 101,
                "amount": 10975,
                "paymentMethod": "upi",
                "upiId": "priya@okaxis",
            },
        )

        assert response.status_code == HTTP_200_OK
        data = response.json()
        assert data["status"] == "pending"
        assert data["qr_code_url"].startswith("https://api.qrserver.com/v1/create-qr-code/")

    def test_invalid_upi_id(self, client: TestClient, mock_data_service: MagicMock) -> None:
        response = client.post(
            "/api/payments",
            json={
                "bookingId": 101,
                "amount": 10975,
                "paymentMethod": "upi",
                "upiId": "priya",
            },
        )

        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_009"
        mock_data_service.create_payment.assert_not_called()

    def test_amount_mismatch(self, client: TestClient) -> None:
        response = client.post(
            "/api/payments",
            json={"bookingId": 101, "amount": 500, "paymentMethod": "card"},
        )

        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_010"

    def test_unknown_booking(self, client: TestClient, mock_data_service: MagicMock) -> None:
        mock_data_service.get_booking.side_effect = BookingError(ErrorCode.RESERVATION_NOT_FOUND)

        response = client.post(
            "/api/payments",
            json={"bookingId": 999, "amount": 10975, "paymentMethod": "card"},
        )

        assert response.status_code == HTTP_404_NOT_FOUND


class TestGetPaymentStatus:
    """Tests for GET /api/bookings/{id}/payment-status."""

    def test_known_status(self, client: TestClient, mock_data_service: MagicMock) -> None:
        mock_data_service.get_booking_payment.return_value = recorded_payment(
            TransactionStatus.SUCCESS, PaymentMethod.CARD
        )

        response = client.get("/api/bookings/101/payment-status")

        assert response.status_code == HTTP_200_OK
        assert response.json() == {"booking_id": 101, "status": "success"}

    def test_unknown_status(self, client: TestClient, mock_data_service: MagicMock) -> None:
        mock_data_service.get_booking_payment.side_effect = BookingError(
            ErrorCode.RESOURCE_NOT_FOUND
        )

        response = client.get("/api/bookings/101/payment-status")

        assert response.status_code == HTTP_200_OK
        assert response.json()["status"] == "unknown"
