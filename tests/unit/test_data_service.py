"""Unit tests for the data-service HTTP client.

Requests are served by httpx.MockTransport; no network is used.
"""

import datetime as dt
import json
from typing import Any, Callable

import httpx
import pytest

from staylocal.models import (
    BookingCreate,
    BookingError,
    ErrorCode,
    PaymentCreate,
    PaymentMethod,
    PropertyFilter,
)
from staylocal.services.data_service import (
    DataServiceClient,
    get_data_service,
    reset_data_service,
)
from staylocal.utils.logging import set_correlation_id

BASE_URL = "http://data.test"

PROPERTY_JSON = {
    "id": 12,
    "hostId": 7,
    "title": "Lakeview Cottage",
    "location": "Udaipur, Rajasthan",
    "pricePerNight": 2500,
    "maxGuests": 4,
    "status": "active",
    "amenities": ["wifi"],
}

BOOKING_JSON = {
    "id": 101,
    "propertyId": 12,
    "userId": 3,
    "checkInDate": "2025-01-10",
    "checkOutDate": "2025-01-13",
    "numberOfGuests": 2,
    "totalPrice": 10975,
    "status": "confirmed",
    "paymentStatus": "pending",
}

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(requests_seen: list[httpx.Request]) -> Callable[[Handler], DataServiceClient]:
    """Build a client whose requests go to the given handler."""

    def factory(handler: Handler) -> DataServiceClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        return DataServiceClient(BASE_URL, transport=httpx.MockTransport(recording_handler))

    return factory


def json_response(data: Any, status_code: int = 200) -> Handler:
    return lambda request: httpx.Response(status_code, json=data)


class TestProperties:
    """Tests for property lookups."""

    def test_get_property(self, make_client, requests_seen) -> None:
        client = make_client(json_response(PROPERTY_JSON))

        prop = client.get_property(12)

        assert prop.id == 12
        assert prop.host_id == 7
        assert prop.price_per_night == 2500
        assert requests_seen[0].url.path == "/api/properties/12"

    def test_list_host_properties(self, make_client, requests_seen) -> None:
        client = make_client(json_response([PROPERTY_JSON, {**PROPERTY_JSON, "id": 13}]))

        properties = client.list_host_properties(7)

        assert [p.id for p in properties] == [12, 13]
        assert requests_seen[0].url.path == "/api/hosts/7/properties"

    def test_search_properties_sends_filters(self, make_client, requests_seen) -> None:
        client = make_client(json_response([PROPERTY_JSON]))
        filters = PropertyFilter(location="Udaipur", guests=2, max_price=3000)

        properties = client.search_properties(filters)

        assert [p.id for p in properties] == [12]
        request = requests_seen[0]
        assert request.url.path == "/api/properties"
        assert dict(request.url.params) == {
            "location": "Udaipur",
            "maxGuests": "2",
            "pricePerNight": "3000",
        }

    def test_missing_property_raises_not_found(self, make_client) -> None:
        client = make_client(json_response({"message": "Not found"}, status_code=404))

        with pytest.raises(BookingError) as exc_info:
            client.get_property(404)

        assert exc_info.value.code == ErrorCode.RESOURCE_NOT_FOUND


class TestBookings:
    """Tests for booking endpoints."""

    def test_get_booking_dates(self, make_client, requests_seen) -> None:
        client = make_client(
            json_response(
                [
                    {"checkInDate": "2025-01-10", "checkOutDate": "2025-01-13", "status": "confirmed"},
                    {"checkInDate": "2025-01-20", "checkOutDate": "2025-01-22", "status": "cancelled"},
                ]
            )
        )

        records = client.get_booking_dates(12)

        assert records[0].check_in_date == dt.date(2025, 1, 10)
        assert records[1].is_cancelled
        assert requests_seen[0].url.path == "/api/properties/12/bookings"

    def test_empty_booking_list(self, make_client) -> None:
        client = make_client(json_response([]))
        assert client.get_booking_dates(12) == []

    def test_get_bookings_for_host(self, make_client, requests_seen) -> None:
        client = make_client(json_response([BOOKING_JSON]))

        bookings = client.get_bookings_for_host(7)

        assert bookings[0].total_price == 10975
        assert bookings[0].nights == 3
        assert requests_seen[0].url.path == "/api/hosts/7/bookings"
        assert len(requests_seen) == 1

    def test_list_user_bookings_sends_token(self, make_client, requests_seen) -> None:
        client = make_client(json_response([BOOKING_JSON]))

        bookings = client.list_user_bookings(token="tok-1")

        assert [b.id for b in bookings] == [101]
        assert requests_seen[0].url.path == "/api/bookings"
        assert requests_seen[0].headers["Authorization"] == "Bearer tok-1"

    def test_create_booking_posts_camel_case(self, make_client, requests_seen) -> None:
        client = make_client(json_response(BOOKING_JSON, status_code=201))
        payload = BookingCreate(
            property_id=12,
            user_id=3,
            check_in_date=dt.date(2025, 1, 10),
            check_out_date=dt.date(2025, 1, 13),
            number_of_guests=2,
            total_price=10975,
        )

        booking = client.create_booking(payload, token="tok-1")

        request = requests_seen[0]
        assert request.method == "POST"
        assert request.url.path == "/api/bookings"
        assert request.headers["Authorization"] == "Bearer tok-1"
        assert json.loads(request.content) == {
            "propertyId": 12,
            "userId": 3,
            "checkInDate": "2025-01-10",
            "checkOutDate": "2025-01-13",
            "numberOfGuests": 2,
            "totalPrice": 10975,
        }
        assert booking.id == 101

    def test_missing_booking_raises_reservation_not_found(self, make_client) -> None:
        client = make_client(json_response({}, status_code=404))

        with pytest.raises(BookingError) as exc_info:
            client.get_booking(999)

        assert exc_info.value.code == ErrorCode.RESERVATION_NOT_FOUND


class TestPayments:
    """Tests for payment endpoints."""

    def test_create_payment(self, make_client, requests_seen) -> None:
        client = make_client(
            json_response(
                {
                    "id": 1,
                    "bookingId": 101,
                    "amount": 10975,
                    "currency": "INR",
                    "paymentMethod": "upi",
                    "upiId": "priya@okaxis",
                    "status": "pending",
                    "transactionId": None,
                }
            )
        )
        payload = PaymentCreate(
            booking_id=101,
            amount=10975,
            payment_method=PaymentMethod.UPI,
            upi_id="priya@okaxis",
        )

        payment = client.create_payment(payload)

        assert payment.status.value == "pending"
        body = json.loads(requests_seen[0].content)
        assert body["bookingId"] == 101
        assert body["paymentMethod"] == "upi"

    def test_get_booking_payment(self, make_client, requests_seen) -> None:
        client = make_client(
            json_response(
                {
                    "id": 1,
                    "bookingId": 101,
                    "amount": 10975,
                    "paymentMethod": "card",
                    "status": "success",
                    "transactionId": "TXN-1",
                }
            )
        )

        payment = client.get_booking_payment(101)

        assert payment.transaction_id == "TXN-1"
        assert requests_seen[0].url.path == "/api/bookings/101/payment"


class TestUsers:
    """Tests for login/logout."""

    def test_login_returns_payload(self, make_client, requests_seen) -> None:
        client = make_client(json_response({"id": 3, "username": "priya"}))

        data = client.login("priya", "secret")

        assert data["id"] == 3
        assert json.loads(requests_seen[0].content) == {
            "username": "priya",
            "password": "secret",
        }

    def test_login_rejected(self, make_client) -> None:
        client = make_client(json_response({"message": "Invalid"}, status_code=401))

        with pytest.raises(BookingError) as exc_info:
            client.login("priya", "wrong")

        assert exc_info.value.code == ErrorCode.INVALID_CREDENTIALS

    def test_logout_with_empty_body(self, make_client, requests_seen) -> None:
        client = make_client(lambda request: httpx.Response(204))

        assert client.logout("tok-1") is None
        assert requests_seen[0].url.path == "/api/users/logout"


class TestErrorHandling:
    """Tests for transport and server failures."""

    def test_unauthorized_raises_auth_required(self, make_client) -> None:
        client = make_client(json_response({}, status_code=401))

        with pytest.raises(BookingError) as exc_info:
            client.get_booking(101)

        assert exc_info.value.code == ErrorCode.AUTH_REQUIRED

    def test_server_error_raises_unavailable(self, make_client) -> None:
        client = make_client(json_response({"message": "boom"}, status_code=500))

        with pytest.raises(BookingError) as exc_info:
            client.get_property(12)

        assert exc_info.value.code == ErrorCode.DATA_SERVICE_UNAVAILABLE
        assert exc_info.value.details == {"path": "/api/properties/12", "status": "500"}

    def test_transport_error_raises_unavailable(self, make_client) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(refuse)

        with pytest.raises(BookingError) as exc_info:
            client.get_booking_dates(12)

        assert exc_info.value.code == ErrorCode.DATA_SERVICE_UNAVAILABLE

    def test_non_json_body_raises_unavailable(self, make_client) -> None:
        client = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(BookingError) as exc_info:
            client.get_booking_payment(1)

        assert exc_info.value.code == ErrorCode.DATA_SERVICE_UNAVAILABLE
        assert exc_info.value.details == {
            "path": "/api/bookings/1/payment",
            "reason": "invalid JSON",
        }

    def test_inverted_booking_record_raises_unavailable(self, make_client) -> None:
        client = make_client(
            json_response([{"checkInDate": "2024-06-03", "checkOutDate": "2024-06-01"}])
        )

        with pytest.raises(BookingError) as exc_info:
            client.get_booking_dates(1)

        assert exc_info.value.code == ErrorCode.DATA_SERVICE_UNAVAILABLE
        assert exc_info.value.details == {
            "path": "/api/properties/1/bookings",
            "reason": "malformed record",
        }

    def test_record_missing_fields_raises_unavailable(self, make_client) -> None:
        client = make_client(json_response({"id": 12}))

        with pytest.raises(BookingError) as exc_info:
            client.get_property(12)

        assert exc_info.value.code == ErrorCode.DATA_SERVICE_UNAVAILABLE

    def test_object_where_list_expected_raises_unavailable(self, make_client) -> None:
        client = make_client(json_response({"bookings": []}))

        with pytest.raises(BookingError) as exc_info:
            client.get_bookings_for_host(7)

        assert exc_info.value.code == ErrorCode.DATA_SERVICE_UNAVAILABLE

    def test_correlation_id_forwarded(self, make_client, requests_seen) -> None:
        client = make_client(json_response([]))
        set_correlation_id("req-42")

        client.get_booking_dates(12)

        assert requests_seen[0].headers["X-Correlation-ID"] == "req-42"


class TestSingleton:
    """Tests for get_data_service()/reset_data_service()."""

    def test_singleton_uses_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STAYLOCAL_DATA_SERVICE_URL", "http://data.internal:8000/")

        client = get_data_service()

        assert client is get_data_service()
        assert client.base_url == "http://data.internal:8000"

    def test_reset_creates_new_instance(self) -> None:
        first = get_data_service()
        reset_data_service()

        assert get_data_service() is not first
