"""HTTP client for the remote marketplace data service.

The data service owns properties, bookings, payments and users and exposes
them over a JSON REST API. This wrapper turns its responses into typed
models and its failures into BookingError.
"""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from staylocal.config import get_settings
from staylocal.models import (
    Booking,
    BookingCreate,
    BookingDate,
    BookingError,
    ErrorCode,
    Payment,
    PaymentCreate,
    Property,
    PropertyFilter,
)
from staylocal.utils.logging import get_correlation_id, get_logger

logger = get_logger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"

ModelT = TypeVar("ModelT", bound=BaseModel)

# Module-level singleton for connection reuse
_data_service_instance: "DataServiceClient | None" = None


def get_data_service() -> "DataServiceClient":
    """Get or create the singleton data-service client.

    Returns:
        Shared DataServiceClient configured from settings
    """
    global _data_service_instance
    if _data_service_instance is None:
        settings = get_settings()
        _data_service_instance = DataServiceClient(
            base_url=settings.data_service_url,
            timeout=settings.data_service_timeout,
        )
    return _data_service_instance


def reset_data_service() -> None:
    """Close and drop the singleton client (for testing only)."""
    global _data_service_instance
    if _data_service_instance is not None:
        _data_service_instance.close()
    _data_service_instance = None


def decode_record(model: type[ModelT], data: Any, path: str) -> ModelT:
    """Validate one data-service record.

    Raises:
        BookingError: DATA_SERVICE_UNAVAILABLE if the record is malformed
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(
            "Malformed %s record from %s (%d errors)",
            model.__name__,
            path,
            e.error_count(),
        )
        raise BookingError(
            ErrorCode.DATA_SERVICE_UNAVAILABLE,
            details={"path": path, "reason": "malformed record"},
        ) from e


def decode_records(model: type[ModelT], data: Any, path: str) -> list[ModelT]:
    """Validate a list response; an empty body is an empty list."""
    if data is None:
        return []
    if not isinstance(data, list):
        logger.error("Expected a list from %s, got %s", path, type(data).__name__)
        raise BookingError(
            ErrorCode.DATA_SERVICE_UNAVAILABLE,
            details={"path": path, "reason": "malformed record"},
        )
    return [decode_record(model, item, path) for item in data]


class DataServiceClient:
    """Typed wrapper over the data service REST endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Data service root URL (without /api)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. MockTransport in tests)
        """
        self.base_url = base_url
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, str] | None = None,
        token: str | None = None,
        not_found: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
        unauthorized: ErrorCode = ErrorCode.AUTH_REQUIRED,
    ) -> Any:
        """Send a request and decode the JSON body.

        Raises:
            BookingError: not_found on 404, unauthorized on 401,
                DATA_SERVICE_UNAVAILABLE on other failures or a non-JSON body
        """
        headers: dict[str, str] = {}
        if correlation_id := get_correlation_id():
            headers[CORRELATION_ID_HEADER] = correlation_id
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self._client.request(
                method, path, json=json, params=params, headers=headers
            )
        except httpx.HTTPError as e:
            logger.error("Data service request failed: %s %s: %s", method, path, e)
            raise BookingError(
                ErrorCode.DATA_SERVICE_UNAVAILABLE,
                details={"path": path},
            ) from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise BookingError(not_found, details={"path": path})
        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise BookingError(unauthorized)
        if response.is_error:
            logger.error(
                "Data service returned %s for %s %s",
                response.status_code,
                method,
                path,
            )
            raise BookingError(
                ErrorCode.DATA_SERVICE_UNAVAILABLE,
                details={"path": path, "status": str(response.status_code)},
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error("Data service sent a non-JSON body for %s %s", method, path)
            raise BookingError(
                ErrorCode.DATA_SERVICE_UNAVAILABLE,
                details={"path": path, "reason": "invalid JSON"},
            ) from e

    # Properties

    def get_property(self, property_id: int) -> Property:
        path = f"/api/properties/{property_id}"
        return decode_record(Property, self._request("GET", path), path)

    def list_host_properties(self, host_id: int) -> list[Property]:
        path = f"/api/hosts/{host_id}/properties"
        return decode_records(Property, self._request("GET", path), path)

    def search_properties(self, filters: PropertyFilter) -> list[Property]:
        """Properties matching the location, type, guest and price filters.

        Dates are not sent; the data service does not know about them.
        """
        path = "/api/properties"
        data = self._request("GET", path, params=filters.to_query_params())
        return decode_records(Property, data, path)

    # Bookings

    def get_booking_dates(self, property_id: int) -> list[BookingDate]:
        """Existing booking date records for one property.

        Args:
            property_id: Property to query

        Returns:
            BookingDate records (checkInDate, checkOutDate, status)
        """
        path = f"/api/properties/{property_id}/bookings"
        return decode_records(BookingDate, self._request("GET", path), path)

    def get_bookings_for_host(self, host_id: int) -> list[Booking]:
        """All bookings across a host's properties in one query.

        Args:
            host_id: Host user ID

        Returns:
            Bookings for every property the host owns
        """
        path = f"/api/hosts/{host_id}/bookings"
        return decode_records(Booking, self._request("GET", path), path)

    def list_user_bookings(self, token: str | None = None) -> list[Booking]:
        """Bookings made by the user the token belongs to."""
        path = "/api/bookings"
        return decode_records(Booking, self._request("GET", path, token=token), path)

    def create_booking(self, payload: BookingCreate, token: str | None = None) -> Booking:
        path = "/api/bookings"
        data = self._request(
            "POST",
            path,
            json=payload.model_dump(mode="json", by_alias=True),
            token=token,
        )
        return decode_record(Booking, data, path)

    def get_booking(self, booking_id: int) -> Booking:
        path = f"/api/bookings/{booking_id}"
        data = self._request("GET", path, not_found=ErrorCode.RESERVATION_NOT_FOUND)
        return decode_record(Booking, data, path)

    # Payments

    def create_payment(self, payload: PaymentCreate) -> Payment:
        path = "/api/payments"
        data = self._request(
            "POST",
            path,
            json=payload.model_dump(mode="json", by_alias=True),
        )
        return decode_record(Payment, data, path)

    def get_booking_payment(self, booking_id: int) -> Payment:
        path = f"/api/bookings/{booking_id}/payment"
        return decode_record(Payment, self._request("GET", path), path)

    # Users

    def login(self, username: str, password: str) -> dict[str, Any]:
        """Exchange credentials for the user record.

        Raises:
            BookingError: INVALID_CREDENTIALS on 401
        """
        path = "/api/users/login"
        data = self._request(
            "POST",
            path,
            json={"username": username, "password": password},
            unauthorized=ErrorCode.INVALID_CREDENTIALS,
        )
        if not isinstance(data, dict):
            raise BookingError(
                ErrorCode.DATA_SERVICE_UNAVAILABLE,
                details={"path": path, "reason": "malformed record"},
            )
        return data

    def logout(self, token: str | None = None) -> None:
        self._request("POST", "/api/users/logout", json={}, token=token)
