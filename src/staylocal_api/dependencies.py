"""FastAPI dependency providers for booking engine services.

Services are created lazily and cached with @lru_cache. All of them share
the data-service client singleton.

Service Dependency Graph:
    Settings (get_settings)
        └── PricingService
    DataServiceClient (singleton via get_data_service)
        ├── BookingService (+ PricingService)
        ├── PaymentService
        ├── PropertySearchService
        └── HostDashboardService

Testing:
    Override these in app.dependency_overrides, and call reset_services()
    to clear cached instances between tests.
"""

from functools import lru_cache

from staylocal.config import get_settings
from staylocal.services.booking import BookingService
from staylocal.services.data_service import get_data_service, reset_data_service
from staylocal.services.host_dashboard import HostDashboardService
from staylocal.services.payment_service import PaymentService
from staylocal.services.pricing import PricingService
from staylocal.services.search import PropertySearchService


@lru_cache
def get_pricing_service() -> PricingService:
    """Get cached PricingService configured from settings."""
    return PricingService(settings=get_settings())


@lru_cache
def get_booking_service() -> BookingService:
    """Get cached BookingService.

    Returns:
        BookingService using the data-service singleton and PricingService.
    """
    return BookingService(
        data_service=get_data_service(),
        pricing=get_pricing_service(),
    )


@lru_cache
def get_payment_service() -> PaymentService:
    """Get cached PaymentService."""
    return PaymentService(data_service=get_data_service())


@lru_cache
def get_search_service() -> PropertySearchService:
    return PropertySearchService(data_service=get_data_service())


@lru_cache
def get_host_dashboard_service() -> HostDashboardService:
    """Get cached HostDashboardService."""
    return HostDashboardService(data_service=get_data_service())


def reset_services() -> None:
    """Clear all cached service instances and the data-service client."""
    get_pricing_service.cache_clear()
    get_booking_service.cache_clear()
    get_payment_service.cache_clear()
    get_host_dashboard_service.cache_clear()
    get_search_service.cache_clear()

    reset_data_service()
