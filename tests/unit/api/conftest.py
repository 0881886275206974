"""Fixtures for API route tests.

Routes are exercised through TestClient with service dependencies
overridden; the data service is always a MagicMock.
"""

from typing import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from staylocal.config import Settings
from staylocal.services.booking import BookingService
from staylocal.services.host_dashboard import HostDashboardService
from staylocal.services.payment_service import PaymentService
from staylocal.services.pricing import PricingService
from staylocal.services.search import PropertySearchService
from staylocal_api.dependencies import (
    get_booking_service,
    get_host_dashboard_service,
    get_payment_service,
    get_pricing_service,
    get_search_service,
    reset_services,
)
from staylocal_api.main import app


@pytest.fixture
def client(mock_data_service: MagicMock) -> Generator[TestClient, None, None]:
    """Test client whose services share mock_data_service."""
    pricing = PricingService(Settings())
    app.dependency_overrides[get_pricing_service] = lambda: pricing
    app.dependency_overrides[get_booking_service] = lambda: BookingService(
        mock_data_service, pricing
    )
    app.dependency_overrides[get_payment_service] = lambda: PaymentService(mock_data_service)
    app.dependency_overrides[get_host_dashboard_service] = lambda: HostDashboardService(
        mock_data_service
    )
    app.dependency_overrides[get_search_service] = lambda: PropertySearchService(
        mock_data_service
    )

    yield TestClient(app)

    app.dependency_overrides.clear()
    reset_services()
