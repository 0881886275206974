"""API routes package.

Routers are organized by domain:

- health: Health check endpoint
- pricing: Stay price breakdowns
- search: Lenient parsing of search dates
- properties: Blocked dates and stay availability
- hosts: Host dashboard
- payments: Simulated payments

All routers are registered in main.py with /api prefix.
"""

from staylocal_api.routes.health import router as health_router
from staylocal_api.routes.hosts import router as hosts_router
from staylocal_api.routes.payments import router as payments_router
from staylocal_api.routes.pricing import router as pricing_router
from staylocal_api.routes.properties import router as properties_router
from staylocal_api.routes.search import router as search_router

__all__ = [
    "health_router",
    "hosts_router",
    "payments_router",
    "pricing_router",
    "properties_router",
    "search_router",
]
