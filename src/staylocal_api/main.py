"""FastAPI application for the StayLocal booking engine REST API.

Provides REST endpoints for:
- Health checks
- Pricing, search dates and property availability
- Host dashboard
- Simulated payments
"""

from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from staylocal import __version__
from staylocal.config import get_settings
from staylocal.utils.logging import configure_logging, get_logger
from staylocal_api.exceptions import register_exception_handlers
from staylocal_api.middleware.correlation import CorrelationIdMiddleware
from staylocal_api.routes import (
    health_router,
    hosts_router,
    payments_router,
    pricing_router,
    properties_router,
    search_router,
)

settings = get_settings()
configure_logging(settings.log_level)
logger = get_logger(__name__)

app = FastAPI(
    title="StayLocal Booking API",
    description="REST API for pricing, availability and booking operations",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

register_exception_handlers(app)

for router in (
    health_router,
    pricing_router,
    search_router,
    properties_router,
    hosts_router,
    payments_router,
):
    app.include_router(router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Liveness check that does not touch any dependency."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "staylocal-api",
    }


# AWS Lambda entry point
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Serve the API with uvicorn; ``reload`` is meant for local development."""
    import uvicorn

    logger.info("Starting StayLocal API on %s:%s", host, port)
    if reload:
        # reload needs an import string
        uvicorn.run("staylocal_api.main:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
