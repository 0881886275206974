"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

from staylocal import __version__
from staylocal_api.models.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check",
    response_model=HealthResponse,
)
async def health() -> HealthResponse:
    """Liveness check. Does not contact the data service."""
    return HealthResponse(
        timestamp=datetime.now(UTC).isoformat(),
        version=__version__,
    )
