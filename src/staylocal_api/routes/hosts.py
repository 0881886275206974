"""Host dashboard endpoint."""

from fastapi import APIRouter, Depends

from staylocal.models.host import HostDashboardSummary
from staylocal.services.host_dashboard import HostDashboardService
from staylocal_api.dependencies import get_host_dashboard_service

router = APIRouter(tags=["hosts"])


@router.get(
    "/hosts/{host_id}/dashboard",
    summary="Get host dashboard",
    description="""
Summary of a host's listings and bookings.

**Notes:**
- `total_earnings` sums confirmed and completed bookings (INR)
- `upcoming_check_ins` lists confirmed bookings from today onwards,
  earliest first
""",
    response_model=HostDashboardSummary,
    responses={
        502: {"description": "Data service unavailable"},
    },
)
def get_host_dashboard(
    host_id: int,
    service: HostDashboardService = Depends(get_host_dashboard_service),
) -> HostDashboardSummary:
    return service.get_summary(host_id)
