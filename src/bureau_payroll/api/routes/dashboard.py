"""Dashboard endpoints."""

from fastapi import APIRouter

from bureau_payroll.api.dependencies import AppSettings, DbSession, TenantId, Today
from bureau_payroll.api.schemas import DashboardStatsResponse, ErrorResponse
from bureau_payroll.services import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStatsResponse,
    responses={400: {"model": ErrorResponse}},
)
async def dashboard_stats(
    db: DbSession,
    tenant_id: TenantId,
    today: Today,
    settings: AppSettings,
) -> DashboardStatsResponse:
    """Headline counts and the next HMRC deadlines for the tenant."""
    stats = await DashboardService(db, due_soon_days=settings.due_soon_days).stats(
        tenant_id, today
    )
    return DashboardStatsResponse.model_validate(stats)
