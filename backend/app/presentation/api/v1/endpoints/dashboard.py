"""Dashboard summary endpoint."""

from fastapi import APIRouter, Depends, Query

from app.application.schemas import (
    CompanyCountSchema,
    DashboardPeriod,
    DashboardResponse,
    StatusCountSchema,
)
from app.application.services import DashboardService
from app.infrastructure.dependencies import get_dashboard_service
from app.presentation.api.v1.endpoints.projects import to_project_summary

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    period: DashboardPeriod = Query(DashboardPeriod.MONTH),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    """Counts, breakdowns and the most recently updated projects."""
    summary = service.summary(period)
    return DashboardResponse(
        period=summary.period,
        total_projects=summary.total_projects,
        total_clients=summary.total_clients,
        in_progress_count=summary.in_progress_count,
        completed_count=summary.completed_count,
        projects_in_period=summary.projects_in_period,
        status_breakdown=[
            StatusCountSchema(status=s, count=n) for s, n in summary.status_breakdown
        ],
        company_breakdown=[
            CompanyCountSchema(company=c, count=n) for c, n in summary.company_breakdown
        ],
        recent_projects=[to_project_summary(o) for o in summary.recent_projects],
    )
