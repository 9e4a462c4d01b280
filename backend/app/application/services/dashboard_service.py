"""Application service computing the dashboard summary from the store."""

import calendar
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from app.application.interfaces import EntityStore
from app.application.schemas import DashboardPeriod
from app.domain.entities import Company, ProjectStatus

from .project_service import ProjectOverview, build_overview

RECENT_PROJECTS_LIMIT = 5


@dataclass
class DashboardSummary:
    period: DashboardPeriod
    total_projects: int
    total_clients: int
    in_progress_count: int
    completed_count: int
    projects_in_period: int
    status_breakdown: list[tuple[ProjectStatus, int]] = field(default_factory=list)
    company_breakdown: list[tuple[Company, int]] = field(default_factory=list)
    recent_projects: list[ProjectOverview] = field(default_factory=list)


def period_bounds(period: DashboardPeriod, now: datetime) -> tuple[datetime, datetime]:
    """Inclusive [start, end] range a period covers relative to ``now``."""
    if period is DashboardPeriod.WEEK:
        return now - timedelta(days=7), now
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period is DashboardPeriod.YEAR:
        start = midnight.replace(month=1, day=1)
        end = midnight.replace(month=12, day=31)
    else:
        last_day = calendar.monthrange(now.year, now.month)[1]
        start = midnight.replace(day=1)
        end = midnight.replace(day=last_day)
    return start, end.replace(hour=23, minute=59, second=59, microsecond=999999)


class DashboardService:
    """Derives counts and breakdowns over the current store snapshot."""

    def __init__(
        self,
        store: EntityStore,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._store = store
        self._clock = clock

    def summary(self, period: DashboardPeriod = DashboardPeriod.MONTH) -> DashboardSummary:
        projects = self._store.projects
        start, end = period_bounds(period, self._clock())

        def count_status(status: ProjectStatus) -> int:
            return sum(1 for p in projects if p.status == status)

        status_breakdown = [(s, count_status(s)) for s in ProjectStatus]
        recent = sorted(projects, key=lambda p: p.updated_at, reverse=True)[:RECENT_PROJECTS_LIMIT]

        return DashboardSummary(
            period=period,
            total_projects=len(projects),
            total_clients=len(self._store.clients),
            in_progress_count=count_status(ProjectStatus.IN_PROGRESS),
            completed_count=count_status(ProjectStatus.FINISHED),
            projects_in_period=sum(1 for p in projects if start <= p.created_at <= end),
            status_breakdown=[(s, n) for s, n in status_breakdown if n > 0],
            company_breakdown=[
                (c, sum(1 for p in projects if p.company == c)) for c in Company
            ],
            recent_projects=[build_overview(self._store, p) for p in recent],
        )
