"""Pydantic schemas for the dashboard summary."""

from enum import Enum

from pydantic import BaseModel

from app.domain.entities import Company, ProjectStatus

from .project import ProjectSummaryResponse


class DashboardPeriod(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class StatusCountSchema(BaseModel):
    status: ProjectStatus
    count: int


class CompanyCountSchema(BaseModel):
    company: Company
    count: int


class DashboardResponse(BaseModel):
    period: DashboardPeriod
    total_projects: int
    total_clients: int
    in_progress_count: int
    completed_count: int
    projects_in_period: int
    status_breakdown: list[StatusCountSchema]
    company_breakdown: list[CompanyCountSchema]
    recent_projects: list[ProjectSummaryResponse]
