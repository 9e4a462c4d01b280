"""Project CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    ProjectCreate,
    ProjectResponse,
    ProjectSummaryResponse,
    ProjectUpdate,
)
from app.application.services import ProjectOverview, ProjectService
from app.domain.entities import Company, ProjectStatus
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_project_service

router = APIRouter(prefix="/projects", tags=["Projects"])


def to_project_summary(overview: ProjectOverview) -> ProjectSummaryResponse:
    project = overview.project
    return ProjectSummaryResponse(
        id=project.id,
        name=project.name,
        client_id=project.client_id,
        client_name=overview.client_name,
        company=project.company,
        seller_id=project.seller_id,
        seller_name=overview.seller_name,
        status=project.status,
        environments=project.environments,
        measurement_date=project.measurement_date,
        measurement_deadline=project.measurement_deadline,
        file_count=len(project.files),
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


@router.get("", response_model=list[ProjectSummaryResponse])
async def list_projects(
    search: str | None = Query(None, description="Match on project name"),
    status_filter: ProjectStatus | None = Query(None, alias="status"),
    company: Company | None = Query(None),
    client_id: str | None = Query(None, description="Only projects of this client"),
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectSummaryResponse]:
    """Retrieve projects matching every given filter."""
    overviews = service.list_projects(
        search=search,
        status=status_filter,
        company=company,
        client_id=client_id,
    )
    return [to_project_summary(o) for o in overviews]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    try:
        project = service.get_project(project_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Create a project. Client and seller ids are not checked for existence."""
    project = service.create_project(data)
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    try:
        project = service.update_project(project_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> None:
    try:
        service.delete_project(project_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
