"""Client CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    ClientCreate,
    ClientListItemResponse,
    ClientResponse,
    ClientUpdate,
    ProjectResponse,
)
from app.application.services import ClientService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_client_service

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=list[ClientListItemResponse])
async def list_clients(
    search: str | None = Query(None, description="Match on name or email"),
    service: ClientService = Depends(get_client_service),
) -> list[ClientListItemResponse]:
    """List clients with the number of projects each one has."""
    return [
        ClientListItemResponse.model_validate(
            {**vars(o.client), "project_count": o.project_count}
        )
        for o in service.list_clients(search)
    ]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    try:
        client = service.get_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientResponse.model_validate(client, from_attributes=True)


@router.get("/{client_id}/projects", response_model=list[ProjectResponse])
async def list_client_projects(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> list[ProjectResponse]:
    """Projects referencing this client id, including after the client was deleted."""
    return [
        ProjectResponse.model_validate(p, from_attributes=True)
        for p in service.list_client_projects(client_id)
    ]


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    client = service.create_client(data)
    return ClientResponse.model_validate(client, from_attributes=True)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Apply the fields present in the body; omitted fields keep their values."""
    try:
        client = service.update_client(client_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientResponse.model_validate(client, from_attributes=True)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> None:
    """Delete a client. Its projects are kept."""
    try:
        service.delete_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
