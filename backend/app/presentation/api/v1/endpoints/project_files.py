"""Project file attachment endpoints."""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, Response, UploadFile, status

from app.application.schemas import (
    FileRenameRequest,
    FileSortField,
    ProjectFileResponse,
    SortDirection,
    UploadResultSchema,
)
from app.application.services import FileUpload, ProjectFileService
from app.domain.exceptions import (
    EntityNotFoundError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from app.infrastructure.dependencies import get_project_file_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects/{project_id}/files", tags=["Project Files"])


@router.get("", response_model=list[ProjectFileResponse])
async def list_files(
    project_id: str,
    search: str | None = Query(None, description="Match on file name"),
    sort: FileSortField = Query(FileSortField.UPLOADED_AT),
    direction: SortDirection | None = Query(None, description="Defaults to asc for name, desc otherwise"),
    service: ProjectFileService = Depends(get_project_file_service),
) -> list[ProjectFileResponse]:
    try:
        files = service.list_files(project_id, search=search, sort_field=sort, direction=direction)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [ProjectFileResponse.model_validate(f, from_attributes=True) for f in files]


@router.post("", response_model=UploadResultSchema, status_code=status.HTTP_201_CREATED)
async def upload_files(
    project_id: str,
    files: list[UploadFile],
    service: ProjectFileService = Depends(get_project_file_service),
) -> UploadResultSchema:
    """Attach one or more files to a project.

    Progress events on ``/events`` are cosmetic; the files are already
    attached when this response is sent.
    """
    uploads: list[FileUpload] = []
    for upload_file in files:
        if not upload_file.filename:
            logger.debug("Skipping multipart part without a file name")
            continue
        content = await upload_file.read()
        uploads.append(
            FileUpload(
                filename=upload_file.filename,
                content=content,
                content_type=upload_file.content_type,
            )
        )
    if not uploads:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No files provided")

    try:
        attached = service.attach_files(project_id, uploads)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UnsupportedFileTypeError as e:
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(e))
    except FileTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))

    return UploadResultSchema(
        files=[ProjectFileResponse.model_validate(f, from_attributes=True) for f in attached],
        total_count=len(attached),
        message=f"{len(attached)} file(s) attached to the project",
    )


@router.put("/{file_id}", response_model=ProjectFileResponse)
async def rename_file(
    project_id: str,
    file_id: str,
    data: FileRenameRequest,
    service: ProjectFileService = Depends(get_project_file_service),
) -> ProjectFileResponse:
    try:
        project_file = service.rename_file(project_id, file_id, data.name)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ProjectFileResponse.model_validate(project_file, from_attributes=True)


@router.delete("/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(
    project_id: str,
    file_id: str,
    service: ProjectFileService = Depends(get_project_file_service),
) -> None:
    try:
        service.delete_file(project_id, file_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{file_id}/content")
async def download_file(
    project_id: str,
    file_id: str,
    service: ProjectFileService = Depends(get_project_file_service),
) -> Response:
    """Serve the stored bytes of an attachment."""
    try:
        project_file, blob = service.get_file_content(project_id, file_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(
        content=blob.content,
        media_type=blob.mime_type,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(project_file.name)}",
        },
    )
