"""Pydantic schemas for project file attachment endpoints."""

from enum import Enum

from pydantic import BaseModel, Field

from app.domain.entities import MAX_FILE_NAME_LENGTH

from .project import ProjectFileSchema


class FileSortField(str, Enum):
    NAME = "name"
    TYPE = "type"
    UPLOADED_AT = "uploaded_at"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ProjectFileResponse(ProjectFileSchema):
    """Attachment metadata returned to the client.

    Shares the constraints of the stored attachment so both views agree.
    """


class FileRenameRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_FILE_NAME_LENGTH, examples=["planta-baixa.pdf"])

    model_config = {"str_strip_whitespace": True}


class UploadResultSchema(BaseModel):
    """Response after uploading file(s)."""

    files: list[ProjectFileResponse]
    total_count: int
    message: str
