"""Pydantic DTOs for the Project feature and its line items."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from app.domain.entities import (
    MAX_FILE_NAME_LENGTH,
    Company,
    Environment,
    ProjectFileType,
    ProjectStatus,
)

from ._validators import blank_to_none, ensure_utc, reject_null


def _new_id() -> str:
    return str(uuid4())


class ExtraSchema(BaseModel):
    """Add-on item. Entries submitted without an id get a fresh one."""

    id: str = Field(default_factory=_new_id)
    name: str = Field("", max_length=255)
    quantity: int = Field(1, ge=0)

    model_config = {"from_attributes": True, "str_strip_whitespace": True}


class MeasurementSchema(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str = Field(..., min_length=1, max_length=255, examples=["Parede da pia"])
    value: str = Field(..., max_length=255, examples=["3,20 m"])

    model_config = {"from_attributes": True, "str_strip_whitespace": True}


class ProjectImageSchema(BaseModel):
    id: str = Field(default_factory=_new_id)
    url: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"from_attributes": True}


class ProjectFileSchema(BaseModel):
    """Attachment metadata as stored on the project."""

    id: str = Field(default_factory=_new_id)
    name: str = Field(..., min_length=1, max_length=MAX_FILE_NAME_LENGTH)
    url: str
    size: int = Field(..., ge=0)
    mime_type: str
    type: ProjectFileType
    uploaded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    uploaded_by: str

    model_config = {"from_attributes": True}


class _ProjectFields(BaseModel):
    """Validation shared by the create schema and the update command."""

    model_config = {"str_strip_whitespace": True}

    @field_validator(
        "observations", "delivery_address", "appliances", mode="before", check_fields=False
    )
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)

    @field_validator("extras", check_fields=False)
    @classmethod
    def drop_unnamed_extras(cls, v):
        if v is None:
            return v
        return [extra for extra in v if extra.name]

    @field_validator("environments", check_fields=False)
    @classmethod
    def unique_environments(cls, v):
        if v is None:
            return v
        return list(dict.fromkeys(v))

    @field_validator("measurement_date", "measurement_deadline", check_fields=False)
    @classmethod
    def utc_dates(cls, v):
        return ensure_utc(v)


class ProjectCreate(_ProjectFields):
    """Schema for creating a new project."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Reforma Cozinha Completa"])
    client_id: str = Field(..., min_length=1, max_length=64)
    company: Company
    seller_id: str = Field(..., min_length=1, max_length=64)
    status: ProjectStatus = ProjectStatus.IN_PROGRESS
    observations: str | None = None
    environments: list[Environment] = Field(default_factory=list)
    measurement_date: datetime | None = None
    measurement_deadline: datetime | None = None
    delivery_address: str | None = Field(None, max_length=500)
    appliances: str | None = None
    extras: list[ExtraSchema] = Field(default_factory=list)
    measurements: list[MeasurementSchema] = Field(default_factory=list)
    images: list[ProjectImageSchema] = Field(default_factory=list)
    files: list[ProjectFileSchema] = Field(default_factory=list)


class ProjectUpdate(_ProjectFields):
    """Update command for a project; only explicitly set fields are applied.

    List fields replace the whole list when present.
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    client_id: str | None = Field(None, min_length=1, max_length=64)
    company: Company | None = None
    seller_id: str | None = Field(None, min_length=1, max_length=64)
    status: ProjectStatus | None = None
    observations: str | None = None
    environments: list[Environment] | None = None
    measurement_date: datetime | None = None
    measurement_deadline: datetime | None = None
    delivery_address: str | None = Field(None, max_length=500)
    appliances: str | None = None
    extras: list[ExtraSchema] | None = None
    measurements: list[MeasurementSchema] | None = None
    images: list[ProjectImageSchema] | None = None
    files: list[ProjectFileSchema] | None = None

    @field_validator(
        "name", "client_id", "company", "seller_id", "status",
        "environments", "extras", "measurements", "images", "files",
    )
    @classmethod
    def required_not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info.field_name)


class ProjectResponse(BaseModel):
    """Full project representation for detail views."""

    id: str
    name: str
    client_id: str
    company: Company
    seller_id: str
    status: ProjectStatus
    observations: str | None
    environments: list[Environment]
    measurement_date: datetime | None
    measurement_deadline: datetime | None
    delivery_address: str | None
    appliances: str | None
    extras: list[ExtraSchema]
    measurements: list[MeasurementSchema]
    images: list[ProjectImageSchema]
    files: list[ProjectFileSchema]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectSummaryResponse(BaseModel):
    """Lightweight project representation for list views.

    ``client_name`` / ``seller_name`` are None when the reference is dangling.
    """

    id: str
    name: str
    client_id: str
    client_name: str | None = None
    company: Company
    seller_id: str
    seller_name: str | None = None
    status: ProjectStatus
    environments: list[Environment]
    measurement_date: datetime | None = None
    measurement_deadline: datetime | None = None
    file_count: int = 0
    created_at: datetime
    updated_at: datetime
