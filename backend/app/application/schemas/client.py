"""Pydantic DTOs (Data Transfer Objects) for the Client feature."""

from datetime import datetime

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from ._validators import blank_to_none, reject_null


class ClientCreate(BaseModel):
    """Schema for creating a new client."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Maria Silva"])
    phone: str = Field(..., min_length=1, max_length=50, examples=["(11) 99999-1234"])
    email: str = Field(..., min_length=1, max_length=255, examples=["maria.silva@email.com"])
    address: str | None = Field(None, max_length=500)

    model_config = {"str_strip_whitespace": True}

    @field_validator("address", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)


class ClientUpdate(BaseModel):
    """Update command for a client; only explicitly set fields are applied."""

    name: str | None = Field(None, min_length=1, max_length=255)
    phone: str | None = Field(None, min_length=1, max_length=50)
    email: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = Field(None, max_length=500)

    model_config = {"str_strip_whitespace": True}

    @field_validator("name", "phone", "email")
    @classmethod
    def required_not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info.field_name)

    @field_validator("address", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)


class ClientResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    phone: str
    email: str
    address: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class ClientListItemResponse(ClientResponse):
    """Client row for list views, with the number of projects referencing it."""

    project_count: int
