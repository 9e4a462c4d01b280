"""Pydantic DTOs for the Seller feature."""

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from ._validators import blank_to_none, reject_null


class SellerCreate(BaseModel):
    """Schema for creating a new seller."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Carlos Mendes"])
    email: str = Field(..., min_length=1, max_length=255, examples=["carlos@empresa.com"])
    phone: str | None = Field(None, max_length=50)

    model_config = {"str_strip_whitespace": True}

    @field_validator("phone", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)


class SellerUpdate(BaseModel):
    """Update command for a seller. All fields are optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=50)

    model_config = {"str_strip_whitespace": True}

    @field_validator("name", "email")
    @classmethod
    def required_not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info.field_name)

    @field_validator("phone", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)


class SellerResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None

    model_config = {"from_attributes": True}


class SellerListItemResponse(SellerResponse):
    project_count: int
