"""Unit tests for form-layer validation in the request schemas."""

import pytest
from pydantic import ValidationError

from app.application.schemas import (
    ClientCreate,
    ClientUpdate,
    FileRenameRequest,
    ProjectCreate,
    ProjectUpdate,
    SellerCreate,
    SellerUpdate,
)
from app.domain.entities import Company, Environment, ProjectStatus


def test_client_create_requires_name_phone_and_email():
    with pytest.raises(ValidationError) as exc_info:
        ClientCreate(name="Maria", phone="123")
    assert exc_info.value.errors()[0]["loc"] == ("email",)


def test_client_create_rejects_blank_required_fields():
    with pytest.raises(ValidationError):
        ClientCreate(name="   ", phone="123", email="m@m.com")


def test_client_create_normalises_blank_address():
    client = ClientCreate(name=" Maria ", phone="123", email="m@m.com", address="  ")
    assert client.name == "Maria"
    assert client.address is None


def test_client_update_only_dumps_set_fields():
    update = ClientUpdate(phone="999")
    assert update.model_dump(exclude_unset=True) == {"phone": "999"}


def test_client_update_rejects_null_required_field():
    with pytest.raises(ValidationError):
        ClientUpdate(name=None)


def test_client_update_allows_clearing_address():
    update = ClientUpdate(address="")
    assert update.model_dump(exclude_unset=True) == {"address": None}


def test_seller_phone_is_optional():
    seller = SellerCreate(name="Carlos", email="carlos@empresa.com")
    assert seller.phone is None
    with pytest.raises(ValidationError):
        SellerUpdate(email=None)


def test_project_create_defaults():
    project = ProjectCreate(name="Suíte", client_id="1", company="SOHO", seller_id="2")

    assert project.company is Company.SOHO
    assert project.status is ProjectStatus.IN_PROGRESS
    assert project.environments == []
    assert project.extras == []


def test_project_create_requires_company_and_seller():
    with pytest.raises(ValidationError) as exc_info:
        ProjectCreate(name="Suíte", client_id="1")
    missing = {e["loc"][0] for e in exc_info.value.errors()}
    assert missing == {"company", "seller_id"}


def test_project_create_rejects_unknown_enum_literals():
    with pytest.raises(ValidationError):
        ProjectCreate(name="X", client_id="1", company="IKEA", seller_id="1")
    with pytest.raises(ValidationError):
        ProjectCreate(name="X", client_id="1", company="SOHO", seller_id="1", status="Pausado")


def test_project_create_drops_unnamed_extras_and_assigns_ids():
    project = ProjectCreate(
        name="Cozinha",
        client_id="1",
        company="ELIAS",
        seller_id="3",
        extras=[{"name": "Puxador", "quantity": 4}, {"name": "  ", "quantity": 2}],
    )

    assert [e.name for e in project.extras] == ["Puxador"]
    assert project.extras[0].id


def test_project_create_deduplicates_environments():
    project = ProjectCreate(
        name="Casa",
        client_id="1",
        company="SOHO",
        seller_id="1",
        environments=["Cozinha", "Quarto", "Cozinha"],
    )
    assert project.environments == [Environment.KITCHEN, Environment.BEDROOM]


def test_project_dates_default_to_utc():
    project = ProjectCreate(
        name="Casa",
        client_id="1",
        company="SOHO",
        seller_id="1",
        measurement_date="2024-04-10T09:00:00",
    )
    assert project.measurement_date.tzinfo is not None
    assert project.measurement_date.utcoffset().total_seconds() == 0


def test_project_update_is_partial():
    update = ProjectUpdate(status="Finalizado")
    assert update.model_dump(exclude_unset=True) == {"status": ProjectStatus.FINISHED}


@pytest.mark.parametrize("field", ["name", "company", "status", "extras", "files"])
def test_project_update_rejects_null_for_required_fields(field: str):
    with pytest.raises(ValidationError):
        ProjectUpdate(**{field: None})


def test_project_update_allows_clearing_optional_text():
    update = ProjectUpdate(observations="", measurement_date=None)
    assert update.model_dump(exclude_unset=True) == {
        "observations": None,
        "measurement_date": None,
    }


def test_file_rename_rejects_blank_name():
    with pytest.raises(ValidationError):
        FileRenameRequest(name="   ")
    assert FileRenameRequest(name=" contrato.pdf ").name == "contrato.pdf"
