"""Seed loader: parses the sample-data YAML fixture into domain entities.

Executed once when the application is composed. Dates in the fixture are ISO
strings; date-only values are interpreted as UTC midnight.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from app.domain.entities import (
    Client,
    Company,
    Environment,
    Extra,
    Measurement,
    Project,
    ProjectFile,
    ProjectFileType,
    ProjectImage,
    ProjectStatus,
    Seller,
)

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).with_name("seed_data.yaml")


@dataclass
class SeedData:
    """Entities parsed from a seed fixture."""

    clients: list[Client] = field(default_factory=list)
    sellers: list[Seller] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)


def _to_datetime(value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        parsed = datetime.fromisoformat(str(value))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _str_id(raw: dict[str, Any]) -> dict[str, Any]:
    """Ids are opaque strings even when the fixture spells them as numbers."""
    return {"id": str(raw["id"])} if "id" in raw else {}


def _parse_client(raw: dict[str, Any]) -> Client:
    return Client(
        name=raw["name"],
        phone=str(raw["phone"]),
        email=raw["email"],
        address=raw.get("address"),
        created_at=_to_datetime(raw.get("created_at")) or datetime.now(timezone.utc),
        **_str_id(raw),
    )


def _parse_seller(raw: dict[str, Any]) -> Seller:
    phone = raw.get("phone")
    return Seller(
        name=raw["name"],
        email=raw["email"],
        phone=str(phone) if phone is not None else None,
        **_str_id(raw),
    )


def _parse_project(raw: dict[str, Any]) -> Project:
    now = datetime.now(timezone.utc)
    created_at = _to_datetime(raw.get("created_at")) or now
    return Project(
        name=raw["name"],
        client_id=str(raw["client_id"]),
        company=Company(raw["company"]),
        seller_id=str(raw["seller_id"]),
        status=ProjectStatus(raw.get("status", ProjectStatus.IN_PROGRESS.value)),
        observations=raw.get("observations"),
        environments=[Environment(e) for e in raw.get("environments") or []],
        measurement_date=_to_datetime(raw.get("measurement_date")),
        measurement_deadline=_to_datetime(raw.get("measurement_deadline")),
        delivery_address=raw.get("delivery_address"),
        appliances=raw.get("appliances"),
        extras=[
            Extra(name=e["name"], quantity=int(e.get("quantity", 1)), **_str_id(e))
            for e in raw.get("extras") or []
        ],
        measurements=[
            Measurement(name=m["name"], value=str(m["value"]), **_str_id(m))
            for m in raw.get("measurements") or []
        ],
        images=[
            ProjectImage(
                url=i["url"],
                name=i["name"],
                created_at=_to_datetime(i.get("created_at")) or now,
                **_str_id(i),
            )
            for i in raw.get("images") or []
        ],
        files=[
            ProjectFile(
                name=f["name"],
                url=f["url"],
                size=int(f.get("size", 0)),
                mime_type=f.get("mime_type", "application/octet-stream"),
                type=ProjectFileType(f.get("type", ProjectFileType.OTHER.value)),
                uploaded_by=f.get("uploaded_by", ""),
                uploaded_at=_to_datetime(f.get("uploaded_at")) or now,
                **_str_id(f),
            )
            for f in raw.get("files") or []
        ],
        created_at=created_at,
        updated_at=_to_datetime(raw.get("updated_at")) or created_at,
        **_str_id(raw),
    )


def load_seed_data(path: str | Path | None = None) -> SeedData:
    """Parse a seed fixture. Defaults to the packaged sample data."""
    seed_path = Path(path) if path else DEFAULT_SEED_FILE
    with open(seed_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    seed = SeedData(
        clients=[_parse_client(c) for c in data.get("clients") or []],
        sellers=[_parse_seller(s) for s in data.get("sellers") or []],
        projects=[_parse_project(p) for p in data.get("projects") or []],
    )
    logger.info(
        "Loaded seed data from %s: %d clients, %d sellers, %d projects",
        seed_path.name, len(seed.clients), len(seed.sellers), len(seed.projects),
    )
    return seed
