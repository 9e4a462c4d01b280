"""Shared field normalisation for form-layer schemas."""

from datetime import datetime, timezone
from typing import Any


def blank_to_none(value: Any) -> Any:
    """Treat empty or whitespace-only strings as an absent optional value."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def reject_null(value: Any, field_name: str) -> Any:
    """Fields that are required on create may be omitted on update, never nulled."""
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value


def ensure_utc(value: datetime | None) -> datetime | None:
    """Naive datetimes are taken to be UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
