"""
Entity definitions and field-presence rules.

Records travel between layers as plain dicts keyed by their wire names
(``_id``, ``createdAt``, ``updatedAt`` plus the entity fields).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from .errors import ValidationError

PROJECT = "project"
CLIENT = "client"
CONTACT = "contact"
SUBSCRIBER = "subscriber"

REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    PROJECT: ("name", "description", "image"),
    CLIENT: ("name", "designation", "description", "image"),
    CONTACT: ("fullName", "email", "phone", "city"),
    SUBSCRIBER: ("email",),
}

ENTITIES = tuple(REQUIRED_FIELDS)


# Columns backing a unique index keep a bounded length.
MAX_LENGTHS: dict[str, dict[str, int]] = {
    SUBSCRIBER: {"email": 255},
}


def is_present(value: Any) -> bool:
    """Only non-blank strings count; numbers, booleans and objects do not."""
    return isinstance(value, str) and bool(value.strip())


def missing_fields(entity: str, payload: Mapping[str, Any] | None) -> list[str]:
    payload = payload or {}
    return [name for name in REQUIRED_FIELDS[entity] if not is_present(payload.get(name))]


def too_long_fields(entity: str, payload: Mapping[str, Any]) -> list[str]:
    limits = MAX_LENGTHS.get(entity, {})
    return [name for name, limit in limits.items() if len(payload[name]) > limit]


def clean_fields(entity: str, payload: Mapping[str, Any] | None) -> dict[str, str]:
    """
    Keep only the entity's fields.

    Raises ValidationError when any required field is absent, blank, not a
    string, or longer than its column allows.
    """
    missing = missing_fields(entity, payload)
    if missing:
        raise ValidationError(entity, missing)
    rejected = too_long_fields(entity, payload)
    if rejected:
        raise ValidationError(entity, rejected)
    return {name: payload[name] for name in REQUIRED_FIELDS[entity]}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(value: datetime | None) -> str | None:
    """Render a timestamp the way browsers do (``2024-01-31T12:00:00.000Z``)."""
    if value is None:
        return None
    if value.tzinfo is None:
        # SQLite hands back naive datetimes; they are stored as UTC.
        value = value.replace(tzinfo=timezone.utc)
    text = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")
