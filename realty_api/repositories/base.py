"""Storage interface shared by the persistent and in-memory backends."""
from __future__ import annotations

from typing import Any, Mapping, Protocol

from realty_api.domain.records import PROJECT, SUBSCRIBER

MODE_FULL = "full"
MODE_DEGRADED = "degraded"

# Only projects can be deleted; only subscribers are upserted (by email).
DELETABLE = frozenset({PROJECT})
UNIQUE_KEYS = {SUBSCRIBER: "email"}


class RecordStore(Protocol):
    """CRUD surface per entity type; records are wire-shaped dicts."""

    mode: str

    def list(self, entity: str) -> list[dict]:
        """Records ordered newest-first; empty list on an empty store."""
        ...

    def count(self, entity: str) -> int:
        ...

    def create(self, entity: str, payload: Mapping[str, Any]) -> dict:
        """Validate, stamp id/timestamps and store. Raises ValidationError."""
        ...

    def delete_by_id(self, entity: str, record_id: str) -> dict:
        """Remove and return the record. Raises NotFoundError."""
        ...

    def upsert_by_unique_key(self, entity: str, key: str, payload: Mapping[str, Any]) -> tuple[dict, bool]:
        """Return ``(record, created)``; an existing key yields the stored record untouched."""
        ...


def check_deletable(entity: str) -> None:
    if entity not in DELETABLE:
        raise ValueError(f"{entity} records cannot be deleted")


def check_unique_key(entity: str, key: str) -> None:
    if UNIQUE_KEYS.get(entity) != key:
        raise ValueError(f"{key} is not a unique key of {entity}")
