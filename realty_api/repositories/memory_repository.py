"""
In-process record store used when the database is unreachable at startup.

Records live only for the lifetime of the owning object. Each instance holds
its own collections, so tests can build as many independent stores as they
need.
"""
from __future__ import annotations

import copy
import secrets
import threading
from typing import Any, Iterable, Mapping, Optional

from realty_api.domain.errors import DuplicateError, NotFoundError
from realty_api.domain.records import (
    CLIENT,
    CONTACT,
    ENTITIES,
    PROJECT,
    SUBSCRIBER,
    clean_fields,
    isoformat,
    utcnow,
)

from .base import MODE_DEGRADED, UNIQUE_KEYS, check_deletable, check_unique_key

ID_PREFIXES = {
    PROJECT: "fallback-p",
    CLIENT: "fallback-c",
    CONTACT: "fallback-contact",
    SUBSCRIBER: "fallback-s",
}


class InMemoryRepository:
    """List-backed store; index 0 of each collection is the newest record."""

    mode = MODE_DEGRADED

    def __init__(self, initial: Optional[Mapping[str, Iterable[Mapping[str, Any]]]] = None) -> None:
        self._collections: dict[str, list[dict]] = {entity: [] for entity in ENTITIES}
        self._lock = threading.Lock()
        for entity, records in (initial or {}).items():
            self._collections[entity] = [self._stamp(entity, record) for record in records]

    def _stamp(self, entity: str, record: Mapping[str, Any]) -> dict:
        """Complete a seed record with id and timestamps when it lacks them."""
        now = isoformat(utcnow())
        stamped = dict(record)
        stamped.setdefault("_id", self._new_id(entity))
        stamped.setdefault("createdAt", now)
        stamped.setdefault("updatedAt", stamped["createdAt"])
        return stamped

    @staticmethod
    def _new_id(entity: str) -> str:
        return f"{ID_PREFIXES[entity]}-{secrets.token_hex(6)}"

    def list(self, entity: str) -> list[dict]:
        with self._lock:
            return copy.deepcopy(self._collections[entity])

    def count(self, entity: str) -> int:
        with self._lock:
            return len(self._collections[entity])

    def create(self, entity: str, payload: Mapping[str, Any]) -> dict:
        fields = clean_fields(entity, payload)
        now = isoformat(utcnow())
        record = {"_id": self._new_id(entity), **fields, "createdAt": now, "updatedAt": now}
        with self._lock:
            key = UNIQUE_KEYS.get(entity)
            if key and self._find(entity, key, fields[key]) is not None:
                raise DuplicateError(entity, key, fields[key])
            self._collections[entity].insert(0, record)
        return dict(record)

    def delete_by_id(self, entity: str, record_id: str) -> dict:
        check_deletable(entity)
        with self._lock:
            records = self._collections[entity]
            for idx, record in enumerate(records):
                if record["_id"] == record_id:
                    return records.pop(idx)
        raise NotFoundError(entity, record_id)

    def _find(self, entity: str, key: str, value: str) -> Optional[dict]:
        for record in self._collections[entity]:
            if record.get(key) == value:
                return record
        return None

    def find_by(self, entity: str, key: str, value: str) -> Optional[dict]:
        with self._lock:
            found = self._find(entity, key, value)
            return dict(found) if found else None

    def upsert_by_unique_key(self, entity: str, key: str, payload: Mapping[str, Any]) -> tuple[dict, bool]:
        check_unique_key(entity, key)
        fields = clean_fields(entity, payload)
        try:
            return self.create(entity, fields), True
        except DuplicateError:
            return self.find_by(entity, key, fields[key]), False
