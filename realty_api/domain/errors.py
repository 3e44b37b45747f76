"""Error taxonomy for record store operations."""

from __future__ import annotations


class RecordError(Exception):
    """Base exception for record store workflows."""


class ValidationError(RecordError):
    """Raised when a required field is missing, not a string, or too long."""

    def __init__(self, entity: str, missing: list[str] | None = None):
        self.entity = entity
        self.missing = list(missing or [])
        super().__init__(f"{entity} write rejected: missing fields")


class NotFoundError(RecordError):
    """Raised when a delete targets a record that does not exist."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")


class DuplicateError(RecordError):
    """Raised when a unique key (subscriber email) is already taken."""

    def __init__(self, entity: str, key: str, value: str):
        self.entity = entity
        self.key = key
        self.value = value
        super().__init__(f"{entity} with {key}={value!r} already exists")


class StoreError(RecordError):
    """Raised when the backing store fails; the cause is chained."""
