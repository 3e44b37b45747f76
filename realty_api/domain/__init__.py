"""Domain rules (entities, validation, errors) independent of storage and HTTP."""

from .errors import DuplicateError, NotFoundError, RecordError, StoreError, ValidationError
from .records import CLIENT, CONTACT, ENTITIES, PROJECT, REQUIRED_FIELDS, SUBSCRIBER

__all__ = [
    "CLIENT",
    "CONTACT",
    "ENTITIES",
    "PROJECT",
    "REQUIRED_FIELDS",
    "SUBSCRIBER",
    "DuplicateError",
    "NotFoundError",
    "RecordError",
    "StoreError",
    "ValidationError",
]
