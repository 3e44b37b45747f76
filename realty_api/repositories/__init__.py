"""
Persistence adapters.

Two backends implement the same RecordStore surface: SQLRepository for a
reachable database and InMemoryRepository for degraded mode. Routers and
services depend on the interface, never on which backend is active.
"""

from .base import MODE_DEGRADED, MODE_FULL, RecordStore
from .memory_repository import InMemoryRepository
from .sql_repository import SQLRepository

__all__ = ["MODE_DEGRADED", "MODE_FULL", "InMemoryRepository", "RecordStore", "SQLRepository"]
