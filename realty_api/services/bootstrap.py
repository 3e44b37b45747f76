"""
Backing-mode selection for the record store.

The choice is made once per process: a reachable database gives the SQL
backend (mode ``full``), anything else gives the in-memory fallback (mode
``degraded``). There is no reconnect.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from realty_api.core.config import get_settings
from realty_api.db.create_tables import create_all
from realty_api.db.session import get_engine, check_connection
from realty_api.domain.errors import StoreError
from realty_api.repositories.base import RecordStore
from realty_api.repositories.sql_repository import SQLRepository

from .seeding import fallback_store, seed_collections

logger = logging.getLogger(__name__)

TROUBLESHOOTING = (
    "Check the DATABASE_URL connection string",
    "Verify the database host is reachable from this machine",
    "Check that the database allows connections from this address",
)


def _degrade(reason: str) -> RecordStore:
    settings = get_settings()
    if settings.require_database:
        raise StoreError(f"Database required but unavailable: {reason}")
    logger.error("Database connection error: %s", reason)
    for idx, tip in enumerate(TROUBLESHOOTING, start=1):
        logger.info("  %d. %s", idx, tip)
    logger.warning("Starting WITHOUT a database (degraded mode); records are kept in memory only")
    return fallback_store()


def open_record_store() -> RecordStore:
    """Connect to the configured database or fall back to memory."""
    settings = get_settings()
    if not settings.database_url:
        return _degrade("DATABASE_URL is not configured")

    try:
        engine = get_engine()
        check_connection(engine, settings.db_connect_timeout_seconds)
        create_all(engine)
    except (SQLAlchemyError, OSError, ImportError, ValueError) as exc:
        # a connect timeout is an OSError; a malformed URL raises ValueError
        return _degrade(str(exc) or exc.__class__.__name__)

    logger.info("Connected to database (%s)", engine.url.render_as_string(hide_password=True))
    store = SQLRepository()
    try:
        seed_collections(store)
    except StoreError as exc:
        logger.warning("Seed data error (non-critical): %s", exc)
    return store
