"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from realty_api.core.config import get_settings

Base = declarative_base()


def _connect_args(url: str, timeout: float) -> dict:
    backend = make_url(url).get_backend_name()
    if backend == "sqlite":
        return {"timeout": timeout}
    if backend in {"postgresql", "mysql", "mariadb"}:
        return {"connect_timeout": max(1, math.ceil(timeout))}
    return {}


def build_engine(url: str, timeout: float) -> Engine:
    options = {}
    if make_url(url).get_backend_name() != "sqlite":
        # in-memory SQLite uses a pool without a checkout timeout
        options["pool_timeout"] = timeout
    return create_engine(
        url,
        future=True,
        pool_pre_ping=True,
        connect_args=_connect_args(url, timeout),
        **options,
    )


@lru_cache
def get_engine() -> Engine:
    settings = get_settings()
    url = (settings.database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return build_engine(url, settings.db_connect_timeout_seconds)


@lru_cache
def _get_sessionmaker():
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, future=True)


@contextmanager
def get_session() -> Session:
    session: Session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()


def check_connection(engine: Engine, timeout: float) -> None:
    """
    Run ``SELECT 1`` against the engine, giving up after ``timeout`` seconds.

    Raises the driver error, or TimeoutError when the bound is exceeded.
    """
    def _ping() -> None:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="db-connect")
    try:
        executor.submit(_ping).result(timeout=timeout)
    except FutureTimeout as exc:
        raise TimeoutError(f"database did not answer within {timeout:g}s") from exc
    finally:
        executor.shutdown(wait=False)
