"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Mapping, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from realty_api.db.models import Client, Contact, Project, Subscriber
from realty_api.db.session import get_session
from realty_api.domain.errors import DuplicateError, NotFoundError, StoreError
from realty_api.domain.records import (
    CLIENT,
    CONTACT,
    PROJECT,
    REQUIRED_FIELDS,
    SUBSCRIBER,
    clean_fields,
    isoformat,
    utcnow,
)

from .base import MODE_FULL, UNIQUE_KEYS, check_deletable, check_unique_key

logger = logging.getLogger(__name__)

MODELS = {
    PROJECT: Project,
    CLIENT: Client,
    CONTACT: Contact,
    SUBSCRIBER: Subscriber,
}

# wire name -> ORM attribute, where they differ
ATTRIBUTES = {
    "fullName": "full_name",
}


def _attr(field: str) -> str:
    return ATTRIBUTES.get(field, field)


def _to_dict(entity: str, row) -> dict:
    record = {"_id": row.id}
    for field in REQUIRED_FIELDS[entity]:
        record[field] = getattr(row, _attr(field))
    record["createdAt"] = isoformat(row.created_at)
    record["updatedAt"] = isoformat(row.updated_at)
    return record


@contextmanager
def _store_errors(action: str):
    try:
        yield
    except SQLAlchemyError as exc:
        raise StoreError(f"Failed to {action}") from exc


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    mode = MODE_FULL

    def list(self, entity: str) -> list[dict]:
        model = MODELS[entity]
        with _store_errors(f"list {entity} records"), get_session() as session:
            stmt = select(model).order_by(model.created_at.desc(), model.pk.desc())
            return [_to_dict(entity, row) for row in session.execute(stmt).scalars().all()]

    def count(self, entity: str) -> int:
        model = MODELS[entity]
        with _store_errors(f"count {entity} records"), get_session() as session:
            return int(session.execute(select(func.count()).select_from(model)).scalar_one())

    def create(self, entity: str, payload: Mapping[str, Any]) -> dict:
        fields = clean_fields(entity, payload)
        model = MODELS[entity]
        now = utcnow()
        row = model(
            created_at=now,
            updated_at=now,
            **{_attr(name): value for name, value in fields.items()},
        )
        with _store_errors(f"create {entity}"), get_session() as session:
            session.add(row)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                key = UNIQUE_KEYS.get(entity)
                if key is None:
                    raise
                raise DuplicateError(entity, key, fields[key]) from exc
            session.refresh(row)
            return _to_dict(entity, row)

    def delete_by_id(self, entity: str, record_id: str) -> dict:
        check_deletable(entity)
        model = MODELS[entity]
        with _store_errors(f"delete {entity}"), get_session() as session:
            row = session.execute(select(model).where(model.id == record_id)).scalar_one_or_none()
            if row is None:
                raise NotFoundError(entity, record_id)
            record = _to_dict(entity, row)
            session.delete(row)
            session.commit()
            return record

    def find_by(self, entity: str, key: str, value: str) -> Optional[dict]:
        model = MODELS[entity]
        with _store_errors(f"look up {entity}"), get_session() as session:
            stmt = select(model).where(getattr(model, _attr(key)) == value).limit(1)
            row = session.execute(stmt).scalars().first()
            return _to_dict(entity, row) if row else None

    def upsert_by_unique_key(self, entity: str, key: str, payload: Mapping[str, Any]) -> tuple[dict, bool]:
        check_unique_key(entity, key)
        fields = clean_fields(entity, payload)
        existing = self.find_by(entity, key, fields[key])
        if existing:
            return existing, False
        try:
            return self.create(entity, fields), True
        except DuplicateError:
            # Lost a race against a concurrent insert of the same key.
            logger.info("%s %s=%r inserted concurrently; returning stored record", entity, key, fields[key])
            existing = self.find_by(entity, key, fields[key])
            if existing is None:
                raise StoreError(f"{entity} {key} collision could not be resolved")
            return existing, False
