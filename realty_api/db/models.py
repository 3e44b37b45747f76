"""SQLAlchemy models for the four site collections."""
from __future__ import annotations

import secrets

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from .session import Base


def new_record_id() -> str:
    return secrets.token_hex(12)


class RecordMixin:
    # pk keeps insertion order stable when two rows share a created_at
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, nullable=False, default=new_record_id)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class Project(RecordMixin, Base):
    __tablename__ = "projects"

    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    image = Column(Text, nullable=False)


class Client(RecordMixin, Base):
    __tablename__ = "clients"

    name = Column(Text, nullable=False)
    designation = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    image = Column(Text, nullable=False)


class Contact(RecordMixin, Base):
    __tablename__ = "contacts"

    full_name = Column("full_name", Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    city = Column(Text, nullable=False)


class Subscriber(RecordMixin, Base):
    __tablename__ = "subscribers"

    # bounded for the unique index; longer values are rejected by clean_fields
    email = Column(String(255), unique=True, nullable=False)
