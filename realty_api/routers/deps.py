"""Request-scoped helpers shared by the API routers."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from realty_api.repositories.base import RecordStore

logger = logging.getLogger(__name__)

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_record_store(request: Request) -> RecordStore:
    store = getattr(getattr(request.app, "state", None), "record_store", None)
    if store is None:
        raise RuntimeError("RecordStore not configured")
    return store


async def read_payload(request: Request) -> dict:
    """
    Body of a write request as a dict, from JSON or form encoding.

    Anything unparsable (empty body, a JSON array, bad JSON) reads as ``{}``
    so that presence validation reports it as missing fields.
    """
    content_type = (request.headers.get("content-type") or "").lower()
    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    try:
        data = await request.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"message": message}, status_code=status_code)


def missing_fields_response() -> JSONResponse:
    return message_response(400, "Missing fields")


def store_failure(message: str) -> JSONResponse:
    """Log the active exception and answer with a generic 500."""
    logger.exception(message)
    return message_response(500, message)
