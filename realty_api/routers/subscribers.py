"""Newsletter signups. Re-subscribing an email is idempotent."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from realty_api.domain.errors import StoreError, ValidationError
from realty_api.domain.records import SUBSCRIBER
from realty_api.repositories.base import RecordStore

from .deps import get_record_store, missing_fields_response, read_payload, store_failure

router = APIRouter(prefix="/api/subscribers", tags=["subscribers"])


@router.get("")
def list_subscribers(store: RecordStore = Depends(get_record_store)):
    try:
        return store.list(SUBSCRIBER)
    except StoreError:
        return store_failure("Failed to fetch subscribers")


@router.post("", status_code=201)
def create_subscriber(payload: dict = Depends(read_payload), store: RecordStore = Depends(get_record_store)):
    try:
        record, created = store.upsert_by_unique_key(SUBSCRIBER, "email", payload)
    except ValidationError:
        return missing_fields_response()
    except StoreError:
        return store_failure("Failed to create subscriber")
    return JSONResponse(record, status_code=201 if created else 200)
