from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from realty_api.domain.errors import StoreError, ValidationError
from realty_api.domain.records import CLIENT
from realty_api.repositories.base import RecordStore

from .deps import get_record_store, missing_fields_response, read_payload, store_failure

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.get("")
def list_clients(store: RecordStore = Depends(get_record_store)):
    try:
        return store.list(CLIENT)
    except StoreError:
        return store_failure("Failed to fetch clients")


@router.post("", status_code=201)
def create_client(payload: dict = Depends(read_payload), store: RecordStore = Depends(get_record_store)):
    try:
        record = store.create(CLIENT, payload)
    except ValidationError:
        return missing_fields_response()
    except StoreError:
        return store_failure("Failed to create client")
    return JSONResponse(record, status_code=201)
