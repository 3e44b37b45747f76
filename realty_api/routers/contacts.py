"""Contact form submissions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from realty_api.domain.errors import StoreError, ValidationError
from realty_api.domain.records import CONTACT
from realty_api.repositories.base import RecordStore

from .deps import get_record_store, missing_fields_response, read_payload, store_failure

router = APIRouter(prefix="/api/contacts", tags=["contacts"])
logger = logging.getLogger(__name__)


@router.get("")
def list_contacts(store: RecordStore = Depends(get_record_store)):
    try:
        contacts = store.list(CONTACT)
    except StoreError:
        return store_failure("Failed to fetch contacts")
    logger.info("Fetched %d contacts (%s)", len(contacts), store.mode)
    return contacts


@router.post("", status_code=201)
def create_contact(payload: dict = Depends(read_payload), store: RecordStore = Depends(get_record_store)):
    try:
        record = store.create(CONTACT, payload)
    except ValidationError as exc:
        logger.info("Contact submission rejected, missing: %s", ", ".join(exc.missing))
        return missing_fields_response()
    except StoreError:
        return store_failure("Failed to create contact")
    logger.info("Contact created: %s", record["_id"])
    return JSONResponse(record, status_code=201)
