"""Project gallery endpoints; projects are the only collection that can be deleted."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from realty_api.domain.errors import NotFoundError, StoreError, ValidationError
from realty_api.domain.records import PROJECT
from realty_api.repositories.base import RecordStore

from .deps import get_record_store, message_response, missing_fields_response, read_payload, store_failure

router = APIRouter(prefix="/api/projects", tags=["projects"])
logger = logging.getLogger(__name__)


@router.get("")
def list_projects(store: RecordStore = Depends(get_record_store)):
    try:
        return store.list(PROJECT)
    except StoreError:
        return store_failure("Failed to fetch projects")


@router.post("", status_code=201)
def create_project(payload: dict = Depends(read_payload), store: RecordStore = Depends(get_record_store)):
    try:
        record = store.create(PROJECT, payload)
    except ValidationError:
        return missing_fields_response()
    except StoreError:
        return store_failure("Failed to create project")
    logger.info("Project created: %s", record["_id"])
    return JSONResponse(record, status_code=201)


@router.delete("/")
def delete_project_without_id():
    return message_response(400, "Missing project id")


@router.delete("/{project_id}")
def delete_project(project_id: str, store: RecordStore = Depends(get_record_store)):
    project_id = (project_id or "").strip()
    if not project_id:
        return message_response(400, "Missing project id")
    try:
        deleted = store.delete_by_id(PROJECT, project_id)
    except NotFoundError:
        return message_response(404, "Project not found")
    except StoreError:
        return store_failure("Failed to delete project")
    logger.info("Project deleted: %s", deleted["_id"])
    return {"message": "Project deleted", "id": deleted["_id"]}
