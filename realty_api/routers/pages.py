"""
Server-rendered pages: the public landing page and the admin panel.

The admin panel is gated in the browser by comparing against the configured
ADMIN_ID/ADMIN_PASS pair. The server enforces no authorization on the API;
the gate only hides the management UI.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from realty_api.core.config import get_settings
from realty_api.domain.errors import StoreError
from realty_api.domain.records import CLIENT, PROJECT

from .deps import get_record_store

router = APIRouter(prefix="", tags=["pages"])
logger = logging.getLogger(__name__)


def _templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def _safe_list(request: Request, entity: str) -> list[dict]:
    try:
        return get_record_store(request).list(entity)
    except StoreError:
        logger.exception("Failed to load %s records for the landing page", entity)
        return []


@router.get("/", response_class=HTMLResponse)
def landing(request: Request):
    templates = _templates(request)
    context = {
        "projects": _safe_list(request, PROJECT),
        "clients": _safe_list(request, CLIENT),
        "mode": get_record_store(request).mode,
    }
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/admin", response_class=HTMLResponse)
def admin(request: Request):
    settings = get_settings()
    templates = _templates(request)
    context = {
        "admin_credentials": {"id": settings.admin_id, "pass": settings.admin_password},
    }
    return templates.TemplateResponse(request, "admin.html", context)

