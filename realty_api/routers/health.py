"""Liveness endpoint reporting which storage mode the process started in."""

from fastapi import APIRouter, Request

from realty_api.domain.records import isoformat, utcnow
from realty_api.repositories.base import MODE_FULL

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health(request: Request):
    store = getattr(request.app.state, "record_store", None)
    mode = getattr(store, "mode", None)
    return {
        "ok": True,
        "timestamp": isoformat(utcnow()),
        "database": "connected" if mode == MODE_FULL else "disconnected",
        "mode": "full" if mode == MODE_FULL else "degraded",
    }
