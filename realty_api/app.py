import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from realty_api.core.config import get_settings
from realty_api.core.log_config import configure_logging
from realty_api.repositories.base import RecordStore
from realty_api.routers import clients as clients_router
from realty_api.routers import contacts as contacts_router
from realty_api.routers import health as health_router
from realty_api.routers import pages as pages_router
from realty_api.routers import projects as projects_router
from realty_api.routers import subscribers as subscribers_router
from realty_api.services.bootstrap import open_record_store

logger = logging.getLogger("realty_api")

BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "web")
TEMPLATES = os.path.join(BASE, "templates")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path, status and duration."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response


def create_app(record_store: Optional[RecordStore] = None) -> FastAPI:
    """
    Build the application.

    With ``record_store`` given, that store is used as-is (tests inject an
    InMemoryRepository this way). Otherwise the store is opened on startup:
    the configured database when reachable, the in-memory fallback if not.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "record_store", None) is None:
            app.state.record_store = open_record_store()
        logger.info("Record store ready: %s (mode=%s)", app.state.record_store.__class__.__name__,
                    app.state.record_store.mode)
        logger.info("CORS enabled for: %s", ", ".join(settings.allowed_origins) or "(none)")
        yield
        logger.info("Shutting down")

    app = FastAPI(title="Realty Site API", lifespan=lifespan)
    app.state.record_store = record_store
    app.state.templates = Jinja2Templates(directory=TEMPLATES)

    if settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        )
    app.add_middleware(RequestLogMiddleware)

    app.mount("/static", StaticFiles(directory=WEB), name="static")
    app.include_router(health_router.router)
    app.include_router(projects_router.router)
    app.include_router(clients_router.router)
    app.include_router(contacts_router.router)
    app.include_router(subscribers_router.router)
    app.include_router(pages_router.router)
    return app


app = create_app()
