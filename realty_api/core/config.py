"""
Configuration helpers for the realty site backend.

Routers/services read a frozen Settings instance instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEV_ORIGINS = (
    "http://localhost:5173",
    "http://localhost:3000",
    "http://localhost:5174",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    db_connect_timeout_seconds: float
    require_database: bool
    host: str
    port: int
    frontend_urls: tuple[str, ...]
    admin_id: str
    admin_password: str
    log_level: str

    @property
    def allowed_origins(self) -> list[str]:
        """Origins accepted by CORS; dev servers are only added outside prod."""
        origins = set(self.frontend_urls)
        if self.app_env != "prod":
            origins.update(DEV_ORIGINS)
        return sorted(origin for origin in origins if origin)


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _float(value: str, default: float = 0.0) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    frontend = os.getenv("FRONTEND_URL", "")
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "").strip(),
        db_connect_timeout_seconds=max(0.1, _float(os.getenv("DB_CONNECT_TIMEOUT_SECONDS", "5"), 5.0)),
        require_database=_bool(os.getenv("REQUIRE_DATABASE"), False),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "5000"), 5000),
        frontend_urls=tuple(u.strip().rstrip("/") for u in frontend.split(",") if u.strip()),
        admin_id=os.getenv("ADMIN_ID", "admin"),
        admin_password=os.getenv("ADMIN_PASS", "admin123"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
