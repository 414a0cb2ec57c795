from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - APP_ENV: 'development' (default) or 'production'; docs are served only in development
    - API_ROOT: path prefix for the task endpoints. Default '/api'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins, or '*'.
      Default 'http://localhost:5173' (frontend dev server)
    - HOST / PORT: bind address for the bundled server. Default 127.0.0.1:5000
    - LOG_LEVEL: root log level. Default 'INFO'
    """

    app_env: str
    api_root: str
    cors_allow_origins: List[str]
    host: str
    port: int
    log_level: str

    @property
    def docs_enabled(self) -> bool:
        return self.app_env == "development"


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_int(value: str, default: int) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


def _normalize_root(root: str) -> str:
    # '/api/' and 'api' both become '/api'; '/' becomes ''
    stripped = root.strip().strip("/")
    return f"/{stripped}" if stripped else ""


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    app_env = _get_env("APP_ENV", "development").strip().lower()
    if app_env not in {"development", "production"}:
        app_env = "development"

    return Settings(
        app_env=app_env,
        api_root=_normalize_root(_get_env("API_ROOT", "/api")),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "http://localhost:5173")),
        host=_get_env("HOST", "127.0.0.1").strip(),
        port=_parse_int(_get_env("PORT", "5000"), 5000),
        log_level=_get_env("LOG_LEVEL", "INFO").strip().upper(),
    )
