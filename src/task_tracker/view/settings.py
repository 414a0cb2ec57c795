from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ViewSettings:
    """
    Client settings loaded from environment variables.

    Env vars:
    - TASK_API_BASE_URL: base URL of the task API including its root. Default 'http://localhost:5000/api'
    - LOG_LEVEL: root log level for the console client. Default 'WARNING'
    """

    api_base_url: str
    log_level: str


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


# PUBLIC_INTERFACE
def get_view_settings() -> ViewSettings:
    """Return client settings loaded from environment variables."""
    return ViewSettings(
        api_base_url=_get_env("TASK_API_BASE_URL", "http://localhost:5000/api").strip().rstrip("/"),
        log_level=_get_env("LOG_LEVEL", "WARNING").strip().upper(),
    )
