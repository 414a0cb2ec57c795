from __future__ import annotations

from task_tracker.api.settings import Settings


def make_settings(**overrides) -> Settings:
    """Development settings for tests; override any field by keyword."""
    values = dict(
        app_env="development",
        api_root="/api",
        cors_allow_origins=["http://localhost:5173"],
        host="127.0.0.1",
        port=5000,
        log_level="INFO",
    )
    values.update(overrides)
    return Settings(**values)
