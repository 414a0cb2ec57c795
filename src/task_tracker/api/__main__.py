from __future__ import annotations

import logging

import uvicorn

from ..logging_setup import setup_logging
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def main() -> None:
    """Run the API with uvicorn using HOST/PORT/LOG_LEVEL from the environment."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(
        "Starting Task Tracker API on %s:%d (env=%s, root=%s)",
        settings.host,
        settings.port,
        settings.app_env,
        settings.api_root or "/",
    )
    uvicorn.run(
        "task_tracker.api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
