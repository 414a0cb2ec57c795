from __future__ import annotations

import asyncio

from ..logging_setup import setup_logging
from .console import run_console
from .settings import get_view_settings


# PUBLIC_INTERFACE
def main() -> None:
    """Start the console view against TASK_API_BASE_URL."""
    settings = get_view_settings()
    setup_logging(settings.log_level)
    asyncio.run(run_console(settings.api_base_url))


if __name__ == "__main__":
    main()
