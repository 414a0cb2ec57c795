"""
Task Tracker backend.

Exposes the application factory; ``task_tracker.api.main:app`` is the
module-level instance served by uvicorn.
"""

from .main import create_app  # noqa: F401
from .store import TaskStore  # noqa: F401
