"""
Client side of Task Tracker: an async HTTP client for the task API and a
stateful view that keeps a local copy of the task list.
"""

from .client import TaskApiClient, TaskApiError  # noqa: F401
from .view import TaskFilter, TaskView  # noqa: F401
