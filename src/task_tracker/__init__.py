"""
Task Tracker: an in-memory task backend (``task_tracker.api``) and the
client view that drives it over HTTP (``task_tracker.view``).
"""

__version__ = "0.1.0"
