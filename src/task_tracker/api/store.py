from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from threading import RLock
from typing import Dict, List, Optional

from .errors import TaskValidationError
from .models import TaskEntity

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


# PUBLIC_INTERFACE
class TaskStore:
    """
    Thread-safe in-memory task store.

    One instance is created per application and injected into the routes.
    Ids come from a counter guarded by the same lock as the id -> task map,
    so concurrent creates never share an id and deleted ids are never reissued.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: Dict[int, TaskEntity] = {}
        self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _allocate_id(self) -> int:
        with self._lock:
            self._last_id += 1
            return self._last_id

    def get_all(self) -> List[TaskEntity]:
        """Return every task ordered by id ascending."""
        with self._lock:
            items = list(self._items.values())
        return sorted(items, key=lambda t: t.id)

    def get(self, task_id: int) -> Optional[TaskEntity]:
        """Return the task with the given id, or None if there is none."""
        with self._lock:
            return self._items.get(task_id)

    def create(self, description: Optional[str]) -> TaskEntity:
        """
        Create a task with the given description.

        Raises:
            TaskValidationError: if the description is missing or blank.
        """
        if _is_blank(description):
            raise TaskValidationError("Description is required.")

        with self._lock:
            entity = TaskEntity(
                id=self._allocate_id(),
                description=description,  # type: ignore[arg-type]
                is_completed=False,
                created_at=self._now(),
            )
            self._items[entity.id] = entity
        logger.info("Created task %d", entity.id)
        return entity

    def toggle(self, task_id: int) -> Optional[TaskEntity]:
        """Flip the completion flag. Return the updated task or None if not found."""
        with self._lock:
            existing = self._items.get(task_id)
            if existing is None:
                return None
            updated = replace(existing, is_completed=not existing.is_completed)
            self._items[task_id] = updated
        logger.debug("Toggled task %d to completed=%s", task_id, updated.is_completed)
        return updated

    def update_description(self, task_id: int, description: Optional[str]) -> Optional[TaskEntity]:
        """
        Replace the description when the new value is not blank.

        A blank or missing description leaves the task as it was; the current
        record is still returned. Returns None if the task does not exist.
        """
        with self._lock:
            existing = self._items.get(task_id)
            if existing is None:
                return None
            if _is_blank(description):
                return existing
            updated = replace(existing, description=description)
            self._items[task_id] = updated
        logger.debug("Updated description of task %d", task_id)
        return updated

    def delete(self, task_id: int) -> bool:
        """Remove a task. Return True if it existed."""
        with self._lock:
            removed = self._items.pop(task_id, None) is not None
        if removed:
            logger.info("Deleted task %d", task_id)
        return removed
