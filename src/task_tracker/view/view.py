from __future__ import annotations

import enum
import logging
from typing import List, Optional

from .client import TaskApiClient, TaskApiError
from .models import TaskItem

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TaskFilter(str, enum.Enum):
    """Client-side view predicate. There is no server-side counterpart."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    def matches(self, task: TaskItem) -> bool:
        if self is TaskFilter.ACTIVE:
            return not task.is_completed
        if self is TaskFilter.COMPLETED:
            return task.is_completed
        return True


# PUBLIC_INTERFACE
class TaskView:
    """
    The single task view: a local cache of tasks kept in step with the API.

    State:
    - tasks: local copy of the server's tasks
    - loading: True while a load or add is in flight
    - error: message of the last failure, or None
    - filter: active TaskFilter
    - new_description: input buffer for the next task

    Actions never raise for API failures. They record the message in ``error``
    and leave the cache as it was. The server's response is always the source
    of truth for the records it returns.
    """

    def __init__(self, client: TaskApiClient) -> None:
        self._client = client
        self.tasks: List[TaskItem] = []
        self.loading = False
        self.error: Optional[str] = None
        self.filter = TaskFilter.ALL
        self.new_description = ""

    async def mount(self) -> None:
        await self.load()

    async def load(self) -> None:
        """Fetch every task, replacing the local cache. Also used for refresh."""
        self.loading = True
        self.error = None
        try:
            self.tasks = await self._client.fetch_tasks()
        except TaskApiError as exc:
            self._fail(exc, "Error")
        finally:
            self.loading = False

    async def add(self) -> None:
        """Create a task from the input buffer. Blank input is ignored locally."""
        description = self.new_description.strip()
        if not description:
            return
        self.loading = True
        try:
            created = await self._client.create_task(description)
        except TaskApiError as exc:
            self._fail(exc, "Failed to create")
        else:
            self.tasks = [*self.tasks, created]
            self.new_description = ""
        finally:
            self.loading = False

    async def toggle(self, task_id: int) -> None:
        try:
            updated = await self._client.toggle_task(task_id)
        except TaskApiError as exc:
            self._fail(exc, "Failed to toggle")
            return
        self._replace(updated)

    async def edit(self, task_id: int, description: str) -> None:
        try:
            updated = await self._client.update_task(task_id, description)
        except TaskApiError as exc:
            self._fail(exc, "Failed to update")
            return
        self._replace(updated)

    async def delete(self, task_id: int) -> None:
        try:
            await self._client.delete_task(task_id)
        except TaskApiError as exc:
            self._fail(exc, "Failed to delete")
            return
        self.tasks = [t for t in self.tasks if t.id != task_id]

    def set_filter(self, value: TaskFilter) -> None:
        self.filter = TaskFilter(value)

    def dismiss_error(self) -> None:
        self.error = None

    @property
    def visible_tasks(self) -> List[TaskItem]:
        return [t for t in self.tasks if self.filter.matches(t)]

    def _replace(self, updated: TaskItem) -> None:
        self.tasks = [updated if t.id == updated.id else t for t in self.tasks]

    def _fail(self, exc: TaskApiError, fallback: str) -> None:
        self.error = exc.message or fallback
        logger.warning("View action failed: %s", self.error)

    def render(self) -> str:
        """Render the view as plain text for a terminal."""
        lines = ["Basic Task Manager", ""]

        bar = []
        for f in TaskFilter:
            label = f.value.capitalize()
            bar.append(f"[{label}]" if f is self.filter else f" {label} ")
        lines.append(" ".join(bar))

        if self.loading:
            lines.append("Loading...")
        if self.error:
            lines.append(f"! {self.error}  (dismiss to clear)")

        visible = self.visible_tasks
        if not visible:
            lines.append("No tasks")
        for t in visible:
            mark = "x" if t.is_completed else " "
            lines.append(f"[{mark}] {t.description}  #{t.id}")
        return "\n".join(lines)
