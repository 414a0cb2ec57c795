from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from .models import TaskItem

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(List[TaskItem])


# PUBLIC_INTERFACE
class TaskApiError(Exception):
    """
    Any failed call to the task API: non-2xx status, transport failure, or an
    unreadable response body. The message is meant to be shown to the user.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


# PUBLIC_INTERFACE
class TaskApiClient:
    """
    Async client for the task endpoints.

    Args:
        base_url: API root, e.g. 'http://localhost:5000/api'.
        transport: Optional httpx transport, used to bind the client to an
            in-process app or a mock in tests.

    Use as an async context manager or call ``aclose()`` when done.
    """

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport)

    async def __aenter__(self) -> "TaskApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, url: str, failure: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TaskApiError(failure) from exc
        if response.is_error:
            logger.warning("%s %s returned %d", method, url, response.status_code)
            raise TaskApiError(failure, status_code=response.status_code)
        return response

    @staticmethod
    def _parse_task(response: httpx.Response, failure: str) -> TaskItem:
        try:
            return TaskItem.model_validate_json(response.content)
        except ValidationError as exc:
            raise TaskApiError(failure, status_code=response.status_code) from exc

    async def fetch_tasks(self) -> List[TaskItem]:
        failure = "Failed to fetch tasks"
        response = await self._request("GET", "/tasks", failure)
        try:
            return _TASK_LIST.validate_json(response.content)
        except ValidationError as exc:
            raise TaskApiError(failure, status_code=response.status_code) from exc

    async def create_task(self, description: str) -> TaskItem:
        failure = "Failed to create task"
        response = await self._request("POST", "/tasks", failure, json={"description": description})
        return self._parse_task(response, failure)

    async def toggle_task(self, task_id: int) -> TaskItem:
        failure = "Failed to toggle task"
        response = await self._request("PUT", f"/tasks/{task_id}/toggle", failure)
        return self._parse_task(response, failure)

    async def update_task(self, task_id: int, description: str) -> TaskItem:
        failure = "Failed to update task"
        response = await self._request("PUT", f"/tasks/{task_id}", failure, json={"description": description})
        return self._parse_task(response, failure)

    async def delete_task(self, task_id: int) -> None:
        await self._request("DELETE", f"/tasks/{task_id}", "Failed to delete task")
