from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ..schemas import ErrorOut, TaskCreate, TaskOut, TaskUpdate
from ..store import TaskStore

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
)

NOT_FOUND = "Task not found"


# PUBLIC_INTERFACE
def get_store(request: Request) -> TaskStore:
    """
    Dependency returning the store owned by the running application.
    """
    return request.app.state.store


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TaskOut],
    summary="List Tasks",
    description="Return every task ordered by id ascending.",
)
def list_tasks(store: TaskStore = Depends(get_store)) -> List[TaskOut]:
    return [TaskOut.from_entity(t) for t in store.get_all()]


# PUBLIC_INTERFACE
@router.get(
    "/{task_id}",
    response_model=TaskOut,
    summary="Get Task",
    description="Get a single task by ID.",
    responses={
        200: {"description": "Task found"},
        404: {"description": "Task not found"},
    },
)
def get_task(task_id: int, store: TaskStore = Depends(get_store)) -> TaskOut:
    item = store.get(task_id)
    if item is None:
        raise _not_found()
    return TaskOut.from_entity(item)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    description="Create a new task and return it. The Location header points at the new resource.",
    responses={
        201: {"description": "Task created successfully"},
        400: {"model": ErrorOut, "description": "Description missing or blank"},
    },
)
def create_task(
    payload: TaskCreate,
    request: Request,
    response: Response,
    store: TaskStore = Depends(get_store),
) -> TaskOut:
    """
    Create a new task. Blank descriptions raise TaskValidationError in the store,
    which the application maps to 400.
    """
    created = store.create(payload.description)
    response.headers["Location"] = str(request.app.url_path_for("get_task", task_id=created.id))
    return TaskOut.from_entity(created)


# PUBLIC_INTERFACE
@router.put(
    "/{task_id}/toggle",
    response_model=TaskOut,
    summary="Toggle Task",
    description="Flip the completion flag of a task.",
    responses={
        200: {"description": "Task toggled"},
        404: {"description": "Task not found"},
    },
)
def toggle_task(task_id: int, store: TaskStore = Depends(get_store)) -> TaskOut:
    updated = store.toggle(task_id)
    if updated is None:
        raise _not_found()
    return TaskOut.from_entity(updated)


# PUBLIC_INTERFACE
@router.put(
    "/{task_id}",
    response_model=TaskOut,
    summary="Update Task",
    description=(
        "Replace the description of a task. A missing body or a blank description "
        "leaves the task unchanged and returns it as is."
    ),
    responses={
        200: {"description": "Task updated"},
        404: {"description": "Task not found"},
    },
)
def update_task(
    task_id: int,
    payload: Optional[TaskUpdate] = None,
    store: TaskStore = Depends(get_store),
) -> TaskOut:
    description = payload.description if payload is not None else None
    updated = store.update_description(task_id, description)
    if updated is None:
        raise _not_found()
    return TaskOut.from_entity(updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Task",
    description="Delete a task by ID.",
    responses={
        204: {"description": "Task deleted"},
        404: {"description": "Task not found"},
    },
)
def delete_task(task_id: int, store: TaskStore = Depends(get_store)) -> None:
    """
    Delete a task. Returns 204 on success, 404 if not found.
    """
    if not store.delete(task_id):
        raise _not_found()
    return None
