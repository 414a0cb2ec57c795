from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import TaskEntity


# PUBLIC_INTERFACE
class TaskCreate(BaseModel):
    """
    Schema for creating a new task.

    Only presence is checked here; blank descriptions are rejected by the store.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"description": "Buy milk"}})

    description: str = Field(..., description="Free-text description of the task")


# PUBLIC_INTERFACE
class TaskUpdate(BaseModel):
    """
    Schema for updating a task's description.
    A missing or blank description leaves the task unchanged.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"description": "Buy oat milk"}})

    description: Optional[str] = Field(default=None, description="New description; ignored when blank")


# PUBLIC_INTERFACE
class TaskOut(BaseModel):
    """
    Schema returned by the API for a task. Field names are camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "description": "Buy milk",
                "isCompleted": False,
                "createdAt": "2025-01-25T10:15:30.123456Z",
            }
        },
    )

    id: int = Field(..., description="Unique identifier of the task")
    description: str = Field(..., description="Free-text description of the task")
    is_completed: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")

    @classmethod
    def from_entity(cls, entity: TaskEntity) -> "TaskOut":
        return cls(
            id=entity.id,
            description=entity.description,
            is_completed=entity.is_completed,
            created_at=entity.created_at,
        )


class ErrorOut(BaseModel):
    """Envelope used for 400 responses."""

    error: str = Field(..., description="Error kind, e.g. 'ValidationError'")
    message: str = Field(..., description="Human readable message")
    detail: Any = Field(default=None, description="Field level details, when available")
