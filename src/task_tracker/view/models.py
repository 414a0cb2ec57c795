from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# PUBLIC_INTERFACE
class TaskItem(BaseModel):
    """
    Client copy of a task as returned by the API.

    Copies are read-only and replaced wholesale with whatever the server
    returns after a mutation.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    description: str
    is_completed: bool = Field(default=False)
    created_at: datetime
