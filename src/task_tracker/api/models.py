from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class TaskEntity:
    """
    Domain record for a task held by the store.

    Fields:
    - id: Unique integer identifier, assigned once and never reused
    - description: Free-text description, never empty
    - is_completed: Completion flag
    - created_at: UTC creation timestamp, never changed after creation

    Instances are immutable; updates produce a new record via
    ``dataclasses.replace`` which the store swaps in under its lock.
    """

    id: int
    description: str
    is_completed: bool
    created_at: datetime
