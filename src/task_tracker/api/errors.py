from __future__ import annotations


# PUBLIC_INTERFACE
class TaskValidationError(ValueError):
    """Raised by the task store when a required field is missing or blank."""

    def __init__(self, message: str, field: str = "description") -> None:
        super().__init__(message)
        self.message = message
        self.field = field
