from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    PERSISTENCE = "persistence"


class OperationResult(BaseModel):
    """Outcome of a service call: a value, or an error kind with a message."""

    value: Any = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value=None):
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str):
        return cls(error=error, message=message)
