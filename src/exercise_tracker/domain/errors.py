"""Domain error kinds."""

from enum import Enum


class ErrorKind(str, Enum):
    """Tag attached to every domain error."""

    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"


class ExerciseTrackerError(Exception):
    """Base class for errors raised by the services."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConflictError(ExerciseTrackerError):
    """Raised when a unique value is already taken."""

    kind = ErrorKind.CONFLICT


class NotFoundError(ExerciseTrackerError):
    """Raised when a referenced record does not exist."""

    kind = ErrorKind.NOT_FOUND


class ValidationError(ExerciseTrackerError):
    """Raised when input fails domain validation."""

    kind = ErrorKind.VALIDATION
