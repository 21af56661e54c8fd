"""Domain models for the exercise tracker."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str


@dataclass(frozen=True)
class ExerciseRecord:
    """A single logged exercise owned by a user."""

    id: UUID
    user_id: UUID
    description: str
    duration: int
    date: date


@dataclass(frozen=True)
class ExerciseLog:
    """A user's exercises selected by a log query."""

    user: UserRecord
    entries: list[ExerciseRecord]

    @property
    def count(self) -> int:
        return len(self.entries)
