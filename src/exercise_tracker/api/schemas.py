"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field

from exercise_tracker.domain.models import ExerciseLog, ExerciseRecord, UserRecord
from exercise_tracker.services.exercises import (
    MAX_INTEGER,
    MIN_DURATION_MINUTES,
    CreatedExercise,
    format_date,
)


class CreateUserRequest(BaseModel):
    """Body for creating a user."""

    username: str = Field(min_length=1)


class ExerciseRequest(BaseModel):
    """Body for logging an exercise."""

    description: str
    duration: int = Field(ge=MIN_DURATION_MINUTES, le=MAX_INTEGER)
    date: object | None = None


class UserResponse(BaseModel):
    """A user as returned by the API."""

    username: str
    id: str

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(username=user.username, id=str(user.id))


class ExerciseResponse(BaseModel):
    """A newly logged exercise merged with its owner."""

    username: str
    description: str
    duration: int
    id: str
    date: str

    @classmethod
    def from_created(cls, created: CreatedExercise) -> "ExerciseResponse":
        return cls(
            username=created.user.username,
            description=created.exercise.description,
            duration=created.exercise.duration,
            id=str(created.user.id),
            date=format_date(created.exercise.date),
        )


class LogEntry(BaseModel):
    """One entry in a user's exercise log."""

    description: str
    duration: int
    date: str

    @classmethod
    def from_record(cls, exercise: ExerciseRecord) -> "LogEntry":
        return cls(
            description=exercise.description,
            duration=exercise.duration,
            date=format_date(exercise.date),
        )


class LogResponse(BaseModel):
    """A user's filtered exercise log."""

    id: str
    username: str
    count: int
    log: list[LogEntry]

    @classmethod
    def from_log(cls, log: ExerciseLog) -> "LogResponse":
        return cls(
            id=str(log.user.id),
            username=log.user.username,
            count=log.count,
            log=[LogEntry.from_record(entry) for entry in log.entries],
        )
