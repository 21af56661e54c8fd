"""Exercise logging and log queries."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.errors import ValidationError
from exercise_tracker.domain.models import ExerciseLog, ExerciseRecord, UserRecord
from exercise_tracker.services.users import UserService

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 25
MIN_DURATION_MINUTES = 1
# Upper bound of the int4 columns in supabase/schema.sql.
MAX_INTEGER = 2_147_483_647
DATE_INPUT_FORMAT = "%Y-%m-%d"
DATE_DISPLAY_FORMAT = "%a %B %d %Y"


class ExerciseRepository(Protocol):
    """Persistence interface for exercise entries."""

    def create_exercise(
        self, user_id: UUID, description: str, duration: int, exercise_date: date
    ) -> ExerciseRecord:
        """Create and return a new exercise entry."""

    def list_exercises(
        self,
        user_id: UUID,
        start: date | None,
        end: date | None,
        limit: int | None,
    ) -> list[ExerciseRecord]:
        """Return a user's entries in insertion order.

        Entries are filtered to the inclusive ``start``/``end`` range first and
        then truncated to ``limit``. ``None`` leaves that constraint open.
        """


def _utc_today() -> date:
    return datetime.now(tz=UTC).date()


@dataclass(frozen=True)
class CreatedExercise:
    """An exercise entry together with its owner."""

    user: UserRecord
    exercise: ExerciseRecord


@dataclass
class ExerciseService:
    """Service for adding exercises and reading a user's log."""

    user_service: UserService
    repository: ExerciseRepository
    today: Callable[[], date] = field(default=_utc_today)

    def add_exercise(
        self,
        user_id: UUID | str,
        description: str | None,
        duration: int | None,
        exercise_date: object = None,
    ) -> CreatedExercise:
        """Log an exercise for an existing user.

        The date falls back to today when it is missing or cannot be parsed.
        Values that are neither a ``date`` nor a string count as unparseable.
        """
        user = self.user_service.get_user(user_id)
        cleaned = _validate_description(description)
        minutes = _validate_duration(duration)
        if isinstance(exercise_date, datetime):
            resolved_date = exercise_date.date()
        elif isinstance(exercise_date, date):
            resolved_date = exercise_date
        elif isinstance(exercise_date, str):
            resolved_date = parse_date(exercise_date)
        else:
            resolved_date = None
        exercise = self.repository.create_exercise(
            user.id, cleaned, minutes, resolved_date or self.today()
        )
        logger.info(
            "Logged exercise",
            extra={"user_id": str(user.id), "exercise_id": str(exercise.id)},
        )
        return CreatedExercise(user=user, exercise=exercise)

    def get_log(
        self,
        user_id: UUID | str,
        start: date | str | None = None,
        end: date | str | None = None,
        limit: int | str | None = None,
    ) -> ExerciseLog:
        """Return the user's entries within the date range, then truncated."""
        user = self.user_service.get_user(user_id)
        entries = self.repository.list_exercises(
            user.id,
            start if isinstance(start, date) else parse_date(start),
            end if isinstance(end, date) else parse_date(end),
            parse_limit(limit),
        )
        return ExerciseLog(user=user, entries=entries)


def parse_date(raw: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` or ISO 8601 value, returning None otherwise.

    For ISO datetimes the calendar date as written is kept.
    """
    if not raw or not raw.strip():
        return None
    cleaned = raw.strip()
    try:
        return datetime.strptime(cleaned, DATE_INPUT_FORMAT).date()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        return None


def parse_limit(raw: int | str | None) -> int | None:
    """Return a positive integer limit, or None for absent or invalid input.

    Limits beyond the storable integer range are treated as no limit.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            return None
    return value if 0 < value <= MAX_INTEGER else None


def format_date(value: date) -> str:
    """Format a date as e.g. ``Sun January 01 2023``."""
    return value.strftime(DATE_DISPLAY_FORMAT)


def _validate_description(description: str | None) -> str:
    if description is None or not description.strip():
        raise ValidationError("description is required")
    cleaned = description.strip()
    if len(cleaned) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description too long, not greater than {MAX_DESCRIPTION_LENGTH}"
        )
    return cleaned


def _validate_duration(duration: int | None) -> int:
    if duration is None:
        raise ValidationError("duration is required")
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise ValidationError("duration must be a whole number of minutes")
    if duration < MIN_DURATION_MINUTES:
        raise ValidationError("Duration too short, at least 1 minute")
    if duration > MAX_INTEGER:
        raise ValidationError(f"Duration too long, at most {MAX_INTEGER} minutes")
    return duration
