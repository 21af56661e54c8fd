"""Supabase repository for exercise entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from exercise_tracker.adapters.supabase_paging import PAGE_SIZE, fetch_rows
from exercise_tracker.domain.models import ExerciseRecord
from exercise_tracker.services.exercises import ExerciseRepository

_COLUMNS = "id, user_id, description, duration, date"


@dataclass
class SupabaseExerciseRepository(ExerciseRepository):
    """Supabase implementation for exercise entries."""

    client: Client
    page_size: int = PAGE_SIZE

    def create_exercise(
        self, user_id: UUID, description: str, duration: int, exercise_date: date
    ) -> ExerciseRecord:
        """Insert an exercise row and return it."""
        response = (
            self.client.table("exercises")
            .insert(
                {
                    "user_id": str(user_id),
                    "description": description,
                    "duration": duration,
                    "date": exercise_date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create exercise")
        return _parse_row(response.data[0])

    def list_exercises(
        self,
        user_id: UUID,
        start: date | None,
        end: date | None,
        limit: int | None,
    ) -> list[ExerciseRecord]:
        """Return the user's exercises in the date range, oldest insert first."""

        def build_query():  # type: ignore[no-untyped-def]
            query = (
                self.client.table("exercises")
                .select(_COLUMNS)
                .eq("user_id", str(user_id))
            )
            if start is not None:
                query = query.gte("date", start.isoformat())
            if end is not None:
                query = query.lte("date", end.isoformat())
            return query.order("created_at", desc=False)

        rows = fetch_rows(build_query, limit=limit, page_size=self.page_size)
        return [_parse_row(row) for row in rows]


def _parse_row(row: dict[str, object]) -> ExerciseRecord:
    raw_date = str(row["date"])
    return ExerciseRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        description=str(row.get("description", "")),
        duration=int(row.get("duration", 0)),
        date=date.fromisoformat(raw_date[:10]),
    )
