"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from exercise_tracker.adapters.supabase_paging import PAGE_SIZE, fetch_rows
from exercise_tracker.domain.errors import ConflictError
from exercise_tracker.domain.models import UserRecord
from exercise_tracker.services.users import UserRepository

UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client
    page_size: int = PAGE_SIZE

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        response = (
            self.client.table("users")
            .select("id, username")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""
        response = (
            self.client.table("users")
            .select("id, username")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, username: str) -> UserRecord:
        """Create a new user row and return it."""
        try:
            response = (
                self.client.table("users").insert({"username": username}).execute()
            )
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise ConflictError("username already taken") from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by creation time."""
        rows = fetch_rows(
            lambda: (
                self.client.table("users")
                .select("id, username")
                .order("created_at", desc=False)
            ),
            page_size=self.page_size,
        )
        return [_parse_user(row) for row in rows]


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(id=UUID(str(row["id"])), username=str(row["username"]))
