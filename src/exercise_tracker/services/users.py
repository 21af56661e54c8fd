"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.errors import ConflictError, NotFoundError, ValidationError
from exercise_tracker.domain.models import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""

    def list_users(self) -> list[UserRecord]:
        """Return all users in insertion order."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def create_user(self, username: str) -> UserRecord:
        """Create a user, rejecting usernames that are already taken."""
        cleaned = username.strip()
        if not cleaned:
            raise ValidationError("username is required")
        if self.repository.get_by_username(cleaned):
            raise ConflictError("username already taken")
        user = self.repository.create_user(cleaned)
        logger.info("Created user", extra={"user_id": str(user.id)})
        return user

    def list_users(self) -> list[UserRecord]:
        """Return every registered user."""
        return self.repository.list_users()

    def get_user(self, user_id: UUID | str) -> UserRecord:
        """Return a user by id or raise NotFoundError."""
        resolved = parse_user_id(user_id)
        user = self.repository.get_by_id(resolved) if resolved else None
        if user is None:
            raise NotFoundError("Unknown user with _id")
        return user


def parse_user_id(raw: UUID | str) -> UUID | None:
    """Parse a user id, returning None for malformed values."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(raw.strip())
    except ValueError:
        return None
