"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

import pytest

from exercise_tracker.config import Settings
from exercise_tracker.containers import AppContainer
from exercise_tracker.domain.models import ExerciseRecord, UserRecord
from exercise_tracker.services.exercises import ExerciseRepository, ExerciseService
from exercise_tracker.services.users import UserRepository, UserService

FIXED_TODAY = date(2024, 3, 5)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def create_user(self, username: str) -> UserRecord:
        user = UserRecord(id=uuid4(), username=username)
        self.users[user.id] = user
        return user

    def list_users(self) -> list[UserRecord]:
        return list(self.users.values())


@dataclass
class InMemoryExerciseRepository(ExerciseRepository):
    """In-memory exercise repository for tests."""

    exercises: list[ExerciseRecord] = field(default_factory=list)

    def create_exercise(
        self, user_id: UUID, description: str, duration: int, exercise_date: date
    ) -> ExerciseRecord:
        exercise = ExerciseRecord(
            id=uuid4(),
            user_id=user_id,
            description=description,
            duration=duration,
            date=exercise_date,
        )
        self.exercises.append(exercise)
        return exercise

    def list_exercises(
        self,
        user_id: UUID,
        start: date | None,
        end: date | None,
        limit: int | None,
    ) -> list[ExerciseRecord]:
        matches = [
            exercise
            for exercise in self.exercises
            if exercise.user_id == user_id
            and (start is None or exercise.date >= start)
            and (end is None or exercise.date <= end)
        ]
        return matches[:limit] if limit is not None else matches


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def exercise_repository() -> InMemoryExerciseRepository:
    return InMemoryExerciseRepository()


@pytest.fixture
def user_service(user_repository: InMemoryUserRepository) -> UserService:
    return UserService(user_repository)


@pytest.fixture
def exercise_service(
    user_service: UserService, exercise_repository: InMemoryExerciseRepository
) -> ExerciseService:
    return ExerciseService(
        user_service=user_service,
        repository=exercise_repository,
        today=lambda: FIXED_TODAY,
    )


@pytest.fixture
def container(
    settings: Settings,
    user_service: UserService,
    exercise_service: ExerciseService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        exercise_service=exercise_service,
        close_resources=close_resources,
    )
