"""User and exercise log endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from exercise_tracker.api.schemas import (
    CreateUserRequest,
    ExerciseRequest,
    ExerciseResponse,
    LogResponse,
    UserResponse,
)

if TYPE_CHECKING:
    from exercise_tracker.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("")
async def create_user(body: CreateUserRequest, request: Request) -> UserResponse:
    """Register a new username."""
    user = _container(request).user_service.create_user(body.username)
    return UserResponse.from_record(user)


@router.get("")
async def list_users(request: Request) -> list[UserResponse]:
    """Return every registered user."""
    users = _container(request).user_service.list_users()
    return [UserResponse.from_record(user) for user in users]


@router.post("/{user_id}/exercises")
async def add_exercise(
    user_id: str, body: ExerciseRequest, request: Request
) -> ExerciseResponse:
    """Log an exercise for a user."""
    created = _container(request).exercise_service.add_exercise(
        user_id,
        description=body.description,
        duration=body.duration,
        exercise_date=body.date,
    )
    return ExerciseResponse.from_created(created)


@router.get("/{user_id}/logs")
async def get_log(
    user_id: str,
    request: Request,
    start: str | None = Query(default=None, alias="from"),
    end: str | None = Query(default=None, alias="to"),
    limit: str | None = None,
) -> LogResponse:
    """Return the user's exercises filtered by date range and limit."""
    log = _container(request).exercise_service.get_log(
        user_id, start=start, end=end, limit=limit
    )
    return LogResponse.from_log(log)
