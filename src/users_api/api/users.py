"""User CRUD endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Request

from users_api.api.schemas import (
    DeleteResultResponse,
    UpdateResultResponse,
    UserResponse,
)

if TYPE_CHECKING:
    from users_api.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("")
async def list_users(request: Request) -> list[dict[str, object]]:
    """Return all users."""
    users = await _container(request).user_service.list_all()
    return [UserResponse.from_record(user).to_json() for user in users]


@router.get("/active")
async def list_active_users(request: Request) -> list[dict[str, object]]:
    """Return users with isActive set."""
    users = await _container(request).user_service.list_active()
    return [UserResponse.from_record(user).to_json() for user in users]


@router.post("")
async def create_user(
    request: Request, payload: Any = Body(default=None)
) -> dict[str, object]:
    """Create a user from the request body."""
    user = await _container(request).user_service.create(payload)
    return UserResponse.from_record(user).to_json()


@router.put("/{user_id}")
async def update_user(
    user_id: str, request: Request, payload: Any = Body(default=None)
) -> dict[str, object]:
    """Set the given fields on a user."""
    outcome = await _container(request).user_service.update_by_id(user_id, payload)
    return UpdateResultResponse.from_outcome(outcome).to_json()


@router.put("/{user_id}/deactivate")
async def deactivate_user(user_id: str, request: Request) -> dict[str, object]:
    """Mark a user inactive."""
    outcome = await _container(request).user_service.deactivate_by_id(user_id)
    return UpdateResultResponse.from_outcome(outcome).to_json()


@router.delete("/{user_id}/")
async def delete_user(user_id: str, request: Request) -> dict[str, object]:
    """Delete a user."""
    outcome = await _container(request).user_service.delete_by_id(user_id)
    return DeleteResultResponse.from_outcome(outcome).to_json()
