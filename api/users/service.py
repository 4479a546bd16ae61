"""
User business logic.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from releases import repository as release_repository
from releases import service as release_service

from . import repository, schemas


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=int(user_row["id"]),
        name=str(user_row["name"]),
        created_at=user_row["created_at"],
        last_active_at=user_row["last_active_at"],
    )


async def _with_releases(user_row: dict) -> schemas.UserDetailResponse:
    release_rows = await release_repository.list_active_releases_for_user(int(user_row["id"]))
    releases = await release_service.with_active_tasks(release_rows)
    return schemas.UserDetailResponse(**_to_user_response(user_row).model_dump(), releases=releases)


async def list_users() -> list[schemas.UserResponse]:
    """
    Active users ordered by name. Listing counts as activity for each of them.
    """
    rows = await repository.list_active_users()
    await repository.touch_last_active([int(row["id"]) for row in rows])
    return [_to_user_response(row) for row in rows]


async def get_user(user_id: int) -> schemas.UserDetailResponse:
    user_row = await repository.get_active_user(user_id)
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with ID {user_id} not found.",
        )
    return await _with_releases(user_row)


async def get_user_by_name(name: str) -> schemas.UserDetailResponse:
    user_row = await repository.get_active_user_by_name((name or "").strip())
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with name '{name}' not found.",
        )
    return await _with_releases(user_row)
