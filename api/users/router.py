"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import schemas, service

router = APIRouter(prefix="/users")


@router.get("", response_model=list[schemas.UserResponse])
async def list_users() -> list[schemas.UserResponse]:
    return await service.list_users()


@router.get("/name/{name}", response_model=schemas.UserDetailResponse)
async def get_user_by_name(name: str) -> schemas.UserDetailResponse:
    return await service.get_user_by_name(name)


@router.get("/{user_id}", response_model=schemas.UserDetailResponse)
async def get_user(user_id: int) -> schemas.UserDetailResponse:
    """
    A user with their active releases and each release's active tasks.
    """
    return await service.get_user(user_id)
