"""
Release API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from . import schemas, service

router = APIRouter(prefix="/releases")


@router.get("/{release_id}", response_model=schemas.ReleaseDetailResponse)
async def get_release(release_id: int) -> schemas.ReleaseDetailResponse:
    return await service.get_release(release_id)


@router.get("/user/{user_id}", response_model=list[schemas.ReleaseResponse])
async def get_user_releases(user_id: int) -> list[schemas.ReleaseResponse]:
    return await service.list_user_releases(user_id)


@router.post("", response_model=schemas.ReleaseResponse, status_code=status.HTTP_201_CREATED)
async def create_release(request: schemas.ReleaseRequest) -> schemas.ReleaseResponse:
    return await service.create_release(request)


@router.put("/{release_id}", response_model=schemas.ReleaseResponse)
async def update_release(release_id: int, request: schemas.ReleaseRequest) -> schemas.ReleaseResponse:
    return await service.update_release(release_id, request)


@router.delete("/{release_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_release(release_id: int) -> Response:
    """
    Soft-delete a release. Its tasks stay in place but drop out of the
    per-user and per-release analytics.
    """
    await service.delete_release(release_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
