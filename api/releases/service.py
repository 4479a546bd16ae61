"""
Release business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.enums import ReleaseType
from tasks import repository as task_repository
from tasks.service import to_task_response
from users import repository as user_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def to_release_response(row: dict) -> schemas.ReleaseResponse:
    return schemas.ReleaseResponse(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        title=str(row["title"]),
        type=ReleaseType(row["type"]),
        release_date=row["release_date"],
        description=row.get("description"),
    )


async def with_active_tasks(release_rows: list[dict]) -> list[schemas.ReleaseDetailResponse]:
    """
    Attach each release's active tasks, using one query for all of them.
    """
    task_rows = await task_repository.list_active_tasks_for_releases([int(r["id"]) for r in release_rows])
    tasks_by_release: dict[int, list[dict]] = {}
    for task_row in task_rows:
        tasks_by_release.setdefault(int(task_row["release_id"]), []).append(task_row)

    return [
        schemas.ReleaseDetailResponse(
            **to_release_response(row).model_dump(),
            tasks=[to_task_response(t) for t in tasks_by_release.get(int(row["id"]), [])],
        )
        for row in release_rows
    ]


def _not_found(release_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Release with ID {release_id} not found.",
    )


async def _require_active_user(user_id: int) -> None:
    if await user_repository.get_active_user(user_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with ID {user_id} not found.",
        )


async def get_release(release_id: int) -> schemas.ReleaseDetailResponse:
    row = await repository.get_active_release(release_id)
    if row is None:
        raise _not_found(release_id)
    releases = await with_active_tasks([row])
    return releases[0]


async def list_user_releases(user_id: int) -> list[schemas.ReleaseResponse]:
    rows = await repository.list_active_releases_for_user(user_id)
    return [to_release_response(row) for row in rows]


async def create_release(payload: schemas.ReleaseRequest) -> schemas.ReleaseResponse:
    await _require_active_user(payload.user_id)
    row = await repository.create_release(
        user_id=payload.user_id,
        title=payload.title.strip(),
        release_type=payload.type.value,
        release_date=payload.release_date,
        description=payload.description,
    )
    logger.info("release_created release_id=%s user_id=%s", row["id"], payload.user_id)
    return to_release_response(row)


async def update_release(release_id: int, payload: schemas.ReleaseRequest) -> schemas.ReleaseResponse:
    await _require_active_user(payload.user_id)
    row = await repository.update_release(
        release_id,
        user_id=payload.user_id,
        title=payload.title.strip(),
        release_type=payload.type.value,
        release_date=payload.release_date,
        description=payload.description,
    )
    if row is None:
        raise _not_found(release_id)
    return to_release_response(row)


async def delete_release(release_id: int) -> None:
    if not await repository.soft_delete_release(release_id):
        raise _not_found(release_id)
    logger.info("release_deleted release_id=%s", release_id)
