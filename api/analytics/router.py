"""
Completion analytics API endpoints.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TypeVar

from fastapi import APIRouter, HTTPException

from . import engine, schemas, service

router = APIRouter(prefix="/analytics")

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _with_snapshot_guard(call: Awaitable[T], *, what: str) -> T:
    try:
        return await call
    except engine.SnapshotIntegrityError as exc:
        logger.exception("analytics_snapshot_invalid what=%s", what)
        raise HTTPException(
            status_code=500,
            detail=f"An error occurred while retrieving {what} analytics data.",
        ) from exc


@router.get("/completion", response_model=schemas.TaskCompletionAnalytics)
async def get_task_completion() -> schemas.TaskCompletionAnalytics:
    return await _with_snapshot_guard(service.task_completion(), what="completion")


@router.get("/completion/users", response_model=list[schemas.UserCompletionAnalytics])
async def get_user_completion() -> list[schemas.UserCompletionAnalytics]:
    return await _with_snapshot_guard(service.user_completion(), what="user")


@router.get("/completion/users/{user_id}", response_model=schemas.UserCompletionAnalytics)
async def get_user_completion_by_id(user_id: int) -> schemas.UserCompletionAnalytics:
    return await _with_snapshot_guard(service.user_completion_by_id(user_id), what="user")


@router.get("/completion/releases", response_model=list[schemas.ReleaseCompletionAnalytics])
async def get_release_completion() -> list[schemas.ReleaseCompletionAnalytics]:
    return await _with_snapshot_guard(service.release_completion(), what="release")


@router.get("/completion/releases/{release_id}", response_model=schemas.ReleaseCompletionAnalytics)
async def get_release_completion_by_id(release_id: int) -> schemas.ReleaseCompletionAnalytics:
    return await _with_snapshot_guard(service.release_completion_by_id(release_id), what="release")
