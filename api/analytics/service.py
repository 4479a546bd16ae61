"""
Analytics service: loads a snapshot, runs the engine, shapes responses.

Rounding to 2 decimals happens here and nowhere else.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core import settings

from . import engine, repository, schemas

PERCENTAGE_DECIMALS = 2

logger = logging.getLogger(__name__)


def _round(value: float) -> float:
    return round(value, PERCENTAGE_DECIMALS)


def overall_scope() -> engine.OverallScope:
    raw = settings.analytics_overall_scope()
    try:
        return engine.OverallScope(raw)
    except ValueError:
        logger.warning("unknown_overall_scope value=%s fallback=%s", raw, engine.OverallScope.ALL_ACTIVE_TASKS.value)
        return engine.OverallScope.ALL_ACTIVE_TASKS


async def task_completion() -> schemas.TaskCompletionAnalytics:
    snapshot = await repository.load_snapshot()
    summary = engine.completion_summary(snapshot, scope=overall_scope())
    return schemas.TaskCompletionAnalytics(
        overall_completion_percentage=_round(summary.overall_completion_percentage),
        average_completion_percentage_per_user=_round(summary.average_completion_percentage_per_user),
        average_completion_percentage_per_release=_round(summary.average_completion_percentage_per_release),
    )


def _user_entries(snapshot: engine.Snapshot) -> list[schemas.UserCompletionAnalytics]:
    rates = engine.completion_percentage_per_user(snapshot)
    users = sorted((u for u in snapshot.users if u.id in rates), key=lambda u: u.name)
    return [
        schemas.UserCompletionAnalytics(
            user_id=user.id,
            user_name=user.name,
            completion_percentage=_round(rates[user.id]),
        )
        for user in users
    ]


def _release_entries(snapshot: engine.Snapshot) -> list[schemas.ReleaseCompletionAnalytics]:
    counts = engine.task_counts_per_release(snapshot)
    return [
        schemas.ReleaseCompletionAnalytics(
            release_id=release.id,
            release_title=release.title,
            user_id=release.user_id,
            completion_percentage=_round(counts[release.id].percentage),
            total_tasks=counts[release.id].total,
            completed_tasks=counts[release.id].completed,
        )
        for release in snapshot.releases
        if release.id in counts
    ]


async def user_completion() -> list[schemas.UserCompletionAnalytics]:
    snapshot = await repository.load_snapshot()
    return _user_entries(snapshot)


async def user_completion_by_id(user_id: int) -> schemas.UserCompletionAnalytics:
    snapshot = await repository.load_snapshot()
    for entry in _user_entries(snapshot):
        if entry.user_id == user_id:
            return entry
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User with ID {user_id} not found.")


async def release_completion() -> list[schemas.ReleaseCompletionAnalytics]:
    snapshot = await repository.load_snapshot()
    return _release_entries(snapshot)


async def release_completion_by_id(release_id: int) -> schemas.ReleaseCompletionAnalytics:
    snapshot = await repository.load_snapshot()
    for entry in _release_entries(snapshot):
        if entry.release_id == release_id:
            return entry
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Release with ID {release_id} not found.",
    )
