"""Shared fixtures: small hand-built snapshots for the analytics engine."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from analytics.engine import ReleaseRecord, Snapshot, TaskRecord, UserRecord
from core.enums import TaskStatus

DONE = TaskStatus.DONE
TODO = TaskStatus.TODO
IN_PROGRESS = TaskStatus.IN_PROGRESS

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_tasks(release_id: int, statuses: list[TaskStatus], *, start_id: int) -> list[TaskRecord]:
    return [
        TaskRecord(id=start_id + i, release_id=release_id, status=s)
        for i, s in enumerate(statuses)
    ]


@pytest.fixture
def two_user_snapshot() -> Snapshot:
    """User 1: 2 of 4 done. User 2: 2 of 3 done."""
    return Snapshot(
        users=[UserRecord(id=1, name="Ian Conner"), UserRecord(id=2, name="Test McApp")],
        releases=[
            ReleaseRecord(id=10, user_id=1, title="Neon Skyline"),
            ReleaseRecord(id=20, user_id=2, title="Low Tide"),
        ],
        tasks=make_tasks(10, [DONE, DONE, TODO, IN_PROGRESS], start_id=100)
        + make_tasks(20, [DONE, DONE, TODO], start_id=200),
    )


@pytest.fixture
def task_row():
    def _make(**overrides) -> dict:
        row = {
            "id": 1,
            "release_id": 10,
            "status": "ToDo",
            "priority": "High",
            "description": "Pitch to playlists",
            "due_date": NOW,
            "deleted": False,
        }
        row.update(overrides)
        return row

    return _make


@pytest.fixture
def release_row():
    def _make(**overrides) -> dict:
        row = {
            "id": 10,
            "user_id": 1,
            "title": "Neon Skyline",
            "type": "EP",
            "release_date": NOW,
            "description": None,
            "deleted": False,
        }
        row.update(overrides)
        return row

    return _make


@pytest.fixture
def user_row():
    def _make(**overrides) -> dict:
        row = {
            "id": 1,
            "name": "Ian Conner",
            "created_at": NOW,
            "last_active_at": NOW,
            "deleted": False,
        }
        row.update(overrides)
        return row

    return _make
