"""
Analytics persistence: loads the snapshot the engine works on.
"""

from __future__ import annotations

from core import db
from core.enums import TaskStatus

from .engine import ReleaseRecord, Snapshot, TaskRecord, UserRecord, validate_snapshot


async def load_snapshot() -> Snapshot:
    """
    Read users, releases and tasks (deleted rows included) in one read-only
    REPEATABLE READ transaction, so all three reads see the same data.
    """
    async with db.transaction(isolation="repeatable_read", readonly=True) as conn:
        user_rows = await db.fetch_all_in(
            conn,
            """
            SELECT id, name, deleted
            FROM users
            ORDER BY id
            """,
        )
        release_rows = await db.fetch_all_in(
            conn,
            """
            SELECT id, user_id, title, deleted
            FROM releases
            ORDER BY id
            """,
        )
        task_rows = await db.fetch_all_in(
            conn,
            """
            SELECT id, release_id, status, deleted
            FROM promotion_tasks
            ORDER BY id
            """,
        )

    snapshot = Snapshot(
        users=[
            UserRecord(id=int(row["id"]), name=str(row["name"]), deleted=bool(row["deleted"]))
            for row in user_rows
        ],
        releases=[
            ReleaseRecord(
                id=int(row["id"]),
                user_id=int(row["user_id"]),
                title=str(row["title"]),
                deleted=bool(row["deleted"]),
            )
            for row in release_rows
        ],
        tasks=[
            TaskRecord(
                id=int(row["id"]),
                release_id=int(row["release_id"]),
                status=TaskStatus(row["status"]),
                deleted=bool(row["deleted"]),
            )
            for row in task_rows
        ],
    )
    validate_snapshot(snapshot)
    return snapshot
