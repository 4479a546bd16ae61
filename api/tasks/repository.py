"""
Promotion task persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from core import db
from core.enums import PRIORITY_ORDER

TASK_COLUMNS = "id, release_id, status, priority, description, due_date, deleted"


async def list_active_tasks() -> list[dict[str, Any]]:
    """
    Active tasks, highest priority first, then latest due date first.
    """
    return await db.fetch_all(
        f"""
        SELECT {TASK_COLUMNS}
        FROM promotion_tasks
        WHERE deleted = false
        ORDER BY array_position($1::text[], priority) DESC,
                 due_date DESC NULLS LAST,
                 id
        """,
        PRIORITY_ORDER,
    )


async def list_active_tasks_for_releases(release_ids: list[int]) -> list[dict[str, Any]]:
    if not release_ids:
        return []
    return await db.fetch_all(
        f"""
        SELECT {TASK_COLUMNS}
        FROM promotion_tasks
        WHERE release_id = ANY($1::bigint[])
          AND deleted = false
        ORDER BY release_id, id
        """,
        release_ids,
    )


async def get_active_task(task_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {TASK_COLUMNS}
        FROM promotion_tasks
        WHERE id = $1
          AND deleted = false
        """,
        task_id,
    )


async def create_task(
    *,
    release_id: int,
    status: str,
    priority: str,
    description: str,
    due_date: datetime | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO promotion_tasks (release_id, status, priority, description, due_date)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {TASK_COLUMNS}
        """,
        release_id,
        status,
        priority,
        description,
        due_date,
    )
    if row is None:
        raise RuntimeError("Failed to create task.")
    return row


async def update_task(
    task_id: int,
    *,
    status: str | None = None,
    priority: str | None = None,
    description: str | None = None,
    due_date: datetime | None = None,
) -> dict[str, Any] | None:
    """
    Update the provided fields of an active task; None leaves a field as is.
    Returns None when the task is missing or deleted.
    """
    return await db.fetch_one(
        f"""
        UPDATE promotion_tasks
        SET status = COALESCE($2, status),
            priority = COALESCE($3, priority),
            description = COALESCE($4, description),
            due_date = COALESCE($5, due_date)
        WHERE id = $1
          AND deleted = false
        RETURNING {TASK_COLUMNS}
        """,
        task_id,
        status,
        priority,
        description,
        due_date,
    )


async def soft_delete_task(task_id: int) -> bool:
    row = await db.fetch_one(
        """
        UPDATE promotion_tasks
        SET deleted = true
        WHERE id = $1
          AND deleted = false
        RETURNING id
        """,
        task_id,
    )
    return row is not None


async def insert_tasks(records: list[tuple[int, str, str, str, datetime | None]]) -> None:
    """
    Bulk insert `(release_id, status, priority, description, due_date)` rows.
    """
    if not records:
        return

    pool = db.pool()
    async with pool.acquire() as conn:
        async with conn.transaction():
            await conn.executemany(
                """
                INSERT INTO promotion_tasks (release_id, status, priority, description, due_date)
                VALUES ($1, $2, $3, $4, $5)
                """,
                records,
            )
