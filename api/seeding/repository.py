"""
Task template persistence (the master promotion checklist).
"""

from __future__ import annotations

from typing import Any

from core import db


async def count_templates() -> int:
    row = await db.fetch_one("SELECT count(*) AS n FROM task_templates")
    return int((row or {}).get("n", 0))


async def insert_templates(records: list[tuple[str, str, str]]) -> None:
    """
    Bulk insert `(title, description, priority)` rows.
    """
    if not records:
        return

    pool = db.pool()
    async with pool.acquire() as conn:
        async with conn.transaction():
            await conn.executemany(
                "INSERT INTO task_templates (title, description, priority) VALUES ($1, $2, $3)",
                records,
            )


async def list_active_templates() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, title, description, priority
        FROM task_templates
        WHERE deleted = false
        ORDER BY id
        """
    )
