"""
User persistence helpers.
"""

from __future__ import annotations

from typing import Any

from core import db

USER_COLUMNS = "id, name, created_at, last_active_at, deleted"


async def list_active_users() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {USER_COLUMNS}
        FROM users
        WHERE deleted = false
        ORDER BY name
        """
    )


async def touch_last_active(user_ids: list[int]) -> None:
    if not user_ids:
        return
    await db.execute(
        """
        UPDATE users
        SET last_active_at = now()
        WHERE id = ANY($1::bigint[])
        """,
        user_ids,
    )


async def get_active_user(user_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {USER_COLUMNS}
        FROM users
        WHERE id = $1
          AND deleted = false
        """,
        user_id,
    )


async def get_active_user_by_name(name: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {USER_COLUMNS}
        FROM users
        WHERE name = $1
          AND deleted = false
        """,
        name,
    )


async def list_user_names() -> set[str]:
    rows = await db.fetch_all("SELECT name FROM users")
    return {str(row["name"]) for row in rows}


async def insert_users(names: list[str]) -> None:
    if not names:
        return
    await db.execute(
        """
        INSERT INTO users (name)
        SELECT unnest($1::text[])
        ON CONFLICT (name) DO NOTHING
        """,
        names,
    )
