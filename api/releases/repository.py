"""
Release persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from core import db

RELEASE_COLUMNS = "id, user_id, title, type, release_date, description, deleted"


async def get_active_release(release_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {RELEASE_COLUMNS}
        FROM releases
        WHERE id = $1
          AND deleted = false
        """,
        release_id,
    )


async def list_active_releases_for_user(user_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {RELEASE_COLUMNS}
        FROM releases
        WHERE user_id = $1
          AND deleted = false
        ORDER BY release_date, id
        """,
        user_id,
    )


async def create_release(
    *,
    user_id: int,
    title: str,
    release_type: str,
    release_date: datetime,
    description: str | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO releases (user_id, title, type, release_date, description)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {RELEASE_COLUMNS}
        """,
        user_id,
        title,
        release_type,
        release_date,
        description,
    )
    if row is None:
        raise RuntimeError("Failed to create release.")
    return row


async def update_release(
    release_id: int,
    *,
    user_id: int,
    title: str,
    release_type: str,
    release_date: datetime,
    description: str | None,
) -> dict[str, Any] | None:
    """
    Replace the editable fields of an active release.
    Returns None when the release is missing or deleted.
    """
    return await db.fetch_one(
        f"""
        UPDATE releases
        SET user_id = $2,
            title = $3,
            type = $4,
            release_date = $5,
            description = $6
        WHERE id = $1
          AND deleted = false
        RETURNING {RELEASE_COLUMNS}
        """,
        release_id,
        user_id,
        title,
        release_type,
        release_date,
        description,
    )


async def soft_delete_release(release_id: int) -> bool:
    row = await db.fetch_one(
        """
        UPDATE releases
        SET deleted = true
        WHERE id = $1
          AND deleted = false
        RETURNING id
        """,
        release_id,
    )
    return row is not None


async def user_ids_without_releases() -> list[int]:
    rows = await db.fetch_all(
        """
        SELECT u.id
        FROM users u
        WHERE NOT EXISTS (SELECT 1 FROM releases r WHERE r.user_id = u.id)
        ORDER BY u.id
        """
    )
    return [int(row["id"]) for row in rows]
