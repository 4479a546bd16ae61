"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings

SCHEMA_PATH = Path(__file__).with_name("schema.sql")

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    return _sanitize_database_url(settings.database_url())


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.db_pool_min_size(),
        max_size=settings.db_pool_max_size(),
        command_timeout=settings.db_command_timeout_s(),
    )
    logger.info("db_pool_ready min_size=%s max_size=%s", _pool.get_min_size(), _pool.get_max_size())


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def apply_schema() -> None:
    """
    Create tables if they do not exist yet. Safe to run on every startup.
    """
    await pool().execute(SCHEMA_PATH.read_text(encoding="utf-8"))


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool().fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    await pool().execute(sql, *args)


@asynccontextmanager
async def transaction(
    *,
    isolation: str = "read_committed",
    readonly: bool = False,
) -> AsyncIterator[asyncpg.Connection]:
    """
    Acquire a connection and run the block inside one transaction.

    Use `isolation="repeatable_read", readonly=True` when several SELECTs
    must see the same point-in-time view of the data.
    """
    async with pool().acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction(isolation=isolation, readonly=readonly):
            yield conn


async def fetch_all_in(conn: asyncpg.Connection, sql: str, *args: Any) -> list[dict[str, Any]]:
    rows = await conn.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]
