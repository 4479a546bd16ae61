"""
Enumerations shared by the feature packages and the analytics engine.

Values are stored as text in Postgres (see `core/schema.sql`).
"""

from __future__ import annotations

from enum import Enum


class TaskStatus(str, Enum):
    TODO = "ToDo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"


class TaskPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class ReleaseType(str, Enum):
    SINGLE = "Single"
    EP = "EP"
    ALBUM = "Album"
    MIXTAPE = "Mixtape"


# Lowest to highest; used for ORDER BY in SQL.
PRIORITY_ORDER = [p.value for p in TaskPriority]
