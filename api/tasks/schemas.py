"""
Pydantic schemas for promotion task endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from core.enums import TaskPriority, TaskStatus


class TaskResponse(BaseModel):
    id: int
    release_id: int
    status: TaskStatus
    priority: TaskPriority
    description: str
    due_date: datetime | None = None


class UpdateStatusRequest(BaseModel):
    status: TaskStatus


class UpdatePriorityRequest(BaseModel):
    priority: TaskPriority


class SaveTaskRequest(BaseModel):
    """
    Create when `id` is omitted, otherwise update the fields that are set.
    """

    id: int | None = Field(default=None, ge=1)
    release_id: int | None = Field(default=None, ge=1)
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    description: str | None = Field(default=None, max_length=1000)
    due_date: datetime | None = None
