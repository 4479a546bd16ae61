"""
Pydantic schemas for release endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from core.enums import ReleaseType
from tasks.schemas import TaskResponse


class ReleaseRequest(BaseModel):
    user_id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=200)
    type: ReleaseType
    release_date: datetime
    description: str | None = Field(default=None, max_length=1000)


class ReleaseResponse(BaseModel):
    id: int
    user_id: int
    title: str
    type: ReleaseType
    release_date: datetime
    description: str | None = None


class ReleaseDetailResponse(ReleaseResponse):
    tasks: list[TaskResponse] = Field(default_factory=list)
