"""
Pydantic schemas for user endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from releases.schemas import ReleaseDetailResponse


class UserResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    last_active_at: datetime


class UserDetailResponse(UserResponse):
    releases: list[ReleaseDetailResponse] = Field(default_factory=list)
