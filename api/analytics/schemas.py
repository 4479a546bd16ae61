"""
Pydantic schemas for analytics endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class TaskCompletionAnalytics(BaseModel):
    overall_completion_percentage: float
    average_completion_percentage_per_user: float
    average_completion_percentage_per_release: float


class UserCompletionAnalytics(BaseModel):
    user_id: int
    user_name: str
    completion_percentage: float


class ReleaseCompletionAnalytics(BaseModel):
    release_id: int
    release_title: str
    user_id: int
    completion_percentage: float
    total_tasks: int
    completed_tasks: int
