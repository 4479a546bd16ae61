"""
Promotion task business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.enums import TaskPriority, TaskStatus
from releases import repository as release_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def to_task_response(row: dict) -> schemas.TaskResponse:
    return schemas.TaskResponse(
        id=int(row["id"]),
        release_id=int(row["release_id"]),
        status=TaskStatus(row["status"]),
        priority=TaskPriority(row["priority"]),
        description=str(row["description"]),
        due_date=row.get("due_date"),
    )


def _not_found(task_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Task with ID {task_id} not found.",
    )


async def list_tasks() -> list[schemas.TaskResponse]:
    rows = await repository.list_active_tasks()
    return [to_task_response(row) for row in rows]


async def get_task(task_id: int) -> schemas.TaskResponse:
    row = await repository.get_active_task(task_id)
    if row is None:
        raise _not_found(task_id)
    return to_task_response(row)


async def update_status(task_id: int, new_status: TaskStatus) -> schemas.TaskResponse:
    row = await repository.update_task(task_id, status=new_status.value)
    if row is None:
        raise _not_found(task_id)
    logger.info("task_status_updated task_id=%s status=%s", task_id, new_status.value)
    return to_task_response(row)


async def update_priority(task_id: int, new_priority: TaskPriority) -> schemas.TaskResponse:
    row = await repository.update_task(task_id, priority=new_priority.value)
    if row is None:
        raise _not_found(task_id)
    logger.info("task_priority_updated task_id=%s priority=%s", task_id, new_priority.value)
    return to_task_response(row)


async def _create_task(payload: schemas.SaveTaskRequest) -> schemas.TaskResponse:
    description = (payload.description or "").strip()
    if payload.release_id is None or not description:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="release_id and description are required to create a task.",
        )

    release = await release_repository.get_active_release(payload.release_id)
    if release is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Release with ID {payload.release_id} not found.",
        )

    row = await repository.create_task(
        release_id=payload.release_id,
        status=(payload.status or TaskStatus.TODO).value,
        priority=(payload.priority or TaskPriority.LOW).value,
        description=description,
        due_date=payload.due_date,
    )
    logger.info("task_created task_id=%s release_id=%s", row["id"], payload.release_id)
    return to_task_response(row)


async def save_task(payload: schemas.SaveTaskRequest) -> schemas.TaskResponse:
    if payload.id is None:
        return await _create_task(payload)

    description = (payload.description or "").strip() or None
    row = await repository.update_task(
        payload.id,
        status=payload.status.value if payload.status is not None else None,
        priority=payload.priority.value if payload.priority is not None else None,
        description=description,
        due_date=payload.due_date,
    )
    if row is None:
        raise _not_found(payload.id)
    return to_task_response(row)


async def delete_task(task_id: int) -> None:
    if not await repository.soft_delete_task(task_id):
        raise _not_found(task_id)
    logger.info("task_deleted task_id=%s", task_id)
