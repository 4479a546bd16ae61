"""
Promotion task API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from . import schemas, service

router = APIRouter(prefix="/tasks")


@router.get("", response_model=list[schemas.TaskResponse])
async def list_tasks() -> list[schemas.TaskResponse]:
    return await service.list_tasks()


@router.get("/{task_id}", response_model=schemas.TaskResponse)
async def get_task(task_id: int) -> schemas.TaskResponse:
    return await service.get_task(task_id)


@router.put("/{task_id}/status", response_model=schemas.TaskResponse)
async def update_task_status(task_id: int, request: schemas.UpdateStatusRequest) -> schemas.TaskResponse:
    return await service.update_status(task_id, request.status)


@router.put("/{task_id}/priority", response_model=schemas.TaskResponse)
async def update_task_priority(task_id: int, request: schemas.UpdatePriorityRequest) -> schemas.TaskResponse:
    return await service.update_priority(task_id, request.priority)


@router.post("", response_model=schemas.TaskResponse)
async def save_task(request: schemas.SaveTaskRequest) -> schemas.TaskResponse:
    """
    Create a task (no `id`) or update the provided fields of an existing one.
    """
    return await service.save_task(request)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int) -> Response:
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
