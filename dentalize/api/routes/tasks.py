from datetime import datetime
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.api.deps import get_current_user, get_session
from dentalize.api.schemas.task import ActionSuccess
from dentalize.core.errors import NotFoundError
from dentalize.models.task import TaskWithRelations
from dentalize.models.user import User
from dentalize.services.booking_service import book_task, delete_task
from dentalize.services.task_service import list_tasks_for_owner

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskWithRelations])
async def list_my_tasks(
    start: datetime = Query(...),
    end: datetime = Query(...),
    session: AsyncSession = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> list[TaskWithRelations]:
    return await list_tasks_for_owner(session, current_user.id, start, end)


# Bodies are validated by the booking core so errors keep the {"error": ...} shape.
@router.post("", response_model=ActionSuccess, status_code=status.HTTP_201_CREATED)
async def create_task(
    body: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> ActionSuccess:
    task = await book_task(session, current_user.id, body)
    return ActionSuccess(id=task.id)


@router.put("/{task_id}", response_model=ActionSuccess)
async def update_task(
    task_id: int,
    body: dict[str, Any] = Body(...),
    session: AsyncSession = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> ActionSuccess:
    task = await book_task(session, current_user.id, body, task_id=task_id)
    return ActionSuccess(id=task.id)


@router.delete("/{task_id}", response_model=ActionSuccess)
async def remove_task(
    task_id: int,
    session: AsyncSession = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> ActionSuccess:
    if not await delete_task(session, current_user.id, task_id):
        raise NotFoundError("Appointment not found")
    return ActionSuccess()
