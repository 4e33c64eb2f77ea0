from datetime import UTC, datetime
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.core.errors import NotFoundError
from dentalize.models.task import Task
from dentalize.models.user import User


def _utc_naive_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


async def lock_owner_calendar(session: AsyncSession, owner_id: int) -> bool:
    """Row-lock the owner so concurrent bookings for the same calendar queue up.

    Returns False when the owner does not exist. SQLite ignores FOR UPDATE; there
    the engine's BEGIN IMMEDIATE provides the same ordering.
    """
    result = await session.execute(
        select(User.id).where(User.id == owner_id).with_for_update()
    )
    return result.scalar_one_or_none() is not None


async def find_owned_tasks(
    session: AsyncSession,
    owner_id: int,
    exclude_id: int | None = None,
    start_inclusive: datetime | None = None,
    end_exclusive: datetime | None = None,
) -> list[Task]:
    q = select(Task).where(Task.user_id == owner_id).order_by(Task.start_time)
    if exclude_id is not None:
        q = q.where(Task.id != exclude_id)
    if start_inclusive is not None:
        q = q.where(Task.end_time > start_inclusive)
    if end_exclusive is not None:
        q = q.where(Task.start_time < end_exclusive)
    result = await session.execute(q)
    return list(result.scalars().all())


async def insert_task(session: AsyncSession, owner_id: int, values: dict[str, Any]) -> Task:
    task = Task(user_id=owner_id, **values)
    session.add(task)
    await session.flush()
    await session.refresh(task)
    return task


async def update_owned_task(
    session: AsyncSession, task_id: int, owner_id: int, values: dict[str, Any]
) -> Task:
    result = await session.execute(
        select(Task).where(Task.id == task_id, Task.user_id == owner_id)
    )
    task = result.scalar_one_or_none()
    if not task:
        raise NotFoundError("Appointment not found")
    for key, value in values.items():
        setattr(task, key, value)
    task.updated_at = _utc_naive_now()
    session.add(task)
    await session.flush()
    await session.refresh(task)
    return task


async def delete_owned_task(session: AsyncSession, task_id: int, owner_id: int) -> bool:
    result = await session.execute(
        delete(Task).where(Task.id == task_id, Task.user_id == owner_id)
    )
    await session.flush()
    return bool(result.rowcount)
