"""In-process calendar actions for a presentation layer.

Each returns ``{"success": True, ...}`` or ``{"error": message}``; booking
errors never escape as exceptions. Unexpected failures still propagate.
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.core.errors import BookingError
from dentalize.services import booking_service


async def create_task(
    session: AsyncSession, owner_id: int, fields: Mapping[str, Any], timeout: float | None = None
) -> dict[str, Any]:
    try:
        task = await booking_service.book_task(session, owner_id, fields, timeout=timeout)
    except BookingError as e:
        return {"error": e.message}
    return {"success": True, "id": task.id}


async def update_task(
    session: AsyncSession,
    owner_id: int,
    task_id: int,
    fields: Mapping[str, Any],
    timeout: float | None = None,
) -> dict[str, Any]:
    try:
        task = await booking_service.book_task(
            session, owner_id, fields, task_id=task_id, timeout=timeout
        )
    except BookingError as e:
        return {"error": e.message}
    return {"success": True, "id": task.id}


async def delete_task(session: AsyncSession, owner_id: int, task_id: int) -> dict[str, Any]:
    await booking_service.delete_task(session, owner_id, task_id)
    return {"success": True}
