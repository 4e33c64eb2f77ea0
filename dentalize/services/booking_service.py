import asyncio
import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

import pydantic
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.core.config import settings
from dentalize.core.errors import (
    BusinessHoursError,
    CancelledError,
    NotFoundError,
    OverlapError,
    ValidationError,
)
from dentalize.models.client import Client
from dentalize.models.service import Service
from dentalize.models.task import Task, TaskFields
from dentalize.services.business_hours import validate_business_hours
from dentalize.services.overlap_service import has_overlap
from dentalize.services.task_store import (
    delete_owned_task,
    insert_task,
    lock_owner_calendar,
    update_owned_task,
)

logger = logging.getLogger(__name__)

OVERLAP_MESSAGE = "An appointment already exists in this time slot"

# PostgreSQL exclusion_violation, raised by the tasks_no_overlap constraint
_EXCLUSION_VIOLATION = "23P01"


def first_error_message(exc: pydantic.ValidationError) -> str:
    err = exc.errors()[0]
    if err["type"] == "value_error":
        return str(err["ctx"]["error"])
    field = ".".join(str(part) for part in err["loc"])
    if err["type"] == "missing":
        return f"{field.replace('_', ' ').capitalize()} is required"
    return f"{field}: {err['msg']}"


def parse_task_fields(fields: Mapping[str, Any] | TaskFields) -> TaskFields:
    if isinstance(fields, TaskFields):
        return fields
    try:
        return TaskFields.model_validate(dict(fields))
    except pydantic.ValidationError as exc:
        raise ValidationError(first_error_message(exc)) from exc


async def resolve_interval(session: AsyncSession, data: TaskFields) -> tuple[datetime, datetime]:
    """Turn start + (end | duration | service duration | default) into [start, end)."""
    if data.end_time is not None:
        return data.start_time, data.end_time
    minutes = data.duration_minutes
    if minutes is None and data.service_id is not None:
        service = await session.get(Service, data.service_id)
        if service is None:
            raise ValidationError("Service not found")
        minutes = service.duration
    if minutes is None:
        minutes = settings.default_task_duration_minutes
    return data.start_time, data.start_time + timedelta(minutes=minutes)


async def _check_references(session: AsyncSession, data: TaskFields) -> None:
    if data.client_id is not None and await session.get(Client, data.client_id) is None:
        raise ValidationError("Client not found")
    if data.service_id is not None and await session.get(Service, data.service_id) is None:
        raise ValidationError("Service not found")


def _is_exclusion_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return code == _EXCLUSION_VIOLATION


async def _book(
    session: AsyncSession, owner_id: int, data: TaskFields, task_id: int | None
) -> Task:
    start_time, end_time = await resolve_interval(session, data)
    await _check_references(session, data)

    error = validate_business_hours(start_time, end_time)
    if error:
        raise BusinessHoursError(error)

    if not await lock_owner_calendar(session, owner_id):
        raise NotFoundError("Account not found")
    if await has_overlap(session, owner_id, start_time, end_time, exclude_id=task_id):
        raise OverlapError(OVERLAP_MESSAGE)

    values = {
        "title": data.title,
        "description": data.description,
        "start_time": start_time,
        "end_time": end_time,
        "status": data.status,
        "client_id": data.client_id,
        "service_id": data.service_id,
    }
    if task_id is None:
        return await insert_task(session, owner_id, values)
    return await update_owned_task(session, task_id, owner_id, values)


async def book_task(
    session: AsyncSession,
    owner_id: int,
    fields: Mapping[str, Any] | TaskFields,
    task_id: int | None = None,
    timeout: float | None = None,
) -> Task:
    """Create (task_id None) or update a task on the owner's calendar and commit.

    Raises a BookingError subclass on rejection; the session is rolled back on
    every failure so nothing from this call is persisted.
    """
    data = parse_task_fields(fields)
    timeout = settings.booking_timeout_seconds if timeout is None else timeout
    try:
        async with asyncio.timeout(timeout):
            task = await _book(session, owner_id, data, task_id)
        # Outside the deadline: once COMMIT is sent the booking is final.
        await session.commit()
    except TimeoutError as exc:
        await session.rollback()
        logger.warning("Booking for owner %s timed out after %.1fs", owner_id, timeout)
        raise CancelledError("Booking timed out and was cancelled") from exc
    except asyncio.CancelledError:
        await session.rollback()
        raise
    except IntegrityError as exc:
        await session.rollback()
        if _is_exclusion_violation(exc):
            logger.info("Booking for owner %s lost a write race", owner_id)
            raise OverlapError(OVERLAP_MESSAGE) from exc
        raise
    except (ValidationError, BusinessHoursError, OverlapError, NotFoundError) as exc:
        await session.rollback()
        logger.info("Booking rejected for owner %s: %s", owner_id, exc.message)
        raise
    except Exception:
        await session.rollback()
        raise
    logger.info(
        "Booked task %s for owner %s [%s, %s)", task.id, owner_id, task.start_time, task.end_time
    )
    return task


async def delete_task(session: AsyncSession, owner_id: int, task_id: int) -> bool:
    """Delete without validation. Returns False when the id is not the owner's."""
    try:
        deleted = await delete_owned_task(session, task_id, owner_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    if not deleted:
        logger.debug("Delete of task %s for owner %s matched nothing", task_id, owner_id)
    return deleted
