import asyncio

import pytest
from sqlalchemy import select

from dentalize.core.errors import OverlapError
from dentalize.models.task import Task
from dentalize.services.booking_service import book_task


async def _book(session_maker, owner_id: int, start: str, end: str):
    async with session_maker() as session:
        return await book_task(
            session, owner_id, {"title": "Root canal", "start_time": start, "end_time": end}
        )


async def _owned_tasks(session_maker, owner_id: int) -> list[Task]:
    async with session_maker() as session:
        result = await session.execute(select(Task).where(Task.user_id == owner_id))
        return list(result.scalars().all())


@pytest.mark.asyncio
async def test_concurrent_overlapping_creates_admit_exactly_one(session_maker, owner) -> None:
    results = await asyncio.gather(
        _book(session_maker, owner.id, "2024-06-10T10:00", "2024-06-10T11:00"),
        _book(session_maker, owner.id, "2024-06-10T10:00", "2024-06-10T11:00"),
        return_exceptions=True,
    )

    booked = [r for r in results if isinstance(r, Task)]
    rejected = [r for r in results if isinstance(r, OverlapError)]
    assert len(booked) == 1
    assert len(rejected) == 1
    assert len(await _owned_tasks(session_maker, owner.id)) == 1


@pytest.mark.asyncio
async def test_many_concurrent_partial_overlaps_never_double_book(session_maker, owner) -> None:
    windows = [
        ("2024-06-10T10:00", "2024-06-10T11:00"),
        ("2024-06-10T10:30", "2024-06-10T11:30"),
        ("2024-06-10T09:30", "2024-06-10T10:15"),
        ("2024-06-10T09:00", "2024-06-10T12:00"),
    ]

    results = await asyncio.gather(
        *(_book(session_maker, owner.id, start, end) for start, end in windows),
        return_exceptions=True,
    )

    assert sum(isinstance(r, Task) for r in results) == 1
    assert sum(isinstance(r, OverlapError) for r in results) == len(windows) - 1
    assert len(await _owned_tasks(session_maker, owner.id)) == 1


@pytest.mark.asyncio
async def test_concurrent_bookings_for_different_owners_both_succeed(session_maker, owner, other_owner) -> None:
    results = await asyncio.gather(
        _book(session_maker, owner.id, "2024-06-10T10:00", "2024-06-10T11:00"),
        _book(session_maker, other_owner.id, "2024-06-10T10:00", "2024-06-10T11:00"),
    )

    assert {task.user_id for task in results} == {owner.id, other_owner.id}
