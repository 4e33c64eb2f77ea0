from datetime import datetime

import pytest

from dentalize.models.task import Task
from dentalize.services.overlap_service import has_overlap, intervals_overlap

from tests.conftest import add_row


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 6, 10, hour, minute)


EXISTING = (at(10), at(11))


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (at(10, 30), at(10, 45), True),  # fully inside
        (at(9, 30), at(10, 15), True),  # straddles start
        (at(10, 45), at(11, 30), True),  # straddles end
        (at(9), at(12), True),  # fully contains
        (at(10), at(11), True),  # identical
        (at(11), at(12), False),  # abuts end
        (at(9), at(10), False),  # abuts start
        (at(8), at(9), False),  # disjoint
    ],
)
def test_intervals_overlap_cases(start: datetime, end: datetime, expected: bool) -> None:
    assert intervals_overlap(*EXISTING, start, end) is expected


async def _book_existing(session_maker, owner_id: int) -> Task:
    return await add_row(
        session_maker, Task(user_id=owner_id, title="Cleaning", start_time=at(10), end_time=at(11))
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (at(10, 30), at(10, 45), True),
        (at(9, 30), at(10, 15), True),
        (at(10, 45), at(11, 30), True),
        (at(9), at(12), True),
        (at(11), at(12), False),
        (at(8), at(9), False),
    ],
)
async def test_has_overlap_matches_the_three_cases(
    session_maker, session, owner, start: datetime, end: datetime, expected: bool
) -> None:
    await _book_existing(session_maker, owner.id)

    assert await has_overlap(session, owner.id, start, end) is expected


@pytest.mark.asyncio
async def test_has_overlap_is_false_for_empty_calendar(session, owner) -> None:
    assert await has_overlap(session, owner.id, at(10), at(11)) is False


@pytest.mark.asyncio
async def test_other_owners_tasks_never_collide(session_maker, session, owner, other_owner) -> None:
    await _book_existing(session_maker, owner.id)

    assert await has_overlap(session, other_owner.id, at(10), at(11)) is False


@pytest.mark.asyncio
async def test_excluded_task_is_ignored(session_maker, session, owner) -> None:
    existing = await _book_existing(session_maker, owner.id)

    assert await has_overlap(session, owner.id, at(10), at(11), exclude_id=existing.id) is False
    assert await has_overlap(session, owner.id, at(10), at(11), exclude_id=existing.id + 1) is True
