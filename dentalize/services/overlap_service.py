"""Overlap detection for a practitioner's calendar.

An existing task [s1, e1) collides with a candidate [s2, e2) when the
candidate starts during it, ends during it, or contains it entirely.
Touching intervals (e1 == s2 or e2 == s1) do not collide.
"""

from datetime import datetime

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.models.task import Task


def intervals_overlap(
    existing_start: datetime,
    existing_end: datetime,
    start_time: datetime,
    end_time: datetime,
) -> bool:
    starts_during = existing_start <= start_time and existing_end > start_time
    ends_during = existing_start < end_time and existing_end >= end_time
    contains = start_time <= existing_start and end_time >= existing_end
    return starts_during or ends_during or contains


def _overlap_clause(start_time: datetime, end_time: datetime):
    return or_(
        # Candidate starts during an existing task
        and_(Task.start_time <= start_time, Task.end_time > start_time),
        # Candidate ends during an existing task
        and_(Task.start_time < end_time, Task.end_time >= end_time),
        # Candidate completely contains an existing task
        and_(Task.start_time >= start_time, Task.end_time <= end_time),
    )


async def has_overlap(
    session: AsyncSession,
    owner_id: int,
    start_time: datetime,
    end_time: datetime,
    exclude_id: int | None = None,
) -> bool:
    """True if any of the owner's tasks, other than exclude_id, collides with the interval."""
    q = select(Task.id).where(Task.user_id == owner_id, _overlap_clause(start_time, end_time))
    if exclude_id is not None:
        q = q.where(Task.id != exclude_id)
    result = await session.execute(q.limit(1))
    return result.first() is not None
