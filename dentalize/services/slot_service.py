from datetime import date, datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.core.config import settings
from dentalize.services.overlap_service import intervals_overlap
from dentalize.services.task_store import find_owned_tasks


def _slot_starts_for_date(d: date, duration_minutes: int) -> list[datetime]:
    """Candidate start times on the given day that fit inside business hours."""
    slots: list[datetime] = []
    current = datetime(d.year, d.month, d.day, settings.business_start_hour, 0, 0)
    step = timedelta(minutes=settings.slot_step_minutes)
    duration = timedelta(minutes=duration_minutes)
    day_end = datetime(d.year, d.month, d.day, settings.business_end_hour, 0, 0)
    while current + duration <= day_end:
        slots.append(current)
        current += step
    return slots


async def get_available_slots_for_date(
    session: AsyncSession, owner_id: int, d: date, duration_minutes: int
) -> list[tuple[datetime, datetime, bool]]:
    """Returns (start, end, available) for every candidate slot on the owner's calendar."""
    slots = _slot_starts_for_date(d, duration_minutes)
    if not slots:
        return []
    duration = timedelta(minutes=duration_minutes)
    tasks = await find_owned_tasks(
        session, owner_id, start_inclusive=slots[0], end_exclusive=slots[-1] + duration
    )
    out: list[tuple[datetime, datetime, bool]] = []
    for s in slots:
        e = s + duration
        busy = any(intervals_overlap(t.start_time, t.end_time, s, e) for t in tasks)
        out.append((s, e, not busy))
    return out
