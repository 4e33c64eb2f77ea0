from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.api.deps import get_current_user, get_session
from dentalize.api.schemas.slot import AvailableSlotsResponse, SlotInfo
from dentalize.core.config import settings
from dentalize.models.service import MAX_DURATION_MINUTES
from dentalize.models.user import User
from dentalize.services.slot_service import get_available_slots_for_date

router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("/available", response_model=AvailableSlotsResponse)
async def available_slots(
    date_param: date = Query(..., alias="date"),
    duration_minutes: int = Query(settings.default_task_duration_minutes, ge=1, le=MAX_DURATION_MINUTES),
    session: AsyncSession = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> AvailableSlotsResponse:
    """Candidate start times on the caller's calendar for the given day, each flagged available or not."""
    slots = await get_available_slots_for_date(session, current_user.id, date_param, duration_minutes)
    return AvailableSlotsResponse(
        date=date_param.isoformat(),
        duration_minutes=duration_minutes,
        slots=[SlotInfo(start_time=s, end_time=e, available=avail) for s, e, avail in slots],
    )
