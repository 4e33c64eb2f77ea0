from datetime import datetime

from pydantic import BaseModel


class SlotInfo(BaseModel):
    start_time: datetime
    end_time: datetime
    available: bool


class AvailableSlotsResponse(BaseModel):
    date: str  # YYYY-MM-DD
    duration_minutes: int
    slots: list[SlotInfo]
