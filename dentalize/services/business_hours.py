from datetime import datetime, time

from dentalize.core.config import settings

BUSINESS_START_HOUR = settings.business_start_hour
BUSINESS_END_HOUR = settings.business_end_hour


def validate_business_hours(
    start_time: datetime,
    end_time: datetime,
    start_hour: int = BUSINESS_START_HOUR,
    end_hour: int = BUSINESS_END_HOUR,
) -> str | None:
    """Return the first violated rule's message, or None if the interval is bookable.

    Checked in order: start not before the opening hour, end not after the
    closing hour (closing hour sharp is allowed), start strictly before end.
    """
    if start_time.hour < start_hour:
        return f"Start time cannot be before {start_hour}:00"

    if end_time.hour > end_hour or (end_time.hour == end_hour and end_time.time() > time(end_hour)):
        return f"End time cannot be after {end_hour}:00"

    if start_time >= end_time:
        return "Start time must be before end time"

    return None
