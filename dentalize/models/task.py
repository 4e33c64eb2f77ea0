from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator, model_validator
from sqlalchemy import CheckConstraint, Index
from sqlmodel import Field, SQLModel

from dentalize.models.client import ClientPublic
from dentalize.models.service import MAX_DURATION_MINUTES, ServicePublic


def _utc_naive_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class TaskStatus(str, Enum):
    # No transition rules: any status may be set on create or update.
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Task(SQLModel, table=True):
    """An appointment on a practitioner's calendar.

    start_time/end_time are naive local wall-clock datetimes.
    """

    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_user_id_start_time", "user_id", "start_time"),
        CheckConstraint("start_time < end_time", name="ck_tasks_start_before_end"),
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    title: str
    description: str | None = None
    start_time: datetime
    end_time: datetime
    status: TaskStatus = Field(default=TaskStatus.SCHEDULED)
    client_id: int | None = Field(default=None, foreign_key="clients.id", ondelete="SET NULL", index=True)
    service_id: int | None = Field(default=None, foreign_key="services.id", ondelete="SET NULL")
    created_at: datetime = Field(default_factory=_utc_naive_now)
    updated_at: datetime = Field(default_factory=_utc_naive_now)


class TaskPublic(SQLModel):
    id: int
    user_id: int
    title: str
    description: str | None = None
    start_time: datetime
    end_time: datetime
    status: TaskStatus
    client_id: int | None = None
    service_id: int | None = None


class TaskWithRelations(TaskPublic):
    client: ClientPublic | None = None
    service: ServicePublic | None = None


class TaskFields(BaseModel):
    """Caller input for creating or editing a task.

    The interval is a start instant plus either an end instant or a duration;
    with neither, the attached service's duration (or the configured default)
    is used.
    """

    title: str
    description: str | None = None
    start_time: datetime
    end_time: datetime | None = None
    duration_minutes: int | None = None
    client_id: int | None = None
    service_id: int | None = None
    status: TaskStatus = TaskStatus.SCHEDULED

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Title is required")
        return normalized

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip()
        return normalized or None

    @field_validator("client_id", "service_id", mode="before")
    @classmethod
    def blank_reference_is_none(cls, value: Any) -> Any:
        # Forms send "none" or "" for an unselected client/service.
        if isinstance(value, str) and value.strip().lower() in ("", "none"):
            return None
        return value

    @field_validator("start_time", "end_time")
    @classmethod
    def to_local_wall_clock(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value

    @field_validator("duration_minutes")
    @classmethod
    def validate_duration(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError("Duration must be at least 1 minute")
        if value > MAX_DURATION_MINUTES:
            raise ValueError(f"Duration must be at most {MAX_DURATION_MINUTES} minutes")
        return value

    @model_validator(mode="after")
    def check_single_end(self) -> "TaskFields":
        if self.end_time is not None and self.duration_minutes is not None:
            raise ValueError("Provide either an end time or a duration, not both")
        return self
