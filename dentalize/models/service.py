from datetime import UTC, datetime

from pydantic import field_validator
from sqlmodel import Field, SQLModel

DEFAULT_SERVICE_COLOR = "#3B82F6"
MAX_DURATION_MINUTES = 24 * 60


def _utc_naive_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class ServiceBase(SQLModel):
    name: str = Field(index=True)
    description: str | None = None
    duration: int  # minutes
    price: float
    color: str = DEFAULT_SERVICE_COLOR


class Service(ServiceBase, table=True):
    """A treatment offered by the practice; its duration seeds new bookings."""

    __tablename__ = "services"
    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=_utc_naive_now)
    updated_at: datetime = Field(default_factory=_utc_naive_now)


class ServicePublic(ServiceBase):
    id: int


class ServiceCreate(SQLModel):
    name: str
    description: str | None = None
    duration: int
    price: float
    color: str = DEFAULT_SERVICE_COLOR

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        normalized = value.strip()
        if len(normalized) < 2:
            raise ValueError("Name must be at least 2 characters")
        return normalized

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Duration must be at least 1 minute")
        if value > MAX_DURATION_MINUTES:
            raise ValueError(f"Duration must be at most {MAX_DURATION_MINUTES} minutes")
        return value

    @field_validator("price")
    @classmethod
    def validate_price(cls, value: float) -> float:
        if value < 0:
            raise ValueError("Price must be greater than or equal to 0")
        return value

    @field_validator("color", mode="before")
    @classmethod
    def default_color(cls, value: str | None) -> str:
        return value or DEFAULT_SERVICE_COLOR
