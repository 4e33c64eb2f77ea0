from datetime import UTC, datetime

from pydantic import EmailStr, field_validator
from sqlmodel import Field, SQLModel


def _utc_naive_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class ClientBase(SQLModel):
    name: str = Field(index=True)
    email: str | None = None
    phone: str | None = None
    cpf: str | None = None
    notes: str | None = None
    description: str | None = None


class Client(ClientBase, table=True):
    __tablename__ = "clients"
    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=_utc_naive_now)
    updated_at: datetime = Field(default_factory=_utc_naive_now)


class ClientPublic(ClientBase):
    id: int
    created_at: datetime
    updated_at: datetime


class ClientCreate(SQLModel):
    name: str
    email: EmailStr | None = None
    phone: str | None = None
    cpf: str | None = None
    notes: str | None = None
    description: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        normalized = value.strip()
        if len(normalized) < 2:
            raise ValueError("Name must be at least 2 characters")
        return normalized

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value
