"""Treatments (``Service`` rows) offered by the practice."""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.models.service import Service, ServiceCreate


def _utc_naive_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


async def list_services(session: AsyncSession) -> list[Service]:
    result = await session.execute(select(Service).order_by(Service.name))
    return list(result.scalars().all())


async def create_service(session: AsyncSession, data: ServiceCreate) -> Service:
    service = Service(**data.model_dump())
    session.add(service)
    await session.flush()
    await session.refresh(service)
    return service


async def update_service(session: AsyncSession, service_id: int, data: ServiceCreate) -> Service | None:
    service = await session.get(Service, service_id)
    if not service:
        return None
    for key, value in data.model_dump().items():
        setattr(service, key, value)
    service.updated_at = _utc_naive_now()
    session.add(service)
    await session.flush()
    await session.refresh(service)
    return service


async def delete_service(session: AsyncSession, service_id: int) -> bool:
    service = await session.get(Service, service_id)
    if not service:
        return False
    await session.delete(service)
    await session.flush()
    return True
