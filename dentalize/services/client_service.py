from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.models.client import Client, ClientCreate


def _utc_naive_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


async def list_clients(session: AsyncSession) -> list[Client]:
    result = await session.execute(select(Client).order_by(Client.name))
    return list(result.scalars().all())


async def get_client(session: AsyncSession, client_id: int) -> Client | None:
    return await session.get(Client, client_id)


async def create_client(session: AsyncSession, data: ClientCreate) -> Client:
    client = Client(**data.model_dump())
    session.add(client)
    await session.flush()
    await session.refresh(client)
    return client


async def update_client(session: AsyncSession, client_id: int, data: ClientCreate) -> Client | None:
    client = await session.get(Client, client_id)
    if not client:
        return None
    for key, value in data.model_dump().items():
        setattr(client, key, value)
    client.updated_at = _utc_naive_now()
    session.add(client)
    await session.flush()
    await session.refresh(client)
    return client


async def delete_client(session: AsyncSession, client_id: int) -> bool:
    client = await session.get(Client, client_id)
    if not client:
        return False
    await session.delete(client)
    await session.flush()
    return True
