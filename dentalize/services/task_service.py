from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.models.client import Client, ClientPublic
from dentalize.models.service import Service, ServicePublic
from dentalize.models.task import Task, TaskWithRelations


def to_task_with_relations(
    task: Task, client: Client | None, service: Service | None
) -> TaskWithRelations:
    return TaskWithRelations(
        **task.model_dump(exclude={"created_at", "updated_at"}),
        client=ClientPublic.model_validate(client) if client else None,
        service=ServicePublic.model_validate(service) if service else None,
    )


async def list_tasks_for_owner(
    session: AsyncSession, owner_id: int, start: datetime, end: datetime
) -> list[TaskWithRelations]:
    """Owner's tasks starting within [start, end], earliest first."""
    q = (
        select(Task, Client, Service)
        .outerjoin(Client, Task.client_id == Client.id)
        .outerjoin(Service, Task.service_id == Service.id)
        .where(
            Task.user_id == owner_id,
            Task.start_time >= start,
            Task.start_time <= end,
        )
        .order_by(Task.start_time)
    )
    result = await session.execute(q)
    return [to_task_with_relations(t, c, s) for t, c, s in result.all()]


async def list_tasks_for_client(
    session: AsyncSession, owner_id: int, client_id: int
) -> list[TaskWithRelations]:
    """Owner's tasks for one client, newest first."""
    q = (
        select(Task, Client, Service)
        .outerjoin(Client, Task.client_id == Client.id)
        .outerjoin(Service, Task.service_id == Service.id)
        .where(Task.user_id == owner_id, Task.client_id == client_id)
        .order_by(Task.start_time.desc())
    )
    result = await session.execute(q)
    return [to_task_with_relations(t, c, s) for t, c, s in result.all()]
