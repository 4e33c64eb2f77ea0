from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.api.deps import get_current_user, get_session
from dentalize.api.schemas.client import ClientDetail
from dentalize.models.client import ClientCreate, ClientPublic
from dentalize.models.user import User
from dentalize.services.client_service import (
    create_client,
    delete_client,
    get_client,
    list_clients,
    update_client,
)
from dentalize.services.task_service import list_tasks_for_client

router = APIRouter(prefix="/clients", tags=["clients"], dependencies=[Depends(get_current_user)])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")


@router.get("", response_model=list[ClientPublic])
async def list_all_clients(session: AsyncSession = Depends(get_session)) -> list[ClientPublic]:
    clients = await list_clients(session)
    return [ClientPublic.model_validate(c) for c in clients]


@router.post("", response_model=ClientPublic, status_code=status.HTTP_201_CREATED)
async def add_client(body: ClientCreate, session: AsyncSession = Depends(get_session)) -> ClientPublic:
    client = await create_client(session, body)
    return ClientPublic.model_validate(client)


@router.get("/{client_id}", response_model=ClientDetail)
async def client_detail(
    client_id: int,
    session: AsyncSession = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> ClientDetail:
    """Client record plus the caller's appointments with them, newest first."""
    client = await get_client(session, client_id)
    if not client:
        raise _not_found()
    tasks = await list_tasks_for_client(session, current_user.id, client_id)
    return ClientDetail(**client.model_dump(), tasks=tasks)


@router.put("/{client_id}", response_model=ClientPublic)
async def edit_client(
    client_id: int, body: ClientCreate, session: AsyncSession = Depends(get_session)
) -> ClientPublic:
    client = await update_client(session, client_id, body)
    if not client:
        raise _not_found()
    return ClientPublic.model_validate(client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_client(client_id: int, session: AsyncSession = Depends(get_session)) -> None:
    if not await delete_client(session, client_id):
        raise _not_found()
