from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dentalize.api.deps import get_current_user, get_session
from dentalize.models.service import ServiceCreate, ServicePublic
from dentalize.services.catalog_service import (
    create_service,
    delete_service,
    list_services,
    update_service,
)

router = APIRouter(prefix="/services", tags=["services"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=list[ServicePublic])
async def list_all_services(session: AsyncSession = Depends(get_session)) -> list[ServicePublic]:
    services = await list_services(session)
    return [ServicePublic.model_validate(s) for s in services]


@router.post("", response_model=ServicePublic, status_code=status.HTTP_201_CREATED)
async def add_service(body: ServiceCreate, session: AsyncSession = Depends(get_session)) -> ServicePublic:
    service = await create_service(session, body)
    return ServicePublic.model_validate(service)


@router.put("/{service_id}", response_model=ServicePublic)
async def edit_service(
    service_id: int, body: ServiceCreate, session: AsyncSession = Depends(get_session)
) -> ServicePublic:
    service = await update_service(session, service_id, body)
    if not service:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return ServicePublic.model_validate(service)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_service(service_id: int, session: AsyncSession = Depends(get_session)) -> None:
    if not await delete_service(session, service_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
