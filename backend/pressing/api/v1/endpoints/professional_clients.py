# backend/pressing/api/v1/endpoints/professional_clients.py

"""
Endpoints REST para clientes profesionales.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from pressing.api import deps
from pressing.schemas import client_schema
from pressing.schemas.common import SuccessResponse
from pressing.services.professional_service import professional_service

router = APIRouter()


@router.get("", response_model=List[client_schema.ProfessionalClientResponse])
async def read_professional_clients(
    db: AsyncSession = Depends(deps.get_db),
) -> List[client_schema.ProfessionalClientResponse]:
    return await professional_service.get_all_clients(db)


@router.post("", response_model=client_schema.ProfessionalClientResponse, status_code=status.HTTP_201_CREATED)
async def create_professional_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_in: client_schema.ProfessionalClientCreate,
) -> client_schema.ProfessionalClientResponse:
    """Crea un cliente profesional con el siguiente ID PRO{n}."""
    return await professional_service.create_client(db, client_in)


@router.put("/{client_id}", response_model=SuccessResponse)
async def update_professional_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_id: str,
    client_in: client_schema.ProfessionalClientUpdate,
) -> SuccessResponse:
    await professional_service.update_client(db, client_id, client_in)
    return SuccessResponse()


@router.delete("/{client_id}", response_model=SuccessResponse)
async def delete_professional_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_id: str,
) -> SuccessResponse:
    """Elimina un cliente profesional sin pedidos (409 si todavía tiene pedidos)."""
    await professional_service.delete_client(db, client_id)
    return SuccessResponse()
