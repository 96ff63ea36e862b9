# backend/pressing/api/v1/endpoints/clients.py

"""
Endpoints REST para clientes particulares.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from pressing.api import deps
from pressing.schemas import client_schema, order_schema
from pressing.schemas.common import SuccessResponse
from pressing.services.client_service import client_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[client_schema.ClientResponse])
async def read_clients(db: AsyncSession = Depends(deps.get_db)) -> List[client_schema.ClientResponse]:
    """Obtiene todos los clientes, del más reciente al más antiguo."""
    clients = await client_service.get_all_clients(db)
    logger.debug(f"📋 CLIENTES: Encontrados {len(clients)} clientes")
    return clients


@router.post("", response_model=client_schema.ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_in: client_schema.ClientCreate,
) -> client_schema.ClientResponse:
    """Crea un cliente; el servidor asigna el ID CLI{n} y pone los totales a cero."""
    logger.info(f"🆕 CLIENTE: Creando cliente '{client_in.first_name} {client_in.last_name}'")
    return await client_service.create_client(db, client_in)


@router.get("/{client_id}/orders", response_model=List[order_schema.OrderResponse])
async def read_client_orders(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_id: str,
) -> List[order_schema.OrderResponse]:
    """Historial de pedidos de un cliente."""
    logger.debug(f"🔍 CLIENTE: Historial de pedidos de '{client_id}'")
    return await client_service.get_client_orders(db, client_id)


@router.put("/{client_id}", response_model=SuccessResponse)
async def update_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_id: str,
    client_in: client_schema.ClientUpdate,
) -> SuccessResponse:
    """Actualiza los datos de un cliente (los totales no son editables)."""
    await client_service.update_client(db, client_id, client_in)
    return SuccessResponse()


@router.delete("/{client_id}", response_model=SuccessResponse)
async def delete_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_id: str,
) -> SuccessResponse:
    """Elimina un cliente; sus pedidos quedan como pedidos sin cliente."""
    await client_service.delete_client(db, client_id)
    return SuccessResponse()
