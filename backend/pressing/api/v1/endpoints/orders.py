# backend/pressing/api/v1/endpoints/orders.py

"""
Endpoints REST para los pedidos de particulares.

Un pedido se crea en una sola petición con su lista de piezas; el servidor
calcula precios, total, ID y estadísticas del cliente.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from pressing.api import deps
from pressing.schemas import order_schema
from pressing.schemas.common import SuccessResponse
from pressing.services.order_service import order_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[order_schema.OrderResponse])
async def read_orders(db: AsyncSession = Depends(deps.get_db)) -> List[order_schema.OrderResponse]:
    """Obtiene todos los pedidos con sus líneas, del más reciente al más antiguo."""
    orders = await order_service.get_all_orders(db)
    logger.debug(f"📋 PEDIDOS: Encontrados {len(orders)} pedidos")
    return orders


@router.post("", response_model=order_schema.OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    *,
    db: AsyncSession = Depends(deps.get_db),
    order_in: order_schema.OrderCreate,
) -> order_schema.OrderResponse:
    """Crea un pedido con sus piezas en una única transacción."""
    logger.info(f"🧾 PEDIDO: Creando pedido para '{order_in.client_name}' ({len(order_in.pieces)} líneas)")
    return await order_service.create_order(db, order_in)


@router.put("/{order_id}", response_model=SuccessResponse)
async def update_order(
    *,
    db: AsyncSession = Depends(deps.get_db),
    order_id: str,
    order_in: order_schema.OrderUpdate,
) -> SuccessResponse:
    """Actualiza estado, pago, cliente o fechas de un pedido."""
    await order_service.update_order(db, order_id, order_in)
    return SuccessResponse()


@router.delete("/{order_id}", response_model=SuccessResponse)
async def delete_order(
    *,
    db: AsyncSession = Depends(deps.get_db),
    order_id: str,
) -> SuccessResponse:
    await order_service.delete_order(db, order_id)
    return SuccessResponse()
