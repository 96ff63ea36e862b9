# backend/pressing/api/v1/endpoints/professional_orders.py

"""
Endpoints REST para pedidos profesionales y seguimiento de impagos.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from pressing.api import deps
from pressing.schemas import order_schema
from pressing.schemas.common import SuccessResponse
from pressing.services.professional_service import professional_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[order_schema.ProfessionalOrderResponse])
async def read_professional_orders(
    db: AsyncSession = Depends(deps.get_db),
) -> List[order_schema.ProfessionalOrderResponse]:
    return await professional_service.get_all_orders(db)


@router.get("/overdue", response_model=List[order_schema.ProfessionalOrderResponse])
async def read_overdue_professional_orders(
    db: AsyncSession = Depends(deps.get_db),
) -> List[order_schema.ProfessionalOrderResponse]:
    """Pedidos con pago pendiente y fecha de vencimiento pasada."""
    overdue = await professional_service.get_overdue_orders(db)
    if overdue:
        logger.warning(f"⚠️ PROFESIONAL: {len(overdue)} pedidos con el pago vencido")
    return overdue


@router.post("", response_model=order_schema.ProfessionalOrderResponse, status_code=status.HTTP_201_CREATED)
async def create_professional_order(
    *,
    db: AsyncSession = Depends(deps.get_db),
    order_in: order_schema.ProfessionalOrderCreate,
) -> order_schema.ProfessionalOrderResponse:
    """Crea un pedido profesional; fechas e importe que falten se calculan."""
    return await professional_service.create_order(db, order_in)


@router.put("/{order_id}", response_model=SuccessResponse)
async def update_professional_order(
    *,
    db: AsyncSession = Depends(deps.get_db),
    order_id: str,
    order_in: order_schema.ProfessionalOrderUpdate,
) -> SuccessResponse:
    await professional_service.update_order(db, order_id, order_in)
    return SuccessResponse()


@router.delete("/{order_id}", response_model=SuccessResponse)
async def delete_professional_order(
    *,
    db: AsyncSession = Depends(deps.get_db),
    order_id: str,
) -> SuccessResponse:
    await professional_service.delete_order(db, order_id)
    return SuccessResponse()
