# backend/pressing/services/professional_service.py
"""
Servicio para clientes profesionales (B2B) y sus pedidos.

Los pedidos profesionales no tienen desglose por pieza: se facturan por
número de piezas y tipo de servicio, con plazo de pago según las
condiciones del cliente. El servicio mantiene los totales y el saldo
pendiente de cada cliente.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.config import settings
from pressing.core.exceptions import NotFoundError
from pressing.crud import professional_crud
from pressing.db.models.client_model import ProfessionalClient
from pressing.db.models.order_model import ProfessionalOrder
from pressing.schemas import client_schema, order_schema
from pressing.schemas.common import PaymentStatus, ServiceType
from pressing.services.stats_service import stats_service
from pressing.services.transaction import unit_of_work

logger = logging.getLogger(__name__)


def estimate_professional_total(pieces: int, service: ServiceType) -> float:
    """Importe estimado de un pedido profesional: piezas × tarifa del servicio."""
    if ServiceType(service) == ServiceType.PRESSING:
        unit_price = settings.PROFESSIONAL_PRESSING_UNIT_PRICE
    else:
        unit_price = settings.PROFESSIONAL_CLEANING_PRESSING_UNIT_PRICE
    return round(pieces * unit_price, 2)


class ProfessionalService:

    # ========================================
    # CLIENTES PROFESIONALES
    # ========================================

    async def get_all_clients(self, db: AsyncSession) -> List[ProfessionalClient]:
        return await professional_crud.get_all_professional_clients(db)

    async def create_client(
        self, db: AsyncSession, client_in: client_schema.ProfessionalClientCreate
    ) -> ProfessionalClient:
        async with unit_of_work(db):
            client_id = await professional_crud.get_next_professional_client_id(db)
            client = ProfessionalClient(
                id=client_id,
                created_at=datetime.now(),
                total_orders=0,
                total_spent=0.0,
                outstanding_amount=0.0,
                **client_in.model_dump(),
            )
            await professional_crud.insert_professional_client(db, client)

        logger.info(f"🏢 PROFESIONAL: Cliente creado '{client.id}' ({client.company_name})")
        return client

    async def update_client(
        self, db: AsyncSession, client_id: str, client_in: client_schema.ProfessionalClientUpdate
    ) -> ProfessionalClient:
        async with unit_of_work(db):
            client = await professional_crud.update_professional_client(db, client_id, client_in.model_dump())
        logger.info(f"🔄 PROFESIONAL: Cliente actualizado '{client_id}'")
        return client

    async def delete_client(self, db: AsyncSession, client_id: str) -> ProfessionalClient:
        async with unit_of_work(db):
            client = await professional_crud.delete_professional_client(db, client_id)
        logger.info(f"🗑️ PROFESIONAL: Cliente eliminado '{client_id}'")
        return client

    # ========================================
    # PEDIDOS PROFESIONALES
    # ========================================

    async def get_all_orders(self, db: AsyncSession) -> List[ProfessionalOrder]:
        return await professional_crud.get_all_professional_orders(db)

    async def get_overdue_orders(
        self, db: AsyncSession, now: Optional[datetime] = None
    ) -> List[ProfessionalOrder]:
        return await professional_crud.get_overdue_professional_orders(db, now or datetime.now())

    async def create_order(
        self, db: AsyncSession, order_in: order_schema.ProfessionalOrderCreate
    ) -> ProfessionalOrder:
        """
        Crea un pedido profesional completando los datos de facturación:

        - clientName: razón social del cliente si no se envía
        - deliveryDate: fecha de creación + DEFAULT_DELIVERY_DAYS
        - dueDate: fecha de creación + plazo de pago del cliente
        - totalAmount: piezas × tarifa del servicio si no se envía

        Los totales del cliente (y su saldo pendiente si el pedido no está
        pagado) se incrementan en la misma transacción.
        """
        async with unit_of_work(db):
            client = await professional_crud.get_professional_client(db, order_in.client_id)
            if client is None:
                raise NotFoundError(f"Professional client {order_in.client_id} not found")

            order_id = order_in.id or await professional_crud.get_next_professional_order_id(db)
            created_at = order_in.created_at or datetime.now()
            total_amount = order_in.total_amount
            if total_amount is None:
                total_amount = estimate_professional_total(order_in.pieces, order_in.service)

            order = ProfessionalOrder(
                id=order_id,
                client_id=client.id,
                client_name=order_in.client_name or client.company_name,
                pieces=order_in.pieces,
                service=order_in.service,
                total_amount=total_amount,
                status=order_in.status,
                payment_status=order_in.payment_status,
                created_at=created_at,
                delivery_date=order_in.delivery_date
                or created_at + timedelta(days=settings.DEFAULT_DELIVERY_DAYS),
                due_date=order_in.due_date or created_at + timedelta(days=client.payment_terms),
                priority=order_in.priority,
            )
            await professional_crud.insert_professional_order(db, order)

            unpaid = order.payment_status != PaymentStatus.PAID.value
            await professional_crud.increment_professional_client_stats(db, client.id, total_amount, unpaid)

        logger.info(
            f"🏢 PROFESIONAL: Pedido creado '{order.id}' para '{order.client_name}' "
            f"({order.pieces} piezas, {order.total_amount:.2f}€, vence {order.due_date:%Y-%m-%d})"
        )
        return order

    async def update_order(
        self, db: AsyncSession, order_id: str, order_in: order_schema.ProfessionalOrderUpdate
    ) -> ProfessionalOrder:
        """Sobrescribe el pedido y recalcula los totales del cliente anterior y del nuevo."""
        async with unit_of_work(db):
            order = await professional_crud.get_professional_order(db, order_id)
            if order is None:
                raise NotFoundError(f"Professional order {order_id} not found")
            previous_client_id = order.client_id

            if order_in.client_id != previous_client_id:
                if await professional_crud.get_professional_client(db, order_in.client_id) is None:
                    raise NotFoundError(f"Professional client {order_in.client_id} not found")

            order = await professional_crud.update_professional_order(db, order_id, order_in.model_dump())

            await stats_service.refresh_professional_client_stats(db, previous_client_id)
            if order.client_id != previous_client_id:
                await stats_service.refresh_professional_client_stats(db, order.client_id)

        logger.info(
            f"🔄 PROFESIONAL: Pedido actualizado '{order_id}' (estado: {order.status}, pago: {order.payment_status})"
        )
        return order

    async def delete_order(self, db: AsyncSession, order_id: str) -> ProfessionalOrder:
        async with unit_of_work(db):
            order = await professional_crud.delete_professional_order(db, order_id)
            await stats_service.refresh_professional_client_stats(db, order.client_id)
        logger.info(f"🗑️ PROFESIONAL: Pedido eliminado '{order_id}'")
        return order


professional_service = ProfessionalService()
