# backend/pressing/crud/professional_crud.py
"""
Operaciones CRUD para clientes profesionales y pedidos profesionales.

Los dos modelos viven en el mismo módulo porque siempre se manipulan juntos:
cada pedido profesional actualiza los totales y el saldo pendiente de su
cliente.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import case, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.config import settings
from pressing.core.exceptions import ConstraintError, NotFoundError
from pressing.db.models.client_model import ProfessionalClient
from pressing.db.models.order_model import ProfessionalOrder
from .common_crud import allocate_next_id, flush_or_raise

# ========================================
# CLIENTES PROFESIONALES
# ========================================

async def get_all_professional_clients(db: AsyncSession) -> List[ProfessionalClient]:
    result = await db.execute(select(ProfessionalClient).order_by(ProfessionalClient.created_at.desc()))
    return result.scalars().all()


async def get_professional_client(db: AsyncSession, client_id: str) -> Optional[ProfessionalClient]:
    return await db.get(ProfessionalClient, client_id)


async def get_next_professional_client_id(
    db: AsyncSession, prefix: str = settings.PROFESSIONAL_CLIENT_ID_PREFIX
) -> str:
    return await allocate_next_id(db, ProfessionalClient, prefix)


async def insert_professional_client(db: AsyncSession, client: ProfessionalClient) -> ProfessionalClient:
    if await db.get(ProfessionalClient, client.id) is not None:
        raise ConstraintError(f"Professional client with ID {client.id} already exists.")
    db.add(client)
    await flush_or_raise(db)
    return client


async def update_professional_client(
    db: AsyncSession, client_id: str, values: Dict[str, Any]
) -> ProfessionalClient:
    db_client = await get_professional_client(db, client_id)
    if db_client is None:
        raise NotFoundError(f"Professional client {client_id} not found")
    for key, value in values.items():
        setattr(db_client, key, value)
    await flush_or_raise(db)
    return db_client


async def delete_professional_client(db: AsyncSession, client_id: str) -> ProfessionalClient:
    """
    Borra un cliente profesional. Se rechaza (ConstraintError) si todavía
    tiene pedidos, porque ProfessionalOrder.client_id es obligatorio.
    """
    db_client = await get_professional_client(db, client_id)
    if db_client is None:
        raise NotFoundError(f"Professional client {client_id} not found")

    order_count = await db.scalar(
        select(func.count()).select_from(ProfessionalOrder).filter(ProfessionalOrder.client_id == client_id)
    )
    if order_count:
        raise ConstraintError(
            f"Professional client {client_id} still has {order_count} orders and cannot be deleted."
        )

    await db.delete(db_client)
    await db.flush()
    return db_client


async def count_professional_clients(db: AsyncSession) -> int:
    return await db.scalar(select(func.count()).select_from(ProfessionalClient)) or 0


async def get_total_outstanding(db: AsyncSession) -> float:
    total = await db.scalar(select(func.coalesce(func.sum(ProfessionalClient.outstanding_amount), 0.0)))
    return float(total or 0.0)


async def increment_professional_client_stats(
    db: AsyncSession, client_id: str, amount: float, unpaid: bool
) -> int:
    """Suma un pedido a los totales del cliente y, si no está pagado, a su saldo pendiente."""
    result = await db.execute(
        update(ProfessionalClient)
        .filter(ProfessionalClient.id == client_id)
        .values(
            total_orders=ProfessionalClient.total_orders + 1,
            total_spent=ProfessionalClient.total_spent + amount,
            outstanding_amount=ProfessionalClient.outstanding_amount + (amount if unpaid else 0.0),
        )
    )
    return result.rowcount


async def set_professional_client_stats(
    db: AsyncSession, client_id: str, total_orders: int, total_spent: float, outstanding_amount: float
) -> None:
    await db.execute(
        update(ProfessionalClient)
        .filter(ProfessionalClient.id == client_id)
        .values(total_orders=total_orders, total_spent=total_spent, outstanding_amount=outstanding_amount)
    )


async def reset_all_professional_client_stats(db: AsyncSession) -> None:
    await db.execute(
        update(ProfessionalClient).values(total_orders=0, total_spent=0.0, outstanding_amount=0.0)
    )


# ========================================
# PEDIDOS PROFESIONALES
# ========================================

async def get_all_professional_orders(db: AsyncSession) -> List[ProfessionalOrder]:
    result = await db.execute(select(ProfessionalOrder).order_by(ProfessionalOrder.created_at.desc()))
    return result.scalars().all()


async def get_professional_order(db: AsyncSession, order_id: str) -> Optional[ProfessionalOrder]:
    return await db.get(ProfessionalOrder, order_id)


async def get_next_professional_order_id(
    db: AsyncSession, prefix: str = settings.PROFESSIONAL_ORDER_ID_PREFIX
) -> str:
    return await allocate_next_id(db, ProfessionalOrder, prefix)


async def insert_professional_order(db: AsyncSession, order: ProfessionalOrder) -> ProfessionalOrder:
    if await db.get(ProfessionalOrder, order.id) is not None:
        raise ConstraintError(f"Professional order with ID {order.id} already exists.")
    db.add(order)
    await flush_or_raise(db)
    return order


async def update_professional_order(
    db: AsyncSession, order_id: str, values: Dict[str, Any]
) -> ProfessionalOrder:
    db_order = await get_professional_order(db, order_id)
    if db_order is None:
        raise NotFoundError(f"Professional order {order_id} not found")
    for key, value in values.items():
        setattr(db_order, key, value)
    await flush_or_raise(db)
    return db_order


async def delete_professional_order(db: AsyncSession, order_id: str) -> ProfessionalOrder:
    db_order = await get_professional_order(db, order_id)
    if db_order is None:
        raise NotFoundError(f"Professional order {order_id} not found")
    await db.delete(db_order)
    await db.flush()
    return db_order


async def get_overdue_professional_orders(db: AsyncSession, now: datetime) -> List[ProfessionalOrder]:
    """Pedidos con el pago pendiente cuya fecha de vencimiento ya pasó."""
    query = (
        select(ProfessionalOrder)
        .filter(ProfessionalOrder.payment_status == "pending", ProfessionalOrder.due_date < now)
        .order_by(ProfessionalOrder.due_date)
    )
    result = await db.execute(query)
    return result.scalars().all()


async def get_professional_orders_created_since(db: AsyncSession, since: datetime) -> List[ProfessionalOrder]:
    result = await db.execute(select(ProfessionalOrder).filter(ProfessionalOrder.created_at >= since))
    return result.scalars().all()


async def get_recent_professional_orders(db: AsyncSession, limit: int = 5) -> List[ProfessionalOrder]:
    result = await db.execute(
        select(ProfessionalOrder).order_by(ProfessionalOrder.created_at.desc()).limit(limit)
    )
    return result.scalars().all()


async def count_professional_orders_by_status(db: AsyncSession, statuses: List[str]) -> int:
    return await db.scalar(
        select(func.count()).select_from(ProfessionalOrder).filter(ProfessionalOrder.status.in_(statuses))
    ) or 0


# ========================================
# AGREGACIONES PARA ESTADÍSTICAS
# ========================================

def _stats_columns():
    unpaid_amount = case(
        (ProfessionalOrder.payment_status != "paid", ProfessionalOrder.total_amount),
        else_=0.0,
    )
    return (
        func.count(ProfessionalOrder.id),
        func.coalesce(func.sum(ProfessionalOrder.total_amount), 0.0),
        func.coalesce(func.sum(unpaid_amount), 0.0),
    )


async def get_stats_by_professional_client(db: AsyncSession) -> List[Tuple[str, int, float, float]]:
    """(client_id, nº de pedidos, total facturado, total impagado) por cliente profesional."""
    query = (
        select(ProfessionalOrder.client_id, *_stats_columns())
        .filter(ProfessionalOrder.client_id.is_not(None), ProfessionalOrder.client_id != "")
        .group_by(ProfessionalOrder.client_id)
    )
    result = await db.execute(query)
    return [(row[0], row[1], float(row[2]), float(row[3])) for row in result.all()]


async def get_stats_for_professional_client(db: AsyncSession, client_id: str) -> Tuple[int, float, float]:
    query = select(*_stats_columns()).filter(ProfessionalOrder.client_id == client_id)
    row = (await db.execute(query)).one()
    return row[0], float(row[1]), float(row[2])
