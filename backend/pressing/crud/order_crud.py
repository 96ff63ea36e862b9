# backend/pressing/crud/order_crud.py
"""
Este archivo contiene las operaciones CRUD para los modelos Order y OrderPiece.

Este módulo proporciona funciones para crear y gestionar pedidos de
particulares, la generación de IDs de pedido y las agregaciones por cliente
usadas para recalcular las estadísticas.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.config import settings
from pressing.core.exceptions import ConstraintError, NotFoundError
from pressing.db.models.order_model import Order
from .common_crud import allocate_next_id, flush_or_raise, has_prefix


async def get_next_order_id(db: AsyncSession, prefix: str = settings.ORDER_ID_PREFIX) -> str:
    """
    Calcula el siguiente ID de pedido secuencial con el formato PR{n}.
    """
    return await allocate_next_id(db, Order, prefix)


async def get_all_orders(db: AsyncSession) -> List[Order]:
    """Todos los pedidos con sus líneas (cargadas con selectin), del más reciente al más antiguo."""
    result = await db.execute(select(Order).order_by(Order.created_at.desc()))
    return result.scalars().all()


async def get_order(db: AsyncSession, order_id: str) -> Optional[Order]:
    return await db.get(Order, order_id)


async def get_orders_by_client(db: AsyncSession, client_id: str) -> List[Order]:
    """Historial de pedidos de un cliente."""
    query = select(Order).filter(Order.client_id == client_id).order_by(Order.created_at.desc())
    result = await db.execute(query)
    return result.scalars().all()


async def get_orders_created_since(db: AsyncSession, since: datetime) -> List[Order]:
    result = await db.execute(select(Order).filter(Order.created_at >= since))
    return result.scalars().all()


async def get_recent_orders(db: AsyncSession, limit: int = 5) -> List[Order]:
    result = await db.execute(select(Order).order_by(Order.created_at.desc()).limit(limit))
    return result.scalars().all()


async def count_orders_by_status(db: AsyncSession, statuses: List[str]) -> int:
    return await db.scalar(
        select(func.count()).select_from(Order).filter(Order.status.in_(statuses))
    ) or 0


async def insert_order(db: AsyncSession, order: Order) -> Order:
    """
    Persiste un pedido y sus líneas (order.pieces) sin confirmar la transacción.
    Lanza ConstraintError si el ID ya existe.
    """
    if await db.get(Order, order.id) is not None:
        raise ConstraintError(f"Order with ID {order.id} already exists.")
    db.add(order)
    await flush_or_raise(db)
    return order


async def update_order(db: AsyncSession, order_id: str, values: Dict[str, Any]) -> Order:
    db_order = await get_order(db, order_id)
    if db_order is None:
        raise NotFoundError(f"Order {order_id} not found")
    for key, value in values.items():
        setattr(db_order, key, value)
    await flush_or_raise(db)
    return db_order


async def delete_order(db: AsyncSession, order_id: str) -> Order:
    """Borra el pedido; sus líneas se borran en cascada (delete-orphan)."""
    db_order = await get_order(db, order_id)
    if db_order is None:
        raise NotFoundError(f"Order {order_id} not found")
    await db.delete(db_order)
    await db.flush()
    return db_order


async def detach_client_orders(db: AsyncSession, client_id: str) -> int:
    """Pone client_id a NULL en los pedidos de un cliente; conservan client_name."""
    result = await db.execute(
        update(Order).filter(Order.client_id == client_id).values(client_id=None)
    )
    return result.rowcount


async def detach_guest_orders(db: AsyncSession, guest_prefix: str) -> int:
    result = await db.execute(
        update(Order).filter(has_prefix(Order.client_id, guest_prefix)).values(client_id=None)
    )
    return result.rowcount


# ========================================
# AGREGACIONES PARA ESTADÍSTICAS
# ========================================

def _registered_client_filter(guest_prefix: str):
    return (
        Order.client_id.is_not(None),
        Order.client_id != "",
        ~has_prefix(Order.client_id, guest_prefix),
    )


async def get_stats_by_client(db: AsyncSession, guest_prefix: str) -> List[Tuple[str, int, float]]:
    """
    (client_id, número de pedidos, suma de importes) para cada cliente registrado.
    Los pedidos de invitados (NULL o prefijo GUEST) quedan fuera.
    """
    query = (
        select(Order.client_id, func.count(Order.id), func.coalesce(func.sum(Order.total_amount), 0.0))
        .filter(*_registered_client_filter(guest_prefix))
        .group_by(Order.client_id)
    )
    result = await db.execute(query)
    return [(row[0], row[1], float(row[2])) for row in result.all()]


async def get_stats_for_client(db: AsyncSession, client_id: str) -> Tuple[int, float]:
    query = (
        select(func.count(Order.id), func.coalesce(func.sum(Order.total_amount), 0.0))
        .filter(Order.client_id == client_id)
    )
    row = (await db.execute(query)).one()
    return row[0], float(row[1])


async def count_guest_orders(db: AsyncSession, guest_prefix: str) -> int:
    return await db.scalar(
        select(func.count()).select_from(Order).filter(
            or_(Order.client_id.is_(None), has_prefix(Order.client_id, guest_prefix))
        )
    ) or 0
