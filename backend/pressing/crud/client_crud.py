# backend/pressing/crud/client_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo Client.

Este módulo proporciona funciones para crear, buscar, modificar y borrar
clientes particulares, así como para mantener sus totales acumulados.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.config import settings
from pressing.core.exceptions import ConstraintError, NotFoundError
from pressing.db.models.client_model import Client
from .common_crud import allocate_next_id, flush_or_raise, has_prefix


async def get_all_clients(db: AsyncSession) -> List[Client]:
    """Obtiene todos los clientes, del más reciente al más antiguo."""
    result = await db.execute(select(Client).order_by(Client.created_at.desc()))
    return result.scalars().all()


async def get_client(db: AsyncSession, client_id: str) -> Optional[Client]:
    return await db.get(Client, client_id)


async def get_next_client_id(db: AsyncSession, prefix: str = settings.CLIENT_ID_PREFIX) -> str:
    """Siguiente ID de cliente con el formato CLI{n}."""
    return await allocate_next_id(db, Client, prefix)


async def insert_client(db: AsyncSession, client: Client) -> Client:
    """Persiste un cliente completo. Lanza ConstraintError si el ID ya existe."""
    if await db.get(Client, client.id) is not None:
        raise ConstraintError(f"Client with ID {client.id} already exists.")
    db.add(client)
    await flush_or_raise(db)
    return client


async def update_client(db: AsyncSession, client_id: str, values: Dict[str, Any]) -> Client:
    """Sobrescribe los campos indicados. Lanza NotFoundError si el cliente no existe."""
    db_client = await get_client(db, client_id)
    if db_client is None:
        raise NotFoundError(f"Client {client_id} not found")
    for key, value in values.items():
        setattr(db_client, key, value)
    await flush_or_raise(db)
    return db_client


async def delete_client(db: AsyncSession, client_id: str) -> Client:
    db_client = await get_client(db, client_id)
    if db_client is None:
        raise NotFoundError(f"Client {client_id} not found")
    await db.delete(db_client)
    await db.flush()
    return db_client


async def count_clients(db: AsyncSession) -> int:
    return await db.scalar(select(func.count()).select_from(Client)) or 0


# ========================================
# ESTADÍSTICAS
# ========================================

async def increment_client_stats(db: AsyncSession, client_id: str, amount: float) -> int:
    """
    Suma un pedido y su importe a los totales del cliente en una sola sentencia UPDATE.

    Returns:
        Número de filas afectadas (0 si el cliente no existe).
    """
    result = await db.execute(
        update(Client)
        .filter(Client.id == client_id)
        .values(total_orders=Client.total_orders + 1, total_spent=Client.total_spent + amount)
    )
    return result.rowcount


async def set_client_stats(db: AsyncSession, client_id: str, total_orders: int, total_spent: float) -> None:
    await db.execute(
        update(Client)
        .filter(Client.id == client_id)
        .values(total_orders=total_orders, total_spent=total_spent)
    )


async def reset_all_client_stats(db: AsyncSession) -> None:
    await db.execute(update(Client).values(total_orders=0, total_spent=0.0))


# ========================================
# CLIENTES INVITADOS
# ========================================

async def get_guest_clients(db: AsyncSession, guest_prefix: str) -> List[Client]:
    result = await db.execute(
        select(Client).filter(or_(Client.is_temporary == True, has_prefix(Client.id, guest_prefix)))
    )
    return result.scalars().all()


async def delete_guest_clients(db: AsyncSession, guest_prefix: str) -> int:
    """Borra los clientes temporales o con prefijo de invitado. Devuelve cuántos se borraron."""
    result = await db.execute(
        delete(Client).filter(or_(Client.is_temporary == True, has_prefix(Client.id, guest_prefix)))
    )
    return result.rowcount

