# backend/pressing/services/guest_service.py
"""
Gestión de los clientes invitados.

Un pedido puede hacerse sin cliente registrado. El frontend envía entonces
clientId nulo o un identificador con el prefijo GUEST. Este módulo:

- Resuelve la referencia de cliente de un pedido en una variante etiquetada
  (RegisteredClient / GuestClient)
- Materializa un cliente temporal para los invitados con identificador, de
  modo que el pedido pueda referenciarlo
- Limpia los clientes temporales acumulados (script de mantenimiento)
"""

import logging
from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.config import settings
from pressing.crud import client_crud, order_crud
from pressing.db.models.client_model import Client
from pressing.schemas.order_schema import ClientReference, GuestClient, RegisteredClient
from pressing.services.transaction import unit_of_work

logger = logging.getLogger(__name__)

DEFAULT_GUEST_FIRST_NAME = "Client"
DEFAULT_GUEST_LAST_NAME = "Invité"
DEFAULT_GUEST_PHONE = "Non renseigné"


class GuestCleanupResult(BaseModel):
    orders_detached: int
    clients_deleted: int


def is_guest_id(client_id: Optional[str], guest_prefix: str = settings.GUEST_ID_PREFIX) -> bool:
    return bool(client_id) and client_id.startswith(guest_prefix)


def is_registered_client_id(client_id: Optional[str], guest_prefix: str = settings.GUEST_ID_PREFIX) -> bool:
    """True si el ID corresponde a un cliente cuyas estadísticas se acumulan."""
    return bool(client_id) and not client_id.startswith(guest_prefix)


def resolve_client_reference(
    client_id: Optional[str], client_name: str, guest_prefix: str = settings.GUEST_ID_PREFIX
) -> ClientReference:
    """
    Traduce el par (clientId, clientName) recibido en un pedido a su variante.

    - clientId vacío o nulo        -> GuestClient sin ID
    - clientId con prefijo GUEST   -> GuestClient con guest_id
    - cualquier otro clientId      -> RegisteredClient
    """
    if not client_id:
        return GuestClient(snapshot_name=client_name)
    if client_id.startswith(guest_prefix):
        return GuestClient(snapshot_name=client_name, guest_id=client_id)
    return RegisteredClient(client_id=client_id)


def split_client_name(full_name: str) -> Tuple[str, str]:
    """Divide 'Jane Doe' en ('Jane', 'Doe') cortando por el primer espacio."""
    parts = full_name.strip().split(" ", 1)
    first_name = parts[0] or DEFAULT_GUEST_FIRST_NAME
    last_name = parts[1].strip() if len(parts) > 1 and parts[1].strip() else DEFAULT_GUEST_LAST_NAME
    return first_name, last_name


async def materialize_guest_client(db: AsyncSession, guest: GuestClient) -> Optional[Client]:
    """
    Crea (sin confirmar) el cliente temporal de un invitado con identificador.

    Returns:
        El cliente creado, o None si el invitado no tiene ID o el cliente ya existía.
    """
    if not guest.guest_id:
        return None

    existing = await client_crud.get_client(db, guest.guest_id)
    if existing is not None:
        logger.debug(f"🔍 INVITADO: Cliente temporal existente '{guest.guest_id}'")
        return None

    first_name, last_name = split_client_name(guest.snapshot_name)
    temp_client = Client(
        id=guest.guest_id,
        first_name=first_name,
        last_name=last_name,
        phone=DEFAULT_GUEST_PHONE,
        email="",
        address="",
        type="individual",
        company_name="",
        created_at=datetime.now(),
        total_orders=0,
        total_spent=0.0,
        is_temporary=True,
    )
    await client_crud.insert_client(db, temp_client)
    logger.info(f"👤 INVITADO: Cliente temporal creado '{temp_client.id}' ({first_name} {last_name})")
    return temp_client


async def cleanup_guest_clients(db: AsyncSession, guest_prefix: str = settings.GUEST_ID_PREFIX) -> GuestCleanupResult:
    """
    Desvincula los pedidos de invitados (client_id -> NULL) y borra los clientes
    temporales. Los pedidos conservan el nombre del cliente.
    """
    async with unit_of_work(db):
        orders_detached = await order_crud.detach_guest_orders(db, guest_prefix)
        clients_deleted = await client_crud.delete_guest_clients(db, guest_prefix)

    logger.info(
        f"🧹 INVITADOS: {orders_detached} pedidos desvinculados, {clients_deleted} clientes temporales borrados"
    )
    return GuestCleanupResult(orders_detached=orders_detached, clients_deleted=clients_deleted)
