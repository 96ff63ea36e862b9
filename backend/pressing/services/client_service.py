# backend/pressing/services/client_service.py
"""
Servicio para operaciones de negocio relacionadas con clientes particulares.
"""

import logging
from datetime import datetime
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.exceptions import NotFoundError
from pressing.crud import client_crud, order_crud
from pressing.db.models.client_model import Client
from pressing.db.models.order_model import Order
from pressing.schemas import client_schema
from pressing.services.transaction import unit_of_work

logger = logging.getLogger(__name__)


class ClientService:

    async def get_all_clients(self, db: AsyncSession) -> List[Client]:
        return await client_crud.get_all_clients(db)

    async def get_client_orders(self, db: AsyncSession, client_id: str) -> List[Order]:
        """Historial de pedidos de un cliente existente."""
        if await client_crud.get_client(db, client_id) is None:
            raise NotFoundError(f"Client {client_id} not found")
        return await order_crud.get_orders_by_client(db, client_id)

    async def create_client(self, db: AsyncSession, client_in: client_schema.ClientCreate) -> Client:
        """
        Crea un cliente con el siguiente ID CLI{n}. Los totales empiezan a cero
        y solo los modifican los pedidos.
        """
        async with unit_of_work(db):
            client_id = await client_crud.get_next_client_id(db)
            client = Client(
                id=client_id,
                created_at=datetime.now(),
                total_orders=0,
                total_spent=0.0,
                is_temporary=False,
                **client_in.model_dump(),
            )
            await client_crud.insert_client(db, client)

        logger.info(f"🆕 CLIENTE: Creado '{client.id}' ({client.first_name} {client.last_name})")
        return client

    async def update_client(
        self, db: AsyncSession, client_id: str, client_in: client_schema.ClientUpdate
    ) -> Client:
        async with unit_of_work(db):
            client = await client_crud.update_client(db, client_id, client_in.model_dump())
        logger.info(f"🔄 CLIENTE: Actualizado '{client_id}'")
        return client

    async def delete_client(self, db: AsyncSession, client_id: str) -> Client:
        """
        Borra un cliente. Sus pedidos se conservan con client_id a NULL y el
        nombre del cliente copiado en client_name.
        """
        async with unit_of_work(db):
            detached = await order_crud.detach_client_orders(db, client_id)
            client = await client_crud.delete_client(db, client_id)

        logger.info(f"🗑️ CLIENTE: Eliminado '{client_id}' ({detached} pedidos desvinculados)")
        return client


client_service = ClientService()
