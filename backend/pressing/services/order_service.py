# backend/pressing/services/order_service.py
"""
Servicio para los pedidos de particulares.

Responsabilidades principales:
- Crear un pedido completo en una sola transacción: resolución del cliente
  (registrado o invitado), cálculo de precios de cada línea a partir del
  catálogo, ID secuencial y actualización de las estadísticas del cliente.
- Actualizar y borrar pedidos manteniendo las estadísticas coherentes.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.config import settings
from pressing.core.exceptions import NotFoundError
from pressing.crud import client_crud, order_crud, piece_crud
from pressing.db.models.order_model import Order, OrderPiece
from pressing.schemas import order_schema
from pressing.schemas.order_schema import ClientReference, RegisteredClient
from pressing.services.guest_service import materialize_guest_client, resolve_client_reference
from pressing.services.piece_service import unit_price_for
from pressing.services.stats_service import stats_service
from pressing.services.transaction import unit_of_work

logger = logging.getLogger(__name__)


def line_item_id(order_id: str, piece_id: str, index: int) -> str:
    """ID de una línea de pedido: '{pedido}_{pieza}_{posición}'."""
    return f"{order_id}_{piece_id}_{index}"


class OrderService:
    """
    Servicio de pedidos de particulares.

    Las funciones CRUD nunca confirman: cada método público de este servicio
    es una unidad de trabajo completa.
    """

    async def get_all_orders(self, db: AsyncSession) -> List[Order]:
        return await order_crud.get_all_orders(db)

    async def get_order(self, db: AsyncSession, order_id: str) -> Order:
        order = await order_crud.get_order(db, order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        return order

    async def _build_line_items(
        self, db: AsyncSession, order_id: str, items: List[order_schema.OrderPieceCreate]
    ) -> List[OrderPiece]:
        """
        Convierte las líneas recibidas en OrderPiece.

        Si la línea no trae unitPrice se usa el precio del catálogo para el
        servicio elegido. totalPrice se recalcula siempre como unitPrice × quantity.
        """
        line_items = []
        for index, item in enumerate(items):
            piece = await piece_crud.get_piece(db, item.piece_id)
            unit_price = item.unit_price
            piece_name = item.piece_name
            if unit_price is None or not piece_name:
                if piece is None:
                    raise NotFoundError(f"Piece {item.piece_id} not found")
                if unit_price is None:
                    unit_price = unit_price_for(piece, item.service_type)
                if not piece_name:
                    piece_name = piece.name

            line_items.append(
                OrderPiece(
                    id=line_item_id(order_id, item.piece_id, index),
                    order_id=order_id,
                    piece_id=item.piece_id,
                    piece_name=piece_name,
                    service_type=item.service_type,
                    quantity=item.quantity,
                    unit_price=unit_price,
                    total_price=round(unit_price * item.quantity, 2),
                    position=index,
                )
            )
        return line_items

    async def _resolve_client_id(self, db: AsyncSession, client_ref: ClientReference) -> Optional[str]:
        """
        client_id que se guarda en el pedido.

        Un cliente registrado debe existir (NotFoundError si no); un invitado
        con ID GUEST... se materializa como cliente temporal; un invitado sin
        ID deja el pedido sin cliente.
        """
        if isinstance(client_ref, RegisteredClient):
            if await client_crud.get_client(db, client_ref.client_id) is None:
                raise NotFoundError(f"Client {client_ref.client_id} not found")
            return client_ref.client_id
        if client_ref.guest_id:
            await materialize_guest_client(db, client_ref)
        return client_ref.guest_id

    async def create_order(self, db: AsyncSession, order_in: order_schema.OrderCreate) -> Order:
        """
        Crea un pedido y sus líneas de forma atómica.

        Pasos:
        1. Resuelve la referencia de cliente; un invitado con ID GUEST... se
           materializa como cliente temporal
        2. Asigna el ID (el enviado por el frontend o el siguiente PR{n})
        3. Calcula las líneas y el total (salvo precio excepcional)
        4. Inserta pedido y líneas
        5. Si el cliente está registrado, incrementa sus estadísticas

        Si cualquier paso falla no se persiste nada.
        """
        client_ref = resolve_client_reference(order_in.client_id, order_in.client_name, settings.GUEST_ID_PREFIX)

        async with unit_of_work(db):
            client_id = await self._resolve_client_id(db, client_ref)

            order_id = order_in.id or await order_crud.get_next_order_id(db)
            line_items = await self._build_line_items(db, order_id, order_in.pieces)

            if order_in.is_exceptional_price:
                total_amount = order_in.total_amount
            else:
                total_amount = round(sum(item.total_price for item in line_items), 2)

            created_at = order_in.created_at or datetime.now()
            order = Order(
                id=order_id,
                client_id=client_id,
                client_name=order_in.client_name,
                total_amount=total_amount,
                status=order_in.status,
                payment_status=order_in.payment_status,
                created_at=created_at,
                estimated_date=order_in.estimated_date or created_at + timedelta(days=settings.DEFAULT_READY_DAYS),
                is_exceptional_price=order_in.is_exceptional_price,
                pieces=line_items,
            )
            await order_crud.insert_order(db, order)

            if isinstance(client_ref, RegisteredClient):
                await client_crud.increment_client_stats(db, client_ref.client_id, total_amount)

        logger.info(
            f"🧾 PEDIDO: Creado '{order.id}' para '{order.client_name}' "
            f"({len(line_items)} líneas, {order.total_amount:.2f}€)"
        )
        return order

    async def update_order(self, db: AsyncSession, order_id: str, order_in: order_schema.OrderUpdate) -> Order:
        """
        Sobrescribe los campos editables de un pedido.

        El cliente se resuelve igual que al crear: un ID registrado inexistente
        da NotFoundError y un ID de invitado se materializa. Sin precio
        excepcional, el total se vuelve a calcular como la suma de las líneas;
        si no hay líneas y no llega totalAmount se conserva el guardado. Las
        estadísticas del cliente anterior y del nuevo se recalculan a partir de
        sus pedidos.
        """
        async with unit_of_work(db):
            order = await order_crud.get_order(db, order_id)
            if order is None:
                raise NotFoundError(f"Order {order_id} not found")
            previous_client_id = order.client_id

            client_ref = resolve_client_reference(order_in.client_id, order_in.client_name, settings.GUEST_ID_PREFIX)
            values = order_in.model_dump()
            values["client_id"] = await self._resolve_client_id(db, client_ref)
            if values.get("estimated_date") is None:
                values.pop("estimated_date", None)
            if values.get("total_amount") is None:
                values.pop("total_amount", None)
            if not order_in.is_exceptional_price and order.pieces:
                values["total_amount"] = round(sum(item.total_price for item in order.pieces), 2)

            order = await order_crud.update_order(db, order_id, values)

            await stats_service.refresh_client_stats(db, previous_client_id)
            if order.client_id != previous_client_id:
                await stats_service.refresh_client_stats(db, order.client_id)

        logger.info(f"🔄 PEDIDO: Actualizado '{order_id}' (estado: {order.status}, pago: {order.payment_status})")
        return order

    async def delete_order(self, db: AsyncSession, order_id: str) -> Order:
        """Borra el pedido y sus líneas, y recalcula las estadísticas de su cliente."""
        async with unit_of_work(db):
            order = await order_crud.delete_order(db, order_id)
            await stats_service.refresh_client_stats(db, order.client_id)

        logger.info(f"🗑️ PEDIDO: Eliminado '{order_id}'")
        return order


order_service = OrderService()
