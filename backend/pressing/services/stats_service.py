# backend/pressing/services/stats_service.py
"""
Servicio de estadísticas.

Las estadísticas de clientes (total_orders, total_spent, outstanding_amount)
son valores desnormalizados: se incrementan al crear pedidos y se pueden
reconstruir en cualquier momento a partir de las tablas de pedidos. Este
servicio contiene esa reconstrucción y los indicadores del panel principal.
"""

import logging
from datetime import datetime, time
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.config import settings
from pressing.crud import client_crud, order_crud, professional_crud
from pressing.schemas.common import OrderStatus
from pressing.schemas.dashboard_schema import DashboardStats, RecentOrder
from pressing.services.guest_service import is_registered_client_id
from pressing.services.transaction import unit_of_work

logger = logging.getLogger(__name__)

PENDING_STATUSES = [OrderStatus.RECEIVED.value, OrderStatus.PROCESSING.value]
RECENT_ORDERS_LIMIT = 5


class StatsService:

    async def recalculate_stats(self, db: AsyncSession) -> Dict[str, int]:
        """
        Reconstruye las estadísticas de todos los clientes.

        1. Pone a cero los totales de todos los clientes (particulares y profesionales)
        2. Agrega los pedidos por cliente, ignorando los de invitados
        3. Escribe los totales agregados

        Todo en una sola transacción: si algo falla no queda ningún total a medias.

        Returns:
            Número de clientes de cada tipo con al menos un pedido.
        """
        async with unit_of_work(db):
            await client_crud.reset_all_client_stats(db)
            await professional_crud.reset_all_professional_client_stats(db)

            client_stats = await order_crud.get_stats_by_client(db, settings.GUEST_ID_PREFIX)
            for client_id, total_orders, total_spent in client_stats:
                await client_crud.set_client_stats(db, client_id, total_orders, total_spent)

            professional_stats = await professional_crud.get_stats_by_professional_client(db)
            for client_id, total_orders, total_spent, outstanding in professional_stats:
                await professional_crud.set_professional_client_stats(
                    db, client_id, total_orders, total_spent, outstanding
                )

        summary = {"clients": len(client_stats), "professional_clients": len(professional_stats)}
        logger.info(
            f"📊 ESTADÍSTICAS: Recalculadas para {summary['clients']} clientes y "
            f"{summary['professional_clients']} clientes profesionales"
        )
        return summary

    async def refresh_client_stats(self, db: AsyncSession, client_id: Optional[str]) -> None:
        """
        Recalcula los totales de un único cliente registrado (sin confirmar).
        Los IDs vacíos o de invitado se ignoran.
        """
        if not is_registered_client_id(client_id, settings.GUEST_ID_PREFIX):
            return
        total_orders, total_spent = await order_crud.get_stats_for_client(db, client_id)
        await client_crud.set_client_stats(db, client_id, total_orders, total_spent)
        logger.debug(f"📊 ESTADÍSTICAS: Cliente '{client_id}' -> {total_orders} pedidos, {total_spent:.2f}€")

    async def refresh_professional_client_stats(self, db: AsyncSession, client_id: str) -> None:
        total_orders, total_spent, outstanding = await professional_crud.get_stats_for_professional_client(
            db, client_id
        )
        await professional_crud.set_professional_client_stats(db, client_id, total_orders, total_spent, outstanding)
        logger.debug(
            f"📊 ESTADÍSTICAS: Cliente profesional '{client_id}' -> {total_orders} pedidos, "
            f"{outstanding:.2f}€ pendientes"
        )

    async def get_dashboard_stats(self, db: AsyncSession, now: Optional[datetime] = None) -> DashboardStats:
        """
        Indicadores del panel principal sobre pedidos de particulares y profesionales.

        - todayOrders / revenue: pedidos creados hoy y su importe
        - pendingOrders: pedidos recibidos o en curso
        - completedToday: pedidos de hoy que ya están listos
        - recentOrders: los 5 pedidos más recientes de ambos tipos
        """
        now = now or datetime.now()
        start_of_day = datetime.combine(now.date(), time.min)

        today_orders = await order_crud.get_orders_created_since(db, start_of_day)
        today_professional = await professional_crud.get_professional_orders_created_since(db, start_of_day)
        todays = list(today_orders) + list(today_professional)

        pending = await order_crud.count_orders_by_status(db, PENDING_STATUSES)
        pending += await professional_crud.count_professional_orders_by_status(db, PENDING_STATUSES)

        recent = [
            RecentOrder(
                id=order.id,
                client_name=order.client_name,
                total_amount=order.total_amount,
                status=order.status,
                created_at=order.created_at,
                kind="individual",
            )
            for order in await order_crud.get_recent_orders(db, RECENT_ORDERS_LIMIT)
        ]
        recent += [
            RecentOrder(
                id=order.id,
                client_name=order.client_name,
                total_amount=order.total_amount,
                status=order.status,
                created_at=order.created_at,
                kind="professional",
            )
            for order in await professional_crud.get_recent_professional_orders(db, RECENT_ORDERS_LIMIT)
        ]
        recent.sort(key=lambda order: order.created_at, reverse=True)

        overdue = await professional_crud.get_overdue_professional_orders(db, now)

        return DashboardStats(
            today_orders=len(todays),
            pending_orders=pending,
            completed_today=sum(1 for order in todays if order.status == OrderStatus.READY.value),
            revenue=round(sum(order.total_amount for order in todays), 2),
            individual_clients=await client_crud.count_clients(db),
            professional_clients=await professional_crud.count_professional_clients(db),
            total_outstanding=round(await professional_crud.get_total_outstanding(db), 2),
            overdue_professional_orders=len(overdue),
            recent_orders=recent[:RECENT_ORDERS_LIMIT],
        )


stats_service = StatsService()
