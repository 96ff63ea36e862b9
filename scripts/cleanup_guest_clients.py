# pressing_project/scripts/cleanup_guest_clients.py

"""
Script de limpieza de clientes invitados.

Los pedidos sin cliente registrado crean clientes temporales (ID con prefijo
GUEST). Con el tiempo se acumulan en la lista de clientes. Este script:
1.  Lista los clientes temporales encontrados.
2.  Pone a NULL el `client_id` de los pedidos de invitados (conservan el nombre).
3.  Borra los clientes temporales.

Con --dry-run solo muestra lo que haría.

Uso:
    python scripts/cleanup_guest_clients.py [--dry-run] [--database-url URL]
"""
import argparse
import asyncio
import logging
import os
import sys

# Añadir el directorio backend/ al PYTHONPATH
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "backend"))
sys.path.insert(0, project_root)

from pressing.core.config import settings
from pressing.core.logging_config import setup_logging
from pressing.crud import client_crud, order_crud
from pressing.db.database import Database
from pressing.services.guest_service import cleanup_guest_clients

logger = logging.getLogger("cleanup_guest_clients")


async def main(database_url: str, dry_run: bool) -> None:
    database = Database(database_url)
    try:
        async with database.session() as db:
            guests = await client_crud.get_guest_clients(db, settings.GUEST_ID_PREFIX)
            guest_orders = await order_crud.count_guest_orders(db, settings.GUEST_ID_PREFIX)
            logger.info(f"👥 {len(guests)} clientes temporales, {guest_orders} pedidos de invitados")
            for guest in guests:
                logger.info(f"   - {guest.id}: {guest.first_name} {guest.last_name}")

            if dry_run:
                logger.info("ℹ️ Modo --dry-run: no se modifica nada")
                return

            result = await cleanup_guest_clients(db, settings.GUEST_ID_PREFIX)
            logger.info(
                f"✅ Limpieza terminada: {result.orders_detached} pedidos desvinculados, "
                f"{result.clients_deleted} clientes borrados"
            )
    finally:
        await database.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Elimina los clientes temporales creados para invitados.")
    parser.add_argument("--database-url", default=settings.DATABASE_URL, help="URL SQLAlchemy de la base de datos")
    parser.add_argument("--dry-run", action="store_true", help="Muestra lo que se haría sin modificar la base")
    args = parser.parse_args()

    setup_logging(settings)
    asyncio.run(main(args.database_url, args.dry_run))
