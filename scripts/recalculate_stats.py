# pressing_project/scripts/recalculate_stats.py

"""
Reconstruye las estadísticas de todos los clientes a partir de los pedidos.

Útil tras importar datos o corregir pedidos a mano en la base de datos.
Los pedidos de invitados no cuentan.

Uso:
    python scripts/recalculate_stats.py [--database-url URL]
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
from pressing.db.database import Database
from pressing.services.stats_service import stats_service

logger = logging.getLogger("recalculate_stats")


async def main(database_url: str) -> None:
    database = Database(database_url)
    try:
        async with database.session() as db:
            summary = await stats_service.recalculate_stats(db)
        logger.info(
            f"✅ Estadísticas recalculadas: {summary['clients']} clientes, "
            f"{summary['professional_clients']} clientes profesionales con pedidos"
        )
    finally:
        await database.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Recalcula totales y saldos de los clientes.")
    parser.add_argument("--database-url", default=settings.DATABASE_URL, help="URL SQLAlchemy de la base de datos")
    args = parser.parse_args()

    setup_logging(settings)
    asyncio.run(main(args.database_url))
