# pressing_project/scripts/run_migrations.py

"""
Script de migración del esquema SQLite.

Propósito:
Actualiza una base de datos creada por una versión anterior de la aplicación
sin perder datos:
-   Añade `pieces.is_professional` si falta.
-   Añade `clients.is_temporary` si falta.
-   Reconstruye `orders` para que `client_id` acepte NULL (pedidos de invitados).

Las migraciones son idempotentes: si el esquema ya está al día no se hace nada.
La aplicación también las ejecuta al arrancar (RUN_MIGRATIONS_ON_STARTUP).

Uso:
    python scripts/run_migrations.py [--database-url sqlite+aiosqlite:///./pressing.db]
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
from pressing.db.migrations import run_migrations

logger = logging.getLogger("run_migrations")


async def main(database_url: str) -> None:
    database = Database(database_url)
    try:
        # create_all no toca tablas existentes: solo crea las que falten
        await database.create_all()
        applied = await run_migrations(database)
        if applied:
            logger.info(f"✅ Migraciones aplicadas: {', '.join(applied)}")
        else:
            logger.info("ℹ️ El esquema ya estaba al día")
    finally:
        await database.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Aplica las migraciones pendientes del esquema SQLite.")
    parser.add_argument("--database-url", default=settings.DATABASE_URL, help="URL SQLAlchemy de la base de datos")
    args = parser.parse_args()

    setup_logging(settings)
    asyncio.run(main(args.database_url))
