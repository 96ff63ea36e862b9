# backend/pressing/db/migrations.py
"""
Migraciones de esquema para bases de datos creadas por versiones anteriores.

SQLite no permite modificar la nulabilidad de una columna, así que algunas
migraciones reconstruyen la tabla completa dentro de una transacción:
renombrar, crear la tabla nueva, copiar filas y borrar la antigua.

Todas las migraciones son idempotentes: comprueban el esquema actual antes
de actuar y pueden ejecutarse en cada arranque.
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Connection

from pressing.db.database import Database
from pressing.db.models.order_model import Order

logger = logging.getLogger(__name__)


def _get_columns(conn: Connection, table: str) -> Optional[Dict[str, dict]]:
    """Devuelve las columnas de la tabla indexadas por nombre, o None si no existe."""
    inspector = inspect(conn)
    if not inspector.has_table(table):
        return None
    return {column["name"]: column for column in inspector.get_columns(table)}


def _add_boolean_column(conn: Connection, table: str, column: str) -> bool:
    columns = _get_columns(conn, table)
    if columns is None or column in columns:
        return False
    conn.exec_driver_sql(f"ALTER TABLE {table} ADD COLUMN {column} BOOLEAN NOT NULL DEFAULT 0")
    logger.info(f"📝 MIGRACIÓN: Columna '{column}' añadida a '{table}'")
    return True


def _rebuild_orders_with_nullable_client(conn: Connection) -> bool:
    """
    Reconstruye la tabla orders para que client_id acepte NULL.

    Necesario para registrar pedidos de invitados sin cliente asociado.
    """
    columns = _get_columns(conn, "orders")
    if columns is None or "client_id" not in columns or columns["client_id"]["nullable"]:
        return False

    logger.info("🔄 MIGRACIÓN: Reconstruyendo la tabla 'orders' (client_id nullable)")
    old_columns = set(columns)

    # Los índices conservan su nombre al renombrar la tabla; hay que borrarlos antes
    for index in inspect(conn).get_indexes("orders"):
        conn.exec_driver_sql(f'DROP INDEX IF EXISTS "{index["name"]}"')

    # Sin legacy_alter_table, SQLite reescribiría la FK de order_pieces hacia orders_old
    conn.exec_driver_sql("PRAGMA legacy_alter_table = ON")
    conn.exec_driver_sql("ALTER TABLE orders RENAME TO orders_old")
    conn.exec_driver_sql("PRAGMA legacy_alter_table = OFF")
    Order.__table__.create(conn)

    shared = [c.name for c in Order.__table__.columns if c.name in old_columns]
    column_list = ", ".join(shared)
    result = conn.exec_driver_sql(
        f"INSERT INTO orders ({column_list}) SELECT {column_list} FROM orders_old"
    )
    conn.exec_driver_sql("DROP TABLE orders_old")
    logger.info(f"✅ MIGRACIÓN: {result.rowcount} pedidos copiados a la nueva tabla 'orders'")
    return True


def _upgrade(conn: Connection) -> List[str]:
    applied = []
    if _add_boolean_column(conn, "pieces", "is_professional"):
        applied.append("pieces.is_professional")
    if _add_boolean_column(conn, "clients", "is_temporary"):
        applied.append("clients.is_temporary")
    if _rebuild_orders_with_nullable_client(conn):
        applied.append("orders.client_id_nullable")
    return applied


async def run_migrations(database: Database) -> List[str]:
    """
    Aplica las migraciones pendientes en una única transacción.

    Returns:
        Lista con el nombre de las migraciones aplicadas (vacía si el esquema ya estaba al día).
    """
    async with database.engine.begin() as conn:
        applied = await conn.run_sync(_upgrade)

    if applied:
        logger.info(f"✅ MIGRACIÓN: Aplicadas {len(applied)} migraciones: {', '.join(applied)}")
    else:
        logger.debug("ℹ️ MIGRACIÓN: Esquema al día, nada que migrar")
    return applied
