# backend/pressing/crud/common_crud.py
"""
Operaciones compartidas por todos los módulos CRUD.

- Asignación de IDs secuenciales con prefijo (CLI1, PR1, PRO3...)
- Filtro por prefijo (has_prefix) con la misma semántica que str.startswith
- Flush con traducción de errores de integridad a ConstraintError

Ninguna función de este paquete hace commit: la transacción la cierra el
servicio que orquesta la operación, de modo que un flujo de varios pasos
(insertar pedido + líneas + estadísticas) se confirma o se descarta entero.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.exceptions import ConstraintError
from pressing.db.models.sequence_model import IdSequence

logger = logging.getLogger(__name__)


def has_prefix(column, prefix: str):
    """
    Condición SQL equivalente a str.startswith(prefix).

    LIKE en SQLite no distingue mayúsculas, así que se compara la subcadena inicial.
    """
    return func.substr(column, 1, len(prefix)) == prefix


async def allocate_next_id(db: AsyncSession, model, prefix: str) -> str:
    """
    Calcula y reserva el siguiente ID secuencial '{prefix}{n}' para un modelo.

    n = max(último valor guardado en id_sequences, nº de filas con ese prefijo) + 1.
    El contador se actualiza dentro de la transacción en curso, por lo que el
    ID queda reservado en cuanto se confirma la inserción que lo usa, y un ID
    nunca se reutiliza después de borrar una fila.
    """
    existing_count = await db.scalar(
        select(func.count()).select_from(model).filter(has_prefix(model.id, prefix))
    ) or 0

    # populate_existing: otra sesión puede haber avanzado el contador desde la última lectura
    sequence = await db.get(IdSequence, prefix, populate_existing=True)
    if sequence is None:
        sequence = IdSequence(name=prefix, value=0)
        db.add(sequence)

    next_value = max(sequence.value or 0, existing_count) + 1
    # Saltar IDs ocupados por filas insertadas con un ID explícito
    while await db.get(model, f"{prefix}{next_value}") is not None:
        next_value += 1

    sequence.value = next_value
    await flush_or_raise(db)
    return f"{prefix}{next_value}"


async def flush_or_raise(db: AsyncSession) -> None:
    """Envía los cambios pendientes; una violación de integridad se convierte en ConstraintError."""
    try:
        await db.flush()
    except IntegrityError as e:
        logger.error(f"❌ ERROR: Violación de integridad: {e.orig}")
        raise ConstraintError(str(e.orig)) from e
