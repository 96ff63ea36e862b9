# backend/pressing/services/transaction.py
"""
Unidad de trabajo para los servicios.

Todas las operaciones de escritura de un servicio se ejecutan dentro de
`unit_of_work(db)`: commit al salir sin errores, rollback si algo falla.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession


@asynccontextmanager
async def unit_of_work(db: AsyncSession) -> AsyncIterator[AsyncSession]:
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise
