# backend/pressing/crud/piece_crud.py
"""
Operaciones CRUD para el catálogo de piezas.

Borrar una pieza no toca las líneas de pedido existentes: éstas guardan una
copia del nombre y del precio en el momento del pedido.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.config import settings
from pressing.core.exceptions import ConstraintError, NotFoundError
from pressing.db.models.piece_model import Piece
from .common_crud import allocate_next_id, flush_or_raise


async def get_all_pieces(db: AsyncSession) -> List[Piece]:
    """Obtiene el catálogo completo ordenado por nombre."""
    result = await db.execute(select(Piece).order_by(Piece.name))
    return result.scalars().all()


async def get_piece(db: AsyncSession, piece_id: str) -> Optional[Piece]:
    return await db.get(Piece, piece_id)


async def get_next_piece_id(db: AsyncSession, prefix: str = settings.PIECE_ID_PREFIX) -> str:
    return await allocate_next_id(db, Piece, prefix)


async def insert_piece(db: AsyncSession, piece: Piece) -> Piece:
    if await db.get(Piece, piece.id) is not None:
        raise ConstraintError(f"Piece with ID {piece.id} already exists.")
    db.add(piece)
    await flush_or_raise(db)
    return piece


async def update_piece(db: AsyncSession, piece_id: str, values: Dict[str, Any]) -> Piece:
    db_piece = await get_piece(db, piece_id)
    if db_piece is None:
        raise NotFoundError(f"Piece {piece_id} not found")
    for key, value in values.items():
        setattr(db_piece, key, value)
    await flush_or_raise(db)
    return db_piece


async def delete_piece(db: AsyncSession, piece_id: str) -> Piece:
    db_piece = await get_piece(db, piece_id)
    if db_piece is None:
        raise NotFoundError(f"Piece {piece_id} not found")
    await db.delete(db_piece)
    await db.flush()
    return db_piece
