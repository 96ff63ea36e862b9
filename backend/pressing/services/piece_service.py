# backend/pressing/services/piece_service.py
"""
Servicio para operaciones de negocio relacionadas con el catálogo de piezas.

Incluye el filtro que separa el catálogo de particulares del catálogo
profesional: los flujos de pedido de particulares solo ven piezas no
profesionales y viceversa.
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from pressing.crud import piece_crud
from pressing.db.models.piece_model import Piece
from pressing.schemas import piece_schema
from pressing.schemas.common import ServiceType
from pressing.services.transaction import unit_of_work

logger = logging.getLogger(__name__)


def filter_pieces(pieces: Iterable[Piece], professional: bool) -> List[Piece]:
    """Devuelve solo las piezas cuyo flag is_professional coincide con `professional`."""
    return [piece for piece in pieces if bool(piece.is_professional) == professional]


def unit_price_for(piece: Piece, service_type: ServiceType) -> float:
    """Precio unitario de una pieza para el servicio elegido."""
    if ServiceType(service_type) == ServiceType.PRESSING:
        return piece.pressing_price
    return piece.cleaning_pressing_price


class PieceService:
    """
    Servicio para el catálogo de piezas.

    Actúa como proxy hacia la capa CRUD y confirma las transacciones.
    """

    async def get_pieces(self, db: AsyncSession, professional: Optional[bool] = None) -> List[Piece]:
        pieces = await piece_crud.get_all_pieces(db)
        if professional is None:
            return pieces
        return filter_pieces(pieces, professional)

    async def create_piece(self, db: AsyncSession, piece_in: piece_schema.PieceCreate) -> Piece:
        async with unit_of_work(db):
            piece_id = piece_in.id or await piece_crud.get_next_piece_id(db)
            values = piece_in.model_dump(exclude={"id"})
            piece = await piece_crud.insert_piece(db, Piece(id=piece_id, **values))
        logger.info(f"🆕 PIEZA: Creada '{piece.id}' ({piece.name})")
        return piece

    async def update_piece(self, db: AsyncSession, piece_id: str, piece_in: piece_schema.PieceUpdate) -> Piece:
        async with unit_of_work(db):
            piece = await piece_crud.update_piece(db, piece_id, piece_in.model_dump())
        logger.info(f"🔄 PIEZA: Actualizada '{piece_id}'")
        return piece

    async def delete_piece(self, db: AsyncSession, piece_id: str) -> Piece:
        # Las líneas de pedido que la referencian se conservan intactas
        async with unit_of_work(db):
            piece = await piece_crud.delete_piece(db, piece_id)
        logger.info(f"🗑️ PIEZA: Eliminada '{piece_id}'")
        return piece


piece_service = PieceService()
