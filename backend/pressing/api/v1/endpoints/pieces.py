# backend/pressing/api/v1/endpoints/pieces.py

"""
Endpoints REST para el catálogo de piezas.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from pressing.api import deps
from pressing.schemas import piece_schema
from pressing.schemas.common import SuccessResponse
from pressing.services.piece_service import piece_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[piece_schema.PieceResponse])
async def read_pieces(
    db: AsyncSession = Depends(deps.get_db),
    professional: Optional[bool] = Query(
        default=None, description="true: solo piezas profesionales, false: solo de particulares"
    ),
) -> List[piece_schema.PieceResponse]:
    """Obtiene el catálogo de piezas ordenado por nombre, opcionalmente filtrado."""
    pieces = await piece_service.get_pieces(db, professional=professional)
    logger.debug(f"📋 PIEZAS: Encontradas {len(pieces)} piezas (professional={professional})")
    return pieces


@router.post("", response_model=piece_schema.PieceResponse, status_code=status.HTTP_201_CREATED)
async def create_piece(
    *,
    db: AsyncSession = Depends(deps.get_db),
    piece_in: piece_schema.PieceCreate,
) -> piece_schema.PieceResponse:
    """Crea una pieza; si no trae ID se asigna el siguiente P{n}."""
    return await piece_service.create_piece(db, piece_in)


@router.put("/{piece_id}", response_model=SuccessResponse)
async def update_piece(
    *,
    db: AsyncSession = Depends(deps.get_db),
    piece_id: str,
    piece_in: piece_schema.PieceUpdate,
) -> SuccessResponse:
    await piece_service.update_piece(db, piece_id, piece_in)
    return SuccessResponse()


@router.delete("/{piece_id}", response_model=SuccessResponse)
async def delete_piece(
    *,
    db: AsyncSession = Depends(deps.get_db),
    piece_id: str,
) -> SuccessResponse:
    await piece_service.delete_piece(db, piece_id)
    return SuccessResponse()
