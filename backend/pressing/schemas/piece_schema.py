# backend/pressing/schemas/piece_schema.py
"""
Esquemas Pydantic para el catálogo de piezas.
"""

from typing import Optional

from pydantic import Field

from .common import CamelModel, PieceCategory


class PieceBase(CamelModel):
    name: str = Field("", description="Nombre de la pieza (Chemise, Nappe...)")
    category: PieceCategory = PieceCategory.VETEMENT
    pressing_price: float = Field(..., ge=0, description="Precio solo planchado")
    cleaning_pressing_price: float = Field(..., ge=0, description="Precio limpieza + planchado")
    image_url: str = ""
    description: Optional[str] = None
    is_professional: bool = False


class PieceCreate(PieceBase):
    """El ID es opcional; si falta el servidor asigna el siguiente P{n}."""
    id: Optional[str] = None


class PieceUpdate(PieceBase):
    pass


class PieceResponse(PieceBase):
    id: str
