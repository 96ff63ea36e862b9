# backend/pressing/db/models/piece_model.py
from sqlalchemy import Boolean, Column, Float, String, Text
from sqlalchemy.sql import expression

from pressing.db.database import Base


class Piece(Base):
    """
    Entrada del catálogo: prenda, ropa de casa o accesorio.
    Dos precios según el servicio: solo planchado o limpieza + planchado.
    """
    __tablename__ = "pieces"

    id = Column(String(50), primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(50), nullable=False)  # vetement | linge | accessoire
    pressing_price = Column(Float, nullable=False)
    cleaning_pressing_price = Column(Float, nullable=False)
    image_url = Column(Text, nullable=False, default="")
    description = Column(Text, nullable=True)
    # Piezas reservadas a los clientes profesionales (B2B)
    is_professional = Column(Boolean, nullable=False, default=False, server_default=expression.false())

    def __repr__(self):
        return f"<Piece(id={self.id}, name='{self.name}')>"
