# backend/pressing/db/models/sequence_model.py
from sqlalchemy import Column, Integer, String

from pressing.db.database import Base


class IdSequence(Base):
    """Último número asignado para cada prefijo de ID (CLI, PR, PRO...)."""
    __tablename__ = "id_sequences"

    name = Column(String(20), primary_key=True)
    value = Column(Integer, nullable=False, default=0)
