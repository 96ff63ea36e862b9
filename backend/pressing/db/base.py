# backend/pressing/db/base.py
"""
Registra todos los modelos en Base.metadata.

Importar este módulo antes de create_all() garantiza que se creen las siete tablas.
"""

from pressing.db.database import Base  # noqa: F401
from pressing.db.models.client_model import Client, ProfessionalClient  # noqa: F401
from pressing.db.models.piece_model import Piece  # noqa: F401
from pressing.db.models.order_model import Order, OrderPiece, ProfessionalOrder  # noqa: F401
from pressing.db.models.sequence_model import IdSequence  # noqa: F401
