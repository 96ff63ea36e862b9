# backend/pressing/schemas/common.py
"""
Piezas comunes a todos los esquemas Pydantic de la API.

El frontend trabaja con claves camelCase (firstName, totalAmount...), mientras
que el código Python y los modelos SQLAlchemy usan snake_case. CamelModel
resuelve la conversión en ambos sentidos.
"""

import enum
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base de los esquemas: alias camelCase, acepta también snake_case y lee objetos ORM."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        validate_default=True,
    )


def _to_local_naive(value: datetime) -> datetime:
    # SQLite guarda fechas sin zona horaria: se normalizan a hora local
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


LocalDatetime = Annotated[datetime, AfterValidator(_to_local_naive)]


# ========================================
# ENUMERACIONES DEL DOMINIO
# ========================================

class ServiceType(str, enum.Enum):
    """Servicio aplicado a una pieza."""
    PRESSING = "pressing"
    CLEANING_PRESSING = "cleaning-pressing"


class OrderStatus(str, enum.Enum):
    """Estado de preparación de un pedido."""
    RECEIVED = "received"
    PROCESSING = "processing"
    READY = "ready"
    DELIVERED = "delivered"


class PaymentStatus(str, enum.Enum):
    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


class Priority(str, enum.Enum):
    NORMAL = "normal"
    HIGH = "high"


class ClientType(str, enum.Enum):
    INDIVIDUAL = "individual"
    PROFESSIONAL = "professional"


class PieceCategory(str, enum.Enum):
    VETEMENT = "vetement"
    LINGE = "linge"
    ACCESSOIRE = "accessoire"


# ========================================
# RESPUESTAS GENÉRICAS
# ========================================

class SuccessResponse(BaseModel):
    """Respuesta de PUT/DELETE."""
    success: bool = True


class ErrorResponse(BaseModel):
    """Cuerpo de todas las respuestas de error."""
    error: str
