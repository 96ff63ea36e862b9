# backend/pressing/schemas/order_schema.py
"""
Se encarga de definir los esquemas Pydantic para los pedidos y sus líneas.

Incluye además la referencia de cliente de un pedido como variante etiquetada:
un pedido pertenece a un cliente registrado (RegisteredClient) o a un
invitado (GuestClient), en lugar de deducirlo de un prefijo en el ID.
"""

from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, field_validator, model_validator

from .common import CamelModel, LocalDatetime, OrderStatus, PaymentStatus, Priority, ServiceType


# ========================================
# REFERENCIA DE CLIENTE (VARIANTE ETIQUETADA)
# ========================================

class RegisteredClient(CamelModel):
    """Pedido atribuido a un cliente registrado; actualiza sus estadísticas."""
    kind: Literal["registered"] = "registered"
    client_id: str


class GuestClient(CamelModel):
    """
    Pedido de un invitado. Solo conserva el nombre tal y como se escribió.
    guest_id existe cuando el frontend generó un identificador GUEST...
    """
    kind: Literal["guest"] = "guest"
    snapshot_name: str
    guest_id: Optional[str] = None


ClientReference = Annotated[Union[RegisteredClient, GuestClient], Field(discriminator="kind")]


# ========================================
# LÍNEAS DE PEDIDO
# ========================================

class OrderPieceCreate(CamelModel):
    """
    Línea enviada por el frontend. Si falta unitPrice, el servidor lo toma
    del catálogo según el servicio; totalPrice siempre se recalcula.
    """
    piece_id: str = Field(..., description="ID de la pieza del catálogo")
    piece_name: Optional[str] = Field(None, description="Nombre de la pieza (copia)")
    service_type: ServiceType
    quantity: int = Field(..., gt=0)
    unit_price: Optional[float] = Field(None, ge=0)


class OrderPieceResponse(CamelModel):
    id: str
    order_id: str
    piece_id: str
    piece_name: str
    service_type: ServiceType
    quantity: int
    unit_price: float
    total_price: float


# ========================================
# PEDIDOS DE PARTICULARES
# ========================================

class ExceptionalPriceModel(CamelModel):
    """Base de los pedidos cuyo importe puede fijarse a mano (isExceptionalPrice)."""
    total_amount: Optional[float] = Field(None, ge=0)
    is_exceptional_price: bool = False

    @model_validator(mode='after')
    def validate_exceptional_price(self):
        if self.is_exceptional_price and self.total_amount is None:
            raise ValueError('Un precio excepcional requiere totalAmount')
        return self


class OrderCreate(ExceptionalPriceModel):
    """Esquema para crear un pedido con su lista de piezas."""
    id: Optional[str] = None
    client_id: Optional[str] = None
    client_name: str = Field(..., min_length=1, description="Nombre del cliente (desnormalizado)")
    status: OrderStatus = OrderStatus.RECEIVED
    payment_status: PaymentStatus = PaymentStatus.PENDING
    created_at: Optional[LocalDatetime] = None
    estimated_date: Optional[LocalDatetime] = None
    pieces: List[OrderPieceCreate] = []

    @field_validator('client_name')
    @classmethod
    def validate_client_name(cls, v):
        if not v.strip():
            raise ValueError('El nombre del cliente es obligatorio')
        return v.strip()


class OrderUpdate(ExceptionalPriceModel):
    """
    Sobrescribe los campos editables; las líneas no se modifican.
    Si no llega totalAmount se conserva el importe guardado.
    """
    client_id: Optional[str] = None
    client_name: str = Field(..., min_length=1)
    status: OrderStatus = OrderStatus.RECEIVED
    payment_status: PaymentStatus = PaymentStatus.PENDING
    estimated_date: Optional[LocalDatetime] = None


class OrderResponse(CamelModel):
    id: str
    client_id: Optional[str] = None
    client_name: str
    total_amount: float
    status: OrderStatus
    payment_status: PaymentStatus
    created_at: datetime
    estimated_date: datetime
    is_exceptional_price: bool
    pieces: List[OrderPieceResponse] = []


# ========================================
# PEDIDOS PROFESIONALES
# ========================================

class ProfessionalOrderCreate(CamelModel):
    """
    Pedido B2B. Sin desglose por pieza: solo el número total de piezas.
    Las fechas y el importe que falten se calculan en el servicio.
    """
    id: Optional[str] = None
    client_id: str = Field(..., min_length=1)
    client_name: Optional[str] = None
    pieces: int = Field(..., gt=0, description="Número de piezas")
    service: ServiceType = ServiceType.CLEANING_PRESSING
    total_amount: Optional[float] = Field(None, ge=0)
    status: OrderStatus = OrderStatus.RECEIVED
    payment_status: PaymentStatus = PaymentStatus.PENDING
    created_at: Optional[LocalDatetime] = None
    delivery_date: Optional[LocalDatetime] = None
    due_date: Optional[LocalDatetime] = None
    priority: Priority = Priority.NORMAL


class ProfessionalOrderUpdate(CamelModel):
    client_id: str = Field(..., min_length=1)
    client_name: str
    pieces: int = Field(..., gt=0)
    service: ServiceType
    total_amount: float = Field(..., ge=0)
    status: OrderStatus
    payment_status: PaymentStatus
    delivery_date: LocalDatetime
    due_date: LocalDatetime
    priority: Priority = Priority.NORMAL


class ProfessionalOrderResponse(CamelModel):
    id: str
    client_id: str
    client_name: str
    pieces: int
    service: ServiceType
    total_amount: float
    status: OrderStatus
    payment_status: PaymentStatus
    created_at: datetime
    delivery_date: datetime
    due_date: datetime
    priority: Priority
