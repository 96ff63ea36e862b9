# backend/pressing/schemas/client_schema.py
"""
Esquemas Pydantic para clientes particulares y profesionales.

Patrón de esquemas utilizado:
- *Base: Propiedades comunes compartidas
- *Create: Para crear nuevos clientes (POST); el ID y los totales los asigna el servidor
- *Update: Para actualizar clientes existentes (PUT); los totales no son editables
- *Response: Para respuestas de la API (GET)
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel, ClientType


# ========================================
# CLIENTES PARTICULARES
# ========================================

class ClientBase(CamelModel):
    first_name: str = Field(..., min_length=1, description="Nombre")
    last_name: str = Field(..., description="Apellido")
    phone: str = ""
    email: str = ""
    address: str = ""
    type: ClientType = ClientType.INDIVIDUAL
    company_name: Optional[str] = None
    siret: Optional[str] = None


class ClientCreate(ClientBase):
    """
    Ejemplo de uso:
    POST /api/clients
    {
        "firstName": "Marie",
        "lastName": "Dubois",
        "phone": "06 12 34 56 78",
        "email": "marie.dubois@email.com",
        "address": "123 Rue de la Paix, 75001 Paris",
        "type": "individual"
    }
    """
    pass


class ClientUpdate(ClientBase):
    pass


class ClientResponse(ClientBase):
    id: str
    created_at: datetime
    total_orders: int = 0
    total_spent: float = 0.0
    is_temporary: bool = False


# ========================================
# CLIENTES PROFESIONALES
# ========================================

class ProfessionalClientBase(CamelModel):
    company_name: str = Field(..., min_length=1, description="Razón social")
    siret: str = Field(..., description="Número SIRET de la empresa")
    contact_name: str
    email: str
    phone: str
    billing_address: str
    payment_terms: int = Field(30, ge=0, description="Plazo de pago en días")
    special_rate: int = Field(0, ge=0, le=100, description="Descuento negociado (%)")


class ProfessionalClientCreate(ProfessionalClientBase):
    pass


class ProfessionalClientUpdate(ProfessionalClientBase):
    pass


class ProfessionalClientResponse(ProfessionalClientBase):
    id: str
    created_at: datetime
    total_orders: int = 0
    total_spent: float = 0.0
    outstanding_amount: float = 0.0
