# backend/pressing/db/models/client_model.py
"""
Se encarga de definir los modelos de cliente para la aplicación.

Dos tablas distintas:
- clients: clientes particulares (y clientes invitados temporales)
- professional_clients: empresas facturadas a plazo
"""

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, Text
from sqlalchemy.sql import expression

from pressing.db.database import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(String(50), primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False, default="")
    email = Column(String(255), nullable=False, default="")
    address = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, nullable=False)
    # Totales acumulados; recalculables a partir de la tabla orders
    total_orders = Column(Integer, nullable=False, default=0)
    total_spent = Column(Float, nullable=False, default=0.0)
    type = Column(String(20), nullable=False, default="individual")
    company_name = Column(String(255), nullable=True)
    siret = Column(String(14), nullable=True)
    # Clientes materializados a partir de un pedido de invitado
    is_temporary = Column(Boolean, nullable=False, default=False, server_default=expression.false())

    def __repr__(self):
        return f"<Client(id={self.id}, name='{self.first_name} {self.last_name}')>"


class ProfessionalClient(Base):
    __tablename__ = "professional_clients"

    id = Column(String(50), primary_key=True, index=True)
    company_name = Column(String(255), nullable=False)
    siret = Column(String(14), nullable=False)
    contact_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    billing_address = Column(Text, nullable=False)
    payment_terms = Column(Integer, nullable=False, default=30)  # Días
    special_rate = Column(Integer, nullable=False, default=0)  # Porcentaje de descuento negociado
    total_orders = Column(Integer, nullable=False, default=0)
    total_spent = Column(Float, nullable=False, default=0.0)
    outstanding_amount = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<ProfessionalClient(id={self.id}, company='{self.company_name}')>"
