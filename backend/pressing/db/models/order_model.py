# backend/pressing/db/models/order_model.py
"""
Este archivo contiene los modelos de pedido para la aplicación.
"""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from pressing.db.database import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(50), primary_key=True, index=True)
    # NULL para pedidos de invitados sin cliente registrado
    client_id = Column(String(50), ForeignKey("clients.id"), nullable=True, index=True)
    client_name = Column(String(255), nullable=False)
    total_amount = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default="received")
    payment_status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime, nullable=False)
    estimated_date = Column(DateTime, nullable=False)
    is_exceptional_price = Column(Boolean, nullable=False, default=False, server_default=expression.false())

    pieces = relationship(
        "OrderPiece",
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OrderPiece.position",
    )

    def __repr__(self):
        return f"<Order(id={self.id}, client_id='{self.client_id}', status='{self.status}')>"


class OrderPiece(Base):
    __tablename__ = "order_pieces"

    id = Column(String(120), primary_key=True)
    order_id = Column(String(50), ForeignKey("orders.id"), nullable=False, index=True)
    # Copia del catálogo en el momento del pedido; sin clave foránea hacia pieces
    piece_id = Column(String(50), nullable=False)
    piece_name = Column(String(255), nullable=False)
    service_type = Column(String(30), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=False)
    total_price = Column(Float, nullable=False)
    position = Column(Integer, nullable=False, default=0)

    order = relationship("Order", back_populates="pieces")

    def __repr__(self):
        return f"<OrderPiece(id={self.id}, piece_id='{self.piece_id}', quantity={self.quantity})>"


class ProfessionalOrder(Base):
    __tablename__ = "professional_orders"

    id = Column(String(50), primary_key=True, index=True)
    client_id = Column(String(50), ForeignKey("professional_clients.id"), nullable=False, index=True)
    client_name = Column(String(255), nullable=False)
    pieces = Column(Integer, nullable=False)
    service = Column(String(30), nullable=False)
    total_amount = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default="received")
    payment_status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime, nullable=False)
    delivery_date = Column(DateTime, nullable=False)
    due_date = Column(DateTime, nullable=False)
    priority = Column(String(10), nullable=False, default="normal")

    def __repr__(self):
        return f"<ProfessionalOrder(id={self.id}, client_id='{self.client_id}', status='{self.status}')>"
