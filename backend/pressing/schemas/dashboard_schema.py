# backend/pressing/schemas/dashboard_schema.py
from datetime import datetime
from typing import List, Literal

from .common import CamelModel


class RecentOrder(CamelModel):
    id: str
    client_name: str
    total_amount: float
    status: str
    created_at: datetime
    kind: Literal["individual", "professional"]


class DashboardStats(CamelModel):
    """Indicadores del panel principal, calculados sobre ambos tipos de pedido."""
    today_orders: int = 0
    pending_orders: int = 0
    completed_today: int = 0
    revenue: float = 0.0
    individual_clients: int = 0
    professional_clients: int = 0
    total_outstanding: float = 0.0
    overdue_professional_orders: int = 0
    recent_orders: List[RecentOrder] = []
