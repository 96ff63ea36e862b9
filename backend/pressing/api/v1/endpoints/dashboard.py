# backend/pressing/api/v1/endpoints/dashboard.py

"""
Endpoint con los indicadores del panel principal.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pressing.api import deps
from pressing.schemas.dashboard_schema import DashboardStats
from pressing.services.stats_service import stats_service

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def read_dashboard_stats(db: AsyncSession = Depends(deps.get_db)) -> DashboardStats:
    """Pedidos del día, pendientes, ingresos, clientes y saldo pendiente profesional."""
    return await stats_service.get_dashboard_stats(db)
