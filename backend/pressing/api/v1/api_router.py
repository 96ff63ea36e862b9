# backend/pressing/api/v1/api_router.py
"""
Este archivo contiene el router principal de la API.

Se encarga de registrar y configurar todos los routers por dominio de negocio.
"""

from fastapi import APIRouter

# Importación de routers especializados por dominio de negocio
from pressing.api.v1.endpoints import (
    clients,
    pieces,
    orders,
    professional_clients,
    professional_orders,
    dashboard,
)

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL
# ========================================

api_router_v1 = APIRouter()

# ========================================
# REGISTRO DE ROUTERS POR DOMINIO DE NEGOCIO
# ========================================

# ROUTER DE CLIENTES
# Clientes particulares y su historial de pedidos
api_router_v1.include_router(
    clients.router,
    prefix="/clients",              # Prefijo: /api/clients
    tags=["Clients"]                # Tag para documentación OpenAPI/Swagger
)

# ROUTER DE PIEZAS
# Catálogo de piezas con sus dos tarifas (pressing / limpieza + pressing)
api_router_v1.include_router(
    pieces.router,
    prefix="/pieces",
    tags=["Pieces"]
)

# ROUTER DE PEDIDOS
api_router_v1.include_router(
    orders.router,
    prefix="/orders",
    tags=["Orders"]
)

# ROUTERS PROFESIONALES (B2B)
api_router_v1.include_router(
    professional_clients.router,
    prefix="/professional-clients",
    tags=["Professional Clients"]
)

api_router_v1.include_router(
    professional_orders.router,
    prefix="/professional-orders",
    tags=["Professional Orders"]
)

# ROUTER DEL PANEL PRINCIPAL
api_router_v1.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["Dashboard"]
)
