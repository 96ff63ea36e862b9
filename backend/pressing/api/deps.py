# backend/pressing/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza las dependencias que se inyectan en los endpoints.
La sesión de base de datos sale del manejador Database que la factoría de la
aplicación guarda en app.state, de modo que cada app (y cada test) usa su
propia base de datos.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from pressing.core.config import Settings


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos asíncrona.
    Se asegura de que la sesión se cierre siempre después de la petición.
    """
    async with request.app.state.database.session() as session:
        yield session


def get_settings(request: Request) -> Settings:
    """
    Dependencia de FastAPI para obtener el objeto de configuración de la app.
    """
    return request.app.state.settings
