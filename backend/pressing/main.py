# backend/pressing/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y construye la aplicación completa: rutas, CORS,
manejadores de errores y ciclo de vida (inicialización y cierre de la base
de datos).

Características principales:
- Factoría create_app(): cada llamada crea una app con su propio manejador
  Database, lo que permite a los tests usar una base de datos temporal
- Ciclo de vida con lifespan: tablas, migraciones, datos de demostración y
  recálculo de estadísticas al arrancar; dispose del motor al cerrar
- Errores de dominio traducidos a respuestas JSON {"error": ...}

Códigos de error: las versiones anteriores de la API devolvían 500 para
cualquier fallo. Ahora un recurso inexistente devuelve 404, una violación de
restricción (ID duplicado, cliente profesional con pedidos) 409, un cuerpo
inválido 422 y solo los errores no previstos 500. El cuerpo sigue siendo
{"error": mensaje}.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pressing.api.v1.api_router import api_router_v1  # Router principal de la API
from pressing.core.config import Settings, settings  # Configuración centralizada de la aplicación
from pressing.core.exceptions import PressingError
from pressing.core.logging_config import setup_logging
from pressing.db.database import Database
from pressing.db.init_db import init_database

logger = logging.getLogger(__name__)


# ========================================
# MANEJADORES DE ERRORES
# ========================================

async def pressing_error_handler(request: Request, exc: PressingError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"❌ ERROR: {request.method} {request.url.path} -> {exc.message}")
    else:
        logger.warning(f"⚠️ {request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"⚠️ VALIDACIÓN: {request.method} {request.url.path} -> {len(exc.errors())} errores")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"❌ ERROR: Error no controlado en {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})


# ========================================
# FACTORÍA DE LA APLICACIÓN
# ========================================

def create_app(app_settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Construye la aplicación FastAPI.

    Args:
        app_settings: Configuración a usar (por defecto la global)
        database: Manejador de base de datos ya creado. Si se pasa, la app no
                  lo libera al cerrar; quien lo creó es responsable de él.

    Returns:
        FastAPI: Aplicación lista para servir peticiones
    """
    app_settings = app_settings or settings
    owns_database = database is None
    database = database or Database(app_settings.DATABASE_URL, echo=app_settings.DATABASE_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"🚀 {app_settings.PROJECT_NAME} v{app_settings.PROJECT_VERSION} arrancando")
        await init_database(database, app_settings)
        yield
        if owns_database:
            await database.dispose()
        logger.info("👋 Aplicación detenida")

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        openapi_url=f"{app_settings.API_STR}/openapi.json",
        version=app_settings.PROJECT_VERSION,
        description="API para la gestión de un pressing: clientes, piezas y pedidos",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = database

    # El frontend se sirve desde otro origen
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PressingError, pressing_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router_v1, prefix=app_settings.API_STR)

    @app.get("/", tags=["Root"])
    async def read_root():
        """
        Endpoint raíz para verificación básica del estado de la API.

        Example:
            GET /
            Response: {"message": "Bienvenido a Pressing API v0.1.0"}
        """
        return {"message": f"Bienvenido a {app_settings.PROJECT_NAME} v{app_settings.PROJECT_VERSION}"}

    return app


setup_logging(settings)
app = create_app()
