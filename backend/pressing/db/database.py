# backend/pressing/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo define los componentes básicos de persistencia:
- Clase base para modelos (Base)
- Database: manejador explícito que agrupa el motor asíncrono y la fábrica
  de sesiones, con un ciclo de vida definido (creación y dispose)

No existe una conexión global: la aplicación construye un Database en su
factoría y lo inyecta en los endpoints a través de pressing/api/deps.py.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy.orm import declarative_base

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()


def _use_immediate_transactions(engine: AsyncEngine) -> None:
    """
    Hace que cada transacción de SQLite empiece con BEGIN IMMEDIATE.

    El driver solo envía BEGIN antes de la primera escritura, así que las
    lecturas previas (contador de IDs, existencia del cliente) quedarían fuera
    de la transacción. Con BEGIN IMMEDIATE el bloqueo de escritura se toma al
    empezar y las transacciones concurrentes se ejecutan una tras otra.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """
    Manejador de la base de datos SQLite.

    Se crea una vez por proceso (o por test) y se libera con dispose().
    Cada petición obtiene su propia AsyncSession mediante session().
    """

    def __init__(self, url: str, echo: bool = False):
        connect_args = {}
        if url.startswith("sqlite"):
            # Necesario para compartir la conexión entre hilos del servidor
            connect_args = {"check_same_thread": False}
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, connect_args=connect_args)
        if url.startswith("sqlite"):
            _use_immediate_transactions(self.engine)
        # expire_on_commit=False es importante para que los objetos sigan siendo utilizables
        # después de que la transacción se haya confirmado.
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Crea las tablas que no existan (idempotente)."""
        # Importa todos los modelos para registrarlos en Base.metadata
        from pressing.db import base  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Abre una sesión y garantiza su cierre (rollback implícito si no hubo commit)."""
        async with self.session_factory() as session:
            yield session

    async def dispose(self) -> None:
        await self.engine.dispose()
