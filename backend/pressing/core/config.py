# backend/pressing/core/config.py
"""
Este archivo contiene la configuración de la aplicación.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from pathlib import Path

# Apunta al directorio 'backend/'
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Variables sensibles desde .env, defaults seguros para el resto.
    """
    # Configuración general del proyecto
    BASE_DIR: Path = BASE_DIR
    API_STR: str = "/api"
    PROJECT_NAME: str = "Pressing API"
    PROJECT_VERSION: str = "0.1.0"

    # Configuración de la base de datos (SQLite asíncrono vía aiosqlite)
    DATABASE_URL: str = "sqlite+aiosqlite:///./pressing.db"
    DATABASE_ECHO: bool = False

    # Ciclo de arranque
    RUN_MIGRATIONS_ON_STARTUP: bool = True
    SEED_DEMO_DATA: bool = True
    RECALCULATE_STATS_ON_STARTUP: bool = True

    # Prefijos de los IDs secuenciales
    GUEST_ID_PREFIX: str = "GUEST"
    CLIENT_ID_PREFIX: str = "CLI"
    ORDER_ID_PREFIX: str = "PR"
    PROFESSIONAL_CLIENT_ID_PREFIX: str = "PRO"
    PROFESSIONAL_ORDER_ID_PREFIX: str = "PO"
    PIECE_ID_PREFIX: str = "P"

    # Reglas de negocio del pressing
    DEFAULT_READY_DAYS: int = 3
    DEFAULT_DELIVERY_DAYS: int = 3
    PROFESSIONAL_PRESSING_UNIT_PRICE: float = 5.00
    PROFESSIONAL_CLEANING_PRESSING_UNIT_PRICE: float = 12.00

    # CORS - el frontend corre en otro puerto
    CORS_ORIGINS: List[str] = ["*"]

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE_PATH: Optional[str] = None

    # Server - Del .env con defaults
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

# Instancia global de la configuración
settings = Settings()
