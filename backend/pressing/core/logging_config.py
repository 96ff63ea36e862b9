# backend/pressing/core/logging_config.py
"""
Configuración del logging de la aplicación a partir de Settings.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from pressing.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """
    Configura el logger raíz con el nivel y formato de la configuración.

    Si LOG_FILE_PATH está definido se añade además un fichero rotativo
    (100KB, un backup) para no perder los errores entre reinicios.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    formatter = logging.Formatter(settings.LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in root_logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    if settings.LOG_FILE_PATH:
        log_dir = os.path.dirname(settings.LOG_FILE_PATH)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(settings.LOG_FILE_PATH, maxBytes=100000, backupCount=1)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # SQLAlchemy es muy verboso en INFO; solo mostramos sus warnings
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
