# backend/pressing/core/exceptions.py
"""
Excepciones de dominio de la aplicación.

La capa CRUD y los servicios lanzan estas excepciones; los manejadores
registrados en main.py las convierten en respuestas JSON {"error": ...}.
"""


class PressingError(Exception):
    """Error base de la aplicación. Se traduce a HTTP 500."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(PressingError):
    """La entidad solicitada no existe (update/delete/get por ID)."""

    status_code = 404


class ConstraintError(PressingError):
    """Violación de integridad: clave primaria duplicada o borrado restringido."""

    status_code = 409
