# backend/tests/conftest.py
"""
Fixtures compartidas por los tests.

Cada test trabaja sobre un fichero SQLite propio dentro de tmp_path, así que
los tests son independientes entre sí y no tocan la base de datos real.
"""

import pytest
from fastapi.testclient import TestClient

from pressing.core.config import Settings
from pressing.db.database import Database
from pressing.main import create_app


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        SEED_DEMO_DATA=False,
        LOG_FILE_PATH=None,
    )


@pytest.fixture
def client(test_settings):
    """TestClient sobre una base vacía (el lifespan crea las tablas)."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(test_settings):
    """TestClient sobre una base con los datos de demostración."""
    app = create_app(test_settings.model_copy(update={"SEED_DEMO_DATA": True}))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def database(test_settings):
    database = Database(test_settings.DATABASE_URL)
    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture
async def db(database):
    async with database.session() as session:
        yield session


# ========================================
# DATOS DE PRUEBA
# ========================================

@pytest.fixture
def piece_payload():
    return {
        "id": "P1",
        "name": "Chemise",
        "category": "vetement",
        "pressingPrice": 3.5,
        "cleaningPressingPrice": 8.0,
    }


@pytest.fixture
def client_payload():
    return {
        "firstName": "Marie",
        "lastName": "Dubois",
        "phone": "06 12 34 56 78",
        "email": "marie.dubois@email.com",
        "address": "123 Rue de la Paix, 75001 Paris",
    }


@pytest.fixture
def professional_client_payload():
    return {
        "companyName": "Hotel Royal",
        "siret": "12345678901234",
        "contactName": "Jean Directeur",
        "email": "contact@hotelroyal.com",
        "phone": "01 23 45 67 89",
        "billingAddress": "789 Boulevard Haussmann, 75009 Paris",
        "paymentTerms": 30,
        "specialRate": 15,
    }
