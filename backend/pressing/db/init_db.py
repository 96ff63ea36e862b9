# backend/pressing/db/init_db.py
"""
Inicialización de la base de datos al arrancar la aplicación.

Orden de ejecución:
1. Crea las tablas que falten (create_all)
2. Aplica las migraciones de esquemas antiguos
3. Carga los datos de demostración si la base está vacía
4. Recalcula las estadísticas de clientes a partir de los pedidos

Cada paso se puede desactivar desde la configuración.
"""

import logging
from datetime import datetime

from pressing.core.config import Settings
from pressing.crud import client_crud, piece_crud, professional_crud
from pressing.db.database import Database
from pressing.db.migrations import run_migrations
from pressing.db.models.client_model import Client, ProfessionalClient
from pressing.db.models.piece_model import Piece
from pressing.services.stats_service import stats_service
from pressing.services.transaction import unit_of_work

logger = logging.getLogger(__name__)

# ========================================
# DATOS DE DEMOSTRACIÓN
# ========================================

# (id, nombre, categoría, precio pressing, precio limpieza + pressing)
DEMO_PIECES = [
    ("P001", "Chemise", "vetement", 3.50, 8.00),
    ("P002", "Pantalon", "vetement", 4.00, 9.50),
    ("P003", "Veste", "vetement", 6.50, 15.00),
    ("P004", "Robe", "vetement", 5.00, 12.00),
    ("P005", "Manteau", "vetement", 8.00, 18.00),
    ("P006", "Costume", "vetement", 12.00, 25.00),
    ("P007", "Nappe", "linge", 3.00, 7.50),
    ("P008", "Cravate", "accessoire", 2.50, 6.00),
    ("P009", "Jupe", "vetement", 3.50, 8.00),
    ("P010", "Pull/Tricot", "vetement", 4.50, 9.50),
    ("P011", "Housse de couette", "linge", 6.00, 10.00),
    ("P012", "Costume (complet)", "vetement", 15.00, 30.00),
    ("P013", "Rideau", "linge", 8.00, 12.00),
    ("P014", "Foulard", "accessoire", 3.00, 6.00),
]

DEMO_PROFESSIONAL_PIECES = [
    ("prof-uniforme-1", "Uniforme de travail", "vetement", 8.50, 12.00),
    ("prof-blouse-1", "Blouse médicale", "vetement", 7.00, 10.50),
    ("prof-tablier-1", "Tablier de cuisine professionnel", "vetement", 6.50, 9.50),
    ("prof-nappe-1", "Nappe de restaurant", "linge", 12.00, 15.50),
    ("prof-serviette-1", "Serviette de table professionnelle", "linge", 3.50, 5.00),
    ("prof-combinaison-1", "Combinaison de travail", "vetement", 15.00, 20.00),
]

DEMO_CLIENTS = [
    {
        "id": "CLI001",
        "first_name": "Marie",
        "last_name": "Dubois",
        "phone": "06 12 34 56 78",
        "email": "marie.dubois@email.com",
        "address": "123 Rue de la Paix, 75001 Paris",
    },
    {
        "id": "CLI002",
        "first_name": "Pierre",
        "last_name": "Martin",
        "phone": "06 98 76 54 32",
        "email": "pierre.martin@email.com",
        "address": "456 Avenue des Champs, 75008 Paris",
    },
]

DEMO_PROFESSIONAL_CLIENTS = [
    {
        "id": "PRO001",
        "company_name": "Hotel Royal",
        "siret": "12345678901234",
        "contact_name": "Jean Directeur",
        "email": "contact@hotelroyal.com",
        "phone": "01 23 45 67 89",
        "billing_address": "789 Boulevard Haussmann, 75009 Paris",
        "payment_terms": 30,
        "special_rate": 15,
    },
    {
        "id": "PRO002",
        "company_name": "Restaurant Le Gourmet",
        "siret": "98765432109876",
        "contact_name": "Marie Chef",
        "email": "contact@legourmet.fr",
        "phone": "01 98 76 54 32",
        "billing_address": "456 Rue de la Gastronomie, 75007 Paris",
        "payment_terms": 15,
        "special_rate": 10,
    },
]


async def seed_demo_data(database: Database) -> bool:
    """
    Inserta el catálogo y los clientes de demostración en una base vacía.
    Los totales de los clientes empiezan a cero.

    Returns:
        True si se insertaron datos, False si la base ya tenía piezas.
    """
    async with database.session() as db:
        if await piece_crud.get_all_pieces(db):
            logger.info("🌱 SEED: La base ya contiene datos, no se cargan datos de demostración")
            return False

        now = datetime.now()
        async with unit_of_work(db):
            for piece_id, name, category, pressing_price, cleaning_price in DEMO_PIECES:
                db.add(Piece(
                    id=piece_id, name=name, category=category,
                    pressing_price=pressing_price, cleaning_pressing_price=cleaning_price,
                    image_url="", is_professional=False,
                ))
            for piece_id, name, category, pressing_price, cleaning_price in DEMO_PROFESSIONAL_PIECES:
                db.add(Piece(
                    id=piece_id, name=name, category=category,
                    pressing_price=pressing_price, cleaning_pressing_price=cleaning_price,
                    image_url="/placeholder.svg", is_professional=True,
                ))

            if await client_crud.count_clients(db) == 0:
                for values in DEMO_CLIENTS:
                    db.add(Client(
                        created_at=now, total_orders=0, total_spent=0.0,
                        type="individual", is_temporary=False, **values,
                    ))

            if await professional_crud.count_professional_clients(db) == 0:
                for values in DEMO_PROFESSIONAL_CLIENTS:
                    db.add(ProfessionalClient(
                        created_at=now, total_orders=0, total_spent=0.0, outstanding_amount=0.0, **values,
                    ))

    logger.info(
        f"🌱 SEED: {len(DEMO_PIECES) + len(DEMO_PROFESSIONAL_PIECES)} piezas y "
        f"{len(DEMO_CLIENTS) + len(DEMO_PROFESSIONAL_CLIENTS)} clientes de demostración cargados"
    )
    return True


async def init_database(database: Database, settings: Settings) -> None:
    """Prepara la base de datos para servir peticiones."""
    logger.info(f"🗄️ DB: Inicializando base de datos ({database.url})")
    await database.create_all()

    if settings.RUN_MIGRATIONS_ON_STARTUP:
        applied = await run_migrations(database)
        if applied:
            logger.info(f"📝 MIGRACIÓN: Aplicadas {applied}")

    if settings.SEED_DEMO_DATA:
        await seed_demo_data(database)

    if settings.RECALCULATE_STATS_ON_STARTUP:
        async with database.session() as db:
            await stats_service.recalculate_stats(db)

    logger.info("✅ DB: Base de datos lista")
