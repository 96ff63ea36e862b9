# backend/tests/test_sequences.py
"""Tests de la asignación de IDs secuenciales."""

import asyncio
from datetime import datetime

from pressing.crud import client_crud, order_crud, piece_crud
from pressing.db.models.client_model import Client
from pressing.db.models.piece_model import Piece
from pressing.schemas.order_schema import OrderCreate
from pressing.services.order_service import order_service


def make_client(client_id: str) -> Client:
    return Client(
        id=client_id,
        first_name="Test",
        last_name=client_id,
        phone="",
        email="",
        address="",
        created_at=datetime.now(),
        total_orders=0,
        total_spent=0.0,
        type="individual",
        is_temporary=False,
    )


async def test_first_client_id_is_cli1(db):
    assert await client_crud.get_next_client_id(db) == "CLI1"


async def test_next_client_id_follows_existing_rows(db):
    for n in range(1, 6):
        db.add(make_client(f"CLI{n}"))
    await db.commit()

    assert await client_crud.get_next_client_id(db) == "CLI6"


async def test_allocated_ids_are_not_repeated_within_a_transaction(db):
    first = await client_crud.get_next_client_id(db)
    second = await client_crud.get_next_client_id(db)
    assert (first, second) == ("CLI1", "CLI2")


async def test_next_id_skips_explicitly_inserted_ids(db):
    db.add(make_client("CLI1"))
    db.add(make_client("CLI2"))
    await db.commit()
    await client_crud.get_next_client_id(db)  # CLI3
    db.add(make_client("CLI4"))
    await db.commit()

    assert await client_crud.get_next_client_id(db) == "CLI5"


async def test_deleted_ids_are_never_reused(db):
    client_id = await client_crud.get_next_client_id(db)
    await client_crud.insert_client(db, make_client(client_id))
    await db.commit()

    await client_crud.delete_client(db, client_id)
    await db.commit()

    assert await client_crud.get_next_client_id(db) == "CLI2"


async def test_prefixes_have_independent_counters(db):
    assert await order_crud.get_next_order_id(db) == "PR1"
    assert await client_crud.get_next_client_id(db) == "CLI1"

    db.add(Piece(id="P1", name="Chemise", category="vetement", pressing_price=3.5, cleaning_pressing_price=8.0))
    await db.flush()
    assert await piece_crud.get_next_piece_id(db) == "P2"


async def test_prefix_match_is_case_sensitive(db):
    db.add(Piece(id="prof-1", name="Uniforme", category="professionnel", pressing_price=8.5, cleaning_pressing_price=12.0))
    db.add(Piece(id="prof-2", name="Tablier", category="professionnel", pressing_price=4.5, cleaning_pressing_price=7.0))
    await db.flush()

    assert await piece_crud.get_next_piece_id(db) == "P1"


# ========================================
# CONCURRENCIA
# ========================================

async def test_concurrent_orders_get_distinct_ids(database):
    async def place_order(n: int) -> str:
        async with database.session() as session:
            order = await order_service.create_order(session, OrderCreate(client_name=f"Client {n}", pieces=[]))
            return order.id

    order_ids = await asyncio.gather(*(place_order(n) for n in range(5)))

    assert sorted(order_ids) == ["PR1", "PR2", "PR3", "PR4", "PR5"]
    async with database.session() as session:
        assert len(await order_crud.get_all_orders(session)) == 5


async def test_concurrent_clients_on_existing_sequence(database):
    async with database.session() as session:
        await client_crud.get_next_client_id(session)
        await session.commit()

    async def allocate() -> str:
        async with database.session() as session:
            client_id = await client_crud.get_next_client_id(session)
            await client_crud.insert_client(session, make_client(client_id))
            await session.commit()
            return client_id

    client_ids = await asyncio.gather(*(allocate() for _ in range(4)))

    assert sorted(client_ids) == ["CLI2", "CLI3", "CLI4", "CLI5"]
