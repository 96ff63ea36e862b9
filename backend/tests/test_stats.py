# backend/tests/test_stats.py
"""
Tests del recálculo de estadísticas y del panel principal.
"""

from datetime import datetime, timedelta

from pressing.db.models.client_model import Client, ProfessionalClient
from pressing.db.models.order_model import Order, ProfessionalOrder
from pressing.services.stats_service import stats_service


def make_client(client_id: str, total_orders: int = 0, total_spent: float = 0.0, **extra) -> Client:
    return Client(
        id=client_id, first_name="Test", last_name=client_id, phone="", email="", address="",
        created_at=datetime.now(), total_orders=total_orders, total_spent=total_spent,
        type="individual", **extra,
    )


def make_order(order_id: str, client_id, amount: float, created_at=None, status="received") -> Order:
    created_at = created_at or datetime.now()
    return Order(
        id=order_id, client_id=client_id, client_name="Test", total_amount=amount,
        status=status, payment_status="pending", created_at=created_at,
        estimated_date=created_at + timedelta(days=3), is_exceptional_price=False,
    )


def make_professional_client(client_id: str) -> ProfessionalClient:
    return ProfessionalClient(
        id=client_id, company_name=f"Company {client_id}", siret="12345678901234", contact_name="Contact",
        email="", phone="", billing_address="", payment_terms=30, special_rate=0,
        total_orders=99, total_spent=999.0, outstanding_amount=999.0, created_at=datetime.now(),
    )


def make_professional_order(order_id: str, client_id: str, amount: float, payment_status: str,
                            due_date=None, created_at=None, status="received") -> ProfessionalOrder:
    now = datetime.now()
    return ProfessionalOrder(
        id=order_id, client_id=client_id, client_name="Company", pieces=1, service="pressing",
        total_amount=amount, status=status, payment_status=payment_status,
        created_at=created_at or now, delivery_date=now, due_date=due_date or now + timedelta(days=30),
        priority="normal",
    )


# ========================================
# RECÁLCULO
# ========================================

async def test_recalculate_stats_matches_orders(db):
    db.add_all([
        make_client("CLI1", total_orders=50, total_spent=500.0),
        make_client("CLI2", total_orders=3, total_spent=30.0),
        make_client("GUEST1", total_orders=7, total_spent=70.0, is_temporary=True),
    ])
    db.add_all([
        make_order("PR1", "CLI1", 10.0),
        make_order("PR2", "CLI1", 15.5),
        make_order("PR3", None, 99.0),
        make_order("PR4", "GUEST1", 42.0),
    ])
    await db.commit()

    summary = await stats_service.recalculate_stats(db)
    assert summary == {"clients": 1, "professional_clients": 0}

    clients = {c.id: c for c in [await db.get(Client, cid) for cid in ("CLI1", "CLI2", "GUEST1")]}
    for client in clients.values():
        await db.refresh(client)

    assert (clients["CLI1"].total_orders, clients["CLI1"].total_spent) == (2, 25.5)
    assert (clients["CLI2"].total_orders, clients["CLI2"].total_spent) == (0, 0.0)
    assert (clients["GUEST1"].total_orders, clients["GUEST1"].total_spent) == (0, 0.0)


async def test_recalculate_professional_outstanding(db):
    db.add_all([make_professional_client("PRO1"), make_professional_client("PRO2")])
    db.add_all([
        make_professional_order("PO1", "PRO1", 100.0, "pending"),
        make_professional_order("PO2", "PRO1", 50.0, "paid"),
        make_professional_order("PO3", "PRO1", 25.0, "overdue"),
    ])
    await db.commit()

    summary = await stats_service.recalculate_stats(db)
    assert summary["professional_clients"] == 1

    pro1 = await db.get(ProfessionalClient, "PRO1")
    pro2 = await db.get(ProfessionalClient, "PRO2")
    await db.refresh(pro1)
    await db.refresh(pro2)

    assert (pro1.total_orders, pro1.total_spent, pro1.outstanding_amount) == (3, 175.0, 125.0)
    assert (pro2.total_orders, pro2.total_spent, pro2.outstanding_amount) == (0, 0.0, 0.0)


async def test_refresh_client_stats_ignores_guests(db):
    db.add(make_client("GUEST1", total_orders=0, is_temporary=True))
    db.add(make_order("PR1", "GUEST1", 42.0))
    await db.commit()

    await stats_service.refresh_client_stats(db, "GUEST1")
    await stats_service.refresh_client_stats(db, None)
    await db.commit()

    guest = await db.get(Client, "GUEST1")
    await db.refresh(guest)
    assert guest.total_orders == 0


# ========================================
# PANEL PRINCIPAL
# ========================================

async def test_dashboard_stats(db):
    now = datetime.now()
    yesterday = now - timedelta(days=1)
    db.add_all([make_client("CLI1"), make_professional_client("PRO1")])
    db.add_all([
        make_order("PR1", "CLI1", 20.0, created_at=now, status="ready"),
        make_order("PR2", None, 10.0, created_at=now, status="processing"),
        make_order("PR3", "CLI1", 99.0, created_at=yesterday, status="received"),
        make_order("PR4", "CLI1", 5.0, created_at=yesterday, status="delivered"),
        make_professional_order("PO1", "PRO1", 60.0, "pending", created_at=now, status="received"),
        make_professional_order(
            "PO2", "PRO1", 30.0, "pending", created_at=yesterday, due_date=now - timedelta(days=1),
            status="delivered",
        ),
    ])
    await db.commit()
    await stats_service.recalculate_stats(db)

    stats = await stats_service.get_dashboard_stats(db, now=now)

    assert stats.today_orders == 3
    assert stats.pending_orders == 3
    assert stats.completed_today == 1
    assert stats.revenue == 90.0
    assert stats.individual_clients == 1
    assert stats.professional_clients == 1
    assert stats.total_outstanding == 90.0
    assert stats.overdue_professional_orders == 1
    assert len(stats.recent_orders) == 5
    assert {order.kind for order in stats.recent_orders} == {"individual", "professional"}
    created = [order.created_at for order in stats.recent_orders]
    assert created == sorted(created, reverse=True)


def test_dashboard_endpoint(client, client_payload, piece_payload):
    client.post("/api/pieces", json=piece_payload)
    client.post("/api/clients", json=client_payload)
    client.post("/api/orders", json={
        "clientId": "CLI1",
        "clientName": "Marie Dubois",
        "pieces": [{"pieceId": "P1", "serviceType": "cleaning-pressing", "quantity": 2}],
    })

    response = client.get("/api/dashboard/stats")
    assert response.status_code == 200
    stats = response.json()
    assert stats["todayOrders"] == 1
    assert stats["pendingOrders"] == 1
    assert stats["revenue"] == 16.0
    assert stats["individualClients"] == 1
    assert stats["recentOrders"][0]["kind"] == "individual"
