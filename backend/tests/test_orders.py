# backend/tests/test_orders.py
"""
Tests de los pedidos de particulares a través de la API.

Cubren el flujo completo de creación (precios, totales, IDs, invitados y
estadísticas), la actualización y el borrado.
"""

import pytest


@pytest.fixture
def catalog(client, piece_payload):
    client.post("/api/pieces", json=piece_payload)
    client.post("/api/pieces", json={
        "id": "P2", "name": "Pantalon", "category": "vetement",
        "pressingPrice": 4.0, "cleaningPressingPrice": 9.5,
    })
    return client


@pytest.fixture
def registered_client(client, client_payload):
    return client.post("/api/clients", json=client_payload).json()


def order_lines(order):
    return sorted(order["pieces"], key=lambda line: line["id"])


# ========================================
# CREACIÓN
# ========================================

def test_line_price_comes_from_catalog(catalog):
    response = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 2}],
    })
    assert response.status_code == 201
    order = response.json()

    line = order["pieces"][0]
    assert line["unitPrice"] == 3.5
    assert line["totalPrice"] == 7.0
    assert line["pieceName"] == "Chemise"
    assert order["totalAmount"] == 7.0


def test_cleaning_pressing_uses_second_price(catalog):
    order = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "pieces": [{"pieceId": "P2", "serviceType": "cleaning-pressing", "quantity": 3}],
    }).json()
    assert order["pieces"][0]["unitPrice"] == 9.5
    assert order["totalAmount"] == 28.5


def test_total_is_sum_of_lines(catalog):
    order = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "pieces": [
            {"pieceId": "P1", "serviceType": "cleaning-pressing", "quantity": 3},
            {"pieceId": "P2", "serviceType": "pressing", "quantity": 1, "unitPrice": 5.0},
            {"pieceId": "P1", "serviceType": "pressing", "quantity": 1},
        ],
        "totalAmount": 999.0,
    }).json()

    for line in order["pieces"]:
        assert line["totalPrice"] == pytest.approx(line["unitPrice"] * line["quantity"])
    assert order["totalAmount"] == pytest.approx(sum(line["totalPrice"] for line in order["pieces"]))
    assert order["totalAmount"] == pytest.approx(24.0 + 5.0 + 3.5)


def test_exceptional_price_overrides_total(catalog):
    order = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "isExceptionalPrice": True,
        "totalAmount": 10.0,
        "pieces": [{"pieceId": "P1", "serviceType": "cleaning-pressing", "quantity": 3}],
    }).json()
    assert order["totalAmount"] == 10.0
    assert order["isExceptionalPrice"] is True


def test_exceptional_price_requires_total(catalog):
    response = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "isExceptionalPrice": True,
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 1}],
    })
    assert response.status_code == 422
    assert "error" in response.json()


def test_order_and_line_ids(catalog):
    first = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "pieces": [
            {"pieceId": "P1", "serviceType": "pressing", "quantity": 1},
            {"pieceId": "P2", "serviceType": "pressing", "quantity": 1},
        ],
    }).json()
    second = catalog.post("/api/orders", json={"clientName": "John Doe", "pieces": []}).json()

    assert first["id"] == "PR1"
    assert second["id"] == "PR2"
    assert [line["id"] for line in first["pieces"]] == ["PR1_P1_0", "PR1_P2_1"]
    assert all(line["orderId"] == "PR1" for line in first["pieces"])


def test_explicit_order_id_is_kept(catalog):
    order = catalog.post("/api/orders", json={
        "id": "PR2024-001",
        "clientName": "Jane Doe",
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 1}],
    }).json()
    assert order["id"] == "PR2024-001"

    duplicate = catalog.post("/api/orders", json={"id": "PR2024-001", "clientName": "Other", "pieces": []})
    assert duplicate.status_code == 409


def test_estimated_date_defaults_to_three_days(catalog):
    order = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "createdAt": "2024-03-01T10:00:00",
        "pieces": [],
    }).json()
    assert order["createdAt"].startswith("2024-03-01T10:00:00")
    assert order["estimatedDate"].startswith("2024-03-04T10:00:00")
    assert order["status"] == "received"
    assert order["paymentStatus"] == "pending"


def test_unknown_piece_without_price_is_rejected(catalog):
    response = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "pieces": [{"pieceId": "NOPE", "serviceType": "pressing", "quantity": 1}],
    })
    assert response.status_code == 404
    assert catalog.get("/api/orders").json() == []


def test_failed_order_does_not_touch_client_stats(catalog, registered_client):
    response = catalog.post("/api/orders", json={
        "clientId": registered_client["id"],
        "clientName": "Marie Dubois",
        "pieces": [
            {"pieceId": "P1", "serviceType": "pressing", "quantity": 1},
            {"pieceId": "NOPE", "serviceType": "pressing", "quantity": 1},
        ],
    })
    assert response.status_code == 404

    stored = catalog.get("/api/clients").json()[0]
    assert stored["totalOrders"] == 0
    assert stored["totalSpent"] == 0


def test_unknown_registered_client_is_rejected(catalog):
    response = catalog.post("/api/orders", json={"clientId": "CLI42", "clientName": "Ghost", "pieces": []})
    assert response.status_code == 404
    assert response.json() == {"error": "Client CLI42 not found"}


def test_quantity_must_be_positive(catalog):
    response = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 0}],
    })
    assert response.status_code == 422


# ========================================
# ESTADÍSTICAS DEL CLIENTE
# ========================================

def test_two_orders_increment_client_stats(catalog, registered_client):
    client_id = registered_client["id"]
    amounts = []
    for quantity in (2, 3):
        order = catalog.post("/api/orders", json={
            "clientId": client_id,
            "clientName": "Marie Dubois",
            "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": quantity}],
        }).json()
        amounts.append(order["totalAmount"])

    stored = next(c for c in catalog.get("/api/clients").json() if c["id"] == client_id)
    assert stored["totalOrders"] == 2
    assert stored["totalSpent"] == pytest.approx(sum(amounts))


def test_guest_order_creates_temporary_client(catalog):
    response = catalog.post("/api/orders", json={
        "clientId": "GUEST123",
        "clientName": "Jane Doe",
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 2}],
    })
    assert response.status_code == 201
    assert response.json()["clientId"] == "GUEST123"

    guest = next(c for c in catalog.get("/api/clients").json() if c["id"] == "GUEST123")
    assert guest["firstName"] == "Jane"
    assert guest["lastName"] == "Doe"
    assert guest["isTemporary"] is True
    assert guest["totalOrders"] == 0
    assert guest["totalSpent"] == 0


def test_guest_with_single_name_gets_default_last_name(catalog):
    catalog.post("/api/orders", json={"clientId": "GUEST9", "clientName": "Madonna", "pieces": []})
    guest = next(c for c in catalog.get("/api/clients").json() if c["id"] == "GUEST9")
    assert (guest["firstName"], guest["lastName"]) == ("Madonna", "Invité")
    assert guest["phone"] == "Non renseigné"


def test_order_without_client_id_is_a_guest_order(catalog, registered_client):
    order = catalog.post("/api/orders", json={
        "clientId": "",
        "clientName": "Passant",
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 1}],
    }).json()
    assert order["clientId"] is None
    assert order["clientName"] == "Passant"

    clients = catalog.get("/api/clients").json()
    assert [c["id"] for c in clients] == [registered_client["id"]]
    assert clients[0]["totalOrders"] == 0


def test_repeated_guest_id_reuses_temporary_client(catalog):
    for _ in range(2):
        response = catalog.post("/api/orders", json={"clientId": "GUEST7", "clientName": "Jane Doe", "pieces": []})
        assert response.status_code == 201
    guests = [c for c in catalog.get("/api/clients").json() if c["id"] == "GUEST7"]
    assert len(guests) == 1
    assert guests[0]["totalOrders"] == 0


# ========================================
# LISTADO, ACTUALIZACIÓN Y BORRADO
# ========================================

def test_list_orders_includes_line_items(catalog):
    catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "pieces": [
            {"pieceId": "P2", "serviceType": "pressing", "quantity": 1},
            {"pieceId": "P1", "serviceType": "pressing", "quantity": 1},
        ],
    })
    orders = catalog.get("/api/orders").json()
    assert len(orders) == 1
    assert [line["pieceId"] for line in orders[0]["pieces"]] == ["P2", "P1"]


def test_update_order_status_recomputes_total(catalog):
    order = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 2}],
    }).json()

    response = catalog.put(f"/api/orders/{order['id']}", json={
        "clientName": "Jane Doe",
        "totalAmount": 1.0,
        "status": "ready",
        "paymentStatus": "paid",
    })
    assert response.status_code == 200
    assert response.json() == {"success": True}

    stored = catalog.get("/api/orders").json()[0]
    assert stored["status"] == "ready"
    assert stored["paymentStatus"] == "paid"
    assert stored["totalAmount"] == 7.0
    assert stored["estimatedDate"] == order["estimatedDate"]


def test_update_with_exceptional_price_keeps_submitted_total(catalog, registered_client):
    order = catalog.post("/api/orders", json={
        "clientId": registered_client["id"],
        "clientName": "Marie Dubois",
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 2}],
    }).json()

    catalog.put(f"/api/orders/{order['id']}", json={
        "clientId": registered_client["id"],
        "clientName": "Marie Dubois",
        "totalAmount": 5.0,
        "isExceptionalPrice": True,
    })

    client = catalog.get("/api/clients").json()[0]
    assert catalog.get("/api/orders").json()[0]["totalAmount"] == 5.0
    assert client["totalSpent"] == 5.0
    assert client["totalOrders"] == 1


def test_update_missing_order_returns_404(catalog):
    response = catalog.put("/api/orders/PR999", json={"clientName": "Nobody"})
    assert response.status_code == 404


def test_update_to_unknown_client_returns_404(catalog):
    order = catalog.post("/api/orders", json={"clientId": "GUEST1", "clientName": "Jane Doe", "pieces": []}).json()

    response = catalog.put(f"/api/orders/{order['id']}", json={"clientId": "CLI999", "clientName": "Jane Doe"})
    assert response.status_code == 404
    assert response.json() == {"error": "Client CLI999 not found"}
    assert catalog.get("/api/orders").json()[0]["clientId"] == "GUEST1"


def test_update_to_guest_id_creates_temporary_client(catalog):
    order = catalog.post("/api/orders", json={"clientName": "Jane Doe", "pieces": []}).json()

    response = catalog.put(f"/api/orders/{order['id']}", json={"clientId": "GUEST5", "clientName": "Jane Doe"})
    assert response.status_code == 200

    assert catalog.get("/api/orders").json()[0]["clientId"] == "GUEST5"
    guest = next(c for c in catalog.get("/api/clients").json() if c["id"] == "GUEST5")
    assert guest["isTemporary"] is True
    assert guest["totalOrders"] == 0


def test_update_exceptional_price_without_total_is_rejected(catalog, registered_client):
    order = catalog.post("/api/orders", json={
        "clientId": registered_client["id"],
        "clientName": "Marie Dubois",
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 2}],
    }).json()

    response = catalog.put(f"/api/orders/{order['id']}", json={
        "clientId": registered_client["id"],
        "clientName": "Marie Dubois",
        "isExceptionalPrice": True,
    })
    assert response.status_code == 422

    assert catalog.get("/api/orders").json()[0]["totalAmount"] == 7.0
    assert catalog.get("/api/clients").json()[0]["totalSpent"] == 7.0


def test_update_without_total_keeps_stored_amount(catalog):
    order = catalog.post("/api/orders", json={
        "clientName": "Jane Doe",
        "totalAmount": 12.0,
        "isExceptionalPrice": True,
        "pieces": [],
    }).json()

    catalog.put(f"/api/orders/{order['id']}", json={"clientName": "Jane Doe", "status": "ready"})

    stored = catalog.get("/api/orders").json()[0]
    assert stored["status"] == "ready"
    assert stored["totalAmount"] == 12.0


def test_delete_order_removes_lines_and_refreshes_stats(catalog, registered_client):
    order = catalog.post("/api/orders", json={
        "clientId": registered_client["id"],
        "clientName": "Marie Dubois",
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 2}],
    }).json()

    response = catalog.delete(f"/api/orders/{order['id']}")
    assert response.json() == {"success": True}
    assert catalog.get("/api/orders").json() == []

    client = catalog.get("/api/clients").json()[0]
    assert client["totalOrders"] == 0
    assert client["totalSpent"] == 0

    assert catalog.delete(f"/api/orders/{order['id']}").status_code == 404
