# backend/tests/test_clients.py
"""Tests de los endpoints de clientes particulares."""


def test_create_client_assigns_id_and_zero_stats(client, client_payload):
    response = client.post("/api/clients", json=client_payload)
    assert response.status_code == 201
    created = response.json()

    assert created["id"] == "CLI1"
    assert created["firstName"] == "Marie"
    assert created["totalOrders"] == 0
    assert created["totalSpent"] == 0
    assert created["isTemporary"] is False
    assert created["type"] == "individual"
    assert "createdAt" in created


def test_create_client_ignores_submitted_stats(client, client_payload):
    created = client.post("/api/clients", json={**client_payload, "totalOrders": 12, "totalSpent": 99.0}).json()
    assert created["totalOrders"] == 0
    assert created["totalSpent"] == 0


def test_list_clients_newest_first(client, client_payload):
    client.post("/api/clients", json=client_payload)
    client.post("/api/clients", json={**client_payload, "firstName": "Pierre", "lastName": "Martin"})

    clients = client.get("/api/clients").json()
    assert [c["id"] for c in clients] == ["CLI2", "CLI1"]


def test_first_name_is_required(client, client_payload):
    response = client.post("/api/clients", json={**client_payload, "firstName": ""})
    assert response.status_code == 422
    body = response.json()
    assert body["error"]
    assert body["details"]


def test_update_client(client, client_payload):
    client.post("/api/clients", json=client_payload)

    response = client.put("/api/clients/CLI1", json={**client_payload, "phone": "07 00 00 00 00"})
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/clients").json()[0]["phone"] == "07 00 00 00 00"


def test_update_missing_client_returns_404(client, client_payload):
    response = client.put("/api/clients/CLI404", json=client_payload)
    assert response.status_code == 404
    assert "CLI404" in response.json()["error"]


def test_delete_client_keeps_orders_without_client(client, client_payload):
    client.post("/api/clients", json=client_payload)
    client.post("/api/orders", json={"clientId": "CLI1", "clientName": "Marie Dubois", "pieces": []})

    assert client.delete("/api/clients/CLI1").json() == {"success": True}
    assert client.get("/api/clients").json() == []

    orders = client.get("/api/orders").json()
    assert len(orders) == 1
    assert orders[0]["clientId"] is None
    assert orders[0]["clientName"] == "Marie Dubois"


def test_delete_missing_client_returns_404(client):
    assert client.delete("/api/clients/CLI404").status_code == 404


def test_client_order_history(client, client_payload, piece_payload):
    client.post("/api/pieces", json=piece_payload)
    client.post("/api/clients", json=client_payload)
    client.post("/api/clients", json={**client_payload, "firstName": "Pierre"})
    client.post("/api/orders", json={
        "clientId": "CLI1",
        "clientName": "Marie Dubois",
        "pieces": [{"pieceId": "P1", "serviceType": "pressing", "quantity": 1}],
    })
    client.post("/api/orders", json={"clientId": "CLI2", "clientName": "Pierre Dubois", "pieces": []})

    history = client.get("/api/clients/CLI1/orders").json()
    assert [order["clientId"] for order in history] == ["CLI1"]
    assert history[0]["pieces"][0]["pieceName"] == "Chemise"

    assert client.get("/api/clients/CLI404/orders").status_code == 404
