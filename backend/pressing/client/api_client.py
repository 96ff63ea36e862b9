# backend/pressing/client/api_client.py
"""
Cliente HTTP asíncrono para la API del pressing.

Expone las operaciones de lectura/creación/modificación/borrado de cada
recurso para programas Python (scripts, integraciones, tests de extremo a
extremo), del mismo modo que el frontend las usa desde el navegador.

Los datos viajan como diccionarios con las claves camelCase de la API.
Las respuestas de error se convierten en PressingApiError con el mensaje
devuelto por el servidor.

Ejemplo:
    async with PressingApiClient("http://localhost:3001/api") as api:
        client = await api.create_client({"firstName": "Jane", "lastName": "Doe"})
        order = await api.create_order({
            "clientId": client["id"],
            "clientName": "Jane Doe",
            "pieces": [{"pieceId": "P001", "serviceType": "pressing", "quantity": 2}],
        })
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

JSON = Dict[str, Any]


class PressingApiError(Exception):
    """Respuesta de error de la API (4xx/5xx)."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class PressingApiClient:
    """
    Envoltorio de httpx.AsyncClient con un método por operación de la API.

    Si se pasa un `http_client` ya construido (por ejemplo con un
    ASGITransport en los tests) se usa tal cual y no se cierra al salir.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3001/api",
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "PressingApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._client.request(method, path, **kwargs)
        if response.is_error:
            try:
                message = response.json().get("error", response.text)
            except ValueError:
                message = response.text
            logger.error(f"❌ API: {method} {path} -> {response.status_code}: {message}")
            raise PressingApiError(response.status_code, message)
        return response.json()

    # ========================================
    # CLIENTES
    # ========================================

    async def list_clients(self) -> List[JSON]:
        return await self._request("GET", "/clients")

    async def create_client(self, client: JSON) -> JSON:
        return await self._request("POST", "/clients", json=client)

    async def update_client(self, client_id: str, client: JSON) -> JSON:
        return await self._request("PUT", f"/clients/{client_id}", json=client)

    async def delete_client(self, client_id: str) -> JSON:
        return await self._request("DELETE", f"/clients/{client_id}")

    async def list_client_orders(self, client_id: str) -> List[JSON]:
        return await self._request("GET", f"/clients/{client_id}/orders")

    # ========================================
    # PIEZAS
    # ========================================

    async def list_pieces(self, professional: Optional[bool] = None) -> List[JSON]:
        params = {}
        if professional is not None:
            params["professional"] = "true" if professional else "false"
        return await self._request("GET", "/pieces", params=params)

    async def create_piece(self, piece: JSON) -> JSON:
        return await self._request("POST", "/pieces", json=piece)

    async def update_piece(self, piece_id: str, piece: JSON) -> JSON:
        return await self._request("PUT", f"/pieces/{piece_id}", json=piece)

    async def delete_piece(self, piece_id: str) -> JSON:
        return await self._request("DELETE", f"/pieces/{piece_id}")

    # ========================================
    # PEDIDOS
    # ========================================

    async def list_orders(self) -> List[JSON]:
        return await self._request("GET", "/orders")

    async def create_order(self, order: JSON) -> JSON:
        return await self._request("POST", "/orders", json=order)

    async def update_order(self, order_id: str, order: JSON) -> JSON:
        return await self._request("PUT", f"/orders/{order_id}", json=order)

    async def delete_order(self, order_id: str) -> JSON:
        return await self._request("DELETE", f"/orders/{order_id}")

    # ========================================
    # PROFESIONALES
    # ========================================

    async def list_professional_clients(self) -> List[JSON]:
        return await self._request("GET", "/professional-clients")

    async def create_professional_client(self, client: JSON) -> JSON:
        return await self._request("POST", "/professional-clients", json=client)

    async def update_professional_client(self, client_id: str, client: JSON) -> JSON:
        return await self._request("PUT", f"/professional-clients/{client_id}", json=client)

    async def delete_professional_client(self, client_id: str) -> JSON:
        return await self._request("DELETE", f"/professional-clients/{client_id}")

    async def list_professional_orders(self) -> List[JSON]:
        return await self._request("GET", "/professional-orders")

    async def list_overdue_professional_orders(self) -> List[JSON]:
        return await self._request("GET", "/professional-orders/overdue")

    async def create_professional_order(self, order: JSON) -> JSON:
        return await self._request("POST", "/professional-orders", json=order)

    async def update_professional_order(self, order_id: str, order: JSON) -> JSON:
        return await self._request("PUT", f"/professional-orders/{order_id}", json=order)

    async def delete_professional_order(self, order_id: str) -> JSON:
        return await self._request("DELETE", f"/professional-orders/{order_id}")

    # ========================================
    # PANEL PRINCIPAL
    # ========================================

    async def get_dashboard_stats(self) -> JSON:
        return await self._request("GET", "/dashboard/stats")
