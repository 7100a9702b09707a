"""Fixtures compartidos para los tests del binding de órdenes."""

import json
from typing import Any, Dict, Mapping, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from shopify_orders.core.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Cada test arranca con la configuración por defecto."""
    for name in ("SHOPIFY_SHOP_URL", "SHOPIFY_ACCESS_TOKEN", "SHOPIFY_DEFAULT_PAGE_LIMIT", "ENVIRONMENT", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def order_payload():
    """Orden REST de Shopify con las formas variables de line_items y shipping_lines."""
    return {
        "id": 450789469,
        "name": "#1001",
        "email": "bob.norman@example.com",
        "financial_status": "paid",
        "fulfillment_status": None,
        "currency": "USD",
        "total_price": "598.94",
        "created_at": "2024-03-13T16:09:54-04:00",
        "line_items": [
            {
                "id": 466157049,
                "title": "IPod Nano - 8gb",
                "quantity": 1,
                "price": "199.00",
                "properties": [{"name": "Custom Engraving", "value": "Happy Birthday"}],
            },
            {
                "id": 518995019,
                "title": "IPod Nano - 8gb",
                "quantity": 1,
                "price": "199.00",
                "properties": {},
            },
        ],
        "shipping_lines": [
            {
                "id": 369256396,
                "title": "Free Shipping",
                "price": "0.00",
                "requested_fulfillment_service_id": None,
            }
        ],
    }


def make_response(
    status: int = 200,
    body: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> MagicMock:
    """Crea una respuesta aiohttp simulada usable con `async with`."""
    raw = body if isinstance(body, bytes) else json.dumps(body if body is not None else {}).encode()

    response = MagicMock()
    response.status = status
    response.headers = dict(headers or {})
    response.read = AsyncMock(return_value=raw)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


@pytest.fixture
def mock_session():
    """Sesión aiohttp simulada; configurar `request.return_value` o `side_effect`."""
    session = MagicMock()
    session.request = MagicMock(return_value=make_response())
    session.close = AsyncMock()
    return session


def link_header(next_info: Optional[str] = None, previous_info: Optional[str] = None, limit: int = 50) -> Dict[str, str]:
    """Arma un header Link como los que devuelve Shopify."""
    base = "https://test-shop.myshopify.com/admin/api/2024-01/orders.json"
    parts = []
    if previous_info:
        parts.append(f'<{base}?limit={limit}&page_info={previous_info}>; rel="previous"')
    if next_info:
        parts.append(f'<{base}?limit={limit}&page_info={next_info}>; rel="next"')
    return {"Link": ", ".join(parts)} if parts else {}
