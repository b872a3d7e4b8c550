"""Pytest configuration and fixtures for the storefront API test suite.

Provides:
- Test settings (no .env file, fixed credentials and site id)
- A mocked SquarespaceClient injected through dependency overrides
- A patched httpx.AsyncClient for SquarespaceClient unit tests
- Sample upstream payloads for products and orders
"""

from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings, get_settings
from app.core.deps import get_squarespace_client
from app.integrations.squarespace.client import SquarespaceClient
from app.main import app

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
SQUARESPACE_TEST_BASE_URL = "https://api.squarespace.test"
SQUARESPACE_TEST_SITE = "site-123"
SQUARESPACE_TEST_TOKEN = "sq-access-token"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings that ignore the environment's .env file."""

    def _create(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "squarespace_base_url": SQUARESPACE_TEST_BASE_URL,
            "squarespace_site_id": SQUARESPACE_TEST_SITE,
            "squarespace_access_token": SQUARESPACE_TEST_TOKEN,
            "squarespace_api_key": "",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)  # type: ignore[call-arg]

    return _create


@pytest.fixture
def test_settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory()


# ---------------------------------------------------------------------------
# Mock upstream client (route tests)
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_squarespace() -> AsyncMock:
    """AsyncMock standing in for SquarespaceClient in route tests."""
    return AsyncMock(spec=SquarespaceClient)


@pytest_asyncio.fixture
async def client(
    test_settings: Settings,
    mock_squarespace: AsyncMock,
) -> AsyncGenerator[AsyncClient, None]:
    """Async test client with settings and upstream client overridden."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_squarespace_client] = lambda: mock_squarespace

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def plain_client() -> AsyncGenerator[AsyncClient, None]:
    """Minimal async test client with NO dependency overrides."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ---------------------------------------------------------------------------
# Patched httpx (client unit tests)
# ---------------------------------------------------------------------------


def make_response(
    status_code: int = 200,
    *,
    json: Any | None = None,
    text: str | None = None,
) -> httpx.Response:
    """Build a real httpx.Response bound to a dummy request."""
    request = httpx.Request("GET", SQUARESPACE_TEST_BASE_URL)
    if json is not None:
        return httpx.Response(status_code, json=json, request=request)
    return httpx.Response(status_code, text=text or "", request=request)


@pytest.fixture
def mock_squarespace_http() -> Generator[MagicMock, None, None]:
    """Mock httpx.AsyncClient for SquarespaceClient unit tests.

    ``request`` answers 200 with an empty product page unless a test sets its
    own return value or side effect.
    """
    with patch("app.integrations.squarespace.client.httpx.AsyncClient") as mock_class:
        mock_client = AsyncMock()
        mock_class.return_value.__aenter__.return_value = mock_client
        mock_client.request.return_value = make_response(json={"result": []})
        mock_client.constructor = mock_class
        yield mock_client


# ---------------------------------------------------------------------------
# Sample upstream payloads
# ---------------------------------------------------------------------------


def money(value: str, currency: str = "USD") -> dict[str, str]:
    return {"value": value, "currency": currency}


@pytest.fixture
def product_payload() -> dict[str, Any]:
    """A product as returned by the commerce API."""
    return {
        "id": "prod-1",
        "type": "PHYSICAL",
        "variantId": "var-1",
        "tags": ["print"],
        "categories": ["art"],
        "products": [
            {
                "id": "var-1",
                "sku": "SQ-001",
                "name": "Small print",
                "images": [
                    {
                        "assetId": "img-1",
                        "url": "https://images.test/1.jpg",
                        "mimeType": "image/jpeg",
                        "width": 800,
                        "height": 600,
                    }
                ],
                "pricing": {"basePrice": money("25.00"), "onSale": False},
                "stock": {
                    "trackInventory": True,
                    "quantity": 7,
                    "allowBackorder": False,
                    "unlimited": False,
                },
                "visibility": "VISIBLE",
            },
            {
                "id": "var-2",
                "sku": "SQ-002",
                "name": "Large print",
                "images": [],
                "pricing": {
                    "basePrice": money("60.00"),
                    "salePrice": money("45.00"),
                    "onSale": True,
                },
                "stock": {"trackInventory": False, "allowBackorder": False, "unlimited": True},
                "visibility": "VISIBLE",
            },
        ],
        "seoData": {"title": "Prints", "slug": "prints"},
        "systemData": {
            "createdOn": 1700000000000,
            "modifiedOn": 1700000100000,
            "publishedOn": 1700000200000,
        },
    }


@pytest.fixture
def order_request() -> dict[str, Any]:
    """An order as a caller would submit it for creation."""
    return {
        "email": "buyer@example.com",
        "customerId": "cust-9",
        "billingAddress": {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "addressLine1": "1 Analytical Way",
            "city": "London",
            "postalCode": "N1 9GU",
            "country": "GB",
        },
        "lineItems": [
            {
                "productId": "prod-1",
                "variantId": "var-1",
                "sku": "SQ-001",
                "productName": "Small print",
                "quantity": 2,
                "unitPrice": money("25.00"),
                "totalPrice": money("50.00"),
            }
        ],
        "giftMessage": "Happy birthday",
    }


@pytest.fixture
def order_payload(order_request: dict[str, Any]) -> dict[str, Any]:
    """The same order as stored upstream, with server-assigned fields."""
    return {
        **order_request,
        "id": "ord-1",
        "orderNumber": "1001",
        "status": "PENDING",
        "totals": {
            "subtotal": money("50.00"),
            "tax": money("4.00"),
            "shipping": money("5.00"),
            "discount": money("0.00"),
            "total": money("59.00"),
        },
        "fulfillments": [],
    }
