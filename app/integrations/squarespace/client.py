"""Squarespace Commerce API client using httpx."""

import logging
import time
from typing import Any, Self

import httpx
from pydantic import ValidationError

from app.core.config import Settings
from app.integrations.squarespace.exceptions import (
    SquarespaceAPIError,
    SquarespaceDecodeError,
    SquarespaceNotFoundError,
    SquarespaceTransportError,
)
from app.integrations.squarespace.options import OrderListOptions, ProductListOptions
from app.schemas.common import CamelSchema, Pagination
from app.schemas.squarespace import (
    Address,
    Order,
    OrderListResponse,
    Product,
    ProductListResponse,
    ProductStock,
    ProductVariant,
    UpstreamErrorBody,
)

logger = logging.getLogger(__name__)

API_ROOT = "/1.0/commerce"
DEFAULT_TIMEOUT = 30.0


class SquarespaceClient:
    """Async client for the Squarespace Commerce REST API.

    Holds only immutable configuration, so one instance can serve any number
    of concurrent requests. Every operation sends exactly one HTTP request and
    never retries; failures surface as ``SquarespaceError`` subclasses.
    """

    def __init__(
        self,
        base_url: str,
        *,
        site_id: str = "",
        api_key: str = "",
        access_token: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = "storefront-commerce-api/1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.site_id = site_id
        self.timeout = timeout
        self.transport = transport
        self.headers = {
            "Content-Type": "application/json",
            "User-Agent": user_agent,
        }
        # Access token wins over API key; with neither we still send the call
        # and let upstream reject it.
        credential = access_token or api_key
        if credential:
            self.headers["Authorization"] = f"Bearer {credential}"

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        return cls(
            settings.squarespace_base_url,
            site_id=settings.squarespace_site_id,
            api_key=settings.squarespace_api_key,
            access_token=settings.squarespace_access_token,
            user_agent=f"{settings.project_name.lower().replace(' ', '-')}/{settings.version}",
        )

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def list_products(
        self, options: ProductListOptions | None = None
    ) -> tuple[list[Product], Pagination | None]:
        """Fetch one page of products, optionally filtered by category or tag."""
        options = options or ProductListOptions()
        payload = await self._request(
            "GET",
            self._path("products", site_id=options.site_id),
            params=options.to_params(),
        )
        page = self._parse(ProductListResponse, payload)
        return page.result, page.pagination

    async def get_product(self, product_id: str) -> Product:
        payload = await self._request("GET", self._path(f"products/{product_id}"))
        return self._parse(Product, payload)

    async def get_product_variants(self, product_id: str) -> list[ProductVariant]:
        """Return the variants nested in the product; there is no separate endpoint."""
        product = await self.get_product(product_id)
        return product.products

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    async def list_orders(
        self, options: OrderListOptions | None = None
    ) -> tuple[list[Order], Pagination | None]:
        """Fetch one page of orders, optionally filtered by status or customer."""
        options = options or OrderListOptions()
        payload = await self._request(
            "GET",
            self._path("orders", site_id=options.site_id),
            params=options.to_params(),
        )
        page = self._parse(OrderListResponse, payload)
        return page.result, page.pagination

    async def get_order(self, order_id: str) -> Order:
        payload = await self._request("GET", self._path(f"orders/{order_id}"))
        return self._parse(Order, payload)

    async def create_order(self, order: Order) -> Order:
        """Submit an order and return it as stored upstream (with id, number, totals).

        Only the fields the caller actually set are sent.
        """
        body = order.model_dump(mode="json", by_alias=True, exclude_unset=True)
        payload = await self._request("POST", self._path("orders"), json=body)
        return self._parse(Order, payload)

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    async def get_inventory(self, product_id: str) -> ProductStock:
        payload = await self._request("GET", self._path(f"inventory/{product_id}"))
        return self._parse(ProductStock, payload)

    async def update_inventory(self, product_id: str, quantity: int) -> None:
        await self._request(
            "PATCH",
            self._path(f"inventory/{product_id}"),
            json={"quantity": quantity},
            decode=False,
        )

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    async def get_customer_profile(self, customer_id: str) -> Address:
        payload = await self._request("GET", self._path(f"profiles/{customer_id}"))
        return self._parse(Address, payload)

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    async def health_check(self) -> None:
        """Probe connectivity with a one-item product read. Raises on failure."""
        await self._request("GET", self._path("products"), params={"limit": 1}, decode=False)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _path(self, resource: str, *, site_id: str | None = None) -> str:
        """Build the endpoint path, site-scoped when a site id is known."""
        site = site_id or self.site_id
        if site:
            return f"{API_ROOT}/sites/{site}/{resource}"
        return f"{API_ROOT}/{resource}"

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any | None = None,
        decode: bool = True,
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        started = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                headers=self.headers,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(
                    method,
                    f"{self.base_url}{path}",
                    params=params or None,
                    json=json,
                )
        except httpx.TimeoutException as exc:
            logger.warning("Squarespace %s %s timed out after %.1fs", method, path, self.timeout)
            raise SquarespaceTransportError(f"Request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.warning("Squarespace %s %s failed: %s", method, path, exc)
            raise SquarespaceTransportError(f"Request failed: {exc}") from exc

        logger.debug(
            "Squarespace %s %s -> %s (%.0fms)",
            method,
            path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )

        if response.status_code >= 400:
            raise self._error_from_response(response)

        if not decode:
            return None

        try:
            return response.json()
        except ValueError as exc:
            raise SquarespaceDecodeError(f"Failed to decode response: {exc}") from exc

    @staticmethod
    def _error_from_response(response: httpx.Response) -> SquarespaceAPIError:
        """Turn a >= 400 response into a typed error, using the body when it parses."""
        status_code = response.status_code
        error_cls = SquarespaceNotFoundError if status_code < 500 else SquarespaceAPIError

        try:
            body = UpstreamErrorBody.model_validate(response.json())
        except (ValueError, ValidationError):
            logger.warning("Squarespace request failed with status %d", status_code)
            return error_cls(status_code, f"API request failed with status {status_code}")

        logger.warning(
            "Squarespace request failed with status %d: %s - %s",
            status_code,
            body.type,
            body.message,
        )
        return error_cls(
            status_code,
            f"API error: {body.type} - {body.message}",
            error_type=body.type,
            details=body.details,
        )

    @staticmethod
    def _parse[M: CamelSchema](model: type[M], payload: Any) -> M:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise SquarespaceDecodeError(
                f"Failed to decode response: unexpected {model.__name__} payload"
            ) from exc

