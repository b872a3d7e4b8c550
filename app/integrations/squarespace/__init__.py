"""Squarespace Commerce API integration."""

from app.integrations.squarespace.client import SquarespaceClient
from app.integrations.squarespace.exceptions import (
    SquarespaceAPIError,
    SquarespaceDecodeError,
    SquarespaceError,
    SquarespaceNotFoundError,
    SquarespaceTransportError,
)
from app.integrations.squarespace.options import OrderListOptions, ProductListOptions

__all__ = [
    "OrderListOptions",
    "ProductListOptions",
    "SquarespaceAPIError",
    "SquarespaceClient",
    "SquarespaceDecodeError",
    "SquarespaceError",
    "SquarespaceNotFoundError",
    "SquarespaceTransportError",
]
