"""Order endpoints proxied to Squarespace Commerce."""

import logging
from typing import Any

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.api.v1.params import DEFAULT_PAGE_SIZE, parse_int, require_id
from app.api.v1.responses import envelope_response
from app.core.deps import Squarespace
from app.core.errors import APIError, ErrorType
from app.integrations.squarespace.exceptions import SquarespaceError, SquarespaceNotFoundError
from app.integrations.squarespace.options import OrderListOptions
from app.schemas.squarespace import Order

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_orders(
    client: Squarespace,
    limit: str | None = Query(None),
    offset: str | None = Query(None),
    order_status: str | None = Query(None, alias="status"),
    customer_id: str | None = Query(None, alias="customerId"),
) -> JSONResponse:
    """List one page of orders, optionally filtered by status or customer."""
    parsed_limit = parse_int(limit, "limit")
    parsed_offset = parse_int(offset, "offset")

    options = OrderListOptions(
        limit=DEFAULT_PAGE_SIZE if parsed_limit is None else parsed_limit,
        offset=parsed_offset,
        status=order_status or None,
        customer_id=customer_id or None,
    )

    try:
        orders, pagination = await client.list_orders(options)
    except SquarespaceError as e:
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorType.API_ERROR,
            f"Failed to fetch orders: {e.message}",
        ) from e

    return envelope_response(orders, pagination=pagination)


@router.get("/{order_id}")
async def get_order(order_id: str, client: Squarespace) -> JSONResponse:
    """Fetch a single order."""
    order_id = require_id(order_id, "Order")

    try:
        order = await client.get_order(order_id)
    except SquarespaceNotFoundError as e:
        raise APIError(
            status.HTTP_404_NOT_FOUND, ErrorType.NOT_FOUND, f"Order not found: {e.message}"
        ) from e
    except SquarespaceError as e:
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorType.API_ERROR,
            f"Failed to fetch order: {e.message}",
        ) from e

    return envelope_response(order)


async def _read_order(request: Request) -> Order:
    """Decode the request body into an Order, or answer 400 invalid_request."""
    try:
        payload: Any = await request.json()
    except ValueError:
        raise APIError(
            status.HTTP_400_BAD_REQUEST,
            ErrorType.INVALID_REQUEST,
            "Invalid order data: request body must be JSON",
        ) from None

    if not isinstance(payload, dict):
        raise APIError(
            status.HTTP_400_BAD_REQUEST,
            ErrorType.INVALID_REQUEST,
            "Invalid order data: expected a JSON object",
        )

    try:
        return Order.model_validate(payload)
    except ValidationError as e:
        raise APIError(
            status.HTTP_400_BAD_REQUEST,
            ErrorType.INVALID_REQUEST,
            f"Invalid order data: {e.error_count()} invalid field(s)",
            details=[
                {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ],
        ) from None


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_order(request: Request, client: Squarespace) -> JSONResponse:
    """Create an order upstream.

    Only the email and the presence of line items are checked here; every
    other field is handed to Squarespace as submitted. The upstream call is
    made once and never retried.
    """
    order = await _read_order(request)

    if not order.email:
        raise APIError.validation("Email is required")
    if not order.line_items:
        raise APIError.validation("At least one line item is required")

    try:
        created = await client.create_order(order)
    except SquarespaceError as e:
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorType.CREATION_ERROR,
            f"Failed to create order: {e.message}",
        ) from e

    logger.info("Created order %s (%s)", created.id, created.order_number)
    return envelope_response(created, status_code=status.HTTP_201_CREATED)
