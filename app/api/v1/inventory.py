"""Stock level endpoints."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.api.v1.params import require_id
from app.api.v1.responses import envelope_response
from app.core.deps import Squarespace
from app.core.errors import APIError, ErrorType
from app.integrations.squarespace.exceptions import SquarespaceError, SquarespaceNotFoundError
from app.schemas.squarespace import InventoryUpdate, InventoryUpdateResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{product_id}")
async def get_inventory(product_id: str, client: Squarespace) -> JSONResponse:
    """Read the stock record of a product."""
    product_id = require_id(product_id, "Product")

    try:
        stock = await client.get_inventory(product_id)
    except SquarespaceNotFoundError as e:
        raise APIError(
            status.HTTP_404_NOT_FOUND, ErrorType.NOT_FOUND, f"Inventory not found: {e.message}"
        ) from e
    except SquarespaceError as e:
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorType.API_ERROR,
            f"Failed to fetch inventory: {e.message}",
        ) from e

    return envelope_response(stock)


@router.patch("/{product_id}")
async def update_inventory(
    product_id: str,
    update: InventoryUpdate,
    client: Squarespace,
) -> JSONResponse:
    """Set the stock quantity of a product. Sent once, never retried."""
    product_id = require_id(product_id, "Product")

    try:
        await client.update_inventory(product_id, update.quantity)
    except SquarespaceError as e:
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorType.API_ERROR,
            f"Failed to update inventory: {e.message}",
        ) from e

    logger.info("Inventory for %s set to %d", product_id, update.quantity)
    return envelope_response(InventoryUpdateResult(product_id=product_id, quantity=update.quantity))
