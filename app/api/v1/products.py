"""Product endpoints proxied to the Squarespace catalog."""

import logging

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from app.api.v1.params import DEFAULT_PAGE_SIZE, parse_int, require_id
from app.api.v1.responses import envelope_response
from app.core.deps import Squarespace
from app.core.errors import APIError, ErrorType
from app.integrations.squarespace.exceptions import SquarespaceError, SquarespaceNotFoundError
from app.integrations.squarespace.options import ProductListOptions

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_products(
    client: Squarespace,
    limit: str | None = Query(None),
    offset: str | None = Query(None),
    category: str | None = Query(None),
    tag: str | None = Query(None),
) -> JSONResponse:
    """List one page of products, optionally filtered by category or tag."""
    parsed_limit = parse_int(limit, "limit")
    parsed_offset = parse_int(offset, "offset")

    options = ProductListOptions(
        limit=DEFAULT_PAGE_SIZE if parsed_limit is None else parsed_limit,
        offset=parsed_offset,
        category=category or None,
        tag=tag or None,
    )

    try:
        products, pagination = await client.list_products(options)
    except SquarespaceError as e:
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorType.API_ERROR,
            f"Failed to fetch products: {e.message}",
        ) from e

    return envelope_response(products, pagination=pagination)


@router.get("/{product_id}")
async def get_product(product_id: str, client: Squarespace) -> JSONResponse:
    """Fetch a single product."""
    product_id = require_id(product_id, "Product")

    try:
        product = await client.get_product(product_id)
    except SquarespaceNotFoundError as e:
        raise APIError(
            status.HTTP_404_NOT_FOUND, ErrorType.NOT_FOUND, f"Product not found: {e.message}"
        ) from e
    except SquarespaceError as e:
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorType.API_ERROR,
            f"Failed to fetch product: {e.message}",
        ) from e

    return envelope_response(product)


@router.get("/{product_id}/variants")
async def get_product_variants(product_id: str, client: Squarespace) -> JSONResponse:
    """List the variants of a product."""
    product_id = require_id(product_id, "Product")

    try:
        variants = await client.get_product_variants(product_id)
    except SquarespaceNotFoundError as e:
        raise APIError(
            status.HTTP_404_NOT_FOUND,
            ErrorType.NOT_FOUND,
            f"Product variants not found: {e.message}",
        ) from e
    except SquarespaceError as e:
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorType.API_ERROR,
            f"Failed to fetch product variants: {e.message}",
        ) from e

    logger.debug("Product %s has %d variants", product_id, len(variants))
    return envelope_response(variants)
