"""Customer profile lookup."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.api.v1.params import require_id
from app.api.v1.responses import envelope_response
from app.core.deps import Squarespace
from app.core.errors import APIError, ErrorType
from app.integrations.squarespace.exceptions import SquarespaceError, SquarespaceNotFoundError

router = APIRouter()


@router.get("/{customer_id}")
async def get_customer_profile(customer_id: str, client: Squarespace) -> JSONResponse:
    customer_id = require_id(customer_id, "Customer")

    try:
        profile = await client.get_customer_profile(customer_id)
    except SquarespaceNotFoundError as e:
        raise APIError(
            status.HTTP_404_NOT_FOUND, ErrorType.NOT_FOUND, f"Profile not found: {e.message}"
        ) from e
    except SquarespaceError as e:
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorType.API_ERROR,
            f"Failed to fetch profile: {e.message}",
        ) from e

    return envelope_response(profile)
