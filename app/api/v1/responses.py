"""Success envelope responses."""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from app.schemas.common import Pagination, SuccessEnvelope, render_envelope


def envelope_response(
    data: Any,
    *,
    pagination: Pagination | None = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Wrap a payload in the success envelope."""
    envelope = SuccessEnvelope[Any](data=data, pagination=pagination)
    return JSONResponse(status_code=status_code, content=render_envelope(envelope))
