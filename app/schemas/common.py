"""Common Pydantic schemas used across the API.

Every route answers with one of two envelope shapes::

    {"data": ..., "pagination": {...}}       # SuccessEnvelope
    {"error": {"type": ..., "message": ...}}  # ErrorEnvelope

They are separate models rather than one model with nullable fields, so a
response can never carry both a payload and an error.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class CamelSchema(BaseModel):
    """Base for payloads exchanged with the commerce API.

    Field names are snake_case in Python and camelCase on the wire. Unknown
    upstream fields are kept so they survive the round trip untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class Pagination(CamelSchema):
    """Upstream pagination cursors, forwarded verbatim."""

    next_page: str | None = None
    prev_page: str | None = None
    total_results: int | None = None


class ErrorDetail(BaseSchema):
    """Machine-readable error kind plus a human message."""

    type: str
    message: str
    details: Any | None = None


class SuccessEnvelope[T](BaseSchema):
    """Successful response wrapper."""

    data: T
    pagination: Pagination | None = None


class ErrorEnvelope(BaseSchema):
    """Error response wrapper."""

    error: ErrorDetail


type Envelope[T] = SuccessEnvelope[T] | ErrorEnvelope


def render_envelope(envelope: Envelope[Any]) -> dict[str, Any]:
    """Serialize an envelope the way it goes out on the wire."""
    return envelope.model_dump(mode="json", by_alias=True, exclude_none=True)
