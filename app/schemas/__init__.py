"""Pydantic schemas for request/response validation."""

from app.schemas.common import ErrorEnvelope, Pagination, SuccessEnvelope
from app.schemas.health import HealthResponse

__all__ = [
    "ErrorEnvelope",
    "HealthResponse",
    "Pagination",
    "SuccessEnvelope",
]
