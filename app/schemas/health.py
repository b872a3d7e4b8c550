"""Health report schemas."""

from datetime import datetime

from app.schemas.common import BaseSchema


class CheckResult(BaseSchema):
    """Outcome of one health check."""

    status: str
    message: str | None = None
    latency_ms: float | None = None


class HealthResponse(BaseSchema):
    """Health check response schema."""

    status: str
    timestamp: datetime
    version: str
    environment: str
    checks: dict[str, CheckResult]
