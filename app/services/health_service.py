"""Composite health status: upstream connectivity plus configuration completeness."""

import logging
import time
from datetime import UTC, datetime
from enum import StrEnum

from fastapi import status

from app.core.config import Settings
from app.integrations.squarespace.client import SquarespaceClient
from app.integrations.squarespace.exceptions import SquarespaceError
from app.schemas.health import CheckResult, HealthResponse

logger = logging.getLogger(__name__)


class HealthStatus(StrEnum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class CheckStatus(StrEnum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    WARNING = "warning"
    ERROR = "error"


class HealthService:
    """Evaluate service health from scratch on every call.

    Precedence:
      1. no credential configured               -> unhealthy (503)
      2. upstream probe failed or no site id    -> degraded  (200)
      3. otherwise                              -> healthy   (200)
    """

    def __init__(self, settings: Settings, client: SquarespaceClient) -> None:
        self.settings = settings
        self.client = client

    async def check(self) -> tuple[HealthResponse, int]:
        """Run all checks and return the report with its HTTP status code."""
        connectivity = await self._check_connectivity()
        configuration = self._check_configuration()

        if configuration.status == CheckStatus.ERROR:
            overall = HealthStatus.UNHEALTHY
        elif (
            connectivity.status == CheckStatus.UNHEALTHY
            or configuration.status == CheckStatus.WARNING
        ):
            overall = HealthStatus.DEGRADED
        else:
            overall = HealthStatus.HEALTHY

        report = HealthResponse(
            status=overall,
            timestamp=datetime.now(UTC),
            version=self.settings.version,
            environment=self.settings.environment,
            checks={
                "squarespace_api": connectivity,
                "configuration": configuration,
            },
        )
        # Degraded is advisory only and still answers 200.
        if overall == HealthStatus.UNHEALTHY:
            return report, status.HTTP_503_SERVICE_UNAVAILABLE
        return report, status.HTTP_200_OK

    async def _check_connectivity(self) -> CheckResult:
        started = time.perf_counter()
        try:
            await self.client.health_check()
        except SquarespaceError as e:
            logger.warning("Squarespace health probe failed: %s", e.message)
            return CheckResult(status=CheckStatus.UNHEALTHY, message=e.message)

        latency_ms = round((time.perf_counter() - started) * 1000, 2)
        return CheckResult(status=CheckStatus.HEALTHY, latency_ms=latency_ms)

    def _check_configuration(self) -> CheckResult:
        if not self.settings.squarespace_auth_configured:
            return CheckResult(
                status=CheckStatus.ERROR,
                message="No Squarespace authentication configured",
            )
        if not self.settings.squarespace_site_id:
            return CheckResult(
                status=CheckStatus.WARNING,
                message="SQUARESPACE_SITE_ID not configured",
            )
        return CheckResult(status=CheckStatus.HEALTHY)
