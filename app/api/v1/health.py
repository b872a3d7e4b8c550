"""Health check endpoints."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.deps import AppSettings, Squarespace
from app.services.health_service import HealthService

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(settings: AppSettings, client: Squarespace) -> JSONResponse:
    """
    Health check endpoint.

    Probes Squarespace connectivity and inspects the credential configuration.
    Answers 503 only when the service cannot authenticate at all; a degraded
    report still answers 200.
    """
    report, status_code = await HealthService(settings, client).check()
    return JSONResponse(
        status_code=status_code,
        content=report.model_dump(mode="json", exclude_none=True),
    )


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """
    Liveness probe for Kubernetes/container orchestration.

    Simple check that the service is running.
    """
    return {"status": "alive"}
