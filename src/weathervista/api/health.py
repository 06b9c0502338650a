"""Liveness and readiness probes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model.

    Example:
        >>> HealthResponse(status="ok").status
        'ok'
    """

    status: str


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Check if the application process is running",
)
async def health_check() -> HealthResponse:
    """Always 200 while the process is up."""
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness probe",
    description="Check if the proxy has the credentials it needs to serve requests",
    responses={503: {"model": HealthResponse, "description": "Weather API key missing"}},
)
async def readiness_check():
    """Report ready only when the provider key is configured.

    The provider itself is not probed.
    """
    if not settings.weather_api_configured:
        return JSONResponse(status_code=503, content={"status": "unconfigured"})
    return HealthResponse(status="ok")
