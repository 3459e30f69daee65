"""Health check routes."""

from fastapi import APIRouter
from pydantic import BaseModel

from iso8583_mock import __version__
from iso8583_mock.core.dependencies import TransactionStoreDep

router = APIRouter(prefix="/health", tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str
    stored_transactions: int


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is running.",
)
async def health_check() -> HealthResponse:
    """Return service health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
    )


@router.get(
    "/ready",
    response_model=ReadyResponse,
    summary="Readiness check",
    description="Check if the service is ready to receive traffic.",
)
async def readiness_check(store: TransactionStoreDep) -> ReadyResponse:
    """Return readiness status and the number of authorizations held."""
    return ReadyResponse(
        status="ready",
        stored_transactions=len(store),
    )


@router.get(
    "/live",
    summary="Liveness check",
    description="Kubernetes liveness probe endpoint.",
)
async def liveness_check() -> dict:
    """Return liveness status."""
    return {"status": "alive"}
