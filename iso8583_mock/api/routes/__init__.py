"""API routes package."""

from fastapi import APIRouter

from iso8583_mock.api.routes.authorization import router as authorization_router
from iso8583_mock.api.routes.health import router as health_router
from iso8583_mock.api.routes.reversal import router as reversal_router

# Create API router with all sub-routers
api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(authorization_router)
api_router.include_router(reversal_router)


__all__ = [
    "api_router",
    "authorization_router",
    "health_router",
    "reversal_router",
]
