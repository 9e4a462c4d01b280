"""Health check endpoint."""

from fastapi import APIRouter, Depends

from app.application.interfaces import EntityStore
from app.config import Settings
from app.infrastructure.dependencies import get_app_settings, get_entity_store

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    settings: Settings = Depends(get_app_settings),
    store: EntityStore = Depends(get_entity_store),
) -> dict:
    """Returns the current application health status."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "store_version": store.version,
    }
