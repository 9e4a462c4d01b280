"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.clients import router as clients_router
from app.presentation.api.v1.endpoints.sellers import router as sellers_router
from app.presentation.api.v1.endpoints.projects import router as projects_router
from app.presentation.api.v1.endpoints.project_files import router as project_files_router
from app.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from app.presentation.api.v1.endpoints.events import router as events_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(clients_router)
router.include_router(sellers_router)
router.include_router(projects_router)
router.include_router(project_files_router)
router.include_router(dashboard_router)
router.include_router(events_router)
