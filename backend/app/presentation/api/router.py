"""API root router. Every versioned router is served below ``/api``."""

from fastapi import APIRouter

from app.presentation.api.v1.router import router as api_v1_router

API_PREFIX = "/api"

router = APIRouter(prefix=API_PREFIX)
router.include_router(api_v1_router)
