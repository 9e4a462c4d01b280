"""FastAPI dependency injection — wires infrastructure to application layer.

The composition root (``create_app``) owns the Entity Store and its
collaborators and keeps them on ``app.state``; providers here only read
them back, so every request sees the same single store instance.
"""

from fastapi import Depends, Request

from app.application.interfaces import BlobStorage, EntityStore
from app.application.services import (
    ClientService,
    DashboardService,
    ProjectFileService,
    ProjectService,
    SellerService,
    SSEManager,
    UploadProgressAnimator,
)
from app.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_entity_store(request: Request) -> EntityStore:
    return request.app.state.entity_store


def get_blob_storage(request: Request) -> BlobStorage:
    return request.app.state.blob_storage


def get_sse_manager(request: Request) -> SSEManager:
    return request.app.state.sse_manager


def get_upload_progress(request: Request) -> UploadProgressAnimator:
    return request.app.state.upload_progress


def get_client_service(store: EntityStore = Depends(get_entity_store)) -> ClientService:
    """Provides a ClientService bound to the application's store."""
    return ClientService(store)


def get_seller_service(store: EntityStore = Depends(get_entity_store)) -> SellerService:
    return SellerService(store)


def get_project_service(
    store: EntityStore = Depends(get_entity_store),
    blobs: BlobStorage = Depends(get_blob_storage),
) -> ProjectService:
    return ProjectService(store, blobs)


def get_project_file_service(
    store: EntityStore = Depends(get_entity_store),
    blobs: BlobStorage = Depends(get_blob_storage),
    progress: UploadProgressAnimator = Depends(get_upload_progress),
    settings: Settings = Depends(get_app_settings),
) -> ProjectFileService:
    """Provides a ProjectFileService with blob storage and progress feedback wired up."""
    return ProjectFileService(
        store,
        blobs,
        uploader_name=settings.default_uploader_name,
        max_upload_bytes=settings.max_upload_bytes,
        progress=progress,
    )


def get_dashboard_service(store: EntityStore = Depends(get_entity_store)) -> DashboardService:
    return DashboardService(store)
