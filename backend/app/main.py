"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.application.interfaces import EntityStore
from app.application.services import SSEManager, UploadProgressAnimator
from app.config import Settings, get_settings
from app.infrastructure.logging.log_config import setup_logging
from app.infrastructure.memory import InMemoryEntityStore, load_seed_data
from app.infrastructure.storage.memory_blob_storage import InMemoryBlobStorage
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def build_entity_store(settings: Settings) -> InMemoryEntityStore:
    """Create the application's store, seeded with sample data unless disabled."""
    if not settings.seed_sample_data:
        logger.info("Sample data disabled, starting with an empty store")
        return InMemoryEntityStore()

    seed = load_seed_data(settings.seed_data_file)
    return InMemoryEntityStore(
        clients=seed.clients,
        sellers=seed.sellers,
        projects=seed.projects,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging, stop background feedback on shutdown."""
    setup_logging(app.state.settings)
    store = app.state.entity_store
    logger.info(
        "Entity store ready: %d clients, %d sellers, %d projects",
        len(store.clients), len(store.sellers), len(store.projects),
    )

    yield

    # Shutdown
    await app.state.upload_progress.shutdown()
    await app.state.sse_manager.shutdown()


def create_app(
    settings: Settings | None = None,
    store: EntityStore | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    This is the composition root: the store and its collaborators are created
    here and handed to request handlers through ``app.state``.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    sse_manager = SSEManager()
    app.state.settings = settings
    app.state.entity_store = store if store is not None else build_entity_store(settings)
    app.state.blob_storage = InMemoryBlobStorage()
    app.state.sse_manager = sse_manager
    app.state.upload_progress = UploadProgressAnimator(
        sse_manager,
        min_seconds=settings.upload_progress_min_seconds,
        max_seconds=settings.upload_progress_max_seconds,
        tick_seconds=settings.upload_progress_tick_seconds,
        linger_seconds=settings.upload_progress_linger_seconds,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
