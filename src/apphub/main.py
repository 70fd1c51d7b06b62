"""FastAPI application factory and lifespan management."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apphub.config import settings
from apphub.logging_config import configure_logging

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=settings.json_logs)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the single record store and upload store for this process."""
    from apphub.services.uploads import UploadStore
    from apphub.store.backend import JsonFileBackend
    from apphub.store.record_store import RecordStore

    app.state.started_at = time.monotonic()
    app.state.store = RecordStore(JsonFileBackend(settings.data_file))
    app.state.uploads = UploadStore(
        settings.upload_dir,
        max_bytes=settings.max_upload_bytes,
        allowed_extensions=settings.allowed_upload_extensions,
    )

    logger.info("AppHub API started (data_file=%s)", settings.data_file)
    yield
    logger.info("AppHub API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="AppHub API",
        version="1.0.0",
        description="Internal web application directory and project intake portal.",
        lifespan=lifespan,
    )

    # CORS middleware for React frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from apphub.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    # Register error handlers
    from apphub.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    # Import and mount routers
    from apphub.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
