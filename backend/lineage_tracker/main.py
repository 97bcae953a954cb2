"""
FastAPI application entry point.

This module initializes and configures the FastAPI application.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lineage_tracker.api.endpoints.ipfs import reject_oversize_upload
from lineage_tracker.api.routes import router
from lineage_tracker.core.config import Settings, settings as default_settings
from lineage_tracker.storage import LineageStore, build_store, ensure_demo_user

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Builds the store unless one was supplied, seeds the demo user and
    ensures the upload spool directory exists.
    """
    app_settings: Settings = app.state.settings
    if app.state.store is None:
        app.state.store = build_store(app_settings)
    app_settings.get_upload_tmp_path()

    if app_settings.seed_demo_user:
        try:
            ensure_demo_user(app.state.store, app_settings.demo_username, app_settings.demo_password)
        except Exception as e:
            logger.error(f"Failed to create demo user: {e}")

    yield


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report validation failures as 400 with field-level errors."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": errors},
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[LineageStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use. Defaults to the environment settings.
        store: Store to use. When omitted, the store selected by settings
            is built at startup.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Tracks lineage between AI training datasets and models pinned on IPFS/Filecoin.",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(reject_oversize_upload)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include API router
    app.include_router(router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
            "storage": settings.storage_backend,
        }

    return app


# Create the application instance
app = create_app()
