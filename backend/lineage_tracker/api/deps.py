"""
Shared FastAPI dependencies.

The store and settings are built once in ``create_app`` and read from
``app.state`` on every request.
"""

from fastapi import Depends, HTTPException, Request

from lineage_tracker.core.config import Settings
from lineage_tracker.services.lighthouse_service import LighthouseService
from lineage_tracker.services.lineage_service import LineageVerifier
from lineage_tracker.storage import LineageStore


def get_store(request: Request) -> LineageStore:
    """Dependency returning the process-wide store."""
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    """Dependency returning the application settings."""
    return request.app.state.settings


def get_lighthouse_service(settings: Settings = Depends(get_settings)) -> LighthouseService:
    """Dependency to get LighthouseService instance."""
    return LighthouseService(config=settings)


def require_configured(service: LighthouseService) -> None:
    """Fail with 500 before calling Lighthouse when no API key is set."""
    if not service.is_configured:
        raise HTTPException(status_code=500, detail="Lighthouse API key not configured")


def get_lineage_verifier(
    service: LighthouseService = Depends(get_lighthouse_service),
) -> LineageVerifier:
    """Dependency to get a LineageVerifier bound to the pinning client."""
    return LineageVerifier(service)
