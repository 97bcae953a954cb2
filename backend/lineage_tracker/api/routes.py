"""
API route definitions.

This module defines all API endpoints for the application.
"""

from fastapi import APIRouter

from lineage_tracker.api.endpoints import (
    dashboard,
    datasets,
    ipfs,
    lineage,
    models,
    relationships,
    validation,
)

router = APIRouter()

# Include all endpoint routers
router.include_router(
    datasets.router,
    prefix="/datasets",
    tags=["Datasets"],
)

router.include_router(
    models.router,
    prefix="/models",
    tags=["Models"],
)

router.include_router(
    relationships.router,
    prefix="/relationships",
    tags=["Relationships"],
)

router.include_router(
    validation.router,
    prefix="/validate",
    tags=["Validation"],
)

router.include_router(
    ipfs.router,
    prefix="/ipfs",
    tags=["IPFS"],
)

router.include_router(
    lineage.router,
    prefix="/lineage",
    tags=["Lineage"],
)

router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["Dashboard"],
)
