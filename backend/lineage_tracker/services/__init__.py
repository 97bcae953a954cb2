"""
Business logic services.
"""

from lineage_tracker.services.lighthouse_service import (
    LighthouseService,
    LighthouseServiceError,
    LighthouseConfigError,
    LighthouseConnectionError,
    LighthouseUploadError,
    PinFile,
    UploadResult,
)
from lineage_tracker.services.lineage_service import (
    LineageVerifier,
    RelationshipNotFoundError,
)
from lineage_tracker.services.dashboard_service import compute_dashboard_stats

__all__ = [
    "LighthouseService",
    "LighthouseServiceError",
    "LighthouseConfigError",
    "LighthouseConnectionError",
    "LighthouseUploadError",
    "PinFile",
    "UploadResult",
    "LineageVerifier",
    "RelationshipNotFoundError",
    "compute_dashboard_stats",
]
