"""
API endpoint modules.
"""

from lineage_tracker.api.endpoints import (
    dashboard,
    datasets,
    ipfs,
    lineage,
    models,
    relationships,
    validation,
)

__all__ = ["dashboard", "datasets", "ipfs", "lineage", "models", "relationships", "validation"]
