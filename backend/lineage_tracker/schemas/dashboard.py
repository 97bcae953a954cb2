"""
Dashboard aggregate schema.
"""

from pydantic import Field

from lineage_tracker.schemas.common import CamelModel


class DashboardStats(CamelModel):
    """Counts rendered on the dashboard."""

    total_datasets: int = Field(..., description="Number of datasets")
    linked_models: int = Field(..., description="Number of models")
    verified_lineages: int = Field(..., description="Relationships with status 'verified'")
    storage_used: str = Field(..., description="Total dataset size in GB")
