"""
Schemas for the IPFS pinning endpoints.
"""

from pydantic import Field

from lineage_tracker.schemas.common import CamelModel


class UploadResponse(CamelModel):
    """Result of pinning an upload."""

    content_id: str = Field(..., description="Root content identifier")
    display_size: str = Field(..., description="Human-readable total size")


class CidCheckResponse(CamelModel):
    """Result of an existence check."""

    exists: bool = Field(..., description="Whether the CID is among the account's uploads")
