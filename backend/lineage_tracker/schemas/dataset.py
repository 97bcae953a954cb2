"""
Dataset Pydantic schemas for request/response validation.
"""

from datetime import datetime

from pydantic import Field, StrictStr

from lineage_tracker.schemas.common import CreatePayload, RecordResponse


class DatasetCreate(CreatePayload):
    """Schema for registering a new dataset."""

    name: StrictStr = Field(..., min_length=1, max_length=255, description="Dataset name")
    description: StrictStr = Field(..., description="Dataset description")
    size: StrictStr = Field(..., min_length=1, max_length=50, description="Human-readable size")
    content_id: StrictStr = Field(..., min_length=1, max_length=255, description="IPFS content identifier")
    status: StrictStr = Field("pending", min_length=1, max_length=50, description="Initial status")


class DatasetResponse(RecordResponse):
    """Schema for dataset response."""

    id: int = Field(..., description="Dataset ID")
    name: str = Field(..., description="Dataset name")
    description: str = Field(..., description="Dataset description")
    size: str = Field(..., description="Human-readable size")
    status: str = Field(..., description="Verification status")
    content_id: str = Field(..., description="IPFS content identifier")
    uploaded_at: datetime = Field(..., description="Registration timestamp")
