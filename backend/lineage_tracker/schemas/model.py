"""
Model Pydantic schemas for request/response validation.
"""

from datetime import datetime

from pydantic import Field, StrictStr

from lineage_tracker.schemas.common import CreatePayload, RecordResponse


class ModelCreate(CreatePayload):
    """Schema for registering a trained model."""

    name: StrictStr = Field(..., min_length=1, max_length=255, description="Model name")
    description: StrictStr = Field(..., description="Model description")
    content_id: StrictStr = Field(..., min_length=1, max_length=255, description="IPFS content identifier")


class ModelResponse(RecordResponse):
    """Schema for model response."""

    id: int = Field(..., description="Model ID")
    name: str = Field(..., description="Model name")
    description: str = Field(..., description="Model description")
    content_id: str = Field(..., description="IPFS content identifier")
    created_at: datetime = Field(..., description="Registration timestamp")
