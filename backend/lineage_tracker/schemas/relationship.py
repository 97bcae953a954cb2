"""
Relationship Pydantic schemas for request/response validation.
"""

from datetime import datetime

from pydantic import Field, StrictInt, StrictStr

from lineage_tracker.schemas.common import CamelModel, CreatePayload, RecordResponse


class RelationshipCreate(CreatePayload):
    """Schema for recording that a model was trained on a dataset."""

    dataset_id: StrictInt = Field(..., ge=1, description="Dataset ID")
    model_id: StrictInt = Field(..., ge=1, description="Model ID")
    status: StrictStr = Field("pending", min_length=1, max_length=50, description="Initial status")


class RelationshipResponse(RecordResponse):
    """Schema for relationship response."""

    id: int = Field(..., description="Relationship ID")
    dataset_id: int = Field(..., description="Dataset ID")
    model_id: int = Field(..., description="Model ID")
    status: str = Field(..., description="Verification status")
    usage_date: datetime = Field(..., description="Timestamp the link was recorded")


class StatusUpdate(CamelModel):
    """Schema for the status-only update path."""

    status: StrictStr = Field(..., min_length=1, max_length=50, description="New status")
