"""
Schemas for lineage verification.
"""

from typing import Optional

from pydantic import Field, StrictStr

from lineage_tracker.schemas.common import CamelModel, CreatePayload
from lineage_tracker.schemas.relationship import RelationshipResponse


class LineageVerifyRequest(CreatePayload):
    """Content identifiers to check."""

    dataset_cid: StrictStr = Field(..., min_length=1, description="Dataset content identifier")
    processing_cid: Optional[StrictStr] = Field(None, description="Optional processing step identifier")
    model_cid: StrictStr = Field(..., min_length=1, description="Model content identifier")


class LineageVerifyResponse(CamelModel):
    """Outcome of a lineage check."""

    verified: bool = Field(..., description="True when every identifier resolved")


class RelationshipVerificationResponse(CamelModel):
    """Outcome of verifying a stored relationship."""

    verified: bool = Field(..., description="True when dataset and model CIDs resolved")
    relationship: RelationshipResponse = Field(..., description="Relationship after verification")
