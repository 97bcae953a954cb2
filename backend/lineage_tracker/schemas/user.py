"""
User Pydantic schemas.
"""

from pydantic import Field, StrictStr

from lineage_tracker.schemas.common import CreatePayload, RecordResponse


class UserCreate(CreatePayload):
    """Schema for creating a user."""

    username: StrictStr = Field(..., min_length=1, max_length=255, description="Unique username")
    password: StrictStr = Field(..., min_length=1, max_length=255, description="Password")


class UserResponse(RecordResponse):
    """Schema for a stored user."""

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Unique username")
    password: str = Field(..., exclude=True, description="Password (never serialised)")
