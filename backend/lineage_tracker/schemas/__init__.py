"""
Pydantic schemas for request/response validation.

This module exports all Pydantic schemas used for API validation.
"""

from lineage_tracker.schemas.user import UserCreate, UserResponse
from lineage_tracker.schemas.dataset import DatasetCreate, DatasetResponse
from lineage_tracker.schemas.model import ModelCreate, ModelResponse
from lineage_tracker.schemas.relationship import (
    RelationshipCreate,
    RelationshipResponse,
    StatusUpdate,
)
from lineage_tracker.schemas.metadata import DatasetMetadata, DatasetCreator, DatasetFeature
from lineage_tracker.schemas.ipfs import UploadResponse, CidCheckResponse
from lineage_tracker.schemas.lineage import (
    LineageVerifyRequest,
    LineageVerifyResponse,
    RelationshipVerificationResponse,
)
from lineage_tracker.schemas.dashboard import DashboardStats

__all__ = [
    # User schemas
    "UserCreate",
    "UserResponse",
    # Dataset schemas
    "DatasetCreate",
    "DatasetResponse",
    # Model schemas
    "ModelCreate",
    "ModelResponse",
    # Relationship schemas
    "RelationshipCreate",
    "RelationshipResponse",
    "StatusUpdate",
    # Metadata schemas
    "DatasetMetadata",
    "DatasetCreator",
    "DatasetFeature",
    # IPFS schemas
    "UploadResponse",
    "CidCheckResponse",
    # Lineage schemas
    "LineageVerifyRequest",
    "LineageVerifyResponse",
    "RelationshipVerificationResponse",
    # Dashboard schemas
    "DashboardStats",
]
