"""Persistence contract shared by the in-memory and database stores."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from lineage_tracker.schemas import (
    DatasetCreate,
    DatasetResponse,
    ModelCreate,
    ModelResponse,
    RelationshipCreate,
    RelationshipResponse,
    UserCreate,
    UserResponse,
)


class LineageStore(Protocol):
    """
    Storage capability set for users, datasets, models and relationships.

    Lookups return ``None`` for unknown ids. Unexpected backend failures
    propagate to the caller.
    """

    # Users
    def get_user(self, user_id: int) -> Optional[UserResponse]:
        """Return a user by id."""

    def get_user_by_username(self, username: str) -> Optional[UserResponse]:
        """Return a user by username."""

    def create_user(self, payload: UserCreate) -> UserResponse:
        """Persist a new user."""

    # Datasets
    def list_datasets(self) -> Sequence[DatasetResponse]:
        """Return all datasets in insertion order."""

    def get_dataset(self, dataset_id: int) -> Optional[DatasetResponse]:
        """Return a dataset by id."""

    def create_dataset(self, payload: DatasetCreate) -> DatasetResponse:
        """Persist a new dataset and stamp ``uploaded_at``."""

    def update_dataset_status(self, dataset_id: int, status: str) -> Optional[DatasetResponse]:
        """Set a dataset's status; ``None`` if the dataset does not exist."""

    # Models
    def list_models(self) -> Sequence[ModelResponse]:
        """Return all models in insertion order."""

    def get_model(self, model_id: int) -> Optional[ModelResponse]:
        """Return a model by id."""

    def create_model(self, payload: ModelCreate) -> ModelResponse:
        """Persist a new model and stamp ``created_at``."""

    # Relationships
    def list_relationships(self) -> Sequence[RelationshipResponse]:
        """Return all relationships in insertion order."""

    def list_relationships_by_dataset(self, dataset_id: int) -> Sequence[RelationshipResponse]:
        """Return relationships referencing ``dataset_id``."""

    def list_relationships_by_model(self, model_id: int) -> Sequence[RelationshipResponse]:
        """Return relationships referencing ``model_id``."""

    def get_relationship(self, relationship_id: int) -> Optional[RelationshipResponse]:
        """Return a relationship by id."""

    def create_relationship(self, payload: RelationshipCreate) -> RelationshipResponse:
        """Persist a new relationship and stamp ``usage_date``."""

    def update_relationship_status(
        self, relationship_id: int, status: str
    ) -> Optional[RelationshipResponse]:
        """Set a relationship's status; ``None`` if it does not exist."""
