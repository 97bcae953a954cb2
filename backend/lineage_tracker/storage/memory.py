"""In-memory store used for development and tests."""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

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


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryLineageStore:
    """
    Dictionary-backed store.

    Each entity kind has its own dict and id counter. One lock guards every
    insert and status update, so ids are unique and strictly increasing.
    Referential integrity between relationships and their dataset/model is
    not enforced here.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: Dict[int, UserResponse] = {}
        self._datasets: Dict[int, DatasetResponse] = {}
        self._models: Dict[int, ModelResponse] = {}
        self._relationships: Dict[int, RelationshipResponse] = {}
        self._next_user_id = 1
        self._next_dataset_id = 1
        self._next_model_id = 1
        self._next_relationship_id = 1

    # Users

    def get_user(self, user_id: int) -> Optional[UserResponse]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[UserResponse]:
        for user in list(self._users.values()):
            if user.username == username:
                return user
        return None

    def create_user(self, payload: UserCreate) -> UserResponse:
        with self._lock:
            if any(u.username == payload.username for u in self._users.values()):
                raise ValueError(f"Username '{payload.username}' already exists")
            user = UserResponse(id=self._next_user_id, **payload.model_dump())
            self._users[user.id] = user
            self._next_user_id += 1
        return user

    # Datasets

    def list_datasets(self) -> List[DatasetResponse]:
        return list(self._datasets.values())

    def get_dataset(self, dataset_id: int) -> Optional[DatasetResponse]:
        return self._datasets.get(dataset_id)

    def create_dataset(self, payload: DatasetCreate) -> DatasetResponse:
        with self._lock:
            dataset = DatasetResponse(
                id=self._next_dataset_id,
                uploaded_at=_now(),
                **payload.model_dump(),
            )
            self._datasets[dataset.id] = dataset
            self._next_dataset_id += 1
        return dataset

    def update_dataset_status(self, dataset_id: int, status: str) -> Optional[DatasetResponse]:
        with self._lock:
            current = self._datasets.get(dataset_id)
            if current is None:
                return None
            updated = current.model_copy(update={"status": status})
            self._datasets[dataset_id] = updated
        return updated

    # Models

    def list_models(self) -> List[ModelResponse]:
        return list(self._models.values())

    def get_model(self, model_id: int) -> Optional[ModelResponse]:
        return self._models.get(model_id)

    def create_model(self, payload: ModelCreate) -> ModelResponse:
        with self._lock:
            model = ModelResponse(
                id=self._next_model_id,
                created_at=_now(),
                **payload.model_dump(),
            )
            self._models[model.id] = model
            self._next_model_id += 1
        return model

    # Relationships

    def list_relationships(self) -> List[RelationshipResponse]:
        return list(self._relationships.values())

    def list_relationships_by_dataset(self, dataset_id: int) -> List[RelationshipResponse]:
        return [r for r in list(self._relationships.values()) if r.dataset_id == dataset_id]

    def list_relationships_by_model(self, model_id: int) -> List[RelationshipResponse]:
        return [r for r in list(self._relationships.values()) if r.model_id == model_id]

    def get_relationship(self, relationship_id: int) -> Optional[RelationshipResponse]:
        return self._relationships.get(relationship_id)

    def create_relationship(self, payload: RelationshipCreate) -> RelationshipResponse:
        with self._lock:
            relationship = RelationshipResponse(
                id=self._next_relationship_id,
                usage_date=_now(),
                **payload.model_dump(),
            )
            self._relationships[relationship.id] = relationship
            self._next_relationship_id += 1
        return relationship

    def update_relationship_status(
        self, relationship_id: int, status: str
    ) -> Optional[RelationshipResponse]:
        with self._lock:
            current = self._relationships.get(relationship_id)
            if current is None:
                return None
            updated = current.model_copy(update={"status": status})
            self._relationships[relationship_id] = updated
        return updated
