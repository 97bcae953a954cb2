"""
SQLAlchemy-backed store.

Each operation runs in its own short-lived session obtained from the
session factory, and ORM rows are converted to response schemas before
the session closes.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from lineage_tracker.models import Dataset, DatasetModelRelationship, Model, User
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


class DatabaseLineageStore:
    """
    Store persisting records in a relational database.

    Attributes:
        session_factory: Factory producing SQLAlchemy sessions.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        """
        Initialize the store.

        Args:
            session_factory: Session factory bound to an initialised engine.
        """
        self.session_factory = session_factory

    # Users

    def get_user(self, user_id: int) -> Optional[UserResponse]:
        with self.session_factory() as db:
            user = db.get(User, user_id)
            return UserResponse.model_validate(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[UserResponse]:
        with self.session_factory() as db:
            user = db.scalars(select(User).where(User.username == username)).first()
            return UserResponse.model_validate(user) if user else None

    def create_user(self, payload: UserCreate) -> UserResponse:
        with self.session_factory() as db:
            user = User(username=payload.username, password=payload.password)
            db.add(user)
            db.commit()
            db.refresh(user)
            return UserResponse.model_validate(user)

    # Datasets

    def list_datasets(self) -> list[DatasetResponse]:
        with self.session_factory() as db:
            rows = db.scalars(select(Dataset).order_by(Dataset.id)).all()
            return [DatasetResponse.model_validate(row) for row in rows]

    def get_dataset(self, dataset_id: int) -> Optional[DatasetResponse]:
        with self.session_factory() as db:
            dataset = db.get(Dataset, dataset_id)
            return DatasetResponse.model_validate(dataset) if dataset else None

    def create_dataset(self, payload: DatasetCreate) -> DatasetResponse:
        with self.session_factory() as db:
            dataset = Dataset(
                name=payload.name,
                description=payload.description,
                size=payload.size,
                status=payload.status,
                content_id=payload.content_id,
            )
            db.add(dataset)
            db.commit()
            db.refresh(dataset)
            return DatasetResponse.model_validate(dataset)

    def update_dataset_status(self, dataset_id: int, status: str) -> Optional[DatasetResponse]:
        with self.session_factory() as db:
            dataset = db.get(Dataset, dataset_id)
            if not dataset:
                return None
            dataset.status = status
            db.commit()
            db.refresh(dataset)
            return DatasetResponse.model_validate(dataset)

    # Models

    def list_models(self) -> list[ModelResponse]:
        with self.session_factory() as db:
            rows = db.scalars(select(Model).order_by(Model.id)).all()
            return [ModelResponse.model_validate(row) for row in rows]

    def get_model(self, model_id: int) -> Optional[ModelResponse]:
        with self.session_factory() as db:
            model = db.get(Model, model_id)
            return ModelResponse.model_validate(model) if model else None

    def create_model(self, payload: ModelCreate) -> ModelResponse:
        with self.session_factory() as db:
            model = Model(
                name=payload.name,
                description=payload.description,
                content_id=payload.content_id,
            )
            db.add(model)
            db.commit()
            db.refresh(model)
            return ModelResponse.model_validate(model)

    # Relationships

    def list_relationships(self) -> list[RelationshipResponse]:
        with self.session_factory() as db:
            rows = db.scalars(
                select(DatasetModelRelationship).order_by(DatasetModelRelationship.id)
            ).all()
            return [RelationshipResponse.model_validate(row) for row in rows]

    def list_relationships_by_dataset(self, dataset_id: int) -> list[RelationshipResponse]:
        with self.session_factory() as db:
            rows = db.scalars(
                select(DatasetModelRelationship)
                .where(DatasetModelRelationship.dataset_id == dataset_id)
                .order_by(DatasetModelRelationship.id)
            ).all()
            return [RelationshipResponse.model_validate(row) for row in rows]

    def list_relationships_by_model(self, model_id: int) -> list[RelationshipResponse]:
        with self.session_factory() as db:
            rows = db.scalars(
                select(DatasetModelRelationship)
                .where(DatasetModelRelationship.model_id == model_id)
                .order_by(DatasetModelRelationship.id)
            ).all()
            return [RelationshipResponse.model_validate(row) for row in rows]

    def get_relationship(self, relationship_id: int) -> Optional[RelationshipResponse]:
        with self.session_factory() as db:
            relationship = db.get(DatasetModelRelationship, relationship_id)
            return RelationshipResponse.model_validate(relationship) if relationship else None

    def create_relationship(self, payload: RelationshipCreate) -> RelationshipResponse:
        with self.session_factory() as db:
            relationship = DatasetModelRelationship(
                dataset_id=payload.dataset_id,
                model_id=payload.model_id,
                status=payload.status,
            )
            db.add(relationship)
            db.commit()
            db.refresh(relationship)
            return RelationshipResponse.model_validate(relationship)

    def update_relationship_status(
        self, relationship_id: int, status: str
    ) -> Optional[RelationshipResponse]:
        with self.session_factory() as db:
            relationship = db.get(DatasetModelRelationship, relationship_id)
            if not relationship:
                return None
            relationship.status = status
            db.commit()
            db.refresh(relationship)
            return RelationshipResponse.model_validate(relationship)
