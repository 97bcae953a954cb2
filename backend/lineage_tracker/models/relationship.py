"""
Dataset-model relationship database model.

Join table recording that a model was trained using a dataset.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, Integer, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lineage_tracker.core.database import Base

if TYPE_CHECKING:
    from lineage_tracker.models.dataset import Dataset
    from lineage_tracker.models.model import Model


class DatasetModelRelationship(Base):
    """
    Lineage link between a dataset and a model.

    Attributes:
        id: Unique identifier for the relationship.
        dataset_id: Dataset the model was trained on.
        model_id: Model derived from the dataset.
        status: Verification status, e.g. "pending" or "verified".
        usage_date: Timestamp when the relationship was recorded.
    """

    __tablename__ = "dataset_model_relationships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dataset_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("datasets.id"),
        nullable=False,
        index=True,
    )
    model_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("models.id"),
        nullable=False,
        index=True,
    )
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="pending")

    usage_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    dataset: Mapped["Dataset"] = relationship("Dataset", back_populates="relationships")
    model: Mapped["Model"] = relationship("Model", back_populates="relationships")

    def __repr__(self) -> str:
        return (
            f"<DatasetModelRelationship(id={self.id}, dataset_id={self.dataset_id}, "
            f"model_id={self.model_id}, status='{self.status}')>"
        )
