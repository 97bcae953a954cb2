"""
Dataset database model.

Represents a training dataset whose payload is pinned on IPFS/Filecoin.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, Integer, DateTime, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lineage_tracker.core.database import Base

if TYPE_CHECKING:
    from lineage_tracker.models.relationship import DatasetModelRelationship


class Dataset(Base):
    """
    Dataset model representing a pinned training dataset.

    Attributes:
        id: Unique identifier for the dataset.
        name: Human-readable name for the dataset.
        description: Description of the dataset.
        size: Human-readable payload size (e.g. "1.5 GB").
        status: Verification status, e.g. "pending" or "verified".
        content_id: IPFS content identifier of the pinned payload.
        uploaded_at: Timestamp when the dataset was registered.
        relationships: Lineage links to models trained on this dataset.
    """

    __tablename__ = "datasets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    size: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="pending")
    content_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    relationships: Mapped[list["DatasetModelRelationship"]] = relationship(
        "DatasetModelRelationship",
        back_populates="dataset",
    )

    def __repr__(self) -> str:
        return f"<Dataset(id={self.id}, name='{self.name}', status='{self.status}')>"
