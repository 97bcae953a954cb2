"""
Model database model.

Represents a trained AI model whose artifact is pinned on IPFS/Filecoin.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, Integer, DateTime, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lineage_tracker.core.database import Base

if TYPE_CHECKING:
    from lineage_tracker.models.relationship import DatasetModelRelationship


class Model(Base):
    """
    Trained model record.

    Attributes:
        id: Unique identifier for the model.
        name: Human-readable model name.
        description: Description of the model.
        content_id: IPFS content identifier of the model artifact.
        created_at: Timestamp when the model was registered.
        relationships: Lineage links to the datasets this model was trained on.
    """

    __tablename__ = "models"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    content_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    relationships: Mapped[list["DatasetModelRelationship"]] = relationship(
        "DatasetModelRelationship",
        back_populates="model",
    )

    def __repr__(self) -> str:
        return f"<Model(id={self.id}, name='{self.name}')>"
