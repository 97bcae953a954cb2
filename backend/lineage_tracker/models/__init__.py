"""
SQLAlchemy database models.

This module exports all database models used in the application.
"""

from lineage_tracker.models.user import User
from lineage_tracker.models.dataset import Dataset
from lineage_tracker.models.model import Model
from lineage_tracker.models.relationship import DatasetModelRelationship

__all__ = [
    "User",
    "Dataset",
    "Model",
    "DatasetModelRelationship",
]
