"""
Core module containing configuration and database setup.
"""

from lineage_tracker.core.config import Settings, settings
from lineage_tracker.core.database import Base, create_db_engine, create_session_factory

__all__ = ["Settings", "settings", "Base", "create_db_engine", "create_session_factory"]
