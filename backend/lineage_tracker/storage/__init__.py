"""
Persistence layer.

Exposes the ``LineageStore`` contract, its two implementations, and the
startup helpers that pick one.
"""

import logging

from lineage_tracker.core.config import Settings
from lineage_tracker.core.database import create_db_engine, create_session_factory, init_db
from lineage_tracker.schemas import UserCreate, UserResponse
from lineage_tracker.storage.base import LineageStore
from lineage_tracker.storage.database import DatabaseLineageStore
from lineage_tracker.storage.memory import InMemoryLineageStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> LineageStore:
    """
    Build the store selected by ``settings.storage_backend``.

    Args:
        settings: Application settings.

    Returns:
        InMemoryLineageStore or DatabaseLineageStore.

    Raises:
        ValueError: If the backend name is not supported.
    """
    if settings.storage_backend == "memory":
        logger.info("Using in-memory store")
        return InMemoryLineageStore()
    elif settings.storage_backend == "database":
        engine = create_db_engine(settings.database_url, echo=settings.debug)
        init_db(engine)
        logger.info("Using database store")
        return DatabaseLineageStore(create_session_factory(engine))
    else:
        raise ValueError(
            f"Unsupported storage backend: {settings.storage_backend}. "
            "Supported backends are: 'memory', 'database'"
        )


def ensure_demo_user(store: LineageStore, username: str, password: str) -> UserResponse:
    """Create the demo user unless a user with ``username`` already exists."""
    existing = store.get_user_by_username(username)
    if existing:
        return existing
    logger.info(f"Creating demo user '{username}'")
    return store.create_user(UserCreate(username=username, password=password))


__all__ = [
    "LineageStore",
    "InMemoryLineageStore",
    "DatabaseLineageStore",
    "build_store",
    "ensure_demo_user",
]
