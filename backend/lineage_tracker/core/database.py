"""
Database configuration and session management.

Provides the SQLAlchemy declarative base plus helpers to build engines
and session factories for the database-backed store.
"""

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import sessionmaker, Session, DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine.

    SQLite URLs get ``check_same_thread=False`` so the engine can be shared
    across request threads, and in-memory SQLite URLs use a ``StaticPool``
    so every session sees the same database.

    Args:
        database_url: SQLAlchemy connection URL.
        echo: Log emitted SQL.

    Returns:
        Engine: Configured engine.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo, pool_pre_ping=True)

    kwargs = {}
    if ":memory:" in database_url or database_url == "sqlite://":
        kwargs["poolclass"] = StaticPool

    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False},
        echo=echo,
        **kwargs,
    )

    # Enable foreign key constraints for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to ``engine``."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def init_db(engine: Engine) -> None:
    """
    Initialize the database by creating all tables.

    This should be called once when the store is built.
    """
    # Register mappers on Base.metadata before creating tables
    import lineage_tracker.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_db(engine: Engine) -> None:
    """
    Drop all tables from the database.

    WARNING: This will delete all data. Use only for testing.
    """
    Base.metadata.drop_all(bind=engine)
