"""
Pytest configuration and fixtures.

Provides common fixtures for testing including both store backends,
test settings and a test client.
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from lineage_tracker.core.config import Settings
from lineage_tracker.core.database import (
    create_db_engine,
    create_session_factory,
    drop_db,
    init_db,
)
from lineage_tracker.main import create_app
from lineage_tracker.schemas import DatasetCreate, ModelCreate
from lineage_tracker.storage import DatabaseLineageStore, InMemoryLineageStore, LineageStore


@pytest.fixture(scope="function")
def test_settings(tmp_path: Path) -> Settings:
    """Create test settings with temporary paths."""
    return Settings(
        _env_file=None,
        database_url="sqlite:///:memory:",
        storage_backend="memory",
        lighthouse_api_key="test-key",
        lighthouse_upload_url="http://lighthouse.test",
        lighthouse_api_url="http://api.lighthouse.test",
        upload_tmp_dir=tmp_path / "uploads",
        debug=True,
        environment="development",
    )


@pytest.fixture(scope="function")
def test_db_engine():
    """Create a test database engine with in-memory SQLite."""
    engine = create_db_engine("sqlite:///:memory:")
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def memory_store() -> InMemoryLineageStore:
    """Create an empty in-memory store."""
    return InMemoryLineageStore()


@pytest.fixture(scope="function")
def database_store(test_db_engine) -> DatabaseLineageStore:
    """Create a database store on an in-memory SQLite engine."""
    return DatabaseLineageStore(create_session_factory(test_db_engine))


@pytest.fixture(params=["memory", "database"])
def store(request: pytest.FixtureRequest) -> LineageStore:
    """Run the requesting test against both store backends."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture(scope="function")
def client(test_settings: Settings, store: LineageStore) -> Generator[TestClient, None, None]:
    """Create a test client bound to the test store."""
    app = create_app(settings=test_settings, store=store)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_dataset() -> DatasetCreate:
    """Sample dataset payload."""
    return DatasetCreate(
        name="ImageNet subset",
        description="10k labelled images",
        size="1 GB",
        content_id="bafy-dataset",
    )


@pytest.fixture
def sample_model() -> ModelCreate:
    """Sample model payload."""
    return ModelCreate(
        name="ResNet-50",
        description="Classifier fine-tuned on the subset",
        content_id="bafy-model",
    )
