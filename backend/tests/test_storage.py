"""
Tests for the store implementations.

Every test in TestLineageStore runs against both the in-memory and the
database store.
"""

import threading

import pytest

from lineage_tracker.core.config import Settings
from lineage_tracker.schemas import DatasetCreate, ModelCreate, RelationshipCreate, UserCreate
from lineage_tracker.storage import (
    DatabaseLineageStore,
    InMemoryLineageStore,
    LineageStore,
    build_store,
    ensure_demo_user,
)


class TestLineageStore:
    """Contract tests shared by both backends."""

    def test_create_dataset_assigns_id_and_timestamp(
        self,
        store: LineageStore,
        sample_dataset: DatasetCreate,
    ):
        """Test that creation assigns an id, a timestamp and the default status."""
        dataset = store.create_dataset(sample_dataset)

        assert dataset.id == 1
        assert dataset.status == "pending"
        assert dataset.uploaded_at is not None
        assert dataset.content_id == "bafy-dataset"

    def test_ids_increase_monotonically(self, store: LineageStore, sample_dataset: DatasetCreate):
        """Test that ids are unique and strictly increasing."""
        ids = [store.create_dataset(sample_dataset).id for _ in range(5)]

        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_ids_are_per_entity_kind(
        self,
        store: LineageStore,
        sample_dataset: DatasetCreate,
        sample_model: ModelCreate,
    ):
        """Test that datasets and models number independently."""
        store.create_dataset(sample_dataset)
        store.create_dataset(sample_dataset)
        model = store.create_model(sample_model)

        assert model.id == 1

    def test_list_preserves_insertion_order(self, store: LineageStore):
        """Test that listing returns records in insertion order."""
        for name in ["a", "b", "c"]:
            store.create_dataset(
                DatasetCreate(name=name, description="", size="1 KB", content_id=f"cid-{name}")
            )

        assert [d.name for d in store.list_datasets()] == ["a", "b", "c"]

    def test_get_missing_returns_none(self, store: LineageStore):
        """Test that unknown ids are reported as None."""
        assert store.get_dataset(999) is None
        assert store.get_model(999) is None
        assert store.get_relationship(999) is None
        assert store.get_user(999) is None

    def test_update_dataset_status_changes_only_status(
        self,
        store: LineageStore,
        sample_dataset: DatasetCreate,
    ):
        """Test that a status update leaves every other field untouched."""
        original = store.create_dataset(sample_dataset)

        updated = store.update_dataset_status(original.id, "verified")

        assert updated is not None
        assert updated.status == "verified"
        assert updated.model_dump(exclude={"status"}) == original.model_dump(exclude={"status"})
        assert store.get_dataset(original.id).status == "verified"

    def test_update_missing_status_returns_none(self, store: LineageStore):
        """Test that updating an unknown id returns None."""
        assert store.update_dataset_status(42, "verified") is None
        assert store.update_relationship_status(42, "verified") is None

    def test_relationship_filters(
        self,
        store: LineageStore,
        sample_dataset: DatasetCreate,
        sample_model: ModelCreate,
    ):
        """Test filtering relationships by dataset and by model."""
        d1 = store.create_dataset(sample_dataset)
        d2 = store.create_dataset(sample_dataset)
        m1 = store.create_model(sample_model)
        m2 = store.create_model(sample_model)

        store.create_relationship(RelationshipCreate(dataset_id=d1.id, model_id=m1.id))
        store.create_relationship(RelationshipCreate(dataset_id=d1.id, model_id=m2.id))
        store.create_relationship(RelationshipCreate(dataset_id=d2.id, model_id=m2.id))

        assert [r.model_id for r in store.list_relationships_by_dataset(d1.id)] == [m1.id, m2.id]
        assert [r.dataset_id for r in store.list_relationships_by_model(m2.id)] == [d1.id, d2.id]
        assert store.list_relationships_by_dataset(999) == []
        assert len(store.list_relationships()) == 3

    def test_update_relationship_status(
        self,
        store: LineageStore,
        sample_dataset: DatasetCreate,
        sample_model: ModelCreate,
    ):
        """Test updating a relationship's status."""
        dataset = store.create_dataset(sample_dataset)
        model = store.create_model(sample_model)
        relationship = store.create_relationship(
            RelationshipCreate(dataset_id=dataset.id, model_id=model.id)
        )

        updated = store.update_relationship_status(relationship.id, "verified")

        assert updated.status == "verified"
        assert updated.usage_date == relationship.usage_date
        assert updated.dataset_id == dataset.id

    def test_users(self, store: LineageStore):
        """Test creating and looking up users."""
        user = store.create_user(UserCreate(username="alice", password="secret"))

        assert store.get_user(user.id).username == "alice"
        assert store.get_user_by_username("alice").id == user.id
        assert store.get_user_by_username("bob") is None

    def test_ensure_demo_user_is_idempotent(self, store: LineageStore):
        """Test that the demo user is only created once."""
        first = ensure_demo_user(store, "demo", "password")
        second = ensure_demo_user(store, "demo", "password")

        assert first.id == second.id
        assert store.get_user_by_username("demo") is not None


class TestInMemoryLineageStore:
    """Tests specific to the in-memory store."""

    def test_duplicate_username_rejected(self, memory_store: InMemoryLineageStore):
        """Test that usernames are unique."""
        memory_store.create_user(UserCreate(username="alice", password="x"))

        with pytest.raises(ValueError):
            memory_store.create_user(UserCreate(username="alice", password="y"))

    def test_relationships_not_checked_against_entities(self, memory_store: InMemoryLineageStore):
        """Test that the store itself does not enforce references."""
        relationship = memory_store.create_relationship(RelationshipCreate(dataset_id=7, model_id=9))

        assert relationship.id == 1

    def test_concurrent_creates_get_unique_ids(
        self,
        memory_store: InMemoryLineageStore,
        sample_dataset: DatasetCreate,
    ):
        """Test that concurrent inserts never share an id."""
        def create_many():
            for _ in range(50):
                memory_store.create_dataset(sample_dataset)

        threads = [threading.Thread(target=create_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = [d.id for d in memory_store.list_datasets()]
        assert len(ids) == 200
        assert sorted(ids) == list(range(1, 201))


class TestBuildStore:
    """Tests for store selection."""

    def test_build_memory_store(self, test_settings: Settings):
        """Test selecting the in-memory backend."""
        assert isinstance(build_store(test_settings), InMemoryLineageStore)

    def test_build_database_store(self, test_settings: Settings):
        """Test selecting the database backend creates usable tables."""
        test_settings.storage_backend = "database"

        store = build_store(test_settings)

        assert isinstance(store, DatabaseLineageStore)
        assert store.list_datasets() == []
