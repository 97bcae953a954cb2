"""
Tests for request validation schemas.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from lineage_tracker.schemas import (
    DatasetCreate,
    DatasetResponse,
    DatasetMetadata,
    RelationshipCreate,
    StatusUpdate,
)


class TestCreatePayloads:
    """Tests for create payload schemas."""

    def test_dataset_accepts_camel_case(self):
        """Test that wire-format camelCase keys populate fields."""
        dataset = DatasetCreate.model_validate(
            {"name": "A", "description": "d", "size": "1 GB", "contentId": "cidA"}
        )

        assert dataset.content_id == "cidA"
        assert dataset.status == "pending"

    def test_dataset_rejects_client_timestamp(self):
        """Test that server-assigned fields cannot be supplied."""
        with pytest.raises(ValidationError) as exc_info:
            DatasetCreate.model_validate(
                {
                    "name": "A",
                    "description": "d",
                    "size": "1 GB",
                    "contentId": "cidA",
                    "uploadedAt": "2024-01-01T00:00:00Z",
                }
            )

        assert exc_info.value.errors()[0]["type"] == "extra_forbidden"

    def test_dataset_reports_every_missing_field(self):
        """Test that all missing fields are reported, not just the first."""
        with pytest.raises(ValidationError) as exc_info:
            DatasetCreate.model_validate({"name": "A"})

        fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert fields == {"description", "size", "contentId"}

    def test_relationship_rejects_string_ids(self):
        """Test that ids must be integers."""
        with pytest.raises(ValidationError):
            RelationshipCreate.model_validate({"datasetId": "1", "modelId": 1})

    def test_status_update_requires_non_empty_string(self):
        """Test status update validation."""
        with pytest.raises(ValidationError):
            StatusUpdate.model_validate({})
        with pytest.raises(ValidationError):
            StatusUpdate.model_validate({"status": 1})
        with pytest.raises(ValidationError):
            StatusUpdate.model_validate({"status": ""})

        assert StatusUpdate.model_validate({"status": "verified"}).status == "verified"


class TestDatasetMetadata:
    """Tests for the dataset metadata schema."""

    def test_valid_metadata(self):
        """Test a complete metadata document."""
        metadata = DatasetMetadata.model_validate(
            {
                "name": "Reviews",
                "description": "Product reviews",
                "license": "CC-BY-4.0",
                "tags": ["nlp", "sentiment"],
                "creator": {"name": "Data Team", "organization": "Acme"},
                "features": [{"name": "text", "dtype": "string"}],
            }
        )

        assert metadata.creator.organization == "Acme"
        assert metadata.features[0].dtype == "string"

    def test_nested_errors_are_reported(self):
        """Test that nested field errors carry their path."""
        with pytest.raises(ValidationError) as exc_info:
            DatasetMetadata.model_validate(
                {"name": "Reviews", "description": "d", "creator": {"organization": "Acme"}}
            )

        assert exc_info.value.errors()[0]["loc"] == ("creator", "name")

    def test_unknown_fields_rejected(self):
        """Test that unrecognised fields fail validation."""
        with pytest.raises(ValidationError):
            DatasetMetadata.model_validate(
                {"name": "R", "description": "d", "creator": {"name": "x"}, "rows": 10}
            )


class TestRecordTimestamps:
    """Tests for timestamp normalisation on stored records."""

    def make_dataset(self, uploaded_at: datetime) -> DatasetResponse:
        return DatasetResponse(
            id=1,
            name="A",
            description="d",
            size="1 GB",
            status="pending",
            content_id="cidA",
            uploaded_at=uploaded_at,
        )

    def test_naive_timestamp_is_utc(self):
        """Test that naive database timestamps are read as UTC."""
        dataset = self.make_dataset(datetime(2026, 10, 16, 20, 31, 57))

        assert dataset.uploaded_at == datetime(2026, 10, 16, 20, 31, 57, tzinfo=timezone.utc)
        assert dataset.model_dump(mode="json", by_alias=True)["uploadedAt"] == "2026-10-16T20:31:57Z"

    def test_aware_timestamp_is_converted_and_truncated(self):
        """Test that offsets are converted to UTC and microseconds dropped."""
        plus_two = timezone(timedelta(hours=2))
        dataset = self.make_dataset(datetime(2026, 10, 16, 22, 31, 57, 962390, tzinfo=plus_two))

        assert dataset.model_dump(mode="json", by_alias=True)["uploadedAt"] == "2026-10-16T20:31:57Z"
