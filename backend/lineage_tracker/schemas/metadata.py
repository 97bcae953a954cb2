"""
Dataset metadata schema.

Describes the ``metadata.json`` document bundled with dataset uploads.
"""

from typing import Optional

from pydantic import Field, StrictStr

from lineage_tracker.schemas.common import CreatePayload


class DatasetCreator(CreatePayload):
    """Person or organisation that produced the dataset."""

    name: StrictStr = Field(..., min_length=1, description="Creator name")
    organization: Optional[StrictStr] = Field(None, description="Organisation")
    contact: Optional[StrictStr] = Field(None, description="Contact address")


class DatasetFeature(CreatePayload):
    """A single column or field of the dataset."""

    name: StrictStr = Field(..., min_length=1, description="Feature name")
    dtype: StrictStr = Field(..., min_length=1, description="Feature data type")
    description: Optional[StrictStr] = Field(None, description="Feature description")


class DatasetMetadata(CreatePayload):
    """Descriptive metadata for a dataset upload."""

    name: StrictStr = Field(..., min_length=1, max_length=255, description="Dataset name")
    description: StrictStr = Field(..., description="Dataset description")
    version: Optional[StrictStr] = Field(None, description="Dataset version")
    license: Optional[StrictStr] = Field(None, description="License identifier")
    source: Optional[StrictStr] = Field(None, description="Where the data came from")
    format: Optional[StrictStr] = Field(None, description="File format, e.g. csv or parquet")
    tags: list[StrictStr] = Field(default_factory=list, description="Free-form tags")
    creator: DatasetCreator = Field(..., description="Dataset creator")
    features: list[DatasetFeature] = Field(default_factory=list, description="Field descriptions")
