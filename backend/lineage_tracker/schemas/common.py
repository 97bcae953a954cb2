"""
Shared schema configuration.

Records travel over the wire in camelCase (``contentId``, ``uploadedAt``)
while Python code uses snake_case attribute names.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialised with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class CreatePayload(CamelModel):
    """Base schema for create payloads; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class RecordResponse(CamelModel):
    """
    Base schema for stored records.

    Timestamps are normalised to whole-second UTC so both stores render
    them identically. SQLite hands back naive values, which are UTC.
    """

    model_config = ConfigDict(from_attributes=True)

    @field_validator("*", mode="after")
    @classmethod
    def normalise_timestamps(cls, value: Any) -> Any:
        if not isinstance(value, datetime):
            return value
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).replace(microsecond=0)
