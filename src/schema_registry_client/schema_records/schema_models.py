"""Schema registry records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


class _ResponseAttached:
    """Mixin exposing the raw HTTP response without making it a dataclass field."""

    @property
    def raw_response(self) -> httpx.Response | None:
        """Raw service response this record was converted from, if any."""
        return self.__dict__.get("_response")

    def _attach_response(self, response: httpx.Response) -> None:
        # Frozen dataclasses reject normal assignment; instance __dict__ is still writable.
        object.__setattr__(self, "_response", response)


@dataclass(frozen=True)
class SchemaDescription:
    """Schema to register or look up, identified by group, name and serialization type."""

    group: str
    name: str
    serialization_type: str
    content: str


@dataclass(frozen=True)
class SchemaProperties(_ResponseAttached):
    """Identity the registry assigned to one schema version."""

    schema_id: str
    serialization_type: str
    version: int
    location: str
    location_by_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_id": self.schema_id,
            "serialization_type": self.serialization_type,
            "version": self.version,
            "location": self.location,
            "location_by_id": self.location_by_id,
        }


@dataclass(frozen=True)
class Schema(_ResponseAttached):
    """Schema content together with its registry identity."""

    schema_content: str
    schema_properties: SchemaProperties

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_content": self.schema_content,
            "schema_properties": self.schema_properties.to_dict(),
        }
