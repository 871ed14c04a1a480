"""Canonical schema catalog models.

A catalog is the fixed set of target fields that user-supplied column
headers are mapped onto. It is built once by the schema loader and treated
as read-only by the matching engine.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class SchemaEntry(BaseModel):
    """A single canonical field in the schema catalog.

    Persisted alias documents use camelCase keys (``canonicalName``,
    ``dataType``, ``exampleValues``); snake_case names are accepted too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    canonical_name: str = Field(
        ..., alias="canonicalName", description="Canonical field name (e.g., 'total_biogas_m3')"
    )
    description: str = Field(default="", description="Human description of the field")
    data_type: str = Field(
        default="", alias="dataType", description="Declared data type (not validated here)"
    )
    required: bool = Field(
        default=False, description="Required fields use the stricter threshold pair"
    )
    example_values: tuple[str, ...] = Field(
        default=(), alias="exampleValues", description="Example values, informational only"
    )
    aliases: tuple[str, ...] = Field(
        default=(), description="Known alternate spellings treated as exact synonyms"
    )


class SchemaCatalog:
    """Read-only, insertion-ordered mapping of canonical id -> SchemaEntry.

    Iteration order is insertion order. Every matching layer breaks ties
    by this order, so the entry added first wins. The catalog copies its
    input; later edits to the source mapping are not seen.
    """

    def __init__(self, entries: Mapping[str, SchemaEntry] | None = None) -> None:
        self._entries: Mapping[str, SchemaEntry] = MappingProxyType(dict(entries or {}))

    def __iter__(self) -> Iterator[SchemaEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"SchemaCatalog({len(self._entries)} entries)"

    @property
    def entries(self) -> Mapping[str, SchemaEntry]:
        """Read-only view of the underlying entries."""
        return self._entries

    def get(self, key: str) -> SchemaEntry | None:
        """Return the entry for a canonical id, or None if not present."""
        return self._entries.get(key)

    def keys(self) -> list[str]:
        """Return canonical ids in catalog order."""
        return list(self._entries.keys())

    def required_entries(self) -> list[SchemaEntry]:
        """Return entries flagged as required, in catalog order."""
        return [e for e in self._entries.values() if e.required]
