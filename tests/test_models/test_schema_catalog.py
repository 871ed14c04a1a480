"""Tests for SchemaEntry and SchemaCatalog."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from headermap.models.schema import SchemaCatalog, SchemaEntry


class TestSchemaEntry:
    def test_accepts_camel_case_document_keys(self) -> None:
        entry = SchemaEntry.model_validate(
            {
                "canonicalName": "total_biogas_m3",
                "description": "Total biogas",
                "dataType": "number",
                "required": True,
                "exampleValues": ["5400"],
                "aliases": ["total gas", "total gas"],
            }
        )
        assert entry.canonical_name == "total_biogas_m3"
        assert entry.data_type == "number"
        assert entry.example_values == ("5400",)
        assert entry.aliases == ("total gas", "total gas")

    def test_accepts_field_names(self) -> None:
        entry = SchemaEntry(canonical_name="date")
        assert entry.description == ""
        assert entry.required is False
        assert entry.aliases == ()

    def test_canonical_name_required(self) -> None:
        with pytest.raises(ValidationError):
            SchemaEntry.model_validate({"description": "no name"})

    def test_frozen(self) -> None:
        entry = SchemaEntry(canonical_name="date")
        with pytest.raises(ValidationError):
            entry.required = True  # type: ignore[misc]


class TestSchemaCatalog:
    def test_iterates_in_insertion_order(self) -> None:
        catalog = SchemaCatalog(
            {
                "b": SchemaEntry(canonical_name="b"),
                "a": SchemaEntry(canonical_name="a"),
                "c": SchemaEntry(canonical_name="c"),
            }
        )
        assert [e.canonical_name for e in catalog] == ["b", "a", "c"]
        assert catalog.keys() == ["b", "a", "c"]

    def test_lookup(self) -> None:
        entry = SchemaEntry(canonical_name="date", required=True)
        catalog = SchemaCatalog({"date": entry})
        assert "date" in catalog
        assert "missing" not in catalog
        assert catalog.get("date") is entry
        assert catalog.get("missing") is None
        assert len(catalog) == 1

    def test_empty_catalog(self) -> None:
        catalog = SchemaCatalog()
        assert len(catalog) == 0
        assert list(catalog) == []

    def test_entries_view_is_read_only(self) -> None:
        catalog = SchemaCatalog({"date": SchemaEntry(canonical_name="date")})
        with pytest.raises(TypeError):
            catalog.entries["x"] = SchemaEntry(canonical_name="x")  # type: ignore[index]

    def test_required_entries(self) -> None:
        catalog = SchemaCatalog(
            {
                "a": SchemaEntry(canonical_name="a", required=True),
                "b": SchemaEntry(canonical_name="b"),
                "c": SchemaEntry(canonical_name="c", required=True),
            }
        )
        assert [e.canonical_name for e in catalog.required_entries()] == ["a", "c"]
