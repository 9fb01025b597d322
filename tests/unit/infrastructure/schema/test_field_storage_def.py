"""Unit tests for field storage definition types."""

from __future__ import annotations

import dataclasses

import pytest

from entity_mapping.infrastructure.schema import FieldStorageDef, FieldStorageDefinition
from entity_mapping.infrastructure.schema.core import index_definitions, property_names

pytestmark = pytest.mark.unit


class TestFieldStorageDef:
    """Tests for the concrete FieldStorageDef dataclass."""

    def test_defaults(self) -> None:
        definition = FieldStorageDef("title", ["value"])

        assert definition.get_name() == "title"
        assert definition.get_columns() == ["value"]
        assert definition.is_base_field() is True
        assert definition.has_custom_storage() is False

    def test_bundle_and_custom_storage_flags(self) -> None:
        definition = FieldStorageDef(
            "path", ["alias", "pid"], base_field=False, custom_storage=True
        )

        assert definition.is_base_field() is False
        assert definition.has_custom_storage() is True

    def test_satisfies_protocol(self) -> None:
        assert isinstance(FieldStorageDef("title", ["value"]), FieldStorageDefinition)

    def test_is_frozen(self) -> None:
        definition = FieldStorageDef("title", ["value"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            definition.name = "other"  # type: ignore[misc]

    def test_get_columns_returns_copy(self) -> None:
        definition = FieldStorageDef("description", ["value", "format"])
        definition.get_columns().append("summary")

        assert definition.get_columns() == ["value", "format"]

    def test_list_columns_stored_as_tuple(self) -> None:
        definition = FieldStorageDef("description", ["value", "format"])

        assert definition.columns == ("value", "format")
        assert definition == FieldStorageDef("description", ("value", "format"))

    def test_hashable(self) -> None:
        title = FieldStorageDef("title", ["value"])
        body = FieldStorageDef("body", ["value", "format"], base_field=False)

        assert hash(title) == hash(FieldStorageDef("title", ["value"]))
        assert {title, body, FieldStorageDef("title", ["value"])} == {title, body}
        assert {title: "node_field_data"}[title] == "node_field_data"


class TestHelpers:
    """Tests for property_names and index_definitions."""

    def test_property_names_preserve_order(self) -> None:
        definition = FieldStorageDef("owner", ["target_id", "target_revision_id"])
        assert property_names(definition) == ["target_id", "target_revision_id"]

    def test_index_definitions_from_iterable(self) -> None:
        title = FieldStorageDef("title", ["value"])
        body = FieldStorageDef("body", ["value", "format"], base_field=False)

        assert index_definitions([title, body]) == {"title": title, "body": body}

    def test_index_definitions_from_mapping(self) -> None:
        title = FieldStorageDef("title", ["value"])
        assert index_definitions({"title": title}) == {"title": title}

    def test_index_definitions_none(self) -> None:
        assert index_definitions(None) == {}
