"""Table mapping for entity field storage.

Records which tables exist for an entity type, which fields and extra columns
each table stores, and computes the SQL column name of every field property.

Column naming rules:
- Reserved property names (e.g. ``deleted``) are never prefixed.
- A field with a single property is stored in a column named after the field.
- Multi-property base fields use ``<field>__<property>``.
- Multi-property bundle fields use ``<field>_<property>``.

Fields with custom storage manage their own persistence and have no column
names; asking for one raises ``ColumnResolutionError``.

Usage:
    >>> mapping = TableMapping([FieldStorageDef("description", ["value", "format"])])
    >>> mapping.set_field_names("node", ["description"]).get_all_columns("node")
    ['description__value', 'description__format']
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import structlog

from entity_mapping.infrastructure.constants import (
    BASE_FIELD_SEPARATOR,
    BUNDLE_FIELD_SEPARATOR,
    RESERVED_COLUMNS,
)

from .core import FieldStorageDefinition, index_definitions, property_names
from .exceptions import ColumnResolutionError

logger = structlog.get_logger(__name__)


class TableMapping:
    """Maps entity fields onto SQL tables and columns.

    The storage definitions given at construction are only used as a source
    of per-field metadata when column names are resolved. Table contents are
    assigned by the storage layer with ``set_field_names`` and
    ``set_extra_columns``; assigning again replaces the previous list.
    """

    def __init__(
        self,
        storage_definitions: Union[
            Mapping[str, FieldStorageDefinition],
            Iterable[FieldStorageDefinition],
            None,
        ] = None,
        reserved_columns: Optional[Iterable[str]] = None,
    ):
        """
        Initialize the table mapping.

        Args:
            storage_definitions: Field storage definitions of the entity type,
                either keyed by field name or as a plain iterable.
            reserved_columns: Column names that bypass field-name prefixing.
                Defaults to ``RESERVED_COLUMNS``.
        """
        self._storage_definitions = index_definitions(storage_definitions)
        if reserved_columns is None:
            reserved_columns = RESERVED_COLUMNS
        self._reserved_columns: Tuple[str, ...] = tuple(
            dict.fromkeys(reserved_columns)
        )

        # Dicts keep first-registration order and double as ordered sets
        self._tables: Dict[str, None] = {}
        self._field_names: Dict[str, List[str]] = {}
        self._extra_columns: Dict[str, List[str]] = {}
        self._column_names: Dict[str, Dict[str, str]] = {}

    def set_field_names(
        self, table_name: str, field_names: Sequence[str]
    ) -> TableMapping:
        """
        Assign the fields stored in a table, replacing any previous assignment.

        Args:
            table_name: Name of the table
            field_names: Field names in storage order (not deduplicated)

        Returns:
            The mapping itself, for chained calls
        """
        self._register_table(table_name)
        self._field_names[table_name] = list(field_names)
        logger.debug(
            "table_mapping.field_names_set",
            table=table_name,
            field_count=len(self._field_names[table_name]),
        )
        return self

    def set_extra_columns(
        self, table_name: str, column_names: Sequence[str]
    ) -> TableMapping:
        """
        Assign the non-field columns of a table, replacing any previous assignment.

        Args:
            table_name: Name of the table
            column_names: Extra column names in storage order

        Returns:
            The mapping itself, for chained calls
        """
        self._register_table(table_name)
        self._extra_columns[table_name] = list(column_names)
        logger.debug(
            "table_mapping.extra_columns_set",
            table=table_name,
            column_count=len(self._extra_columns[table_name]),
        )
        return self

    def get_table_names(self) -> List[str]:
        """List every known table once, in order of first registration."""
        return list(self._tables)

    def get_field_names(self, table_name: str) -> List[str]:
        """List the field names stored in a table; empty for unknown tables."""
        return list(self._field_names.get(table_name, []))

    def get_extra_columns(self, table_name: str) -> List[str]:
        """List the extra columns of a table; empty for unknown tables."""
        return list(self._extra_columns.get(table_name, []))

    def get_all_columns(self, table_name: str) -> List[str]:
        """
        List every column of a table.

        Field columns come first, in field order and then property order,
        followed by the extra columns. Field names without a storage
        definition contribute no columns.

        Raises:
            ColumnResolutionError: If a field of the table has custom storage
        """
        columns: List[str] = []
        for field_name in self._field_names.get(table_name, []):
            storage_definition = self._storage_definitions.get(field_name)
            if storage_definition is None:
                logger.debug(
                    "table_mapping.field_definition_missing",
                    table=table_name,
                    field=field_name,
                )
                continue
            columns.extend(self.get_field_column_names(storage_definition).values())
        columns.extend(self._extra_columns.get(table_name, []))
        return columns

    def get_column_names(self, field_name: str) -> Dict[str, str]:
        """
        Map each property of a known field to its column name.

        Returns an empty dict when no storage definition exists for the field.
        """
        storage_definition = self._storage_definitions.get(field_name)
        if storage_definition is None:
            return {}
        return self.get_field_column_names(storage_definition)

    def get_field_column_names(
        self, storage_definition: FieldStorageDefinition
    ) -> Dict[str, str]:
        """
        Map each declared property of a field to its column name.

        Raises:
            ColumnResolutionError: If the field has custom storage
        """
        return {
            property_name: self.get_field_column_name(storage_definition, property_name)
            for property_name in property_names(storage_definition)
        }

    def get_field_column_name(
        self, storage_definition: FieldStorageDefinition, property_name: str
    ) -> str:
        """
        Resolve the SQL column name of one field property.

        Args:
            storage_definition: Storage definition of the field
            property_name: Name of the property (e.g. ``value``)

        Returns:
            Column name holding the property

        Raises:
            ColumnResolutionError: If the field has custom storage

        Examples:
            >>> mapping = TableMapping()
            >>> mapping.get_field_column_name(FieldStorageDef("id", ["value"]), "value")
            'id'
            >>> body = FieldStorageDef("body", ["value", "format"], base_field=False)
            >>> mapping.get_field_column_name(body, "format")
            'body_format'
            >>> mapping.get_field_column_name(body, "deleted")
            'deleted'
        """
        field_name = storage_definition.get_name()
        if storage_definition.has_custom_storage():
            logger.debug("table_mapping.custom_storage_field", field=field_name)
            raise ColumnResolutionError(field_name)

        cached = self._column_names.get(field_name, {}).get(property_name)
        if cached is not None:
            return cached

        column_name = self._generate_column_name(storage_definition, property_name)
        self._column_names.setdefault(field_name, {})[property_name] = column_name
        return column_name

    def get_reserved_columns(self) -> List[str]:
        """List the column names that are never prefixed with a field name."""
        return list(self._reserved_columns)

    def get_field_table_name(self, field_name: str) -> Optional[str]:
        """Return the first table (in registry order) storing the field, if any."""
        for table_name in self._tables:
            if field_name in self._field_names.get(table_name, []):
                return table_name
        return None

    def get_storage_definition(
        self, field_name: str
    ) -> Optional[FieldStorageDefinition]:
        """Return the storage definition the mapping was seeded with for a field."""
        return self._storage_definitions.get(field_name)

    def _register_table(self, table_name: str) -> None:
        if not table_name:
            raise ValueError("Table name must be a non-empty string")
        self._tables.setdefault(table_name, None)

    def _generate_column_name(
        self, storage_definition: FieldStorageDefinition, property_name: str
    ) -> str:
        if property_name in self._reserved_columns:
            return property_name

        field_name = storage_definition.get_name()
        if len(property_names(storage_definition)) == 1:
            return field_name

        if storage_definition.is_base_field():
            separator = BASE_FIELD_SEPARATOR
        else:
            separator = BUNDLE_FIELD_SEPARATOR
        return f"{field_name}{separator}{property_name}"


__all__ = ["TableMapping"]
