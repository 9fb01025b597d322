"""
Schema validation for the table layout configuration.

Pydantic models describing the YAML layout file consumed by
``entity_mapping.config.mapping_loader``:

    fields:
      description: {columns: [value, format]}
      body: {columns: [value, summary], base_field: false}
    tables:
      node_field_data:
        field_names: [description]
        extra_columns: [default_langcode]
"""

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from entity_mapping.infrastructure.schema import FieldStorageDef


class MappingConfigError(Exception):
    """Raised when the table layout configuration cannot be loaded."""

    pass


class FieldConfig(BaseModel):
    """Schema for a single field storage definition."""

    columns: List[str] = Field(
        ..., min_length=1, description="Property names in storage order"
    )
    base_field: bool = Field(True, description="Shared by every bundle")
    custom_storage: bool = Field(
        False, description="Field manages its own persistence"
    )

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, value: List[str]) -> List[str]:
        if any(not column.strip() for column in value):
            raise ValueError("column names must be non-empty")
        if len(set(value)) != len(value):
            raise ValueError(f"duplicate column names: {value}")
        return value


class TableConfig(BaseModel):
    """Schema for the contents of one table."""

    field_names: List[str] = Field(
        default_factory=list, description="Fields stored in the table"
    )
    extra_columns: List[str] = Field(
        default_factory=list, description="Columns not derived from fields"
    )


class TableMappingConfig(BaseModel):
    """Schema for the complete layout file."""

    fields: Dict[str, FieldConfig] = Field(
        default_factory=dict, description="Field storage definitions by field name"
    )
    tables: Dict[str, TableConfig] = Field(
        default_factory=dict, description="Table contents in registration order"
    )

    @field_validator("fields", "tables")
    @classmethod
    def validate_names(cls, value: Dict[str, object]) -> Dict[str, object]:
        if any(not name.strip() for name in value):
            raise ValueError("names must be non-empty")
        return value

    def storage_definitions(self) -> List[FieldStorageDef]:
        """Build a storage definition for every configured field."""
        return [
            FieldStorageDef(
                name=name,
                columns=tuple(config.columns),
                base_field=config.base_field,
                custom_storage=config.custom_storage,
            )
            for name, config in self.fields.items()
        ]
