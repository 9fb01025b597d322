"""Shared naming constants for the table mapping layer."""

# Columns that are never prefixed with the field name
RESERVED_COLUMNS = ("deleted",)

# Separator between field name and property name for multi-column fields
BASE_FIELD_SEPARATOR = "__"
BUNDLE_FIELD_SEPARATOR = "_"
