"""
Infrastructure Layer

Components:
- schema: Table mapping, field storage definitions and column naming
- constants: Naming separators and reserved column names

Usage:
    from entity_mapping.infrastructure.schema import FieldStorageDef, TableMapping
"""

__all__: list[str] = []
