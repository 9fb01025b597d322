"""Configuration management for entity_mapping.

Usage:
    >>> from entity_mapping.config import get_settings, load_table_mapping
    >>> settings = get_settings()
    >>> mapping = load_table_mapping(settings.mapping_config)
"""

from entity_mapping.config.settings import Settings, get_settings
from entity_mapping.config.schema import (
    FieldConfig,
    MappingConfigError,
    TableConfig,
    TableMappingConfig,
)
from entity_mapping.config.mapping_loader import (
    build_table_mapping,
    load_table_mapping,
    parse_table_mapping_config,
)

__all__ = [
    "Settings",
    "get_settings",
    "FieldConfig",
    "TableConfig",
    "TableMappingConfig",
    "MappingConfigError",
    "build_table_mapping",
    "load_table_mapping",
    "parse_table_mapping_config",
]
