"""
YAML loader for table layout configurations.

Reads a layout file describing the field storage definitions of an entity
type and the contents of each of its tables, validates it against
``TableMappingConfig`` and returns a populated ``TableMapping``.

Behavior:
- Missing file: Raises MappingConfigError
- Empty file: Returns a mapping with no tables
- Invalid YAML or schema violations: Raises MappingConfigError with filename
- Tables are registered in file order, field names before extra columns
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import structlog
import yaml
from pydantic import ValidationError

from entity_mapping.config.schema import MappingConfigError, TableMappingConfig
from entity_mapping.config.settings import get_settings
from entity_mapping.infrastructure.schema import TableMapping

logger = structlog.get_logger(__name__)


def _read_yaml_file(file_path: Path) -> Dict[str, Any]:
    """
    Read the raw layout document.

    Args:
        file_path: Path to the YAML file.

    Returns:
        Parsed document; empty dict for an empty file.

    Raises:
        MappingConfigError: If the file is missing, unreadable or not a mapping.
    """
    if not file_path.exists():
        logger.error("mapping_loader.file_not_found", file_path=str(file_path))
        raise MappingConfigError(f"Table layout file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(
            "mapping_loader.yaml_parse_error",
            file_path=str(file_path),
            error=str(e),
        )
        raise MappingConfigError(f"Invalid YAML in {file_path}: {e}") from e

    if content is None:
        logger.debug("mapping_loader.empty_file", file_path=str(file_path))
        return {}

    if not isinstance(content, dict):
        logger.error(
            "mapping_loader.invalid_format",
            file_path=str(file_path),
            actual_type=type(content).__name__,
        )
        raise MappingConfigError(
            f"Invalid layout format in {file_path}: "
            f"expected dict, got {type(content).__name__}"
        )

    return content


def parse_table_mapping_config(
    content: Dict[str, Any], source: str = "<memory>"
) -> TableMappingConfig:
    """
    Validate a raw layout document.

    Raises:
        MappingConfigError: If the document does not match the schema.
    """
    try:
        return TableMappingConfig(**content)
    except ValidationError as e:
        logger.error(
            "mapping_loader.validation_failed",
            source=source,
            error_count=e.error_count(),
        )
        raise MappingConfigError(
            f"Table layout validation failed for {source}: {e}"
        ) from e


def build_table_mapping(
    config: TableMappingConfig,
    reserved_columns: Optional[Iterable[str]] = None,
) -> TableMapping:
    """
    Build a populated table mapping from a validated layout.

    Args:
        config: Validated layout configuration.
        reserved_columns: Reserved column override; the mapping default
            applies when omitted.

    Returns:
        TableMapping with every configured table registered.
    """
    table_mapping = TableMapping(config.storage_definitions(), reserved_columns)

    for table_name, table in config.tables.items():
        undefined = [name for name in table.field_names if name not in config.fields]
        if undefined:
            logger.warning(
                "mapping_loader.undefined_fields",
                table=table_name,
                fields=undefined,
            )
        table_mapping.set_field_names(table_name, table.field_names)
        table_mapping.set_extra_columns(table_name, table.extra_columns)

    return table_mapping


def load_table_mapping(
    config_path: Optional[Union[str, Path]] = None,
    reserved_columns: Optional[Iterable[str]] = None,
) -> TableMapping:
    """
    Load a table layout file into a TableMapping.

    Args:
        config_path: Layout file path. Defaults to the ``mapping_config``
            setting (EMAP_MAPPING_CONFIG).
        reserved_columns: Reserved column names. Defaults to the
            ``reserved_columns`` setting (EMAP_RESERVED_COLUMNS).

    Returns:
        Populated TableMapping.

    Raises:
        MappingConfigError: If the file is missing or invalid.

    Example:
        >>> mapping = load_table_mapping("config/table_mapping.yml")
        >>> mapping.get_column_names("description")
        {'value': 'description__value', 'format': 'description__format'}
    """
    if config_path is None or reserved_columns is None:
        settings = get_settings()
        if config_path is None:
            config_path = settings.mapping_config
        if reserved_columns is None:
            reserved_columns = settings.reserved_columns

    file_path = Path(config_path)
    content = _read_yaml_file(file_path)
    config = parse_table_mapping_config(content, source=str(file_path))
    table_mapping = build_table_mapping(config, reserved_columns)

    logger.info(
        "mapping_loader.loaded",
        file_path=str(file_path),
        field_count=len(config.fields),
        table_count=len(config.tables),
    )
    return table_mapping
