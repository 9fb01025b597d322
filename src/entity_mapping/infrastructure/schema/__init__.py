"""Entity table mapping: field storage definitions and column naming.

Lives under `infrastructure/` so storage and query-building code can depend on
table and column names without importing the entity field subsystem.
"""

from .core import FieldStorageDef, FieldStorageDefinition
from .exceptions import ColumnResolutionError
from .table_mapping import TableMapping

__all__ = [
    "FieldStorageDefinition",
    "FieldStorageDef",
    "ColumnResolutionError",
    "TableMapping",
]
