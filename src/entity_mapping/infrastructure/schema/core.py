"""Core field storage types for the table mapping.

The mapping only needs four capabilities from a field storage definition, so
the entity field subsystem is described here as a Protocol. ``FieldStorageDef``
is the concrete implementation used by the layout loader and by callers that
have no richer field objects of their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Protocol,
    Sequence,
    Tuple,
    Union,
    runtime_checkable,
)

ColumnSpec = Union[Mapping[str, Any], Sequence[str]]


@runtime_checkable
class FieldStorageDefinition(Protocol):
    """Capabilities consumed from a field storage definition."""

    def get_name(self) -> str: ...

    def is_base_field(self) -> bool: ...

    def get_columns(self) -> ColumnSpec: ...

    def has_custom_storage(self) -> bool: ...


@dataclass(frozen=True)
class FieldStorageDef:
    """Storage definition of a single entity field.

    ``columns`` lists the property names the field decomposes into, in the
    order they are stored. ``base_field`` distinguishes fields shared by every
    bundle from bundle-specific ones.
    """

    name: str
    columns: Tuple[str, ...] = ()
    base_field: bool = True
    custom_storage: bool = False

    def __post_init__(self) -> None:
        # Accept any sequence of names; store a tuple so the definition hashes
        object.__setattr__(self, "columns", tuple(self.columns))

    def get_name(self) -> str:
        return self.name

    def is_base_field(self) -> bool:
        return self.base_field

    def get_columns(self) -> List[str]:
        return list(self.columns)

    def has_custom_storage(self) -> bool:
        return self.custom_storage


def property_names(storage_definition: FieldStorageDefinition) -> List[str]:
    """Return the declared property names of a field in declared order.

    ``get_columns()`` may return either a sequence of names or a mapping keyed
    by property name (column schema as values); both iterate over the names.
    """
    return [str(name) for name in storage_definition.get_columns()]


def index_definitions(
    definitions: Union[
        Mapping[str, FieldStorageDefinition], Iterable[FieldStorageDefinition], None
    ],
) -> Dict[str, FieldStorageDefinition]:
    """Key storage definitions by field name."""
    if definitions is None:
        return {}
    if isinstance(definitions, Mapping):
        return dict(definitions)
    return {definition.get_name(): definition for definition in definitions}


__all__ = [
    "ColumnSpec",
    "FieldStorageDefinition",
    "FieldStorageDef",
    "property_names",
    "index_definitions",
]
