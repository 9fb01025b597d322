"""Shared pytest fixtures for entity_mapping tests."""

from __future__ import annotations

from typing import Generator

import pytest

from entity_mapping.config.settings import get_settings
from entity_mapping.infrastructure.schema import FieldStorageDef
# Imported for its side effect: JSON structlog output that caplog tests parse
from entity_mapping.utils import logging as _structured_logging  # noqa: F401

SETTINGS_ENV_VARS = (
    "EMAP_RESERVED_COLUMNS",
    "EMAP_MAPPING_CONFIG",
    "LOG_LEVEL",
    "LOG_TO_FILE",
    "LOG_FILE_DIR",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate every test from ambient EMAP_* configuration."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def node_definitions() -> dict[str, FieldStorageDef]:
    """Single-column and multi-column base field definitions."""
    return {
        "id": FieldStorageDef("id", ["value"]),
        "name": FieldStorageDef("name", ["value"]),
        "type": FieldStorageDef("type", ["value"]),
        "description": FieldStorageDef("description", ["value", "format"]),
        "owner": FieldStorageDef("owner", ["target_id", "target_revision_id"]),
    }
