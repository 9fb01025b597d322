"""Unit tests for environment-based settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from entity_mapping.config.settings import Settings, get_settings

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    settings = Settings()

    assert settings.reserved_columns == ["deleted"]
    assert settings.mapping_config == "./config/table_mapping.yml"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_TO_FILE is False


def test_reserved_columns_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMAP_RESERVED_COLUMNS", '["deleted", " langcode "]')

    assert Settings().reserved_columns == ["deleted", "langcode"]


def test_blank_reserved_column_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMAP_RESERVED_COLUMNS", '["deleted", "  "]')

    with pytest.raises(ValidationError):
        Settings()


def test_mapping_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMAP_MAPPING_CONFIG", "/etc/layouts/node.yml")

    assert Settings().mapping_config == "/etc/layouts/node.yml"


def test_log_level_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings().LOG_LEVEL == "DEBUG"


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("EMAP_MAPPING_CONFIG", "other.yml")

    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().mapping_config == "other.yml"
