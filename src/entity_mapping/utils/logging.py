"""Structured logging using structlog.

Configured once on import:
- ISO-8601 timestamps
- Logger name and level on every event
- JSON rendering
- stdout output, plus a daily rotating file when LOG_TO_FILE is enabled

Configuration comes from entity_mapping.config.settings (LOG_LEVEL,
LOG_TO_FILE, LOG_FILE_DIR).

Usage:
    >>> from entity_mapping.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("table_mapping.loaded", table_count=3)
"""

import logging
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.types import Processor

from entity_mapping.config.settings import Settings, get_settings


def _get_log_level(settings: Settings) -> int:
    return getattr(logging, settings.LOG_LEVEL, logging.INFO)


def _get_log_file_path(settings: Settings) -> Path:
    """Get the log file path with date-based naming."""
    log_dir = Path(settings.LOG_FILE_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: entity-mapping-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"entity-mapping-{date_str}.log"


def _configure_structlog() -> None:
    settings = get_settings()
    level = _get_log_level(settings)

    logging.basicConfig(format="%(message)s", level=level, handlers=[])

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    logging.root.addHandler(stdout_handler)

    if settings.LOG_TO_FILE:
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path(settings)),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger for the given module name."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """
    Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(entity_type="node", config="layout.yml")
        >>> logger.info("table_mapping.table_registered", table="node")
    """
    return structlog.get_logger().bind(**kwargs)
