"""sccdag runtime configuration helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

_LOG_LEVEL_ENV = "SCCDAG_LOG_LEVEL"
_DATA_DIR_ENV = "SCCDAG_DATA_DIR"
_DEFAULT_INPUT_ENV = "SCCDAG_DEFAULT_INPUT"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_DATA_DIR = "data"
DEFAULT_INPUT = "tasks.json"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

LOGGER = logging.getLogger(__name__)


def _env_value(env_name: str) -> str | None:
    value = os.getenv(env_name)
    if not value:
        return None
    return value.strip() or None


def resolve_log_level(preferred: str | None = None) -> int:
    """Resolve the log level requested by CLI/env, falling back to WARNING."""

    name = (preferred or _env_value(_LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def resolve_data_dir(preferred: str | Path | None = None) -> Path:
    """Directory scanned by batch runs."""

    value = preferred or _env_value(_DATA_DIR_ENV) or DEFAULT_DATA_DIR
    path = Path(value)
    LOGGER.debug("resolve_data_dir preferred=%s env=%s resolved=%s", preferred, _env_value(_DATA_DIR_ENV), path)
    return path


def resolve_default_input(preferred: str | Path | None = None) -> Path:
    """Dataset analysed when no input path is given."""

    value = preferred or _env_value(_DEFAULT_INPUT_ENV) or DEFAULT_INPUT
    return Path(value)


def configure_logging(preferred: str | None = None) -> int:
    level = resolve_log_level(preferred)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    return level


__all__ = [
    "resolve_log_level",
    "resolve_data_dir",
    "resolve_default_input",
    "configure_logging",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_DATA_DIR",
    "DEFAULT_INPUT",
    "_LOG_LEVEL_ENV",
    "_DATA_DIR_ENV",
    "_DEFAULT_INPUT_ENV",
]
