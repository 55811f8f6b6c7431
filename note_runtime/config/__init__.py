"""Runtime configuration for note_runtime.

Goals
-----
* Keep configuration limited to what this library itself needs: logging.
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Environment variables (``NOTE_LOG_LEVEL``, ``NOTE_LOG_JSON``, ``NOTE_LOG_FILE``)
    3. In-code overrides passed to the helper

The error keyword registry and codec read no configuration at all; settings
files, command-line flags and credential storage belong to the tools that
embed this library.

Public API
----------
* get_logging_settings(overrides: dict | None = None) -> LoggingSettings
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .env import (
    LOG_FILE_ENV,
    LOG_JSON_ENV,
    LOG_LEVEL_ENV,
    env_str,
    parse_bool,
    parse_level,
)


@dataclass(frozen=True)
class LoggingSettings:
    """Resolved logging settings.

    Attributes:
        level: Numeric logging level for the shared ``note`` logger.
        json_mode: Emit JSON lines when ``True``; plain text otherwise.
        file_path: Optional path for a rotating log file.
    """

    level: int = logging.INFO
    json_mode: bool = True
    file_path: Optional[str] = None


DEFAULTS = LoggingSettings()


def get_logging_settings(overrides: Optional[Dict[str, Any]] = None) -> LoggingSettings:
    """Return logging settings merged from defaults, environment and overrides.

    Merge order (later wins): defaults -> env vars -> overrides. Values of
    ``None`` in ``overrides`` are ignored.
    """
    settings = replace(
        DEFAULTS,
        level=parse_level(env_str(LOG_LEVEL_ENV), default=DEFAULTS.level),
        json_mode=parse_bool(env_str(LOG_JSON_ENV), default=DEFAULTS.json_mode),
        file_path=env_str(LOG_FILE_ENV) or DEFAULTS.file_path,
    )
    if overrides:
        settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    return settings


__all__ = ["LoggingSettings", "DEFAULTS", "get_logging_settings"]
