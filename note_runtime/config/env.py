"""note_runtime.config.env
=======================

Environment variable names and small parsing helpers.

Purpose
-------
- Single source of truth for the environment variables read by this package.
- Lenient parsers for level and boolean values that fall back to a default
  instead of raising.

Failure Modes
-------------
- Helpers never raise on unset or malformed values; the caller's default is
  returned.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "NOTE_LOG_LEVEL"
LOG_JSON_ENV = "NOTE_LOG_JSON"
LOG_FILE_ENV = "NOTE_LOG_FILE"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_TRUE = {"1", "t", "true", "y", "yes", "on"}
_FALSE = {"0", "f", "false", "n", "no", "off"}


def parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Parse a logging level name into its integer constant.

    Accepts DEBUG, INFO, WARN, WARNING, ERROR and CRITICAL case-insensitively.
    Falls back to ``default`` on empty or unknown values.
    """
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def parse_bool(value: Optional[str], default: bool) -> bool:
    """Parse common truthy/falsey strings; ``default`` when unset or unrecognised."""
    if value is None:
        return default
    val = value.strip().lower()
    if val in _TRUE:
        return True
    return False if val in _FALSE else default


def env_str(name: str) -> Optional[str]:
    """Return a stripped environment value, or ``None`` when unset or blank."""
    raw = os.getenv(name)
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


__all__ = [
    "LOG_LEVEL_ENV",
    "LOG_JSON_ENV",
    "LOG_FILE_ENV",
    "parse_level",
    "parse_bool",
    "env_str",
]
