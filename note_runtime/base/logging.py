"""Structured logging utilities shared by note_runtime and the tools embedding it.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup scattered across modules.

All package loggers are children of the shared ``note`` logger, which owns a
single managed stderr handler. Defaults come from
:func:`note_runtime.config.get_logging_settings` (``NOTE_LOG_LEVEL``,
``NOTE_LOG_JSON``, ``NOTE_LOG_FILE``).
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from ..config import get_logging_settings
from ..config.env import LOG_LEVEL_ENV, env_str, parse_level
from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "note"

_BASE_LOGGER_ATTR = "_note_logger_initialized"
_CHILD_LOGGER_ATTR = "_note_child_configured"
_CONSOLE_HANDLER_ATTR = "_note_console_handler"
_FILE_HANDLER_ATTR = "_note_file_handler"

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _file_handler(abs_path: str, json_mode: bool, level: int) -> logging.Handler:
    parent = os.path.dirname(abs_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    # 10MB x 5 backups
    fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setLevel(level)
    fh.setFormatter(_formatter(json_mode))
    return fh


def _ensure_base_logger(json_mode: bool, level: int, file_path: Optional[str] = None) -> logging.Logger:
    """Initialize (once) and return the shared ``note`` logger.

    On later calls the managed console handler is re-pointed at the current
    ``sys.stderr`` and its formatter is switched to match ``json_mode``. An
    explicit ``NOTE_LOG_LEVEL`` always wins over the level already set.
    """
    logger = logging.getLogger(BASE_LOGGER_NAME)
    env_level = env_str(LOG_LEVEL_ENV)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if env_level is not None:
            logger.setLevel(parse_level(env_level, default=logger.level))
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                logger.addHandler(_console_handler(json_mode, logger.level))
                continue
            existing.setLevel(logger.level)
            if isinstance(existing, logging.StreamHandler):
                existing.setStream(sys.stderr)
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_formatter(json_mode))
        return logger

    logger.setLevel(level)
    logger.handlers[:] = [_console_handler(json_mode, level)]
    if file_path:
        logger.addHandler(_file_handler(os.path.abspath(os.path.expanduser(file_path)), json_mode, level))
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(
    name: str = BASE_LOGGER_NAME,
    json_mode: Optional[bool] = None,
    level: Optional[int] = None,
) -> logging.Logger:
    """Return a logger attached to the shared ``note`` handler.

    ``json_mode`` and ``level`` default to the environment-derived settings.
    Child loggers carry no handlers of their own and propagate to the base.
    """
    settings = get_logging_settings()
    base_logger = _ensure_base_logger(
        json_mode=settings.json_mode if json_mode is None else json_mode,
        level=settings.level if level is None else level,
        file_path=settings.file_path,
    )
    if name == BASE_LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    # Drop previously managed console handlers to avoid duplicate emissions.
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    setattr(logger, _CHILD_LOGGER_ATTR, True)
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
    logger_name: str = BASE_LOGGER_NAME,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Numeric level or name (e.g. ``"DEBUG"``). ``None`` keeps the current level.
    file_path: Optional[str]
        When given, attach (or reuse) a managed rotating file handler writing
        to this path. When ``None``, any managed file handler is removed.
    json_mode: bool
        Formatter used for the file handler.
    logger_name: str
        Logger to configure; defaults to the shared ``note`` logger.

    Returns
    -------
    logging.Logger
        The configured logger. Handlers not managed by this module are left alone.
    """
    if not getattr(logging.getLogger(BASE_LOGGER_NAME), _BASE_LOGGER_ATTR, False):  # pragma: no cover - init path
        get_logger(logger_name)
    logger = logging.getLogger(logger_name)

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):
                h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):
                h.close()

    if existing is None:
        logger.addHandler(_file_handler(abs_path, json_mode, logger.level))
    else:
        existing.setFormatter(_formatter(json_mode))
        existing.setLevel(logger.level)

    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit one structured event as a single JSON message.

    Parameters
    ----------
    logger: logging.Logger
        Logger obtained from :func:`get_logger`.
    event: str
        Dotted event name (e.g. ``error.wrapped``).
    ctx: LogContext | None
        Device/product context merged shallowly into the payload.
    level: int
        Logging level for the record.
    keep_none: bool
        Preserve keys whose value is ``None`` (encoded as ``null``).
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
