"""
note_runtime base package

Exports the error keyword taxonomy and the structured logging helpers used
by tools built on this library.

- Errors: keyword registry, error text codec, minimal payloads, NoteError
- Logging: shared ``note`` logger, JSON formatter, log context
- Resilience: decorator tagging arbitrary failures with error keywords
"""

from .errors import (
    ErrorClass,
    ErrorTextCodec,
    KeywordRegistry,
    NoteError,
    build_minimal_payload,
    classify_message,
    contains_keyword,
    get_registry,
    resolve_status,
    strip_keywords,
    to_display_string,
)
from .logging import LogContext, configure_logger, get_logger, log_event
from .resilience import with_error_keywords

__all__ = [
    # Errors
    "ErrorClass",
    "ErrorTextCodec",
    "KeywordRegistry",
    "NoteError",
    "build_minimal_payload",
    "classify_message",
    "contains_keyword",
    "get_registry",
    "resolve_status",
    "strip_keywords",
    "to_display_string",
    # Logging
    "LogContext",
    "configure_logger",
    "get_logger",
    "log_event",
    # Resilience
    "with_error_keywords",
]
