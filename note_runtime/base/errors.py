"""Error keyword taxonomy public surface.

This module re-exports the one-concern-per-file implementations under
``note_runtime.base.errors_parts`` to keep a stable import path. Keyword
constants live in ``note_runtime.base.errors_parts.keywords`` and are
re-exported here as well.
"""

from .errors_parts.keywords import *  # noqa: F401,F403
from .errors_parts.keywords import __all__ as _keyword_names
from .errors_parts import (
    ErrorClass,
    ErrorPayload,
    ErrorTextCodec,
    KeywordRegistry,
    NoteError,
    append_keyword,
    build_default_registry,
    build_minimal_payload,
    classify_message,
    contains_keyword,
    get_registry,
    keyword_for_exception,
    keyword_for_status,
    leading_keyword,
    parse_minimal_payload,
    register,
    reset_registry,
    resolve_status,
    strip_keywords,
    to_display_string,
    wrap_exception,
)

__all__ = [
    "ErrorClass",
    "ErrorPayload",
    "ErrorTextCodec",
    "KeywordRegistry",
    "NoteError",
    "append_keyword",
    "build_default_registry",
    "build_minimal_payload",
    "classify_message",
    "contains_keyword",
    "get_registry",
    "keyword_for_exception",
    "keyword_for_status",
    "leading_keyword",
    "parse_minimal_payload",
    "register",
    "reset_registry",
    "resolve_status",
    "strip_keywords",
    "to_display_string",
    "wrap_exception",
] + list(_keyword_names)
