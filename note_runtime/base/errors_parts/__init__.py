"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `note_runtime.base.errors` for the stable surface.
"""

from .error_class import ErrorClass
from .registry import (
    KeywordRegistry,
    build_default_registry,
    get_registry,
    register,
    reset_registry,
)
from .codec import (
    ErrorTextCodec,
    append_keyword,
    classify_message,
    contains_keyword,
    leading_keyword,
    resolve_status,
    strip_keywords,
    to_display_string,
)
from .payload import ErrorPayload, build_minimal_payload, parse_minimal_payload
from .note_error import NoteError
from .classification import keyword_for_exception, keyword_for_status, wrap_exception

__all__ = [
    "ErrorClass",
    "KeywordRegistry",
    "build_default_registry",
    "get_registry",
    "register",
    "reset_registry",
    "ErrorTextCodec",
    "append_keyword",
    "classify_message",
    "contains_keyword",
    "leading_keyword",
    "resolve_status",
    "strip_keywords",
    "to_display_string",
    "ErrorPayload",
    "build_minimal_payload",
    "parse_minimal_payload",
    "NoteError",
    "keyword_for_exception",
    "keyword_for_status",
    "wrap_exception",
]
