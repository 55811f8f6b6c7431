"""note_runtime package

Shared runtime library for command-line tools that talk to devices and the
cloud service.

Purpose:
    Provide the error keyword taxonomy: machine-readable keywords such as
    ``{timeout}`` embedded in free-text error messages, the registry mapping
    each keyword to an HTTP-style status, and a codec that recovers status and
    display text from an error string after it has crossed a process or
    network boundary.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`NoteError`, :class:`ErrorClass`
    - Registry: :class:`KeywordRegistry`, :func:`get_registry`, :func:`register`
    - Codec: :func:`contains_keyword`, :func:`resolve_status`,
      :func:`strip_keywords`, :func:`to_display_string`,
      :func:`build_minimal_payload`
    - Keyword constants via ``note_runtime.base.errors``

Example:
    >>> from note_runtime import resolve_status, strip_keywords
    >>> resolve_status("request failed {timeout}")
    408
    >>> strip_keywords("request failed {timeout}")
    'request failed'
"""

from .base.errors import (
    ErrorClass,
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
    parse_minimal_payload,
    register,
    resolve_status,
    strip_keywords,
    to_display_string,
    wrap_exception,
)
from .base.resilience import with_error_keywords

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "NoteError",
    "ErrorClass",
    # Registry
    "KeywordRegistry",
    "build_default_registry",
    "get_registry",
    "register",
    # Codec
    "ErrorTextCodec",
    "append_keyword",
    "build_minimal_payload",
    "classify_message",
    "contains_keyword",
    "parse_minimal_payload",
    "resolve_status",
    "strip_keywords",
    "to_display_string",
    # Producers
    "keyword_for_exception",
    "wrap_exception",
    "with_error_keywords",
]

