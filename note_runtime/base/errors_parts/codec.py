"""
Error text codec: interpret error strings that carry embedded keywords.

Only a string survives the trip across a process or network boundary, so all
structure is recovered by scanning text:

- ``contains_keyword``: literal substring test for a keyword.
- ``resolve_status``: status of the leftmost ``{...}`` span, looked up in the
  keyword registry (200 for an empty message, 500 when unstructured or unknown).
- ``strip_keywords``: remove every ``{...}`` span for display to a person.
- ``to_display_string``: render any error value, ``""`` for no error.
- ``append_keyword``: producer-side helper that tags a message with a keyword.
- ``classify_message``: place a message in the :class:`ErrorClass` taxonomy.

No operation raises. Malformed or partially delimited text is treated as an
unclassified error and degrades to a default value.
"""
from __future__ import annotations

from http import HTTPStatus
from typing import Any, Optional

from ..logging import get_logger
from .error_class import ErrorClass
from .keywords import KEYWORD_CLOSE, KEYWORD_OPEN
from .registry import KeywordRegistry, get_registry

logger = get_logger("note.errors.codec")

STATUS_OK = int(HTTPStatus.OK)
STATUS_INTERNAL_ERROR = int(HTTPStatus.INTERNAL_SERVER_ERROR)


def to_display_string(err: Any) -> str:
    """Return the text of any error value, or ``""`` when there is no error.

    Accepts strings, exceptions or any other object. If the object's own
    ``__str__`` fails, a ``<unprintable TypeName>`` placeholder is returned.
    """
    if err is None:
        return ""
    if isinstance(err, str):
        return err
    try:
        return str(err)
    except Exception as exc:  # noqa: BLE001 - rendering must not become a new failure
        logger.debug("Error value could not be rendered", extra={"type": type(err).__name__, "cause": repr(exc)})
        return f"<unprintable {type(err).__name__}>"


def append_keyword(message: Any, keyword: str) -> str:
    """Tag ``message`` with ``keyword`` in the conventional ``"<text> <keyword>"`` form."""
    text = to_display_string(message)
    return f"{text} {keyword}" if text else keyword


def _find_span(text: str, start_at: int = 0) -> tuple[int, int]:
    """Return ``(open, close)`` indexes of the first delimited span, ``-1`` if absent."""
    start = text.find(KEYWORD_OPEN, start_at)
    if start == -1:
        return -1, -1
    return start, text.find(KEYWORD_CLOSE, start + len(KEYWORD_OPEN))


class ErrorTextCodec:
    """Codec bound to a keyword registry.

    Parameters:
        registry: Registry used for resolution. When ``None`` the process-wide
            registry from :func:`get_registry` is used at call time.
    """

    def __init__(self, registry: Optional[KeywordRegistry] = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> KeywordRegistry:
        return self._registry if self._registry is not None else get_registry()

    def contains_keyword(self, message: Any, keyword: str) -> bool:
        """True when the literal ``keyword`` occurs in the message text."""
        if message is None:
            return False
        return keyword in to_display_string(message)

    def leading_keyword(self, message: Any) -> Optional[str]:
        """Return the leftmost ``{...}`` span, registered or not, or ``None``."""
        text = to_display_string(message)
        start, end = _find_span(text)
        if start == -1 or end == -1:
            return None
        return text[start : end + len(KEYWORD_CLOSE)]

    def resolve_status(self, message: Any) -> int:
        """Resolve the transport status carried by an error message.

        Rules:
            1. Empty (or ``None``) message: 200, there is no error.
            2. The candidate is the text from the first opening delimiter
               through the first closing delimiter after it, inclusive.
            3. A registered candidate yields its status; no candidate or an
               unregistered one yields 500.

        When several keywords are present only the leftmost is used.
        """
        text = to_display_string(message)
        if not text:
            return STATUS_OK
        candidate = self.leading_keyword(text)
        if candidate is None:
            return STATUS_INTERNAL_ERROR
        status = self.registry.lookup(candidate)
        if status is None:
            logger.debug("Unregistered error keyword", extra={"keyword": candidate})
            return STATUS_INTERNAL_ERROR
        return status

    def classify(self, message: Any) -> ErrorClass:
        """Place a message in the taxonomy: no error, classified or unclassified."""
        text = to_display_string(message)
        if not text:
            return ErrorClass.NONE
        candidate = self.leading_keyword(text)
        if candidate is not None and candidate in self.registry:
            return ErrorClass.CLASSIFIED
        return ErrorClass.UNCLASSIFIED

    def strip_keywords(self, message: Any) -> str:
        """Remove all keyword spans from a message for display.

        Each ``{...}`` span is removed together with exactly one following
        space. A span removed at the very end of the text takes one preceding
        space with it instead, so ``"request failed {timeout}"`` becomes
        ``"request failed"``. An opening delimiter with no closing delimiter
        after it ends the scan; the remainder is kept verbatim.
        """
        rest = to_display_string(message)
        cleaned = ""
        while True:
            start, end = _find_span(rest)
            if start == -1:
                return cleaned + rest
            if end == -1:
                logger.debug("Unbalanced keyword delimiter", extra={"remainder": rest[start:]})
                return cleaned + rest
            cleaned += rest[:start]
            rest = rest[end + len(KEYWORD_CLOSE) :]
            if rest.startswith(" "):
                rest = rest[1:]
            elif not rest and cleaned.endswith(" "):
                cleaned = cleaned[:-1]


_DEFAULT_CODEC = ErrorTextCodec()


def contains_keyword(message: Any, keyword: str) -> bool:
    return _DEFAULT_CODEC.contains_keyword(message, keyword)


def leading_keyword(message: Any) -> Optional[str]:
    return _DEFAULT_CODEC.leading_keyword(message)


def resolve_status(message: Any) -> int:
    return _DEFAULT_CODEC.resolve_status(message)


def strip_keywords(message: Any) -> str:
    return _DEFAULT_CODEC.strip_keywords(message)


def classify_message(message: Any) -> ErrorClass:
    return _DEFAULT_CODEC.classify(message)


__all__ = [
    "STATUS_OK",
    "STATUS_INTERNAL_ERROR",
    "ErrorTextCodec",
    "append_keyword",
    "classify_message",
    "contains_keyword",
    "leading_keyword",
    "resolve_status",
    "strip_keywords",
    "to_display_string",
]
