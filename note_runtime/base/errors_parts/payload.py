"""
Minimal error payload: ``{"err":"<message>"}``.

Used when a full structured response cannot be built. The payload carries a
single ``err`` field combining an optional caller message with an optional
inner error as ``"message: inner"``. Consumers treat it as best-effort JSON,
not a validated schema; :func:`parse_minimal_payload` reads the ``err`` field
of any JSON object and ignores everything else.

External dependencies: Pydantic (model + JSON serialization).
"""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from ..logging import get_logger
from .codec import to_display_string

logger = get_logger("note.errors.payload")


class ErrorPayload(BaseModel):
    """Single-field error envelope."""

    model_config = ConfigDict(extra="ignore")

    err: str = ""


def _combine(message: Optional[str], inner_err: Any) -> str:
    inner = to_display_string(inner_err)
    if message and inner:
        return f"{message}: {inner}"
    return message or inner


def build_minimal_payload(message: Optional[str] = None, inner_err: Any = None) -> bytes:
    """Serialize a payload carrying only an error field.

    Parameters:
        message: Optional caller-supplied description.
        inner_err: Optional underlying error (exception, string or ``None``).

    Returns:
        Compact UTF-8 JSON bytes such as ``b'{"err":"open failed: {io}"}'``.
    """
    return ErrorPayload(err=_combine(message, inner_err)).model_dump_json().encode("utf-8")


def parse_minimal_payload(data: Union[bytes, bytearray, str, None]) -> Optional[str]:
    """Best-effort read of the ``err`` field from a JSON response body.

    Returns ``None`` when ``data`` is empty, is not a JSON object, or has no
    string ``err`` field. Never raises.
    """
    if not data:
        return None
    try:
        parsed = ErrorPayload.model_validate_json(data)
    except ValidationError as exc:
        logger.debug("Unreadable error payload", extra={"errors": exc.error_count()})
        return None
    return parsed.err if "err" in parsed.model_fields_set else None


__all__ = ["ErrorPayload", "build_minimal_payload", "parse_minimal_payload"]
