"""
Structured error exception type.

`NoteError` carries a human-readable message and an optional error keyword.
Its string form is the wire representation ``"<message> <keyword>"``, so the
keyword survives any boundary that only preserves text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .codec import append_keyword, classify_message, resolve_status, strip_keywords
from .error_class import ErrorClass


@dataclass
class NoteError(Exception):
    """Error with an embedded, machine-readable keyword.

    Attributes:
        message: Human-readable description.
        keyword: Optional error keyword such as ``"{timeout}"``.
        raw: Optional original exception for diagnostics.
    """

    message: str
    keyword: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:
        if self.keyword is None:
            return self.message
        return append_keyword(self.message, self.keyword)

    @property
    def status(self) -> int:
        """Transport status resolved from the wire form."""
        return resolve_status(str(self))

    @property
    def clean_message(self) -> str:
        """Wire form with all keywords removed, for display."""
        return strip_keywords(str(self))

    @property
    def error_class(self) -> ErrorClass:
        return classify_message(str(self))


__all__ = ["NoteError"]
