"""Error handling helpers for callers of the error keyword taxonomy."""

from .error_handling import with_error_keywords

__all__ = ["with_error_keywords"]
