from __future__ import annotations

import functools
import logging
from typing import Callable, Optional, TypeVar

from ..errors import NoteError, keyword_for_exception, wrap_exception
from ..logging import get_logger, log_event

T = TypeVar("T")

logger = get_logger("note.errors.handling")


def with_error_keywords(default_keyword: Optional[str] = None) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Re-raise failures of the wrapped callable as keyword-tagged ``NoteError``.

    ``NoteError`` passes through untouched. Any other ``Exception`` is wrapped
    with the keyword chosen by ``keyword_for_exception``, falling back to
    ``default_keyword``, and chained to the original.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except NoteError:
                raise
            except Exception as e:
                err = wrap_exception(e, keyword_for_exception(e) or default_keyword)
                log_event(
                    logger,
                    "error.wrapped",
                    level=logging.DEBUG,
                    func=func.__qualname__,
                    exc_type=type(e).__name__,
                    keyword=err.keyword,
                    status=err.status,
                )
                raise err from e

        return wrapper

    return decorator


__all__ = ["with_error_keywords"]
