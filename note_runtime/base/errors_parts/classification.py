"""
Classification helpers mapping exceptions and statuses to error keywords.

Producers use these to tag an arbitrary exception with the keyword its
consumers will resolve later: HTTP status extraction, a status to keyword
table, and exception-type rules for timeouts, transport and I/O failures.
"""
from __future__ import annotations

import json
from http import HTTPStatus
from typing import Dict, Optional

import httpx

from . import keywords as kw
from .codec import leading_keyword, to_display_string
from .note_error import NoteError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code`` (e.g. ``httpx.HTTPStatusError``)
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_STATUS_KEYWORDS: Dict[int, str] = {
    HTTPStatus.UNAUTHORIZED: kw.ERR_AUTH,
    HTTPStatus.FORBIDDEN: kw.ERR_ACCESS_DENIED,
    HTTPStatus.NOT_ACCEPTABLE: kw.ERR_INCOMPATIBLE,
    HTTPStatus.REQUEST_TIMEOUT: kw.ERR_TIMEOUT,
    HTTPStatus.GONE: kw.ERR_CLOSED,
    HTTPStatus.REQUEST_ENTITY_TOO_LARGE: kw.ERR_TOO_BIG,
    HTTPStatus.NOT_IMPLEMENTED: kw.ERR_REQ_NOT_SUPPORTED,
    HTTPStatus.BAD_GATEWAY: kw.ERR_CARD_IO,
    HTTPStatus.SERVICE_UNAVAILABLE: kw.ERR_NETWORK,
    HTTPStatus.GATEWAY_TIMEOUT: kw.ERR_INTERNAL_TIMEOUT,
}


def keyword_for_status(status: Optional[int]) -> Optional[str]:
    """Return the canonical keyword for a transport status, if it has one.

    Statuses shared by many keywords (400, 404, 409, 500) have no canonical
    keyword and yield ``None``.
    """
    if status is None:
        return None
    return _STATUS_KEYWORDS.get(int(status))


def keyword_for_exception(exc: BaseException) -> Optional[str]:
    """Choose the error keyword that describes ``exc``.

    Precedence:
        1. NoteError passthrough (explicit keyword, else embedded one).
        2. Timeouts (builtin and httpx).
        3. Connection failures (httpx transport errors, ``ConnectionError``).
        4. HTTP status mapping.
        5. JSON decoding failures.
        6. Remaining ``OSError`` as card/device I/O.
        7. ``None``.
    """
    if isinstance(exc, NoteError):
        return exc.keyword or leading_keyword(exc.message)
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return kw.ERR_TIMEOUT
    if isinstance(exc, httpx.ConnectError):
        return kw.ERR_HOST_UNREACHABLE
    if isinstance(exc, (httpx.TransportError, ConnectionError)):
        return kw.ERR_NETWORK
    if (keyword := keyword_for_status(_extract_status(exc))) is not None:
        return keyword
    if isinstance(exc, json.JSONDecodeError):
        return kw.ERR_JSON
    if isinstance(exc, OSError):
        return kw.ERR_CARD_IO
    return None


def wrap_exception(exc: BaseException, keyword: Optional[str] = None) -> NoteError:
    """Wrap ``exc`` as a :class:`NoteError` tagged with an error keyword.

    An explicit ``keyword`` is appended unless the message already contains
    it. Otherwise :func:`keyword_for_exception` decides, and a message that
    already embeds any keyword is left untagged.
    """
    if isinstance(exc, NoteError) and keyword is None:
        return exc
    message = to_display_string(exc)
    if keyword is not None:
        if keyword in message:
            keyword = None
    elif leading_keyword(message) is None:
        keyword = keyword_for_exception(exc)
    return NoteError(message=message, keyword=keyword, raw=exc)


__all__ = [
    "keyword_for_exception",
    "keyword_for_status",
    "wrap_exception",
    "_extract_status",
]
