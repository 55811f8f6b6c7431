"""
Keyword registry: the authoritative error keyword to status code table.

The registry is built once by :func:`build_default_registry`, an explicit,
ordered initialisation over ``DEFAULT_KEYWORD_STATUSES``. :func:`get_registry`
returns a process-wide instance, building it on first use under a one-time
lock. All registrations must complete before any resolution; concurrent
registration is not supported. Reads need no synchronisation.
"""
from __future__ import annotations

import threading
from http import HTTPStatus
from typing import Dict, Iterator, Mapping, Optional, Tuple

from ..logging import get_logger
from . import keywords as kw

logger = get_logger("note.errors.registry")

DEFAULT_KEYWORD_STATUSES: Tuple[Tuple[str, HTTPStatus], ...] = (
    (kw.ERR_TIMEOUT, HTTPStatus.REQUEST_TIMEOUT),
    (kw.ERR_INTERNAL_TIMEOUT, HTTPStatus.GATEWAY_TIMEOUT),
    (kw.ERR_ROUTE_TIMEOUT, HTTPStatus.REQUEST_TIMEOUT),
    (kw.ERR_CLOSED, HTTPStatus.GONE),
    (kw.ERR_FILE_NOEXIST, HTTPStatus.NOT_FOUND),
    (kw.ERR_NOTEFILE_NAME, HTTPStatus.BAD_REQUEST),
    (kw.ERR_NOTEFILE_IN_USE, HTTPStatus.CONFLICT),
    (kw.ERR_NOTEFILE_EXISTS, HTTPStatus.CONFLICT),
    (kw.ERR_NOTEFILE_NOEXIST, HTTPStatus.NOT_FOUND),
    (kw.ERR_NOTEFILE_QUEUE_DISALLOWED, HTTPStatus.BAD_REQUEST),
    (kw.ERR_NOTE_NOEXIST, HTTPStatus.NOT_FOUND),
    (kw.ERR_NOTE_EXISTS, HTTPStatus.CONFLICT),
    (kw.ERR_TOO_MANY_NOTES, HTTPStatus.BAD_REQUEST),
    (kw.ERR_TRACKER_NOEXIST, HTTPStatus.NOT_FOUND),
    (kw.ERR_TRACKER_EXISTS, HTTPStatus.CONFLICT),
    (kw.ERR_NETWORK, HTTPStatus.SERVICE_UNAVAILABLE),
    (kw.ERR_REGISTRATION_FAILURE, HTTPStatus.SERVICE_UNAVAILABLE),
    (kw.ERR_EXTENDED_NETWORK_FAILURE, HTTPStatus.SERVICE_UNAVAILABLE),
    (kw.ERR_EXTENDED_SERVICE_FAILURE, HTTPStatus.SERVICE_UNAVAILABLE),
    (kw.ERR_HOST_UNREACHABLE, HTTPStatus.SERVICE_UNAVAILABLE),
    (kw.ERR_DFU_NOT_READY, HTTPStatus.SERVICE_UNAVAILABLE),
    (kw.ERR_DFU_IN_PROGRESS, HTTPStatus.SERVICE_UNAVAILABLE),
    (kw.ERR_AUTH, HTTPStatus.UNAUTHORIZED),
    (kw.ERR_TICKET, HTTPStatus.UNAUTHORIZED),
    (kw.ERR_HUB_NO_HANDLER, HTTPStatus.INTERNAL_SERVER_ERROR),
    (kw.ERR_DEVICE_NOT_FOUND, HTTPStatus.NOT_FOUND),
    (kw.ERR_DEVICE_NOT_SPECIFIED, HTTPStatus.BAD_REQUEST),
    (kw.ERR_DEVICE_ID, HTTPStatus.BAD_REQUEST),
    (kw.ERR_DEVICE_DISABLED, HTTPStatus.BAD_REQUEST),
    (kw.ERR_PRODUCT_NOT_FOUND, HTTPStatus.NOT_FOUND),
    (kw.ERR_PRODUCT_NOT_SPECIFIED, HTTPStatus.BAD_REQUEST),
    (kw.ERR_APP_NOT_FOUND, HTTPStatus.NOT_FOUND),
    (kw.ERR_APP_NOT_SPECIFIED, HTTPStatus.BAD_REQUEST),
    (kw.ERR_APP_DELETED, HTTPStatus.GONE),
    (kw.ERR_APP_EXISTS, HTTPStatus.CONFLICT),
    (kw.ERR_FLEET_NOT_FOUND, HTTPStatus.NOT_FOUND),
    (kw.ERR_CARD_IO, HTTPStatus.BAD_GATEWAY),
    (kw.ERR_ACCESS_DENIED, HTTPStatus.FORBIDDEN),
    (kw.ERR_WEB_PAYLOAD, HTTPStatus.BAD_REQUEST),
    (kw.ERR_TEMPLATE_INCOMPATIBLE, HTTPStatus.BAD_REQUEST),
    (kw.ERR_SYNTAX, HTTPStatus.BAD_REQUEST),
    (kw.ERR_INCOMPATIBLE, HTTPStatus.NOT_ACCEPTABLE),
    (kw.ERR_REQ_NOT_SUPPORTED, HTTPStatus.NOT_IMPLEMENTED),
    (kw.ERR_TOO_BIG, HTTPStatus.REQUEST_ENTITY_TOO_LARGE),
    (kw.ERR_JSON, HTTPStatus.BAD_REQUEST),
)


class KeywordRegistry:
    """Mapping of error keyword to transport status code.

    At most one status is held per keyword; registering a keyword again
    overwrites the previous status (last write wins).
    """

    def __init__(self, entries: Optional[Mapping[str, int]] = None) -> None:
        self._table: Dict[str, int] = {}
        for keyword, status in (entries or {}).items():
            self.register(keyword, status)

    def register(self, keyword: str, status: int) -> str:
        """Insert or overwrite the status for ``keyword`` and return the keyword."""
        status = int(status)
        previous = self._table.get(keyword)
        if previous is not None and previous != status:
            logger.debug(
                "Keyword status overwritten",
                extra={"keyword": keyword, "previous": previous, "status": status},
            )
        self._table[keyword] = status
        return keyword

    def lookup(self, keyword: str) -> Optional[int]:
        return self._table.get(keyword)

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self._table.items())

    def as_dict(self) -> Dict[str, int]:
        return dict(self._table)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"KeywordRegistry({len(self._table)} keywords)"


def build_default_registry() -> KeywordRegistry:
    """Build a registry populated with the standard keyword vocabulary.

    Registration follows the order of ``DEFAULT_KEYWORD_STATUSES``; the
    returned registry is complete and ready for resolution.
    """
    registry = KeywordRegistry()
    for keyword, status in DEFAULT_KEYWORD_STATUSES:
        registry.register(keyword, status)
    logger.debug("Keyword registry built", extra={"keywords": len(registry)})
    return registry


_DEFAULT: Optional[KeywordRegistry] = None
_LOCK = threading.Lock()


def get_registry() -> KeywordRegistry:
    """Return the process-wide registry, building it on first use.

    Thread-safety:
        The one-time build is guarded by a lock; once built, the instance
        is returned without locking.
    """
    registry = _DEFAULT
    if registry is not None:
        return registry
    return _build_once()


def _build_once() -> KeywordRegistry:
    global _DEFAULT  # noqa: PLW0603 - documented process singleton
    with _LOCK:
        if _DEFAULT is None:
            _DEFAULT = build_default_registry()
        return _DEFAULT


def register(keyword: str, status: int) -> str:
    """Register ``keyword`` with ``status`` on the process-wide registry.

    Must be called during process initialisation, before any message is
    resolved.
    """
    return get_registry().register(keyword, status)


def reset_registry() -> None:
    """Discard the process-wide registry; the next access rebuilds the defaults."""
    global _DEFAULT  # noqa: PLW0603 - documented process singleton
    with _LOCK:
        _DEFAULT = None


__all__ = [
    "DEFAULT_KEYWORD_STATUSES",
    "KeywordRegistry",
    "build_default_registry",
    "get_registry",
    "register",
    "reset_registry",
]
