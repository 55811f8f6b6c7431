"""CLI action handlers for note-errors.

Purpose
-------
Subcommand handlers kept apart from argument wiring so they can be tested by
calling them with a parsed namespace. This module has no top-level side
effects.

Fallback & Error Semantics
--------------------------
- The codec never raises, so handlers always return 0; usage errors are
  reported by argparse before a handler runs.
- Output goes to stdout; a structured ``cli.*`` event is logged at DEBUG.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from ..base.errors import (
    all_keywords,
    build_minimal_payload,
    classify_message,
    get_registry,
    leading_keyword,
    resolve_status,
    strip_keywords,
)
from ..base.logging import get_logger, log_event

logger = get_logger("note.cli")


def read_message(value: str, stdin: Optional[TextIO] = None) -> str:
    """Return ``value``, or the stdin contents without the trailing newline when ``value`` is ``-``."""
    if value != "-":
        return value
    stream = stdin if stdin is not None else sys.stdin
    return stream.read().rstrip("\r\n")


def inspect_message(message: str) -> Dict[str, Any]:
    """Return the structured view of a message as a JSON-ready mapping."""
    return {
        "status": resolve_status(message),
        "class": classify_message(message).value,
        "keyword": leading_keyword(message),
        "clean": strip_keywords(message),
    }


def handle_status(args: argparse.Namespace) -> int:
    message = read_message(args.message)
    status = resolve_status(message)
    log_event(logger, "cli.status", level=logging.DEBUG, status=status)
    print(status)
    return 0


def handle_clean(args: argparse.Namespace) -> int:
    print(strip_keywords(read_message(args.message)))
    return 0


def handle_inspect(args: argparse.Namespace) -> int:
    result = inspect_message(read_message(args.message))
    log_event(logger, "cli.inspect", level=logging.DEBUG, **result)
    print(json.dumps(result, ensure_ascii=False))
    return 0


def handle_payload(args: argparse.Namespace) -> int:
    print(build_minimal_payload(args.message, args.error).decode("utf-8"))
    return 0


def handle_keywords(args: argparse.Namespace) -> int:
    """List the vocabulary as ``keyword status`` lines, or a JSON object.

    Unregistered keywords are shown with status ``-`` (``null`` in JSON)
    unless ``--registered`` filters them out.
    """
    registry = get_registry()
    vocabulary = all_keywords()
    rows = [(k, registry.lookup(k)) for k in vocabulary]
    # Keywords registered at runtime that are not part of the vocabulary
    known = set(vocabulary)
    rows += [(k, s) for k, s in registry.items() if k not in known]
    if args.registered:
        rows = [(k, s) for k, s in rows if s is not None]
    if args.json:
        print(json.dumps(dict(rows), ensure_ascii=False, indent=2))
        return 0
    width = max((len(k) for k, _ in rows), default=0)
    for keyword, status in rows:
        print(f"{keyword.ljust(width)}  {status if status is not None else '-'}")
    return 0


HANDLERS = {
    "status": handle_status,
    "clean": handle_clean,
    "inspect": handle_inspect,
    "payload": handle_payload,
    "keywords": handle_keywords,
}


__all__ = [
    "HANDLERS",
    "handle_clean",
    "handle_inspect",
    "handle_keywords",
    "handle_payload",
    "handle_status",
    "inspect_message",
    "read_message",
]
