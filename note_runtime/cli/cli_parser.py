"""CLI parser construction for note-errors.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse


def _add_message_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("message", help="Error message text, or '-' to read it from stdin")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``status``, ``clean``, ``inspect``, ``payload`` and
        ``keywords`` subcommands. No I/O happens here.
    """
    p = argparse.ArgumentParser(
        prog="note-errors", description="Inspect error messages carrying embedded error keywords"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_status = sub.add_parser("status", help="Print the transport status resolved from a message")
    _add_message_arg(p_status)

    p_clean = sub.add_parser("clean", help="Print a message with all error keywords removed")
    _add_message_arg(p_clean)

    p_inspect = sub.add_parser("inspect", help="Print status, class, keyword and clean text as JSON")
    _add_message_arg(p_inspect)

    p_payload = sub.add_parser("payload", help="Print a minimal {\"err\": ...} payload")
    p_payload.add_argument("--message", default=None)
    p_payload.add_argument("--error", default=None, help="Inner error text")

    p_keywords = sub.add_parser("keywords", help="List the error keyword vocabulary")
    p_keywords.add_argument("--registered", action="store_true", help="Only keywords with a status")
    p_keywords.add_argument("--json", action="store_true")

    return p


__all__ = ["build_parser"]
