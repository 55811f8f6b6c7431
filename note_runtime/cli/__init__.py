"""note-errors CLI (package entrypoint).

Wires argument parsing to the handlers in ``cli_actions``. It performs no
error-text logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import HANDLERS
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success; argparse exits with 2 on usage errors).
    """
    p = build_parser()
    args = p.parse_args(list(sys.argv[1:] if argv is None else argv))
    return HANDLERS[args.cmd](args)


__all__ = ["main"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
