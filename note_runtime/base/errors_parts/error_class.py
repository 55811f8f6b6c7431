"""
Error classes of the keyword taxonomy.

Defines the `ErrorClass` enumeration. Values are lowercase and are a stable
public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorClass(str, Enum):
    """How an error message relates to the keyword registry.

    There is no parse-failure class: malformed or partially delimited text is
    ``UNCLASSIFIED``.
    """

    NONE = "none"
    CLASSIFIED = "classified"
    UNCLASSIFIED = "unclassified"


__all__ = ["ErrorClass"]
