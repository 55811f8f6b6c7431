"""Pytest configuration for the note_runtime test suite.

Provides a small, isolated registry for codec tests and guarantees that the
process-wide registry is rebuilt from defaults around tests that mutate it.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from note_runtime.base.errors import ErrorTextCodec, KeywordRegistry, reset_registry


@pytest.fixture()
def small_registry() -> KeywordRegistry:
    """Registry holding only ``{timeout}`` (408) and ``{auth}`` (401)."""

    registry = KeywordRegistry()
    registry.register("{timeout}", 408)
    registry.register("{auth}", 401)
    return registry


@pytest.fixture()
def codec(small_registry: KeywordRegistry) -> ErrorTextCodec:
    """Codec bound to ``small_registry``."""

    return ErrorTextCodec(small_registry)


@pytest.fixture()
def fresh_default_registry() -> Iterator[None]:
    """Reset the process-wide registry before and after a test."""

    reset_registry()
    yield
    reset_registry()
