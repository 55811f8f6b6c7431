"""Structured logging context for device and service events.

:class:`LogContext` carries the fields most log events share (device,
product, request id) plus an ``extra`` mapping. ``to_dict`` flattens
``extra`` and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for log events."""

    device: Optional[str] = None
    product: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
