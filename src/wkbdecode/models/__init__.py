"""Result models for decoded geometries."""

from __future__ import annotations

from .result import Geometry, ParseResult

__all__ = [
    "Geometry",
    "ParseResult",
]
