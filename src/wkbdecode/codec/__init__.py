"""(E)WKB codec for wkbdecode.

This module provides the byte reader and the recursive geometry decoder.
"""

from __future__ import annotations

from .decoder import Decoder, parse
from .reader import ByteReader
from .types import (
    DIMENSION_FLAGS,
    M_FLAG,
    SRID_FLAG,
    TYPE_CODES,
    Z_FLAG,
    ByteOrder,
    GeometryType,
    classify,
)

__all__ = [
    "Decoder",
    "parse",
    "ByteReader",
    "ByteOrder",
    "GeometryType",
    "classify",
    "TYPE_CODES",
    "SRID_FLAG",
    "M_FLAG",
    "Z_FLAG",
    "DIMENSION_FLAGS",
]
