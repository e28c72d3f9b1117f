"""wkbdecode: WKB/EWKB Geometry Decoder

A Python library for decoding Well-Known Binary (WKB) and PostGIS Extended
WKB (EWKB) geometry values into plain, immutable Python structures.

Key Features:
- All seven OGC geometry kinds, including nested collections
- Per-header byte order (mixed-endian collections decode correctly)
- Optional SRID extraction from EWKB headers
- Raw bytes or PostGIS hex text as input
- Bounded recursion for untrusted input

Quick Start:
    >>> from wkbdecode import parse
    >>>
    >>> result = parse("0101000020E6100000000000000000F83F00000000000002C0")
    >>> result.type
    <GeometryType.POINT: 'POINT'>
    >>> result.value
    (1.5, -2.25)
    >>> result.srid
    4326
"""

from __future__ import annotations

from .codec import ByteOrder, ByteReader, Decoder, GeometryType, parse
from .config import DecoderConfig
from .exceptions import (
    DecodeError,
    GeometryTypeMismatchError,
    InvalidByteOrderError,
    InvalidInputError,
    NestingDepthError,
    TrailingDataError,
    UnexpectedEndOfInputError,
    UnsupportedTypeError,
    WkbError,
)
from .models import Geometry, ParseResult
from .utils import to_bytes

__version__ = "0.1.0"

__all__ = [
    # Core API
    "parse",
    "Decoder",
    "DecoderConfig",
    # Results
    "Geometry",
    "ParseResult",
    "GeometryType",
    # Primitives
    "ByteReader",
    "ByteOrder",
    "to_bytes",
    # Exceptions
    "WkbError",
    "InvalidInputError",
    "DecodeError",
    "InvalidByteOrderError",
    "UnsupportedTypeError",
    "UnexpectedEndOfInputError",
    "GeometryTypeMismatchError",
    "NestingDepthError",
    "TrailingDataError",
    # Version
    "__version__",
]
