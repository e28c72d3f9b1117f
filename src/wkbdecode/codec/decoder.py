"""Recursive-descent (E)WKB geometry decoder.

This module provides the Decoder class and the parse() function that convert
a WKB or PostGIS EWKB buffer into a ParseResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..config import DecoderConfig
from ..exceptions import (
    GeometryTypeMismatchError,
    NestingDepthError,
    TrailingDataError,
    UnsupportedTypeError,
)
from ..models import Geometry, ParseResult
from ..utils.hexinput import WkbInput, to_bytes
from .reader import ByteReader
from .types import DIMENSION_FLAGS, SRID_FLAG, GeometryType, classify

logger = logging.getLogger(__name__)


@dataclass
class _DecodeState:
    """Mutable state of a single parse() call, passed to every recursive step."""

    reader: ByteReader
    srid: Optional[int] = None
    depth: int = 0


class Decoder:
    """Decodes one WKB/EWKB geometry from an in-memory buffer.

    The decoder holds only its input and configuration; each call to parse()
    starts from the beginning of the buffer with a fresh reader, so a Decoder
    may be parsed repeatedly and shared between threads.

    Example:
        >>> data = bytes.fromhex("0101000020E6100000000000000000F83F00000000000002C0")
        >>> Decoder(data).parse().to_dict()
        {'type': 'POINT', 'value': [1.5, -2.25], 'srid': 4326}
    """

    def __init__(self, data: WkbInput, config: Optional[DecoderConfig] = None) -> None:
        """Initialize a decoder.

        Args:
            data: EWKB bytes, or hex text (see to_bytes)
            config: Decoder configuration; defaults to DecoderConfig()

        Raises:
            InvalidInputError: If hex text cannot be decoded
        """
        self._data = to_bytes(data)
        self._config = config if config is not None else DecoderConfig()
        self._rules: dict[GeometryType, Callable[[_DecodeState], Any]] = {
            GeometryType.POINT: self._point,
            GeometryType.LINESTRING: self._line_string,
            GeometryType.POLYGON: self._polygon,
            GeometryType.MULTIPOINT: self._multi_point,
            GeometryType.MULTILINESTRING: self._multi_line_string,
            GeometryType.MULTIPOLYGON: self._multi_polygon,
            GeometryType.GEOMETRYCOLLECTION: self._geometry_collection,
        }

    @property
    def config(self) -> DecoderConfig:
        return self._config

    def parse(self) -> ParseResult:
        """Decode the buffer.

        Returns:
            ParseResult with the top-level tag, payload, and the SRID read
            from the buffer (None if no header carried one). When nested
            headers also carry SRIDs, the last one read wins.

        Raises:
            InvalidByteOrderError: If a byte order marker is not 0 or 1
            UnsupportedTypeError: If a type code is not 1..7 or carries Z/M flags
            UnexpectedEndOfInputError: If the buffer is truncated
            GeometryTypeMismatchError: If a Multi* element has the wrong kind
            NestingDepthError: If nesting exceeds config.max_depth
            TrailingDataError: If bytes remain and trailing data is disallowed
        """
        state = _DecodeState(reader=ByteReader(self._data))
        geometry = self._geometry(state)

        remaining = state.reader.bytes_remaining()
        if remaining and not self._config.allow_trailing_data:
            raise TrailingDataError(remaining)

        return ParseResult(type=geometry.type, value=geometry.value, srid=state.srid)

    def _geometry(self, state: _DecodeState) -> Geometry:
        """Decode one complete geometry: header followed by payload."""
        if state.depth >= self._config.max_depth:
            raise NestingDepthError(self._config.max_depth)

        reader = state.reader
        byte_order = reader.read_byte_order()
        type_code = reader.read_uint32()

        if type_code & SRID_FLAG == SRID_FLAG:
            type_code ^= SRID_FLAG
            state.srid = reader.read_uint32()

        if type_code & DIMENSION_FLAGS:
            # Only X and Y ordinates are decoded
            raise UnsupportedTypeError(type_code)

        geometry_type = classify(type_code)
        logger.debug(
            "Decoding %s (%s) at depth %d, srid=%s",
            geometry_type,
            byte_order.name,
            state.depth + 1,
            state.srid,
        )

        state.depth += 1
        try:
            value = self._rules[geometry_type](state)
        finally:
            state.depth -= 1

        return Geometry(type=geometry_type, value=value)

    def _point(self, state: _DecodeState) -> tuple[float, float]:
        return (state.reader.read_float64(), state.reader.read_float64())

    def _line_string(self, state: _DecodeState) -> tuple[tuple[float, float], ...]:
        count = state.reader.read_uint32()
        return tuple(self._point(state) for _ in range(count))

    def _polygon(self, state: _DecodeState) -> tuple[tuple[tuple[float, float], ...], ...]:
        count = state.reader.read_uint32()
        return tuple(self._line_string(state) for _ in range(count))

    def _multi_point(self, state: _DecodeState) -> tuple[Any, ...]:
        return self._member_values(state, GeometryType.POINT)

    def _multi_line_string(self, state: _DecodeState) -> tuple[Any, ...]:
        return self._member_values(state, GeometryType.LINESTRING)

    def _multi_polygon(self, state: _DecodeState) -> tuple[Any, ...]:
        return self._member_values(state, GeometryType.POLYGON)

    def _geometry_collection(self, state: _DecodeState) -> tuple[Geometry, ...]:
        count = state.reader.read_uint32()
        return tuple(self._geometry(state) for _ in range(count))

    def _member_values(self, state: _DecodeState, expected: GeometryType) -> tuple[Any, ...]:
        """Decode full nested geometries of one kind and keep only their payloads."""
        count = state.reader.read_uint32()
        values = []
        for _ in range(count):
            member = self._geometry(state)
            if member.type != expected:
                raise GeometryTypeMismatchError(expected.value, member.type.value)
            values.append(member.value)
        return tuple(values)


def parse(data: WkbInput, *, config: Optional[DecoderConfig] = None) -> ParseResult:
    """Decode a WKB/EWKB geometry.

    Args:
        data: EWKB bytes, or hex text as returned by PostGIS
        config: Optional DecoderConfig (nesting limit, trailing data policy)

    Returns:
        Decoded ParseResult

    Raises:
        InvalidInputError: If hex text cannot be decoded
        DecodeError: If the buffer is not valid (E)WKB (see Decoder.parse)

    Examples:
        ```python
        from wkbdecode import parse

        result = parse("0101000020E6100000000000000000F83F00000000000002C0")
        result.type   # GeometryType.POINT
        result.value  # (1.5, -2.25)
        result.srid   # 4326
        ```
    """
    return Decoder(data, config).parse()
