"""Byte-order-aware primitive reader.

This module provides the low-level cursor used by the geometry decoder.
Multi-byte values are interpreted in the byte order most recently read from
the buffer; until a marker has been read the reader assumes big-endian.
"""

from __future__ import annotations

import struct

from ..exceptions import InvalidByteOrderError, UnexpectedEndOfInputError
from .types import ByteOrder


class ByteReader:
    """Reads fixed-width primitives sequentially from a byte buffer.

    The cursor only moves forward. Every read checks the remaining length
    first, so a truncated buffer raises instead of returning short data.

    Example:
        >>> reader = ByteReader(b"\\x01\\x01\\x00\\x00\\x00")
        >>> reader.read_byte_order()
        <ByteOrder.LITTLE_ENDIAN: 1>
        >>> reader.read_uint32()
        1
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader positioned at the start of ``data``.

        Args:
            data: Byte buffer to read
        """
        self._data = bytes(data)
        self._position = 0
        self._byte_order = ByteOrder.BIG_ENDIAN

    @property
    def byte_order(self) -> ByteOrder:
        """Byte order applied to the next multi-byte read."""
        return self._byte_order

    def read_byte_order(self) -> ByteOrder:
        """Read a one-byte marker and switch to the byte order it selects.

        Returns:
            The byte order now in effect

        Raises:
            InvalidByteOrderError: If the marker is neither 0 nor 1
            UnexpectedEndOfInputError: If the buffer is exhausted
        """
        position = self._position
        marker = self._take(1)[0]
        try:
            self._byte_order = ByteOrder(marker)
        except ValueError:
            raise InvalidByteOrderError(marker, position) from None
        return self._byte_order

    def read_uint32(self) -> int:
        """Read an unsigned 32-bit integer in the current byte order.

        Raises:
            UnexpectedEndOfInputError: If fewer than 4 bytes remain
        """
        (value,) = struct.unpack(self._byte_order.struct_prefix + "I", self._take(4))
        return int(value)

    def read_float64(self) -> float:
        """Read an IEEE-754 double in the current byte order.

        Raises:
            UnexpectedEndOfInputError: If fewer than 8 bytes remain
        """
        (value,) = struct.unpack(self._byte_order.struct_prefix + "d", self._take(8))
        return float(value)

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position

    def _take(self, num_bytes: int) -> bytes:
        available = self.bytes_remaining()
        if num_bytes > available:
            raise UnexpectedEndOfInputError(num_bytes, available, self._position)

        chunk = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return chunk
