"""Input coercion for decoder buffers.

PostGIS and most database drivers hand EWKB around as hexadecimal text
(``ST_AsEWKB`` rendered as ``\\x0101000020...``). This module turns either form
into the raw bytes the reader expects.
"""

from __future__ import annotations

import binascii
from typing import Union

from ..exceptions import InvalidInputError

WkbInput = Union[bytes, bytearray, memoryview, str]

_HEX_PREFIXES = ("\\x", "0x", "x")


def to_bytes(data: WkbInput) -> bytes:
    """Return the raw bytes of an EWKB value given as bytes or hex text.

    Args:
        data: Raw buffer, or a hex string optionally prefixed with
            ``0x``, ``x`` or ``\\x``

    Returns:
        Raw bytes

    Raises:
        InvalidInputError: If a string is not valid hexadecimal
        TypeError: If data is neither bytes-like nor a string

    Example:
        >>> to_bytes("0x0101000000")
        b'\\x01\\x01\\x00\\x00\\x00'
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)

    if not isinstance(data, str):
        raise TypeError(f"Expected bytes or hex string, got {type(data).__name__}")

    text = data.strip()
    lowered = text.lower()
    for prefix in _HEX_PREFIXES:
        if lowered.startswith(prefix):
            text = text[len(prefix) :]
            break

    if len(text) % 2:
        raise InvalidInputError(f"Hex input has odd length {len(text)}")

    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError(f"Invalid hex input: {e}") from e
