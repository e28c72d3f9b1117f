"""Geometry type codes and header flags.

This module defines the numeric vocabulary of the (E)WKB header: the byte
order marker values, the seven geometry kinds and the flag bits that PostGIS
folds into the 32-bit type field.
"""

from __future__ import annotations

import enum

from ..exceptions import UnsupportedTypeError

#: Type field bit announcing that a 4-byte SRID follows the type.
SRID_FLAG = 0x20000000
#: Type field bit for a measure (M) coordinate.
M_FLAG = 0x40000000
#: Type field bit for an elevation (Z) coordinate.
Z_FLAG = 0x80000000

#: Dimension bits cleared before a type code is classified.
DIMENSION_FLAGS = Z_FLAG | M_FLAG


class ByteOrder(enum.IntEnum):
    """Byte order marker values, as found in the first byte of each header."""

    BIG_ENDIAN = 0
    LITTLE_ENDIAN = 1

    @property
    def struct_prefix(self) -> str:
        """Format prefix for the struct module."""
        return "<" if self is ByteOrder.LITTLE_ENDIAN else ">"


class GeometryType(str, enum.Enum):
    """Geometry tags, using the upper-case names of the decoded result."""

    POINT = "POINT"
    LINESTRING = "LINESTRING"
    POLYGON = "POLYGON"
    MULTIPOINT = "MULTIPOINT"
    MULTILINESTRING = "MULTILINESTRING"
    MULTIPOLYGON = "MULTIPOLYGON"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"

    def __str__(self) -> str:
        return self.value


_CODE_TO_TYPE: dict[int, GeometryType] = {
    1: GeometryType.POINT,
    2: GeometryType.LINESTRING,
    3: GeometryType.POLYGON,
    4: GeometryType.MULTIPOINT,
    5: GeometryType.MULTILINESTRING,
    6: GeometryType.MULTIPOLYGON,
    7: GeometryType.GEOMETRYCOLLECTION,
}

TYPE_CODES: dict[GeometryType, int] = {tag: code for code, tag in _CODE_TO_TYPE.items()}


def classify(type_code: int) -> GeometryType:
    """Map a flag-free type code to its geometry tag.

    Args:
        type_code: Type field with the SRID and dimension flags already cleared

    Returns:
        Matching GeometryType

    Raises:
        UnsupportedTypeError: If the code is not one of the seven known kinds
    """
    try:
        return _CODE_TO_TYPE[type_code]
    except KeyError:
        raise UnsupportedTypeError(type_code) from None
