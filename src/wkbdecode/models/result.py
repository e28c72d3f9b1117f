"""Decoded geometry models.

This module provides the immutable Pydantic models returned by the decoder.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..codec.types import GeometryType


class Geometry(BaseModel):
    """A decoded geometry: its tag and type-dependent payload.

    Payload shapes:
        - POINT: ``(x, y)``
        - LINESTRING: tuple of points
        - POLYGON: tuple of rings (each a tuple of points)
        - MULTIPOINT / MULTILINESTRING / MULTIPOLYGON: tuple of payloads of
          the singular kind
        - GEOMETRYCOLLECTION: tuple of Geometry

    Payloads are nested tuples so a returned result cannot be modified;
    to_dict() renders them as lists.

    Example:
        >>> Geometry(type=GeometryType.POINT, value=(1.0, 2.0)).to_dict()
        {'type': 'POINT', 'value': [1.0, 2.0]}
    """

    model_config = ConfigDict(
        # Decoded results are never modified after construction
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    type: GeometryType
    value: Any

    def to_dict(self) -> dict[str, Any]:
        """Return the geometry as plain dicts, lists and floats."""
        return {"type": self.type.value, "value": _plain(self.value)}


class ParseResult(Geometry):
    """Result of decoding one top-level geometry.

    Attributes:
        type: Geometry tag of the top-level geometry
        value: Payload, see Geometry
        srid: Spatial reference identifier, or None if no header in the
            buffer carried the SRID flag. Never defaulted to zero.
    """

    srid: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the result as plain data, including the srid key."""
        result = super().to_dict()
        result["srid"] = self.srid
        return result


def _plain(value: Any) -> Any:
    if isinstance(value, Geometry):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
