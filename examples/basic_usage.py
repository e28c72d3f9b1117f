#!/usr/bin/env python3
"""Basic usage example for wkbdecode.

This example demonstrates:
1. Decoding hex EWKB as returned by PostGIS
2. Walking a nested GEOMETRYCOLLECTION
3. Strict decoding of untrusted input
4. Handling decode errors
"""

from __future__ import annotations

from wkbdecode import DecodeError, DecoderConfig, GeometryType, parse

# SELECT ST_AsEWKB('SRID=4326;POINT(1.5 -2.25)')
POINT_HEX = "0101000020E6100000000000000000F83F00000000000002C0"

# GEOMETRYCOLLECTION(POINT(2 0), POLYGON((0 0, 1 0, 1 1, 0 0)))
COLLECTION_HEX = (
    "010700000002000000"
    "010100000000000000000000400000000000000000"
    "01030000000100000004000000"
    "00000000000000000000000000000000"
    "000000000000F03F0000000000000000"
    "000000000000F03F000000000000F03F"
    "00000000000000000000000000000000"
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("wkbdecode Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Decoding a point with SRID...")
    result = parse(POINT_HEX)
    print(f"   Type: {result.type}")
    print(f"   Coordinates: {result.value}")
    print(f"   SRID: {result.srid}")
    print()

    print("2. Decoding a geometry collection...")
    collection = parse(COLLECTION_HEX)
    for member in collection.value:
        if member.type == GeometryType.POLYGON:
            print(f"   {member.type}: {len(member.value)} ring(s), {len(member.value[0])} vertices")
        else:
            print(f"   {member.type}: {member.value}")
    print(f"   SRID: {collection.srid}")
    print()

    print("3. Strict decoding...")
    config = DecoderConfig(max_depth=4, allow_trailing_data=False)
    try:
        parse(POINT_HEX + "00", config=config)
    except DecodeError as e:
        print(f"   Rejected: {e}")
    print()

    print("4. Handling errors...")
    try:
        parse(POINT_HEX[:30])
    except DecodeError as e:
        print(f"   Rejected: {e}")


if __name__ == "__main__":
    main()
