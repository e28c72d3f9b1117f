"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

import ewkb_builder as ewkb


@pytest.fixture
def srid_point_hex() -> str:
    """Little-endian EWKB point (1.5, -2.25) with SRID 4326."""
    return "0101000020E6100000000000000000F83F00000000000002C0"


@pytest.fixture
def square_ring() -> tuple[tuple[float, float], ...]:
    """Closed unit square."""
    return ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0))


@pytest.fixture
def sample_collection() -> bytes:
    """Big-endian GEOMETRYCOLLECTION holding a point and a little-endian linestring."""
    return ewkb.container(
        ewkb.GEOMETRYCOLLECTION,
        [
            ewkb.point(1.0, 2.0, little=False),
            ewkb.line_string([(3.0, 4.0), (5.0, 6.0)], little=True),
        ],
        little=False,
    )
