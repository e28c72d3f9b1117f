"""End-to-end integration tests against hand-written PostGIS style EWKB."""

from __future__ import annotations

import pytest

import ewkb_builder as ewkb
from wkbdecode import (
    DecodeError,
    Decoder,
    DecoderConfig,
    GeometryType,
    WkbError,
    parse,
)

# SELECT ST_AsEWKB('SRID=4326;POINT(1 2)')
POINT_4326_HEX = "0101000020E6100000" "000000000000F03F" "0000000000000040"

# POINT(1 2) in big-endian WKB
POINT_BE_HEX = "0000000001" "3FF0000000000000" "4000000000000000"

# GEOMETRYCOLLECTION(POINT(2 0), POLYGON((0 0, 1 0, 1 1, 0 0)))
COLLECTION_HEX = (
    "0107000000" "02000000"
    "0101000000" "0000000000000040" "0000000000000000"
    "0103000000" "01000000" "04000000"
    "0000000000000000" "0000000000000000"
    "000000000000F03F" "0000000000000000"
    "000000000000F03F" "000000000000F03F"
    "0000000000000000" "0000000000000000"
)


class TestPostgisValues:
    """Test decoding values as a database driver returns them."""

    def test_point_with_srid(self) -> None:
        """Test hex EWKB point with SRID."""
        result = parse("\\x" + POINT_4326_HEX)

        assert result.type == GeometryType.POINT
        assert result.value == (1.0, 2.0)
        assert result.srid == 4326

    def test_big_endian_point(self) -> None:
        """Test plain big-endian WKB."""
        result = parse(POINT_BE_HEX)

        assert result.to_dict() == {"type": "POINT", "value": [1.0, 2.0], "srid": None}

    def test_collection(self) -> None:
        """Test a collection with a point and a polygon."""
        result = parse(COLLECTION_HEX.lower())

        assert result.to_dict() == {
            "type": "GEOMETRYCOLLECTION",
            "value": [
                {"type": "POINT", "value": [2.0, 0.0]},
                {
                    "type": "POLYGON",
                    "value": [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]],
                },
            ],
            "srid": None,
        }


class TestWorkflows:
    """Test complete decode workflows."""

    def test_batch_of_independent_buffers(self, square_ring: tuple[tuple[float, float], ...]) -> None:
        """Test decoding many buffers with one shared configuration."""
        config = DecoderConfig(max_depth=4, allow_trailing_data=False)
        buffers = [
            ewkb.point(1.0, 2.0, srid=4326),
            ewkb.line_string([(0.0, 0.0), (1.0, 1.0)], little=False),
            ewkb.polygon([square_ring], srid=3857),
            ewkb.container(ewkb.MULTIPOLYGON, [ewkb.polygon([square_ring])], srid=4326),
        ]

        results = [Decoder(data, config).parse() for data in buffers]

        assert [r.type for r in results] == [
            GeometryType.POINT,
            GeometryType.LINESTRING,
            GeometryType.POLYGON,
            GeometryType.MULTIPOLYGON,
        ]
        assert [r.srid for r in results] == [4326, None, 3857, 4326]

    def test_reject_whole_input_on_error(self) -> None:
        """Test callers can treat any failure as invalid (E)WKB."""
        bad_inputs = [
            b"",
            b"\x02" + bytes.fromhex(POINT_4326_HEX)[1:],
            bytes.fromhex(POINT_4326_HEX)[:-3],
            ewkb.header(42),
            "not hex",
        ]

        for data in bad_inputs:
            with pytest.raises(WkbError):
                parse(data)

    def test_decode_errors_share_base(self) -> None:
        """Test binary failures are DecodeErrors."""
        with pytest.raises(DecodeError):
            parse(bytes.fromhex(COLLECTION_HEX)[:40])
