"""Unit tests for hex input coercion."""

from __future__ import annotations

import pytest

from wkbdecode import InvalidInputError, to_bytes


class TestToBytes:
    """Test to_bytes conversions."""

    def test_bytes_passthrough(self) -> None:
        """Test raw bytes are returned unchanged."""
        assert to_bytes(b"\x01\x02") == b"\x01\x02"

    def test_bytearray_and_memoryview(self) -> None:
        """Test other bytes-like inputs become bytes."""
        assert to_bytes(bytearray(b"\x01\x02")) == b"\x01\x02"
        assert to_bytes(memoryview(b"\x01\x02")) == b"\x01\x02"

    def test_plain_hex(self) -> None:
        """Test upper- and lower-case hex."""
        assert to_bytes("0101000000") == b"\x01\x01\x00\x00\x00"
        assert to_bytes("0aFf") == b"\x0a\xff"

    @pytest.mark.parametrize("prefix", ["0x", "0X", "x", "\\x"])
    def test_prefixes(self, prefix: str) -> None:
        """Test PostgreSQL and Python style hex prefixes."""
        assert to_bytes(prefix + "0101") == b"\x01\x01"

    def test_whitespace_stripped(self) -> None:
        """Test surrounding whitespace is ignored."""
        assert to_bytes("  0101\n") == b"\x01\x01"

    def test_empty_string(self) -> None:
        """Test empty text gives empty bytes."""
        assert to_bytes("") == b""

    def test_odd_length(self) -> None:
        """Test odd number of hex digits."""
        with pytest.raises(InvalidInputError, match="odd length"):
            to_bytes("010")

    def test_non_hex(self) -> None:
        """Test non-hex characters."""
        with pytest.raises(InvalidInputError, match="Invalid hex"):
            to_bytes("01zz")

    def test_wrong_type(self) -> None:
        """Test unsupported input types."""
        with pytest.raises(TypeError, match="int"):
            to_bytes(42)  # type: ignore[arg-type]
