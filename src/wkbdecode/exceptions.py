"""Exception hierarchy for wkbdecode.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from WkbError for easy catching of any wkbdecode-specific error.
Every DecodeError aborts the whole parse call; no partial result is returned.
"""

from __future__ import annotations


class WkbError(Exception):
    """Base exception for all wkbdecode errors."""

    pass


class InvalidInputError(WkbError):
    """Raised when textual input cannot be turned into bytes.

    Examples:
        - Hex string with an odd number of digits
        - Non-hexadecimal characters in a hex string
    """

    pass


class DecodeError(WkbError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Unknown byte order marker
        - Unknown geometry type code
        - Nesting deeper than the configured limit
    """

    pass


class InvalidByteOrderError(DecodeError):
    """Raised when a byte order marker is neither 0 (big) nor 1 (little)."""

    def __init__(self, marker: int, position: int) -> None:
        self.marker = marker
        self.position = position
        super().__init__(f"Invalid byte order marker {marker:#04x} at offset {position}")


class UnsupportedTypeError(DecodeError):
    """Raised when a masked geometry type code is not one of 1..7."""

    def __init__(self, type_code: int) -> None:
        self.type_code = type_code
        super().__init__(f'Unsupported WKB type "{type_code}"')


class UnexpectedEndOfInputError(DecodeError):
    """Raised when a read needs more bytes than remain in the buffer."""

    def __init__(self, needed: int, available: int, position: int) -> None:
        self.needed = needed
        self.available = available
        self.position = position
        super().__init__(
            f"Unexpected end of input at offset {position}: "
            f"need {needed} bytes, have {available}"
        )


class GeometryTypeMismatchError(DecodeError):
    """Raised when a Multi* geometry contains an element of the wrong kind.

    Example:
        A MULTIPOINT whose second element header declares a LINESTRING.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected nested {expected}, got {actual}")


class NestingDepthError(DecodeError):
    """Raised when nested geometry headers exceed the configured maximum depth."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Geometry nesting exceeds maximum depth of {max_depth}")


class TrailingDataError(DecodeError):
    """Raised in strict mode when bytes remain after the top-level geometry."""

    def __init__(self, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(f"{remaining} unread bytes after geometry")
