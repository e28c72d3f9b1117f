"""Decoder configuration.

This module provides the configuration dataclass accepted by Decoder and parse().
"""

from __future__ import annotations

from dataclasses import dataclass

#: Largest accepted max_depth. Each nesting level costs up to three Python
#: stack frames, so this stays well inside the default recursion limit.
MAX_DEPTH_LIMIT = 200


@dataclass(frozen=True)
class DecoderConfig:
    """Configuration for geometry decoding.

    Attributes:
        max_depth: Maximum number of nested geometry headers (default 32,
            at most MAX_DEPTH_LIMIT).
            The top-level geometry counts as depth 1, a point inside a
            MULTIPOINT as depth 2, and so on. Adversarial input can nest
            GEOMETRYCOLLECTIONs arbitrarily deep; this bounds the recursion.

        allow_trailing_data: Accept bytes left over after the top-level
            geometry (default True). Set to False to reject them with
            TrailingDataError.

    Examples:
        ```python
        from wkbdecode import DecoderConfig, parse

        # Shallow, strict decoding of untrusted input
        config = DecoderConfig(max_depth=4, allow_trailing_data=False)
        result = parse(data, config=config)
        ```
    """

    max_depth: int = 32
    allow_trailing_data: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be 1-{MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )
