"""Utility functions for wkbdecode.

This module provides input coercion for hex-encoded EWKB.
"""

from __future__ import annotations

from .hexinput import WkbInput, to_bytes

__all__ = [
    "WkbInput",
    "to_bytes",
]
