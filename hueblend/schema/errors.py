# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Errors raised by the color value type.

Every error is a ``ValueError`` so callers that only care about "bad input"
can catch one type. Invalid input is always rejected, never clamped.
"""

from __future__ import annotations

from typing import Any


class ColorError(ValueError):
    """Base class for all color construction and parsing failures."""


class WrongFormatError(ColorError):
    """Hex text is not 7 characters long or lacks the leading ``#``."""

    def __init__(self, text: Any, reason: str = "hex color must be in format `#rrggbb`") -> None:
        self.text = text
        super().__init__(f"wrong hex format: {reason}, got {text!r}")


class HexParseError(ColorError):
    """A two-character channel group is not a hexadecimal byte."""

    def __init__(self, substring: str) -> None:
        self.substring = substring
        super().__init__(f"failed to parse hex pair: {substring!r}")


class OutOfRangeError(ColorError):
    """A channel value lies outside its allowed range."""

    def __init__(self, channel: str, value: Any, bounds: str = "[0.0, 1.0]") -> None:
        self.channel = channel
        self.value = value
        super().__init__(f"{channel} must be in {bounds}, got {value!r}")
