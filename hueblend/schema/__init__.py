# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors.

Color is immutable (a frozen dataclass). Invalid input raises one of the
ColorError subclasses; nothing is silently clamped or substituted.
"""

from hueblend.schema.color import CHANNELS, HEX_LENGTH, Color, quantize
from hueblend.schema.errors import (
    ColorError,
    HexParseError,
    OutOfRangeError,
    WrongFormatError,
)

__all__ = [
    # Value type
    "Color",
    "CHANNELS",
    "HEX_LENGTH",
    "quantize",
    # Errors
    "ColorError",
    "WrongFormatError",
    "HexParseError",
    "OutOfRangeError",
]
