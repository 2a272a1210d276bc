# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Hueblend -- linear RGB color blending.

Interpolates a sequence of colors between two endpoints and measures the
distance between colors. Colors are immutable values with normalized
channels; hex text is the external form.

Quick start::

    from hueblend import Color, blend, distance

    red = Color.from_hex("#ff0000")
    green = Color.from_hex("#00ff00")
    [c.to_hex() for c in blend(red, green, 5)]
    distance(red, green)
"""

from __future__ import annotations

__version__ = "1.0.0"

from hueblend.blend import (
    MAX_DISTANCE,
    DistanceBand,
    blend,
    blend_hex,
    blend_unique,
    classify_distance,
    distance,
)
from hueblend.schema import (
    Color,
    ColorError,
    HexParseError,
    OutOfRangeError,
    WrongFormatError,
)

__all__ = [
    # Core API
    "Color",
    "blend",
    "blend_unique",
    "blend_hex",
    "distance",
    # Reporting
    "classify_distance",
    "DistanceBand",
    "MAX_DISTANCE",
    # Errors
    "ColorError",
    "WrongFormatError",
    "HexParseError",
    "OutOfRangeError",
    # Version
    "__version__",
]
