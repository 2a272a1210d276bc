# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Blending core for Hueblend.

Stateless operations over pairs of colors: interpolation and distance.
Nothing here performs I/O or logs.
"""

from hueblend.blend.distance import (
    MAX_DISTANCE,
    DistanceBand,
    classify_distance,
    distance,
)
from hueblend.blend.interpolate import blend, blend_hex, blend_unique

__all__ = [
    "blend",
    "blend_unique",
    "blend_hex",
    "distance",
    "classify_distance",
    "DistanceBand",
    "MAX_DISTANCE",
]
