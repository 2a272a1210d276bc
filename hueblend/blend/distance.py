# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Color distance.

Plain Euclidean distance between the normalized (red, green, blue) vectors.
No gamma decoding and no perceptual color model is applied; the metric is
a heuristic for "how different do these look", not a colorimetric ΔE.

Range: [0, sqrt(3)], where sqrt(3) is black vs. white.
"""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from hueblend.schema import Color


MAX_DISTANCE = math.sqrt(3.0)


def distance(a: Color, b: Color) -> float:
    """
    Euclidean distance between two colors in normalized RGB.

    Symmetric, zero for equal colors, and satisfies the triangle inequality.

    Returns:
        Distance in [0, sqrt(3)]
    """
    delta = np.asarray(a.to_tuple(), dtype=np.float64) - np.asarray(b.to_tuple(), dtype=np.float64)
    return float(np.sqrt(np.sum(delta ** 2)))


# =============================================================================
# Reporting bands
# =============================================================================


class DistanceBand(Enum):
    """Human-readable interpretation of a distance value."""

    IDENTICAL = "effectively identical"
    IMPERCEPTIBLE = "imperceptible"
    MINOR = "minor"
    SIGNIFICANT = "significant"
    MAJOR = "major"


# Upper bounds (exclusive); anything beyond the last is MAJOR.
_BAND_LIMITS = (
    (1e-9, DistanceBand.IDENTICAL),
    (0.02, DistanceBand.IMPERCEPTIBLE),
    (0.1, DistanceBand.MINOR),
    (0.4, DistanceBand.SIGNIFICANT),
)


def classify_distance(value: float) -> DistanceBand:
    """Map a distance to its reporting band."""
    if value < 0.0 or math.isnan(value):
        raise ValueError(f"distance must be non-negative, got {value}")
    for limit, band in _BAND_LIMITS:
        if value < limit:
            return band
    return DistanceBand.MAJOR
