# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Distance report serializer.

Formats the distance between two colors together with its reporting band.
Bands are presentation only; the number itself is the measurement.
"""

from __future__ import annotations

import json

from hueblend.blend import MAX_DISTANCE, classify_distance, distance
from hueblend.runtime.serializers.base import OutputFormat, json_indent
from hueblend.schema import Color


def to_distance_report(
    a: Color,
    b: Color,
    *,
    format: OutputFormat = OutputFormat.LINES,
    precision: int = 4,
) -> str:
    """Serialize the distance between two colors.

    Args:
        a: First color.
        b: Second color.
        format: LINES for one natural-language line, JSON or JSON_PRETTY.
        precision: Decimal places for the natural-language form.

    Returns:
        Report string.

    Example (LINES)::

        #ff0000 -> #00ff00: distance 1.4142 (major)

    Example (JSON)::

        {"a": "#ff0000", "b": "#00ff00", "distance": 1.4142135623730951,
         "normalized": 0.816496580927726, "band": "major"}
    """
    value = distance(a, b)
    band = classify_distance(value)

    if format == OutputFormat.LINES:
        return f"{a.to_hex()} -> {b.to_hex()}: distance {value:.{precision}f} ({band.value})"
    elif format in (OutputFormat.JSON, OutputFormat.JSON_PRETTY):
        data = {
            "a": a.to_hex(),
            "b": b.to_hex(),
            "distance": value,
            "normalized": value / MAX_DISTANCE,
            "band": band.value,
        }
        return json.dumps(data, indent=json_indent(format))
    raise ValueError(f"unsupported report format: {format.value}")
