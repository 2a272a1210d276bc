# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Palette serializer.

Renders a blended color sequence as text. The serializer never changes
the colors; it only chooses how they are written down.
"""

from __future__ import annotations

import json
from typing import Sequence

from hueblend.runtime.serializers.base import OutputFormat, json_indent
from hueblend.schema import Color


def to_palette_text(
    colors: Sequence[Color],
    *,
    format: OutputFormat = OutputFormat.LINES,
    midpoints: int | None = None,
    unique: bool = False,
    css_prefix: str = "blend",
) -> str:
    """Serialize a blend result.

    Args:
        colors: The blended colors, start first and end last.
        format: LINES, JSON, JSON_PRETTY or CSS.
        midpoints: Requested midpoint count, recorded in JSON output.
            Defaults to ``len(colors) - 2``.
        unique: Whether the colors came from ``blend_unique``.
        css_prefix: Custom property prefix for CSS output.

    Returns:
        Formatted text without a trailing newline.

    Example (LINES)::

        #ff0000
        #808000
        #00ff00

    Example (CSS)::

        :root {
          --blend-0: #ff0000;
          --blend-1: #808000;
          --blend-2: #00ff00;
        }
    """
    if not colors:
        raise ValueError("cannot serialize an empty palette")

    if format == OutputFormat.LINES:
        return "\n".join(c.to_hex() for c in colors)
    elif format == OutputFormat.CSS:
        return _to_css(colors, css_prefix)
    else:
        data = {
            "start": colors[0].to_hex(),
            "end": colors[-1].to_hex(),
            "midpoints": len(colors) - 2 if midpoints is None else midpoints,
            "unique": unique,
            "colors": [c.to_dict() for c in colors],
        }
        return json.dumps(data, indent=json_indent(format))


def _to_css(colors: Sequence[Color], prefix: str) -> str:
    lines = [":root {"]
    for i, c in enumerate(colors):
        lines.append(f"  --{prefix}-{i}: {c.to_hex()};")
    lines.append("}")
    return "\n".join(lines)
