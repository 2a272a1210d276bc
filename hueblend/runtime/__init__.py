# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Output runtime for Hueblend.

Turns blend results into text and files:

1. Palette -- lines, JSON or CSS custom properties
2. Distance report -- one line or a JSON object
3. Writer -- newline-terminated UTF-8 file output

The output layer never modifies colors.
"""

from hueblend.runtime.serializers import (
    OutputFormat,
    to_distance_report,
    to_palette_text,
    write_palette,
)

__all__ = [
    "to_palette_text",
    "to_distance_report",
    "write_palette",
    "OutputFormat",
]
