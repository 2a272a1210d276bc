# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Serializers for blend results.

Each serializer formats colors for one kind of output. All serializers
preserve the colors exactly -- no modification or inference.
"""

from hueblend.runtime.serializers.base import OutputFormat
from hueblend.runtime.serializers.palette import to_palette_text
from hueblend.runtime.serializers.report import to_distance_report
from hueblend.runtime.serializers.writer import write_palette

__all__ = [
    "OutputFormat",
    "to_palette_text",
    "to_distance_report",
    "write_palette",
]
