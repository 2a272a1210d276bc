# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum


class OutputFormat(Enum):
    """Output format for serializers."""

    LINES = "lines"
    JSON = "json"
    JSON_PRETTY = "json_pretty"
    CSS = "css"


def json_indent(format: OutputFormat) -> int | None:
    """Indentation passed to ``json.dumps`` for a JSON format."""
    return 2 if format == OutputFormat.JSON_PRETTY else None
