# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""File output for serialized palettes."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_palette(path: str | Path, text: str) -> Path:
    """
    Write serialized output to ``path``.

    Parent directories are created. The file is UTF-8 and always ends with
    a newline. OSError propagates to the caller.

    Returns:
        The path written.
    """
    path = Path(path)
    if path.parent != Path("."):
        path.parent.mkdir(parents=True, exist_ok=True)
    if not text.endswith("\n"):
        text += "\n"
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote %d bytes to %s", len(text.encode("utf-8")), path)
    return path
