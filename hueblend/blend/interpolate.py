# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Linear interpolation between two colors.

Blending happens in normalized float space, never in 0-255 integer space,
so rounding happens exactly once: when a color is rendered as hex.

For ``midpoints = n`` the result has ``n + 2`` colors. Step ``i`` uses

    t = i / (n + 1)
    channel = start + (end - start) * t

Each step depends only on the endpoints and its own index, so the index
range can be split into chunks and evaluated concurrently; chunks are
reassembled in index order.
"""

from __future__ import annotations

import numbers
from concurrent.futures import ThreadPoolExecutor
from itertools import groupby

import numpy as np
from numpy.typing import NDArray

from hueblend.schema import Color


def _check_midpoints(midpoints: int) -> int:
    if isinstance(midpoints, bool) or not isinstance(midpoints, numbers.Integral):
        raise ValueError(f"midpoints must be a non-negative integer, got {midpoints!r}")
    if midpoints < 0:
        raise ValueError(f"midpoints must be a non-negative integer, got {midpoints}")
    return int(midpoints)


def _check_workers(workers: int | None) -> int | None:
    if workers is None:
        return None
    if isinstance(workers, bool) or not isinstance(workers, numbers.Integral) or workers < 1:
        raise ValueError(f"workers must be a positive integer, got {workers!r}")
    return int(workers)


def _evaluate(
    start: NDArray[np.float64],
    end: NDArray[np.float64],
    indices: NDArray[np.float64],
    total_steps: int,
) -> NDArray[np.float64]:
    """
    Evaluate interpolation steps for a block of indices.

    Args:
        start: Array of shape (3,) with normalized start channels
        end: Array of shape (3,) with normalized end channels
        indices: Array of shape (N,) with step indices
        total_steps: Number of steps in the whole blend (>= 2)

    Returns:
        Array of shape (N, 3) with normalized channels
    """
    t = indices / (total_steps - 1)
    rows = start + (end - start) * t[:, np.newaxis]
    # Absorb float drift; the exact values already lie in [0, 1]
    return np.clip(rows, 0.0, 1.0)


def blend(
    start: Color,
    end: Color,
    midpoints: int,
    *,
    workers: int | None = None,
) -> list[Color]:
    """
    Interpolate ``midpoints`` colors between ``start`` and ``end``.

    Args:
        start: First color of the sequence.
        end: Last color of the sequence.
        midpoints: Number of intermediate colors (>= 0).
        workers: Evaluate the steps on a thread pool of this size.
            ``None`` or 1 evaluates everything in one vectorized pass.
            The result is identical either way.

    Returns:
        List of ``midpoints + 2`` colors. The first element is ``start``
        and the last is ``end``, exactly.

    Raises:
        ValueError: If midpoints is negative or workers is not positive.

    Example::

        >>> red = Color.from_bytes(255, 0, 0)
        >>> green = Color.from_bytes(0, 255, 0)
        >>> [c.to_hex() for c in blend(red, green, 1)]
        ['#ff0000', '#808000', '#00ff00']
    """
    midpoints = _check_midpoints(midpoints)
    workers = _check_workers(workers)
    total_steps = midpoints + 2

    a = np.asarray(start.to_tuple(), dtype=np.float64)
    b = np.asarray(end.to_tuple(), dtype=np.float64)
    # Endpoints are the inputs themselves; only interior steps are computed
    indices = np.arange(1, total_steps - 1, dtype=np.float64)

    if workers is None or workers == 1 or len(indices) < 2:
        rows = _evaluate(a, b, indices, total_steps)
    else:
        chunks = np.array_split(indices, min(workers, len(indices)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields results in submission order
            parts = list(executor.map(lambda chunk: _evaluate(a, b, chunk, total_steps), chunks))
        rows = np.concatenate(parts)

    interior = [Color.from_tuple(row.tolist()) for row in rows]
    return [start, *interior, end]


def blend_unique(
    start: Color,
    end: Color,
    midpoints: int,
    *,
    workers: int | None = None,
) -> list[Color]:
    """
    Same as ``blend``, with consecutive equal colors collapsed into one.

    Only adjacent duplicates are removed. The length of the result is at
    most ``midpoints + 2``; callers must not assume any particular length.
    """
    return [color for color, _ in groupby(blend(start, end, midpoints, workers=workers))]


def blend_hex(
    start: str,
    end: str,
    midpoints: int,
    *,
    unique: bool = False,
    workers: int | None = None,
) -> list[str]:
    """
    Blend two hex colors and return the sequence as hex strings.

    Raises:
        WrongFormatError, HexParseError: If either endpoint is not valid hex.
    """
    fn = blend_unique if unique else blend
    colors = fn(Color.from_hex(start), Color.from_hex(end), midpoints, workers=workers)
    return [c.to_hex() for c in colors]
