# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Color -- the RGB value type.

Design principles:
- Immutable: Color is a frozen dataclass
- Normalized: channels are stored as floats in [0.0, 1.0]
- Strict: out-of-range input is rejected, never clamped
- Ordered: colors sort lexicographically on (red, green, blue)

Hex text (``#rrggbb``) is the canonical external form. Parsing is
case-insensitive; rendering is always lowercase.

Round-trip note:
    ``Color.from_hex(c.to_hex()) == c`` holds for every color built with
    ``from_bytes`` or ``from_hex``, because byte -> float -> byte is lossless
    with round-to-nearest and divisor 255. It does not hold in general for
    colors built from arbitrary floats; hex rendering quantizes to 8 bits.
"""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from hueblend.schema.errors import HexParseError, OutOfRangeError, WrongFormatError


# =============================================================================
# Constants
# =============================================================================

HEX_LENGTH = 7
CHANNELS = ("red", "green", "blue")

_HEX_PAIR_RE = re.compile(r"[0-9a-fA-F]{2}")


# =============================================================================
# Helpers
# =============================================================================


def _normalized(channel: str, value: object) -> float:
    """Coerce a channel value to float and check it lies in [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise OutOfRangeError(channel, value)
    as_float = float(value)
    # NaN fails both comparisons
    if not 0.0 <= as_float <= 1.0:
        raise OutOfRangeError(channel, value)
    return as_float


def _byte(channel: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise OutOfRangeError(channel, value, bounds="0..255")
    as_int = int(value)
    if not 0 <= as_int <= 255:
        raise OutOfRangeError(channel, value, bounds="0..255")
    return as_int


def _parse_pair(pair: str) -> int:
    """Parse one two-digit hex group into a byte."""
    # int(..., 16) also accepts signs, underscores and whitespace
    if not _HEX_PAIR_RE.fullmatch(pair):
        raise HexParseError(pair)
    return int(pair, 16)


def quantize(components: Iterable[float]) -> tuple[int, ...]:
    """
    Convert normalized components to 8-bit values.

    Each component is clamped to [0, 1], scaled by 255 and rounded half
    away from zero (``0.5 -> 1``), unlike ``round()`` which rounds half to
    even.
    """
    scaled = np.clip(np.asarray(list(components), dtype=np.float64), 0.0, 1.0) * 255.0
    return tuple(int(v) for v in np.floor(scaled + 0.5))


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, slots=True, order=True)
class Color:
    """
    A single RGB color with normalized channels.

    Attributes:
        red: Red channel in [0.0, 1.0]
        green: Green channel in [0.0, 1.0]
        blue: Blue channel in [0.0, 1.0]

    Raises:
        OutOfRangeError: If any channel is outside [0.0, 1.0] or not a number.
    """
    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        for channel in CHANNELS:
            value = _normalized(channel, getattr(self, channel))
            object.__setattr__(self, channel, value)

    def __str__(self) -> str:
        return self.to_hex()

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int) -> Color:
        """
        Build a color from 8-bit channel values (0..255 each).

        Every byte triple maps to a valid color. Values outside 0..255
        raise OutOfRangeError rather than wrapping.
        """
        r, g, b = (_byte(ch, v) for ch, v in zip(CHANNELS, (red, green, blue)))
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """
        Parse ``#rrggbb`` hex text.

        Raises:
            WrongFormatError: Text is not 7 characters or lacks ``#``.
            HexParseError: A channel group is not two hex digits.
        """
        if not isinstance(text, str) or len(text) != HEX_LENGTH or not text.startswith("#"):
            raise WrongFormatError(text)
        r = _parse_pair(text[1:3])
        g = _parse_pair(text[3:5])
        b = _parse_pair(text[5:7])
        return cls.from_bytes(r, g, b)

    @classmethod
    def from_tuple(cls, components: Iterable[float]) -> Color:
        """Build a color from a sequence of three normalized floats."""
        values = tuple(components)
        if len(values) != len(CHANNELS):
            raise WrongFormatError(values, reason="expected 3 components")
        return cls(*values)

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary (reads the ``hex`` key)."""
        return cls.from_hex(data["hex"])

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_tuple(self) -> tuple[float, float, float]:
        """Normalized (red, green, blue)."""
        return (self.red, self.green, self.blue)

    def to_bytes(self) -> tuple[int, int, int]:
        """8-bit (red, green, blue), rounded half away from zero."""
        r, g, b = quantize(self.to_tuple())
        return (r, g, b)

    def to_hex(self) -> str:
        """
        Render as lowercase ``#rrggbb``.

        Returns:
            Hex string like "#c86432"
        """
        r, g, b = self.to_bytes()
        return f"#{r:02x}{g:02x}{b:02x}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.to_hex(),
            "rgb": list(self.to_bytes()),
            "normalized": list(self.to_tuple()),
        }
