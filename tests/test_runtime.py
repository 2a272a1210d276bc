# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""Tests for the output runtime (palette, distance report, writer)."""

import json
import math

import pytest

from hueblend.blend import blend, blend_unique
from hueblend.runtime import (
    OutputFormat,
    to_distance_report,
    to_palette_text,
    write_palette,
)
from hueblend.schema import Color


@pytest.fixture
def red():
    return Color.from_hex("#ff0000")


@pytest.fixture
def green():
    return Color.from_hex("#00ff00")


@pytest.fixture
def palette(red, green):
    return blend(red, green, 1)


# ---------------------------------------------------------------------------
# to_palette_text
# ---------------------------------------------------------------------------

class TestPaletteLines:

    def test_default_is_lines(self, palette):
        assert to_palette_text(palette) == "#ff0000\n#808000\n#00ff00"

    def test_no_trailing_newline(self, palette):
        assert not to_palette_text(palette).endswith("\n")

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            to_palette_text([])


class TestPaletteJSON:

    def test_parses(self, palette):
        data = json.loads(to_palette_text(palette, format=OutputFormat.JSON))
        assert data["start"] == "#ff0000"
        assert data["end"] == "#00ff00"
        assert data["midpoints"] == 1
        assert data["unique"] is False

    def test_color_entries(self, palette):
        data = json.loads(to_palette_text(palette, format=OutputFormat.JSON))
        assert [c["hex"] for c in data["colors"]] == ["#ff0000", "#808000", "#00ff00"]
        assert data["colors"][1]["rgb"] == [128, 128, 0]
        assert data["colors"][1]["normalized"] == pytest.approx([0.5, 0.5, 0.0])

    def test_compact_vs_pretty(self, palette):
        compact = to_palette_text(palette, format=OutputFormat.JSON)
        pretty = to_palette_text(palette, format=OutputFormat.JSON_PRETTY)
        assert "\n" not in compact
        assert "\n  " in pretty
        assert json.loads(compact) == json.loads(pretty)

    def test_records_requested_midpoints(self):
        c = Color.from_hex("#102030")
        colors = blend_unique(c, c, 8)
        data = json.loads(
            to_palette_text(colors, format=OutputFormat.JSON, midpoints=8, unique=True)
        )
        assert data["midpoints"] == 8
        assert data["unique"] is True
        assert len(data["colors"]) == 1


class TestPaletteCSS:

    def test_custom_properties(self, palette):
        assert to_palette_text(palette, format=OutputFormat.CSS) == (
            ":root {\n"
            "  --blend-0: #ff0000;\n"
            "  --blend-1: #808000;\n"
            "  --blend-2: #00ff00;\n"
            "}"
        )

    def test_prefix(self, palette):
        text = to_palette_text(palette, format=OutputFormat.CSS, css_prefix="ramp")
        assert "--ramp-0: #ff0000;" in text


# ---------------------------------------------------------------------------
# to_distance_report
# ---------------------------------------------------------------------------

class TestDistanceReport:

    def test_natural(self, red, green):
        assert to_distance_report(red, green) == "#ff0000 -> #00ff00: distance 1.4142 (major)"

    def test_identical(self, red):
        assert to_distance_report(red, red).endswith("distance 0.0000 (effectively identical)")

    def test_precision(self, red, green):
        assert "distance 1.41 " in to_distance_report(red, green, precision=2)

    def test_json(self, red, green):
        data = json.loads(to_distance_report(red, green, format=OutputFormat.JSON))
        assert data["a"] == "#ff0000"
        assert data["b"] == "#00ff00"
        assert data["distance"] == pytest.approx(math.sqrt(2))
        assert data["normalized"] == pytest.approx(math.sqrt(2) / math.sqrt(3))
        assert data["band"] == "major"

    def test_css_unsupported(self, red, green):
        with pytest.raises(ValueError, match="css"):
            to_distance_report(red, green, format=OutputFormat.CSS)


# ---------------------------------------------------------------------------
# write_palette
# ---------------------------------------------------------------------------

class TestWritePalette:

    def test_writes_newline_terminated(self, tmp_path, palette):
        path = write_palette(tmp_path / "out.txt", to_palette_text(palette))
        assert path.read_text(encoding="utf-8") == "#ff0000\n#808000\n#00ff00\n"

    def test_keeps_existing_newline(self, tmp_path):
        path = write_palette(tmp_path / "out.txt", "#000000\n")
        assert path.read_text(encoding="utf-8") == "#000000\n"

    def test_creates_parent_dirs(self, tmp_path):
        path = write_palette(tmp_path / "a" / "b" / "out.css", ":root {\n}")
        assert path.exists()

    def test_accepts_str_path(self, tmp_path):
        path = write_palette(str(tmp_path / "out.txt"), "#000000")
        assert path == tmp_path / "out.txt"

    def test_directory_target_raises(self, tmp_path):
        with pytest.raises(OSError):
            write_palette(tmp_path, "#000000")
