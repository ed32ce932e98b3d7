"""Tests for colors, hex parsing and palettes."""

import pytest

from pygraphs.render.colors import (
    BLACK,
    Color,
    DefaultColor,
    coerce_color,
    pie_colors,
    resolve_palette,
)


class TestHexParsing:
    @pytest.mark.parametrize("text", ["#FF0000", "0xFF0000", "0Xff0000", "ff0000"])
    def test_prefixes(self, text):
        assert Color.from_hex(text) == Color(1.0, 0.0, 0.0, 1.0)

    def test_eight_digits_carry_alpha(self):
        color = Color.from_hex("#00FF0080")
        assert color.green == 1.0
        assert color.alpha == pytest.approx(128 / 255)

    @pytest.mark.parametrize("text", ["", "#fff", "#12345G", "#+12345", "0x1234567"])
    def test_invalid_is_black(self, text):
        assert Color.from_hex(text) == BLACK

    def test_to_hex(self):
        assert Color.from_hex("#4DC2AB").to_hex() == "#4dc2ab"

    def test_defaults(self):
        assert DefaultColor.PIE_TEXT.color() == Color(1.0, 1.0, 1.0)
        assert DefaultColor.BAR.color().to_hex() == "#4dc2ab"

    def test_coerce_rejects_other_types(self):
        with pytest.raises(TypeError):
            coerce_color(0xFF0000)  # type: ignore[arg-type]


class TestPalette:
    def test_one_color_per_unit(self):
        assert len(pie_colors(7)) == 7
        assert pie_colors(0) == []

    def test_hues_evenly_spaced_in_order(self):
        first, second = pie_colors(2)
        # hue 0 is red, hue 0.5 is cyan
        assert first.red > first.green and first.red > first.blue
        assert second.green > second.red and second.blue > second.red

    def test_resolve_generates_default(self):
        assert resolve_palette(None, 3) == pie_colors(3)

    def test_resolve_truncates_longer_lists(self):
        palette = resolve_palette(["#000000", "#ffffff", "#ff0000"], 2)
        assert [c.to_hex() for c in palette] == ["#000000", "#ffffff"]

    def test_resolve_rejects_short_lists(self):
        with pytest.raises(ValueError):
            resolve_palette(["#000000"], 2)
