"""Color values, hex parsing and default palettes."""

from __future__ import annotations

import colorsys
import string
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Union


@dataclass(frozen=True)
class Color:
    """RGBA color with float channels in ``[0, 1]``."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_rgb_int(cls, rgb: int, alpha: float = 1.0) -> "Color":
        return cls(
            red=((rgb & 0xFF0000) >> 16) / 255.0,
            green=((rgb & 0xFF00) >> 8) / 255.0,
            blue=(rgb & 0xFF) / 255.0,
            alpha=float(alpha),
        )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``RRGGBB`` or ``RRGGBBAA`` with an optional ``#``/``0x`` prefix.

        Anything unparseable yields opaque black.
        """
        digits = value
        for prefix in ("0x", "0X", "#"):
            if digits.startswith(prefix):
                digits = digits[len(prefix):]
                break
        if len(digits) not in (6, 8) or not all(c in string.hexdigits for c in digits):
            return BLACK
        packed = int(digits, 16)
        if len(digits) == 8:
            return cls.from_rgb_int(packed >> 8, alpha=(packed & 0xFF) / 255.0)
        return cls.from_rgb_int(packed)

    @classmethod
    def from_hsv(
        cls, hue: float, saturation: float, brightness: float, alpha: float = 1.0
    ) -> "Color":
        r, g, b = colorsys.hsv_to_rgb(hue % 1.0, saturation, brightness)
        return cls(r, g, b, alpha)

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(
            *(int(round(max(0.0, min(1.0, c)) * 255)) for c in self.rgb)
        )

    @property
    def rgb(self) -> tuple:
        return (self.red, self.green, self.blue)


BLACK = Color(0.0, 0.0, 0.0, 1.0)


def coerce_color(value: Union[Color, str]) -> Color:
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex(value)
    raise TypeError(f"Not a color: {value!r}")


class DefaultColor(Enum):
    BAR = "#4DC2AB"
    LINE = "#FF0066"
    BAR_TEXT = "#333333"
    LINE_TEXT = "#333333"
    PIE_TEXT = "#FFFFFF"

    def color(self) -> Color:
        return Color.from_hex(self.value)


def pie_colors(count: int) -> List[Color]:
    """Evenly hue-spaced palette, one entry per unit in input order."""
    if count <= 0:
        return []
    return [Color.from_hsv(i / count, 0.9, 0.9) for i in range(count)]


def resolve_palette(colors: Union[Sequence[Union[Color, str]], None], count: int) -> List[Color]:
    """Return exactly ``count`` colors, generating the default palette if needed.

    Raises:
        ValueError: If ``colors`` has fewer entries than ``count``.
    """
    if colors is None:
        return pie_colors(count)
    if len(colors) < count:
        raise ValueError(
            f"Color list has {len(colors)} entries but the graph has {count} units"
        )
    return [coerce_color(c) for c in list(colors)[:count]]
