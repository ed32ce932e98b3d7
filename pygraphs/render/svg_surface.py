"""SVG implementation of :class:`~pygraphs.render.surface.DrawingSurface`."""

from __future__ import annotations

import math
from typing import List, Mapping, Optional

from ..config import Font
from .colors import Color
from .pie_geometry import ArcTo, ClosePath, MoveTo, Path, Point
from .svg_utils import escape, fmt_coord


def _attrs(attributes: Optional[Mapping[str, object]]) -> str:
    if not attributes:
        return ""
    return "".join(f' {name}="{escape(value)}"' for name, value in attributes.items())


def _fill_attrs(color: Color) -> str:
    out = f'fill="{color.to_hex()}"'
    if color.alpha < 1.0:
        out += f' fill-opacity="{color.alpha:.3f}"'
    return out


def path_to_svg(path: Path) -> str:
    """Translate path commands to SVG path data.

    Arcs are emitted in pieces of at most half a turn so that a full circle,
    whose endpoints coincide, still renders.
    """
    parts: List[str] = []
    current: Optional[Point] = None
    for cmd in path:
        if isinstance(cmd, MoveTo):
            parts.append(f"M {fmt_coord(cmd.point.x)},{fmt_coord(cmd.point.y)}")
            current = cmd.point
        elif isinstance(cmd, ArcTo):
            start = cmd.start_point
            op = "L" if current is not None else "M"
            parts.append(f"{op} {fmt_coord(start.x)},{fmt_coord(start.y)}")
            pieces = 1 if cmd.sweep <= math.pi else 2
            step = (cmd.end_angle - cmd.start_angle) / pieces
            sweep_flag = 1 if cmd.clockwise else 0
            r = fmt_coord(cmd.radius)
            for k in range(1, pieces + 1):
                p = cmd.center.polar(cmd.radius, cmd.start_angle + step * k)
                parts.append(f"A {r},{r} 0 0,{sweep_flag} {fmt_coord(p.x)},{fmt_coord(p.y)}")
            current = cmd.end_point
        elif isinstance(cmd, ClosePath):
            parts.append("Z")
    return " ".join(parts)


def has_area(path: Path) -> bool:
    return any(
        isinstance(cmd, ArcTo) and cmd.sweep > 0 and cmd.radius > 0 for cmd in path
    )


class SvgSurface:
    """Collects filled paths and text as SVG elements."""

    def __init__(self, width: float, height: float, css_class: str = "pie-graph-svg"):
        self.width = width
        self.height = height
        self.css_class = css_class
        self.elements: List[str] = []

    def fill_path(
        self,
        path: Path,
        color: Color,
        css_class: str = "pie-segment",
        data: Optional[Mapping[str, object]] = None,
    ) -> None:
        # zero-width segments keep their slot but draw nothing
        if not has_area(path):
            return
        self.elements.append(
            f'<path d="{path_to_svg(path)}" {_fill_attrs(color)} class="{css_class}"{_attrs(data)}/>'
        )

    def draw_text(self, text: str, center: Point, color: Color, font: Font) -> None:
        self.elements.append(
            f'<text x="{fmt_coord(center.x)}" y="{fmt_coord(center.y)}" '
            f'text-anchor="middle" dominant-baseline="central" '
            f'font-family="{escape(font.family)}" font-size="{font.size:g}" '
            f'font-weight="{escape(font.weight)}" {_fill_attrs(color)} '
            f'class="pie-label">{escape(text)}</text>'
        )

    def add_raw(self, element: str) -> None:
        self.elements.append(element)

    def to_svg(self) -> str:
        body = "\n  ".join(self.elements)
        return (
            f'<svg class="{self.css_class}" viewBox="0 0 {self.width:g} {self.height:g}" '
            f'width="{self.width:g}" height="{self.height:g}" '
            f'xmlns="http://www.w3.org/2000/svg">\n  {body}\n</svg>'
        )
