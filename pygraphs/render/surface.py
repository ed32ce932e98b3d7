"""Drawing surface contract used by the pie renderer."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..config import Font, PieGraphConfig
from .colors import Color, DefaultColor, coerce_color
from .pie_geometry import Path, PieLayout, Point


@runtime_checkable
class DrawingSurface(Protocol):
    """Anything that can fill closed paths and draw centered text."""

    def fill_path(self, path: Path, color: Color) -> None: ...

    def draw_text(self, text: str, center: Point, color: Color, font: Font) -> None: ...


def draw_pie_layout(
    surface: DrawingSurface,
    layout: PieLayout,
    config: Optional[PieGraphConfig] = None,
) -> None:
    """Paint ``layout`` onto ``surface``: segments first, then labels."""
    for segment in layout.segments:
        surface.fill_path(segment.path, segment.color)
    draw_pie_labels(surface, layout, config)


def draw_pie_labels(
    surface: DrawingSurface,
    layout: PieLayout,
    config: Optional[PieGraphConfig] = None,
) -> None:
    cfg = config or PieGraphConfig()
    text_color = (
        coerce_color(cfg.text_color)
        if cfg.text_color is not None
        else DefaultColor.PIE_TEXT.color()
    )
    for label in layout.labels:
        surface.draw_text(label.text, label.anchor, text_color, cfg.text_font)
