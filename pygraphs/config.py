from __future__ import annotations

"""Render configuration for pie charts.

Kept apart from the geometry engine so renderers, the public API and the CLI
can share one set of defaults without importing each other.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence, Union

if TYPE_CHECKING:  # pragma: no cover
    from .render.colors import Color

ColorLike = Union["Color", str]


@dataclass(frozen=True)
class EdgeInsets:
    """Padding subtracted from the view bounds before layout."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    @property
    def horizontal(self) -> float:
        return self.left + self.right


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def inset(self, insets: EdgeInsets) -> "Rect":
        """Shrink by ``insets``; negative sizes collapse to zero."""
        return Rect(
            x=self.x + insets.left,
            y=self.y + insets.top,
            width=max(0.0, self.width - insets.horizontal),
            height=max(0.0, self.height - insets.vertical),
        )

    @property
    def center(self) -> "tuple[float, float]":
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)


@dataclass(frozen=True)
class Font:
    family: str = "Arial, sans-serif"
    size: float = 10.0
    weight: str = "normal"


@dataclass
class PieGraphConfig:
    """Configuration understood by the pie geometry engine and renderers.

    Attributes:
        colors: One color per unit, by position. ``None`` generates an
            evenly hue-spaced palette sized to the graph.
        text_color: Label color (defaults to white).
        text_font: Label font.
        donut_radius_ratio: Fraction of the outer radius cut out as a hole.
            Values outside ``[0, 1]`` fall back to ``0`` (solid pie).
        fractions_indent: Angular gap in radians applied to both edges of
            every segment.
        content_insets: Padding subtracted from the bounds.
        logger: Optional logger; defaults to the module logger.
        log_level: Level applied to ``logger`` when one is given.
    """

    colors: Optional[Sequence[ColorLike]] = None
    text_color: Optional[ColorLike] = None
    text_font: Font = field(default_factory=Font)
    donut_radius_ratio: float = 0.0
    fractions_indent: float = 0.0
    content_insets: EdgeInsets = field(default_factory=EdgeInsets)
    # Logging
    logger: Optional[logging.Logger] = None
    log_level: int = logging.INFO

    def __post_init__(self) -> None:
        ratio = float(self.donut_radius_ratio)
        self.donut_radius_ratio = ratio if 0.0 <= ratio <= 1.0 else 0.0
        self.fractions_indent = max(0.0, float(self.fractions_indent))
        if self.logger is not None:
            self.logger.setLevel(self.log_level)
