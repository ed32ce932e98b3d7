"""Pie and donut geometry.

Turns a pie :class:`~pygraphs.model.Graph` plus a :class:`PieGraphConfig`
and a bounding rectangle into drawable segments and label anchors. The
computation is pure: the same inputs always produce the same layout.

Angles are in radians in screen coordinates (y grows downwards), so
increasing angles wind clockwise on screen. Segment 0 starts at 12 o'clock
(``-pi/2``).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np

from ..config import PieGraphConfig, Rect
from ..model import Graph, GraphKind, Unit
from ..numeric import is_finite
from .colors import Color, resolve_palette

logger = logging.getLogger(__name__)

TOP_ANGLE = -math.pi / 2.0
LABEL_RADIUS_FACTOR = 0.75


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def polar(self, radius: float, angle: float) -> "Point":
        return Point(self.x + math.cos(angle) * radius, self.y + math.sin(angle) * radius)


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class ArcTo:
    """Circular arc; a surface joins it to the current point with a line.

    ``clockwise`` is on-screen winding: ``True`` sweeps from ``start_angle``
    towards increasing angles.
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool = True

    @property
    def start_point(self) -> Point:
        return self.center.polar(self.radius, self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.center.polar(self.radius, self.end_angle)

    @property
    def sweep(self) -> float:
        return abs(self.end_angle - self.start_angle)


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, ArcTo, ClosePath]
Path = Tuple[PathCommand, ...]


@dataclass(frozen=True)
class PieSegment:
    """Geometry of one unit.

    Attributes:
        index: Position of the unit in the graph.
        unit: The source unit.
        fraction: Share of the total in ``[0, 1]``.
        start_angle: Un-indented start of the sweep.
        end_angle: Un-indented end of the sweep.
        draw_start_angle: Start of the drawn arc (``start_angle + indent``).
        draw_end_angle: End of the drawn arc (``end_angle - indent``).
        bisector_angle: Midpoint of the un-indented sweep.
        outer_radius: Radius of the outer edge.
        inner_radius: Radius of the donut hole edge, ``None`` for a full wedge.
        color: Fill color.
        path: Closed path to fill.
    """

    index: int
    unit: Unit
    fraction: float
    start_angle: float
    end_angle: float
    draw_start_angle: float
    draw_end_angle: float
    bisector_angle: float
    outer_radius: float
    inner_radius: Optional[float]
    color: Color
    path: Path

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def draw_sweep(self) -> float:
        return self.draw_end_angle - self.draw_start_angle

    @property
    def is_donut(self) -> bool:
        return self.inner_radius is not None


@dataclass(frozen=True)
class PieLabel:
    index: int
    unit: Unit
    text: str
    anchor: Point
    angle: float


@dataclass(frozen=True)
class PieLayout:
    """Everything a drawing surface needs to paint one pie chart."""

    frame: Rect
    center: Point
    radius: float
    total: Any
    segments: Tuple[PieSegment, ...] = ()
    labels: Tuple[PieLabel, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly summary of the layout."""
        return {
            "center": [self.center.x, self.center.y],
            "radius": self.radius,
            "total": float(self.total),
            "segments": [
                {
                    "index": s.index,
                    "key": str(s.unit.key),
                    "value": float(s.unit.value) if is_finite(s.unit.value) else None,
                    "fraction": s.fraction,
                    "start_angle": s.start_angle,
                    "end_angle": s.end_angle,
                    "draw_start_angle": s.draw_start_angle,
                    "draw_end_angle": s.draw_end_angle,
                    "outer_radius": s.outer_radius,
                    "inner_radius": s.inner_radius,
                    "color": s.color.to_hex(),
                }
                for s in self.segments
            ],
            "labels": [
                {"index": lb.index, "text": lb.text, "anchor": [lb.anchor.x, lb.anchor.y]}
                for lb in self.labels
            ],
        }


def segment_path(
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    inner_radius: Optional[float] = None,
) -> Path:
    """Wedge from the center, or an annulus wedge when ``inner_radius`` is set."""
    commands = [
        MoveTo(center),
        ArcTo(center, radius, start_angle, end_angle, clockwise=True),
    ]
    if inner_radius is not None:
        commands.append(ArcTo(center, inner_radius, end_angle, start_angle, clockwise=False))
    commands.append(ClosePath())
    return tuple(commands)


def compute_pie_layout(
    graph: Graph,
    config: Optional[PieGraphConfig] = None,
    bounds: Optional[Rect] = None,
) -> PieLayout:
    """Compute segments and label anchors for a pie graph.

    Negative and non-finite values count as zero. A graph whose total is
    zero (including an empty graph) yields a layout with no segments and no
    labels.

    Args:
        graph: Graph of kind ``PIE``.
        config: Render configuration; defaults to :class:`PieGraphConfig`.
        bounds: View bounds before ``content_insets`` are applied.

    Returns:
        A :class:`PieLayout` with one segment per unit, in unit order.

    Raises:
        ValueError: If the graph is not a pie graph, or the configured
            color list is shorter than the number of units.
    """
    cfg = config or PieGraphConfig()
    log = cfg.logger or logger
    if graph.kind is not GraphKind.PIE:
        raise ValueError(f"Pie layout needs a pie graph, got {graph.kind.value!r}")

    frame = (bounds or Rect(0.0, 0.0, 0.0, 0.0)).inset(cfg.content_insets)
    center = Point(*frame.center)
    radius = min(frame.width, frame.height) / 2.0

    skipped = sum(1 for v in graph.values() if not is_finite(v))
    if skipped:
        log.warning("%d non-finite value(s) treated as zero", skipped)

    total = graph.total()
    # scaled by the largest value so huge finite inputs cannot overflow the sum
    magnitudes = np.asarray([float(v) for v in graph.clamped_values()], dtype=float)
    peak = float(magnitudes.max()) if magnitudes.size else 0.0
    if not peak > 0.0:
        log.debug("pie total is %r for %d unit(s); nothing to draw", total, len(graph))
        return PieLayout(frame=frame, center=center, radius=radius, total=total)

    colors = resolve_palette(cfg.colors, len(graph))
    indent = cfg.fractions_indent
    ratio = cfg.donut_radius_ratio
    inner_radius = radius * (1.0 - ratio) if ratio > 0 else None

    scaled = magnitudes / peak
    fractions = scaled / scaled.sum()
    cumulative = np.concatenate(([0.0], np.cumsum(fractions)[:-1]))
    starts = TOP_ANGLE + 2.0 * math.pi * cumulative
    ends = starts + 2.0 * math.pi * fractions
    bisectors = TOP_ANGLE + 2.0 * math.pi * (cumulative + fractions / 2.0)

    segments = []
    labels = []
    for i, unit in enumerate(graph.units):
        start, end, mid = float(starts[i]), float(ends[i]), float(bisectors[i])
        draw_start, draw_end = start + indent, end - indent
        if draw_end < draw_start:
            # sweep narrower than the gutters
            draw_start = draw_end = mid
        segments.append(
            PieSegment(
                index=i,
                unit=unit,
                fraction=float(fractions[i]),
                start_angle=start,
                end_angle=end,
                draw_start_angle=draw_start,
                draw_end_angle=draw_end,
                bisector_angle=mid,
                outer_radius=radius,
                inner_radius=inner_radius,
                color=colors[i],
                path=segment_path(center, radius, draw_start, draw_end, inner_radius),
            )
        )
        text = graph.label_fn(unit, total) if graph.label_fn is not None else None
        if text:
            labels.append(
                PieLabel(
                    index=i,
                    unit=unit,
                    text=str(text),
                    anchor=center.polar(radius * LABEL_RADIUS_FACTOR, mid),
                    angle=mid,
                )
            )

    log.debug(
        "pie layout: %d segment(s), %d label(s), total=%r, radius=%.2f",
        len(segments),
        len(labels),
        total,
        radius,
    )
    return PieLayout(
        frame=frame,
        center=center,
        radius=radius,
        total=total,
        segments=tuple(segments),
        labels=tuple(labels),
    )
