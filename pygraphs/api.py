"""High-level public API for pygraphs.

Two entry points cover most uses:

- `render_pie`: normalizes caller data into a pie Graph, lays it out and
  renders a standalone SVG, returned as a :class:`Chart`.
- `draw_pie`: the same layout painted onto any caller-provided
  :class:`~pygraphs.render.surface.DrawingSurface`.

Accepted data: a prepared Graph, a pandas Series or DataFrame, a mapping, a
sequence of ``(key, value)`` records, or a plain numeric sequence
(numpy arrays included).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import pandas as pd

from .config import PieGraphConfig, Rect
from .model import Graph, LabelFn
from .normalize import PairComparator, pie_graph
from .render.pie_chart import PieChartRenderer
from .render.pie_geometry import PieLayout, compute_pie_layout
from .render.surface import DrawingSurface, draw_pie_layout


@dataclass
class Chart:
    svg: str
    layout: PieLayout

    """Container for a rendered chart and the geometry it was drawn from.

    Attributes:
        svg: Standalone SVG document.
        layout: Segment and label geometry, see :class:`PieLayout`.
    """

    def to_dict(self) -> Dict[str, Any]:
        return self.layout.to_dict()

    def save_svg(self, path: str) -> None:
        """Write the SVG to disk. Parent directories must exist."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.svg)

    def save_json(self, path: str) -> None:
        """Write the layout summary as JSON. Parent directories must exist."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)

    def save(self, path: str) -> None:
        """Save based on the file extension (``.svg`` or ``.json``).

        Raises:
            ValueError: If the extension is not one of ``.svg`` or ``.json``.
        """
        ext = os.path.splitext(path)[1].lower()
        if ext == ".svg":
            self.save_svg(path)
        elif ext == ".json":
            self.save_json(path)
        else:
            raise ValueError(f"Unknown extension for Chart.save(): {ext}")

    # Jupyter-friendly inline display
    def _repr_svg_(self) -> str:  # pragma: no cover - visual
        return self.svg


def frame_to_series(df: pd.DataFrame, key: Optional[str], value: Optional[str]) -> pd.Series:
    """Pick the key/value columns out of a DataFrame.

    Without explicit names: a single column is used as values keyed by the
    index; otherwise the first column is the key and the second the value.
    """
    columns = list(df.columns)
    for name in (key, value):
        if name is not None and name not in columns:
            raise ValueError(f"Column not found: {name!r}")
    if value is None:
        if key is None and len(columns) == 1:
            return df[columns[0]]
        remaining = [c for c in columns if c != key]
        if key is None and remaining:
            key, remaining = remaining[0], remaining[1:]
        if not remaining:
            raise ValueError("Cannot infer the value column; pass value=...")
        value = remaining[0]
    if key is None:
        return df[value]
    return df.set_index(key)[value]


def _coerce_input(
    data: Any,
    key: Optional[str] = None,
    value: Optional[str] = None,
    sort_fn: Optional[PairComparator] = None,
    label_fn: Optional[LabelFn] = None,
) -> Graph:
    if isinstance(data, pd.DataFrame):
        data = frame_to_series(data, key, value)
    if isinstance(data, Graph):
        if label_fn is not None:
            data = Graph(kind=data.kind, units=data.units, range=data.range, label_fn=label_fn)
        return data
    kwargs: Dict[str, Any] = {"label_fn": label_fn}
    if sort_fn is not None:
        kwargs["sort_fn"] = sort_fn
    return pie_graph(data, **kwargs)


def render_pie(
    data: Any,
    config: Optional[PieGraphConfig] = None,
    width: float = 240,
    height: float = 240,
    key: Optional[str] = None,
    value: Optional[str] = None,
    sort_fn: Optional[PairComparator] = None,
    label_fn: Optional[LabelFn] = None,
) -> Chart:
    """Lay out and render a pie or donut chart.

    Args:
        data: Graph, pandas Series/DataFrame, mapping, keyed sequence or
            numeric sequence.
        config: Optional render configuration.
        width: SVG width in user units.
        height: SVG height in user units.
        key: DataFrame column holding the keys.
        value: DataFrame column holding the values.
        sort_fn: Less-than predicate over ``(key, value)`` pairs, for
            mappings.
        label_fn: Label callback ``(unit, total) -> str | None``.

    Returns:
        A :class:`Chart` with the SVG and its layout.

    Raises:
        TypeError: If ``data`` is not of a supported type.
        ValueError: If a color list is too short or a column is missing.
    """
    graph = _coerce_input(data, key=key, value=value, sort_fn=sort_fn, label_fn=label_fn)
    renderer = PieChartRenderer(width=width, height=height, config=config)
    layout = renderer.layout(graph)
    return Chart(svg=renderer.render_layout(layout), layout=layout)


def draw_pie(
    surface: DrawingSurface,
    data: Any,
    bounds: Rect,
    config: Optional[PieGraphConfig] = None,
    **kwargs: Any,
) -> PieLayout:
    """Lay out ``data`` inside ``bounds`` and paint it onto ``surface``."""
    graph = _coerce_input(data, **kwargs)
    layout = compute_pie_layout(graph, config, bounds)
    draw_pie_layout(surface, layout, config)
    return layout
