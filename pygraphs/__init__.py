"""pygraphs package exports.

Preferred high-level API:
    from pygraphs import render_pie, pie_graph, PieGraphConfig
"""

__version__ = "0.1.0"

from .api import Chart, draw_pie, render_pie
from .config import EdgeInsets, Font, PieGraphConfig, Rect
from .model import Graph, GraphKind, GraphRange, Unit
from .normalize import (
    bar_graph,
    from_keyed_sequence,
    from_mapping,
    from_plain_sequence,
    from_series,
    line_graph,
    pie_graph,
)
from .render import PieChartRenderer, compute_pie_layout
