"""Rendering components for pie charts."""

from .colors import Color, DefaultColor, pie_colors
from .pie_chart import PieChartRenderer
from .pie_geometry import PieLayout, PieLabel, PieSegment, compute_pie_layout
from .surface import DrawingSurface, draw_pie_layout
from .svg_surface import SvgSurface

__all__ = [
    "Color",
    "DefaultColor",
    "DrawingSurface",
    "PieChartRenderer",
    "PieLabel",
    "PieLayout",
    "PieSegment",
    "SvgSurface",
    "compute_pie_layout",
    "draw_pie_layout",
    "pie_colors",
]
