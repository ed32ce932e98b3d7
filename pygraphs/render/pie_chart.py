"""SVG pie/donut chart renderer."""

from typing import Optional

from ..config import PieGraphConfig, Rect
from ..model import Graph
from .pie_geometry import PieLayout, compute_pie_layout
from .surface import draw_pie_labels
from .svg_surface import SvgSurface
from .svg_utils import fmt_coord


class PieChartRenderer:
    """Renders pie and donut charts as standalone SVG.

    Rendering is an explicit call per Graph: callers re-invoke ``render``
    whenever they have new data, there is no cached state between calls.
    """

    def __init__(
        self,
        width: float = 240,
        height: float = 240,
        config: Optional[PieGraphConfig] = None,
    ):
        self.width = width
        self.height = height
        self.config = config or PieGraphConfig()

    @property
    def bounds(self) -> Rect:
        return Rect(0.0, 0.0, float(self.width), float(self.height))

    def layout(self, graph: Graph) -> PieLayout:
        return compute_pie_layout(graph, self.config, self.bounds)

    def render(self, graph: Graph) -> str:
        """Generate the SVG for ``graph``.

        Args:
            graph: Graph of kind ``PIE``.

        Returns:
            SVG markup. A graph with nothing to draw gets a "No data"
            placeholder.
        """
        return self.render_layout(self.layout(graph))

    def render_layout(self, layout: PieLayout) -> str:
        if layout.is_empty:
            return self._render_empty(layout)

        surface = SvgSurface(self.width, self.height)
        for segment in layout.segments:
            surface.fill_path(
                segment.path,
                segment.color,
                data={
                    "data-index": segment.index,
                    "data-key": segment.unit.key,
                    "data-value": segment.unit.value,
                    "data-percentage": f"{segment.fraction * 100:.1f}",
                },
            )
        draw_pie_labels(surface, layout, self.config)
        return surface.to_svg()

    def _render_empty(self, layout: PieLayout) -> str:
        """Render a faint placeholder disc when there is nothing to draw."""
        surface = SvgSurface(self.width, self.height)
        cx, cy = fmt_coord(layout.center.x), fmt_coord(layout.center.y)
        r = fmt_coord(layout.radius)
        surface.add_raw(
            f'<circle cx="{cx}" cy="{cy}" r="{r}" fill="#e0e0e0" opacity="0.3" class="pie-empty"/>'
        )
        surface.add_raw(
            f'<text x="{cx}" y="{cy}" text-anchor="middle" dominant-baseline="central" '
            f'font-size="12" fill="currentColor" opacity="0.5">No data</text>'
        )
        return surface.to_svg()
