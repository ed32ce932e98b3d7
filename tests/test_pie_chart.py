"""Tests for SVG pie chart rendering."""

import math
import re

import pytest

from pygraphs import PieGraphConfig, Rect, pie_graph
from pygraphs.config import Font
from pygraphs.model import Unit
from pygraphs.render.format_utils import percent_label
from pygraphs.render.pie_chart import PieChartRenderer
from pygraphs.render.pie_geometry import ArcTo, ClosePath, MoveTo, Point, compute_pie_layout
from pygraphs.render.surface import DrawingSurface, draw_pie_layout
from pygraphs.render.svg_surface import SvgSurface, path_to_svg


class RecordingSurface:
    def __init__(self):
        self.fills = []
        self.texts = []

    def fill_path(self, path, color):
        self.fills.append((path, color))

    def draw_text(self, text, center, color, font):
        self.texts.append((text, center, color, font))


class TestSvgPaths:
    """Path command translation."""

    def test_full_circle_is_split(self):
        c = Point(60, 60)
        path = (MoveTo(c), ArcTo(c, 60, -math.pi / 2, 3 * math.pi / 2), ClosePath())
        d = path_to_svg(path)
        assert d.startswith("M 60.00,60.00 L 60.00,0.00")
        assert d.count(" A ") == 2
        assert d.endswith("Z")

    def test_reverse_arc_uses_negative_sweep_flag(self):
        c = Point(0, 0)
        d = path_to_svg((ArcTo(c, 10, 0, 1, clockwise=False),))
        assert d.startswith("M 10.00,0.00")
        assert "0 0,0" in d

    def test_zero_area_path_is_not_drawn(self):
        surface = SvgSurface(100, 100)
        c = Point(50, 50)
        surface.fill_path((MoveTo(c), ArcTo(c, 50, 1.0, 1.0), ClosePath()), None)
        assert surface.elements == []


class TestPieChartRenderer:
    """End-to-end SVG output."""

    def test_empty_graph(self):
        result = PieChartRenderer().render(pie_graph([]))
        assert "pie-graph-svg" in result
        assert "No data" in result
        assert 'class="pie-empty"' in result

    def test_all_zero_graph(self):
        result = PieChartRenderer().render(pie_graph([("a", 0)]))
        assert "No data" in result
        assert not re.search(r"\bnan\b", result, re.IGNORECASE)
        for attr in ("cx", "cy", "r"):
            raw = re.search(rf' {attr}="([^"]+)"', result).group(1)
            assert math.isfinite(float(raw))

    def test_segments_and_data_attributes(self):
        graph = pie_graph([("A", 1), ("B", 1), ("C", 2)])
        result = PieChartRenderer(120, 120).render(graph)

        assert result.count('class="pie-segment"') == 3
        assert 'data-key="C"' in result
        assert 'data-percentage="50.0"' in result
        assert 'data-percentage="25.0"' in result
        assert '<path d="M 60.00,60.00 L 60.00,0.00' in result

    def test_zero_value_keeps_color_slot(self):
        graph = pie_graph([("A", 1), ("B", 0), ("C", 1)])
        config = PieGraphConfig(colors=["#ff0000", "#00ff00", "#0000ff"])
        result = PieChartRenderer(config=config).render(graph)

        assert result.count('class="pie-segment"') == 2
        assert 'fill="#ff0000"' in result
        assert 'fill="#0000ff"' in result
        assert 'fill="#00ff00"' not in result

    def test_single_unit_renders_full_disc(self):
        result = PieChartRenderer(120, 120).render(pie_graph([("only", 5)]))
        assert result.count(" A ") == 2
        assert 'data-percentage="100.0"' in result

    def test_donut_has_inner_arc(self):
        config = PieGraphConfig(donut_radius_ratio=0.5)
        result = PieChartRenderer(100, 100, config=config).render(pie_graph([1, 3]))
        assert "A 25.00,25.00 0 0,0" in result
        assert "A 50.00,50.00 0 0,1" in result

    def test_labels_drawn_with_config_styling(self):
        config = PieGraphConfig(text_color="#111111", text_font=Font(family="Helvetica", size=14))
        graph = pie_graph([("A", 1), ("B", 3)], label_fn=percent_label)
        result = PieChartRenderer(config=config).render(graph)

        assert result.count('class="pie-label"') == 2
        assert ">25.0%</text>" in result
        assert ">75.0%</text>" in result
        assert 'font-family="Helvetica"' in result
        assert 'font-size="14"' in result
        assert 'fill="#111111"' in result

    def test_label_text_is_escaped(self):
        graph = pie_graph([("<b>", 1)], label_fn=lambda u, t: u.key)
        result = PieChartRenderer().render(graph)
        assert "&lt;b&gt;" in result
        assert "<b>" not in result

    def test_render_is_repeatable(self):
        graph = pie_graph([3, 1, 4, 1, 5])
        renderer = PieChartRenderer(config=PieGraphConfig(fractions_indent=0.01))
        assert renderer.render(graph) == renderer.render(graph)


class TestDrawingSurface:
    """Generic surface contract."""

    def test_recording_surface_satisfies_protocol(self):
        assert isinstance(RecordingSurface(), DrawingSurface)
        assert isinstance(SvgSurface(10, 10), DrawingSurface)

    def test_draw_order_and_default_text_color(self):
        graph = pie_graph([("A", 1), ("B", 2)], label_fn=lambda u, t: str(u.key))
        layout = compute_pie_layout(graph, PieGraphConfig(), Rect(0, 0, 50, 50))
        surface = RecordingSurface()
        draw_pie_layout(surface, layout)

        assert [f[1] for f in surface.fills] == [s.color for s in layout.segments]
        assert [t[0] for t in surface.texts] == ["A", "B"]
        assert surface.texts[0][2].to_hex() == "#ffffff"

    def test_empty_layout_draws_nothing(self):
        layout = compute_pie_layout(pie_graph([]), PieGraphConfig(), Rect(0, 0, 50, 50))
        surface = RecordingSurface()
        draw_pie_layout(surface, layout)
        assert surface.fills == [] and surface.texts == []


class TestLabelText:
    """Label helpers stay consistent with the layout's clamping."""

    def test_percent_label_ignores_infinite_values(self):
        graph = pie_graph([("a", float("inf")), ("b", 2.0)], label_fn=percent_label)
        layout = compute_pie_layout(graph, PieGraphConfig(), Rect(0, 0, 100, 100))

        assert [s.fraction for s in layout.segments] == pytest.approx([0.0, 1.0])
        assert [lb.text for lb in layout.labels] == ["0.0%", "100.0%"]

    def test_empty_label_text_draws_no_text_element(self):
        graph = pie_graph([("a", 1), ("b", 1)], label_fn=lambda u, t: "" if u.key == "a" else "B")
        result = PieChartRenderer().render(graph)
        assert result.count('class="pie-label"') == 1
        assert "></text>" not in result

    def test_percent_label_skips_non_finite_total(self):
        assert percent_label(Unit("a", 1.0), float("inf")) is None
        assert percent_label(Unit("a", 1.0), 0) is None
        assert percent_label(Unit("a", float("nan")), 4.0) == "0.0%"
