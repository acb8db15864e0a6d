"""Tests for LineChartWidget in chart_widget.py (offscreen Qt)."""

import pytest

pytest.importorskip("PySide6")
pytest.importorskip("pyqtgraph")

from shadowchart.chart_widget import LineChartWidget  # noqa: E402
from shadowchart.data import StaticDataProvider  # noqa: E402
from shadowchart.models import ChartStyle, DrawCircle, DrawPath  # noqa: E402
from shadowchart.renderer import render  # noqa: E402


@pytest.fixture
def chart(qapp, three_points):
    widget = LineChartWidget()
    widget.resize(300, 200)
    widget.set_points(three_points)
    yield widget
    widget.deleteLater()


class TestLineChartWidget:
    def test_commands_match_renderer(self, chart, three_points):
        assert chart.current_commands() == render(three_points, (300, 200))

    def test_points_roundtrip(self, chart, three_points):
        assert chart.points() == three_points

    def test_points_changed_signal(self, qapp, three_points):
        widget = LineChartWidget()
        counts = []
        widget.pointsChanged.connect(counts.append)
        widget.set_points(three_points)
        assert counts == [3]

    def test_refresh_from_provider(self, qapp):
        widget = LineChartWidget()
        widget.refresh_from(StaticDataProvider([(0, 1), (1, 2)]))
        assert len(widget.points()) == 2

    def test_zero_progress_hides_points(self, chart):
        chart.set_progress(0.0)
        commands = chart.current_commands()
        assert [c for c in commands if isinstance(c, DrawCircle)] == []
        assert len(commands[-1].vertices) == 3

    def test_partial_progress_keeps_full_scale(self, chart):
        chart.set_progress(0.5)
        circles = [c for c in chart.current_commands() if isinstance(c, DrawCircle)]
        assert [c.center for c in circles] == [(16.0, 20.0), (150.0, 200.0)]

    def test_progress_is_clamped(self, chart):
        chart.set_progress(3.0)
        assert chart.progress() == 1.0

    def test_style_change(self, chart):
        chart.set_chart_style(ChartStyle(density=2.0))
        path = chart.current_commands()[-1]
        assert isinstance(path, DrawPath)
        assert path.vertices[0] == (32.0, 200.0)

    def test_animate_starts_from_zero(self, chart):
        chart.animate(duration_ms=5000)
        try:
            assert chart.is_animating()
            assert chart.progress() < 1.0
        finally:
            chart._animation.stop()

    def test_grab_paints(self, chart):
        """Rendering through paintEvent does not raise."""
        pixmap = chart.grab()
        assert pixmap.width() == 300
