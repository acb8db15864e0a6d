"""Tests for the QPainter backend in painter.py (offscreen Qt)."""

import pytest

pytest.importorskip("PySide6")
pytest.importorskip("pyqtgraph")

from PySide6 import QtGui  # noqa: E402

from shadowchart.models import CanvasSize, DrawLine, VerticalGradient  # noqa: E402
from shadowchart.painter import (  # noqa: E402
    gradient_brush,
    paint_command,
    path_from_vertices,
    render_to_image,
)


class TestHelpers:
    def test_path_from_vertices(self, qapp):
        path = path_from_vertices([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)])
        rect = path.boundingRect()
        assert (rect.width(), rect.height()) == (10.0, 10.0)

    def test_empty_path(self, qapp):
        assert path_from_vertices([]).isEmpty()

    def test_gradient_brush(self, qapp):
        grad = VerticalGradient(0.0, 50.0, ((0.0, (255, 0, 0, 128)), (1.0, (250, 255, 252, 255))))
        brush = gradient_brush(grad)
        qgrad = brush.gradient()
        assert qgrad is not None
        stops = qgrad.stops()
        assert len(stops) == 2
        assert stops[0][1].alpha() == 128

    def test_unknown_command(self, qapp):
        image = QtGui.QImage(4, 4, QtGui.QImage.Format_ARGB32)
        painter = QtGui.QPainter(image)
        try:
            with pytest.raises(TypeError):
                paint_command(painter, object())
        finally:
            painter.end()


class TestRenderToImage:
    def test_size(self, qapp, three_points):
        image = render_to_image(three_points, CanvasSize(300.0, 200.0))
        assert (image.width(), image.height()) == (300, 200)

    def test_marker_and_axis_painted(self, qapp, three_points):
        image = render_to_image(three_points, CanvasSize(300.0, 200.0))
        # Last marker at (284, 100), vertical axis at x=16
        assert image.pixelColor(284, 100).alpha() > 0
        assert image.pixelColor(16, 100).alpha() > 0
        # Far from everything: top-right corner stays transparent
        assert image.pixelColor(298, 2).alpha() == 0

    def test_line_color(self, qapp):
        image = QtGui.QImage(20, 20, QtGui.QImage.Format_ARGB32)
        image.fill(QtGui.QColor(0, 0, 0, 0))
        painter = QtGui.QPainter(image)
        try:
            paint_command(painter, DrawLine((0.0, 10.0), (20.0, 10.0), (0, 0, 255, 255), 4.0))
        finally:
            painter.end()
        color = image.pixelColor(10, 10)
        assert color.blue() == 255
        assert color.alpha() == 255
