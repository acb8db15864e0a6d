"""QPainter backend for draw commands.

Pens and brushes are built with pyqtgraph helpers so colors accept the same
RGBA tuples the renderer emits.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import pyqtgraph as pg
from PySide6 import QtCore, QtGui

from .models import (
    CanvasSize,
    ChartStyle,
    DataPoint,
    DrawCircle,
    DrawCommand,
    DrawLine,
    DrawPath,
    VerticalGradient,
)
from .renderer import render


def _to_qcolor(rgba) -> QtGui.QColor:
    return QtGui.QColor(*rgba)


def gradient_brush(gradient: VerticalGradient) -> QtGui.QBrush:
    """QBrush wrapping a vertical ``QLinearGradient``."""
    qgrad = QtGui.QLinearGradient(0.0, gradient.start_y, 0.0, gradient.end_y)
    for offset, rgba in gradient.stops:
        qgrad.setColorAt(float(offset), _to_qcolor(rgba))
    return QtGui.QBrush(qgrad)


def path_from_vertices(vertices, closed: bool = True) -> QtGui.QPainterPath:
    path = QtGui.QPainterPath()
    if not vertices:
        return path
    path.moveTo(QtCore.QPointF(*vertices[0]))
    for v in vertices[1:]:
        path.lineTo(QtCore.QPointF(*v))
    if closed:
        path.closeSubpath()
    return path


def paint_command(painter: QtGui.QPainter, cmd: DrawCommand) -> None:
    """Draw a single command with ``painter``."""
    if isinstance(cmd, DrawLine):
        painter.setPen(pg.mkPen(color=cmd.color, width=cmd.stroke_width))
        painter.drawLine(QtCore.QPointF(*cmd.start), QtCore.QPointF(*cmd.end))
    elif isinstance(cmd, DrawCircle):
        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(pg.mkBrush(cmd.color))
        painter.drawEllipse(QtCore.QPointF(*cmd.center), cmd.radius, cmd.radius)
    elif isinstance(cmd, DrawPath):
        path = path_from_vertices(cmd.vertices, cmd.closed)
        painter.fillPath(path, gradient_brush(cmd.gradient))
    else:
        raise TypeError(f"Unsupported draw command: {type(cmd).__name__}")


def paint_commands(painter: QtGui.QPainter, commands: Iterable[DrawCommand]) -> None:
    """Draw ``commands`` in order, restoring painter state afterwards."""
    painter.save()
    try:
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        for cmd in commands:
            paint_command(painter, cmd)
    finally:
        painter.restore()


def render_to_image(
    points: Sequence[DataPoint],
    size: CanvasSize,
    style: Optional[ChartStyle] = None,
    background: QtGui.QColor | None = None,
) -> QtGui.QImage:
    """Render ``points`` into a new ARGB32 QImage of ``size``."""
    image = QtGui.QImage(
        max(int(round(size.width)), 1),
        max(int(round(size.height)), 1),
        QtGui.QImage.Format_ARGB32_Premultiplied,
    )
    image.fill(background if background is not None else QtGui.QColor(0, 0, 0, 0))
    painter = QtGui.QPainter(image)
    try:
        paint_commands(painter, render(points, size, style))
    finally:
        painter.end()
    return image
