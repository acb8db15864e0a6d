"""Qt widget drawing the shadow line chart.

The widget holds no drawing state of its own: every ``paintEvent`` calls the
pure renderer with the current points and widget size, then hands the
commands to the QPainter backend.

Typical usage:

    chart = LineChartWidget()
    chart.refresh_from(RandomDataProvider(seed=7))
    chart.animate()

Google-style docstrings + PEP8.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from PySide6 import QtCore, QtGui
from PySide6.QtCore import Signal
from PySide6.QtWidgets import QSizePolicy, QWidget

from . import config
from .data import DataProvider
from .models import CanvasSize, ChartStyle, DataPoint
from .painter import paint_commands
from .renderer import render
from .utils import clamp, revealed_points, x_max, y_max

logger = logging.getLogger(__name__)


class LineChartWidget(QWidget):
    """Line chart with a gradient shadow under the curve.

    Attributes:
        pointsChanged: Emitted with the new point count after ``set_points``.
        animationFinished: Emitted when a reveal animation completes.
    """

    pointsChanged = Signal(int)
    animationFinished = Signal()

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        style: Optional[ChartStyle] = None,
    ) -> None:
        """Initialize the chart widget.

        Args:
            parent: Parent widget.
            style: Chart styling, defaults to ``ChartStyle()``.
        """
        super().__init__(parent)
        self._points: List[DataPoint] = []
        self._chart_style = style or ChartStyle()
        self._progress = 1.0

        self._animation = QtCore.QVariantAnimation(self)
        self._animation.setStartValue(0.0)
        self._animation.setEndValue(1.0)
        self._animation.setEasingCurve(QtCore.QEasingCurve.OutCubic)
        self._animation.valueChanged.connect(self._on_progress)
        self._animation.finished.connect(self.animationFinished.emit)

        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setAttribute(QtCore.Qt.WA_TranslucentBackground, True)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def set_points(self, points: Sequence[DataPoint]) -> None:
        """Replace the plotted points and repaint."""
        self._points = list(points)
        logger.debug("Chart now holds %d points", len(self._points))
        self.pointsChanged.emit(len(self._points))
        self.update()

    def points(self) -> List[DataPoint]:
        return list(self._points)

    def refresh_from(self, provider: DataProvider) -> None:
        """Pull a fresh point list from ``provider``."""
        self.set_points(provider.get_points())

    def chart_style(self) -> ChartStyle:
        return self._chart_style

    def set_chart_style(self, style: ChartStyle) -> None:
        self._chart_style = style
        self.update()

    # ------------------------------------------------------------------
    # Animation
    # ------------------------------------------------------------------

    def progress(self) -> float:
        return self._progress

    def set_progress(self, progress: float) -> None:
        """Show the first ``progress`` fraction of points (0..1)."""
        self._progress = clamp(progress)
        self.update()

    def animate(self, duration_ms: int = config.DEFAULT_REVEAL_MS) -> None:
        """Reveal the curve from left to right over ``duration_ms``."""
        self._animation.stop()
        self._animation.setDuration(int(duration_ms))
        self._progress = 0.0
        self._animation.start()

    def is_animating(self) -> bool:
        return self._animation.state() == QtCore.QAbstractAnimation.Running

    def _on_progress(self, value) -> None:
        self.set_progress(float(value))

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def current_commands(self):
        """Draw commands for the current size, points and progress."""
        size = CanvasSize(float(self.width()), float(self.height()))
        visible = revealed_points(self._points, self._progress)
        bounds = (x_max(self._points), y_max(self._points))
        return render(
            visible, size, self._chart_style, bounds=bounds, total=len(self._points)
        )

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        try:
            paint_commands(painter, self.current_commands())
        finally:
            painter.end()

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(config.WINDOW_SIZE[0], int(config.WINDOW_SIZE[1] * config.CHART_HEIGHT_FRACTION))
