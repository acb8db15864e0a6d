"""Desktop entry point: a window showing the shadow chart, or a headless export.

    python -m shadowchart --seed 3
    python -m shadowchart --export chart.png --width 600 --height 400
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from PySide6 import QtWidgets
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from . import config
from .chart_widget import LineChartWidget
from .data import DataProvider, RandomDataProvider
from .export import export_chart
from .logging_config import setup_logging
from .models import CanvasSize, ChartStyle

logger = logging.getLogger(__name__)


class ChartWindow(QMainWindow):
    """Main window: centred title bar above a chart filling half the height."""

    def __init__(
        self,
        provider: DataProvider,
        parent: Optional[QWidget] = None,
        *,
        style: Optional[ChartStyle] = None,
        animate: bool = True,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(*config.WINDOW_SIZE)
        self._provider = provider

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)

        self.title_label = QLabel(config.WINDOW_TITLE)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet("padding: 12px; font-size: 14pt; font-weight: bold;")
        layout.addWidget(self.title_label)

        layout.addSpacing(config.TOP_PADDING_PX)

        self.chart = LineChartWidget(style=style)
        # Chart takes half of the space below the title
        half = round(config.CHART_HEIGHT_FRACTION * 100)
        layout.addWidget(self.chart, half)
        layout.addStretch(100 - half)

        self.setCentralWidget(central)

        self.chart.refresh_from(provider)
        if animate:
            self.chart.animate()

    def reload(self) -> None:
        """Fetch new data and replay the reveal animation."""
        self.chart.refresh_from(self._provider)
        self.chart.animate()

    def keyPressEvent(self, event) -> None:
        if event.key() == Qt.Key_R:
            self.reload()
        else:
            super().keyPressEvent(event)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shadowchart", description="Line chart with a gradient shadow."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for sample data")
    parser.add_argument("--count", type=int, default=config.SAMPLE_POINT_COUNT, help="Number of sample points")
    parser.add_argument("--max-value", type=int, default=config.SAMPLE_MAX_VALUE, help="Largest sample y value")
    parser.add_argument("--width", type=float, default=float(config.WINDOW_SIZE[0]), help="Export width in pixels")
    parser.add_argument(
        "--height",
        type=float,
        default=config.WINDOW_SIZE[1] * config.CHART_HEIGHT_FRACTION,
        help="Export height in pixels",
    )
    parser.add_argument("--density", type=float, default=config.DEFAULT_DENSITY, help="Pixels per dp")
    parser.add_argument("--export", metavar="PATH", help="Write a .png or .json instead of opening a window")
    parser.add_argument("--no-animation", action="store_true", help="Skip the reveal animation")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    return parser


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    provider = RandomDataProvider(count=args.count, max_value=args.max_value, seed=args.seed)
    style = ChartStyle(density=args.density)

    if args.export:
        points = provider.get_points()
        try:
            export_chart(points, CanvasSize(args.width, args.height), args.export, style)
        except ValueError:
            logger.exception("Export to %s failed", args.export)
            raise
        return 0

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    window = ChartWindow(provider, style=style, animate=not args.no_animation)
    window.show()
    logger.info("Showing %d points", len(window.chart.points()))
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
