#!/usr/bin/env python3
"""Quick Start Example

This example shows the most basic usage of shadowchart:
- Creating a chart widget
- Feeding it a fixed list of points
- Playing the reveal animation
"""

import sys

from PySide6 import QtWidgets

from shadowchart import StaticDataProvider
from shadowchart.chart_widget import LineChartWidget


def main():
    """Run the quick start example."""
    app = QtWidgets.QApplication(sys.argv)

    chart = LineChartWidget()
    chart.resize(480, 320)

    # (x, y) pairs; y grows downwards on screen
    chart.refresh_from(StaticDataProvider([(0, 3), (1, 12), (2, 7), (3, 20), (4, 9)]))
    chart.animate(duration_ms=1500)

    chart.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
