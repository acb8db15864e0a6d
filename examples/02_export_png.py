#!/usr/bin/env python3
"""Headless Export Example

Renders random sample data without opening a window and writes both the
rasterized chart and its draw commands:
- chart.png  (Pillow)
- chart.json (one object per draw command)
"""

from shadowchart import CanvasSize, ChartStyle, RandomDataProvider, export_chart, setup_logging


def main():
    setup_logging("INFO")

    points = RandomDataProvider(seed=42).get_points()
    size = CanvasSize(600.0, 400.0)
    style = ChartStyle(density=1.5, accent_color="#1f77b4")

    export_chart(points, size, "chart.png", style)
    export_chart(points, size, "chart.json", style)


if __name__ == "__main__":
    main()
