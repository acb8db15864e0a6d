from .models import (
    CanvasSize,
    ChartStyle,
    DataPoint,
    DrawCircle,
    DrawLine,
    DrawPath,
    VerticalGradient,
    to_rgba,
)
from .renderer import render
from .utils import normalize, revealed_points, x_max, y_max
from .data import DataProvider, RandomDataProvider, StaticDataProvider
from .export import commands_to_json, export_chart, rasterize
from .logging_config import setup_logging

__all__ = [
    # Models
    "CanvasSize",
    "ChartStyle",
    "DataPoint",
    "DrawCircle",
    "DrawLine",
    "DrawPath",
    "VerticalGradient",
    "to_rgba",
    # Rendering
    "render",
    "normalize",
    "revealed_points",
    "x_max",
    "y_max",
    # Data
    "DataProvider",
    "RandomDataProvider",
    "StaticDataProvider",
    # Export
    "commands_to_json",
    "export_chart",
    "rasterize",
    "setup_logging",
]
