"""Data models for chart input, styling and draw commands.

Provides frozen dataclasses so a render pass can never mutate its inputs.
Draw commands are backend-agnostic: the Qt painter and the Pillow exporter
both consume the same list.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

import matplotlib.colors as mcolors

from . import config

# Color type: color names, "#RRGGBB", "#RRGGBBAA", 0-255 tuples or QColor objects.
# Using Any for QColor to avoid hard dependency on PySide6 in type checking
Color = Union[str, Tuple[int, int, int], Tuple[int, int, int, int], Any]
RGBA = Tuple[int, int, int, int]
Position = Tuple[float, float]  # (x, y) in pixels, y grows downwards


def _qcolor_to_rgba(color: Any) -> RGBA | None:
    """Return an RGBA tuple for a QColor, or None for anything else."""
    try:
        from PySide6.QtGui import QColor
    except ImportError:
        return None
    if isinstance(color, QColor):
        return (color.red(), color.green(), color.blue(), color.alpha())
    return None


def to_rgba(color: Color, alpha: float | None = None) -> RGBA:
    """Normalize a color to an RGBA tuple with 0-255 channels.

    Args:
        color: Color name, hex string, RGB/RGBA tuple (0-255) or QColor.
        alpha: Optional opacity in [0, 1] overriding the color's own alpha.

    Returns:
        Tuple of (r, g, b, a).

    Raises:
        ValueError: If the color cannot be interpreted.
    """
    rgba = _qcolor_to_rgba(color)
    if rgba is None:
        if isinstance(color, tuple) and len(color) in (3, 4):
            if not all(isinstance(c, int) and 0 <= c <= 255 for c in color):
                raise ValueError(f"Color tuple channels must be ints in 0-255, got {color!r}")
            rgba = tuple(color) if len(color) == 4 else (*color, 255)
        else:
            try:
                r, g, b, a = mcolors.to_rgba(color)
            except (ValueError, TypeError) as e:
                raise ValueError(f"Invalid color: {color!r}") from e
            rgba = (round(r * 255), round(g * 255), round(b * 255), round(a * 255))

    if alpha is not None:
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"alpha must be within [0, 1], got {alpha}")
        rgba = (rgba[0], rgba[1], rgba[2], round(alpha * 255))
    return rgba


@dataclass(frozen=True)
class DataPoint:
    """A single chart sample."""

    x: float
    y: float


@dataclass(frozen=True)
class CanvasSize:
    """Drawing surface size in pixels."""

    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Canvas {name} must be a finite, non-negative number, got {value!r}")


@dataclass(frozen=True)
class ChartStyle:
    """Styling and geometry of the shadow chart.

    Sizes suffixed ``_dp`` are multiplied by ``density`` to get pixels.
    """

    margin_dp: float = config.DEFAULT_MARGIN_DP
    marker_radius_dp: float = config.DEFAULT_MARKER_RADIUS_DP
    stroke_width: float = config.DEFAULT_STROKE_WIDTH
    density: float = config.DEFAULT_DENSITY
    axis_color: Color = config.DEFAULT_AXIS_COLOR
    accent_color: Color = config.DEFAULT_ACCENT
    accent_alpha: float = config.DEFAULT_ACCENT_ALPHA
    shadow_bottom_color: Color = config.DEFAULT_SHADOW_BOTTOM

    def __post_init__(self) -> None:
        if self.density <= 0:
            raise ValueError(f"density must be positive, got {self.density}")

    @property
    def margin_px(self) -> float:
        return self.margin_dp * self.density

    @property
    def marker_radius_px(self) -> float:
        return self.marker_radius_dp * self.density

    def axis_rgba(self) -> RGBA:
        return to_rgba(self.axis_color)

    def accent_rgba(self) -> RGBA:
        """Accent color with ``accent_alpha`` applied."""
        return to_rgba(self.accent_color, self.accent_alpha)

    def shadow_bottom_rgba(self) -> RGBA:
        return to_rgba(self.shadow_bottom_color)


@dataclass(frozen=True)
class VerticalGradient:
    """Linear gradient running from ``start_y`` (top) to ``end_y`` (bottom).

    stops: (offset in [0, 1], rgba) pairs in ascending offset order.
    """

    start_y: float
    end_y: float
    stops: Tuple[Tuple[float, RGBA], ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_y": float(self.start_y),
            "end_y": float(self.end_y),
            "stops": [[float(o), list(c)] for o, c in self.stops],
        }


@dataclass(frozen=True)
class DrawLine:
    start: Position
    end: Position
    color: RGBA
    stroke_width: float

    kind = "line"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "start": list(self.start),
            "end": list(self.end),
            "color": list(self.color),
            "stroke_width": float(self.stroke_width),
        }


@dataclass(frozen=True)
class DrawCircle:
    center: Position
    radius: float
    color: RGBA

    kind = "circle"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "center": list(self.center),
            "radius": float(self.radius),
            "color": list(self.color),
        }


@dataclass(frozen=True)
class DrawPath:
    """Polygon filled with a vertical gradient.

    vertices holds every point before the close operation; ``closed`` means
    the last vertex joins back to the first.
    """

    vertices: Tuple[Position, ...]
    gradient: VerticalGradient
    closed: bool = True

    kind = "path"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "vertices": [list(v) for v in self.vertices],
            "closed": bool(self.closed),
            "gradient": self.gradient.to_dict(),
        }


DrawCommand = Union[DrawLine, DrawCircle, DrawPath]