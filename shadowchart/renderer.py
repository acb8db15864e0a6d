"""Pure line-chart renderer producing backend-agnostic draw commands.

The renderer never touches a graphics runtime: it maps a point sequence and a
canvas size to a list of draw commands, which ``painter`` (QPainter) or
``export`` (Pillow) turn into pixels.

Typical usage:

    commands = render(points, CanvasSize(300, 200))
    paint_commands(painter, commands)

Commands come out in painting order: both axes, then for every point its
outgoing segment (if any) followed by its marker, and the shadow fill last.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

from .models import (
    CanvasSize,
    ChartStyle,
    DataPoint,
    DrawCircle,
    DrawCommand,
    DrawLine,
    DrawPath,
    Position,
    VerticalGradient,
)
from .utils import normalize, x_max, y_max

logger = logging.getLogger(__name__)

SizeLike = Union[CanvasSize, Tuple[float, float]]


def _as_canvas_size(size: SizeLike) -> CanvasSize:
    if isinstance(size, CanvasSize):
        return size
    width, height = size
    return CanvasSize(float(width), float(height))


def axis_lines(size: CanvasSize, style: ChartStyle) -> List[DrawLine]:
    """Vertical and horizontal axis lines inset by the style margin."""
    m = style.margin_px
    color = style.axis_rgba()
    return [
        DrawLine((m, m), (m, size.height), color, style.stroke_width),
        DrawLine((m, size.height), (size.width - m, size.height), color, style.stroke_width),
    ]


def normalized_positions(
    points: Sequence[DataPoint],
    size: CanvasSize,
    margin: float,
    bounds: Optional[Tuple[float, float]] = None,
    total: Optional[int] = None,
) -> List[Position]:
    """Pixel positions of ``points`` with the first/last x pulled inwards by ``margin``.

    Args:
        points: Ordered data points.
        size: Canvas size; width and height are the x and y extents.
        margin: Inward offset applied to the first and last x.
        bounds: Optional ``(x_max, y_max)`` scale overriding the data maxima.
        total: Length of the full series when ``points`` is a prefix of it;
            the last-point margin only applies at index ``total - 1``.

    Returns:
        One ``(x, y)`` tuple per point.
    """
    if bounds is None:
        xm, ym = x_max(points), y_max(points)
    else:
        xm, ym = bounds
    if points and (xm == 0 or ym == 0):
        logger.debug("Degenerate scale x_max=%s y_max=%s; zero axis maps to 0", xm, ym)

    last = (len(points) if total is None else total) - 1
    positions: List[Position] = []
    for i, p in enumerate(points):
        x = normalize(p.x, xm, size.width)
        y = normalize(p.y, ym, size.height)
        if i == 0:
            x += margin
        if i == last:
            x -= margin
        positions.append((x, y))
    return positions


def shadow_gradient(size: CanvasSize, style: ChartStyle) -> VerticalGradient:
    """Accent-to-light gradient spanning the full canvas height."""
    return VerticalGradient(
        start_y=0.0,
        end_y=size.height,
        stops=((0.0, style.accent_rgba()), (1.0, style.shadow_bottom_rgba())),
    )


def shadow_path(
    positions: Sequence[Position], size: CanvasSize, style: ChartStyle
) -> DrawPath:
    """Closed polygon under the curve: axis origin, every point, bottom corners."""
    m = style.margin_px
    vertices: List[Position] = [(m, size.height)]
    vertices.extend(positions)
    vertices.append((size.width - m, size.height))
    vertices.append((0.0, size.height))
    return DrawPath(tuple(vertices), shadow_gradient(size, style), closed=True)


def render(
    points: Sequence[DataPoint],
    canvas_size: SizeLike,
    style: Optional[ChartStyle] = None,
    *,
    bounds: Optional[Tuple[float, float]] = None,
    total: Optional[int] = None,
) -> List[DrawCommand]:
    """Build the draw plan for a line chart with a gradient shadow.

    Args:
        points: Ordered data points; may be empty.
        canvas_size: ``CanvasSize`` or ``(width, height)`` in pixels.
        style: Chart styling, defaults to ``ChartStyle()``.
        bounds: Optional ``(x_max, y_max)`` to keep a fixed scale, e.g. while
            revealing a prefix of the full data set.
        total: Length of the full data set when ``points`` is a prefix, so
            the last-point margin stays on the true last point.

    Returns:
        Draw commands in painting order.
    """
    style = style or ChartStyle()
    size = _as_canvas_size(canvas_size)
    margin = style.margin_px
    accent = style.accent_rgba()
    radius = style.marker_radius_px

    commands: List[DrawCommand] = list(axis_lines(size, style))
    positions = normalized_positions(points, size, margin, bounds, total)

    for i, pos in enumerate(positions):
        if i < len(positions) - 1:
            # The next position already carries the last-point margin.
            commands.append(DrawLine(pos, positions[i + 1], accent, style.stroke_width))
        commands.append(DrawCircle(pos, radius, accent))

    commands.append(shadow_path(positions, size, style))
    logger.debug(
        "Rendered %d points on %sx%s into %d commands",
        len(points), size.width, size.height, len(commands),
    )
    return commands
