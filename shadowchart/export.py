"""Headless export of draw commands to PNG (Pillow) or JSON.

Rasterization works without a display: lines and markers are drawn with
``PIL.ImageDraw`` on transparent overlays and alpha-composited in order, the
shadow polygon is masked with a matplotlib ``Path`` and shaded row by row from
its vertical gradient.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np
from matplotlib.path import Path as MplPath
from PIL import Image, ImageDraw

from .models import (
    RGBA,
    CanvasSize,
    ChartStyle,
    DataPoint,
    DrawCircle,
    DrawCommand,
    DrawLine,
    DrawPath,
)
from .renderer import render

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _to_jsonable(obj: Any) -> Any:
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if isinstance(obj, dict):
        return {str(k): _to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_jsonable(v) for v in obj]
    if isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj
    return str(obj)


def commands_to_json(commands: Sequence[DrawCommand], indent: Optional[int] = 2) -> str:
    """Serialize draw commands to a JSON array."""
    return json.dumps(_to_jsonable(list(commands)), indent=indent)


def _pixel_size(size: CanvasSize) -> Tuple[int, int]:
    return max(int(round(size.width)), 1), max(int(round(size.height)), 1)


def _path_layer(cmd: DrawPath, width: int, height: int) -> Image.Image:
    """Gradient-shaded RGBA layer covering the inside of ``cmd``."""
    if len(cmd.vertices) < 3:
        return Image.new("RGBA", (width, height), (0, 0, 0, 0))

    ring = list(cmd.vertices)
    if cmd.closed and ring[0] != ring[-1]:
        ring.append(ring[0])
    path = MplPath(np.asarray(ring, dtype=np.float64))

    # pixel centers
    xs = np.arange(width, dtype=np.float64) + 0.5
    ys = np.arange(height, dtype=np.float64) + 0.5
    grid_x, grid_y = np.meshgrid(xs, ys)
    pts = np.column_stack([grid_x.ravel(), grid_y.ravel()])
    inside = path.contains_points(pts).reshape((height, width))

    grad = cmd.gradient
    span = grad.end_y - grad.start_y
    t = np.zeros_like(ys) if span == 0 else np.clip((ys - grad.start_y) / span, 0.0, 1.0)
    offsets = [o for o, _ in grad.stops]
    rows = np.stack(
        [np.interp(t, offsets, [c[ch] for _, c in grad.stops]) for ch in range(4)],
        axis=-1,
    )  # (H, 4)

    rgba = np.broadcast_to(rows[:, None, :], (height, width, 4)).copy()
    rgba[..., 3] = np.where(inside, rgba[..., 3], 0.0)
    return Image.fromarray(np.round(rgba).astype(np.uint8))


def rasterize(
    commands: Sequence[DrawCommand],
    size: CanvasSize,
    background: RGBA = (0, 0, 0, 0),
) -> Image.Image:
    """Composite ``commands`` in order onto a new RGBA image."""
    width, height = _pixel_size(size)
    canvas = Image.new("RGBA", (width, height), tuple(background))

    for cmd in commands:
        if isinstance(cmd, DrawPath):
            layer = _path_layer(cmd, width, height)
        else:
            layer = Image.new("RGBA", (width, height), (0, 0, 0, 0))
            draw = ImageDraw.Draw(layer)
            if isinstance(cmd, DrawLine):
                draw.line(
                    [cmd.start, cmd.end],
                    fill=tuple(cmd.color),
                    width=max(int(round(cmd.stroke_width)), 1),
                )
            elif isinstance(cmd, DrawCircle):
                cx, cy = cmd.center
                r = cmd.radius
                draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=tuple(cmd.color))
            else:
                raise TypeError(f"Unsupported draw command: {type(cmd).__name__}")
        canvas = Image.alpha_composite(canvas, layer)

    return canvas


def export_png(
    commands: Sequence[DrawCommand],
    size: CanvasSize,
    path: PathLike,
    background: RGBA = (255, 255, 255, 255),
) -> Path:
    out = Path(path)
    rasterize(commands, size, background).save(out, format="PNG")
    logger.info("Wrote %s (%dx%d)", out, *_pixel_size(size))
    return out


def export_json(commands: Sequence[DrawCommand], path: PathLike) -> Path:
    out = Path(path)
    out.write_text(commands_to_json(commands), encoding="utf-8")
    logger.info("Wrote %d draw commands to %s", len(commands), out)
    return out


def export_chart(
    points: Sequence[DataPoint],
    size: CanvasSize,
    path: PathLike,
    style: Optional[ChartStyle] = None,
) -> Path:
    """Render ``points`` and write them to ``path``; the suffix picks the format.

    Raises:
        ValueError: If the suffix is neither ``.png`` nor ``.json``.
    """
    suffix = Path(path).suffix.lower()
    if suffix not in (".png", ".json"):
        raise ValueError(f"Unsupported export format '{suffix}'; use .png or .json")

    commands = render(points, size, style)
    if suffix == ".png":
        return export_png(commands, size, path)
    return export_json(commands, path)
