from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .models import DataPoint


def clamp(value: float, vmin: float = 0.0, vmax: float = 1.0) -> float:
    """Clamp numeric values to [vmin, vmax]."""
    lo = float(vmin)
    hi = float(vmax)
    if lo > hi:
        lo, hi = hi, lo

    try:
        v = float(value)
    except (TypeError, ValueError):
        return lo

    if not np.isfinite(v):
        return lo

    return float(np.clip(v, lo, hi))


def normalize(value: float, v_max: float, extent: float) -> float:
    """Map ``value`` into pixel space proportionally to ``v_max``.

    Returns ``value / v_max * extent``; a zero (or non-finite) ``v_max`` maps
    every value to 0.0.
    """
    if v_max == 0 or not math.isfinite(v_max):
        return 0.0
    return float(value) / float(v_max) * float(extent)


def x_max(points: Sequence[DataPoint]) -> float:
    """Largest x across ``points``, 0.0 when empty."""
    if len(points) == 0:
        return 0.0
    return float(np.max([p.x for p in points]))


def y_max(points: Sequence[DataPoint]) -> float:
    """Largest y across ``points``, 0.0 when empty."""
    if len(points) == 0:
        return 0.0
    return float(np.max([p.y for p in points]))


def revealed_points(points: Sequence[DataPoint], progress: float) -> list[DataPoint]:
    """Prefix of ``points`` visible at animation ``progress`` (0..1).

    Progress 0 shows nothing, 1 shows everything; partial progress rounds up
    so the first point appears as soon as the animation starts.
    """
    p = clamp(progress)
    count = math.ceil(p * len(points))
    return list(points[:count])
