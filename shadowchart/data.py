"""Data providers feeding the chart.

The renderer only ever sees a point sequence; where it comes from is decided
by whichever ``DataProvider`` the caller injects.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol, Tuple, Union

import numpy as np

from . import config
from .models import DataPoint

logger = logging.getLogger(__name__)


class DataProvider(Protocol):
    def get_points(self) -> List[DataPoint]:
        """Return the ordered points to plot."""
        ...


class RandomDataProvider:
    """Sample data: x = 0..count-1, y a random integer in [1, max_value].

    Args:
        count: Number of points.
        max_value: Inclusive upper bound for y.
        seed: Optional seed for reproducible output.
    """

    def __init__(
        self,
        count: int = config.SAMPLE_POINT_COUNT,
        max_value: int = config.SAMPLE_MAX_VALUE,
        seed: Optional[int] = None,
    ) -> None:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if max_value < 1:
            raise ValueError(f"max_value must be at least 1, got {max_value}")
        self.count = int(count)
        self.max_value = int(max_value)
        self._rng = np.random.default_rng(seed)

    def get_points(self) -> List[DataPoint]:
        ys = self._rng.integers(1, self.max_value, endpoint=True, size=self.count)
        points = [DataPoint(float(i), float(y)) for i, y in enumerate(ys)]
        logger.debug("Generated %d random points", len(points))
        return points


class StaticDataProvider:
    """Serves a fixed point list, e.g. data loaded elsewhere."""

    def __init__(
        self, points: Iterable[Union[DataPoint, Tuple[float, float]]]
    ) -> None:
        self._points: List[DataPoint] = [
            p if isinstance(p, DataPoint) else DataPoint(float(p[0]), float(p[1]))
            for p in points
        ]

    def get_points(self) -> List[DataPoint]:
        return list(self._points)

