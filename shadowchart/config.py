"""Default chart settings.

Sizes ending in ``_DP`` are device-independent and get multiplied by
``ChartStyle.density`` before drawing. Everything else is in pixels.
"""

from __future__ import annotations

WINDOW_TITLE = "LineChart with Shadow"
WINDOW_SIZE = (480, 800)
TOP_PADDING_PX = 20
CHART_HEIGHT_FRACTION = 0.5

# Geometry
DEFAULT_MARGIN_DP = 16.0
DEFAULT_MARKER_RADIUS_DP = 6.0
DEFAULT_STROKE_WIDTH = 4.0  # Miter-join default stroke width
DEFAULT_DENSITY = 1.0

# Colors
DEFAULT_AXIS_COLOR = "#888888"
DEFAULT_ACCENT = "#FF0000"
DEFAULT_ACCENT_ALPHA = 0.5
DEFAULT_SHADOW_BOTTOM = "#FAFFFC"  # light, low-saturation tone

# Sample data
SAMPLE_POINT_COUNT = 11
SAMPLE_MAX_VALUE = 50

# Animation
DEFAULT_REVEAL_MS = 1200
