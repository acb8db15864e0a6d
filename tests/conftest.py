"""Shared pytest fixtures.

Qt tests run on the ``offscreen`` platform so no display is required; the
``qapp`` fixture skips them when PySide6 is not installed.
"""

import os

import pytest

from shadowchart.models import DataPoint

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Session-wide QApplication."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def three_points():
    """Small series with a known draw plan on a 300x200 canvas."""
    return [DataPoint(0.0, 1.0), DataPoint(1.0, 10.0), DataPoint(2.0, 5.0)]
