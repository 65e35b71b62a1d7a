"""Shared pytest fixtures for the paint board test suite.

Fixtures:
    session: Fresh PaintSession registered as the process session
    export_dir: Temporary export directory wired into Django settings
    client: django.test.Client for the paint API
    red / black: Palette colors
    segment_factory: Builds segments from plain coordinates
    decode_png: Decodes PNG bytes into a BGRA numpy array

Markers:
    slow: Full 1080x1920 rasterization checks
"""

import os

import cv2
import django
import numpy as np
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "paint_site.settings")
django.setup()

from django.test import Client, override_settings  # noqa: E402

from paint.domain.entities.segment import Color, Point, Segment  # noqa: E402
from paint.application.use_cases import paint_session  # noqa: E402


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


# -----------------------------------------------------------------------------
# Session / Django Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def session():
    """Reset the process-wide session before and after every test."""
    paint_session.reset_session()
    yield paint_session.get_session()
    paint_session.reset_session()


@pytest.fixture
def export_dir(tmp_path):
    target = tmp_path / "exports"
    with override_settings(PAINT_EXPORT_DIR=str(target)):
        yield target


@pytest.fixture
def client():
    return Client()


# -----------------------------------------------------------------------------
# Drawing Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def red():
    return Color(255, 0, 0)


@pytest.fixture
def black():
    return Color(0, 0, 0)


@pytest.fixture
def segment_factory(black):
    def make(x1, y1, x2, y2, color=None, width=10.0):
        return Segment(Point(x1, y1), Point(x2, y2), color or black, width)
    return make


@pytest.fixture
def decode_png():
    def decode(data):
        return cv2.imdecode(np.frombuffer(data, np.uint8), cv2.IMREAD_UNCHANGED)
    return decode
