"""
Shared fixtures for the roulette tests.
"""

import os
import tempfile

# Keep test log output out of the repository
os.environ.setdefault("ROULETTE_LOGS_DIR", tempfile.mkdtemp(prefix="roulette_logs_"))

import pytest

from src.services.roulette.models import CanvasSize, DisplayMetadata, SpinRequest, SpinTiming


@pytest.fixture
def small_canvas() -> CanvasSize:
    return CanvasSize(160, 160)


@pytest.fixture
def short_timing() -> SpinTiming:
    return SpinTiming(frame_delay_ms=40, spin_frames=4, deceleration_frames=3, settle_frames=2)


@pytest.fixture
def make_request(small_canvas, short_timing):
    """Build a SpinRequest on the small canvas with short timing."""

    def _make(forced=None, timing=None, display=None) -> SpinRequest:
        return SpinRequest(
            forced_winning_number=forced,
            display=display or DisplayMetadata(),
            canvas=small_canvas,
            timing=timing or short_timing,
        )

    return _make
