"""
RouletteSpin - Roulette Package
===============================

Animated roulette wheel: outcome, motion planning, rendering and GIF encoding.
"""

from .encoder import AnimationEncoder
from .errors import EncodingError, InvalidConfiguration, InvalidOutcome, RouletteError
from .graphics import FrameRenderer
from .models import (
    AnimationState,
    CanvasSize,
    DisplayMetadata,
    Phase,
    SpinRequest,
    SpinResult,
    SpinTiming,
)
from .motion import (
    DecelerationCurve,
    LinearDeceleration,
    MotionPlanner,
    MotionProfile,
    QuadraticDeceleration,
)
from .outcome import OutcomeResolver
from .service import RouletteService, get_roulette_service, spin
from .views import create_spin_embed, create_spin_file
from .wheel import EUROPEAN_WHEEL, SlotColor, WheelLayout, WheelSlot

__all__ = [
    "AnimationEncoder",
    "AnimationState",
    "CanvasSize",
    "DecelerationCurve",
    "DisplayMetadata",
    "EUROPEAN_WHEEL",
    "EncodingError",
    "FrameRenderer",
    "InvalidConfiguration",
    "InvalidOutcome",
    "LinearDeceleration",
    "MotionPlanner",
    "MotionProfile",
    "OutcomeResolver",
    "Phase",
    "QuadraticDeceleration",
    "RouletteError",
    "RouletteService",
    "SlotColor",
    "SpinRequest",
    "SpinResult",
    "SpinTiming",
    "WheelLayout",
    "WheelSlot",
    "create_spin_embed",
    "create_spin_file",
    "get_roulette_service",
    "spin",
]
