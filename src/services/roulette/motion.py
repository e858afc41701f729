"""
RouletteSpin - Motion Planner
=============================

Closed-form wheel and ball angles for every frame of a spin.

The wheel and the ball are animated independently and only combined at
render time. Each frame's angles are derived directly from its frame index,
never accumulated frame over frame:

    Spin        angle = start + speed * f
    Decelerate  angle = start + speed * S + speed * D * curve.distance(p)
    Settle      angle = target

The start angles are solved backwards from the targets so the landing frame
meets them: the first Settle frame, or the last frame when there is no
Settle phase. Every frame from the landing frame on is pinned exactly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from src.core.config import config
from src.core.constants import POINTER_ANGLE, TAU

from .errors import InvalidConfiguration
from .models import AnimationState, Phase, SpinTiming
from .wheel import EUROPEAN_WHEEL, WheelLayout


INTEGRATION_STEPS = 64


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [0, 2pi)."""
    wrapped = angle % TAU
    # -1e-17 % TAU rounds to TAU itself
    return 0.0 if wrapped >= TAU else wrapped


# =============================================================================
# Deceleration Curves
# =============================================================================

class DecelerationCurve(ABC):
    """
    Speed multiplier over the deceleration phase.

    Subclasses only need speed(progress), going from 1 at progress 0 to 0 at
    progress 1. distance(progress) is its integral over [0, progress] and
    defaults to Simpson's rule; override it where a closed form exists.
    """

    name = "custom"

    @abstractmethod
    def speed(self, progress: float) -> float:
        ...

    def distance(self, progress: float) -> float:
        if progress <= 0:
            return 0.0
        steps = INTEGRATION_STEPS
        h = progress / steps
        total = self.speed(0.0) + self.speed(progress)
        for i in range(1, steps):
            total += (4 if i % 2 else 2) * self.speed(i * h)
        return total * h / 3


class LinearDeceleration(DecelerationCurve):
    """speed(p) = 1 - p"""

    name = "linear"

    def speed(self, progress: float) -> float:
        return 1.0 - progress

    def distance(self, progress: float) -> float:
        return progress - progress * progress / 2


class QuadraticDeceleration(DecelerationCurve):
    """speed(p) = (1 - p)^2, a softer stop."""

    name = "quadratic"

    def speed(self, progress: float) -> float:
        return (1.0 - progress) ** 2

    def distance(self, progress: float) -> float:
        return (1.0 - (1.0 - progress) ** 3) / 3


DECELERATION_CURVES: Dict[str, DecelerationCurve] = {
    LinearDeceleration.name: LinearDeceleration(),
    QuadraticDeceleration.name: QuadraticDeceleration(),
}


def get_curve(name: str) -> DecelerationCurve:
    """Look up a deceleration curve by name."""
    try:
        return DECELERATION_CURVES[name.lower()]
    except KeyError:
        known = ", ".join(sorted(DECELERATION_CURVES))
        raise InvalidConfiguration(
            f"Unknown deceleration curve {name!r} (expected one of: {known})"
        ) from None


# =============================================================================
# Motion Profile
# =============================================================================

@dataclass(frozen=True)
class MotionProfile:
    """
    Constant Spin-phase speeds in radians per frame.

    A ball faster than the wheel visually overtakes it. That is a look,
    not a requirement: the Settle snap is what guarantees the outcome.
    """
    wheel_speed: float = config.WHEEL_SPEED
    ball_speed: float = config.BALL_SPEED

    def __post_init__(self) -> None:
        for name in ("wheel_speed", "ball_speed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
            if value != value or abs(value) == float("inf"):
                raise InvalidConfiguration(f"{name} must be finite, got {value!r}")


# =============================================================================
# Motion Planner
# =============================================================================

class MotionPlanner:
    """Per-frame AnimationState for a spin that lands on winning_number."""

    def __init__(
        self,
        timing: SpinTiming,
        winning_number: int,
        layout: WheelLayout = EUROPEAN_WHEEL,
        profile: Optional[MotionProfile] = None,
        curve: Optional[DecelerationCurve] = None,
        pointer_angle: float = POINTER_ANGLE,
    ) -> None:
        timing.validate()
        if not layout.is_valid(winning_number):
            raise InvalidConfiguration(f"{winning_number!r} is not on the wheel")

        self.timing = timing
        self.layout = layout
        self.profile = profile or MotionProfile()
        self.curve = curve or get_curve(config.DECELERATION_CURVE)
        self.pointer_angle = pointer_angle
        self.winning_number = winning_number

        # Targets
        step = layout.angle_per_slot
        self.winning_index = layout.index_of(winning_number)
        self.target_wheel_rotation = normalize_angle(
            -(self.winning_index * step) - step / 2 + pointer_angle
        )
        self.target_ball_angle = normalize_angle(pointer_angle)

        # Start angles solved backwards so the landing frame meets the target
        travel = self._travel_to_landing()
        self._wheel_start = self.target_wheel_rotation - self.profile.wheel_speed * travel
        self._ball_start = self.target_ball_angle - self.profile.ball_speed * travel

    @property
    def total_frames(self) -> int:
        return self.timing.total_frames

    @property
    def settle_start(self) -> int:
        return self.timing.spin_frames + self.timing.deceleration_frames

    @property
    def landing_frame(self) -> int:
        """First frame resting on the targets."""
        if self.timing.settle_frames:
            return self.settle_start
        return self.total_frames - 1

    def _travel_to_landing(self) -> float:
        """Distance in 'frames at full speed' covered by the landing frame."""
        t = self.timing
        if t.settle_frames:
            return t.spin_frames + t.deceleration_frames * self.curve.distance(1.0)
        return self._travel(self.landing_frame)

    def _travel(self, frame_index: int) -> float:
        """Distance in 'frames at full speed' covered by frame_index."""
        t = self.timing
        if frame_index < t.spin_frames:
            return float(frame_index)
        progress = (frame_index - t.spin_frames) / t.deceleration_frames
        return t.spin_frames + t.deceleration_frames * self.curve.distance(progress)

    def phase_at(self, frame_index: int) -> Phase:
        if frame_index < self.timing.spin_frames:
            return Phase.SPIN
        if frame_index < self.settle_start:
            return Phase.DECELERATE
        return Phase.SETTLE

    def state_at(self, frame_index: int) -> AnimationState:
        """
        State for one frame.

        Raises:
            IndexError: If frame_index is outside [0, total_frames)
        """
        if not 0 <= frame_index < self.total_frames:
            raise IndexError(f"Frame {frame_index} outside 0..{self.total_frames - 1}")

        t = self.timing
        phase = self.phase_at(frame_index)

        if phase is Phase.SPIN:
            progress = frame_index / t.spin_frames
        elif phase is Phase.DECELERATE:
            progress = (frame_index - t.spin_frames) / t.deceleration_frames
        else:
            progress = (frame_index - self.settle_start) / t.settle_frames

        if frame_index >= self.landing_frame:
            return AnimationState(
                frame_index=frame_index,
                phase=phase,
                wheel_rotation=self.target_wheel_rotation,
                ball_angle=self.target_ball_angle,
                phase_progress=progress,
                landed=True,
            )

        travel = self._travel(frame_index)
        return AnimationState(
            frame_index=frame_index,
            phase=phase,
            wheel_rotation=normalize_angle(self._wheel_start + self.profile.wheel_speed * travel),
            ball_angle=normalize_angle(self._ball_start + self.profile.ball_speed * travel),
            phase_progress=progress,
        )

    def speed_at(self, frame_index: int) -> tuple[float, float]:
        """Instantaneous (wheel, ball) speed in radians per frame."""
        phase = self.phase_at(frame_index)
        if phase is Phase.SETTLE:
            return 0.0, 0.0
        factor = 1.0
        if phase is Phase.DECELERATE:
            progress = (frame_index - self.timing.spin_frames) / self.timing.deceleration_frames
            factor = self.curve.speed(progress)
        return self.profile.wheel_speed * factor, self.profile.ball_speed * factor

    def states(self) -> Iterator[AnimationState]:
        for frame_index in range(self.total_frames):
            yield self.state_at(frame_index)

    def plan(self) -> List[AnimationState]:
        return list(self.states())

    def __iter__(self) -> Iterator[AnimationState]:
        return self.states()

    def __len__(self) -> int:
        return self.total_frames
