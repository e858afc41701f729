"""
RouletteSpin - Roulette Models
==============================

Request, result and per-frame state types for a single spin.
Everything here is created fresh per spin and owned by that call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from src.core.config import config
from src.core.constants import MIN_CANVAS_SIZE, TAU

from .errors import InvalidConfiguration


def _is_int(value) -> bool:
    """True for real ints (bool is rejected even though it subclasses int)."""
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# Request
# =============================================================================

@dataclass(frozen=True)
class CanvasSize:
    """Output frame dimensions in pixels."""
    width: int = config.CANVAS_WIDTH
    height: int = config.CANVAS_HEIGHT

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not _is_int(value):
                raise InvalidConfiguration(f"Canvas {name} must be an integer, got {value!r}")
            if value < MIN_CANVAS_SIZE:
                raise InvalidConfiguration(
                    f"Canvas {name} must be at least {MIN_CANVAS_SIZE}px, got {value}"
                )

    @property
    def as_tuple(self) -> tuple[int, int]:
        return self.width, self.height


@dataclass(frozen=True)
class SpinTiming:
    """Frame delay and the length of each motion phase, in frames."""
    frame_delay_ms: int = config.FRAME_DELAY_MS
    spin_frames: int = config.SPIN_FRAMES
    deceleration_frames: int = config.DECELERATION_FRAMES
    settle_frames: int = config.SETTLE_FRAMES

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not _is_int(self.frame_delay_ms) or self.frame_delay_ms <= 0:
            raise InvalidConfiguration(
                f"Frame delay must be a positive integer (ms), got {self.frame_delay_ms!r}"
            )
        for name in ("spin_frames", "deceleration_frames", "settle_frames"):
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                raise InvalidConfiguration(
                    f"{name} must be a non-negative integer, got {value!r}"
                )
        if self.total_frames <= 0:
            raise InvalidConfiguration("Animation needs at least one frame")

    @property
    def total_frames(self) -> int:
        return self.spin_frames + self.deceleration_frames + self.settle_frames


@dataclass(frozen=True)
class DisplayMetadata:
    """Pass-through text for the frame header. Never affects the outcome."""
    bet_amount: Optional[int] = None
    bet_type: Optional[str] = None
    player_label: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.bet_amount is None and not self.bet_type and not self.player_label

    def header_text(self) -> str:
        """Single header line, e.g. 'Alice - 500 on red'."""
        parts = []
        if self.player_label:
            parts.append(self.player_label)
        bet = ""
        if self.bet_amount is not None:
            bet = f"{self.bet_amount:,}"
        if self.bet_type:
            bet = f"{bet} on {self.bet_type}" if bet else self.bet_type
        if bet:
            parts.append(bet)
        return " - ".join(parts)


@dataclass(frozen=True)
class SpinRequest:
    """Everything a single spin consumes."""
    forced_winning_number: Optional[int] = None
    display: DisplayMetadata = field(default_factory=DisplayMetadata)
    canvas: CanvasSize = field(default_factory=CanvasSize)
    timing: SpinTiming = field(default_factory=SpinTiming)

    @classmethod
    def from_config(
        cls,
        forced_winning_number: Optional[int] = None,
        display: Optional[DisplayMetadata] = None,
    ) -> "SpinRequest":
        """Build a request using the configured canvas and timing."""
        return cls(
            forced_winning_number=forced_winning_number,
            display=display or DisplayMetadata(),
            canvas=CanvasSize(config.CANVAS_WIDTH, config.CANVAS_HEIGHT),
            timing=SpinTiming(
                frame_delay_ms=config.FRAME_DELAY_MS,
                spin_frames=config.SPIN_FRAMES,
                deceleration_frames=config.DECELERATION_FRAMES,
                settle_frames=config.SETTLE_FRAMES,
            ),
        )


# =============================================================================
# Per-frame State
# =============================================================================

class Phase(Enum):
    """Motion phases, in order. Transitions are driven by frame index only."""
    SPIN = "spin"
    DECELERATE = "decelerate"
    SETTLE = "settle"


@dataclass(frozen=True)
class AnimationState:
    """
    Wheel and ball angles for one frame.

    Both angles are world-space radians normalized to [0, 2pi), derived in
    closed form from frame_index. phase_progress is 0..1 within the phase.

    landed frames hold the angles exactly at their targets: every Settle
    frame, or only the final frame when there is no Settle phase. The final
    frame of a spin is therefore always landed, with the winning pocket
    under the pointer and the ball resting in it.
    """
    frame_index: int
    phase: Phase
    wheel_rotation: float
    ball_angle: float
    phase_progress: float = 0.0
    landed: bool = False

    @property
    def is_settled(self) -> bool:
        return self.phase is Phase.SETTLE

    @property
    def relative_ball_angle(self) -> float:
        """Ball position in wheel-local space (which pocket it is above)."""
        return (self.ball_angle - self.wheel_rotation) % TAU


# =============================================================================
# Result
# =============================================================================

@dataclass(frozen=True)
class SpinResult:
    """Encoded animation plus the authoritative outcome."""
    image_bytes: bytes
    winning_number: int
    frame_count: int = 0
    final_state: Optional[AnimationState] = None

    @property
    def size_kb(self) -> float:
        return len(self.image_bytes) / 1024
