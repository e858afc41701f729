"""
RouletteSpin - Roulette Service
===============================

Spin orchestration: resolve the outcome, plan the motion, render and
encode every frame, return the GIF with the winning number.

spin() is synchronous and CPU-bound. RouletteService.spin() runs it in a
worker thread so an event loop is never blocked. Each call builds its own
resolver, planner, renderer and encoder; nothing mutable is shared.
"""

import asyncio
import random
import time
from typing import Optional

from src.core.config import config
from src.core.logger import log

from .encoder import AnimationEncoder
from .errors import EncodingError, InvalidOutcome, RouletteError
from .graphics import FrameRenderer
from .models import DisplayMetadata, SpinRequest, SpinResult
from .motion import DecelerationCurve, MotionPlanner, MotionProfile
from .outcome import OutcomeResolver
from .wheel import EUROPEAN_WHEEL, WheelLayout


def spin(
    request: SpinRequest,
    rng: Optional[random.Random] = None,
    layout: WheelLayout = EUROPEAN_WHEEL,
    profile: Optional[MotionProfile] = None,
    curve: Optional[DecelerationCurve] = None,
    palette_colors: Optional[int] = None,
    optimize: Optional[bool] = None,
) -> SpinResult:
    """
    Render one roulette spin.

    Args:
        request: Forced number (optional), display text, canvas and timing
        rng: Random source for unforced draws; a fresh one per call if None
        layout: Wheel layout to animate
        profile: Spin-phase wheel/ball speeds
        curve: Deceleration speed curve
        palette_colors: GIF palette size (16-256)
        optimize: Let the GIF writer optimize palettes

    Returns:
        SpinResult with the GIF bytes and the winning number

    Raises:
        InvalidConfiguration: Malformed canvas, timing or encoder settings
        InvalidOutcome: Forced number outside 0..36 (before any rendering)
        EncodingError: Drawing or GIF encoding failed
    """
    request.timing.validate()
    request.canvas.validate()

    winning_number = OutcomeResolver(layout, rng).resolve(request.forced_winning_number)

    planner = MotionPlanner(
        request.timing,
        winning_number,
        layout=layout,
        profile=profile,
        curve=curve,
    )
    renderer = FrameRenderer(request.canvas, layout=layout, display=request.display)

    with AnimationEncoder(
        request.timing.frame_delay_ms,
        palette_colors=config.PALETTE_COLORS if palette_colors is None else palette_colors,
        optimize=config.OPTIMIZE_GIF if optimize is None else optimize,
    ) as encoder:
        state = None
        for state in planner.states():
            try:
                frame = renderer.render(state, winning_number)
            except (OSError, ValueError) as e:
                raise EncodingError(f"Failed to render frame {state.frame_index}: {e}") from e
            encoder.add_frame(frame)

        image_bytes = encoder.finalize()
        frame_count = encoder.frame_count

    return SpinResult(
        image_bytes=image_bytes,
        winning_number=winning_number,
        frame_count=frame_count,
        final_state=state,
    )


class RouletteService:
    """
    Async front for spin().

    Holds no per-spin state, so concurrent spins (different channels,
    different players) never see each other's frames or outcome.
    """

    def __init__(
        self,
        profile: Optional[MotionProfile] = None,
        curve: Optional[DecelerationCurve] = None,
    ) -> None:
        self.profile = profile
        self.curve = curve

    def build_request(
        self,
        winning_number: Optional[int] = None,
        bet_amount: Optional[int] = None,
        bet_type: Optional[str] = None,
        player_label: Optional[str] = None,
    ) -> SpinRequest:
        """Request with the configured canvas and timing."""
        display = DisplayMetadata(
            bet_amount=bet_amount,
            bet_type=bet_type,
            player_label=player_label,
        )
        return SpinRequest.from_config(winning_number, display)

    async def spin(
        self,
        request: Optional[SpinRequest] = None,
        rng: Optional[random.Random] = None,
    ) -> SpinResult:
        """
        Render a spin in a worker thread.

        Raises the same errors as spin(); failures are logged first.
        """
        request = request or self.build_request()
        forced = request.forced_winning_number
        started = time.perf_counter()

        try:
            result = await asyncio.to_thread(
                spin,
                request,
                rng,
                EUROPEAN_WHEEL,
                self.profile,
                self.curve,
            )
        except InvalidOutcome as e:
            log.tree("Roulette Spin Rejected", [
                ("Forced Number", repr(forced)),
                ("Reason", str(e)[:100]),
            ], emoji="🚫")
            raise
        except RouletteError as e:
            log.error_tree("Roulette Spin Failed", e, [
                ("Forced Number", "None" if forced is None else str(forced)),
                ("Frames", str(request.timing.total_frames)),
            ])
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        details = EUROPEAN_WHEEL.describe(result.winning_number)
        log.tree("Roulette Spin Complete", [
            ("Winning Number", str(result.winning_number)),
            ("Color", details.color.value),
            ("Outcome", "Forced" if forced is not None else "Random"),
            ("Frames", str(result.frame_count)),
            ("Size", f"{result.size_kb:.1f} KB"),
            ("Dimensions", f"{request.canvas.width}x{request.canvas.height}"),
            ("Elapsed", f"{elapsed_ms:.0f}ms"),
        ], emoji="🎰")

        return result


# Singleton instance
_service: Optional[RouletteService] = None


def get_roulette_service() -> RouletteService:
    """Get or create the roulette service singleton."""
    global _service
    if _service is None:
        _service = RouletteService()
    return _service
