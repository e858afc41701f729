"""
Tests for MotionPlanner.

Covers:
- Targets put the winning slot center under the pointer
- Phase boundaries are driven by frame index only
- Closed-form angles (no accumulation) and exact Settle pinning
- Deceleration curves and degenerate timings
"""

import math

import pytest

from src.core.constants import POINTER_ANGLE, TAU
from src.services.roulette.errors import InvalidConfiguration
from src.services.roulette.models import Phase, SpinTiming
from src.services.roulette.motion import (
    DecelerationCurve,
    LinearDeceleration,
    MotionPlanner,
    MotionProfile,
    QuadraticDeceleration,
    get_curve,
    normalize_angle,
)
from src.services.roulette.wheel import EUROPEAN_WHEEL


PROFILE = MotionProfile(wheel_speed=0.12, ball_speed=0.30)


def angle_delta(a: float, b: float) -> float:
    """Signed shortest difference a - b in (-pi, pi]."""
    return (a - b + math.pi) % TAU - math.pi


def make_planner(number=17, spin=10, decel=6, settle=4, curve=None):
    timing = SpinTiming(frame_delay_ms=50, spin_frames=spin, deceleration_frames=decel, settle_frames=settle)
    return MotionPlanner(timing, number, profile=PROFILE, curve=curve or LinearDeceleration())


class TestTargets:
    """Target angles computed before any frame."""

    @pytest.mark.parametrize("number", range(37))
    def test_winning_slot_under_pointer(self, number):
        planner = make_planner(number)
        under_pointer = EUROPEAN_WHEEL.slot_at(POINTER_ANGLE - planner.target_wheel_rotation)
        assert under_pointer == number

    def test_target_places_slot_center(self):
        planner = make_planner(19)
        step = EUROPEAN_WHEEL.angle_per_slot
        center = planner.target_wheel_rotation + (EUROPEAN_WHEEL.index_of(19) + 0.5) * step
        assert angle_delta(center, POINTER_ANGLE) == pytest.approx(0.0, abs=1e-12)

    def test_ball_target_is_pointer(self):
        planner = make_planner(5)
        assert planner.target_ball_angle == pytest.approx(normalize_angle(POINTER_ANGLE))

    def test_unknown_number_rejected(self):
        with pytest.raises(InvalidConfiguration):
            make_planner(37)


class TestPhases:
    """Spin -> Decelerate -> Settle by frame index."""

    def test_phase_boundaries(self):
        planner = make_planner(spin=10, decel=6, settle=4)
        phases = [state.phase for state in planner.states()]
        assert phases == [Phase.SPIN] * 10 + [Phase.DECELERATE] * 6 + [Phase.SETTLE] * 4

    def test_total_frames(self):
        planner = make_planner(spin=60, decel=30, settle=20)
        assert planner.total_frames == 110
        assert len(planner) == 110
        assert len(planner.plan()) == 110

    def test_frame_index_out_of_range(self):
        planner = make_planner()
        with pytest.raises(IndexError):
            planner.state_at(planner.total_frames)
        with pytest.raises(IndexError):
            planner.state_at(-1)

    def test_phase_progress(self):
        planner = make_planner(spin=10, decel=5, settle=4)
        assert planner.state_at(0).phase_progress == 0.0
        assert planner.state_at(12).phase_progress == pytest.approx(2 / 5)
        assert planner.state_at(17).phase_progress == pytest.approx(2 / 4)


class TestAngles:
    """Closed-form wheel and ball angles."""

    def test_settle_pinned_exactly(self):
        planner = make_planner(number=22)
        for state in planner.states():
            if state.phase is Phase.SETTLE:
                assert state.wheel_rotation == planner.target_wheel_rotation
                assert state.ball_angle == planner.target_ball_angle

    def test_angles_normalized(self):
        for state in make_planner(number=3).states():
            assert 0.0 <= state.wheel_rotation < TAU
            assert 0.0 <= state.ball_angle < TAU

    def test_spin_phase_constant_speed(self):
        states = make_planner(spin=10).plan()
        for prev, cur in zip(states[:9], states[1:10]):
            assert angle_delta(cur.wheel_rotation, prev.wheel_rotation) == pytest.approx(0.12)
            assert angle_delta(cur.ball_angle, prev.ball_angle) == pytest.approx(0.30)

    def test_ball_overtakes_wheel_while_spinning(self):
        states = make_planner(spin=10).plan()
        for prev, cur in zip(states[:9], states[1:10]):
            wheel_step = angle_delta(cur.wheel_rotation, prev.wheel_rotation)
            ball_step = angle_delta(cur.ball_angle, prev.ball_angle)
            assert ball_step > wheel_step

    def test_deceleration_slows_down(self):
        planner = make_planner(spin=10, decel=8)
        states = planner.plan()
        steps = [
            angle_delta(states[i + 1].wheel_rotation, states[i].wheel_rotation)
            for i in range(9, 17)
        ]
        for faster, slower in zip(steps, steps[1:]):
            assert slower < faster
        assert all(step >= 0 for step in steps)

    def test_linear_speed_profile(self):
        planner = make_planner(spin=10, decel=8)
        for k in range(8):
            wheel, ball = planner.speed_at(10 + k)
            assert wheel == pytest.approx(0.12 * (1 - k / 8))
            assert ball == pytest.approx(0.30 * (1 - k / 8))
        assert planner.speed_at(18) == (0.0, 0.0)

    def test_no_jump_into_settle(self):
        planner = make_planner(spin=10, decel=6, settle=4)
        last_moving = planner.state_at(15)
        settled = planner.state_at(16)
        step = angle_delta(settled.wheel_rotation, last_moving.wheel_rotation)
        assert 0 <= step <= 0.12 / 6 + 1e-9

    def test_state_is_random_access(self):
        planner = make_planner(number=8)
        sequential = planner.plan()
        for index in reversed(range(planner.total_frames)):
            assert planner.state_at(index) == sequential[index]

    def test_relative_ball_angle_on_winner_when_settled(self):
        planner = make_planner(number=31)
        final = planner.plan()[-1]
        assert EUROPEAN_WHEEL.slot_at(final.relative_ball_angle) == 31


class TestDegenerateTimings:
    """Zero-length phases stay well defined."""

    def test_no_deceleration(self):
        planner = make_planner(spin=5, decel=0, settle=3)
        phases = [state.phase for state in planner.states()]
        assert Phase.DECELERATE not in phases
        last_spin = planner.state_at(4)
        expected = normalize_angle(planner.target_wheel_rotation - 0.12)
        assert angle_delta(last_spin.wheel_rotation, expected) == pytest.approx(0.0, abs=1e-9)

    def test_settle_only(self):
        planner = make_planner(spin=0, decel=0, settle=1)
        (state,) = planner.plan()
        assert state.phase is Phase.SETTLE
        assert state.wheel_rotation == planner.target_wheel_rotation

    @pytest.mark.parametrize("spin,decel", [(5, 0), (60, 1), (4, 4)])
    def test_no_settle_final_frame_lands(self, spin, decel):
        planner = make_planner(number=17, spin=spin, decel=decel, settle=0)
        states = planner.plan()
        final = states[-1]

        assert final.landed
        assert final.wheel_rotation == planner.target_wheel_rotation
        assert final.ball_angle == planner.target_ball_angle
        assert EUROPEAN_WHEEL.slot_at(POINTER_ANGLE - final.wheel_rotation) == 17
        assert EUROPEAN_WHEEL.slot_at(final.relative_ball_angle) == 17
        assert not any(state.landed for state in states[:-1])

    def test_no_settle_keeps_moving_into_last_frame(self):
        planner = make_planner(spin=10, decel=6, settle=0)
        before, final = planner.plan()[-2:]
        step = angle_delta(final.wheel_rotation, before.wheel_rotation)
        assert 0 < step < 0.12

    def test_settle_frames_are_the_landed_frames(self):
        planner = make_planner(spin=10, decel=6, settle=4)
        landed = [state.frame_index for state in planner.states() if state.landed]
        assert landed == [16, 17, 18, 19]

    @pytest.mark.parametrize("spin,decel,settle", [
        (0, 0, 0),
        (-1, 5, 5),
        (5, -1, 5),
        (5, 5, -1),
        (2.5, 5, 5),
        (True, 5, 5),
    ])
    def test_invalid_timing_rejected(self, spin, decel, settle):
        with pytest.raises(InvalidConfiguration):
            SpinTiming(frame_delay_ms=50, spin_frames=spin, deceleration_frames=decel, settle_frames=settle)

    @pytest.mark.parametrize("delay", [0, -10, 12.5])
    def test_invalid_frame_delay_rejected(self, delay):
        with pytest.raises(InvalidConfiguration):
            SpinTiming(frame_delay_ms=delay, spin_frames=1, deceleration_frames=1, settle_frames=1)


class TestCurves:
    """Swappable deceleration curves."""

    def test_linear_distance(self):
        curve = LinearDeceleration()
        assert curve.speed(0.0) == 1.0
        assert curve.speed(1.0) == 0.0
        assert curve.distance(1.0) == pytest.approx(0.5)

    def test_quadratic_distance(self):
        curve = QuadraticDeceleration()
        assert curve.distance(1.0) == pytest.approx(1 / 3)
        assert curve.speed(0.5) == pytest.approx(0.25)

    def test_custom_curve_integrates_numerically(self):
        class CubicDeceleration(DecelerationCurve):
            def speed(self, progress):
                return (1.0 - progress) ** 3

        curve = CubicDeceleration()
        assert curve.distance(1.0) == pytest.approx(0.25, rel=1e-6)
        assert curve.distance(0.0) == 0.0

    def test_custom_curve_still_lands(self):
        class CubicDeceleration(DecelerationCurve):
            def speed(self, progress):
                return (1.0 - progress) ** 3

        planner = make_planner(number=14, curve=CubicDeceleration())
        final = planner.plan()[-1]
        assert EUROPEAN_WHEEL.slot_at(POINTER_ANGLE - final.wheel_rotation) == 14

    def test_curve_without_speed_cannot_be_built(self):
        class Incomplete(DecelerationCurve):
            name = "incomplete"

        with pytest.raises(TypeError):
            Incomplete()

    def test_get_curve_by_name(self):
        assert isinstance(get_curve("linear"), LinearDeceleration)
        assert isinstance(get_curve("Quadratic"), QuadraticDeceleration)

    def test_unknown_curve_name(self):
        with pytest.raises(InvalidConfiguration):
            get_curve("bouncy")


class TestMotionProfile:
    """Speed validation."""

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "fast", None])
    def test_invalid_speed(self, value):
        with pytest.raises(InvalidConfiguration):
            MotionProfile(wheel_speed=value, ball_speed=0.3)
