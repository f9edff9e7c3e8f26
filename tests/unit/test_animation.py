"""Unit tests for the progress controller and animation helpers."""

from unittest.mock import Mock

import pytest

from segmentbar.config import AnimationConfig, BarLayout, Easing, SegmentColors
from segmentbar.core.animation import (
    ManualClock,
    MonotonicClock,
    ProgressController,
    breath_alpha,
    ease,
)
from segmentbar.domain import CoordinateSet
from segmentbar.exceptions import ConfigurationError

SEGMENT_COLORS = SegmentColors(color="#D3D3D3")
PROGRESS_COLORS = SegmentColors(color="#A5D6A7", alpha=1.0)


@pytest.fixture
def clock() -> ManualClock:
    """Clock starting at zero."""
    return ManualClock()


@pytest.fixture
def controller(clock) -> ProgressController:
    """Controller for a three segment bar with a one second linear tween."""
    return ProgressController(
        BarLayout(segment_count=3),
        AnimationConfig(duration_ms=1000.0),
        clock=clock,
    )


class TestClocks:
    """Tests for clock implementations."""

    def test_manual_clock_advance(self):
        """Test manual clock only moves when advanced."""
        clock = ManualClock(start=2.0)
        assert clock.now() == 2.0
        clock.advance(0.5)
        assert clock.now() == 2.5

    def test_manual_clock_rejects_negative(self):
        """Test manual clock cannot go backwards."""
        with pytest.raises(ValueError):
            ManualClock().advance(-1.0)

    def test_monotonic_clock(self):
        """Test monotonic clock never decreases."""
        clock = MonotonicClock()
        first = clock.now()
        assert clock.now() >= first


class TestEase:
    """Tests for easing curves."""

    @pytest.mark.parametrize("easing", list(Easing))
    def test_endpoints(self, easing):
        """Test every curve starts at 0 and ends at 1."""
        assert ease(easing, 0.0) == 0.0
        assert ease(easing, 1.0) == 1.0

    @pytest.mark.parametrize("easing", list(Easing))
    def test_clamped(self, easing):
        """Test time outside [0, 1] is clamped."""
        assert ease(easing, -0.5) == 0.0
        assert ease(easing, 1.5) == 1.0

    def test_linear(self):
        """Test linear is the identity."""
        assert ease(Easing.LINEAR, 0.3) == pytest.approx(0.3)

    def test_ease_in_slower_at_start(self):
        """Test ease-in lags behind linear and ease-out leads it."""
        assert ease(Easing.EASE_IN, 0.25) < 0.25
        assert ease(Easing.EASE_OUT, 0.25) > 0.25

    def test_ease_in_out_symmetric(self):
        """Test ease-in-out passes through the midpoint."""
        assert ease(Easing.EASE_IN_OUT, 0.5) == pytest.approx(0.5)


class TestBreathAlpha:
    """Tests for the breathing keyframes."""

    def test_holds_first_half(self):
        """Test alpha stays at base for the first half of the cycle."""
        assert breath_alpha(0.0, 1.0) == 1.0
        assert breath_alpha(900.0, 1.0) == 1.0

    def test_low_point(self):
        """Test alpha drops to 30% at three quarters."""
        assert breath_alpha(1350.0, 1.0) == pytest.approx(0.3)
        assert breath_alpha(1350.0, 0.5) == pytest.approx(0.15)

    def test_recovers_and_repeats(self):
        """Test alpha returns to base at the end and the cycle restarts."""
        assert breath_alpha(1800.0, 1.0) == pytest.approx(1.0)
        assert breath_alpha(1800.0 + 1350.0, 1.0) == pytest.approx(0.3)

    def test_linear_between_keyframes(self):
        """Test fading is linear between keyframes."""
        assert breath_alpha(1125.0, 1.0) == pytest.approx(0.65)
        assert breath_alpha(1575.0, 1.0) == pytest.approx(0.65)


class TestProgressController:
    """Tests for ProgressController."""

    def test_initial_state(self, controller):
        """Test controller starts idle at zero."""
        assert controller.progress == 0.0
        assert controller.target == 0.0
        assert not controller.is_animating

    def test_linear_tween(self, controller, clock):
        """Test progress interpolates linearly with the clock."""
        controller.set_target(2.0)
        assert controller.is_animating

        clock.advance(0.25)
        assert controller.step() == pytest.approx(0.5)
        clock.advance(0.25)
        assert controller.step() == pytest.approx(1.0)
        clock.advance(0.5)
        assert controller.step() == 2.0
        assert not controller.is_animating

    def test_step_without_tween(self, controller, clock):
        """Test stepping an idle controller is a no-op."""
        clock.advance(5.0)
        assert controller.step() == 0.0

    def test_target_clamped(self, controller, clock):
        """Test targets beyond the bar are clamped."""
        controller.set_target(10.0)
        assert controller.target == 3.0
        controller.set_target(-4.0)
        assert controller.target == 0.0

    def test_retarget_starts_from_current_value(self, controller, clock):
        """Test a new target tweens from the animated value, not the old target."""
        controller.set_target(2.0)
        clock.advance(0.5)
        controller.step()
        controller.set_target(0.0)
        clock.advance(0.5)
        assert controller.step() == pytest.approx(0.5)

    def test_callbacks(self, clock):
        """Test changed fires mid-tween and finished fires once at the end."""
        changed = Mock()
        finished = Mock()
        controller = ProgressController(
            BarLayout(segment_count=3),
            AnimationConfig(duration_ms=1000.0),
            clock=clock,
            on_progress_changed=changed,
            on_progress_finished=finished,
        )
        controller.set_target(1.0)
        clock.advance(0.5)
        controller.step()
        changed.assert_called_once_with(0.5, CoordinateSet.collapsed())
        finished.assert_not_called()

        clock.advance(0.5)
        controller.step()
        controller.step()
        finished.assert_called_once_with(1.0)
        assert changed.call_count == 1

    def test_changed_receives_last_planned_overlay(self, clock):
        """Test on_progress_changed gets the overlay of the previous frame."""
        changed = Mock()
        controller = ProgressController(
            BarLayout(segment_count=3),
            AnimationConfig(duration_ms=1000.0),
            clock=clock,
            on_progress_changed=changed,
        )
        controller.set_target(2.0)
        clock.advance(0.25)
        controller.step()
        plan = controller.frame(300.0, 16.0, SEGMENT_COLORS, PROGRESS_COLORS)
        clock.advance(0.25)
        controller.step()
        assert changed.call_args.args[1] == plan.overlay.coordinates

    def test_snap_to(self, controller):
        """Test snapping jumps without animating."""
        controller.snap_to(1.5)
        assert controller.progress == 1.5
        assert controller.target == 1.5
        assert not controller.is_animating

    def test_increment_decrement(self, controller):
        """Test stepper semantics stay inside [0, segment_count]."""
        controller.decrement()
        assert controller.target == 0.0
        for _ in range(5):
            controller.increment()
        assert controller.target == 3.0
        controller.decrement()
        assert controller.target == 2.0

    def test_set_segment_count(self, controller):
        """Test the segment count can grow and shrink down to the target."""
        controller.snap_to(2.0)
        controller.set_segment_count(5)
        assert controller.layout.segment_count == 5
        controller.set_segment_count(2)
        assert controller.layout.segment_count == 2

    def test_set_segment_count_below_progress(self, controller):
        """Test shrinking below the current target is rejected."""
        controller.snap_to(2.0)
        with pytest.raises(ConfigurationError, match="segment_count"):
            controller.set_segment_count(1)

    def test_set_segment_count_below_one(self, controller):
        """Test a zero segment count is rejected."""
        with pytest.raises(ConfigurationError):
            controller.set_segment_count(0)

    def test_frame_uses_animated_progress(self, controller, clock):
        """Test frames reflect the animated value, not the target."""
        controller.set_target(2.0)
        clock.advance(0.75)
        controller.step()
        plan = controller.frame(300.0, 16.0, SEGMENT_COLORS, PROGRESS_COLORS)
        assert plan.progress == pytest.approx(1.5)
        assert plan.overlay.coordinates.bottom_right_x == pytest.approx(150.0)

    def test_frame_respects_layout_flag(self, clock):
        """Test without breathing the layout decides what is drawn."""
        controller = ProgressController(
            BarLayout(segment_count=3, draw_all_segments=True), clock=clock
        )
        controller.snap_to(3.0)
        plan = controller.frame(300.0, 16.0, SEGMENT_COLORS, PROGRESS_COLORS)
        assert plan.skipped == []


class TestBreathing:
    """Tests for the breathing overlay."""

    @pytest.fixture
    def breathing(self, clock) -> ProgressController:
        return ProgressController(
            BarLayout(segment_count=3),
            AnimationConfig(duration_ms=1000.0, breath_effect=True),
            clock=clock,
        )

    def test_breathes_on_second_to_last_segment(self, breathing, clock):
        """Test breathing runs when idle with progress at segment_count - 1."""
        breathing.snap_to(2.0)
        assert breathing.is_breathing
        clock.advance(1.35)
        assert breathing.progress_alpha(1.0) == pytest.approx(0.3)

    def test_no_breathing_elsewhere(self, breathing, clock):
        """Test the overlay alpha is untouched at other progress values."""
        breathing.snap_to(1.0)
        clock.advance(1.35)
        assert not breathing.is_breathing
        assert breathing.progress_alpha(1.0) == 1.0

    def test_no_breathing_while_animating(self, breathing, clock):
        """Test breathing pauses during a tween."""
        breathing.snap_to(2.0)
        breathing.set_target(3.0)
        clock.advance(0.5)
        breathing.step()
        assert not breathing.is_breathing

    def test_breathing_alpha_applied_to_frame(self, breathing, clock):
        """Test the planned overlay carries the breathing alpha."""
        breathing.snap_to(2.0)
        clock.advance(1.35)
        plan = breathing.frame(300.0, 16.0, SEGMENT_COLORS, PROGRESS_COLORS)
        assert plan.overlay.colors.alpha == pytest.approx(0.3)
        assert plan.overlay.colors.color == PROGRESS_COLORS.color

    def test_idle_hides_covered_segments(self, breathing):
        """Test segments under the overlay are skipped while idle."""
        breathing.snap_to(2.0)
        plan = breathing.frame(300.0, 16.0, SEGMENT_COLORS, PROGRESS_COLORS)
        assert plan.skipped == [0, 1]

    def test_animating_draws_all_segments(self, breathing, clock):
        """Test every segment is drawn behind the overlay during a tween."""
        breathing.snap_to(2.0)
        breathing.set_target(3.0)
        clock.advance(0.5)
        breathing.step()
        plan = breathing.frame(300.0, 16.0, SEGMENT_COLORS, PROGRESS_COLORS)
        assert plan.skipped == []
