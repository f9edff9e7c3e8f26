"""Animated progress for the segmented bar.

The controller owns the progress value that is actually drawn. Setting a new
target starts a tween from the current animated value; each call to step()
reads an external clock and advances the tween. Rendering is a separate, pure
query (frame()) that hands the current value to the geometry engine.

Key components:
- Clock, MonotonicClock, ManualClock: time sources for the tween
- ease: interpolation curves
- breath_alpha: breathing pulse for the idle overlay
- ProgressController: current/target progress and the render query
"""

import time
from collections.abc import Callable
from typing import Protocol

import structlog

from segmentbar.config import AnimationConfig, BarLayout, Easing, SegmentColors
from segmentbar.core.drawing import plan_frame
from segmentbar.core.geometry import clamp_progress
from segmentbar.domain import CoordinateSet, FramePlan
from segmentbar.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

ProgressChangedCallback = Callable[[float, CoordinateSet], None]
ProgressFinishedCallback = Callable[[float], None]

# Alpha at three quarters of a breathing cycle, relative to the base alpha
BREATH_LOW_RATIO = 0.3


class Clock(Protocol):
    """Source of the current time in seconds."""

    def now(self) -> float: ...


class MonotonicClock:
    """Wall clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """Clock that only moves when told to.

    Used for offline frame export and tests.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward.

        Raises:
            ValueError: If seconds is negative
        """
        if seconds < 0:
            raise ValueError(f"cannot move clock backwards by {seconds}")
        self._now += seconds


def ease(easing: Easing, t: float) -> float:
    """Map linear animation time to eased progress.

    Args:
        easing: Interpolation curve
        t: Normalized time, clamped to [0, 1]

    Returns:
        Eased value in [0, 1] with ease(e, 0) == 0 and ease(e, 1) == 1
    """
    t = min(max(t, 0.0), 1.0)
    if easing is Easing.EASE_IN:
        return t * t
    if easing is Easing.EASE_OUT:
        return 1.0 - (1.0 - t) * (1.0 - t)
    if easing is Easing.EASE_IN_OUT:
        if t < 0.5:
            return 2.0 * t * t
        return 1.0 - ((-2.0 * t + 2.0) ** 2) / 2.0
    return t


def breath_alpha(elapsed_ms: float, base_alpha: float, duration_ms: float = 1800.0) -> float:
    """Compute the overlay alpha of a breathing cycle.

    The cycle holds base_alpha for the first half, fades linearly to 30% of
    it at three quarters, returns to base_alpha at the end and restarts.

    Args:
        elapsed_ms: Time since breathing started
        base_alpha: Alpha at rest
        duration_ms: Length of one cycle

    Returns:
        Alpha for the given moment
    """
    t = elapsed_ms % duration_ms
    half = duration_ms / 2.0
    low_at = 3.0 * duration_ms / 4.0
    low = base_alpha * BREATH_LOW_RATIO

    if t <= half:
        return base_alpha
    if t <= low_at:
        return base_alpha + (low - base_alpha) * (t - half) / (low_at - half)
    return low + (base_alpha - low) * (t - low_at) / (duration_ms - low_at)


class ProgressController:
    """Holds the current and target progress of one bar.

    Not thread-safe; one controller belongs to one bar and is driven from a
    single render loop.

    Attributes:
        animation: Tween and breathing settings
    """

    def __init__(
        self,
        layout: BarLayout,
        animation: AnimationConfig | None = None,
        clock: Clock | None = None,
        on_progress_changed: ProgressChangedCallback | None = None,
        on_progress_finished: ProgressFinishedCallback | None = None,
    ) -> None:
        self._layout = layout
        self.animation = animation or AnimationConfig()
        self._clock = clock or MonotonicClock()
        self._on_progress_changed = on_progress_changed
        self._on_progress_finished = on_progress_finished

        self._progress = 0.0
        self._target = 0.0
        self._start_value = 0.0
        self._start_time: float | None = None
        self._idle_since = self._clock.now()
        self._last_overlay = CoordinateSet.collapsed()

    @property
    def layout(self) -> BarLayout:
        """Current layout."""
        return self._layout

    @property
    def progress(self) -> float:
        """Animated progress value as of the last step()."""
        return self._progress

    @property
    def target(self) -> float:
        """Progress value the animation is heading to."""
        return self._target

    @property
    def is_animating(self) -> bool:
        """True while a tween is in flight."""
        return self._start_time is not None

    def set_target(self, progress: float) -> None:
        """Start animating towards a new progress value.

        Args:
            progress: New target, clamped to [0, segment_count]
        """
        target = clamp_progress(progress, self._layout.segment_count)
        if target == self._target and (self.is_animating or target == self._progress):
            return

        self._start_value = self._progress
        self._target = target
        if self._start_value == target:
            self._finish_tween()
            return

        self._start_time = self._clock.now()
        logger.debug("Progress tween started", start=self._start_value, target=target)

    def snap_to(self, progress: float) -> None:
        """Jump to a progress value without animating."""
        target = clamp_progress(progress, self._layout.segment_count)
        self._progress = target
        self._target = target
        self._start_value = target
        self._start_time = None
        self._idle_since = self._clock.now()

    def increment(self) -> None:
        """Move the target one segment forward, if not already full."""
        if self._target < self._layout.segment_count:
            self.set_target(self._target + 1)

    def decrement(self) -> None:
        """Move the target one segment back, if not already empty."""
        if self._target > 0:
            self.set_target(self._target - 1)

    def set_segment_count(self, segment_count: int) -> None:
        """Change the number of segments.

        Args:
            segment_count: New segment count

        Raises:
            ConfigurationError: If the count is below 1 or below the target
                progress
        """
        if segment_count < 1:
            raise ConfigurationError("segment_count", "must be at least 1")
        if segment_count < self._target:
            raise ConfigurationError(
                "segment_count",
                f"cannot drop below current progress {self._target:g}",
            )
        self._layout = self._layout.model_copy(update={"segment_count": segment_count})

    def step(self) -> float:
        """Advance the tween to the clock's current time.

        Calls on_progress_changed for every intermediate value and
        on_progress_finished once when the target is reached.

        Returns:
            The animated progress value
        """
        if self._start_time is None:
            return self._progress

        elapsed_ms = (self._clock.now() - self._start_time) * 1000.0
        t = elapsed_ms / self.animation.duration_ms
        if t >= 1.0:
            self._finish_tween()
            return self._progress

        eased = ease(self.animation.easing, t)
        self._progress = self._start_value + (self._target - self._start_value) * eased
        if self._on_progress_changed is not None:
            self._on_progress_changed(self._progress, self._last_overlay)
        return self._progress

    def _finish_tween(self) -> None:
        self._progress = self._target
        self._start_time = None
        self._idle_since = self._clock.now()
        logger.debug("Progress tween finished", progress=self._progress)
        if self._on_progress_finished is not None:
            self._on_progress_finished(self._progress)

    @property
    def is_breathing(self) -> bool:
        """True when the idle overlay should pulse.

        Breathing runs only with the effect enabled, no tween in flight and
        progress resting on segment_count - 1.
        """
        return (
            self.animation.breath_effect
            and not self.is_animating
            and self._progress == self._layout.segment_count - 1
        )

    def progress_alpha(self, base_alpha: float) -> float:
        """Get the overlay alpha for the current moment."""
        if not self.is_breathing:
            return base_alpha
        elapsed_ms = (self._clock.now() - self._idle_since) * 1000.0
        return breath_alpha(elapsed_ms, base_alpha, self.animation.breath_duration_ms)

    def draw_all_segments(self) -> bool:
        """Whether background segments are drawn under the overlay."""
        if self.animation.breath_effect:
            return self.is_animating
        return self._layout.draw_all_segments

    def frame(
        self,
        width: float,
        height: float,
        segment_colors: SegmentColors,
        progress_colors: SegmentColors,
    ) -> FramePlan:
        """Plan the frame for the current animated progress.

        Does not advance the tween; call step() first.

        Args:
            width: Drawable width
            height: Drawable height
            segment_colors: Fill of the background segments
            progress_colors: Fill of the overlay (alpha may breathe)

        Returns:
            Ordered draw commands for the frame
        """
        alpha = self.progress_alpha(progress_colors.alpha)
        if alpha != progress_colors.alpha:
            progress_colors = progress_colors.model_copy(update={"alpha": alpha})

        plan = plan_frame(
            self._layout,
            self._progress,
            width,
            height,
            segment_colors,
            progress_colors,
            draw_all_segments=self.draw_all_segments(),
        )
        self._last_overlay = plan.overlay.coordinates
        return plan
