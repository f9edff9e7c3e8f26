"""Unit tests for draw ordering of segments and the progress overlay."""

import pytest

from segmentbar.config import BarLayout, SegmentColors
from segmentbar.core.drawing import plan_frame, should_draw_segment
from segmentbar.domain import CoordinateSet, ShapeKind


@pytest.fixture
def segment_colors() -> SegmentColors:
    """Light gray background segments."""
    return SegmentColors(color="#D3D3D3")


@pytest.fixture
def progress_colors() -> SegmentColors:
    """Green overlay."""
    return SegmentColors(color="#A5D6A7", alpha=0.8)


def _plan(layout, progress, segment_colors, progress_colors, **kwargs):
    return plan_frame(layout, progress, 300.0, 16.0, segment_colors, progress_colors, **kwargs)


class TestShouldDrawSegment:
    """Tests for the single draw comparison."""

    def test_segment_ahead_drawn(self):
        """Test a segment whose top-right lies ahead of the overlay is drawn."""
        segment = CoordinateSet(100.0, 200.0, 100.0, 200.0)
        overlay = CoordinateSet(0.0, 150.0, 0.0, 150.0)
        assert should_draw_segment(segment, overlay)

    def test_segment_covered_skipped(self):
        """Test a segment ending before the overlay's edge is skipped."""
        segment = CoordinateSet(0.0, 90.0, 0.0, 90.0)
        overlay = CoordinateSet(0.0, 150.0, 0.0, 150.0)
        assert not should_draw_segment(segment, overlay)

    def test_equal_edges_skipped(self):
        """Test the comparison is strict: a segment ending at the overlay's edge is skipped."""
        segment = CoordinateSet(0.0, 90.0, 0.0, 90.0)
        overlay = CoordinateSet(0.0, 90.0, 0.0, 90.0)
        assert not should_draw_segment(segment, overlay)

    def test_draw_all_overrides(self):
        """Test draw_all_segments draws covered segments too."""
        segment = CoordinateSet(0.0, 90.0, 0.0, 90.0)
        overlay = CoordinateSet(0.0, 150.0, 0.0, 150.0)
        assert should_draw_segment(segment, overlay, draw_all_segments=True)

    def test_compares_top_edges(self):
        """Test the decision uses sheared top coordinates, not the bottom edge."""
        # Bottom edges say "ahead", top edges say "covered"
        segment = CoordinateSet(50.0, 140.0, 60.0, 160.0)
        overlay = CoordinateSet(0.0, 150.0, 0.0, 150.0)
        assert not should_draw_segment(segment, overlay)


class TestPlanFrame:
    """Tests for plan_frame."""

    def test_zero_progress_draws_every_segment(self, segment_colors, progress_colors):
        """Test nothing is hidden with an empty overlay."""
        plan = _plan(BarLayout(segment_count=3), 0.0, segment_colors, progress_colors)
        assert [c.index for c in plan.segments] == [0, 1, 2]
        assert plan.skipped == []

    def test_partial_progress_skips_covered(self, segment_colors, progress_colors):
        """Test segments fully under the overlay are skipped."""
        plan = _plan(BarLayout(segment_count=3), 1.5, segment_colors, progress_colors)
        assert plan.skipped == [0]
        assert [c.index for c in plan.segments] == [1, 2]

    def test_integer_progress_skips_completed(self, segment_colors, progress_colors):
        """Test a completed segment is skipped at exact integer progress."""
        plan = _plan(BarLayout(segment_count=3), 2.0, segment_colors, progress_colors)
        assert plan.skipped == [0, 1]

    def test_full_progress_skips_all(self, segment_colors, progress_colors):
        """Test full progress hides every background segment."""
        plan = _plan(BarLayout(segment_count=3), 3.0, segment_colors, progress_colors)
        assert plan.skipped == [0, 1, 2]
        assert len(plan.commands) == 1

    def test_overlay_always_last(self, segment_colors, progress_colors):
        """Test the overlay is painted after every segment."""
        plan = _plan(
            BarLayout(segment_count=4, draw_all_segments=True),
            2.5,
            segment_colors,
            progress_colors,
        )
        kinds = [c.kind for c in plan.commands]
        assert kinds == [ShapeKind.SEGMENT] * 4 + [ShapeKind.PROGRESS]
        assert plan.overlay.colors == progress_colors

    def test_layout_draw_all(self, segment_colors, progress_colors):
        """Test the layout flag draws every segment."""
        plan = _plan(
            BarLayout(segment_count=3, draw_all_segments=True),
            3.0,
            segment_colors,
            progress_colors,
        )
        assert plan.skipped == []
        assert len(plan.segments) == 3

    def test_override_draw_all(self, segment_colors, progress_colors):
        """Test the explicit argument wins over the layout flag."""
        plan = _plan(
            BarLayout(segment_count=3, draw_all_segments=True),
            3.0,
            segment_colors,
            progress_colors,
            draw_all_segments=False,
        )
        assert plan.skipped == [0, 1, 2]

    @pytest.mark.parametrize("angle", [-60.0, -20.0, 20.0, 60.0])
    def test_ordering_holds_under_skew(self, angle, segment_colors, progress_colors):
        """Test the same segments are hidden at any skew angle."""
        plan = _plan(BarLayout(segment_count=3, angle=angle), 1.5, segment_colors, progress_colors)
        assert plan.skipped == [0]

    def test_progress_clamped(self, segment_colors, progress_colors):
        """Test out-of-range progress is clamped before computing the overlay."""
        plan = _plan(BarLayout(segment_count=3), 12.0, segment_colors, progress_colors)
        assert plan.progress == 3.0
        assert plan.overlay.coordinates.bottom_right_x == pytest.approx(300.0)

        plan = _plan(BarLayout(segment_count=3), -1.0, segment_colors, progress_colors)
        assert plan.progress == 0.0
        assert plan.overlay.coordinates.bottom_right_x == 0.0

    def test_segment_colors_applied(self, segment_colors, progress_colors):
        """Test background commands carry the segment fill."""
        plan = _plan(BarLayout(segment_count=2), 0.5, segment_colors, progress_colors)
        assert all(c.colors == segment_colors for c in plan.segments)
