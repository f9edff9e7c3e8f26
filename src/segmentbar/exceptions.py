"""Exception hierarchy for Segmentbar."""


class SegmentBarError(Exception):
    """Base exception for all Segmentbar errors."""

    pass


class ConfigurationError(SegmentBarError):
    """Invalid bar, animation or render configuration."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration for '{field}': {reason}")


class RenderError(SegmentBarError):
    """Errors related to drawing a frame."""

    pass


class RenderOutputError(RenderError):
    """Error writing rendered output."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


class AnimationError(SegmentBarError):
    """Errors related to progress animation."""

    pass


class AnimationCancelledError(AnimationError):
    """Animation was cancelled by user."""

    def __init__(self, frames_rendered: int, progress: float) -> None:
        self.frames_rendered = frames_rendered
        self.progress = progress
        super().__init__(
            f"Animation cancelled: {frames_rendered} frames rendered, "
            f"progress at {progress:.2f}"
        )
