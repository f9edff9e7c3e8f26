"""Logging utilities for Segmentbar."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from segmentbar.domain import FramePlan
from segmentbar.exceptions import AnimationCancelledError

FILE_HANDLER_NAME = "segmentbar-file"
CONSOLE_HANDLER_NAME = "segmentbar-console"


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    frames_rendered: int = 0
    segments_drawn: int = 0
    segments_skipped: int = 0
    error_count: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)
    frame_times_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_frame_time_ms(self) -> float | None:
        """Average time spent per frame."""
        if not self.frame_times_ms:
            return None
        return sum(self.frame_times_ms) / len(self.frame_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("segmentbar")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking rendered frames and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_frame(self, frame_idx: int, plan: FramePlan, duration_ms: float) -> None:
        """Log a rendered frame."""
        drawn = len(plan.segments)
        self._logger.debug(
            "Frame rendered",
            frame=frame_idx,
            progress=round(plan.progress, 4),
            drawn=drawn,
            skipped=len(plan.skipped),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.frames_rendered += 1
        self._stats.segments_drawn += drawn
        self._stats.frame_times_ms.append(duration_ms)
        for position in plan.skipped:
            self.log_segment_skipped(frame_idx, position)

    def log_segment_skipped(self, frame_idx: int, position: int) -> None:
        """Log a segment hidden behind the progress overlay."""
        self._logger.debug("Segment skipped", frame=frame_idx, segment=position, reason="occluded")
        self._stats.segments_skipped += 1

    def log_render_error(self, frame_idx: int, error: Exception) -> None:
        """Log a frame that failed to render."""
        self._logger.error(
            "Frame rendering failed",
            frame=frame_idx,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((frame_idx, str(error)))

    def log_animation_cancelled(self, error: AnimationCancelledError) -> None:
        """Log an animation interrupted before reaching its target."""
        self._logger.warning(
            "Animation cancelled",
            frames=error.frames_rendered,
            progress=round(error.progress, 4),
        )

    def log_animation_finished(self, progress: float) -> None:
        """Log the end of a progress tween."""
        self._logger.info(
            "Animation finished",
            progress=progress,
            frames=self._stats.frames_rendered,
        )

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
