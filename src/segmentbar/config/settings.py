"""Configuration settings for Segmentbar."""

import re
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from segmentbar.exceptions import ConfigurationError

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class Easing(str, Enum):
    """Interpolation curve for progress animation."""

    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"


class SegmentColors(BaseModel):
    """Fill color and opacity for a shape."""

    color: str = Field(
        default="#00FF00",
        description="Fill color as #RRGGBB",
    )
    alpha: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Fill opacity",
    )

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        if not _HEX_COLOR.match(value):
            raise ValueError(f"expected #RRGGBB, got {value!r}")
        return value.upper()

    def rgb(self) -> tuple[int, int, int]:
        """Get the color as an (r, g, b) tuple."""
        return (
            int(self.color[1:3], 16),
            int(self.color[3:5], 16),
            int(self.color[5:7], 16),
        )


class BarLayout(BaseModel):
    """Layout of the segmented bar.

    The drawable width and height are not part of the layout: they belong to
    the rendering surface and are passed with every geometry query.
    """

    segment_count: int = Field(
        default=3,
        ge=1,
        description="Number of segments",
    )
    spacing: float = Field(
        default=10.0,
        ge=0.0,
        description="Gap between adjacent segments",
    )
    angle: float = Field(
        default=0.0,
        ge=-60.0,
        le=60.0,
        description="Skew of the top edge in degrees (positive leans right)",
    )
    draw_all_segments: bool = Field(
        default=False,
        description="Draw every background segment, even under the progress overlay",
    )


class AnimationConfig(BaseModel):
    """Configuration for progress animation."""

    duration_ms: float = Field(
        default=1000.0,
        gt=0.0,
        description="Tween duration for a progress change",
    )
    easing: Easing = Field(
        default=Easing.LINEAR,
        description="Interpolation curve",
    )
    breath_effect: bool = Field(
        default=False,
        description="Pulse the overlay alpha while idle on the last segment",
    )
    breath_duration_ms: float = Field(
        default=1800.0,
        gt=0.0,
        description="Period of one breathing cycle",
    )


class RenderConfig(BaseModel):
    """Configuration for the drawing surface."""

    width: float = Field(
        default=300.0,
        ge=0.0,
        description="Drawable width",
    )
    height: float = Field(
        default=16.0,
        ge=0.0,
        description="Drawable height",
    )
    segment_colors: SegmentColors = Field(
        default_factory=lambda: SegmentColors(color="#D3D3D3"),
        description="Fill of the background segments",
    )
    progress_colors: SegmentColors = Field(
        default_factory=lambda: SegmentColors(color="#A5D6A7"),
        description="Fill of the progress overlay",
    )
    background: str | None = Field(
        default=None,
        description="Optional #RRGGBB fill behind the bar",
    )

    @field_validator("background")
    @classmethod
    def _check_background(cls, value: str | None) -> str | None:
        if value is not None and not _HEX_COLOR.match(value):
            raise ValueError(f"expected #RRGGBB, got {value!r}")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SegmentBarSettings(BaseModel):
    """Main application settings."""

    layout: BarLayout = Field(default_factory=BarLayout)
    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SegmentBarSettings:
    """Get default application settings."""
    return SegmentBarSettings()


def build_settings(**sections: Any) -> SegmentBarSettings:
    """Build settings from plain section dictionaries.

    Args:
        **sections: Section name to dict (or model) mapping, e.g.
            ``layout={"segment_count": 5}``

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If any value is out of range or malformed
    """
    try:
        return SegmentBarSettings.model_validate(sections)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "settings"
        raise ConfigurationError(field, first["msg"]) from e
