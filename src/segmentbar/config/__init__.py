"""Configuration management for segmentbar.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BarLayout: Segment count, spacing and skew
- SegmentColors: Fill color and opacity of a shape
- AnimationConfig: Progress tween and breathing settings
- RenderConfig: Drawing surface settings
- LoggingConfig: Logging settings
- SegmentBarSettings: Main application settings
"""

from segmentbar.config.settings import (
    AnimationConfig,
    BarLayout,
    Easing,
    LoggingConfig,
    RenderConfig,
    SegmentBarSettings,
    SegmentColors,
    build_settings,
    get_default_settings,
)

__all__ = [
    "AnimationConfig",
    "BarLayout",
    "Easing",
    "LoggingConfig",
    "RenderConfig",
    "SegmentBarSettings",
    "SegmentColors",
    "build_settings",
    "get_default_settings",
]
