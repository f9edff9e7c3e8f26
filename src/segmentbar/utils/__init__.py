"""Utility functions for segmentbar.

This module provides:

- Logging setup and configuration
- Frame rendering statistics
"""

from segmentbar.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
