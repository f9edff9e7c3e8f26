"""Command-line interface for segmentbar.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Coordinate tables for every segment and the overlay
- Terminal preview or SVG output of a single frame
- Deterministic frame export of a progress animation
- Quiet output mode
"""

from segmentbar.cli.app import cli, main

__all__ = ["cli", "main"]
