"""Output layer for segmentbar.

This module turns frame plans into concrete output. Renderers receive the
corner coordinates of each shape in paint order and clip to the drawable
bounds themselves.

Key classes:
- Renderer: Protocol every output surface implements
- SvgRenderer: Standalone SVG documents
- TextRenderer: One-line Rich preview for the terminal

Key functions:
- render_frame: Drive a renderer over a frame plan
- render_svg / write_svg: SVG string or file for a frame plan
"""

from segmentbar.io.renderer import Renderer, render_frame
from segmentbar.io.svg import SvgRenderer, render_svg, write_svg
from segmentbar.io.text import TextRenderer

__all__ = [
    "Renderer",
    "SvgRenderer",
    "TextRenderer",
    "render_frame",
    "render_svg",
    "write_svg",
]
