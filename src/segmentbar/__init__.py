"""Segmentbar - Geometry and rendering for segmented progress bars.

Segmentbar computes the quadrilaterals of a horizontal progress bar divided
into discrete, optionally skewed segments with a continuously animated
progress overlay, and renders them to SVG or to the terminal.

Example:
    $ segmentbar render --segments 5 --progress 2.5 --angle 20 -o bar.svg

This will write bar.svg with five right-leaning segments, two and a half of
them covered by the progress overlay.
"""

__version__ = "0.1.0"
__author__ = "Metehan Bolat"

__all__ = ["__author__", "__version__"]
