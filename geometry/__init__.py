"""Pure chart-layout package for chartlayout.

This package turns chart options (named, colored values) into drawing
primitives: dimensions, grid lines, points, bars, pie slices and SVG path
strings. It must not import Django or perform any I/O.
"""

from .engine import layout_chart

__all__ = ["layout_chart"]
