"""Plot-area layout for a canvas of a given size.

Sizes are taken as given: negative inner sizes from undersized canvases are
passed through unguarded, the renderer supplies sane positive sizes.
"""

from __future__ import annotations

from .dto import ChartDimensions, PieFrame

PIE_MARGIN = 20
AXIS_MARGIN_TOP = 20
AXIS_MARGIN_RIGHT = 30
AXIS_MARGIN_BOTTOM = 50
AXIS_MARGIN_LEFT = 60

DONUT_HOLE_RATIO = 0.5


def compute_dimensions(width: float, height: float, chart_type: str) -> ChartDimensions:
    """Compute margins and the inner plot area for a canvas.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        chart_type: "pie" gets a uniform margin; other kinds leave room for axes.

    Returns:
        ChartDimensions for the canvas.
    """

    if chart_type == "pie":
        top = right = bottom = left = PIE_MARGIN
    else:
        top, right, bottom, left = AXIS_MARGIN_TOP, AXIS_MARGIN_RIGHT, AXIS_MARGIN_BOTTOM, AXIS_MARGIN_LEFT

    return ChartDimensions(
        width=width,
        height=height,
        margin_top=top,
        margin_right=right,
        margin_bottom=bottom,
        margin_left=left,
        inner_width=width - left - right,
        inner_height=height - top - bottom,
    )


def compute_pie_frame(width: float, height: float, *, donut: bool) -> PieFrame:
    """Center the pie on the canvas and size it to the shorter side.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        donut: When True the hole is half the outer radius.

    Returns:
        PieFrame with center and radii.
    """

    radius = min(width, height) / 2 - PIE_MARGIN
    return PieFrame(
        cx=width / 2,
        cy=height / 2,
        radius=radius,
        inner_radius=radius * DONUT_HOLE_RATIO if donut else 0,
    )
