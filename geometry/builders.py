"""Per-kind geometry builders: line points, column bars and pie slices.

All builders scale against `safe_max`, the largest value floored at 0 and
replaced by 1 for all-zero data, so flat series still produce a valid layout.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .dto import BarData, ChartDimensions, ChartPoint, PieSlice, SeriesEntry
from .paths import build_arc_path
from .scale import series_max

BAR_PADDING_RATIO = 0.3
BAR_LABEL_OFFSET = 6
PIE_START_ANGLE = -math.pi / 2
PIE_LABEL_RATIO = 0.65
DEFAULT_EXPLODE_OFFSET = 10


def safe_max(series: Sequence[SeriesEntry]) -> float:
    """Return the scaling maximum for `series` (never 0)."""

    peak = series_max(series)
    return 1 if peak == 0 else peak


def compute_line_points(series: Sequence[SeriesEntry], dims: ChartDimensions) -> list[ChartPoint]:
    """Map entries to line-chart vertices.

    The first vertex sits on the left margin and the last on the right edge of
    the plot area; a single vertex is centered. The maximum value lands on the
    top of the plot area and zero on the baseline.

    Args:
        series: Entries in display order.
        dims: Plot-area dimensions.

    Returns:
        One ChartPoint per entry, in input order.
    """

    if not series:
        return []
    peak = safe_max(series)
    count = len(series)

    points: list[ChartPoint] = []
    for idx, entry in enumerate(series):
        if count == 1:
            x = dims.margin_left + dims.inner_width / 2
        else:
            x = dims.margin_left + (idx / (count - 1)) * dims.inner_width
        y = dims.margin_top + dims.inner_height - (entry.value / peak) * dims.inner_height
        points.append(ChartPoint(x=x, y=y, value=entry.value, name=entry.name, color=entry.color, index=idx))
    return points


def compute_bar_data(series: Sequence[SeriesEntry], dims: ChartDimensions) -> list[BarData]:
    """Lay out one column per entry.

    30% of the inner width is split into `count + 1` equal gaps; the other 70%
    is shared evenly by the bars.
    """

    if not series:
        return []
    peak = safe_max(series)
    count = len(series)
    total_padding = dims.inner_width * BAR_PADDING_RATIO
    bar_width = (dims.inner_width - total_padding) / count
    gap = total_padding / (count + 1)

    bars: list[BarData] = []
    for idx, entry in enumerate(series):
        bar_height = (entry.value / peak) * dims.inner_height
        x = dims.margin_left + gap + idx * (bar_width + gap)
        y = dims.margin_top + dims.inner_height - bar_height
        bars.append(
            BarData(
                name=entry.name,
                value=entry.value,
                color=entry.color,
                x=x,
                y=y,
                width=bar_width,
                height=bar_height,
                label_x=x + bar_width / 2,
                label_y=y - BAR_LABEL_OFFSET,
                index=idx,
            )
        )
    return bars


def compute_pie_slices(
    series: Sequence[SeriesEntry],
    cx: float,
    cy: float,
    radius: float,
    inner_radius: float = 0,
    explode_offset: float = DEFAULT_EXPLODE_OFFSET,
) -> list[PieSlice]:
    """Compute pie or donut wedges, clockwise from 12 o'clock.

    Args:
        series: Entries in display order.
        cx: Pie center X.
        cy: Pie center Y.
        radius: Outer radius.
        inner_radius: Donut hole radius (0 for a plain pie).
        explode_offset: Distance the exploded variant moves along the mid-angle.

    Returns:
        One PieSlice per entry, or an empty list when the total is 0.
    """

    if not series:
        return []
    values = [entry.value for entry in series]
    total = sum(values)
    if total == 0:
        return []
    if math.isinf(total):
        # finite values whose sum overflows: share against the peak instead
        peak = max(values)
        values = [value / peak for value in values]
        total = sum(values)

    label_radius = (radius + inner_radius) / 2 if inner_radius > 0 else radius * PIE_LABEL_RATIO
    slices: list[PieSlice] = []
    current = PIE_START_ANGLE
    for idx, (entry, value) in enumerate(zip(series, values)):
        share = value / total
        start = current
        end = current + share * 2 * math.pi
        current = end

        mid = (start + end) / 2
        exploded_cx = cx + math.cos(mid) * explode_offset
        exploded_cy = cy + math.sin(mid) * explode_offset
        slices.append(
            PieSlice(
                name=entry.name,
                value=entry.value,
                color=entry.color,
                percentage=share * 100,
                start_angle=start,
                end_angle=end,
                path_d=build_arc_path(cx, cy, radius, inner_radius, start, end),
                exploded_path_d=build_arc_path(exploded_cx, exploded_cy, radius, inner_radius, start, end),
                label_x=cx + math.cos(mid) * label_radius,
                label_y=cy + math.sin(mid) * label_radius,
                index=idx,
            )
        )
    return slices
