"""Layout Engine: the single entry point used by front-ends.

The engine composes validation, normalization, plot-area layout, scaling and
the per-kind builders for one chart request. It performs no caching;
re-running it when inputs change is the caller's job.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from .builders import compute_bar_data, compute_line_points, compute_pie_slices
from .dto import ChartLayout, ChartOptions
from .layout import compute_dimensions, compute_pie_frame
from .options import merge_with_defaults, without_hidden_series
from .paths import build_area_path, build_polyline_points, build_smooth_path
from .scale import compute_grid_lines
from .validation import validate_chart_options

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 600
PIE_EXPLODE_OFFSET = 12

_CHART_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")

_DEFINITION_PREFIXES = {
    "line": "area-grad",
    "column": "bar-grad",
    "pie": "slice-shadow",
}


def definition_ids(chart_type: str, chart_id: str, count: int) -> tuple[str, ...]:
    """Return SVG gradient/filter ids for `count` entries of one chart.

    Ids are derived from the caller-supplied chart id so several charts on one
    page never collide and repeated layouts are identical.
    """

    prefix = _DEFINITION_PREFIXES[chart_type]
    return tuple(f"{prefix}-{idx}-{chart_id}" for idx in range(count))


def layout_chart(
    raw: Mapping[str, Any] | None,
    *,
    chart_id: str,
    width: float = DEFAULT_WIDTH,
    height: float | None = None,
    hidden_series: Iterable[int] = (),
    explode_offset: float = PIE_EXPLODE_OFFSET,
) -> ChartLayout:
    """Validate, normalize and lay out one chart.

    Args:
        raw: Options payload, typically decoded from editor JSON.
        chart_id: Slug identifying this chart instance on the page.
        width: Canvas width in pixels.
        height: Canvas height in pixels; defaults to the options' `height`.
        hidden_series: Series positions toggled off in the legend.
        explode_offset: Hover offset for pie slices.

    Returns:
        ChartLayout with geometry for the chart kind, or with `errors` set and
        no geometry when the payload is invalid.

    Raises:
        ValueError: When `chart_id` is not a non-empty slug.
    """

    if not isinstance(chart_id, str) or not _CHART_ID_RE.match(chart_id):
        raise ValueError(f"chart_id must be a non-empty slug, got {chart_id!r}.")

    errors = validate_chart_options(raw)
    if errors:
        logger.debug("Skipping layout for chart %s: %d validation error(s)", chart_id, len(errors))
        return ChartLayout(chart_id=chart_id, errors=tuple(errors))

    options = without_hidden_series(merge_with_defaults(raw), hidden_series)
    return _layout_options(
        options,
        chart_id=chart_id,
        width=width,
        height=options.height if height is None else height,
        explode_offset=explode_offset,
    )


def _layout_options(
    options: ChartOptions,
    *,
    chart_id: str,
    width: float,
    height: float,
    explode_offset: float,
) -> ChartLayout:
    """Build kind-specific geometry for normalized options."""

    dims = compute_dimensions(width, height, options.type)
    ids = definition_ids(options.type, chart_id, len(options.series))

    if options.type == "pie":
        frame = compute_pie_frame(width, height, donut=options.donut)
        slices = compute_pie_slices(
            options.series,
            frame.cx,
            frame.cy,
            frame.radius,
            frame.inner_radius,
            explode_offset,
        )
        return ChartLayout(
            chart_id=chart_id,
            options=options,
            dimensions=dims,
            pie_frame=frame,
            slices=tuple(slices),
            definition_ids=ids,
        )

    grid = tuple(compute_grid_lines(options.series, dims, options.y_axis_ticks))
    if options.type == "column":
        return ChartLayout(
            chart_id=chart_id,
            options=options,
            dimensions=dims,
            grid_lines=grid,
            bars=tuple(compute_bar_data(options.series, dims)),
            definition_ids=ids,
        )

    points = compute_line_points(options.series, dims)
    return ChartLayout(
        chart_id=chart_id,
        options=options,
        dimensions=dims,
        grid_lines=grid,
        points=tuple(points),
        line_path=build_smooth_path(points),
        area_path=build_area_path(points, dims),
        polyline_points=build_polyline_points(points),
        definition_ids=ids,
    )
