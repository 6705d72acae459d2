"""Y-axis scaling and tick selection.

The axis maximum is rounded up to a "nice" number (1, 2, 5 or 10 times a power
of ten, times the tick count) so tick labels are round regardless of the data
magnitude.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .dto import ChartDimensions, GridLine, SeriesEntry
from .formatting import format_value

NICE_MULTIPLIERS: tuple[int, ...] = (1, 2, 5, 10)


def series_max(series: Sequence[SeriesEntry]) -> float:
    """Return the largest value in `series`, floored at 0."""

    return max(0, *(entry.value for entry in series)) if series else 0


def nice_number(max_value: float, tick_count: int) -> float:
    """Round an axis maximum up to a human-friendly value.

    Args:
        max_value: Largest data value (values <= 0 use a unit scale).
        tick_count: Number of axis intervals (>= 1).

    Returns:
        `m * 10**k * tick_count` with `m` the smallest of 1/2/5/10 that covers
        `max_value / tick_count`.

    Raises:
        ValueError: When `tick_count` is smaller than 1.
    """

    if tick_count < 1:
        raise ValueError(f"tick_count must be >= 1, got {tick_count!r}.")
    if max_value <= 0:
        return tick_count

    rough = max_value / tick_count
    magnitude = 10 ** math.floor(math.log10(rough))
    normalized = rough / magnitude
    multiplier = next((m for m in NICE_MULTIPLIERS if normalized <= m), NICE_MULTIPLIERS[-1])
    return multiplier * magnitude * tick_count


def compute_grid_lines(
    series: Sequence[SeriesEntry],
    dims: ChartDimensions,
    tick_count: int = 5,
) -> list[GridLine]:
    """Compute evenly spaced Y-axis grid lines from 0 to the nice maximum.

    Args:
        series: Entries being plotted.
        dims: Plot-area dimensions.
        tick_count: Number of axis intervals.

    Returns:
        `tick_count + 1` GridLine entries in ascending value order.
    """

    nice_max = nice_number(series_max(series), tick_count)
    step = nice_max / tick_count
    lines: list[GridLine] = []
    for idx in range(tick_count + 1):
        value = idx * step
        y = dims.margin_top + dims.inner_height - (value / nice_max) * dims.inner_height
        lines.append(GridLine(value=value, label=format_value(value), y=y))
    return lines
