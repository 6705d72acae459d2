"""Default handling for chart options.

`merge_with_defaults` layers a validated payload over `DEFAULT_CHART_OPTIONS`
(shallow merge, payload wins) and returns an immutable `ChartOptions`. The
input mapping is never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from types import MappingProxyType
from typing import Any

from .dto import ChartOptions, SeriesEntry

DEFAULT_CHART_OPTIONS: Mapping[str, object] = MappingProxyType(
    {
        "showLegend": True,
        "animated": True,
        "showTooltips": True,
        "showGrid": True,
        "donut": False,
        "yAxisTicks": 5,
        "height": 320,
    }
)


def merge_with_defaults(raw: Mapping[str, Any] | ChartOptions) -> ChartOptions:
    """Return fully-specified options for a validated payload.

    Args:
        raw: Payload that passed `validate_chart_options`, or options that were
            already normalized.

    Returns:
        ChartOptions with every optional field populated. Explicit JSON nulls
        count as absent and fall back to the default.
    """

    if isinstance(raw, ChartOptions):
        return raw

    merged: dict[str, Any] = dict(DEFAULT_CHART_OPTIONS)
    merged.update({key: value for key, value in raw.items() if value is not None})

    return ChartOptions(
        type=merged.get("type"),
        title=str(merged.get("title") or ""),
        series=tuple(_series_entry(entry) for entry in (merged.get("series") or ())),
        show_legend=bool(merged["showLegend"]),
        animated=bool(merged["animated"]),
        show_tooltips=bool(merged["showTooltips"]),
        show_grid=bool(merged["showGrid"]),
        donut=bool(merged["donut"]),
        y_axis_ticks=int(merged["yAxisTicks"]),
        height=merged["height"],
    )


def without_hidden_series(options: ChartOptions, hidden: Iterable[int]) -> ChartOptions:
    """Return a copy of `options` without the series entries at `hidden` positions.

    Positions refer to the original series order; unknown positions are ignored.
    """

    hidden_set = set(hidden)
    if not hidden_set:
        return options
    kept = tuple(entry for idx, entry in enumerate(options.series) if idx not in hidden_set)
    return replace(options, series=kept)


def _series_entry(entry: Mapping[str, Any] | SeriesEntry) -> SeriesEntry:
    """Build a SeriesEntry from a validated series mapping."""

    if isinstance(entry, SeriesEntry):
        return entry
    name = entry.get("name")
    return SeriesEntry(
        name="" if name is None else str(name),
        value=entry.get("value", 0),
        color=str(entry.get("color") or ""),
    )
