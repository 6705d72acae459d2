"""DTO types produced by the layout engine.

DTOs are plain, immutable data containers handed to a renderer. They avoid any
Django dependencies and expose `as_json()` using the camelCase names the
browser-side renderer reads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ChartType = Literal["line", "column", "pie"]

CHART_TYPES: tuple[str, ...] = ("line", "column", "pie")


@dataclass(frozen=True, slots=True)
class SeriesEntry:
    """One named, colored value to be plotted.

    Args:
        name: Display name for the entry.
        value: Numeric value (validated as >= 0 before layout).
        color: CSS color string (validated as non-empty before layout).
    """

    name: str
    value: float
    color: str

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {"name": self.name, "value": self.value, "color": self.color}


@dataclass(frozen=True, slots=True)
class ChartOptions:
    """Fully-specified chart options produced by `merge_with_defaults`.

    Args:
        type: Chart kind.
        title: Chart title.
        series: Entries in display order.
        show_legend: Whether a legend is rendered.
        animated: Whether entry animations are enabled.
        show_tooltips: Whether hover tooltips are enabled.
        show_grid: Whether horizontal grid lines are rendered.
        donut: Whether a pie chart gets an inner hole.
        y_axis_ticks: Number of Y-axis intervals.
        height: Canvas height in pixels.
    """

    type: ChartType
    title: str
    series: tuple[SeriesEntry, ...]
    show_legend: bool = True
    animated: bool = True
    show_tooltips: bool = True
    show_grid: bool = True
    donut: bool = False
    y_axis_ticks: int = 5
    height: float = 320

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "type": self.type,
            "title": self.title,
            "series": [entry.as_json() for entry in self.series],
            "showLegend": self.show_legend,
            "animated": self.animated,
            "showTooltips": self.show_tooltips,
            "showGrid": self.show_grid,
            "donut": self.donut,
            "yAxisTicks": self.y_axis_ticks,
            "height": self.height,
        }


@dataclass(frozen=True, slots=True)
class ChartDimensions:
    """Canvas size, margins and the resulting inner plot area."""

    width: float
    height: float
    margin_top: float
    margin_right: float
    margin_bottom: float
    margin_left: float
    inner_width: float
    inner_height: float

    @property
    def baseline(self) -> float:
        """Return the pixel Y of the plot-area bottom edge."""

        return self.margin_top + self.inner_height

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "width": self.width,
            "height": self.height,
            "marginTop": self.margin_top,
            "marginRight": self.margin_right,
            "marginBottom": self.margin_bottom,
            "marginLeft": self.margin_left,
            "innerWidth": self.inner_width,
            "innerHeight": self.inner_height,
        }


@dataclass(frozen=True, slots=True)
class PieFrame:
    """Center and radii of a pie chart on its canvas."""

    cx: float
    cy: float
    radius: float
    inner_radius: float = 0

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {"cx": self.cx, "cy": self.cy, "radius": self.radius, "innerRadius": self.inner_radius}


@dataclass(frozen=True, slots=True)
class ChartPoint:
    """A line-chart vertex plus the entry it was computed from."""

    x: float
    y: float
    value: float
    name: str
    color: str
    index: int

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "x": self.x,
            "y": self.y,
            "value": self.value,
            "name": self.name,
            "color": self.color,
            "index": self.index,
        }


@dataclass(frozen=True, slots=True)
class BarData:
    """A column-chart rectangle with its label anchor.

    Attributes:
        x: Left edge in pixels.
        y: Top edge in pixels.
        label_x: Horizontal center of the bar.
        label_y: Six pixels above the bar top.
    """

    name: str
    value: float
    color: str
    x: float
    y: float
    width: float
    height: float
    label_x: float
    label_y: float
    index: int

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "name": self.name,
            "value": self.value,
            "color": self.color,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "labelX": self.label_x,
            "labelY": self.label_y,
            "index": self.index,
        }


@dataclass(frozen=True, slots=True)
class PieSlice:
    """A pie/donut wedge.

    Attributes:
        percentage: Share of the total in units of 100.
        start_angle: Start angle in radians (0 = 3 o'clock, clockwise).
        end_angle: End angle in radians.
        path_d: SVG path for the resting wedge.
        exploded_path_d: SVG path for the wedge pushed outward along its mid-angle.
        label_x: Label anchor X at the wedge mid-angle.
        label_y: Label anchor Y at the wedge mid-angle.
    """

    name: str
    value: float
    color: str
    percentage: float
    start_angle: float
    end_angle: float
    path_d: str
    exploded_path_d: str
    label_x: float
    label_y: float
    index: int

    @property
    def mid_angle(self) -> float:
        """Return the angle halfway between start and end."""

        return (self.start_angle + self.end_angle) / 2

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "name": self.name,
            "value": self.value,
            "color": self.color,
            "percentage": self.percentage,
            "startAngle": self.start_angle,
            "endAngle": self.end_angle,
            "pathD": self.path_d,
            "explodedPathD": self.exploded_path_d,
            "labelX": self.label_x,
            "labelY": self.label_y,
            "index": self.index,
        }


@dataclass(frozen=True, slots=True)
class GridLine:
    """A horizontal axis tick with its formatted label."""

    value: float
    label: str
    y: float

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {"value": self.value, "label": self.label, "y": self.y}


@dataclass(frozen=True, slots=True)
class ChartLayout:
    """Everything a renderer needs to draw one chart.

    Invalid options produce a layout with `errors` set and no geometry.

    Attributes:
        chart_id: Caller-supplied identifier used for SVG definition ids.
        errors: Validation errors; empty when the layout was computed.
        options: Normalized options (None when invalid).
        dimensions: Canvas and plot-area dimensions (None when invalid).
        grid_lines: Y-axis grid (line and column charts).
        points: Line-chart vertices.
        line_path: Smoothed SVG path through `points`.
        area_path: Closed SVG path under `line_path`.
        polyline_points: `points` as an SVG polyline attribute.
        bars: Column-chart rectangles.
        pie_frame: Pie center and radii.
        slices: Pie/donut wedges.
        definition_ids: Gradient/filter ids, one per drawn entry.
    """

    chart_id: str
    errors: tuple[str, ...] = ()
    options: ChartOptions | None = None
    dimensions: ChartDimensions | None = None
    grid_lines: tuple[GridLine, ...] = ()
    points: tuple[ChartPoint, ...] = ()
    line_path: str = ""
    area_path: str = ""
    polyline_points: str = ""
    bars: tuple[BarData, ...] = ()
    pie_frame: PieFrame | None = None
    slices: tuple[PieSlice, ...] = ()
    definition_ids: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Return True when no validation errors exist."""

        return not self.errors

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        if self.errors:
            return {"ok": False, "chartId": self.chart_id, "errors": list(self.errors)}

        payload: dict[str, object] = {
            "ok": True,
            "chartId": self.chart_id,
            "options": self.options.as_json() if self.options else None,
            "dimensions": self.dimensions.as_json() if self.dimensions else None,
            "definitionIds": list(self.definition_ids),
        }
        if self.grid_lines:
            payload["gridLines"] = [line.as_json() for line in self.grid_lines]
        if self.options is not None and self.options.type == "line":
            payload["points"] = [point.as_json() for point in self.points]
            payload["linePath"] = self.line_path
            payload["areaPath"] = self.area_path
            payload["polylinePoints"] = self.polyline_points
        if self.options is not None and self.options.type == "column":
            payload["bars"] = [bar.as_json() for bar in self.bars]
        if self.pie_frame is not None:
            payload["pieFrame"] = self.pie_frame.as_json()
            payload["slices"] = [item.as_json() for item in self.slices]
        return payload
