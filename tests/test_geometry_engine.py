"""Unit tests for the layout engine that composes the geometry pipeline."""

from __future__ import annotations

import json
import math

import pytest

from geometry import layout_chart
from geometry.engine import definition_ids

pytestmark = pytest.mark.unit


def _options(chart_type: str, **overrides: object) -> dict[str, object]:
    """Return a valid three-entry payload for `chart_type`."""

    payload: dict[str, object] = {
        "type": chart_type,
        "title": "Revenue",
        "series": [
            {"name": "Q1", "value": 10, "color": "#6366f1"},
            {"name": "Q2", "value": 20, "color": "#8b5cf6"},
            {"name": "Q3", "value": 30, "color": "#ec4899"},
        ],
    }
    payload.update(overrides)
    return payload


def test_line_layout_builds_grid_points_and_paths() -> None:
    """Line charts get grid lines, points and the three path strings."""

    layout = layout_chart(_options("line"), chart_id="demo")
    assert layout.is_valid
    assert layout.dimensions is not None and layout.dimensions.height == 320
    assert len(layout.grid_lines) == 6
    assert [p.x for p in layout.points] == pytest.approx([60, 315, 570])
    assert layout.line_path.startswith("M 60 ")
    assert " C " in layout.line_path
    assert layout.area_path.endswith("L 570 270 L 60 270 Z")
    assert layout.polyline_points.split(" ")[-1] == "570,20"
    assert layout.bars == () and layout.slices == ()
    assert layout.definition_ids == ("area-grad-0-demo", "area-grad-1-demo", "area-grad-2-demo")


def test_column_layout_builds_bars() -> None:
    """Column charts get grid lines and bars only."""

    layout = layout_chart(_options("column", yAxisTicks=3), chart_id="sales")
    assert len(layout.grid_lines) == 4
    assert len(layout.bars) == 3
    assert layout.points == ()
    assert layout.definition_ids[0] == "bar-grad-0-sales"


def test_pie_layout_uses_canvas_frame() -> None:
    """Pie charts are centered on the canvas with a half-size donut hole."""

    layout = layout_chart(_options("pie", donut=True), chart_id="share", width=400)
    frame = layout.pie_frame
    assert frame is not None
    assert (frame.cx, frame.cy, frame.radius, frame.inner_radius) == (200, 160, 140, 70)
    assert len(layout.slices) == 3
    assert layout.grid_lines == ()
    assert layout.definition_ids[2] == "slice-shadow-2-share"


def test_pie_exploded_paths_use_hover_offset() -> None:
    """Slices explode by 12px unless told otherwise."""

    payload = _options("pie", series=[{"name": "A", "value": 1, "color": "#f00"}, {"name": "B", "value": 1, "color": "#0f0"}])
    layout = layout_chart(payload, chart_id="x", width=400, height=320)
    assert layout.slices[0].exploded_path_d.startswith("M 212 160 ")

    layout = layout_chart(payload, chart_id="x", width=400, height=320, explode_offset=0)
    assert layout.slices[0].exploded_path_d == layout.slices[0].path_d


def test_end_to_end_pie_scenario() -> None:
    """Validate, normalize and lay out the 30/70 pie."""

    payload = {
        "type": "pie",
        "title": "T",
        "series": [{"name": "A", "value": 30, "color": "#f00"}, {"name": "B", "value": 70, "color": "#0f0"}],
    }
    layout = layout_chart(payload, chart_id="e2e")
    assert layout.errors == ()
    assert layout.options is not None and layout.options.donut is False
    a, b = layout.slices
    assert (a.start_angle, a.end_angle) == (pytest.approx(-math.pi / 2), pytest.approx(-math.pi / 2 + 0.6 * math.pi))
    assert (b.start_angle, b.end_angle) == (pytest.approx(a.end_angle), pytest.approx(3 * math.pi / 2))
    assert (a.percentage, b.percentage) == (pytest.approx(30), pytest.approx(70))


def test_invalid_options_return_errors_without_geometry() -> None:
    """No geometry is computed for invalid payloads."""

    layout = layout_chart({"type": "bar", "title": "", "series": []}, chart_id="bad")
    assert not layout.is_valid
    assert len(layout.errors) == 3
    assert layout.options is None and layout.dimensions is None
    assert layout.as_json() == {"ok": False, "chartId": "bad", "errors": list(layout.errors)}


def test_missing_options_return_single_error() -> None:
    """None is reported, not raised."""

    assert layout_chart(None, chart_id="none").errors == ("ChartOptions is required",)


def test_hidden_series_are_left_out() -> None:
    """Legend-hidden entries are dropped before layout and indices restart."""

    layout = layout_chart(_options("line"), chart_id="demo", hidden_series=[2])
    assert [p.name for p in layout.points] == ["Q1", "Q2"]
    assert [p.index for p in layout.points] == [0, 1]
    assert layout.points[1].y == 20
    assert len(layout.definition_ids) == 2


def test_explicit_height_overrides_options_height() -> None:
    """The canvas height defaults to options.height."""

    assert layout_chart(_options("line", height=400), chart_id="a").dimensions.height == 400
    assert layout_chart(_options("line", height=400), chart_id="a", height=200).dimensions.inner_height == 130


def test_layouts_are_deterministic() -> None:
    """Repeated calls with the same inputs produce identical output."""

    first = layout_chart(_options("pie"), chart_id="same")
    second = layout_chart(_options("pie"), chart_id="same")
    assert first == second
    assert json.dumps(first.as_json()) == json.dumps(second.as_json())


@pytest.mark.parametrize("chart_id", ["", "has space", "a/b"])
def test_chart_id_must_be_a_slug(chart_id: str) -> None:
    """Definition ids need a safe, non-empty suffix."""

    with pytest.raises(ValueError):
        layout_chart(_options("line"), chart_id=chart_id)


def test_definition_ids_are_per_entry() -> None:
    """One id per drawn entry, keyed by kind."""

    assert definition_ids("column", "c1", 2) == ("bar-grad-0-c1", "bar-grad-1-c1")
    assert definition_ids("pie", "p", 0) == ()


def test_as_json_emits_kind_specific_keys() -> None:
    """The wire payload carries only the geometry for the chart kind."""

    line = layout_chart(_options("line"), chart_id="l").as_json()
    assert {"points", "linePath", "areaPath", "polylinePoints", "gridLines"} <= line.keys()
    assert "bars" not in line and "slices" not in line

    pie = layout_chart(_options("pie"), chart_id="p").as_json()
    assert {"pieFrame", "slices"} <= pie.keys()
    assert "gridLines" not in pie
    assert pie["slices"][0]["explodedPathD"]
    json.dumps(pie)
