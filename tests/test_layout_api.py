"""Integration tests for the chart layout JSON endpoints."""

from __future__ import annotations

import json

import pytest
from django.urls import reverse

pytestmark = pytest.mark.integration


def _payload(**overrides: object) -> dict[str, object]:
    """Return a valid column-chart payload."""

    payload: dict[str, object] = {
        "type": "column",
        "title": "Monthly signups",
        "series": [
            {"name": "Jan", "value": 1200, "color": "#6366f1"},
            {"name": "Feb", "value": 1800, "color": "#8b5cf6"},
        ],
    }
    payload.update(overrides)
    return payload


def _post(client, body: str, **params: str):
    """POST a raw JSON body to the layout endpoint."""

    url = reverse("charts:layout_api")
    if params:
        url += "?" + "&".join(f"{key}={value}" for key, value in params.items())
    return client.post(url, data=body, content_type="application/json")


def test_layout_api_returns_geometry(client) -> None:
    """A valid document yields a 200 layout payload."""

    response = _post(client, json.dumps(_payload()), width="800", id="signups")
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["chartId"] == "signups"
    assert data["dimensions"]["width"] == 800
    assert data["dimensions"]["innerWidth"] == 710
    assert len(data["bars"]) == 2
    assert [line["label"] for line in data["gridLines"]][-1] == "2.5K"
    assert data["definitionIds"] == ["bar-grad-0-signups", "bar-grad-1-signups"]


def test_layout_api_uses_default_width_setting(client, settings) -> None:
    """Requests without a width use CHARTLAYOUT_DEFAULT_WIDTH."""

    settings.CHARTLAYOUT_DEFAULT_WIDTH = 500
    response = _post(client, json.dumps(_payload()))
    assert response.status_code == 200
    assert response.json()["dimensions"]["width"] == 500
    assert response.json()["chartId"] == "chart"


def test_layout_api_rejects_invalid_json(client) -> None:
    """Syntax errors come back as an editor-friendly message."""

    response = _post(client, '{"type": "line",')
    assert response.status_code == 400
    assert response.json() == {"ok": False, "errors": ["Invalid JSON: fix syntax to update chart"]}


def test_layout_api_reports_validation_errors(client) -> None:
    """Validation errors are returned together, with no geometry."""

    body = json.dumps(_payload(title=" ", series=[{"name": "A", "value": -1, "color": ""}]))
    response = _post(client, body, id="bad")
    assert response.status_code == 400
    data = response.json()
    assert data["ok"] is False
    assert data["errors"] == [
        "Chart title is required",
        'Series[0] "A" has negative value',
        'Series[0] "A" is missing a color',
    ]
    assert "bars" not in data


def test_layout_api_rejects_null_document(client) -> None:
    """A JSON null is a missing configuration."""

    response = _post(client, "null")
    assert response.status_code == 400
    assert response.json()["errors"] == ["ChartOptions is required"]


@pytest.mark.parametrize(
    ("params", "message"),
    [
        ({"width": "wide"}, "width must be a positive number"),
        ({"height": "-5"}, "height must be a positive number"),
        ({"hidden": "0,x"}, "hidden must list non-negative integers, got 'x'"),
    ],
)
def test_layout_api_rejects_bad_parameters(client, params: dict[str, str], message: str) -> None:
    """Malformed query parameters are reported as 400s."""

    response = _post(client, json.dumps(_payload()), **params)
    assert response.status_code == 400
    assert response.json()["errors"] == [message]


def test_layout_api_rejects_bad_chart_id(client) -> None:
    """Chart ids must be slugs."""

    response = _post(client, json.dumps(_payload()), id="a%20b")
    assert response.status_code == 400
    assert "chart_id must be a non-empty slug" in response.json()["errors"][0]


def test_layout_api_hides_legend_entries(client) -> None:
    """Hidden positions are dropped from the layout."""

    response = _post(client, json.dumps(_payload(type="pie")), hidden="1", width="400")
    assert response.status_code == 200
    slices = response.json()["slices"]
    assert [item["name"] for item in slices] == ["Jan"]
    assert slices[0]["percentage"] == 100


def test_layout_api_requires_post(client) -> None:
    """GET is not allowed on the layout endpoint."""

    response = client.get(reverse("charts:layout_api"))
    assert response.status_code == 405


def test_defaults_api_lists_defaults(client) -> None:
    """The defaults endpoint mirrors the normalizer defaults."""

    response = client.get(reverse("charts:defaults_api"))
    assert response.status_code == 200
    assert response.json()["defaults"] == {
        "showLegend": True,
        "animated": True,
        "showTooltips": True,
        "showGrid": True,
        "donut": False,
        "yAxisTicks": 5,
        "height": 320,
    }


def test_layout_api_rejects_huge_integer_values(client) -> None:
    """Out-of-range integers come back as validation errors, not server errors."""

    body = (
        '{"type": "line", "title": "t", "yAxisTicks": 1' + "0" * 400 + ", "
        '"series": [{"name": "a", "value": 1' + "0" * 320 + ', "color": "#f00"}]}'
    )
    response = _post(client, body)
    assert response.status_code == 400
    assert response.json()["errors"] == [
        'Series[0] "a" has a value out of range',
        "yAxisTicks must be a positive integer",
    ]
