"""Pytest fixtures shared across the test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from geometry.dto import ChartDimensions, SeriesEntry


@pytest.fixture
def axis_dims() -> ChartDimensions:
    """Return line/column dimensions for a 600x320 canvas."""

    return ChartDimensions(
        width=600,
        height=320,
        margin_top=20,
        margin_right=30,
        margin_bottom=50,
        margin_left=60,
        inner_width=510,
        inner_height=250,
    )


@pytest.fixture
def three_series() -> tuple[SeriesEntry, ...]:
    """Return a small ascending series."""

    return (
        SeriesEntry(name="A", value=10, color="#f00"),
        SeriesEntry(name="B", value=20, color="#0f0"),
        SeriesEntry(name="C", value=30, color="#00f"),
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests against the `geometry` package.
    - `integration`: tests touching Django views, commands, or IO.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
