"""Parsing helpers for layout request parameters.

Both the HTTP view and the management command accept the same canvas and
legend parameters as text; these helpers turn them into engine arguments and
raise `ValueError` with an operator-facing message on bad input.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any

INVALID_JSON_MESSAGE = "Invalid JSON: fix syntax to update chart"


@dataclass(frozen=True, slots=True)
class LayoutParams:
    """Canvas and legend parameters for one layout request.

    Args:
        chart_id: Slug used for SVG definition ids.
        width: Canvas width in pixels.
        height: Optional canvas height; the options' height is used when None.
        hidden_series: Series positions toggled off in the legend.
    """

    chart_id: str
    width: float
    height: float | None = None
    hidden_series: tuple[int, ...] = ()


def decode_options(text: str | bytes) -> Any:
    """Decode an editor document into an options payload.

    Raises:
        ValueError: When the text is not valid JSON.
    """

    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(INVALID_JSON_MESSAGE) from exc


def parse_dimension(raw: str | None, *, name: str, default: float | None) -> float | None:
    """Parse a positive pixel size, falling back to `default` when blank."""

    if raw is None or not str(raw).strip():
        return default
    try:
        value = float(str(raw).strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a positive number") from exc
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive number")
    return int(value) if value.is_integer() else value


def parse_hidden_indices(raw: str | None) -> tuple[int, ...]:
    """Parse a comma-separated list of series positions (e.g. `0,2`)."""

    if raw is None or not raw.strip():
        return ()
    indices: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit():
            raise ValueError(f"hidden must list non-negative integers, got {part!r}")
        indices.append(int(part))
    return tuple(sorted(set(indices)))


def build_layout_params(
    *,
    chart_id: str | None,
    width: str | None,
    height: str | None,
    hidden: str | None,
    default_width: float,
) -> LayoutParams:
    """Parse raw text parameters into LayoutParams.

    Raises:
        ValueError: When any parameter is malformed.
    """

    return LayoutParams(
        chart_id=(chart_id or "chart").strip(),
        width=parse_dimension(width, name="width", default=default_width),
        height=parse_dimension(height, name="height", default=None),
        hidden_series=parse_hidden_indices(hidden),
    )
