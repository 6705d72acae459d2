"""Validation for raw chart option payloads.

Validation never raises: every problem is collected and returned so the
front-end can show all of them at once. Layout is only computed for payloads
that produce no errors.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .dto import CHART_TYPES


class ValidationCode(StrEnum):
    """Stable identifiers for validation problems."""

    MissingConfiguration = "MissingConfiguration"
    InvalidChartType = "InvalidChartType"
    MissingTitle = "MissingTitle"
    EmptySeries = "EmptySeries"
    InvalidSeriesEntry = "InvalidSeriesEntry"
    InvalidSeriesValue = "InvalidSeriesValue"
    NegativeSeriesValue = "NegativeSeriesValue"
    MissingSeriesColor = "MissingSeriesColor"
    InvalidTickCount = "InvalidTickCount"
    InvalidHeight = "InvalidHeight"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single validation problem.

    Args:
        code: Machine-readable problem identifier.
        message: Human-readable message shown to the operator.
        index: Series position for per-entry problems.
    """

    code: ValidationCode
    message: str
    index: int | None = None


def is_number(value: object) -> bool:
    """Return True when `value` is a finite real number (bools excluded).

    Integers too large for a float are rejected; layout arithmetic is float-based.
    """

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def collect_validation_issues(raw: Mapping[str, Any] | None) -> tuple[ValidationIssue, ...]:
    """Collect every validation problem in a raw options payload.

    Args:
        raw: Options mapping, typically decoded from editor JSON. May be None.

    Returns:
        Issues in check order: type, title, series, per-entry checks, then the
        optional numeric settings.
    """

    if raw is None or not isinstance(raw, Mapping):
        return (ValidationIssue(ValidationCode.MissingConfiguration, "ChartOptions is required"),)

    issues: list[ValidationIssue] = []

    chart_type = raw.get("type")
    if chart_type not in CHART_TYPES:
        issues.append(
            ValidationIssue(
                ValidationCode.InvalidChartType,
                f"Invalid chart type: \"{chart_type}\". Must be 'line', 'column', or 'pie'.",
            )
        )

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        issues.append(ValidationIssue(ValidationCode.MissingTitle, "Chart title is required"))

    series = raw.get("series")
    if not isinstance(series, (list, tuple)) or not series:
        issues.append(ValidationIssue(ValidationCode.EmptySeries, "At least one series item is required"))
    else:
        for idx, entry in enumerate(series):
            issues.extend(_entry_issues(idx, entry))

    ticks = raw.get("yAxisTicks")
    if ticks is not None and not _is_positive_int(ticks):
        issues.append(ValidationIssue(ValidationCode.InvalidTickCount, "yAxisTicks must be a positive integer"))

    height = raw.get("height")
    if height is not None and not (is_number(height) and height > 0):
        issues.append(ValidationIssue(ValidationCode.InvalidHeight, "height must be a positive number"))

    return tuple(issues)


def validate_chart_options(raw: Mapping[str, Any] | None) -> list[str]:
    """Validate a raw options payload.

    Args:
        raw: Options mapping, typically decoded from editor JSON. May be None.

    Returns:
        Error messages; an empty list means the payload can be laid out.
    """

    return [issue.message for issue in collect_validation_issues(raw)]


def _entry_issues(idx: int, entry: object) -> list[ValidationIssue]:
    """Return the per-entry problems for one series item."""

    if not isinstance(entry, Mapping):
        return [
            ValidationIssue(
                ValidationCode.InvalidSeriesEntry,
                f"Series[{idx}] must be an object with name, value and color",
                index=idx,
            )
        ]

    label = _entry_label(idx, entry)
    issues: list[ValidationIssue] = []
    value = entry.get("value")
    if isinstance(value, int) and not isinstance(value, bool) and not is_number(value):
        issues.append(
            ValidationIssue(ValidationCode.InvalidSeriesValue, f"{label} has a value out of range", index=idx)
        )
    elif not is_number(value):
        issues.append(
            ValidationIssue(ValidationCode.InvalidSeriesValue, f"{label} has a non-numeric value", index=idx)
        )
    elif value < 0:
        issues.append(ValidationIssue(ValidationCode.NegativeSeriesValue, f"{label} has negative value", index=idx))

    color = entry.get("color")
    if not isinstance(color, str) or not color:
        issues.append(ValidationIssue(ValidationCode.MissingSeriesColor, f"{label} is missing a color", index=idx))
    return issues


def _entry_label(idx: int, entry: Mapping[str, Any]) -> str:
    """Return the `Series[i] "name"` prefix used in per-entry messages."""

    name = entry.get("name")
    return f'Series[{idx}] "{"" if name is None else name}"'


def _is_positive_int(value: object) -> bool:
    """Return True for integers (or integral floats) >= 1."""

    if not is_number(value):
        return False
    return float(value).is_integer() and value >= 1
