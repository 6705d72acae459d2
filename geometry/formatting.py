"""Compact display formatting for axis labels and tooltips."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_ONE_DECIMAL = Decimal("0.1")


def format_value(value: float) -> str:
    """Format a value with K/M suffixes and at most one decimal.

    Args:
        value: Numeric value.

    Returns:
        `2.5M` for millions, `1.5K` for thousands, `42` for integral values and
        `3.7` otherwise. No grouping separators are used.
    """

    if value >= 1_000_000:
        return f"{to_fixed(value / 1_000_000)}M"
    if value >= 1_000:
        return f"{to_fixed(value / 1_000)}K"
    if float(value).is_integer():
        return str(int(value))
    return to_fixed(value)


def to_fixed(value: float) -> str:
    """Render `value` with exactly one decimal place.

    Ties round away from zero on the exact binary value, so `0.25` renders as
    `0.3` rather than Python's banker's-rounded `0.2`.
    """

    return str(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
