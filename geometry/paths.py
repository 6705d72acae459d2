"""SVG path-string construction.

Paths use a fixed, space-delimited command grammar that renderers parse
verbatim: `M x y`, `L x y`, `C cx1 cy1, cx2 cy2, x y`,
`A rx ry 0 large sweep x y` and `Z`.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal

from .dto import ChartDimensions, ChartPoint


def svg_number(value: float) -> str:
    """Render a coordinate as the browser would stringify it.

    Integral values drop the trailing `.0`. Other values use the shortest
    round-tripping digits, in plain notation for magnitudes in [1e-6, 1e21) and
    as `1.5e-7` / `1e+21` outside it.
    """

    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return "NaN" if math.isnan(value) else ("Infinity" if value > 0 else "-Infinity")
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    point = exponent + len(digits)
    prefix = "-" if sign else ""

    if len(digits) <= point <= 21:
        return prefix + digits + "0" * (point - len(digits))
    if 0 < point <= 21:
        return f"{prefix}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"

    power = point - 1
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    return f"{prefix}{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def build_polyline_points(points: Sequence[ChartPoint]) -> str:
    """Return `x,y x,y ...` for an SVG `<polyline points>` attribute."""

    return " ".join(f"{svg_number(p.x)},{svg_number(p.y)}" for p in points)


def build_smooth_path(points: Sequence[ChartPoint]) -> str:
    """Build a smoothed cubic path through `points`.

    Both control points of each segment sit halfway between the pair
    horizontally and at their own endpoint's Y. Tangents are not continuous at
    interior points; the output format depends on this exact rule.

    Args:
        points: Vertices in drawing order.

    Returns:
        An empty string for no points, a bare move-to for one point, else a
        move-to followed by one `C` segment per consecutive pair.
    """

    if not points:
        return ""

    first = points[0]
    parts = [f"M {svg_number(first.x)} {svg_number(first.y)}"]
    for prev, curr in zip(points, points[1:]):
        cp_x = svg_number((prev.x + curr.x) / 2)
        parts.append(
            f"C {cp_x} {svg_number(prev.y)}, {cp_x} {svg_number(curr.y)}, "
            f"{svg_number(curr.x)} {svg_number(curr.y)}"
        )
    return " ".join(parts)


def build_area_path(points: Sequence[ChartPoint], dims: ChartDimensions) -> str:
    """Close the smoothed path along the plot-area baseline."""

    if not points:
        return ""
    bottom = svg_number(dims.baseline)
    return (
        f"{build_smooth_path(points)} L {svg_number(points[-1].x)} {bottom} "
        f"L {svg_number(points[0].x)} {bottom} Z"
    )


def build_arc_path(
    cx: float,
    cy: float,
    outer_radius: float,
    inner_radius: float,
    start_angle: float,
    end_angle: float,
) -> str:
    """Build a pie wedge or, with an inner radius, an annular donut wedge.

    Args:
        cx: Center X.
        cy: Center Y.
        outer_radius: Outer radius.
        inner_radius: Inner radius; <= 0 draws a plain wedge from the center.
        start_angle: Start angle in radians.
        end_angle: End angle in radians (clockwise from start).

    Returns:
        A closed SVG path string.
    """

    large_arc = 1 if end_angle - start_angle > math.pi else 0
    x1, y1 = _polar(cx, cy, outer_radius, start_angle)
    x2, y2 = _polar(cx, cy, outer_radius, end_angle)
    r = svg_number(outer_radius)

    if inner_radius <= 0:
        return " ".join(
            [
                f"M {svg_number(cx)} {svg_number(cy)}",
                f"L {x1} {y1}",
                f"A {r} {r} 0 {large_arc} 1 {x2} {y2}",
                "Z",
            ]
        )

    ix1, iy1 = _polar(cx, cy, inner_radius, end_angle)
    ix2, iy2 = _polar(cx, cy, inner_radius, start_angle)
    ir = svg_number(inner_radius)
    return " ".join(
        [
            f"M {x1} {y1}",
            f"A {r} {r} 0 {large_arc} 1 {x2} {y2}",
            f"L {ix1} {iy1}",
            f"A {ir} {ir} 0 {large_arc} 0 {ix2} {iy2}",
            "Z",
        ]
    )


def _polar(cx: float, cy: float, radius: float, angle: float) -> tuple[str, str]:
    """Return formatted Cartesian coordinates for a polar offset from (cx, cy)."""

    return svg_number(cx + radius * math.cos(angle)), svg_number(cy + radius * math.sin(angle))
