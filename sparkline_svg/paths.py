from __future__ import annotations

from typing import Sequence

from sparkline_svg.scales import Point


def format_coord(value: float) -> str:
    """Two-decimal fixed notation used for every emitted coordinate."""

    return f"{value:.2f}"


def _xy(point: Point) -> str:
    return f"{format_coord(point.x)} {format_coord(point.y)}"


def build_linear_outline(points: Sequence[Point]) -> str:
    return " ".join(f"{'M' if i == 0 else 'L'} {_xy(p)}" for i, p in enumerate(points))


def build_spline_outline(points: Sequence[Point], tension: float) -> str:
    """Catmull-Rom spline through every point, written as cubic Bezier segments.

    The first and last points stand in for their own missing neighbors, so the
    end segments do not extrapolate past the data.
    """

    if len(points) < 3:
        return build_linear_outline(points)

    last = len(points) - 1
    k = tension / 3.0
    parts = [f"M {_xy(points[0])}"]
    for i in range(last):
        p0 = points[i - 1] if i > 0 else points[0]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[i + 2] if i + 2 <= last else points[last]
        cp1 = Point(p1.x + (p2.x - p0.x) * k, p1.y + (p2.y - p0.y) * k)
        cp2 = Point(p2.x - (p3.x - p1.x) * k, p2.y - (p3.y - p1.y) * k)
        parts.append(f"C {_xy(cp1)} {_xy(cp2)} {_xy(p2)}")
    return " ".join(parts)


def build_outline(points: Sequence[Point], *, smooth: bool = False, tension: float = 0.5) -> str:
    if smooth:
        return build_spline_outline(points, tension)
    return build_linear_outline(points)


def build_fill_outline(line_path: str, points: Sequence[Point], *, floor_y: float) -> str:
    """Close the line into the area between it and the canvas floor."""

    first = points[0]
    last = points[-1]
    return (
        f"{line_path} L {format_coord(last.x)} {format_coord(floor_y)}"
        f" L {format_coord(first.x)} {format_coord(floor_y)} Z"
    )
