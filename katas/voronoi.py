"""Areas of Voronoi cells computed from perpendicular bisectors."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from math import hypot

EPS = 1e-9


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


@dataclass(frozen=True)
class Line:
    """A line a*x + b*y + c = 0."""

    a: float
    b: float
    c: float


def midpoint(a: Point, b: Point) -> Point:
    """Return the point halfway between a and b."""
    return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


def _normalised(a: float, b: float, c: float) -> Line:
    z = hypot(a, b)
    if abs(z) < EPS:
        return Line(a, b, c)
    return Line(a / z, b / z, c / z)


def line_from_coords(x0: float, y0: float, x1: float, y1: float) -> Line:
    """Return the normalised line through (x0, y0) and (x1, y1)."""
    a = y1 - y0
    b = x0 - x1
    return _normalised(a, b, -a * x0 - b * y0)


def line_from_points(p: Point, q: Point) -> Line:
    """Return the normalised line through two points."""
    return line_from_coords(p.x, p.y, q.x, q.y)


def normal_line(line: Line, point: Point) -> Line:
    """Return the line perpendicular to `line` through `point`."""
    return Line(-line.b, line.a, line.b * point.x - line.a * point.y)


def _det(a: float, b: float, c: float, d: float) -> float:
    return a * d - b * c


def intersection(left: Line, right: Line) -> Point | None:
    """Return the crossing point of two lines, or None if they are parallel."""
    zn = _det(left.a, left.b, right.a, right.b)
    if abs(zn) < EPS:
        return None
    d2 = _det(left.a, left.c, right.a, right.c)
    d4 = _det(left.c, left.b, right.c, right.b)
    return Point(-d4 / zn, -d2 / zn)


def triangle_area(p1: Point, p2: Point, p3: Point) -> float:
    """Signed area of a triangle; positive when counter-clockwise."""
    return _det(p2.x - p1.x, p2.y - p1.y, p3.x - p1.x, p3.y - p1.y) / 2.0


def same_side(p1: Point, p2: Point, line: Line) -> bool:
    """True if both points lie on the same side of the line or on it."""
    r1 = line.a * p1.x + line.b * p1.y + line.c
    r2 = line.a * p2.x + line.b * p2.y + line.c
    if abs(r1) < EPS or abs(r2) < EPS:
        return True
    return r1 * r2 >= 0.0


def _polar_order(p1: Point, p2: Point) -> int:
    cross = p1.x * p2.y - p2.x * p1.y
    if abs(cross) < EPS:
        return 0
    return 1 if cross < 0.0 else -1


def locus_area(points: list[Point], index: int) -> float:
    """Area of the Voronoi cell of points[index], or -1.0 if it is unbounded."""
    site = points[index]
    bisectors = [
        normal_line(line_from_points(site, other), midpoint(site, other))
        for i, other in enumerate(points)
        if i != index
    ]

    vertices = [
        crossing
        for i, first in enumerate(bisectors)
        for second in bisectors[i + 1:]
        if (crossing := intersection(first, second)) is not None
    ]
    for bisector in bisectors:
        vertices = [v for v in vertices if same_side(site, v, bisector)]

    area = 0.0
    if vertices:
        origin = Point(0.0, 0.0)
        shifted = sorted(
            (Point(v.x - site.x, v.y - site.y) for v in vertices),
            key=cmp_to_key(_polar_order),
        )
        area = sum(
            triangle_area(origin, a, b) for a, b in zip(shifted, shifted[1:])
        )
        closing = triangle_area(origin, shifted[-1], shifted[0])
        area = 0.0 if closing < -EPS else area + closing

    if abs(area) <= EPS:
        return -1.0
    return area


def voronoi_areas(points: list[Point]) -> list[float]:
    """Return the cell area of every point, -1.0 for unbounded cells."""
    return [locus_area(points, i) for i in range(len(points))]