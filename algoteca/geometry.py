"""Plane geometry on integer points: orientation, dot and cross products, Graham's convex hull."""

from collections.abc import Iterable
from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    """A point in the plane."""

    x: int
    y: int


class Orientation(Enum):
    """Turn made when walking p -> q -> r."""

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


def orientation(p: Point, q: Point, r: Point) -> Orientation:
    """Return whether p -> q -> r turns right, turns left or runs straight."""
    value = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if value == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if value > 0 else Orientation.COUNTERCLOCKWISE


def squared_distance(p: Point, q: Point) -> int:
    """Return the squared Euclidean distance between p and q."""
    dx, dy = p.x - q.x, p.y - q.y
    return dx * dx + dy * dy


def _precedes(a: Point, b: Point, origin: Point) -> bool:
    turn = orientation(origin, a, b)
    if turn is Orientation.COLLINEAR:
        return squared_distance(origin, a) < squared_distance(origin, b)
    return turn is Orientation.COUNTERCLOCKWISE


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Return the convex hull by Graham's scan, counterclockwise from the lowest point."""
    pts = [Point(*point) for point in points]
    if len(pts) < 3:
        raise ValueError("at least 3 points are needed to form a convex hull")
    lowest = min(range(len(pts)), key=lambda i: (pts[i].y, pts[i].x))
    pts[0], pts[lowest] = pts[lowest], pts[0]
    origin = pts[0]

    count = len(pts)
    for i in range(1, count - 1):
        for j in range(i + 1, count):
            if not _precedes(pts[i], pts[j], origin):
                pts[i], pts[j] = pts[j], pts[i]

    hull = pts[:3]
    for point in pts[3:]:
        while (
            len(hull) > 1
            and orientation(hull[-2], hull[-1], point) is not Orientation.COUNTERCLOCKWISE
        ):
            hull.pop()
        hull.append(point)
    return hull


def cross_product(p: Point, q: Point, r: Point) -> int:
    """Return (q - p) x (r - p): positive for a left turn, negative for a right turn."""
    return (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)


def dot_product(p: Point, q: Point, r: Point) -> int:
    """Return (q - p) . (r - p): positive for an acute angle at p, negative for an obtuse one."""
    return (q.x - p.x) * (r.x - p.x) + (q.y - p.y) * (r.y - p.y)


def are_collinear(p: Point, q: Point, r: Point) -> bool:
    """Tell whether p, q and r lie on one line."""
    return cross_product(p, q, r) == 0


def triangle_area(p: Point, q: Point, r: Point) -> float:
    """Return the area of the triangle p, q, r."""
    return abs(cross_product(p, q, r)) / 2.0