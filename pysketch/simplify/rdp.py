"""Ramer-Douglas-Peucker path simplification.

Freehand strokes arrive as dense, noisy point samples.  ``simplify``
keeps the subsequence of points needed to stay within ``tolerance`` of
the original polyline and drops the rest.  Points are never reordered.

The classic formulation is recursive; this module walks the same split
tree with an explicit work stack so long, nearly straight strokes cannot
exhaust the interpreter's recursion limit.  The output is identical to
the recursive definition:

* the anchor of each range is its first and last point;
* the interior point farthest from the anchor segment splits the range
  when its distance is strictly greater than ``tolerance``;
* ties keep the lowest index.

``distance`` and ``heading`` are shared with the code generator.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from pysketch.project.models import Point


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def heading(p1: Point, p2: Point) -> float:
    """Direction from *p1* to *p2* in degrees, range (-180, 180].

    0 points along +X and angles grow counter-clockwise, which is the
    turtle convention once Y points up.
    """
    return math.degrees(math.atan2(p2.y - p1.y, p2.x - p1.x))


def perpendicular_distance(point: Point, start: Point, end: Point) -> float:
    """Distance from *point* to the segment *start*-*end*.

    The projection parameter is clamped to [0, 1], so the distance is to
    the nearest point on the segment rather than on the infinite line.
    A zero-length segment degrades to the distance from *start*.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy

    if length_sq == 0:
        return distance(point, start)

    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))

    px = start.x + t * dx
    py = start.y + t * dy
    ex = point.x - px
    ey = point.y - py
    return math.sqrt(ex * ex + ey * ey)


def simplify(points: Sequence[Point], tolerance: float = 2.0) -> list[Point]:
    """Simplify a polyline with the Ramer-Douglas-Peucker algorithm.

    Parameters
    ----------
    points : Sequence[Point]
        Ordered polyline vertices.
    tolerance : float
        Maximum deviation, in the units of *points*, that the simplified
        path may introduce.  Larger values drop more points.

    Returns
    -------
    list[Point]
        Subsequence of *points* that always includes the first and last
        point.  Inputs with two or fewer points are returned unchanged.
    """
    n = len(points)
    if n <= 2:
        return list(points)

    keep = [False] * n
    keep[0] = keep[n - 1] = True

    stack = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue

        first = points[start]
        last = points[end]
        max_dist = 0.0
        max_index = start

        for i in range(start + 1, end):
            d = perpendicular_distance(points[i], first, last)
            if d > max_dist:
                max_dist = d
                max_index = i

        if max_index > start and max_dist > tolerance:
            keep[max_index] = True
            stack.append((max_index, end))
            stack.append((start, max_index))

    return [p for p, k in zip(points, keep) if k]
