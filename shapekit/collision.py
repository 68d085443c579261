"""Collision checks between points, lines, circles, triangles and rectangles."""

from __future__ import annotations

import math
from itertools import pairwise
from typing import Sequence

from shapekit.geometry import Rectangle, Vector2

_FLT_EPSILON = 2.0**-23


def check_collision_point_rec(point: Vector2, rec: Rectangle) -> bool:
    """Return True if the point lies inside the rectangle (right/bottom edges excluded)."""
    return (
        rec.x <= point.x < rec.x + rec.width
        and rec.y <= point.y < rec.y + rec.height
    )


def check_collision_point_circle(point: Vector2, center: Vector2, radius: float) -> bool:
    """Return True if the point lies inside or on the circle."""
    return check_collision_circles(point, 0.0, center, radius)


def check_collision_point_triangle(
    point: Vector2, p1: Vector2, p2: Vector2, p3: Vector2
) -> bool:
    """Return True if the point lies strictly inside the triangle."""
    denominator = (p2.y - p3.y) * (p1.x - p3.x) + (p3.x - p2.x) * (p1.y - p3.y)
    if denominator == 0:
        return False

    alpha = (
        (p2.y - p3.y) * (point.x - p3.x) + (p3.x - p2.x) * (point.y - p3.y)
    ) / denominator
    beta = (
        (p3.y - p1.y) * (point.x - p3.x) + (p1.x - p3.x) * (point.y - p3.y)
    ) / denominator
    gamma = 1.0 - alpha - beta

    return alpha > 0 and beta > 0 and gamma > 0


def check_collision_point_poly(point: Vector2, points: Sequence[Vector2]) -> bool:
    """Return True if the point is inside the polygon traced by consecutive points.

    Only the edges between consecutive points are tested; the polygon is not
    closed implicitly, so repeat the first point at the end to close it.
    """
    if len(points) <= 2:
        return False

    inside = False
    for vc, vn in pairwise(points):
        crosses = (vc.y >= point.y > vn.y) or (vc.y < point.y <= vn.y)
        if crosses and point.x < (vn.x - vc.x) * (point.y - vc.y) / (vn.y - vc.y) + vc.x:
            inside = not inside
    return inside


def check_collision_recs(rec1: Rectangle, rec2: Rectangle) -> bool:
    """Return True if the two rectangles overlap."""
    return (
        rec1.x < rec2.x + rec2.width
        and rec1.x + rec1.width > rec2.x
        and rec1.y < rec2.y + rec2.height
        and rec1.y + rec1.height > rec2.y
    )


def check_collision_circles(
    center1: Vector2, radius1: float, center2: Vector2, radius2: float
) -> bool:
    """Return True if the two circles touch or overlap."""
    distance = math.hypot(center2.x - center1.x, center2.y - center1.y)
    return distance <= radius1 + radius2


def check_collision_circle_rec(center: Vector2, radius: float, rec: Rectangle) -> bool:
    """Return True if the circle touches or overlaps the rectangle."""
    rec_center_x = int(rec.x + rec.width / 2.0)
    rec_center_y = int(rec.y + rec.height / 2.0)

    dx = abs(center.x - rec_center_x)
    dy = abs(center.y - rec_center_y)
    half_w = rec.width / 2.0
    half_h = rec.height / 2.0

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True

    corner_distance_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_distance_sq <= radius * radius


def check_collision_lines(
    start1: Vector2, end1: Vector2, start2: Vector2, end2: Vector2
) -> Vector2 | None:
    """Return the intersection point of two segments, or None if they do not cross."""
    div = (end2.y - start2.y) * (end1.x - start1.x) - (end2.x - start2.x) * (end1.y - start1.y)
    if abs(div) < _FLT_EPSILON:
        return None

    cross1 = start1.x * end1.y - start1.y * end1.x
    cross2 = start2.x * end2.y - start2.y * end2.x
    xi = ((start2.x - end2.x) * cross1 - (start1.x - end1.x) * cross2) / div
    yi = ((start2.y - end2.y) * cross1 - (start1.y - end1.y) * cross2) / div

    def outside(value: float, a: float, b: float) -> bool:
        return abs(a - b) > _FLT_EPSILON and (value < min(a, b) or value > max(a, b))

    if (
        outside(xi, start1.x, end1.x)
        or outside(xi, start2.x, end2.x)
        or outside(yi, start1.y, end1.y)
        or outside(yi, start2.y, end2.y)
    ):
        return None

    return Vector2(xi, yi)


def check_collision_point_line(
    point: Vector2, p1: Vector2, p2: Vector2, threshold: int
) -> bool:
    """Return True if the point lies on the segment p1-p2 within a margin in pixels."""
    dxc = point.x - p1.x
    dyc = point.y - p1.y
    dxl = p2.x - p1.x
    dyl = p2.y - p1.y
    cross = dxc * dyl - dyc * dxl

    if abs(cross) >= threshold * max(abs(dxl), abs(dyl)):
        return False

    if abs(dxl) >= abs(dyl):
        if dxl > 0:
            return p1.x <= point.x <= p2.x
        return p2.x <= point.x <= p1.x
    if dyl > 0:
        return p1.y <= point.y <= p2.y
    return p2.y <= point.y <= p1.y


def get_collision_rec(rec1: Rectangle, rec2: Rectangle) -> Rectangle:
    """Return the overlap of two rectangles, or an all-zero rectangle if none."""
    left = max(rec1.x, rec2.x)
    right = min(rec1.x + rec1.width, rec2.x + rec2.width)
    top = max(rec1.y, rec2.y)
    bottom = min(rec1.y + rec1.height, rec2.y + rec2.height)

    if left < right and top < bottom:
        return Rectangle(left, top, right - left, bottom - top)
    return Rectangle(0.0, 0.0, 0.0, 0.0)