"""Thick curved lines: eased, Bezier, B-spline and Catmull-Rom."""

from __future__ import annotations

import math
from typing import Sequence

from shapekit.batch import Canvas
from shapekit.circles import draw_circle
from shapekit.geometry import Color, Vector2
from shapekit.primitives import draw_triangle_strip

SPLINE_LINE_DIVISIONS = 24

_Carry = tuple[float, float, float]


def ease_cubic_in_out(t: float, b: float, c: float, d: float) -> float:
    """Cubic in-out easing from ``b`` to ``b + c`` over duration ``d``."""
    t /= 0.5 * d
    if t < 1:
        return 0.5 * c * t * t * t + b
    t -= 2
    return 0.5 * c * (t * t * t + 2.0) + b


def _offset(p: Vector2, dx: float, dy: float, size: float) -> tuple[Vector2, Vector2]:
    return (
        Vector2(p.x + dy * size, p.y - dx * size),
        Vector2(p.x - dy * size, p.y + dx * size),
    )


def _half_width(dx: float, dy: float, thick: float) -> float:
    # A zero-length step has no direction; its offset collapses onto the curve.
    length = math.hypot(dx, dy)
    return 0.5 * thick / length if length else 0.0


def _build_strip(
    start: Vector2,
    samples: Sequence[Vector2],
    thick: float,
    carried: _Carry | None = None,
) -> tuple[list[Vector2], _Carry]:
    """Widen a polyline into a triangle strip; ``carried`` places the leading pair."""
    vertices: list[Vector2] = []
    dx = dy = size = 0.0
    if carried is not None:
        dx, dy, size = carried
        vertices.extend(_offset(start, dx, dy, size))

    current = start
    for nxt in samples:
        dx = nxt.x - current.x
        dy = nxt.y - current.y
        size = _half_width(dx, dy, thick)
        if not vertices:
            vertices.extend(_offset(current, dx, dy, size))
        vertices.extend(_offset(nxt, dx, dy, size))
        current = nxt
    return vertices, (dx, dy, size)


def _steps() -> list[float]:
    step = 1.0 / SPLINE_LINE_DIVISIONS
    return [step * i for i in range(1, SPLINE_LINE_DIVISIONS + 1)]


def line_bezier_strip(start: Vector2, end: Vector2, thick: float) -> list[Vector2]:
    """Strip points of a line eased cubic in-out along y."""
    samples = []
    previous_x = start.x
    for i in range(1, SPLINE_LINE_DIVISIONS + 1):
        y = ease_cubic_in_out(float(i), start.y, end.y - start.y, float(SPLINE_LINE_DIVISIONS))
        previous_x += (end.x - start.x) / SPLINE_LINE_DIVISIONS
        samples.append(Vector2(previous_x, y))
    return _build_strip(start, samples, thick)[0]


def line_bezier_quad_strip(
    start: Vector2, end: Vector2, control: Vector2, thick: float
) -> list[Vector2]:
    """Strip points of a quadratic Bezier curve with one control point."""
    samples = []
    for t in _steps():
        a = (1.0 - t) ** 2
        b = 2.0 * (1.0 - t) * t
        c = t**2
        samples.append(Vector2(
            a * start.x + b * control.x + c * end.x,
            a * start.y + b * control.y + c * end.y,
        ))
    return _build_strip(start, samples, thick)[0]


def line_bezier_cubic_strip(
    start: Vector2,
    end: Vector2,
    start_control: Vector2,
    end_control: Vector2,
    thick: float,
) -> list[Vector2]:
    """Strip points of a cubic Bezier curve with two control points."""
    samples = []
    for t in _steps():
        a = (1.0 - t) ** 3
        b = 3.0 * (1.0 - t) ** 2 * t
        c = 3.0 * (1.0 - t) * t**2
        d = t**3
        samples.append(Vector2(
            a * start.x + b * start_control.x + c * end_control.x + d * end.x,
            a * start.y + b * start_control.y + c * end_control.y + d * end.y,
        ))
    return _build_strip(start, samples, thick)[0]


def draw_line_bezier(
    canvas: Canvas, start: Vector2, end: Vector2, thick: float, color: Color
) -> None:
    """Draw a thick line eased cubic in-out between two points."""
    draw_triangle_strip(canvas, line_bezier_strip(start, end, thick), color)


def draw_line_bezier_quad(
    canvas: Canvas, start: Vector2, end: Vector2, control: Vector2, thick: float, color: Color
) -> None:
    """Draw a thick quadratic Bezier curve."""
    draw_triangle_strip(canvas, line_bezier_quad_strip(start, end, control, thick), color)


def draw_line_bezier_cubic(
    canvas: Canvas,
    start: Vector2,
    end: Vector2,
    start_control: Vector2,
    end_control: Vector2,
    thick: float,
    color: Color,
) -> None:
    """Draw a thick cubic Bezier curve."""
    strip = line_bezier_cubic_strip(start, end, start_control, end_control, thick)
    draw_triangle_strip(canvas, strip, color)


def draw_line_bspline(
    canvas: Canvas, points: Sequence[Vector2], thick: float, color: Color
) -> None:
    """Draw a thick uniform cubic B-spline with round caps; needs four points."""
    points = list(points)
    if len(points) < 4:
        return

    carried: _Carry | None = None
    current = Vector2()
    for i, (p1, p2, p3, p4) in enumerate(zip(points, points[1:], points[2:], points[3:])):
        a = (
            (-p1.x + 3.0 * p2.x - 3.0 * p3.x + p4.x) / 6.0,
            (3.0 * p1.x - 6.0 * p2.x + 3.0 * p3.x) / 6.0,
            (-3.0 * p1.x + 3.0 * p3.x) / 6.0,
            (p1.x + 4.0 * p2.x + p3.x) / 6.0,
        )
        b = (
            (-p1.y + 3.0 * p2.y - 3.0 * p3.y + p4.y) / 6.0,
            (3.0 * p1.y - 6.0 * p2.y + 3.0 * p3.y) / 6.0,
            (-3.0 * p1.y + 3.0 * p3.y) / 6.0,
            (p1.y + 4.0 * p2.y + p3.y) / 6.0,
        )
        current = Vector2(a[3], b[3])
        if i == 0:
            draw_circle(canvas, current, thick / 2.0, color)

        samples = [
            Vector2(
                a[3] + t * (a[2] + t * (a[1] + t * a[0])),
                b[3] + t * (b[2] + t * (b[1] + t * b[0])),
            )
            for t in (j / SPLINE_LINE_DIVISIONS for j in range(1, SPLINE_LINE_DIVISIONS + 1))
        ]
        vertices, carried = _build_strip(current, samples, thick, carried)
        draw_triangle_strip(canvas, vertices, color)
        current = samples[-1]

    draw_circle(canvas, current, thick / 2.0, color)


def draw_line_catmull_rom(
    canvas: Canvas, points: Sequence[Vector2], thick: float, color: Color
) -> None:
    """Draw a thick Catmull-Rom spline with round caps; needs four points."""
    points = list(points)
    if len(points) < 4:
        return

    current = points[1]
    draw_circle(canvas, current, thick / 2.0, color)

    carried: _Carry | None = None
    for p1, p2, p3, p4 in zip(points, points[1:], points[2:], points[3:]):
        samples = []
        for j in range(1, SPLINE_LINE_DIVISIONS + 1):
            t = j / SPLINE_LINE_DIVISIONS
            q0 = -t * t * t + 2.0 * t * t - t
            q1 = 3.0 * t * t * t - 5.0 * t * t + 2.0
            q2 = -3.0 * t * t * t + 4.0 * t * t + t
            q3 = t * t * t - t * t
            samples.append(Vector2(
                0.5 * (p1.x * q0 + p2.x * q1 + p3.x * q2 + p4.x * q3),
                0.5 * (p1.y * q0 + p2.y * q1 + p3.y * q2 + p4.y * q3),
            ))
        vertices, carried = _build_strip(current, samples, thick, carried)
        draw_triangle_strip(canvas, vertices, color)
        current = samples[-1]

    draw_circle(canvas, current, thick / 2.0, color)