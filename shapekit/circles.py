"""Circles, circle sectors, ellipses and rings."""

from __future__ import annotations

import math
from functools import partial
from itertools import chain, pairwise

from shapekit.batch import Canvas, PrimitiveMode
from shapekit.geometry import Color, Vector2
from shapekit.primitives import _BL, _BR, _TL, _TR, _angles, _draw, _draw_quads, _on_circle, _xy

SMOOTH_CIRCLE_ERROR_RATE = 0.5

Point = tuple[float, float]


def _arc(center: Vector2, radius: float, degrees: float) -> Point:
    return _on_circle(center, radius, math.radians(degrees))


def _ellipse_point(center: Vector2, radius_h: float, radius_v: float, degrees: float) -> Point:
    angle = math.radians(degrees)
    return center.x + math.cos(angle) * radius_h, center.y + math.sin(angle) * radius_v


def _ten_degree_spans() -> list[tuple[int, int]]:
    return list(pairwise(range(0, 370, 10)))


def circle_segments(radius: float, start_angle: float, end_angle: float, segments: int) -> int:
    """Return the number of segments used to draw an arc.

    A requested count below one segment per 90 degrees is replaced by a count
    derived from the radius and the smoothness error rate.
    """
    span = abs(end_angle - start_angle)
    min_segments = math.ceil(span / 90)
    if segments >= min_segments:
        return segments

    computed = 0
    if radius > 0:
        cos_th = 2 * (1 - SMOOTH_CIRCLE_ERROR_RATE / radius) ** 2 - 1
        if -1.0 <= cos_th < 1.0:
            th = math.acos(cos_th)
            computed = int(span * math.ceil(2 * math.pi / th) / 360)
    return computed if computed > 0 else min_segments


def _arc_plan(
    radius: float, start_angle: float, end_angle: float, segments: int
) -> tuple[float, float, int, list[float]]:
    """Order the angles and return start, end, segment count and the segment angles."""
    if end_angle < start_angle:
        start_angle, end_angle = end_angle, start_angle
    segments = circle_segments(radius, start_angle, end_angle, segments)
    step = (end_angle - start_angle) / segments if segments else 0.0
    return start_angle, end_angle, segments, _angles(start_angle, step, segments)


def draw_circle(canvas: Canvas, center: Vector2, radius: float, color: Color) -> None:
    """Draw a filled circle."""
    draw_circle_sector(canvas, center, radius, 0.0, 360.0, 36, color)


def draw_circle_sector(
    canvas: Canvas, center: Vector2, radius: float, start_angle: float, end_angle: float,
    segments: int, color: Color,
) -> None:
    """Draw a filled piece of a circle between two angles in degrees."""
    radius = radius if radius > 0.0 else 0.1
    start, _, segments, angles = _arc_plan(radius, start_angle, end_angle, segments)
    rim = partial(_arc, center, radius)
    middle = _xy(center)

    if not canvas.quads_mode:
        triangles = chain.from_iterable((middle, rim(b), rim(a)) for a, b in pairwise(angles))
        _draw(canvas, PrimitiveMode.TRIANGLES, color, triangles)
        return

    step = angles[1] - angles[0] if segments else 0.0
    step = (angles[-1] - start) / segments if segments else 0.0
    starts = _angles(start, step * 2.0, segments // 2)
    quads = [
        [(_TL, middle), (_TR, rim(a + step * 2.0)), (_BR, rim(a + step)), (_BL, rim(a))]
        for a in starts[:-1]
    ]
    if segments % 2 == 1:
        a = starts[-1]
        quads.append([(_TL, middle), (_BR, rim(a + step)), (_BL, rim(a)), (_TR, middle)])
    _draw_quads(canvas, color, quads)


def draw_circle_sector_lines(
    canvas: Canvas, center: Vector2, radius: float, start_angle: float, end_angle: float,
    segments: int, color: Color,
) -> None:
    """Draw the outline of a piece of a circle, including both radial caps."""
    radius = radius if radius > 0.0 else 0.1
    _, _, _, angles = _arc_plan(radius, start_angle, end_angle, segments)
    rim = partial(_arc, center, radius)
    middle = _xy(center)
    points = [
        middle,
        rim(angles[0]),
        *chain.from_iterable((rim(a), rim(b)) for a, b in pairwise(angles)),
        middle,
        rim(angles[-1]),
    ]
    _draw(canvas, PrimitiveMode.LINES, color, points)


def draw_circle_gradient(
    canvas: Canvas, center: Vector2, radius: float, color1: Color, color2: Color
) -> None:
    """Draw a circle shaded from color1 at the centre to color2 at the border."""
    rim = partial(_arc, center, radius)
    with canvas.begin(PrimitiveMode.TRIANGLES):
        for a, b in _ten_degree_spans():
            for color, (x, y) in ((color1, _xy(center)), (color2, rim(b)), (color2, rim(a))):
                canvas.color(color)
                canvas.vertex(x, y)


def draw_circle_lines(canvas: Canvas, center: Vector2, radius: float, color: Color) -> None:
    """Draw a circle outline made of 36 segments."""
    rim = partial(_arc, center, radius)
    edges = chain.from_iterable((rim(a), rim(b)) for a, b in _ten_degree_spans())
    _draw(canvas, PrimitiveMode.LINES, color, edges)


def draw_ellipse(canvas: Canvas, center: Vector2, radius_h: float, radius_v: float, color: Color) -> None:
    """Draw a filled ellipse."""
    rim = partial(_ellipse_point, center, radius_h, radius_v)
    triangles = chain.from_iterable((_xy(center), rim(b), rim(a)) for a, b in _ten_degree_spans())
    _draw(canvas, PrimitiveMode.TRIANGLES, color, triangles)


def draw_ellipse_lines(
    canvas: Canvas, center: Vector2, radius_h: float, radius_v: float, color: Color
) -> None:
    """Draw an ellipse outline."""
    rim = partial(_ellipse_point, center, radius_h, radius_v)
    edges = chain.from_iterable((rim(b), rim(a)) for a, b in _ten_degree_spans())
    _draw(canvas, PrimitiveMode.LINES, color, edges)


def _ring(
    canvas: Canvas, center: Vector2, inner_radius: float, outer_radius: float,
    start_angle: float, end_angle: float, segments: int, color: Color, *, outline: bool,
) -> None:
    if start_angle == end_angle:
        return
    if outer_radius < inner_radius:
        inner_radius, outer_radius = outer_radius, inner_radius
        if outer_radius <= 0.0:
            outer_radius = 0.1
    start, end, segments, angles = _arc_plan(outer_radius, start_angle, end_angle, segments)

    if inner_radius <= 0.0:
        sector = draw_circle_sector_lines if outline else draw_circle_sector
        sector(canvas, center, outer_radius, start, end, segments, color)
        return

    inner = partial(_arc, center, inner_radius)
    outer = partial(_arc, center, outer_radius)
    spans = list(pairwise(angles))

    if outline:
        points = [
            outer(angles[0]),
            inner(angles[0]),
            *chain.from_iterable((outer(a), outer(b), inner(a), inner(b)) for a, b in spans),
            outer(angles[-1]),
            inner(angles[-1]),
        ]
        _draw(canvas, PrimitiveMode.LINES, color, points)
    elif canvas.quads_mode:
        quads = ([(_BL, outer(a)), (_TL, inner(a)), (_TR, inner(b)), (_BR, outer(b))] for a, b in spans)
        _draw_quads(canvas, color, quads)
    else:
        triangles = chain.from_iterable(
            (inner(a), inner(b), outer(a), inner(b), outer(b), outer(a)) for a, b in spans
        )
        _draw(canvas, PrimitiveMode.TRIANGLES, color, triangles)


def draw_ring(
    canvas: Canvas, center: Vector2, inner_radius: float, outer_radius: float,
    start_angle: float, end_angle: float, segments: int, color: Color,
) -> None:
    """Draw a filled ring between two radii and two angles in degrees."""
    _ring(canvas, center, inner_radius, outer_radius, start_angle, end_angle, segments, color,
          outline=False)


def draw_ring_lines(
    canvas: Canvas, center: Vector2, inner_radius: float, outer_radius: float,
    start_angle: float, end_angle: float, segments: int, color: Color,
) -> None:
    """Draw the outline of a ring, including both radial caps."""
    _ring(canvas, center, inner_radius, outer_radius, start_angle, end_angle, segments, color,
          outline=True)