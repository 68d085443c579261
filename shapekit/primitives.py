"""Pixels, lines, triangles and regular polygons."""

from __future__ import annotations

import math
from contextlib import contextmanager
from functools import partial
from itertools import accumulate, chain, pairwise, repeat
from typing import Iterable, Iterator, Sequence

from shapekit.batch import Canvas, PrimitiveMode
from shapekit.geometry import Color, Vector2

Point = tuple[float, float]
Quad = Iterable[tuple[int, Point]]

# Indices into Canvas.shape_tex_coords(): top-left, bottom-left, bottom-right, top-right.
_TL, _BL, _BR, _TR = range(4)


@contextmanager
def _shape_quads(canvas: Canvas) -> Iterator[None]:
    canvas.set_texture(canvas.shapes_texture.id)
    try:
        with canvas.begin(PrimitiveMode.QUADS):
            yield
    finally:
        canvas.set_texture(0)


def _xy(v: Vector2) -> Point:
    return v.x, v.y


def _on_circle(center: Vector2, radius: float, angle: float) -> Point:
    return center.x + math.cos(angle) * radius, center.y + math.sin(angle) * radius


def _angles(start: float, step: float, count: int) -> list[float]:
    """Return start and the count angles reached by adding step repeatedly."""
    return list(accumulate(repeat(step, count), initial=start))


def _draw(canvas: Canvas, mode: PrimitiveMode, color: Color, points: Iterable[Point]) -> None:
    with canvas.begin(mode):
        canvas.color(color)
        for x, y in points:
            canvas.vertex(x, y)


def _draw_quads(canvas: Canvas, color: Color, quads: Iterable[Quad], *, normal: bool = False) -> None:
    coords = canvas.shape_tex_coords()
    with _shape_quads(canvas):
        if normal:
            canvas.normal(0.0, 0.0, 1.0)
        canvas.color(color)
        for quad in quads:
            for corner, (x, y) in quad:
                canvas.tex_coord(*coords[corner])
                canvas.vertex(x, y)


def _corners(*points: Point) -> list[tuple[int, Point]]:
    return list(zip((_TL, _BL, _BR, _TR), points))


def draw_pixel(canvas: Canvas, position: Vector2, color: Color) -> None:
    """Draw a one-pixel square at the position."""
    x, y = _xy(position)
    tl, bl, br, tr = (x, y), (x, y + 1), (x + 1, y + 1), (x + 1, y)
    if canvas.quads_mode:
        _draw_quads(canvas, color, [_corners(tl, bl, br, tr)], normal=True)
    else:
        _draw(canvas, PrimitiveMode.TRIANGLES, color, [tl, bl, tr, tr, bl, br])


def draw_line(canvas: Canvas, start: Vector2, end: Vector2, color: Color) -> None:
    """Draw a one-pixel line."""
    _draw(canvas, PrimitiveMode.LINES, color, [_xy(start), _xy(end)])


def draw_line_ex(canvas: Canvas, start: Vector2, end: Vector2, thick: float, color: Color) -> None:
    """Draw a line of the given thickness; degenerate lines draw nothing."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length <= 0 or thick <= 0:
        return

    scale = thick / (2 * length)
    rx, ry = -scale * dy, scale * dx
    strip = [
        Vector2(p.x + sign * rx, p.y + sign * ry) for p in (start, end) for sign in (-1, 1)
    ]
    draw_triangle_strip(canvas, strip, color)


def draw_line_strip(canvas: Canvas, points: Sequence[Vector2], color: Color) -> None:
    """Draw connected line segments through the points."""
    points = list(points)
    if len(points) < 2:
        return
    segments = chain.from_iterable((_xy(a), _xy(b)) for a, b in pairwise(points))
    _draw(canvas, PrimitiveMode.LINES, color, segments)


def draw_triangle(canvas: Canvas, v1: Vector2, v2: Vector2, v3: Vector2, color: Color) -> None:
    """Draw a filled triangle; vertices go counter-clockwise."""
    if canvas.quads_mode:
        _draw_quads(canvas, color, [_corners(_xy(v1), _xy(v2), _xy(v2), _xy(v3))])
    else:
        _draw(canvas, PrimitiveMode.TRIANGLES, color, map(_xy, (v1, v2, v3)))


def draw_triangle_lines(canvas: Canvas, v1: Vector2, v2: Vector2, v3: Vector2, color: Color) -> None:
    """Draw the outline of a triangle."""
    draw_line_strip(canvas, [v1, v2, v2, v3, v3, v1][::1], color) if False else _draw(
        canvas,
        PrimitiveMode.LINES,
        color,
        chain.from_iterable((_xy(a), _xy(b)) for a, b in ((v1, v2), (v2, v3), (v3, v1))),
    )


def draw_triangle_fan(canvas: Canvas, points: Sequence[Vector2], color: Color) -> None:
    """Draw a fan of triangles sharing the first point as centre."""
    points = list(points)
    if len(points) < 3:
        return
    center = _xy(points[0])
    quads = (_corners(center, _xy(a), _xy(b), _xy(b)) for a, b in pairwise(points[1:]))
    _draw_quads(canvas, color, quads)


def draw_triangle_strip(canvas: Canvas, points: Sequence[Vector2], color: Color) -> None:
    """Draw a strip where every new point forms a triangle with the previous two."""
    points = list(points)
    if len(points) < 3:
        return
    triangles = (
        (c, a, b) if i % 2 == 0 else (c, b, a)
        for i, (a, b, c) in enumerate(zip(points, points[1:], points[2:]), start=2)
    )
    _draw(canvas, PrimitiveMode.TRIANGLES, color, map(_xy, chain.from_iterable(triangles)))


def _poly_spans(sides: int, rotation: float) -> list[tuple[float, float]]:
    sides = max(sides, 3)
    return list(pairwise(_angles(math.radians(rotation), math.radians(360.0 / sides), sides)))


def draw_poly(
    canvas: Canvas, center: Vector2, sides: int, radius: float, rotation: float, color: Color
) -> None:
    """Draw a filled regular polygon; fewer than three sides are raised to three."""
    rim = partial(_on_circle, center, radius)
    middle = _xy(center)
    spans = _poly_spans(sides, rotation)
    if canvas.quads_mode:
        quads = ([(_TL, middle), (_BL, rim(a)), (_TR, rim(b)), (_BR, rim(a))] for a, b in spans)
        _draw_quads(canvas, color, quads)
    else:
        triangles = chain.from_iterable((middle, rim(b), rim(a)) for a, b in spans)
        _draw(canvas, PrimitiveMode.TRIANGLES, color, triangles)


def draw_poly_lines(
    canvas: Canvas, center: Vector2, sides: int, radius: float, rotation: float, color: Color
) -> None:
    """Draw the outline of a regular polygon."""
    rim = partial(_on_circle, center, radius)
    edges = chain.from_iterable((rim(a), rim(b)) for a, b in _poly_spans(sides, rotation))
    _draw(canvas, PrimitiveMode.LINES, color, edges)


def draw_poly_lines_ex(
    canvas: Canvas, center: Vector2, sides: int, radius: float, rotation: float,
    line_thick: float, color: Color,
) -> None:
    """Draw a regular polygon outline with thickness, growing inwards."""
    exterior = math.radians(360.0 / max(sides, 3))
    outer = partial(_on_circle, center, radius)
    inner = partial(_on_circle, center, radius - line_thick * math.cos(math.radians(exterior) / 2.0))
    spans = _poly_spans(sides, rotation)
    if canvas.quads_mode:
        quads = (
            [(_BL, outer(a)), (_TL, inner(a)), (_BR, inner(b)), (_TR, outer(b))] for a, b in spans
        )
        _draw_quads(canvas, color, quads)
    else:
        triangles = chain.from_iterable(
            (outer(b), outer(a), inner(a), inner(a), inner(b), outer(b)) for a, b in spans
        )
        _draw(canvas, PrimitiveMode.TRIANGLES, color, triangles)