"""Rectangles with rounded corners, filled and outlined."""

from __future__ import annotations

import math

from shapekit.batch import Canvas, PrimitiveMode
from shapekit.circles import SMOOTH_CIRCLE_ERROR_RATE, _arc
from shapekit.geometry import Color, Rectangle, Vector2
from shapekit.primitives import _shape_quads
from shapekit.rectangles import _emit, draw_rectangle_lines_ex, draw_rectangle_rec

Point = tuple[float, float]

_CORNER_ANGLES = (180.0, 270.0, 0.0, 90.0)


def corner_segments(radius: float, segments: int, divisor: float) -> int:
    """Return the number of segments per rounded corner.

    Requests of four or more are kept; smaller ones are replaced by a count
    derived from the radius and the smoothness error rate, divided by
    ``divisor``, falling back to four.
    """
    if segments >= 4:
        return segments

    computed = 0
    if radius > 0:
        cos_th = 2 * (1 - SMOOTH_CIRCLE_ERROR_RATE / radius) ** 2 - 1
        if -1.0 <= cos_th < 1.0:
            th = math.acos(cos_th)
            computed = int(math.ceil(2 * math.pi / th) / divisor)
    return computed if computed > 0 else 4


def _corner_radius(rec: Rectangle, roundness: float) -> float:
    roundness = min(roundness, 1.0)
    side = rec.height if rec.width > rec.height else rec.width
    return side * roundness / 2


def draw_rectangle_rounded(
    canvas: Canvas, rec: Rectangle, roundness: float, segments: int, color: Color
) -> None:
    """Draw a filled rectangle whose corners are rounded by ``roundness`` (0..1)."""
    if roundness <= 0.0 or rec.width < 1 or rec.height < 1:
        draw_rectangle_rec(canvas, rec, color)
        return

    radius = _corner_radius(rec, roundness)
    if radius <= 0.0:
        return

    segments = corner_segments(radius, segments, 4.0)
    step = 90.0 / segments

    x, y, w, h = rec.x, rec.y, rec.width, rec.height
    point: list[Point] = [
        (x + radius, y), (x + w - radius, y), (x + w, y + radius),
        (x + w, y + h - radius), (x + w - radius, y + h),
        (x + radius, y + h), (x, y + h - radius), (x, y + radius),
        (x + radius, y + radius), (x + w - radius, y + radius),
        (x + w - radius, y + h - radius), (x + radius, y + h - radius),
    ]
    centers = [Vector2(*point[i]) for i in (8, 9, 10, 11)]

    if canvas.quads_mode:
        tl, bl, br, tr = canvas.shape_tex_coords()
        with _shape_quads(canvas):
            for angle, center in zip(_CORNER_ANGLES, centers):
                middle = (center.x, center.y)
                for _ in range(segments // 2):
                    canvas.color(color)
                    _emit(canvas, [
                        (tl, middle),
                        (tr, _arc(center, radius, angle + step * 2)),
                        (br, _arc(center, radius, angle + step)),
                        (bl, _arc(center, radius, angle)),
                    ])
                    angle += step * 2
                if segments % 2:
                    canvas.color(color)
                    _emit(canvas, [
                        (tl, middle),
                        (br, _arc(center, radius, angle + step)),
                        (bl, _arc(center, radius, angle)),
                        (tr, middle),
                    ])

            for quad in ((0, 8, 9, 1), (2, 9, 10, 3), (11, 5, 4, 10), (7, 6, 11, 8), (8, 11, 10, 9)):
                canvas.color(color)
                _emit(canvas, zip((tl, bl, br, tr), (point[i] for i in quad)))
    else:
        with canvas.begin(PrimitiveMode.TRIANGLES):
            for angle, center in zip(_CORNER_ANGLES, centers):
                for _ in range(segments):
                    canvas.color(color)
                    canvas.vertex(center.x, center.y)
                    canvas.vertex(*_arc(center, radius, angle + step))
                    canvas.vertex(*_arc(center, radius, angle))
                    angle += step

            for triangles in (
                (0, 8, 9, 1, 0, 9),
                (9, 10, 3, 2, 9, 3),
                (11, 5, 4, 10, 11, 4),
                (7, 6, 11, 8, 7, 11),
                (8, 11, 10, 9, 8, 10),
            ):
                canvas.color(color)
                for i in triangles:
                    canvas.vertex(*point[i])


def draw_rectangle_rounded_lines(
    canvas: Canvas,
    rec: Rectangle,
    roundness: float,
    segments: int,
    line_thick: float,
    color: Color,
) -> None:
    """Draw the outline of a rounded rectangle, growing outwards by ``line_thick``."""
    line_thick = max(line_thick, 0)

    if roundness <= 0.0:
        expanded = Rectangle(
            rec.x - line_thick,
            rec.y - line_thick,
            rec.width + 2 * line_thick,
            rec.height + 2 * line_thick,
        )
        draw_rectangle_lines_ex(canvas, expanded, line_thick, color)
        return

    radius = _corner_radius(rec, roundness)
    if radius <= 0.0:
        return

    segments = corner_segments(radius, segments, 2.0)
    step = 90.0 / segments
    inner = radius
    outer = radius + line_thick
    t = line_thick

    x, y, w, h = rec.x, rec.y, rec.width, rec.height
    point: list[Point] = [
        (x + inner, y - t), (x + w - inner, y - t), (x + w + t, y + inner),
        (x + w + t, y + h - inner), (x + w - inner, y + h + t),
        (x + inner, y + h + t), (x - t, y + h - inner), (x - t, y + inner),
        (x + inner, y), (x + w - inner, y),
        (x + w, y + inner), (x + w, y + h - inner),
        (x + w - inner, y + h), (x + inner, y + h),
        (x, y + h - inner), (x, y + inner),
    ]
    centers = [
        Vector2(x + inner, y + inner),
        Vector2(x + w - inner, y + inner),
        Vector2(x + w - inner, y + h - inner),
        Vector2(x + inner, y + h - inner),
    ]

    if line_thick > 1:
        if canvas.quads_mode:
            tl, bl, br, tr = canvas.shape_tex_coords()
            with _shape_quads(canvas):
                for angle, center in zip(_CORNER_ANGLES, centers):
                    for _ in range(segments):
                        canvas.color(color)
                        _emit(canvas, [
                            (tl, _arc(center, inner, angle)),
                            (tr, _arc(center, inner, angle + step)),
                            (br, _arc(center, outer, angle + step)),
                            (bl, _arc(center, outer, angle)),
                        ])
                        angle += step

                for quad in ((0, 8, 9, 1), (2, 10, 11, 3), (13, 5, 4, 12), (15, 7, 6, 14)):
                    canvas.color(color)
                    _emit(canvas, zip((tl, bl, br, tr), (point[i] for i in quad)))
        else:
            with canvas.begin(PrimitiveMode.TRIANGLES):
                for angle, center in zip(_CORNER_ANGLES, centers):
                    for _ in range(segments):
                        canvas.color(color)
                        inner_next = _arc(center, inner, angle + step)
                        outer_current = _arc(center, outer, angle)
                        for p in (
                            _arc(center, inner, angle),
                            inner_next,
                            outer_current,
                            inner_next,
                            _arc(center, outer, angle + step),
                            outer_current,
                        ):
                            canvas.vertex(*p)
                        angle += step

                for triangles in (
                    (0, 8, 9, 1, 0, 9),
                    (10, 11, 3, 2, 10, 3),
                    (13, 5, 4, 12, 13, 4),
                    (7, 6, 14, 15, 7, 14),
                ):
                    canvas.color(color)
                    for i in triangles:
                        canvas.vertex(*point[i])
    else:
        with canvas.begin(PrimitiveMode.LINES):
            for angle, center in zip(_CORNER_ANGLES, centers):
                for _ in range(segments):
                    canvas.color(color)
                    canvas.vertex(*_arc(center, outer, angle))
                    canvas.vertex(*_arc(center, outer, angle + step))
                    angle += step

            for i in range(0, 8, 2):
                canvas.color(color)
                canvas.vertex(*point[i])
                canvas.vertex(*point[i + 1])