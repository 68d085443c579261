"""Filled, gradient and outlined rectangles."""

from __future__ import annotations

import math
from collections.abc import Iterable

from shapekit.batch import Canvas, PrimitiveMode
from shapekit.geometry import Color, Rectangle, Vector2
from shapekit.primitives import _shape_quads

_TexPoint = tuple[float, float]


def _emit(canvas: Canvas, corners: Iterable[tuple[_TexPoint, _TexPoint]]) -> None:
    """Send texture-coordinate and position pairs to the canvas in order."""
    for (u, v), (x, y) in corners:
        canvas.tex_coord(u, v)
        canvas.vertex(x, y)


def rectangle_corners(
    rec: Rectangle, origin: Vector2, rotation: float
) -> tuple[Vector2, Vector2, Vector2, Vector2]:
    """Return top-left, top-right, bottom-left and bottom-right corners.

    The rectangle is placed so that ``origin`` (relative to its top-left
    corner) sits at ``(rec.x, rec.y)`` and rotated by ``rotation`` degrees
    around that point.
    """
    if rotation == 0.0:
        x = rec.x - origin.x
        y = rec.y - origin.y
        return (
            Vector2(x, y),
            Vector2(x + rec.width, y),
            Vector2(x, y + rec.height),
            Vector2(x + rec.width, y + rec.height),
        )

    sin_r = math.sin(math.radians(rotation))
    cos_r = math.cos(math.radians(rotation))
    dx = -origin.x
    dy = -origin.y

    def place(px: float, py: float) -> Vector2:
        return Vector2(rec.x + px * cos_r - py * sin_r, rec.y + px * sin_r + py * cos_r)

    return (
        place(dx, dy),
        place(dx + rec.width, dy),
        place(dx, dy + rec.height),
        place(dx + rec.width, dy + rec.height),
    )


def draw_rectangle(
    canvas: Canvas, x: float, y: float, width: float, height: float, color: Color
) -> None:
    """Draw a filled rectangle."""
    draw_rectangle_pro(
        canvas, Rectangle(float(x), float(y), float(width), float(height)), Vector2(), 0.0, color
    )


def draw_rectangle_rec(canvas: Canvas, rec: Rectangle, color: Color) -> None:
    """Draw a filled rectangle."""
    draw_rectangle_pro(canvas, rec, Vector2(), 0.0, color)


def draw_rectangle_pro(
    canvas: Canvas, rec: Rectangle, origin: Vector2, rotation: float, color: Color
) -> None:
    """Draw a filled rectangle rotated by degrees around an origin."""
    top_left, top_right, bottom_left, bottom_right = rectangle_corners(rec, origin, rotation)

    if canvas.quads_mode:
        tl, bl, br, tr = canvas.shape_tex_coords()
        with _shape_quads(canvas):
            canvas.normal(0.0, 0.0, 1.0)
            canvas.color(color)
            _emit(canvas, [
                (tl, (top_left.x, top_left.y)),
                (bl, (bottom_left.x, bottom_left.y)),
                (br, (bottom_right.x, bottom_right.y)),
                (tr, (top_right.x, top_right.y)),
            ])
    else:
        with canvas.begin(PrimitiveMode.TRIANGLES):
            canvas.color(color)
            for corner in (top_left, bottom_left, top_right, top_right, bottom_left, bottom_right):
                canvas.vertex(corner.x, corner.y)


def draw_rectangle_gradient_v(
    canvas: Canvas, x: float, y: float, width: float, height: float, color1: Color, color2: Color
) -> None:
    """Draw a rectangle with a vertical gradient from color1 (top) to color2 (bottom)."""
    rec = Rectangle(float(x), float(y), float(width), float(height))
    draw_rectangle_gradient_ex(canvas, rec, color1, color2, color2, color1)


def draw_rectangle_gradient_h(
    canvas: Canvas, x: float, y: float, width: float, height: float, color1: Color, color2: Color
) -> None:
    """Draw a rectangle with a horizontal gradient from color1 (left) to color2 (right)."""
    rec = Rectangle(float(x), float(y), float(width), float(height))
    draw_rectangle_gradient_ex(canvas, rec, color1, color1, color2, color2)


def draw_rectangle_gradient_ex(
    canvas: Canvas, rec: Rectangle, col1: Color, col2: Color, col3: Color, col4: Color
) -> None:
    """Draw a rectangle with one colour per corner, from top-left counter-clockwise."""
    tl, bl, br, tr = canvas.shape_tex_coords()
    corners = [
        (col1, tl, (rec.x, rec.y)),
        (col2, bl, (rec.x, rec.y + rec.height)),
        (col3, br, (rec.x + rec.width, rec.y + rec.height)),
        (col4, tr, (rec.x + rec.width, rec.y)),
    ]
    with _shape_quads(canvas):
        canvas.normal(0.0, 0.0, 1.0)
        for color, (u, v), (x, y) in corners:
            canvas.color(color)
            canvas.tex_coord(u, v)
            canvas.vertex(x, y)


def draw_rectangle_lines(
    canvas: Canvas, x: int, y: int, width: int, height: int, color: Color
) -> None:
    """Draw a one-pixel rectangle outline."""
    if canvas.quads_mode:
        draw_rectangle(canvas, x, y, width, 1, color)
        draw_rectangle(canvas, x + width - 1, y + 1, 1, height - 2, color)
        draw_rectangle(canvas, x, y + height - 1, width, 1, color)
        draw_rectangle(canvas, x, y + 1, 1, height - 2, color)
        return

    left, top = x + 1, y + 1
    right, bottom = x + width, y + height
    edges = [
        ((left, top), (right, top)),
        ((right, top), (right, bottom)),
        ((right, bottom), (left, bottom)),
        ((left, bottom), (left, top)),
    ]
    with canvas.begin(PrimitiveMode.LINES):
        canvas.color(color)
        for a, b in edges:
            canvas.vertex(*a)
            canvas.vertex(*b)


def draw_rectangle_lines_ex(
    canvas: Canvas, rec: Rectangle, line_thick: float, color: Color
) -> None:
    """Draw a rectangle outline of the given thickness, growing inwards."""
    if line_thick > rec.width or line_thick > rec.height:
        if rec.width > rec.height:
            line_thick = rec.height / 2
        elif rec.width < rec.height:
            line_thick = rec.width / 2

    inner_height = rec.height - line_thick * 2.0
    parts = [
        Rectangle(rec.x, rec.y, rec.width, line_thick),
        Rectangle(rec.x, rec.y - line_thick + rec.height, rec.width, line_thick),
        Rectangle(rec.x, rec.y + line_thick, line_thick, inner_height),
        Rectangle(rec.x - line_thick + rec.width, rec.y + line_thick, line_thick, inner_height),
    ]
    for part in parts:
        draw_rectangle_rec(canvas, part, color)