import math

import pytest

from shapekit.batch import Canvas, PrimitiveMode
from shapekit.circles import (
    circle_segments,
    draw_circle,
    draw_circle_gradient,
    draw_circle_lines,
    draw_circle_sector,
    draw_circle_sector_lines,
    draw_ellipse,
    draw_ellipse_lines,
    draw_ring,
    draw_ring_lines,
)
from shapekit.geometry import Color, Vector2
from shapekit.primitives import draw_line

RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
CENTER = Vector2(50.0, 40.0)


def _drawn(draw, *args, quads=False):
    canvas = Canvas(quads_mode=quads)
    draw(canvas, *args)
    return canvas


def _vertices(canvas):
    return canvas.calls[0].vertices


def _dist(vertex, center=CENTER):
    return math.hypot(vertex.x - center.x, vertex.y - center.y)


def _coords(canvas):
    return [(v.x, v.y) for call in canvas.calls for v in call.vertices]


def _is_center(vertex):
    return (vertex.x, vertex.y) == (CENTER.x, CENTER.y)


def test_explicit_segments_are_kept():
    assert circle_segments(10.0, 0.0, 360.0, 36) == 36


def test_computed_segments_at_least_minimum():
    assert circle_segments(10.0, 0.0, 360.0, 0) >= 4


def test_larger_radius_gives_more_segments():
    assert circle_segments(200.0, 0.0, 360.0, 0) >= circle_segments(5.0, 0.0, 360.0, 0)


def test_tiny_radius_falls_back_to_minimum():
    assert circle_segments(0.1, 0.0, 180.0, 0) == 2


def test_draw_circle_quads_on_circle():
    canvas = _drawn(draw_circle, CENTER, 20.0, RED, quads=True)
    assert len(canvas.calls) == 1
    call = canvas.calls[0]
    assert call.mode is PrimitiveMode.QUADS
    assert call.texture_id == canvas.shapes_texture.id
    assert len(call.vertices) == 4 * (36 // 2)
    for vertex in call.vertices:
        d = _dist(vertex)
        assert d == pytest.approx(0.0, abs=1e-9) or d == pytest.approx(20.0)
        assert vertex.color == RED


def test_texture_is_reset_after_quads():
    canvas = _drawn(draw_circle, CENTER, 20.0, RED, quads=True)
    draw_line(canvas, Vector2(0, 0), Vector2(1, 1), RED)
    assert canvas.calls[-1].texture_id == 0


def test_draw_circle_triangles_fan_from_center():
    canvas = _drawn(draw_circle, CENTER, 15.0, BLUE)
    vertices = _vertices(canvas)
    assert canvas.calls[0].mode is PrimitiveMode.TRIANGLES
    assert len(vertices) == 3 * 36
    assert all(_is_center(v) for v in vertices[0::3])
    assert all(_dist(v) == pytest.approx(15.0) for v in vertices[1::3] + vertices[2::3])


@pytest.mark.parametrize(
    "first, second",
    [
        (
            (draw_circle_sector, CENTER, 10.0, 30.0, 120.0, 6, RED),
            (draw_circle_sector, CENTER, 10.0, 120.0, 30.0, 6, RED),
        ),
        (
            (draw_ring, CENTER, 0.0, 10.0, 0.0, 180.0, 6, RED),
            (draw_circle_sector, CENTER, 10.0, 0.0, 180.0, 6, RED),
        ),
        (
            (draw_ring, CENTER, 5.0, 10.0, 0.0, 180.0, 6, RED),
            (draw_ring, CENTER, 10.0, 5.0, 180.0, 0.0, 6, RED),
        ),
    ],
    ids=["sector-swapped-angles", "ring-without-inner-radius", "ring-swapped-radii"],
)
def test_equivalent_drawings(first, second):
    assert _coords(_drawn(*first)) == _coords(_drawn(*second))


def test_sector_odd_segments_quads_closes_on_center():
    vertices = _vertices(_drawn(draw_circle_sector, CENTER, 10.0, 0.0, 180.0, 3, RED, quads=True))
    assert len(vertices) == 4 * 2
    assert _is_center(vertices[-1])


def test_sector_nonpositive_radius_uses_small_radius():
    canvas = _drawn(draw_circle_sector, CENTER, 0.0, 0.0, 90.0, 4, RED)
    rim = [v for v in _vertices(canvas) if _dist(v) > 0]
    assert rim
    assert all(_dist(v) == pytest.approx(0.1) for v in rim)


def test_sector_lines_caps():
    canvas = _drawn(draw_circle_sector_lines, CENTER, 10.0, 0.0, 90.0, 4, RED)
    call = canvas.calls[0]
    assert call.mode is PrimitiveMode.LINES
    assert len(call.vertices) == 4 + 2 * 4
    assert _is_center(call.vertices[0])
    end = call.vertices[-1]
    assert end.x == pytest.approx(CENTER.x + 10.0 * math.cos(math.radians(90.0)))
    assert end.y == pytest.approx(CENTER.y + 10.0 * math.sin(math.radians(90.0)))


def test_gradient_colors():
    vertices = _vertices(_drawn(draw_circle_gradient, CENTER, 12.0, RED, BLUE))
    assert len(vertices) == 3 * 36
    assert all(v.color == RED for v in vertices[0::3])
    assert all(v.color == BLUE for v in vertices[1::3] + vertices[2::3])
    assert all(v.color == RED for v in vertices if _dist(v) < 1e-9)


def test_circle_lines_on_circle():
    vertices = _vertices(_drawn(draw_circle_lines, CENTER, 8.0, RED))
    assert len(vertices) == 2 * 36
    assert all(_dist(v) == pytest.approx(8.0) for v in vertices)


@pytest.mark.parametrize("draw", [draw_ellipse, draw_ellipse_lines])
def test_ellipse_points_on_ellipse(draw):
    rim = [v for v in _vertices(_drawn(draw, CENTER, 30.0, 10.0, RED)) if _dist(v) >= 1e-9]
    assert rim
    for v in rim:
        value = ((v.x - CENTER.x) / 30.0) ** 2 + ((v.y - CENTER.y) / 10.0) ** 2
        assert value == pytest.approx(1.0)


def test_ring_equal_angles_draws_nothing():
    canvas = _drawn(draw_ring, CENTER, 5.0, 10.0, 45.0, 45.0, 8, RED)
    draw_ring_lines(canvas, CENTER, 5.0, 10.0, 45.0, 45.0, 8, RED)
    assert canvas.calls == []


def test_ring_quads_alternate_radii():
    vertices = _vertices(_drawn(draw_ring, CENTER, 5.0, 10.0, 0.0, 360.0, 8, RED, quads=True))
    assert len(vertices) == 4 * 8
    expected = [10.0, 5.0, 5.0, 10.0] * 8
    assert [_dist(v) for v in vertices] == pytest.approx(expected)


def test_ring_triangles_count():
    assert len(_vertices(_drawn(draw_ring, CENTER, 5.0, 10.0, 0.0, 90.0, 4, RED))) == 6 * 4


def test_ring_lines_count_and_radii():
    vertices = _vertices(_drawn(draw_ring_lines, CENTER, 5.0, 10.0, 0.0, 90.0, 4, RED))
    assert len(vertices) == 4 * 4 + 4
    for v in vertices:
        d = _dist(v)
        assert d == pytest.approx(5.0) or d == pytest.approx(10.0)


def test_ring_lines_without_inner_radius_is_sector_lines():
    canvas = _drawn(draw_ring_lines, CENTER, 0.0, 10.0, 0.0, 90.0, 4, RED)
    assert _is_center(_vertices(canvas)[0])