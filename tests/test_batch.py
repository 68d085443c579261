import pytest

from shapekit.batch import Canvas, DrawCall, PrimitiveMode, Vertex
from shapekit.geometry import Color, Rectangle, Texture

RED = Color(255, 0, 0)


@pytest.fixture
def canvas():
    return Canvas()


def _record(canvas, mode, *points):
    with canvas.begin(mode):
        for x, y in points:
            canvas.vertex(x, y)


def test_begin_end_records_call_with_mode_and_texture(canvas):
    canvas.set_texture(9)
    canvas.begin(PrimitiveMode.LINES)
    canvas.vertex(1, 2)
    canvas.vertex(3, 4)
    canvas.end()
    assert len(canvas.calls) == 1
    call = canvas.calls[0]
    assert call.mode is PrimitiveMode.LINES
    assert call.texture_id == 9
    assert [(v.x, v.y) for v in call.vertices] == [(1.0, 2.0), (3.0, 4.0)]


def test_vertex_carries_current_state(canvas):
    with canvas.begin(PrimitiveMode.TRIANGLES):
        canvas.color(RED)
        canvas.tex_coord(0.25, 0.75)
        canvas.normal(0.0, 1.0, 0.0)
        canvas.vertex(5, 6)
    assert canvas.calls[0].vertices[0] == Vertex(5.0, 6.0, RED, 0.25, 0.75, (0.0, 1.0, 0.0))


def test_state_persists_between_calls(canvas):
    canvas.color(RED)
    _record(canvas, PrimitiveMode.LINES, (0, 0))
    _record(canvas, PrimitiveMode.LINES, (1, 1))
    assert len(canvas.calls) == 2
    assert all(call.vertices[0].color == RED for call in canvas.calls)


def test_vertex_outside_begin_raises(canvas):
    with pytest.raises(RuntimeError):
        canvas.vertex(0, 0)


def test_nested_begin_raises(canvas):
    canvas.begin(PrimitiveMode.QUADS)
    with pytest.raises(RuntimeError):
        canvas.begin(PrimitiveMode.LINES)


def test_end_without_begin_raises(canvas):
    with pytest.raises(RuntimeError):
        canvas.end()


def test_exception_inside_context_discards_pending_call(canvas):
    with pytest.raises(KeyError):
        with canvas.begin(PrimitiveMode.LINES):
            canvas.vertex(0, 0)
            raise KeyError("boom")
    assert canvas.calls == []
    _record(canvas, PrimitiveMode.LINES)
    assert canvas.calls == [DrawCall(PrimitiveMode.LINES, 0, [])]


def test_texture_recorded_at_begin(canvas):
    canvas.set_texture(3)
    canvas.begin(PrimitiveMode.QUADS)
    canvas.set_texture(0)
    canvas.end()
    assert canvas.calls[0].texture_id == 3


def test_default_shape_tex_coords_cover_white_pixel(canvas):
    assert canvas.shape_tex_coords() == ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0))


def test_custom_shapes_texture_coords(canvas):
    texture = Texture(id=5, width=100, height=50)
    canvas.set_shapes_texture(texture, Rectangle(10, 20, 30, 10))
    assert canvas.shapes_texture == texture
    expected = [(10 / 100, 20 / 50), (10 / 100, 30 / 50), (40 / 100, 30 / 50), (40 / 100, 20 / 50)]
    for got, want in zip(canvas.shape_tex_coords(), expected):
        assert got == pytest.approx(want)


@pytest.mark.parametrize(
    "texture, source",
    [
        (Texture(id=0, width=64, height=64), Rectangle(0, 0, 8, 8)),
        (Texture(id=4, width=64, height=64), Rectangle(0, 0, 0, 8)),
        (Texture(id=4, width=64, height=64), Rectangle(0, 0, 8, 0)),
    ],
)
def test_invalid_shapes_texture_resets_default(canvas, texture, source):
    canvas.set_shapes_texture(Texture(id=7, width=32, height=32), Rectangle(1, 1, 2, 2))
    canvas.set_shapes_texture(texture, source)
    assert canvas.shapes_texture == Texture()
    assert canvas.shapes_source == Rectangle(0.0, 0.0, 1.0, 1.0)