# shapekit

shapekit turns 2D shapes into flat lists of vertices and checks whether shapes
collide. Drawing functions record primitives on a `Canvas`. You then pass the
recorded draw calls to whatever renderer you use.

## Installation

```
pip install shapekit
```

## Recording shapes

```python
from shapekit.batch import Canvas
from shapekit.geometry import Color, Rectangle, Vector2
from shapekit.primitives import draw_line_ex, draw_poly
from shapekit.circles import draw_circle, draw_ring
from shapekit.rectangles import draw_rectangle_pro
from shapekit.rounded import draw_rectangle_rounded
from shapekit.curves import draw_line_bezier

canvas = Canvas()
red = Color(230, 41, 55, 255)

draw_circle(canvas, Vector2(100, 100), 40, red)
draw_ring(canvas, Vector2(200, 100), 20, 40, 0, 270, 0, red)
draw_rectangle_pro(canvas, Rectangle(50, 50, 80, 40), Vector2(40, 20), 45, red)
draw_rectangle_rounded(canvas, Rectangle(10, 200, 120, 60), 0.4, 0, red)
draw_poly(canvas, Vector2(300, 300), 6, 50, 0, red)
draw_line_ex(canvas, Vector2(0, 0), Vector2(100, 50), 4, red)
draw_line_bezier(canvas, Vector2(0, 0), Vector2(200, 120), 3, red)

for call in canvas.calls:
    print(call.mode, call.texture_id, len(call.vertices))
```

Every drawing function adds one or more `DrawCall` objects to `canvas.calls`.
Each draw call has a `PrimitiveMode` (`LINES`, `TRIANGLES` or `QUADS`), the
id of the texture bound while it was recorded, and a list of `Vertex` objects.
Each vertex stores its position, colour, texture coordinates (`u`, `v`) and
normal.

The modules are:

- `shapekit.geometry`: the value types `Vector2`, `Rectangle`, `Color` (8-bit
  channels, checked on creation) and `Texture`.
- `shapekit.batch`: `Canvas`, `DrawCall`, `Vertex` and `PrimitiveMode`.
- `shapekit.primitives`: pixels, lines, line strips, triangles, triangle fans
  and strips, and regular polygons.
- `shapekit.circles`: circles, sectors, gradient circles, ellipses and rings,
  filled and outlined.
- `shapekit.rectangles`: plain, rotated, gradient and outlined rectangles.
- `shapekit.rounded`: filled and outlined rectangles with rounded corners.
- `shapekit.curves`: thick eased, quadratic and cubic Bezier, B-spline and
  Catmull-Rom lines. The `line_bezier_strip`, `line_bezier_quad_strip` and
  `line_bezier_cubic_strip` functions return the triangle-strip points without
  drawing anything.

### Quads or triangles

`Canvas(quads_mode=True)` is the default. In this mode, filled pixels,
triangles, polygons, circle sectors, rings and rectangles are recorded as quads
that carry the shapes texture and its texture coordinates. With
`Canvas(quads_mode=False)` the same shapes are recorded as plain triangles with
texture 0.

Some shapes use one mode no matter what `quads_mode` is set to:

- Gradient rectangles and triangle fans always use quads.
- Gradient circles, ellipses and thick curves always use triangles.
- Outlines use lines.

To point shapes at a region of your own texture atlas, call
`Canvas.set_shapes_texture(texture, source)`. A texture with id 0, or a source
rectangle with zero width or height, restores the default white 1x1 pixel.

You can also record vertices by hand. `Canvas.begin` returns the canvas, so it
works as a context manager, and the draw call ends when the block exits:

```python
from shapekit.batch import Canvas, PrimitiveMode
from shapekit.geometry import Color

canvas = Canvas()
with canvas.begin(PrimitiveMode.LINES):
    canvas.color(Color(0, 0, 0))
    canvas.vertex(0, 0)
    canvas.vertex(10, 10)
```

A `RuntimeError` is raised if you call `begin` while a draw call is still open,
call `end` with no open draw call, or call `vertex` outside `begin`/`end`.

## Segment counts

Circles, sectors and rings replace a `segments` value that is too small for the
arc with a count computed from the radius and a fixed error rate. Rounded
rectangles do the same for corners when `segments` is below 4. To get these
counts without drawing, call `shapekit.circles.circle_segments` and
`shapekit.rounded.corner_segments`.

## Collision checks

```python
from shapekit.collision import (
    check_collision_recs,
    check_collision_lines,
    get_collision_rec,
)
from shapekit.geometry import Rectangle, Vector2

a = Rectangle(0, 0, 10, 10)
b = Rectangle(5, 5, 10, 10)
check_collision_recs(a, b)        # True
get_collision_rec(a, b)           # Rectangle(x=5, y=5, width=5, height=5)

check_collision_lines(Vector2(0, 0), Vector2(10, 10),
                      Vector2(0, 10), Vector2(10, 0))   # Vector2(x=5.0, y=5.0)
```

The module also has the following checks:

- `check_collision_point_rec`: the right and bottom edges do not count as
  inside.
- `check_collision_point_circle`
- `check_collision_point_triangle`: strictly inside only.
- `check_collision_point_poly`: tests only the edges between consecutive
  points. To close the polygon, repeat the first point at the end.
- `check_collision_point_line`: takes a margin in pixels.
- `check_collision_circles`
- `check_collision_circle_rec`

`check_collision_lines` returns the intersection point, or `None` if the
segments do not cross.

`get_collision_rec` returns an all-zero rectangle if the two rectangles do not
overlap.

## What shapekit does not do

shapekit records geometry only. It does not:

- open windows
- talk to a graphics API
- rasterise pixels
- load textures or fonts
- draw text

## Running the tests

```
pip install -e .[test]
pytest
```