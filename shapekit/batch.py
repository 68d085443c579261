"""Immediate-mode recording of vertices into draw calls."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from shapekit.geometry import Color, Rectangle, Texture

_DEFAULT_SHAPES_TEXTURE = Texture()
_DEFAULT_SHAPES_SOURCE = Rectangle(0.0, 0.0, 1.0, 1.0)
_WHITE = Color(255, 255, 255, 255)

TexCoord = tuple[float, float]


class PrimitiveMode(enum.Enum):
    """Kind of primitive assembled from the recorded vertices."""

    LINES = "lines"
    TRIANGLES = "triangles"
    QUADS = "quads"


@dataclass(frozen=True)
class Vertex:
    """One recorded vertex together with the state current when it was emitted."""

    x: float
    y: float
    color: Color = _WHITE
    u: float = 0.0
    v: float = 0.0
    normal: tuple[float, float, float] = (0.0, 0.0, 1.0)


@dataclass
class DrawCall:
    """A run of vertices recorded between one begin and its end."""

    mode: PrimitiveMode
    texture_id: int = 0
    vertices: list[Vertex] = field(default_factory=list)


class Canvas:
    """Records drawing commands as a list of draw calls.

    ``quads_mode`` selects whether filled shapes are emitted as textured quads
    (using the shapes texture) or as plain triangles.
    """

    def __init__(self, quads_mode: bool = True) -> None:
        self.quads_mode = quads_mode
        self.calls: list[DrawCall] = []
        self.shapes_texture: Texture = _DEFAULT_SHAPES_TEXTURE
        self.shapes_source: Rectangle = _DEFAULT_SHAPES_SOURCE
        self._texture_id = 0
        self._color = _WHITE
        self._tex_coord: TexCoord = (0.0, 0.0)
        self._normal: tuple[float, float, float] = (0.0, 0.0, 1.0)
        self._pending: DrawCall | None = None

    def set_shapes_texture(self, texture: Texture, source: Rectangle) -> None:
        """Use a texture region for shapes; an invalid one restores the white pixel."""
        if texture.id == 0 or source.width == 0 or source.height == 0:
            self.shapes_texture = _DEFAULT_SHAPES_TEXTURE
            self.shapes_source = _DEFAULT_SHAPES_SOURCE
        else:
            self.shapes_texture = texture
            self.shapes_source = source

    def set_texture(self, texture_id: int) -> None:
        """Select the texture bound to draw calls begun from now on."""
        self._texture_id = texture_id

    def begin(self, mode: PrimitiveMode) -> Canvas:
        """Start recording a draw call; usable as ``with canvas.begin(mode):``."""
        if self._pending is not None:
            raise RuntimeError("begin() called while a draw call is already open")
        self._pending = DrawCall(PrimitiveMode(mode), self._texture_id)
        return self

    def end(self) -> None:
        """Finish the open draw call and store it."""
        if self._pending is None:
            raise RuntimeError("end() called without a matching begin()")
        self.calls.append(self._pending)
        self._pending = None

    def color(self, color: Color) -> None:
        """Set the colour of the following vertices."""
        self._color = color

    def normal(self, x: float, y: float, z: float) -> None:
        """Set the normal of the following vertices."""
        self._normal = (x, y, z)

    def tex_coord(self, u: float, v: float) -> None:
        """Set the texture coordinate of the next vertices."""
        self._tex_coord = (u, v)

    def vertex(self, x: float, y: float) -> None:
        """Emit a vertex carrying the current colour, texture coordinate and normal."""
        if self._pending is None:
            raise RuntimeError("vertex() called outside begin()/end()")
        u, v = self._tex_coord
        self._pending.vertices.append(
            Vertex(float(x), float(y), self._color, u, v, self._normal)
        )

    def shape_tex_coords(self) -> tuple[TexCoord, TexCoord, TexCoord, TexCoord]:
        """Texture coordinates of the shapes region: top-left, bottom-left, bottom-right, top-right."""
        tex = self.shapes_texture
        src = self.shapes_source
        left = src.x / tex.width
        right = (src.x + src.width) / tex.width
        top = src.y / tex.height
        bottom = (src.y + src.height) / tex.height
        return (left, top), (left, bottom), (right, bottom), (right, top)

    def __enter__(self) -> Canvas:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._pending is not None:
            if exc_type is None:
                self.end()
            else:
                self._pending = None
        return False