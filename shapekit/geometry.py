"""Basic value types shared by the drawing and collision code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """A point or direction in 2D space."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be in 0..255, got {value}")


@dataclass(frozen=True)
class Texture:
    """A texture handle; the defaults describe the built-in white pixel."""

    id: int = 1
    width: int = 1
    height: int = 1
    mipmaps: int = 1
    format: int = 7