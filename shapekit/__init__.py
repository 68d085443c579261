"""Tessellate 2D shapes into recorded draw calls and test shape collisions."""

__version__ = "0.1.0"
__all__ = ["batch", "circles", "collision", "curves", "geometry", "primitives", "rectangles", "rounded"]