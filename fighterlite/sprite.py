"""Plain geometry and sprite state used by every game object."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)


def _span(start: float, size: float) -> tuple[float, float]:
    end = start + size
    return min(start, end), max(start, end)


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle; negative sizes are allowed."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def intersects(self, other: FloatRect) -> bool:
        """True when the two rectangles overlap with a non-empty area."""
        min_x1, max_x1 = _span(self.left, self.width)
        min_y1, max_y1 = _span(self.top, self.height)
        min_x2, max_x2 = _span(other.left, other.width)
        min_y2, max_y2 = _span(other.top, other.height)
        left = max(min_x1, min_x2)
        right = min(max_x1, max_x2)
        top = max(min_y1, min_y2)
        bottom = min(max_y1, max_y2)
        return left < right and top < bottom

    def contains(self, point) -> bool:
        """True when the point lies inside; the far edges are excluded."""
        x, y = point
        min_x, max_x = _span(self.left, self.width)
        min_y, max_y = _span(self.top, self.height)
        return min_x <= x < max_x and min_y <= y < max_y


@dataclass(frozen=True)
class Texture:
    """A named image of a known pixel size."""

    name: str
    width: int = 0
    height: int = 0

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height


@dataclass
class Sprite:
    """A textured rectangle with position, origin and scale."""

    texture: Texture | None = None
    texture_rect: FloatRect = field(default_factory=FloatRect)
    position: Vec2 = field(default_factory=Vec2)
    origin: Vec2 = field(default_factory=Vec2)
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))

    def set_texture(self, texture: Texture) -> None:
        """Attach a texture; the first one also sets the full-image rect."""
        if self.texture is None and self.texture_rect == FloatRect():
            self.texture_rect = FloatRect(0, 0, texture.width, texture.height)
        self.texture = texture

    def move(self, delta: Vec2) -> None:
        self.position = self.position + delta

    def global_bounds(self) -> FloatRect:
        """Bounding box of the sprite in world coordinates."""
        width = abs(self.texture_rect.width)
        height = abs(self.texture_rect.height)
        xs = [(cx - self.origin.x) * self.scale.x + self.position.x for cx in (0.0, width)]
        ys = [(cy - self.origin.y) * self.scale.y + self.position.y for cy in (0.0, height)]
        return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))