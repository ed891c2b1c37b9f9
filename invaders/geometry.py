"""Basic 2D geometry: vectors, rectangles and textured sprites."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> Vector2:
        return Vector2(self.x / factor, self.y / factor)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def _span(self) -> tuple[float, float, float, float]:
        x0, x1 = sorted((self.left, self.left + self.width))
        y0, y1 = sorted((self.top, self.top + self.height))
        return x0, y0, x1, y1

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap by a non-zero area."""
        ax0, ay0, ax1, ay1 = self._span()
        bx0, by0, bx1, by1 = other._span()
        return max(ax0, bx0) < min(ax1, bx1) and max(ay0, by0) < min(ay1, by1)

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside (left/top edges inclusive)."""
        x0, y0, x1, y1 = self._span()
        return x0 <= x < x1 and y0 <= y < y1

    def moved(self, dx: float, dy: float) -> Rect:
        """Return a copy shifted by (dx, dy)."""
        return Rect(self.left + dx, self.top + dy, self.width, self.height)


@dataclass
class Sprite:
    """A positioned, scaled view onto a region of a texture."""

    position: Vector2 = field(default_factory=Vector2)
    texture_rect: Rect = field(default_factory=Rect)
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    origin: Vector2 = field(default_factory=Vector2)
    color: tuple[int, int, int, int] = (255, 255, 255, 255)

    def move(self, dx: float, dy: float) -> None:
        self.position = Vector2(self.position.x + dx, self.position.y + dy)

    def bounds(self) -> Rect:
        """Rectangle covered by the sprite in world coordinates."""
        w, h = self.texture_rect.width, self.texture_rect.height
        xs = [self.position.x + (lx - self.origin.x) * self.scale.x for lx in (0.0, w)]
        ys = [self.position.y + (ly - self.origin.y) * self.scale.y for ly in (0.0, h)]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))