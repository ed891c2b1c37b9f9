"""Projectiles moving in a straight line."""

from __future__ import annotations

from invaders.collider import Body, Collider
from invaders.geometry import Rect, Sprite, Vector2


class Bullet:
    """A sprite moving by ``movement_speed * direction`` every update."""

    def __init__(
        self,
        size: tuple[float, float],
        x: float,
        y: float,
        dir_x: float,
        dir_y: float,
        movement_speed: float,
    ) -> None:
        width, height = size
        self.sprite = Sprite(position=Vector2(x, y), texture_rect=Rect(0, 0, width, height))
        self.body = Body(Vector2(x, y), Vector2(width, height))
        self.direction = Vector2(dir_x, dir_y)
        self.movement_speed = movement_speed

    @property
    def bounds(self) -> Rect:
        return self.sprite.bounds()

    def intersects(self, other: Rect) -> bool:
        return self.bounds.intersects(other)

    def flip(self) -> None:
        """Mirror the sprite horizontally in place."""
        self.sprite.scale = Vector2(-1.0, 1.0)
        self.sprite.origin = Vector2(self.sprite.bounds().width, 1.0)

    def update(self) -> None:
        step = self.direction * self.movement_speed
        self.sprite.move(step.x, step.y)

    def collider(self) -> Collider:
        return Collider(self.body)