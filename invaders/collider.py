"""Rectangle bodies and push-out collision resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from invaders.geometry import Rect, Sprite, Vector2


@dataclass
class Body:
    """An axis-aligned physical rectangle."""

    position: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)

    def move(self, dx: float, dy: float) -> None:
        self.position = Vector2(self.position.x + dx, self.position.y + dy)

    def bounds(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)


@dataclass
class _Overlap:
    delta_x: float
    delta_y: float
    intersect_x: float
    intersect_y: float

    @property
    def colliding(self) -> bool:
        return self.intersect_x < 0.0 and self.intersect_y < 0.0

    @property
    def horizontal(self) -> bool:
        return self.intersect_x > self.intersect_y


class Collider:
    """Resolves collisions between its body and another collider."""

    def __init__(self, body: Body) -> None:
        self.body = body

    @property
    def position(self) -> Vector2:
        return self.body.position

    @property
    def half_size(self) -> Vector2:
        return self.body.size / 2.0

    def bounds(self) -> Rect:
        return self.body.bounds()

    def move(self, dx: float, dy: float) -> None:
        self.body.move(dx, dy)

    def _overlap(self, other: Collider) -> _Overlap:
        ob, tb = other.bounds(), self.bounds()
        delta_x = (ob.left + ob.width / 2.0) - (tb.left + tb.width / 2.0)
        delta_y = (ob.top + ob.height / 2.0) - (tb.top + tb.height / 2.0)
        oh, th = other.half_size, self.half_size
        return _Overlap(
            delta_x,
            delta_y,
            abs(delta_x) - (oh.x + th.x),
            abs(delta_y) - (oh.y + th.y),
        )

    @staticmethod
    def _clamp(push: float) -> float:
        return min(max(push, 0.0), 1.0)

    def check_collision(self, other: Collider, sprite_other: Sprite, push: float) -> Vector2 | None:
        """Push the two apart; return the contact direction or None."""
        ov = self._overlap(other)
        if not ov.colliding:
            return None
        push = self._clamp(push)
        ix, iy = ov.intersect_x, ov.intersect_y
        if ov.horizontal:
            if ov.delta_x > 0.0:
                self.move(ix * (1.0 - push), 0.0)
                other.move(-ix * push, 0.0)
                sprite_other.move(-ix * push, 0.0)
                return Vector2(1.0, 0.0)
            self.move(-ix * (1.0 - push), 0.0)
            other.move(0.0, iy * push * 0.2)
            sprite_other.move(ix * push, 0.0)
            return Vector2(-1.0, 0.0)
        if ov.delta_y > 0.0:
            self.move(0.0, iy * (1.0 - push))
            other.move(iy * push, 0.0)
            sprite_other.move(0.0, -iy * push)
            return Vector2(0.0, 1.0)
        self.move(0.0, -iy * (1.0 - push))
        other.move(0.0, iy * push)
        sprite_other.move(0.0, iy * push)
        return Vector2(0.0, -1.0)

    def check_air_collision(
        self, other: Collider, sprite_other: Sprite, push: float, ignore: bool
    ) -> tuple[Vector2 | None, bool]:
        """Collision for platforms that can be passed from below.

        Returns the contact direction (or None) and the new ignore flag.
        """
        if ignore:
            return None, ignore
        ov = self._overlap(other)
        if not ov.colliding:
            return None, ignore
        push = self._clamp(push)
        ix, iy = ov.intersect_x, ov.intersect_y
        if ov.horizontal:
            if ov.delta_x > 0.0:
                self.move(ix * (1.0 - push), 0.0)
                other.move(-ix * push, 0.0)
                sprite_other.move(-ix * push, 0.0)
                return Vector2(1.0, 0.0), ignore
            self.move(-ix * (1.0 - push), 0.0)
            other.move(0.0, iy * push * 0.2)
            sprite_other.move(ix * push, 0.0)
            return Vector2(-1.0, 0.0), ignore
        if ov.delta_y > 0.0:
            self.move(0.0, iy * (1.0 - push))
            other.move(iy * push, 0.0)
            return Vector2(0.0, 1.0), True
        self.move(0.0, -iy * (1.0 - push))
        other.move(0.0, iy * push)
        sprite_other.move(0.0, iy * push)
        return Vector2(0.0, -1.0), ignore

    def check_stair_collision(
        self, other: Collider, sprite_other: Sprite, push: float, stair_type: str
    ) -> Vector2 | None:
        """Collision for stair steps: side contact lifts the other body."""
        ov = self._overlap(other)
        if not ov.colliding:
            return None
        push = self._clamp(push)
        ix, iy = ov.intersect_x, ov.intersect_y
        if ov.horizontal:
            if ov.delta_x > 0.0:
                self.move(ix * (1.0 - push), 0.0)
                if stair_type == "stairR":
                    step = (0.0, ix * push)
                else:
                    step = (-ix * push, 0.0)
                sprite_other.move(*step)
                other.move(*step)
                return Vector2(1.0, 0.0)
            self.move(-ix * (1.0 - push), 0.0)
            if stair_type == "stairL":
                step = (0.0, ix * push)
            else:
                step = (ix * push, 0.0)
            sprite_other.move(*step)
            other.move(*step)
            return Vector2(-1.0, 0.0)
        if ov.delta_y > 0.0:
            self.move(0.0, iy * (1.0 - push))
            other.move(0.0, -iy * push)
            sprite_other.move(0.0, -iy * push)
            return Vector2(0.0, 1.0)
        self.move(0.0, -iy * (1.0 - push))
        other.move(0.0, iy * push)
        sprite_other.move(0.0, iy * push)
        return Vector2(0.0, -1.0)