"""Layout of the main side-scrolling level: platforms, pickups, exit door, waves."""

from __future__ import annotations

from dataclasses import dataclass

from invaders.geometry import Rect, Vector2

MAP_RIGHT = 12909.0
CAMERA_LIMIT = 12270.0
SPAWN_Y_RANGE = (500, 540)


@dataclass(frozen=True)
class PlatformSpec:
    """Where a platform sits and how the player collides with it.

    ``texture`` names a platform image whose size gives the body; untextured
    platforms carry an explicit ``size``. ``kind`` is ``"solid"``, ``"air"``,
    ``"stairL"`` or ``"stairR"``.
    """

    position: Vector2
    texture: str | None = None
    size: Vector2 | None = None
    kind: str = "solid"

    @property
    def is_stair(self) -> bool:
        return self.kind in ("stairL", "stairR")


@dataclass(frozen=True)
class ItemSpec:
    """A pickup placed in the level."""

    texture: str
    item_type: str
    x: float
    y: float


_STAIR_SIZE = Vector2(225.0, 79.0)

_STAIR_STEPS: tuple[tuple[float, float], ...] = (
    (3816.0, 567.0),
    (3837.0, 546.0),
    (3858.0, 525.0),
    (3879.0, 504.0),
    (3900.0, 483.0),
    (3921.0, 462.0),
    (3942.0, 453.0),
    (3963.0, 431.0),
    (3984.0, 410.0),
    (4005.0, 389.0),
)

_STAIR_TOP = PlatformSpec(Vector2(3972.0, 388.5), size=Vector2(465.0, 251.0), kind="stairL")

# Enemies spawned when the camera reaches each checkpoint.
_WAVE_SIZES: dict[int, int] = {
    1: 5,
    2: 6,
    3: 5,
    4: 2,
    5: 5,
    6: 5,
    7: 5,
    8: 4,
    9: 4,
    10: 3,
    11: 3,
}


def main_level_platforms() -> list[PlatformSpec]:
    """The ground followed by the staircase, in collision order."""
    ground = PlatformSpec(Vector2(-5.0, 610.0), texture="PLATFORM1")
    stairs = [PlatformSpec(Vector2(x, y), size=_STAIR_SIZE, kind="stairL") for x, y in _STAIR_STEPS]
    return [ground, *stairs, _STAIR_TOP]


def main_level_items() -> list[ItemSpec]:
    """Pickups present when the level starts."""
    return [
        ItemSpec("BONUS", "BONUS", 1146.0, 553.0),
        ItemSpec("BONUS", "BONUS", 4554.0, 553.0),
    ]


def main_level_door() -> Rect:
    """The door leading to the next stage."""
    return Rect(12655.0, 413.0, 25.0, 182.0)


def checkpoint_spawn_count(checkpoint: int) -> int:
    """How many soldiers appear at a checkpoint; zero past the last one."""
    return _WAVE_SIZES.get(checkpoint, 0)