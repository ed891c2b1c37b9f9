"""Layout of the boss arena and the rule for calling in reinforcements."""

from __future__ import annotations

from invaders.geometry import Vector2
from invaders.main_level import ItemSpec, PlatformSpec

BOSS_POSITION = Vector2(2000.0, 520.0)
PLAYER_START = Vector2(0.0, 300.0)
PLAYER_JUMP_FORCE = 400.0
REINFORCEMENTS_PER_SIDE = 3

_Y_SCALE = 1.5

_AIR_PLATFORMS: tuple[tuple[str, float, float], ...] = (
    ("PLATFORM2", 175.0, 336.0),
    ("PLATFORM2", 620.0, 258.0),
    ("PLATFORM3", 1898.0, 318.0),
    ("PLATFORM4", 1767.0, 220.0),
    ("PLATFORM2", 2474.0, 317.0),
    ("PLATFORM5", 2342.0, 219.0),
    ("PLATFORM3", 2915.0, 236.0),
    ("PLATFORM3", 3170.0, 316.0),
    ("PLATFORM6", 3499.0, 219.0),
)


def boss_level_platforms() -> list[PlatformSpec]:
    """The ground followed by the air platforms, scaled to the background."""
    ground = PlatformSpec(Vector2(0.0, 615.0), texture="PLATFORM1")
    air = [
        PlatformSpec(Vector2(x, y * _Y_SCALE), texture=texture, kind="air")
        for texture, x, y in _AIR_PLATFORMS
    ]
    return [ground, *air]


def boss_level_items() -> list[ItemSpec]:
    """A health pack and a fire-rate bonus on the left-hand platforms."""
    return [
        ItemSpec("HEALTH", "HEAL", 669.0, 234.0 * _Y_SCALE),
        ItemSpec("BONUS", "BONUS", 749.0, 230.0 * _Y_SCALE),
    ]


def reinforcements_due(boss_hp: int, boss_max_hp: int, already_spawned: bool) -> bool:
    """Soldiers arrive once, when the boss is down to half health or less."""
    return not already_spawned and boss_hp <= boss_max_hp // 2