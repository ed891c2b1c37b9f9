import pytest

from invaders.boss_level import (
    BOSS_POSITION,
    boss_level_items,
    boss_level_platforms,
    reinforcements_due,
)
from invaders.geometry import Vector2
from invaders.main_level import ItemSpec, PlatformSpec


def test_ground_comes_first():
    assert boss_level_platforms()[0] == PlatformSpec(Vector2(0.0, 615.0), texture="PLATFORM1")


def test_air_platforms_are_scaled_and_textured():
    air = boss_level_platforms()[1:]
    assert all(p.kind == "air" for p in air)
    assert {p.texture for p in air} <= {"PLATFORM2", "PLATFORM3", "PLATFORM4", "PLATFORM5", "PLATFORM6"}
    assert air[0].position == Vector2(175.0, 336.0 * 1.5)
    assert air[-1] == PlatformSpec(Vector2(3499.0, 219.0 * 1.5), texture="PLATFORM6", kind="air")


def test_air_platforms_sit_above_ground():
    platforms = boss_level_platforms()
    ground_y = platforms[0].position.y
    assert all(p.position.y < ground_y for p in platforms[1:])


def test_items():
    assert boss_level_items() == [
        ItemSpec("HEALTH", "HEAL", 669.0, 234.0 * 1.5),
        ItemSpec("BONUS", "BONUS", 749.0, 230.0 * 1.5),
    ]


def test_boss_position():
    assert BOSS_POSITION == Vector2(2000.0, 520.0)


@pytest.mark.parametrize(
    "hp, max_hp, spawned, expected",
    [
        (40, 40, False, False),
        (21, 40, False, False),
        (20, 40, False, True),
        (0, 40, False, True),
        (10, 40, True, False),
        (2, 5, False, True),
        (3, 5, False, False),
    ],
)
def test_reinforcements_due(hp, max_hp, spawned, expected):
    assert reinforcements_due(hp, max_hp, spawned) is expected