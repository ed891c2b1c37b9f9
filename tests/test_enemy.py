import pytest

from invaders.enemy import Enemy, EnemyType
from invaders.geometry import Rect, Vector2


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return min(self.value, stop - 1)


class FakePlayer:
    def __init__(self, x, y, size=(40.0, 80.0)):
        self.position = Vector2(x, y)
        self.size = size
        self.damage_taken = 0

    def sprite_bounds(self):
        return Rect(self.position.x, self.position.y, *self.size)

    def take_damage(self, dmg):
        self.damage_taken += dmg


def make(kind, x=1000.0, y=500.0, rng_value=50, **kw):
    return Enemy(kind, x, y, texture_size=(60.0, 40.0), bullet_size=(10.0, 5.0),
                 rng=FixedRng(rng_value), **kw)


def test_soldier_stats():
    enemy = make("SOLDIER")
    assert enemy.hp == 2
    assert enemy.max_hp == 2
    assert enemy.points == 5
    assert enemy.shoot_cooldown == 2.0


def test_sniper_cooldown():
    assert make(EnemyType.SNIPER).shoot_cooldown == 2.25


def test_boss_stats_and_points_range():
    for value in (0, 50, 99):
        boss = make("BOSS", rng_value=value)
        assert boss.max_hp == 40
        assert 30 <= boss.points <= 80


def test_unknown_type_rejected():
    with pytest.raises(ValueError):
        make("DRAGON")


def test_roll_drop_threshold():
    assert make("SOLDIER", rng_value=30).is_drop is True
    assert make("SOLDIER", rng_value=31).is_drop is False


def test_take_damage_and_color_recovers():
    enemy = make("SOLDIER")
    enemy.take_damage(1)
    assert enemy.hp == 1
    assert enemy.sprite.color == (255, 0, 0, 127)
    enemy.update(FakePlayer(1000.0, 500.0), 0.2)
    assert enemy.sprite.color == (255, 255, 255, 255)


def test_physics_clamps_velocity():
    enemy = make("SOLDIER")
    enemy.velocity = Vector2(1000.0, -5000.0)
    enemy.update_physics(0.0)
    assert enemy.velocity.x == enemy.max_velocity_x
    assert enemy.velocity.y == -enemy.max_velocity_y


def test_physics_zeroes_small_velocity():
    enemy = make("SOLDIER")
    enemy.velocity = Vector2(2.0, -2.0)
    before = enemy.position
    enemy.update_physics(1.0)
    assert enemy.velocity == Vector2(0.0, 0.0)
    assert enemy.position == before


def test_movement_towards_distant_player():
    enemy = make("SOLDIER", x=1000.0)
    enemy.update_movement(FakePlayer(200.0, 500.0), 0.016)
    assert enemy.velocity.x == -enemy.speed_value
    assert enemy.is_face_left is True


def test_movement_close_player_only_turns():
    enemy = make("SOLDIER", x=1000.0)
    enemy.update_movement(FakePlayer(1200.0, 500.0), 0.016)
    assert enemy.velocity.x == 0.0
    assert enemy.is_face_left is False


def test_soldier_shoots_after_cooldown():
    enemy = make("SOLDIER")
    player = FakePlayer(500.0, 500.0)
    enemy.update_movement(player, 0.0)
    enemy.update_shooting(player, 1.0)
    assert enemy.bullets == []
    enemy.update_shooting(player, 1.0)
    assert len(enemy.bullets) == 1
    assert enemy.bullets[0].direction.x == -1.0
    assert enemy.is_shooting is True


def test_sniper_needs_player_in_range():
    enemy = make("SNIPER", x=1000.0)
    far = FakePlayer(100.0, 500.0)
    enemy.update_shooting(far, 5.0)
    assert enemy.bullets == []
    near = FakePlayer(800.0, 500.0)
    enemy.update_shooting(near, 5.0)
    assert len(enemy.bullets) == 1


def test_boss_fires_three_bullets():
    boss = make("BOSS")
    boss.update_shooting(FakePlayer(0.0, 500.0), 1.0)
    assert len(boss.bullets) == 3
    assert all(b.direction.x == 1.0 for b in boss.bullets)


def test_bullet_hits_player():
    enemy = make("SOLDIER", x=1000.0)
    player = FakePlayer(990.0, 500.0, size=(200.0, 200.0))
    enemy.update_shooting(player, 2.0)
    assert len(enemy.bullets) == 1
    enemy.bullet_collision(player)
    assert player.damage_taken == enemy.damage
    assert enemy.bullets == []


def test_bullet_left_of_screen_removed_without_damage():
    enemy = make("SOLDIER", x=1000.0)
    player = FakePlayer(5000.0, 0.0)
    enemy.update_shooting(player, 2.0)
    enemy.bullets[0].sprite.position = Vector2(-50.0, 0.0)
    enemy.bullet_collision(player)
    assert enemy.bullets == []
    assert player.damage_taken == 0


def test_death_animation_eventually_finishes():
    enemy = make("SOLDIER")
    enemy.take_damage(enemy.hp)
    for _ in range(100):
        enemy.death_animation(0.1)
        if enemy.is_dead:
            break
    assert enemy.is_dead is True


def test_hitbox_follows_facing():
    enemy = make("SOLDIER", x=1000.0, y=500.0)
    enemy.is_face_left = True
    enemy.update_hitbox()
    assert enemy.hitbox.position == Vector2(1050.0, 500.0)
    enemy.is_face_left = False
    enemy.update_hitbox()
    assert enemy.hitbox.position == Vector2(1020.0, 500.0)


def test_animation_flips_sprite_when_facing_right():
    enemy = make("SOLDIER")
    enemy.is_face_left = False
    enemy.update_animation(0.016)
    assert enemy.sprite.scale.x < 0
    enemy.is_face_left = True
    enemy.update_animation(0.016)
    assert enemy.sprite.scale.x > 0
    assert enemy.sprite.origin == Vector2(0.0, 0.0)