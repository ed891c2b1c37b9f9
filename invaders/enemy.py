"""Enemy soldiers, snipers and the boss: movement, shooting and damage."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from invaders.animation import AnimationComponent
from invaders.bullet import Bullet
from invaders.collider import Body, Collider
from invaders.geometry import Rect, Sprite, Vector2

Color = tuple[int, int, int, int]

_WHITE: Color = (255, 255, 255, 255)
_HURT: Color = (255, 0, 0, 127)
_SPRITE_SCALE = 2.5
_HURT_FLASH = 0.15
_DROP_CHANCE = 30
_CULL_RIGHT = 1200.0


class Target(Protocol):
    """What an enemy needs to know about the player it fights."""

    position: Vector2

    def sprite_bounds(self) -> Rect: ...

    def take_damage(self, dmg: int) -> None: ...


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class EnemyType(str, Enum):
    SOLDIER = "SOLDIER"
    SNIPER = "SNIPER"
    BOSS = "BOSS"


@dataclass(frozen=True)
class _Profile:
    hitbox: tuple[float, float, float, float]
    hp_max: int
    max_velocity_x: float
    bullet_speed: float
    shoot_cooldown: float
    animations: dict[str, tuple[float, int, int, int, int, int, int]]


_PROFILES: dict[EnemyType, _Profile] = {
    EnemyType.SOLDIER: _Profile(
        hitbox=(50, 0, 50, 100),
        hp_max=2,
        max_velocity_x=150.0,
        bullet_speed=6.0,
        shoot_cooldown=2.0,
        animations={
            "IDLE": (30.0, 0, 0, 1, 0, 45, 40),
            "DEATH": (5.0, 0, 1, 10, 1, 30, 40),
            "SHOOTING": (7.0, 0, 2, 4, 2, 61, 40),
        },
    ),
    EnemyType.SNIPER: _Profile(
        hitbox=(50, 0, 50, 100),
        hp_max=2,
        max_velocity_x=150.0,
        bullet_speed=6.0,
        shoot_cooldown=2.25,
        animations={
            "IDLE": (30.0, 0, 0, 3, 0, 42, 40),
            "SHOOTING": (10.0, 0, 1, 4, 1, 50, 40),
            "DEATH": (15.0, 0, 2, 5, 2, 50, 50),
        },
    ),
    EnemyType.BOSS: _Profile(
        hitbox=(20, 20, 80, 100),
        hp_max=40,
        max_velocity_x=250.0,
        bullet_speed=10.0,
        shoot_cooldown=0.5,
        animations={
            "IDLE": (30.0, 0, 1, 2, 1, 128, 50),
            "RUN": (5.0, 0, 1, 9, 1, 85, 50),
            "SHOOTING": (3.0, 0, 3, 7, 3, 128, 50),
            "DEATH": (10.0, 0, 4, 5, 4, 85, 50),
        },
    ),
}


class Enemy:
    """A hostile character that walks toward the player and fires bullets."""

    def __init__(
        self,
        enemy_type: EnemyType | str,
        x: float,
        y: float,
        *,
        texture_size: tuple[float, float] = (0.0, 0.0),
        bullet_size: tuple[float, float] = (1.0, 1.0),
        rng: RandomSource | None = None,
    ) -> None:
        self.type = EnemyType(enemy_type)
        self.rng: RandomSource = rng if rng is not None else random.Random()
        tex_w, tex_h = texture_size
        self.sprite = Sprite(position=Vector2(x, y), texture_rect=Rect(0, 0, tex_w, tex_h))
        self.body = Body(Vector2(x, y), Vector2(tex_w, tex_h))
        self.initial_position = Vector2(x, y)
        self.bullet_size = bullet_size

        self.damage = 1
        self.points = 5
        self.is_dead = False
        self.is_drop = False
        self.is_shooting = False
        self.is_face_left = False
        self.on_ground = False

        self.velocity = Vector2()
        self.max_velocity_y = 1000.0
        self.speed_value = 50.0
        self.gravity = 2000.0
        self.drag = 0.95

        self.bullets: list[Bullet] = []
        self.shoot_elapsed = 0.0
        self.damage_elapsed = 0.0

        self.sprite.scale = Vector2(_SPRITE_SCALE, _SPRITE_SCALE)
        self.animation = AnimationComponent(self.sprite)
        self.roll_drop()

        profile = _PROFILES[self.type]
        off_x, off_y, hb_w, hb_h = profile.hitbox
        self.hitbox = Sprite(position=Vector2(x + off_x, y + off_y), texture_rect=Rect(0, 0, hb_w, hb_h))
        self.max_hp = profile.hp_max
        self.hp = profile.hp_max
        self.max_velocity_x = profile.max_velocity_x
        self.bullet_speed = profile.bullet_speed
        self.shoot_cooldown = profile.shoot_cooldown
        if self.type is EnemyType.BOSS:
            self.points = self.rng.randrange(51) + 30
        for key, args in profile.animations.items():
            self.animation.add_animation(key, *args)

    @property
    def position(self) -> Vector2:
        return self.sprite.position

    def bounds(self) -> Rect:
        """The hitbox in world coordinates."""
        return self.hitbox.bounds()

    def collider(self) -> Collider:
        return Collider(self.body)

    def set_position(self, x: float, y: float) -> None:
        self.sprite.position = Vector2(x, y)

    def reset_velocity_y(self) -> None:
        self.velocity = Vector2(self.velocity.x, 0.0)

    def set_on_ground(self) -> None:
        self.on_ground = True

    def take_damage(self, dmg: int) -> None:
        self.sprite.color = _HURT
        self.hp -= dmg
        self.damage_elapsed = 0.0

    def roll_drop(self) -> bool:
        """Decide whether this enemy drops a health pack when killed."""
        self.is_drop = self.rng.randrange(100) <= _DROP_CHANCE
        return self.is_drop

    def update_movement(self, player: Target, dt: float) -> None:
        reach = {EnemyType.SOLDIER: 700.0, EnemyType.BOSS: 650.0}.get(self.type)
        px = player.position.x
        sx = self.sprite.position.x
        if reach is not None and not self.is_dead:
            if sx - px >= reach:
                self.velocity = Vector2(self.velocity.x - self.speed_value, self.velocity.y)
            if px - sx >= reach:
                self.velocity = Vector2(self.velocity.x + self.speed_value, self.velocity.y)
        if not self.is_dead:
            if sx - px > 0:
                self.is_face_left = True
            elif sx - px < 0:
                self.is_face_left = False

    def update_physics(self, dt: float) -> None:
        vx, vy = self.velocity.x * self.drag, self.velocity.y * self.drag
        vy = max(-self.max_velocity_y, min(self.max_velocity_y, vy))
        vx = max(-self.max_velocity_x, min(self.max_velocity_x, vx))
        if abs(vx) < 3.0:
            vx = 0.0
        if abs(vy) < 3.0:
            vy = 0.0
        self.velocity = Vector2(vx, vy)
        self.sprite.move(vx * dt, vy * dt)

    def _fire(self, offsets: tuple[float, ...]) -> None:
        pos = self.sprite.position
        bounds = self.sprite.bounds()
        y = pos.y + bounds.height / 2.0 - 5.0
        if self.is_face_left:
            base, direction = pos.x, -1.0
        else:
            base, direction = pos.x + bounds.width, 1.0
        for offset in offsets:
            self.bullets.append(
                Bullet(self.bullet_size, base + offset, y, direction, 0.0, self.bullet_speed)
            )
        self.is_shooting = True
        self.shoot_elapsed = 0.0

    def update_shooting(self, player: Target, dt: float) -> None:
        self.shoot_elapsed += dt
        if self.shoot_elapsed < self.shoot_cooldown:
            return
        if self.type is EnemyType.BOSS:
            if abs(self.velocity.x) < 20.0 and not self.is_dead:
                self._fire((100.0, 50.0, 0.0))
        elif self.type is EnemyType.SOLDIER:
            if self.velocity.x == 0.0 and self.hp > 0:
                self._fire((0.0,))
        elif self.velocity.x == 0.0 and self.hp > 0:
            dy = abs(self.sprite.position.y - player.position.y)
            dx = abs(self.sprite.position.x - player.position.x)
            if dy <= 300.0 and dx <= 570.0:
                self._fire((0.0,))

    def update_hitbox(self) -> None:
        pos = self.sprite.position
        if self.type is EnemyType.BOSS:
            dx = 230.0 if self.is_face_left else 20.0
            self.hitbox.position = Vector2(pos.x + dx, pos.y + 20.0)
        else:
            dx = 50.0 if self.is_face_left else 20.0
            self.hitbox.position = Vector2(pos.x + dx, pos.y)

    def _play_shooting(self, dt: float) -> None:
        if self.is_shooting and self.animation.play("SHOOTING", dt, True):
            self.is_shooting = False

    def update_animation(self, dt: float) -> None:
        if self.type is EnemyType.BOSS:
            self._play_shooting(dt)
            sign = 1.0 if self.is_face_left else -1.0
            self.hitbox.scale = Vector2(sign * _SPRITE_SCALE, _SPRITE_SCALE)
            if self.is_face_left:
                self.sprite.origin = Vector2()
            else:
                self.sprite.origin = Vector2(self.sprite.bounds().width / _SPRITE_SCALE, 0.0)
            self.animation.play("IDLE", dt)
            if self.is_dead:
                self.animation.add_animation("IDLE", 30.0, 0, 5, 0, 5, 85, 50)
            return
        if self.is_face_left:
            self.sprite.scale = Vector2(_SPRITE_SCALE, _SPRITE_SCALE)
            self.sprite.origin = Vector2()
        else:
            self.sprite.scale = Vector2(-_SPRITE_SCALE, _SPRITE_SCALE)
            self.sprite.origin = Vector2(self.sprite.bounds().width / _SPRITE_SCALE, 0.0)
        self.animation.play("IDLE", dt)
        self._play_shooting(dt)

    def death_animation(self, dt: float) -> None:
        if self.hp <= 0 and not self.is_dead:
            if self.animation.play("DEATH", dt, True):
                self.is_dead = True

    def _update_color(self, dt: float) -> None:
        self.damage_elapsed += dt
        if self.damage_elapsed >= _HURT_FLASH:
            self.sprite.color = _WHITE

    def _update_bullets(self) -> None:
        for bullet in self.bullets:
            bullet.update()

    def bullet_collision(self, player: Target) -> None:
        """Drop bullets that left the field; those hitting the player hurt it."""
        limit = self.sprite.position.x + _CULL_RIGHT
        player_bounds = player.sprite_bounds()
        kept: list[Bullet] = []
        for bullet in self.bullets:
            bounds = bullet.bounds
            if bounds.left < 0.0 or bounds.left + bounds.width > limit:
                continue
            if bullet.intersects(player_bounds):
                player.take_damage(self.damage)
                continue
            kept.append(bullet)
        self.bullets = kept

    def update(self, player: Target, dt: float) -> None:
        self.update_movement(player, dt)
        self.update_physics(dt)
        self.update_shooting(player, dt)
        self._update_bullets()
        self._update_color(dt)
        self.update_animation(dt)
        self.death_animation(dt)
        self.update_hitbox()
        self.bullet_collision(player)