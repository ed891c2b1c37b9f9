"""Combat rules shared by the levels: bullet culling, pickups, melee and icon fading."""

from __future__ import annotations

from enum import Enum

from invaders.geometry import Rect

MELEE_COOLDOWN = 3.0
MELEE_DAMAGE = 3
BULLET_DAMAGE = 1
HEAL_AMOUNT = 1
FADE_RATE = 500.0

MAIN_LEVEL_MARGINS = (100.0, 100.0)
BOSS_LEVEL_MARGINS = (50.0, 0.0)


class Pickup(Enum):
    """What touching an item does to the player."""

    NONE = "NONE"
    HEAL = "HEAL"
    BONUS = "BONUS"


def bullet_out_of_view(
    bounds: Rect,
    view_center_x: float,
    window_width: float,
    left_margin: float,
    right_margin: float,
) -> bool:
    """True when a bullet has left the view by more than the given margins.

    The right edge of the bullet is checked against the right side of the
    view, its left edge against the left side.
    """
    half = window_width / 2.0
    if bounds.left + bounds.width > view_center_x + half + right_margin:
        return True
    return bounds.left < view_center_x - half - left_margin


def resolve_pickup(
    item_type: str, player_hp: int, player_max_hp: int, player_shooting: bool
) -> Pickup:
    """Decide whether an item the player touches is picked up, and how.

    A health pack is only taken while the player is hurt; a fire-rate bonus
    is only taken while the player is not in the middle of shooting. Any
    other item (such as a "GO" sign) is never picked up.
    """
    if item_type == Pickup.HEAL.value:
        return Pickup.HEAL if player_hp < player_max_hp else Pickup.NONE
    if item_type == Pickup.BONUS.value:
        return Pickup.NONE if player_shooting else Pickup.BONUS
    return Pickup.NONE


def fade_alpha(alpha: int, dt: float) -> int:
    """Fade the bonus icon counter by ``FADE_RATE`` per second.

    The counter is an integer: the fractional part is dropped toward zero.
    """
    return int(alpha - FADE_RATE * dt)


def melee_ready(elapsed: float) -> bool:
    """True when enough time has passed since the last melee strike."""
    return elapsed >= MELEE_COOLDOWN