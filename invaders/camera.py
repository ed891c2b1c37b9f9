"""Camera handling for the scrolling level and the boss arena."""

from __future__ import annotations

from invaders.geometry import Vector2
from invaders.main_level import CAMERA_LIMIT

SCROLL_SPEED = 300.0
_TRIGGER_MARGIN = 50
_SECTION_OVERLAP = 100


class ScrollingCamera:
    """A camera that scrolls one screen ahead once the current section is cleared.

    The player opens the next section by reaching the right edge of the screen
    while no enemies are alive; the camera then glides forward until it
    reaches the new section or the end of the level.
    """

    def __init__(self, window_width: int, window_height: int, limit: float = CAMERA_LIMIT) -> None:
        self.window_width = window_width
        self.window_height = window_height
        self.limit = limit
        self.center = Vector2(float(window_width // 2), float(window_height // 2))
        self.trigger_x = float(window_width - _TRIGGER_MARGIN)
        self.target_x = self.center.x
        self.moving = False

    @property
    def section_width(self) -> int:
        return self.window_width - _SECTION_OVERLAP

    @property
    def view_left(self) -> float:
        return self.center.x - self.window_width / 2.0

    @property
    def view_right(self) -> float:
        return self.center.x + self.window_width / 2.0

    def update(self, player_right: float, enemies_alive: int, dt: float) -> bool:
        """Advance the camera for one frame.

        Returns True when a new section was opened this frame, which is when
        the next wave of enemies becomes due.
        """
        opened = False
        if player_right > self.trigger_x and not enemies_alive:
            self.trigger_x += self.section_width
            self.target_x += self.section_width
            self.moving = True
            opened = True

        if self.center.x < self.target_x and self.moving and self.center.x < self.limit:
            self.center = Vector2(self.center.x + SCROLL_SPEED * dt, self.center.y)
        else:
            self.moving = False
        return opened


def boss_camera_center(
    player_x: float, window_width: float, window_height: float, background_width: float
) -> Vector2:
    """Centre of the boss-arena view: follows the player between the map edges."""
    half_w = window_width / 2.0
    half_h = window_height / 2.0
    if half_w < player_x <= background_width - half_w:
        return Vector2(player_x, half_h)
    if player_x > background_width - half_w:
        return Vector2(background_width - half_w, half_h)
    return Vector2(half_w, half_h)


def clamp_player_x(
    player_x: float, player_width: float, view_left: float, map_right: float
) -> float:
    """Keep the player inside the visible left edge and the end of the map."""
    if player_x < view_left:
        player_x = view_left
    if player_x + player_width >= map_right:
        player_x = map_right - player_width
    return player_x