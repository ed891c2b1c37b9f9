"""Clickable menu buttons."""

from __future__ import annotations

from enum import IntEnum

from invaders.geometry import Rect

Color = tuple[int, int, int, int]

_WHITE: Color = (255, 255, 255, 255)
_HOVER_TEXT: Color = (180, 0, 0, 255)


class ButtonState(IntEnum):
    IDLE = 0
    HOVER = 1
    ACTIVE = 2


class Button:
    """A rectangle with a label that reacts to the mouse."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        text: str,
        text_size: int,
        idle_color: Color,
        hover_color: Color,
        active_color: Color,
    ) -> None:
        self.shape = Rect(x, y, width, height)
        self.text = text
        self.text_size = text_size
        self.idle_color = idle_color
        self.hover_color = hover_color
        self.active_color = active_color
        self.state = ButtonState.IDLE
        self.fill_color = idle_color
        self.text_color: Color = _WHITE
        self.text_scale = (1.0, 1.0)

    def is_pressed(self) -> bool:
        return self.state is ButtonState.ACTIVE

    def update(self, mouse_x: float, mouse_y: float, mouse_pressed: bool) -> None:
        """Recompute state and colours from the mouse position and left button."""
        self.state = ButtonState.IDLE
        if self.shape.contains(mouse_x, mouse_y):
            self.state = ButtonState.ACTIVE if mouse_pressed else ButtonState.HOVER
        if self.state is ButtonState.IDLE:
            self.fill_color = self.idle_color
            self.text_scale = (1.0, 1.0)
            self.text_color = _WHITE
        elif self.state is ButtonState.HOVER:
            self.fill_color = self.hover_color
            self.text_scale = (1.2, 1.2)
            self.text_color = _HOVER_TEXT
        else:
            self.fill_color = self.active_color
            self.text_color = _WHITE