"""Sprite-sheet frame animations with priority playback."""

from __future__ import annotations

from dataclasses import replace

from invaders.geometry import Rect, Sprite


class Animation:
    """A row of frames on a sprite sheet, advanced by a timer."""

    def __init__(
        self,
        sprite: Sprite,
        animation_timer: float,
        start_frame_x: int,
        start_frame_y: int,
        frames_x: int,
        frames_y: int,
        width: int,
        height: int,
    ) -> None:
        self.sprite = sprite
        self.animation_timer = animation_timer
        self.timer = 0.0
        self.done = False
        self.width = width
        self.height = height
        self.start_rect = Rect(start_frame_x * width, start_frame_y * height, width, height)
        self.current_rect = self.start_rect
        self.end_rect = Rect(frames_x * width, frames_y * height, width, height)
        self.sprite.texture_rect = self.start_rect

    def play(self, dt: float, modifier_percent: float | None = None) -> bool:
        """Advance the timer; return True when the last frame wrapped around.

        Without a modifier the timer runs at 150 units per second; with one
        it runs at ``modifier_percent * 100`` (never below half speed).
        """
        if modifier_percent is None:
            rate = 150.0
        else:
            rate = max(modifier_percent, 0.5) * 100.0
        self.done = False
        self.timer += rate * dt
        if self.timer >= self.animation_timer:
            self.timer = 0.0
            if self.current_rect != self.end_rect:
                self.current_rect = replace(
                    self.current_rect, left=self.current_rect.left + self.width
                )
            else:
                self.current_rect = replace(self.current_rect, left=self.start_rect.left)
                self.done = True
            self.sprite.texture_rect = self.current_rect
        return self.done

    def reset(self) -> None:
        """Rewind to the first frame, ready to advance on the next play."""
        self.timer = self.animation_timer
        self.current_rect = self.start_rect


class AnimationComponent:
    """Named animations on one sprite; a priority animation blocks others."""

    def __init__(self, sprite: Sprite) -> None:
        self.sprite = sprite
        self.animations: dict[str, Animation] = {}
        self._last: Animation | None = None
        self._priority: Animation | None = None

    def add_animation(
        self,
        key: str,
        animation_timer: float,
        start_frame_x: int,
        start_frame_y: int,
        frames_x: int,
        frames_y: int,
        width: int,
        height: int,
    ) -> None:
        self.animations[key] = Animation(
            self.sprite,
            animation_timer,
            start_frame_x,
            start_frame_y,
            frames_x,
            frames_y,
            width,
            height,
        )

    def is_done(self, key: str) -> bool:
        return self.animations[key].done

    def _switch_to(self, animation: Animation) -> None:
        if self._last is not animation:
            if self._last is not None:
                self._last.reset()
            self._last = animation

    def _run(self, key: str, priority: bool, modifier_percent: float | None) -> bool:
        animation = self.animations[key]
        if self._priority is not None:
            if self._priority is animation:
                self._switch_to(animation)
                if animation.play(self._dt, modifier_percent):
                    self._priority = None
        else:
            if priority:
                self._priority = animation
            self._switch_to(animation)
            animation.play(self._dt, modifier_percent)
        return animation.done

    def play(self, key: str, dt: float, priority: bool = False) -> bool:
        """Play an animation; return whether it just finished a cycle."""
        self._dt = dt
        return self._run(key, priority, None)

    def play_scaled(
        self, key: str, dt: float, modifier: float, modifier_max: float, priority: bool = False
    ) -> bool:
        """Play at a speed proportional to ``|modifier / modifier_max|``."""
        self._dt = dt
        return self._run(key, priority, abs(modifier / modifier_max))