"""Typing the player's name from text-entry key codes."""

from __future__ import annotations

MAX_NAME_LENGTH = 12

_BACKSPACE = 8
_ENTER = 13
_SPACE = 32
_UNDERSCORE = 95


class NameInput:
    """Collects a player name: upper case, spaces as underscores, 12 characters."""

    def __init__(self) -> None:
        self.name = ""

    def feed(self, code: int) -> str:
        """Handle one entered character code and return the name so far."""
        if code >= 128:
            return self.name
        if code == _BACKSPACE and self.name:
            self.name = self.name[:-1]
        elif len(self.name) < MAX_NAME_LENGTH and code != _ENTER:
            if ord("a") <= code <= ord("z"):
                code -= 32
            if code == _SPACE:
                code = _UNDERSCORE
            self.name += chr(code)
        return self.name

    def can_start(self) -> bool:
        """A game may start once a name has been typed."""
        return bool(self.name)