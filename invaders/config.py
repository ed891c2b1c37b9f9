"""Window settings and key-binding files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

MAX_DT = 1.0 / 60.0

StrPath = str | PathLike[str]


@dataclass(frozen=True)
class WindowConfig:
    """Settings for the game window."""

    title: str = "none"
    width: int = 800
    height: int = 600
    framerate_limit: int = 60
    vertical_sync: bool = False


def _read_text(path: StrPath) -> str | None:
    try:
        return Path(path).read_text()
    except OSError:
        return None


def load_window_config(path: StrPath) -> WindowConfig:
    """Read a window config: a title line, then width, height, frame limit, vsync.

    A missing file, or any value that cannot be read, leaves the default.
    """
    defaults = WindowConfig()
    text = _read_text(path)
    if text is None:
        return defaults
    title, _, rest = text.partition("\n")
    title = title.rstrip("\r")
    values: list[int] = []
    for token in rest.split():
        try:
            values.append(int(token))
        except ValueError:
            break
        if len(values) == 4:
            break
    width = values[0] if len(values) > 0 else defaults.width
    height = values[1] if len(values) > 1 else defaults.height
    framerate = values[2] if len(values) > 2 else defaults.framerate_limit
    vsync = bool(values[3]) if len(values) > 3 else defaults.vertical_sync
    return WindowConfig(title, width, height, framerate, vsync)


def load_supported_keys(path: StrPath) -> dict[str, int]:
    """Read ``NAME CODE`` pairs; reading stops at the first malformed pair."""
    text = _read_text(path)
    keys: dict[str, int] = {}
    if text is None:
        return keys
    tokens = iter(text.split())
    for name, value in zip(tokens, tokens):
        try:
            keys[name] = int(value)
        except ValueError:
            break
    return keys


def load_keybinds(path: StrPath, supported_keys: dict[str, int]) -> dict[str, int]:
    """Read ``ACTION KEYNAME`` pairs and resolve each key name to its code.

    Raises KeyError when a key name is not among the supported keys.
    """
    text = _read_text(path)
    binds: dict[str, int] = {}
    if text is None:
        return binds
    tokens = iter(text.split())
    for action, key_name in zip(tokens, tokens):
        if key_name not in supported_keys:
            raise KeyError(f"unsupported key: {key_name}")
        binds[action] = supported_keys[key_name]
    return binds


def clamp_dt(dt: float) -> float:
    """Limit a frame time to one sixtieth of a second."""
    return MAX_DT if dt > MAX_DT else dt