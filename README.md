# invaders

The rules of a side-scrolling run-and-gun shooter, as a plain Python library
with no dependencies. It holds collision handling, sprite-sheet animation,
enemy behaviour, level layouts, camera scrolling, combat rules and the
high-score table. There is no windowing, drawing or sound in it, so a front
end can drive it, and tests can run it without a display.

## Modules

- `invaders.geometry`: `Vector2` (immutable, with `+`, `-`, `*` and `/`),
  `Rect` (`intersects`, `contains`, `moved`, `right`, `bottom`) and `Sprite`
  (position, texture rectangle, scale, origin and colour, plus `move` and
  `bounds`).
- `invaders.collider`: `Body` and `Collider`. The collider pushes an
  overlapping body and its sprite out of the way and returns the contact
  direction, or `None` when there is no contact. There are three methods:
  - `check_collision` for solid ground.
  - `check_air_collision` for platforms the player can pass through from
    below. It returns the direction and the new "ignore" flag.
  - `check_stair_collision` for `"stairL"`/`"stairR"` steps. When the player
    touches a step from the side, the step lifts the player.
- `invaders.animation`: `Animation` steps through one row of frames on a
  sprite sheet. `AnimationComponent` holds named animations for one sprite.
  An animation played with `priority=True` blocks the others until it has
  finished a cycle. `play_scaled` sets the playback speed from
  `|modifier / modifier_max|`.
- `invaders.bullet`: `Bullet`, which moves by `movement_speed * direction` on
  each `update()`, with `bounds`, `intersects`, `flip` and `collider`.
- `invaders.button`: `Button`, with states from `ButtonState` (`IDLE`, `HOVER`,
  `ACTIVE`). Call `update(mouse_x, mouse_y, mouse_pressed)` with the mouse
  state. The button then sets its fill colour, text colour and text scale,
  and `is_pressed()` reports whether it is active.
- `invaders.enemy`: `Enemy` and `EnemyType` (`SOLDIER`, `SNIPER`, `BOSS`).
  - Each enemy walks toward the player, fires bullets on a cooldown, flashes
    when hit, plays its death animation and may drop a health pack.
  - The player it fights can be any object with a `position`, a
    `sprite_bounds()` method and a `take_damage(dmg)` method.
  - You can pass your own random source (anything with `randrange`) as `rng`
    so that drops and boss points are repeatable.
- `invaders.config`: readers for the game's configuration files.
  - `load_window_config` returns a `WindowConfig`. The file holds a title
    line, then the width, height, frame limit and vsync flag.
  - `load_supported_keys` reads `NAME CODE` pairs.
  - `load_keybinds` reads `ACTION KEYNAME` pairs and raises `KeyError` for a
    key name that is not supported.
  - `clamp_dt` caps a frame time at 1/60 s.
- `invaders.names`: `NameInput` builds a player name from typed character
  codes. It upper-cases letters, turns spaces into underscores, treats code 8
  as backspace, ignores Enter, and keeps at most 12 characters.
- `invaders.highscore`: the top-five table of `ScoreEntry` items, stored as
  `NAME SCORE` lines. The functions are `load_scores`, `merge_score`,
  `save_scores` and `record_score`.
- `invaders.main_level`: the layout of the main level.
  - `PlatformSpec` and `ItemSpec` describe platforms and items.
  - `main_level_platforms`, `main_level_items` and `main_level_door` give the
    layout.
  - `checkpoint_spawn_count` gives the size of the enemy wave at each
    checkpoint.
- `invaders.boss_level`: the boss arena, through `boss_level_platforms` and
  `boss_level_items`. `reinforcements_due` reports when soldiers join the
  fight, which happens once, at half boss health.
- `invaders.camera`: camera movement.
  - `ScrollingCamera` moves forward one section at a time once the current
    section is clear.
  - `boss_camera_center` gives the view centre in the boss arena.
  - `clamp_player_x` keeps the player between the left edge of the view and
    the end of the map.
- `invaders.combat`: shared combat rules.
  - `bullet_out_of_view` tells when to cull a bullet.
  - `resolve_pickup` returns a `Pickup` value: `NONE`, `HEAL` or `BONUS`.
  - `fade_alpha` fades the bonus icon.
  - `melee_ready` checks the 3-second melee cooldown.

## Installing

```
pip install .
```

## Example

```python
from pathlib import Path

from invaders.highscore import record_score, save_scores
from invaders.names import NameInput

entry = NameInput()
for ch in "ace pilot":
    entry.feed(ord(ch))
# entry.name == "ACE_PILOT"

path = Path("score.txt")
if not path.exists():
    save_scores(path, [])
if entry.can_start():
    table = record_score(path, entry.name, 120)
    for row in table:
        print(row.name, row.score)
```

`load_scores` and `record_score` raise `FileNotFoundError` when the score file
does not exist, and `ValueError` when a score in it is not a number.

## What this package does not do

- It does not open a window, draw anything, play music or sound effects, or
  load textures and fonts. Sizes are passed in as numbers.
- There is no game loop, no stack of screens (menus, game over, victory) and
  no command to start a game.
- There is no player character. Enemies and the camera only need the few
  player attributes described above, and your code has to supply them.
- Levels are given as layout data (`PlatformSpec`, `ItemSpec`), not as
  finished game objects.

## Tests

```
pip install .[test]
pytest
```