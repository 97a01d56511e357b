# shapewars

A small arcade shooter. You steer a polygon around the window and shoot the
enemy shapes that spawn at random. When a shape is hit, it bursts into fading
fragments. Each enemy that a bullet or special bullet destroys is worth 500
points. If an enemy runs into you, it also bursts, you are put back in the
middle of the window, and you score nothing for it.

## Installing

```
pip install .
```

This also installs `pygame`, which opens the window, draws it, and reads the
keyboard and mouse.

## Playing

```
shapewars
```

By default the game reads `config.txt` from the current directory. You can
give another path, and a seed for the random enemy spawns:

```
shapewars path/to/config.txt
shapewars path/to/config.txt --seed 42
```

Controls:

- `W`, `A`, `S`, `D`: move up, left, down, right
- left mouse button: fire a bullet toward the pointer
- right mouse button: fire the special weapon. It sends out a ring of eight
  slow bullets. When a special bullet fades out it bursts into a new ring.
  At most eight new rings are made this way; the count starts again once
  no special bullets are left.
- `P`: pause and resume. While the game is paused, a "Game Pause" banner is
  shown, nothing moves and you cannot fire.

## Configuration file

The file is plain text with one line for each section. Each line starts with
the section name, followed by values separated by spaces:

```
Window 1280 720 60 0
Font fonts/arial.ttf 24 255 255 255
Player 32 32 5 5 5 5 255 0 0 4 8
Enemy 32 32 3 3 255 255 255 2 3 8 90 60
Bullet 10 10 20 255 255 255 255 255 255 2 20 90
```

| Section | Fields |
|---------|--------|
| `Window` | width, height, frame limit, fullscreen flag |
| `Font` | font file, size, red, green, blue |
| `Player` | shape radius, collision radius, speed, fill RGB, outline RGB, outline thickness, vertices |
| `Enemy` | shape radius, collision radius, min speed, max speed, outline RGB, outline thickness, min vertices, max vertices, small-enemy lifespan, spawn interval (frames) |
| `Bullet` | shape radius, collision radius, speed, fill RGB, outline RGB, outline thickness, vertices, lifespan |

Values are read in order. If a line ends early, the remaining fields keep
their previous values. If a value is malformed, it is set to zero and the
rest of the line is ignored.

Enemy colours are random. Each channel is drawn between 0 and the `Enemy`
red value. The font colour is used for the pause banner. The score is always
drawn in white. If the font file cannot be loaded, pygame's default font is
used.

If the configuration file cannot be opened, the game prints
`Failed to open <path>` to standard error. It then starts with every setting
at zero.

## What it does not do

- The fullscreen flag is read but not used. The game always runs in a window.
- The small-enemy lifespan in the `Enemy` line is read but not used. Fragments
  always start with a lifespan of 255.
- Scores are not saved. A game ends when its window is closed.

## Using it as a library

The building blocks can be used on their own:

```python
from shapewars.config import parse_config, load_config
from shapewars.entity_manager import EntityManager
from shapewars.vec2 import Vec2

config = parse_config("Window 800 600 60 0\n")
assert config.window.width == 800

manager = EntityManager()
bullet = manager.add_entity("bullet")
manager.update()          # queued entities become visible here
assert manager.get_entities("bullet") == [bullet]
bullet.destroy()
manager.update()          # destroyed entities are dropped here
assert not manager.has_tag("bullet")

direction = Vec2.from_angle(90)   # unit vector at 90 degrees
```

- `shapewars.vec2.Vec2`: a mutable 2D vector.
- `shapewars.components`: the components an entity can carry (`Transform`,
  `Shape`, `Collision`, `Score`, `Lifespan`, `Input`) and `Color`.
- `shapewars.entity.Entity`: an entity with an id and a tag.
- `shapewars.entity_manager.EntityManager`: holds the entities.
- `shapewars.config`: `parse_config`, `load_config` and the section dataclasses.

`shapewars.game.Game` holds the whole game. It takes a `GameConfig` or a path
to a configuration file, and an optional random seed. `Game.step()` advances
the game by one frame without opening a window. `Game.handle_key()` and
`Game.handle_mouse()` feed it input. `Game.run()` opens the window and plays
until the window is closed.