# cubed

A small first-person maze explorer. It reads a `.cub` scene file, checks
that the map is closed and playable, then draws textured walls in an
800×600 window by casting one ray per screen column through the grid.

## Installing

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running

```
cubed path/to/level.cub
```

Exactly one argument is accepted. The part of the path from its last dot
must begin with `.cub`, and the file must exist. Problems with the command
line, the scene file or its textures are printed as `Error: ...` and the
command exits with status 1. A green banner is shown when the program
starts and a red one when the game window is closed.

### Controls

| Key         | Action               |
|-------------|----------------------|
| W / S       | walk forward / back  |
| A / D       | strafe left / right  |
| ← / →       | turn                 |
| Esc         | quit                 |

Closing the window also quits. A move is only made when the cell it ends
in is floor or a player start.

## Scene files

A scene file holds four wall textures and two colours, followed by the map:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

111111
100101
1010N1
111111
```

- Blank lines are ignored anywhere in the file.
- `NO`, `SO`, `WE`, `EA` give the texture image for each wall face. The
  part of each path from its last dot must begin with `.png`, and no face
  may be given twice. Every face must be given for the game to start.
  Textures are sampled as 64×64 images.
- `F` and `C` set the floor and ceiling colour as `R,G,B`, exactly three
  parts, each between 0 and 255. A colour that is not given is black.
- Any other line is a map row. In the map, `1` is a wall and `0` is floor.
  Exactly one of `N`, `S`, `E` or `W` marks where the player starts and
  which way they face. Spaces are allowed outside the walls.

A map is only accepted if:

- it uses only the characters listed above,
- it has exactly one player start,
- every row other than the first and last begins and ends with a wall,
  leading and trailing whitespace aside,
- no walkable cell touches a space or the edge of the map, diagonals
  included,
- the player has at least one walkable cell directly above, below, left
  or right of them.

## Using it as a library

```python
from cubed.scene import load_scene
from cubed.player import init_player
from cubed.game import load_textures
from cubed.raycast import render_frame

scene = load_scene("level.cub")        # parses and validates
player = init_player(scene)
frame = render_frame(player, scene, load_textures(scene))
print(hex(frame.get_pixel(400, 10)))   # colour packed as 0xRRGGBBAA
```

`load_scene`, `parse_scene` and the checks in `cubed.validation` raise
`cubed.scene.SceneError` when a scene is malformed. `cubed.game.Game`
ties a scene, its textures and the player together: `Game.step` applies
one frame of `cubed.player.InputState` and returns the rendered
`cubed.raycast.Frame`, and `Game.run` opens the window.

The package also carries the small helpers it is built on:

- `cubed.chars` — ASCII character classes and case mapping,
- `cubed.convert` — `atoi`, `atol`, `strtol`, `itoa`, `utoa`, `utoa_base`,
- `cubed.textops` — string search, comparison, trimming and splitting,
- `cubed.memory` — byte-buffer helpers with C-string rules,
- `cubed.lines` — `LineReader` and `read_lines` for reading a stream line by line,
- `cubed.linkedlist` — a singly linked `LinkedList`.

## What it does not do

There is no sound, no mouse control, no minimap and no sprites or doors:
only walls, a flat floor and a flat ceiling are drawn. Rendering is done
in pure Python, one frame at a time, so the frame rate is modest.