"""Scene description files: wall textures, floor and ceiling colours, and the map."""

import os
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

from cubed.convert import atoi
from cubed.lines import LineReader
from cubed.textops import split, strncmp, strrchr, strtrim

WALL = "1"
FLOOR = "0"
SCENE_EXTENSION = ".cub"
TEXTURE_EXTENSION = ".png"

_TEXTURE_ATTRS = {
    "NO ": "north_texture",
    "SO ": "south_texture",
    "WE ": "west_texture",
    "EA ": "east_texture",
}
_COLOR_KEYS = ("F ", "C ")


class SceneError(ValueError):
    """A scene file or command line that cannot be used."""


class Facing(IntEnum):
    """The direction the player starts out looking in."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3

    @classmethod
    def from_char(cls, char: str) -> "Facing":
        """The facing a map character stands for."""
        try:
            return _FACING_CHARS[char]
        except KeyError:
            raise ValueError(f"not a player character: {char!r}") from None


_FACING_CHARS = {
    "N": Facing.NORTH,
    "S": Facing.SOUTH,
    "W": Facing.WEST,
    "E": Facing.EAST,
}


def check_format(path: str, extension: str) -> bool:
    """True when the part of ``path`` from its last dot starts like ``extension``.

    At most four characters are compared.
    """
    dot = strrchr(path, ".")
    return dot is not None and strncmp(path[dot:], extension, 4) == 0


def check_input(argv: Sequence[str]) -> str:
    """Check the command-line arguments (program name excluded) and return the scene path."""
    if len(argv) != 1:
        raise SceneError("Invalid number of arguments")
    path = argv[0]
    if not check_format(path, SCENE_EXTENSION):
        raise SceneError("Invalid file format")
    if not os.path.exists(path):
        raise SceneError("File does not exist")
    return path


def is_texture(line: str) -> bool:
    """True for a wall texture line: ``NO``, ``SO``, ``WE`` or ``EA`` and a space."""
    return line.startswith(tuple(_TEXTURE_ATTRS))


def is_color(line: str) -> bool:
    """True for a floor or ceiling colour line: ``F`` or ``C`` and a space."""
    return line.startswith(_COLOR_KEYS)


@dataclass
class Scene:
    """Everything a scene file describes."""

    grid: List[str] = field(default_factory=list)
    north_texture: Optional[str] = None
    south_texture: Optional[str] = None
    west_texture: Optional[str] = None
    east_texture: Optional[str] = None
    floor_color: int = 0
    ceiling_color: int = 0
    player: Optional[Facing] = None
    player_pos: Tuple[float, float] = (0.0, 0.0)

    @property
    def rows(self) -> int:
        """Number of map rows."""
        return len(self.grid)

    @property
    def columns(self) -> int:
        """Length of the longest map row."""
        return max((len(row) for row in self.grid), default=0)

    @property
    def texture_paths(self) -> Tuple[Optional[str], ...]:
        """Texture paths in the order north, south, west, east."""
        return (
            self.north_texture,
            self.south_texture,
            self.west_texture,
            self.east_texture,
        )

    def parse_texture(self, line: str) -> None:
        """Record the path given on a texture line."""
        attr = _TEXTURE_ATTRS.get(line[:3])
        if attr is None:
            raise SceneError("Not a texture line")
        path = strtrim(line[2:], " \t\n")
        if not check_format(path, TEXTURE_EXTENSION):
            raise SceneError("Invalid texture format")
        if getattr(self, attr) is not None:
            raise SceneError("Duplicate texture")
        setattr(self, attr, path)

    def parse_color(self, line: str) -> None:
        """Record the ``R,G,B`` colour given on a floor or ceiling line."""
        parts = split(strtrim(line[1:], " \t\n"), ",")
        if not parts:
            return
        if len(parts) != 3:
            raise SceneError("Invalid color")
        red, green, blue = (atoi(part) for part in parts)
        if not all(0 <= channel <= 255 for channel in (red, green, blue)):
            raise SceneError("Invalid color")
        value = (red << 16) + (green << 8) + blue
        if line.startswith("F "):
            self.floor_color = value
        else:
            self.ceiling_color = value

    def parse_map_row(self, line: str) -> None:
        """Append one row to the map."""
        self.grid.append(line)

    def parse_line(self, line: str) -> None:
        """Take one line of a scene file; blank lines are ignored."""
        trimmed = strtrim(line, " \t\n\r")
        if not trimmed:
            return
        if is_texture(trimmed):
            self.parse_texture(trimmed)
        elif is_color(trimmed):
            self.parse_color(trimmed)
        else:
            self.parse_map_row(strtrim(line, "\n\r"))


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from its lines and validate its map."""
    from cubed.validation import validate_map

    scene = Scene()
    for line in lines:
        scene.parse_line(line)
    validate_map(scene)
    return scene


def load_scene(path: str) -> Scene:
    """Read, parse and validate the scene file at ``path``."""
    try:
        with open(path, encoding="utf-8", newline="\n") as stream:
            lines = list(LineReader(stream))
    except UnicodeDecodeError as exc:
        raise SceneError("Could not read file") from exc
    except OSError as exc:
        raise SceneError("Could not open file") from exc
    return parse_scene(lines)