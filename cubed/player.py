"""The player: starting pose, movement with collision, and turning."""

import math
from dataclasses import dataclass

from cubed.scene import WALL, Facing, Scene, SceneError
from cubed.validation import is_walkable

WALK_SPEED = 0.05
TURN_SPEED = 0.05
PLANE_LENGTH = 0.66

# facing -> (dir_x, dir_y, plane_x, plane_y)
_START_VECTORS = {
    Facing.NORTH: (0.0, -1.0, PLANE_LENGTH, 0.0),
    Facing.SOUTH: (0.0, 1.0, -PLANE_LENGTH, 0.0),
    Facing.WEST: (-1.0, 0.0, 0.0, -PLANE_LENGTH),
    Facing.EAST: (1.0, 0.0, 0.0, PLANE_LENGTH),
}


@dataclass
class InputState:
    """Which movement controls are held down during a frame."""

    forward: bool = False
    backward: bool = False
    strafe_left: bool = False
    strafe_right: bool = False
    rotate_left: bool = False
    rotate_right: bool = False


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    walk_speed: float = WALK_SPEED
    turn_speed: float = TURN_SPEED

    def try_move(self, scene: Scene, dx: float, dy: float) -> bool:
        """Move by ``(dx, dy)`` if the target cell is walkable; return whether it moved."""
        new_x = self.pos_x + dx
        new_y = self.pos_y + dy
        if not check_hit(scene, new_x, new_y):
            return False
        self.pos_x = new_x
        self.pos_y = new_y
        return True

    def move_forward(self, scene: Scene) -> None:
        """Step forward one walk step, sliding along walls one axis at a time."""
        new_x = self.pos_x + self.dir_x * self.walk_speed
        new_y = self.pos_y + self.dir_y * self.walk_speed
        if not _is_wall(scene, self.pos_x, new_y):
            self.pos_y = new_y
        if not _is_wall(scene, new_x, self.pos_y):
            self.pos_x = new_x

    def rotate(self, angle: float) -> None:
        """Turn the view direction and camera plane by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def update(self, scene: Scene, inputs: InputState) -> None:
        """Apply one frame of held controls: moves first, then turns."""
        speed = self.walk_speed
        if inputs.forward:
            self.try_move(scene, self.dir_x * speed, self.dir_y * speed)
        if inputs.backward:
            self.try_move(scene, -self.dir_x * speed, -self.dir_y * speed)
        if inputs.strafe_left:
            self.try_move(scene, -self.plane_x * speed, -self.plane_y * speed)
        if inputs.strafe_right:
            self.try_move(scene, self.plane_x * speed, self.plane_y * speed)
        if inputs.rotate_left:
            self.rotate(self.turn_speed)
        if inputs.rotate_right:
            self.rotate(-self.turn_speed)


def _cell(scene: Scene, x: float, y: float):
    map_x = int(x)
    map_y = int(y)
    if not 0 <= map_y < scene.rows:
        return None
    row = scene.grid[map_y]
    if not 0 <= map_x < len(row):
        return None
    return row[map_x]


def _is_wall(scene: Scene, x: float, y: float) -> bool:
    cell = _cell(scene, x, y)
    return cell is None or cell == WALL


def check_hit(scene: Scene, x: float, y: float) -> bool:
    """True when the point ``(x, y)`` lies in a walkable cell of the map."""
    cell = _cell(scene, x, y)
    return cell is not None and is_walkable(cell)


def init_player(scene: Scene) -> Player:
    """A player at the scene's start cell, looking the way its start character says."""
    try:
        dir_x, dir_y, plane_x, plane_y = _START_VECTORS[scene.player]
    except KeyError:
        raise SceneError("Invalid player direction") from None
    pos_x, pos_y = scene.player_pos
    return Player(
        pos_x=float(pos_x),
        pos_y=float(pos_y),
        dir_x=dir_x,
        dir_y=dir_y,
        plane_x=plane_x,
        plane_y=plane_y,
    )