"""Checks that a parsed map is closed, well formed and playable."""

from cubed.scene import FLOOR, WALL, Facing, Scene, SceneError

_PLAYER_CHARS = frozenset("NSEW")
_WALKABLE = frozenset(FLOOR) | _PLAYER_CHARS
_ALLOWED = frozenset(WALL + FLOOR + " ") | _PLAYER_CHARS
_SPACES = " \t\n\v\f\r"


def is_walkable(cell: str) -> bool:
    """True for a floor cell or a player start."""
    return cell in _WALKABLE


def check_elements(scene: Scene) -> None:
    """Reject unknown characters and require exactly one player start.

    The player's facing and cell are recorded on the scene.
    """
    players = 0
    for y, row in enumerate(scene.grid):
        for x, cell in enumerate(row):
            if cell not in _ALLOWED:
                raise SceneError("Invalid element found")
            if cell in _PLAYER_CHARS:
                players += 1
                scene.player = Facing.from_char(cell)
                scene.player_pos = (float(x), float(y))
    if players != 1:
        raise SceneError("Wrong number of players")


def check_bounds(scene: Scene) -> None:
    """Reject empty rows, and inner rows that do not start and end with a wall."""
    last = scene.rows - 1
    for index, row in enumerate(scene.grid):
        if not row:
            raise SceneError("Empty row in map")
        if index in (0, last):
            continue
        content = row.strip(_SPACES)
        if not content:
            raise SceneError("No valid characters")
        if content[0] != WALL:
            raise SceneError("Row doesn't start with a wall")
        if content[-1] != WALL:
            raise SceneError("Row doesn't end with a wall")


def _touches_void(grid, y: int, x: int) -> bool:
    for ny in (y - 1, y, y + 1):
        if not 0 <= ny < len(grid):
            return True
        row = grid[ny]
        for nx in (x - 1, x, x + 1):
            if not 0 <= nx < len(row) or row[nx] == " ":
                return True
    return False


def check_surroundings(scene: Scene) -> None:
    """Reject walkable cells next to a space or the edge of the map, diagonals included."""
    grid = scene.grid
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if is_walkable(cell) and _touches_void(grid, y, x):
                raise SceneError("Walkable touches the void")


def check_player_mobility(scene: Scene) -> None:
    """Require a walkable cell directly above, below, left or right of the player."""
    x, y = (int(coord) for coord in scene.player_pos)
    grid = scene.grid
    for ny, nx in ((y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1)):
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]) and is_walkable(grid[ny][nx]):
            return
    raise SceneError("Player is completely isolated by walls")


def validate_map(scene: Scene) -> Scene:
    """Run every map check in turn and return the scene."""
    check_elements(scene)
    check_bounds(scene)
    check_surroundings(scene)
    check_player_mobility(scene)
    return scene