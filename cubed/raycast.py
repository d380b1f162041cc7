"""Casting one ray per screen column and drawing textured wall slices."""

import math
import struct
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from cubed.player import Player
from cubed.scene import WALL, Scene

WWINDOW = 800
HWINDOW = 600
TEX_SIZE = 64
NO_HIT_DELTA = 1e30
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _c_int(value: float) -> int:
    """Truncate toward zero; non-finite or out-of-range values give INT_MIN."""
    if not math.isfinite(value) or not INT_MIN <= value <= INT_MAX:
        return INT_MIN
    return int(value)


def _c_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True)
class Texture:
    """An image held as rows of RGBA bytes."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture dimensions must be positive")
        if len(self.pixels) != self.width * self.height * 4:
            raise ValueError("pixel data does not match texture size")


def get_color(texture: Texture, width: int, tex_y: int, tex_x: int) -> int:
    """The texel at ``(tex_x, tex_y)`` packed as 0xRRGGBBAA, for rows ``width`` texels wide."""
    index = (tex_y * width + tex_x) * 4
    if index < 0 or index + 4 > len(texture.pixels):
        raise IndexError(f"texel ({tex_x}, {tex_y}) is outside the texture")
    red, green, blue, alpha = texture.pixels[index:index + 4]
    return (red << 24) | (green << 16) | (blue << 8) | alpha


@dataclass
class Frame:
    """A picture of 32-bit RGBA colours, one per pixel."""

    width: int = WWINDOW
    height: int = HWINDOW
    pixels: Optional[List[int]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame dimensions must be positive")
        if self.pixels is None:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel data does not match frame size")

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)``."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """The colour of the pixel at ``(x, y)``."""
        return self.pixels[self._index(x, y)]

    def rgba_bytes(self) -> bytes:
        """The whole frame as RGBA bytes, row by row."""
        return struct.pack(f">{len(self.pixels)}I", *self.pixels)


@dataclass
class Ray:
    """State of one ray as it steps through the map grid."""

    dir_x: float = 0.0
    dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    perp_wall_dist: float = 0.0
    step_x: int = 0
    step_y: int = 0
    side: int = 0


@dataclass
class WallSlice:
    """Where and how to draw the wall a ray hit."""

    line_height: int
    draw_start: int
    draw_end: int
    tex_num: int
    wall_x: float
    tex_x: int


def init_ray(x: int, player: Player) -> Ray:
    """The ray for screen column ``x``, ready to step from the player's cell."""
    camera_x = 2 * x / WWINDOW - 1
    ray = Ray(
        dir_x=player.dir_x + player.plane_x * camera_x,
        dir_y=player.dir_y + player.plane_y * camera_x,
    )
    ray.delta_dist_x = NO_HIT_DELTA if ray.dir_x == 0 else abs(1 / ray.dir_x)
    ray.delta_dist_y = NO_HIT_DELTA if ray.dir_y == 0 else abs(1 / ray.dir_y)
    ray.map_x = int(player.pos_x)
    ray.map_y = int(player.pos_y)
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (player.pos_x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - player.pos_x) * ray.delta_dist_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (player.pos_y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - player.pos_y) * ray.delta_dist_y
    return ray


def _is_wall_cell(scene: Scene, map_x: int, map_y: int) -> bool:
    if not (0 <= map_y < scene.rows and 0 <= map_x < scene.columns):
        raise ValueError(f"ray left the map at ({map_x}, {map_y})")
    row = scene.grid[map_y]
    return map_x < len(row) and row[map_x] == WALL


def perform_dda(ray: Ray, scene: Scene) -> Ray:
    """Step the ray cell by cell until it reaches a wall; set its perpendicular distance."""
    while True:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
        if _is_wall_cell(scene, ray.map_x, ray.map_y):
            break
    if ray.side == 0:
        ray.perp_wall_dist = ray.side_dist_x - ray.delta_dist_x
    else:
        ray.perp_wall_dist = ray.side_dist_y - ray.delta_dist_y
    return ray


def calculate_wall(ray: Ray, player: Player) -> WallSlice:
    """Screen extent, texture and texture column of the wall the ray hit."""
    half = HWINDOW // 2
    perp = ray.perp_wall_dist
    line_height = _c_int(HWINDOW / perp if perp else math.inf)
    draw_start = max(_c_div(-line_height, 2) + half, 0)
    draw_end = _c_div(line_height, 2) + half
    if draw_end >= HWINDOW:
        draw_end = HWINDOW - 1
    if ray.side == 0:
        tex_num = 2 if ray.step_x < 0 else 3
        wall_x = player.pos_y + perp * ray.dir_y
    else:
        tex_num = 0 if ray.step_y < 0 else 1
        wall_x = player.pos_x + perp * ray.dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * TEX_SIZE)
    if (ray.side == 0 and ray.dir_x > 0) or (ray.side == 1 and ray.dir_y < 0):
        tex_x = TEX_SIZE - tex_x - 1
    return WallSlice(line_height, draw_start, draw_end, tex_num, wall_x, tex_x)


def draw_wall(frame: Frame, x: int, wall: WallSlice, textures: Sequence[Texture]) -> None:
    """Draw the textured wall slice into column ``x`` of ``frame``."""
    if wall.draw_start >= wall.draw_end:
        return
    texture = textures[wall.tex_num]
    step = TEX_SIZE / wall.line_height
    tex_pos = (wall.draw_start - HWINDOW // 2 + _c_div(wall.line_height, 2)) * step
    for y in range(wall.draw_start, wall.draw_end):
        tex_y = int(tex_pos) & (TEX_SIZE - 1)
        tex_pos += step
        frame.put_pixel(x, y, get_color(texture, TEX_SIZE, tex_y, wall.tex_x))


def cast_ray(
    frame: Frame, x: int, player: Player, scene: Scene, textures: Sequence[Texture]
) -> WallSlice:
    """Cast the ray for column ``x``, draw what it hits and return the slice."""
    ray = perform_dda(init_ray(x, player), scene)
    wall = calculate_wall(ray, player)
    draw_wall(frame, x, wall, textures)
    return wall


def clear_frame(frame: Frame, ceiling_color: int, floor_color: int) -> Frame:
    """Paint the upper half with the ceiling colour and the lower half with the floor colour."""
    width = frame.width
    split = (frame.height // 2) * width
    frame.pixels[:split] = [ceiling_color & 0xFFFFFFFF] * split
    frame.pixels[split:] = [floor_color & 0xFFFFFFFF] * (len(frame.pixels) - split)
    return frame


def render_frame(player: Player, scene: Scene, textures: Sequence[Texture]) -> Frame:
    """A full window-sized view from the player's position."""
    frame = clear_frame(Frame(WWINDOW, HWINDOW), scene.ceiling_color, scene.floor_color)
    for x in range(WWINDOW):
        cast_ray(frame, x, player, scene, textures)
    return frame