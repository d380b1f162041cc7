import pytest

from cubed.player import Player, init_player
from cubed.raycast import (
    HWINDOW,
    NO_HIT_DELTA,
    TEX_SIZE,
    WWINDOW,
    Frame,
    Ray,
    Texture,
    calculate_wall,
    cast_ray,
    clear_frame,
    draw_wall,
    get_color,
    init_ray,
    perform_dda,
    render_frame,
)
from cubed.scene import Scene, parse_scene

MAP = [
    "1111111",
    "1000001",
    "1000001",
    "1000001",
    "100N001",
    "1111111",
]


def make_scene():
    lines = ["F 10,20,30\n", "C 40,50,60\n"] + [row + "\n" for row in MAP]
    return parse_scene(lines)


def make_textures():
    return [
        Texture(TEX_SIZE, TEX_SIZE, bytes([index + 1, 0, 0, 255]) * (TEX_SIZE * TEX_SIZE))
        for index in range(4)
    ]


@pytest.fixture(scope="module")
def rendered():
    scene = make_scene()
    player = init_player(scene)
    textures = make_textures()
    return scene, textures, render_frame(player, scene, textures)


def test_get_color_packs_rgba():
    texture = Texture(1, 1, bytes([1, 2, 3, 4]))
    assert get_color(texture, 1, 0, 0) == 0x01020304


def test_get_color_outside_texture():
    texture = Texture(1, 1, bytes([1, 2, 3, 4]))
    with pytest.raises(IndexError):
        get_color(texture, 1, 0, 1)
    with pytest.raises(IndexError):
        get_color(texture, 1, -1, 0)


def test_texture_size_mismatch():
    with pytest.raises(ValueError):
        Texture(2, 2, bytes(4))


def test_frame_round_trip_and_bytes():
    frame = Frame(2, 2)
    frame.put_pixel(0, 0, 0x11223344)
    assert frame.get_pixel(0, 0) == 0x11223344
    assert frame.rgba_bytes()[:4] == bytes([0x11, 0x22, 0x33, 0x44])
    assert len(frame.rgba_bytes()) == 2 * 2 * 4


def test_frame_bounds():
    frame = Frame(2, 2)
    with pytest.raises(IndexError):
        frame.put_pixel(2, 0, 1)
    with pytest.raises(IndexError):
        frame.get_pixel(0, -1)


def test_clear_frame_halves():
    frame = clear_frame(Frame(4, 4), 7, 9)
    assert [frame.get_pixel(x, y) for y in (0, 1) for x in range(4)] == [7] * 8
    assert [frame.get_pixel(x, y) for y in (2, 3) for x in range(4)] == [9] * 8


def test_init_ray_center_column():
    player = init_player(make_scene())
    ray = init_ray(WWINDOW // 2, player)
    assert ray.dir_x == player.dir_x
    assert ray.dir_y == player.dir_y
    assert ray.delta_dist_x == NO_HIT_DELTA
    assert ray.delta_dist_y == abs(1 / player.dir_y)
    assert (ray.map_x, ray.map_y) == (int(player.pos_x), int(player.pos_y))
    assert ray.step_y == -1
    assert ray.side_dist_y == 0.0


def test_init_ray_left_edge():
    player = init_player(make_scene())
    ray = init_ray(0, player)
    assert ray.dir_x == pytest.approx(-player.plane_x)
    assert ray.step_x == -1
    assert ray.delta_dist_x == pytest.approx(1 / player.plane_x)


def test_perform_dda_hits_wall():
    scene = make_scene()
    player = init_player(scene)
    ray = perform_dda(init_ray(WWINDOW // 2, player), scene)
    assert scene.grid[ray.map_y][ray.map_x] == "1"
    assert ray.side == 1
    assert ray.perp_wall_dist == pytest.approx(3.0)


def test_perform_dda_leaving_map_raises():
    scene = Scene(grid=["000", "000"])
    player = Player(pos_x=1.5, pos_y=1.5, dir_x=0.0, dir_y=-1.0, plane_x=0.66)
    with pytest.raises(ValueError):
        perform_dda(init_ray(WWINDOW // 2, player), scene)


def test_calculate_wall_center():
    scene = make_scene()
    player = init_player(scene)
    ray = perform_dda(init_ray(WWINDOW // 2, player), scene)
    wall = calculate_wall(ray, player)
    assert wall.line_height == int(HWINDOW / ray.perp_wall_dist)
    assert wall.draw_start == HWINDOW // 2 - wall.line_height // 2
    assert wall.draw_end == HWINDOW // 2 + wall.line_height // 2
    assert wall.tex_num == 0
    assert 0 <= wall.tex_x < TEX_SIZE
    assert 0.0 <= wall.wall_x < 1.0


def test_calculate_wall_clamps_close_wall():
    player = Player(pos_x=2.0, pos_y=4.0)
    ray = Ray(dir_x=1.0, dir_y=0.0, step_x=1, side=0, perp_wall_dist=0.5)
    wall = calculate_wall(ray, player)
    assert wall.draw_start == 0
    assert wall.draw_end == HWINDOW - 1
    assert wall.tex_num == 3
    assert wall.tex_x == TEX_SIZE - 1


def test_zero_distance_draws_nothing():
    player = Player(pos_x=3.0, pos_y=4.0)
    ray = Ray(dir_x=-1.0, step_x=-1, side=0, perp_wall_dist=0.0)
    wall = calculate_wall(ray, player)
    assert wall.draw_start >= wall.draw_end
    frame = clear_frame(Frame(), 1, 2)
    before = list(frame.pixels)
    draw_wall(frame, 0, wall, make_textures())
    assert frame.pixels == before


def test_draw_wall_fills_only_its_rows():
    scene = make_scene()
    player = init_player(scene)
    textures = make_textures()
    frame = clear_frame(Frame(), scene.ceiling_color, scene.floor_color)
    wall = cast_ray(frame, WWINDOW // 2, player, scene, textures)
    x = WWINDOW // 2
    wall_color = get_color(textures[wall.tex_num], TEX_SIZE, 0, 0)
    column = [frame.get_pixel(x, y) for y in range(wall.draw_start, wall.draw_end)]
    assert column == [wall_color] * (wall.draw_end - wall.draw_start)
    assert frame.get_pixel(x, wall.draw_start - 1) == scene.ceiling_color
    assert frame.get_pixel(x, wall.draw_end) == scene.floor_color


def test_render_frame_layout(rendered):
    scene, textures, frame = rendered
    assert (frame.width, frame.height) == (WWINDOW, HWINDOW)
    center = WWINDOW // 2
    assert frame.get_pixel(center, 0) == scene.ceiling_color
    assert frame.get_pixel(center, HWINDOW - 1) == scene.floor_color
    assert frame.get_pixel(center, HWINDOW // 2) == get_color(textures[0], TEX_SIZE, 0, 0)