"""Window, textures, main loop and the command that starts the game."""

import os
import sys
from typing import List, Mapping, Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from cubed.player import InputState, init_player  # noqa: E402
from cubed.raycast import HWINDOW, WWINDOW, Frame, Texture, render_frame  # noqa: E402
from cubed.scene import Scene, SceneError, check_input, load_scene  # noqa: E402

TITLE = "Cub3D"
FRAME_RATE = 60

_CLEAR = "\033[H\033[J"
_RESET = "\033[0m"
_START_BANNER = (
    " ██████╗  █████╗ ███╗   ███╗███████╗   ██████╗ ███╗   ██╗\n"
    "██╔════╝ ██╔══██╗████╗ ████║██╔════╝  ██╔═══██╗████╗  ██║\n"
    "██║  ███╗███████║██╔████╔██║█████╗    ██║   ██║██╔██╗ ██║\n"
    "██║   ██║██╔══██║██║╚██╔╝██║██╔══╝    ██║   ██║██║╚██╗██║\n"
    "╚██████╔╝██║  ██║██║ ╚═╝ ██║███████╗  ╚██████╔╝██║ ╚████║\n"
    " ╚═════╝ ╚═╝  ╚═╝╚═╝     ╚═╝╚══════╝   ╚═════╝ ╚═╝  ╚═══╝\n"
)
_END_BANNER = (
    " ██████╗  █████╗ ███╗   ███╗███████╗   ██████╗ ███████╗███████╗\n"
    "██╔════╝ ██╔══██╗████╗ ████║██╔════╝  ██╔═══██╗██╔════╝██╔════╝\n"
    "██║  ███╗███████║██╔████╔██║█████╗    ██║   ██║█████╗  █████╗  \n"
    "██║   ██║██╔══██║██║╚██╔╝██║██╔══╝    ██║   ██║██╔══╝  ██╔══╝  \n"
    "╚██████╔╝██║  ██║██║ ╚═╝ ██║███████╗  ╚██████╔╝██║     ██║     \n"
    " ╚═════╝ ╚═╝  ╚═╝╚═╝     ╚═╝╚══════╝   ╚═════╝ ╚═╝     ╚═╝     \n"
)


def _print_banner(color: str, banner: str) -> None:
    sys.stdout.write(f"{_CLEAR}\n{color}{banner}{_RESET}")
    sys.stdout.flush()


def print_start() -> None:
    """Clear the terminal and show the opening banner in green."""
    _print_banner("\033[32m", _START_BANNER)


def print_end() -> None:
    """Clear the terminal and show the closing banner in red."""
    _print_banner("\033[91m", _END_BANNER)


def load_texture(path: Optional[str]) -> Texture:
    """Load an image file as an RGBA texture."""
    if path is None:
        raise SceneError("Failed to load texture: None")
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        raise SceneError(f"Failed to load texture: {path}") from exc
    width, height = surface.get_size()
    return Texture(width, height, pygame.image.tostring(surface, "RGBA"))


def load_textures(scene: Scene) -> List[Texture]:
    """The scene's wall textures in the order north, south, west, east."""
    return [load_texture(path) for path in scene.texture_paths]


class Game:
    """A scene, its wall textures and the player moving through it."""

    def __init__(self, scene: Scene, textures: Sequence[Texture]) -> None:
        if len(textures) != 4:
            raise ValueError("exactly four wall textures are needed")
        self.scene = scene
        self.textures = list(textures)
        self.player = init_player(scene)
        self.frame: Optional[Frame] = None

    def handle_input(self, pressed: Mapping[int, bool]) -> InputState:
        """Controls held down, read from a key-code to pressed lookup."""
        return InputState(
            forward=bool(pressed[pygame.K_w]),
            backward=bool(pressed[pygame.K_s]),
            strafe_left=bool(pressed[pygame.K_a]),
            strafe_right=bool(pressed[pygame.K_d]),
            rotate_left=bool(pressed[pygame.K_RIGHT]),
            rotate_right=bool(pressed[pygame.K_LEFT]),
        )

    def step(self, inputs: InputState) -> Frame:
        """Advance the player one frame and render the new view."""
        self.player.update(self.scene, inputs)
        self.frame = render_frame(self.player, self.scene, self.textures)
        return self.frame

    def run(self) -> None:
        """Open the window and play until it is closed or Escape is pressed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WWINDOW, HWINDOW))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT or (
                        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                    ):
                        running = False
                if not running:
                    break
                frame = self.step(self.handle_input(pygame.key.get_pressed()))
                image = pygame.image.frombuffer(
                    frame.rgba_bytes(), (frame.width, frame.height), "RGBA"
                )
                screen.blit(image, (0, 0))
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the scene file named on the command line; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    print_start()
    try:
        scene = load_scene(check_input(list(argv)))
        game = Game(scene, load_textures(scene))
    except SceneError as exc:
        print(f"Error: {exc}")
        return 1
    game.run()
    print_end()
    return 0


if __name__ == "__main__":
    sys.exit(main())