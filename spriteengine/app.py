"""The game window and its main loop."""

from __future__ import annotations

import argparse
import os
import time

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .errors import EngineError  # noqa: E402
from .game_scene import GameScene, Key  # noqa: E402
from .log import DEFAULT_ERROR_LOG, destroy, initialize, log, log_error  # noqa: E402
from .resource_manager import destroy_instance  # noqa: E402

WINDOW_TITLE = "sprite engine main window"

KEY_CODES = {
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.UP: pygame.K_UP,
    Key.DOWN: pygame.K_DOWN,
    Key.A: pygame.K_a,
    Key.D: pygame.K_d,
    Key.W: pygame.K_w,
    Key.S: pygame.K_s,
    Key.SPACE: pygame.K_SPACE,
    Key.G: pygame.K_g,
    Key.ESCAPE: pygame.K_ESCAPE,
}


def _is_down(state, code: int) -> bool:
    try:
        return bool(state[code])
    except (KeyError, IndexError):
        return False


def pressed_keys(state) -> frozenset[Key]:
    """The game keys held down in a pygame key-state lookup."""
    return frozenset(key for key, code in KEY_CODES.items() if _is_down(state, code))


def run(width: int = 800, height: int = 600, max_frames: int | None = None) -> int:
    """Open the window and play until closed; return the number of frames drawn."""
    pygame.init()
    frames = 0
    try:
        try:
            screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise EngineError(f"Could not open the game window: {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        log("Display driver: ", pygame.display.get_driver())
        log("pygame version: ", pygame.version.ver)

        with GameScene(width, height) as scene:
            last = time.perf_counter()
            while not scene.should_close and (max_frames is None or frames < max_frames):
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        scene.should_close = True
                now = time.perf_counter()
                elapsed = now - last
                last = now
                if elapsed > 0:
                    scene.update(elapsed, pressed_keys(pygame.key.get_pressed()))
                screen.fill((0, 0, 0))
                scene.render(screen)
                pygame.display.flip()
                frames += 1
    finally:
        destroy_instance()
        pygame.quit()
    return frames


def main(argv: list[str] | None = None) -> int:
    """Run the game; engine errors are written to the error log."""
    parser = argparse.ArgumentParser(description="Play the side-scrolling sprite game.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    parser.add_argument("--log", default=DEFAULT_ERROR_LOG, help="error log file")
    args = parser.parse_args(argv)

    initialize(args.log)
    try:
        run(args.width, args.height, args.frames)
    except EngineError as exc:
        log_error(exc)
    finally:
        destroy()
    return 0