"""Window, keyboard and frame loop for playing the game."""

from __future__ import annotations

import argparse
import functools
import os
from collections.abc import Collection, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from gbasnake.game import ALL_RELEASED, Game, Images  # noqa: E402
from gbasnake.video import (  # noqa: E402
    GREEN,
    HEIGHT,
    RED,
    WHITE,
    WIDTH,
    YELLOW,
    Button,
    Random,
    Screen,
    color,
)

FPS = 60

_KEYMAP: dict[int, Button] = {
    pygame.K_z: Button.A,
    pygame.K_x: Button.B,
    pygame.K_BACKSPACE: Button.SELECT,
    pygame.K_RETURN: Button.START,
    pygame.K_RIGHT: Button.RIGHT,
    pygame.K_LEFT: Button.LEFT,
    pygame.K_UP: Button.UP,
    pygame.K_DOWN: Button.DOWN,
    pygame.K_s: Button.R,
    pygame.K_a: Button.L,
}


def buttons_from_keys(pressed: Collection[int]) -> int:
    """Turn a collection of held keyboard key codes into an active-low button state."""
    value = ALL_RELEASED
    for key, button in _KEYMAP.items():
        if key in pressed:
            value &= ~button
    return value


def to_rgb(value: int) -> tuple[int, int, int]:
    """Expand a 15-bit colour into 8-bit red, green and blue."""
    return tuple(((value >> shift) & 31) * 255 // 31 for shift in (0, 5, 10))


@functools.lru_cache(maxsize=None)
def _rgb_bytes(value: int) -> bytes:
    return bytes(to_rgb(value))


def _picture(screen: Screen, width: int = WIDTH, height: int = HEIGHT) -> list[int]:
    return [p for row in list(screen.rows())[:height] for p in row[:width]]


def _default_images() -> Images:
    home = Screen()
    home.fill(color(2, 10, 4))
    home.draw_centered_string(40, 0, WIDTH, 8, "SNAKE", WHITE)
    home.draw_centered_string(120, 0, WIDTH, 8, "Press START to play", YELLOW)

    end = Screen()
    end.fill(color(10, 2, 2))

    apple = [
        GREEN if row == 0 and col in (3, 4) else RED
        for row in range(8)
        for col in range(8)
    ]

    intro_width, intro_height = 32, 12
    dark = color(0, 20, 0)
    intro = [
        dark if ((row + col) // 4) % 2 else GREEN
        for row in range(intro_height)
        for col in range(intro_width)
    ]
    return Images(
        home=_picture(home),
        end=_picture(end),
        apple=apple,
        snake_intro=intro,
        snake_intro_width=intro_width,
        snake_intro_height=intro_height,
    )


def _present(window: pygame.Surface, screen: Screen) -> None:
    data = b"".join(_rgb_bytes(p) for row in screen.rows() for p in row)
    frame = pygame.image.frombuffer(data, (WIDTH, HEIGHT), "RGB")
    window.blit(pygame.transform.scale(frame, window.get_size()), (0, 0))
    pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and play until it is closed or the frame limit is reached."""
    parser = argparse.ArgumentParser(prog="gbasnake", description="Play snake.")
    parser.add_argument("--scale", type=int, default=3, help="window magnification")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    if args.scale < 1:
        parser.error("--scale must be at least 1")

    pygame.display.init()
    try:
        window = pygame.display.set_mode((WIDTH * args.scale, HEIGHT * args.scale))
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()
        screen = Screen()
        game = Game(screen, _default_images(), Random())
        frame = 0
        while args.frames is None or frame < args.frames:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            keys = pygame.key.get_pressed()
            held = {key for key in _KEYMAP if keys[key]}
            game.step(buttons_from_keys(held))
            _present(window, screen)
            clock.tick(FPS)
            frame += 1
    finally:
        pygame.display.quit()
    return 0