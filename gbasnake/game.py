"""The snake game's state machine, advanced one frame per step."""

from __future__ import annotations

import enum
import functools
import operator
from collections.abc import Sequence
from dataclasses import dataclass, field

from gbasnake.video import (
    BLACK,
    GREEN,
    HEIGHT,
    WHITE,
    WIDTH,
    Button,
    Random,
    Screen,
    key_just_pressed,
)

PLAY_AREA_X_MIN = 66
PLAY_AREA_Y_MIN = 16
PLAY_AREA_X_MAX = 194
PLAY_AREA_Y_MAX = 144

START_X = 80
START_Y = 60
SEGMENT_SIZE = 8
COLLISION_SIZE = 8
MAX_SPEED = 8
WIN_LENGTH = 31
ANIMATION_PERIOD = 180
ANIMATION_STEP = 10

ALL_RELEASED = int(functools.reduce(operator.or_, Button))


class State(enum.Enum):
    """Screens the game can be showing."""

    START = enum.auto()
    PLAY = enum.auto()
    WIN = enum.auto()
    LOSE = enum.auto()


def _start_body() -> list[tuple[int, int]]:
    return [(START_X, START_Y)]


@dataclass
class Snake:
    """Segments as (x, y) top-left corners, head first, and the direction of travel."""

    body: list[tuple[int, int]] = field(default_factory=_start_body)
    size: int = SEGMENT_SIZE
    speed_x: int = 1
    speed_y: int = 0
    speed: int = 1

    @property
    def length(self) -> int:
        return len(self.body)

    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]


@dataclass
class Apple:
    """Position of the apple and whether it is currently on the board."""

    exists: bool = True
    x: int = 100
    y: int = 60


@dataclass
class Animation:
    """Progress of the sliding picture on the title screen."""

    fps_counter: int = 1
    position: int = 0
    old_x: int = 0
    old_y: int = 0


@dataclass
class Images:
    """Pictures the game draws; ``home`` and ``end`` cover the whole screen."""

    home: Sequence[int]
    end: Sequence[int]
    apple: Sequence[int]
    snake_intro: Sequence[int]
    snake_intro_width: int
    snake_intro_height: int
    apple_width: int = 8
    apple_height: int = 8

    def __post_init__(self) -> None:
        needed = {
            "home": (self.home, WIDTH * HEIGHT),
            "end": (self.end, WIDTH * HEIGHT),
            "apple": (self.apple, self.apple_width * self.apple_height),
            "snake_intro": (self.snake_intro, self.snake_intro_width * self.snake_intro_height),
        }
        for name, (pixels, count) in needed.items():
            if len(pixels) < count:
                raise ValueError(f"{name} image holds {len(pixels)} pixels, need {count}")


class Game:
    """Title screen, play field and end screens driven by one button state per frame."""

    def __init__(self, screen: Screen, images: Images, rng: Random | None = None) -> None:
        self.screen = screen
        self.images = images
        self.rng = rng if rng is not None else Random()
        self.state = State.START
        self.snake = Snake()
        self.apple = Apple()
        self.animation = Animation()
        self.draw_screen_home = False
        self.draw_screen_end = False
        self.counter = 0
        self.previous_buttons = ALL_RELEASED

    def place_apple(self) -> None:
        """Move the apple to a random spot inside the play area."""
        self.apple.x = self.rng.randint(PLAY_AREA_X_MIN, PLAY_AREA_X_MAX - COLLISION_SIZE)
        self.apple.y = self.rng.randint(PLAY_AREA_Y_MIN, PLAY_AREA_Y_MAX - COLLISION_SIZE)

    def clear(self) -> None:
        """Reset the snake and the title animation to their starting values."""
        self.animation.position = 0
        self.animation.old_x = 0
        self.animation.fps_counter = 0
        self.snake.body = _start_body()
        self.snake.speed = 1
        self.snake.speed_x = 1
        self.snake.speed_y = 0

    def step(self, buttons: int) -> State:
        """Run one frame with the active-low ``buttons`` state; return the new state."""
        handlers = {
            State.START: self._step_start,
            State.PLAY: self._step_play,
            State.WIN: lambda b: self._step_end(b, "CONGRATULATIONS, YOU WIN", 30),
            State.LOSE: lambda b: self._step_end(b, "BETTER LUCK NEXT TIME", 40),
        }
        handlers[self.state](buttons)
        self.previous_buttons = buttons
        return self.state

    def _pressed(self, key: Button, buttons: int) -> bool:
        return key_just_pressed(key, buttons, self.previous_buttons)

    def _step_start(self, buttons: int) -> None:
        screen = self.screen
        screen.wait_for_vblank()
        if not self.draw_screen_home:
            screen.draw_image(0, 0, WIDTH, HEIGHT, self.images.home)
            screen.draw_string(150, 45, "Press SELECT to Speed Up Snake", BLACK)
            self.draw_screen_home = True

        if self._pressed(Button.START, buttons):
            self.clear()
            screen.draw_rect(
                PLAY_AREA_Y_MIN,
                PLAY_AREA_X_MIN,
                PLAY_AREA_X_MAX - PLAY_AREA_X_MIN,
                PLAY_AREA_Y_MAX - PLAY_AREA_Y_MIN,
                WHITE,
            )
            self.state = State.PLAY
            return

        anim = self.animation
        if anim.fps_counter == ANIMATION_PERIOD:
            images = self.images
            width, height = images.snake_intro_width, images.snake_intro_height
            screen.undraw_image(0, anim.old_x, width, height, images.home)
            screen.draw_image(0, anim.position, width, height, images.snake_intro)
            anim.old_x = anim.position
            anim.position += ANIMATION_STEP
            if anim.position > WIDTH - height:
                anim.position = 0
            anim.fps_counter = 0
        else:
            anim.fps_counter += 1

    def _step_play(self, buttons: int) -> None:
        screen = self.screen
        snake = self.snake
        apple = self.apple
        images = self.images
        screen.wait_for_vblank()

        if self._pressed(Button.SELECT, buttons):
            self.draw_screen_home = False
            self.clear()
            self.counter = 0
            self.state = State.START

        if self._pressed(Button.START, buttons):
            if snake.speed < MAX_SPEED:
                snake.speed += 1
            screen.draw_rect(90, 4, 50, 8, BLACK)
            screen.draw_string(90, 4, f"Speed:{snake.speed}", WHITE)

        if not apple.exists:
            old_x, old_y = apple.x, apple.y
            self.place_apple()
            screen.draw_rect(old_y, old_x, images.apple_width, images.apple_height, WHITE)
            apple.exists = True
        screen.draw_image(apple.y, apple.x, images.apple_width, images.apple_height, images.apple)

        tail_x, tail_y = snake.body[-1]
        head_x, head_y = snake.head
        new_head = (head_x + snake.speed * snake.speed_x, head_y + snake.speed * snake.speed_y)
        snake.body = [new_head, *snake.body[:-1]]
        screen.draw_rect(tail_y, tail_x, snake.size, snake.size, WHITE)

        for x, y in snake.body:
            screen.draw_rect(y, x, snake.size, snake.size, GREEN)

        x, y = snake.head
        if (
            x < apple.x + COLLISION_SIZE
            and x + COLLISION_SIZE > apple.x
            and y < apple.y + COLLISION_SIZE
            and y + COLLISION_SIZE > apple.y
        ):
            apple.exists = False
            self.counter += 1
            screen.draw_rect(56, 1, 60, 8, BLACK)
            screen.draw_string(56, 2, f"Apples:{self.counter}", WHITE)
            snake.body.append(snake.body[-1])

        directions = (
            (Button.RIGHT, 1, 0),
            (Button.LEFT, -1, 0),
            (Button.UP, 0, -1),
            (Button.DOWN, 0, 1),
        )
        for key, dx, dy in directions:
            if self._pressed(key, buttons):
                snake.speed_x, snake.speed_y = dx, dy

        x, y = snake.head
        if (
            x <= PLAY_AREA_X_MIN
            or x + COLLISION_SIZE >= PLAY_AREA_X_MAX
            or y <= PLAY_AREA_Y_MIN
            or y + COLLISION_SIZE >= PLAY_AREA_Y_MAX
        ):
            self.clear()
            self.state = State.LOSE

        if snake.length == WIN_LENGTH:
            self.state = State.WIN

    def _step_end(self, buttons: int, message: str, col: int) -> None:
        screen = self.screen
        screen.wait_for_vblank()
        if not self.draw_screen_end:
            screen.wait_for_vblank()
            screen.draw_image(0, 0, WIDTH, HEIGHT, self.images.end)
            screen.draw_string(80, col, message, BLACK)
            screen.draw_string(90, col, f"Score:{self.counter}", WHITE)
            self.counter = 0
            self.draw_screen_end = True
            self.clear()

        if self._pressed(Button.SELECT, buttons):
            self.counter = 0
            self.draw_screen_end = False
            self.draw_screen_home = False
            self.clear()
            self.state = State.START