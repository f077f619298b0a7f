import pytest

from gbasnake.game import (
    ANIMATION_PERIOD,
    ANIMATION_STEP,
    COLLISION_SIZE,
    MAX_SPEED,
    PLAY_AREA_X_MAX,
    PLAY_AREA_X_MIN,
    PLAY_AREA_Y_MAX,
    PLAY_AREA_Y_MIN,
    START_X,
    START_Y,
    WIN_LENGTH,
    Game,
    Images,
    State,
)
from gbasnake.video import (
    BLUE,
    GREEN,
    HEIGHT,
    MAGENTA,
    RED,
    WHITE,
    WIDTH,
    YELLOW,
    Button,
    Random,
    Screen,
    key_down,
)

INTRO_WIDTH = 16
INTRO_HEIGHT = 8

_ALL = 0
for _button in Button:
    _ALL |= _button


def held(*keys):
    value = _ALL
    for key in keys:
        value &= ~key
    return value


def make_images():
    return Images(
        home=[BLUE] * (WIDTH * HEIGHT),
        end=[RED] * (WIDTH * HEIGHT),
        apple=[MAGENTA] * 64,
        snake_intro=[YELLOW] * (INTRO_WIDTH * INTRO_HEIGHT),
        snake_intro_width=INTRO_WIDTH,
        snake_intro_height=INTRO_HEIGHT,
    )


@pytest.fixture
def game():
    return Game(Screen(), make_images(), Random())


def start_playing(game):
    game.step(held())
    assert game.step(held(Button.START)) is State.PLAY
    game.step(held())


def test_initial_state(game):
    assert game.state is State.START
    assert game.snake.body == [(START_X, START_Y)]
    assert (game.apple.exists, game.apple.x, game.apple.y) == (True, 100, 60)
    assert key_down(Button.START, held(Button.START))


def test_home_screen_drawn_once(game):
    game.step(held())
    assert game.screen.pixel(0, 0) == BLUE
    assert game.screen.vblank_counter == 1
    game.screen.set_pixel(0, 0, GREEN)
    game.step(held())
    assert game.screen.pixel(0, 0) == GREEN


def test_start_enters_play_and_clears_area(game):
    game.step(held())
    assert game.step(held(Button.START)) is State.PLAY
    assert game.screen.pixel(PLAY_AREA_Y_MIN, PLAY_AREA_X_MIN) == WHITE
    assert game.screen.pixel(PLAY_AREA_Y_MAX - 1, PLAY_AREA_X_MAX - 1) == WHITE
    assert game.screen.pixel(0, 0) == BLUE


def test_snake_moves_right_and_erases_tail(game):
    game.step(held())
    game.step(held(Button.START))
    game.step(held())
    assert game.snake.head == (START_X + 1, START_Y)
    assert game.screen.pixel(START_Y, START_X + 1) == GREEN
    assert game.screen.pixel(START_Y, START_X) == WHITE


def test_direction_change_applies_next_frame(game):
    start_playing(game)
    game.step(held(Button.UP))
    before = game.snake.head
    game.step(held())
    assert game.snake.head == (before[0], before[1] - 1)


def test_holding_start_speeds_up_once(game):
    start_playing(game)
    game.step(held(Button.START))
    game.step(held(Button.START))
    assert game.snake.speed == 2


def test_speed_is_capped(game):
    start_playing(game)
    for _ in range(MAX_SPEED + 4):
        game.snake.body = [(100, 80)]
        game.step(held(Button.START))
        game.snake.body = [(100, 80)]
        game.step(held())
    assert game.state is State.PLAY
    assert game.snake.speed == MAX_SPEED


def test_eating_apple_grows_snake(game):
    start_playing(game)
    head_x, head_y = game.snake.head
    game.apple.x, game.apple.y = head_x + 1, head_y
    game.step(held())
    assert game.counter == 1
    assert game.snake.length == 2
    assert game.apple.exists is False
    game.step(held())
    assert game.apple.exists is True
    assert PLAY_AREA_X_MIN <= game.apple.x < PLAY_AREA_X_MAX - COLLISION_SIZE
    assert game.screen.pixel(game.apple.y, game.apple.x) in (MAGENTA, GREEN)


def test_place_apple_stays_in_bounds(game):
    for _ in range(300):
        game.place_apple()
        assert PLAY_AREA_X_MIN <= game.apple.x < PLAY_AREA_X_MAX - COLLISION_SIZE
        assert PLAY_AREA_Y_MIN <= game.apple.y < PLAY_AREA_Y_MAX - COLLISION_SIZE


def test_place_apple_is_deterministic_for_seed():
    first = Game(Screen(), make_images(), Random(7))
    second = Game(Screen(), make_images(), Random(7))
    for _ in range(5):
        first.place_apple()
        second.place_apple()
        assert (first.apple.x, first.apple.y) == (second.apple.x, second.apple.y)


def test_hitting_wall_loses_and_shows_end_screen(game):
    start_playing(game)
    game.counter = 2
    game.snake.body = [(PLAY_AREA_X_MAX - COLLISION_SIZE - 1, START_Y)]
    assert game.step(held()) is State.LOSE
    assert game.snake.body == [(START_X, START_Y)]
    assert game.counter == 2
    game.step(held())
    assert game.screen.pixel(0, 0) == RED
    assert game.draw_screen_end is True
    assert game.counter == 0


def test_select_on_end_screen_returns_home(game):
    start_playing(game)
    game.snake.body = [(PLAY_AREA_X_MAX - COLLISION_SIZE - 1, START_Y)]
    game.step(held())
    game.step(held())
    assert game.step(held(Button.SELECT)) is State.START
    assert game.draw_screen_end is False
    game.step(held())
    assert game.screen.pixel(0, 0) == BLUE


def test_reaching_win_length_wins(game):
    start_playing(game)
    game.snake.body = [(100, START_Y)] * (WIN_LENGTH - 1)
    game.apple.x, game.apple.y = 101, START_Y
    assert game.step(held()) is State.WIN
    assert game.snake.length == WIN_LENGTH
    game.step(held())
    assert game.state is State.WIN
    assert game.snake.length == 1
    assert game.counter == 0
    assert game.screen.pixel(0, 0) == RED


def test_select_during_play_returns_home(game):
    start_playing(game)
    game.counter = 3
    assert game.step(held(Button.SELECT)) is State.START
    assert game.counter == 0
    assert game.draw_screen_home is False


def test_title_animation_slides(game):
    game.step(held())
    game.animation.fps_counter = ANIMATION_PERIOD
    game.step(held())
    assert game.animation.position == ANIMATION_STEP
    assert game.animation.old_x == 0
    assert game.animation.fps_counter == 0
    assert game.screen.pixel(0, 0) == YELLOW
    assert game.screen.pixel(INTRO_HEIGHT, 0) == BLUE
    game.animation.fps_counter = ANIMATION_PERIOD
    game.step(held())
    assert game.animation.position == 2 * ANIMATION_STEP
    assert game.animation.old_x == ANIMATION_STEP
    assert game.screen.pixel(0, 0) == BLUE
    assert game.screen.pixel(0, ANIMATION_STEP) == YELLOW


def test_title_animation_wraps(game):
    game.step(held())
    game.animation.position = WIDTH - INTRO_HEIGHT - 2
    game.animation.fps_counter = ANIMATION_PERIOD
    game.step(held())
    assert game.animation.position == 0


def test_frame_counter_increments_between_slides(game):
    start = game.animation.fps_counter
    game.step(held())
    game.step(held())
    assert game.animation.fps_counter == start + 2


def test_clear_resets_snake_and_animation(game):
    game.snake.body = [(90, 90), (91, 90)]
    game.snake.speed = 5
    game.snake.speed_x, game.snake.speed_y = 0, -1
    game.animation.position = 40
    game.animation.old_x = 30
    game.clear()
    assert game.snake.body == [(START_X, START_Y)]
    assert (game.snake.speed, game.snake.speed_x, game.snake.speed_y) == (1, 1, 0)
    assert (game.animation.position, game.animation.old_x, game.animation.fps_counter) == (0, 0, 0)


def test_images_reject_short_pictures():
    with pytest.raises(ValueError):
        Images(
            home=[BLUE] * 10,
            end=[RED] * (WIDTH * HEIGHT),
            apple=[MAGENTA] * 64,
            snake_intro=[YELLOW] * (INTRO_WIDTH * INTRO_HEIGHT),
            snake_intro_width=INTRO_WIDTH,
            snake_intro_height=INTRO_HEIGHT,
        )