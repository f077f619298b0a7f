import pygame
import pytest

from gbasnake.app import buttons_from_keys, main, to_rgb
from gbasnake.video import BLACK, RED, WHITE, Button, color, key_down


def test_no_keys_means_all_released():
    state = buttons_from_keys(set())
    assert not any(key_down(button, state) for button in Button)


def test_return_key_holds_start_only():
    state = buttons_from_keys({pygame.K_RETURN})
    assert key_down(Button.START, state)
    assert [b for b in Button if key_down(b, state)] == [Button.START]


@pytest.mark.parametrize(
    "key, button",
    [
        (pygame.K_UP, Button.UP),
        (pygame.K_DOWN, Button.DOWN),
        (pygame.K_LEFT, Button.LEFT),
        (pygame.K_RIGHT, Button.RIGHT),
        (pygame.K_BACKSPACE, Button.SELECT),
    ],
)
def test_direction_and_select_keys(key, button):
    assert key_down(button, buttons_from_keys({key}))


def test_several_keys_held_together():
    state = buttons_from_keys({pygame.K_UP, pygame.K_RETURN})
    assert key_down(Button.UP, state) and key_down(Button.START, state)
    assert not key_down(Button.DOWN, state)


def test_to_rgb_extremes():
    assert to_rgb(WHITE) == (255, 255, 255)
    assert to_rgb(BLACK) == (0, 0, 0)
    assert to_rgb(RED) == (255, 0, 0)
    assert to_rgb(color(0, 31, 0)) == (0, 255, 0)


def test_to_rgb_is_monotonic_per_channel():
    reds = [to_rgb(color(level, 0, 0))[0] for level in range(32)]
    assert reds == sorted(reds)
    assert len(set(reds)) == 32


def test_main_runs_headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    assert main(["--frames", "3", "--scale", "1"]) == 0


def test_main_rejects_bad_scale():
    with pytest.raises(SystemExit):
        main(["--scale", "0"])