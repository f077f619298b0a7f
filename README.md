# gbasnake

A small snake game on a simulated 240×160 handheld screen with 15-bit
colour. The game is shown in a pygame window.

## Installing

```
pip install .
```

## Playing

```
gbasnake
```

Options:

- `--scale N`: window magnification. The default is 3 and the value must be at least 1.
- `--frames N`: stop after N frames. With no value the game runs until the window is closed.

The game runs at 60 frames a second. It opens on a title screen. The
handheld's buttons are mapped to these keyboard keys:

| Key        | Button | Effect |
| ---------- | ------ | ------ |
| Enter      | START  | On the title screen, start a game. While playing, raise the snake's speed, up to 8. |
| Backspace  | SELECT | Return to the title screen from a game or from an end screen. |
| Arrow keys | RIGHT, LEFT, UP, DOWN | Steer the snake. |
| Z, X       | A, B   | Mapped, but the game does not use them. |
| A, S       | L, R   | Mapped, but the game does not use them. |

Each apple you eat makes the snake longer. The game ends in a loss if the
snake's head touches the edge of the play area. It ends in a win when the
snake reaches a length of 31. Your score is the number of apples eaten, and
the end screen shows it.

## What it does not do

- It does not load pictures from files. The title screen, the end screen,
  the apple and the sliding title-screen strip are simple images that the
  program builds itself.
- It has no sound. It keeps no high scores and saves nothing.
- The snake cannot collide with itself. Only the edge of the play area
  ends a game.

## Library use

You can also use the modules directly:

- `gbasnake.font`: `glyph_rows(code)` returns the 6×8 bitmap of a character
  code from 0 to 255, or of a single character, as eight rows of six 0/1
  pixels. `glyph_pixel(code, row, col)` tells you whether one pixel of that
  bitmap is set. The bitmaps are stored in `gbasnake.glyphs_low`
  (`low_glyph`) and `gbasnake.glyphs_high` (`high_glyph`).
- `gbasnake.video`:
  - `Screen` is an in-memory 240×160 buffer of 16-bit pixels. It provides
    `pixel`, `set_pixel`, `draw_rect`, `draw_image`,
    `draw_full_screen_image`, `undraw_image`, `fill`, `draw_char`,
    `draw_string`, `draw_centered_string`, `rows` and `wait_for_vblank`.
    `wait_for_vblank` only increments `vblank_counter`.
  - `color(r, g, b)` packs 5-bit red, green and blue values into one 15-bit
    colour.
  - `Button` holds the button bits. Button states are active-low: a cleared
    bit means the button is held. `key_down` and `key_just_pressed` decode
    these states.
  - `Random(seed=42)` is a linear congruential generator with `next()` and
    `randint(low, high)`.
- `gbasnake.game`:
  - `Game(screen, images, rng)` is the title / play / win / lose state
    machine. `step(buttons)` advances it by one frame, draws onto the
    screen and returns the new `State`.
  - `Images` holds the pictures the game draws.
  - `Snake`, `Apple` and `Animation` hold the game's state.
- `gbasnake.app`:
  - `buttons_from_keys(pressed)` turns a set of pygame key codes into a
    button state.
  - `to_rgb(value)` expands a 15-bit colour into 8-bit RGB.
  - `main(argv=None)` is the `gbasnake` command.

## Running the tests

```
pip install .[test]
pytest
```