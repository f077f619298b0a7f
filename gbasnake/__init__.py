"""A snake arcade game with a 6x8 bitmap font on a simulated 240x160 screen."""

__version__ = "0.1.0"
__all__ = ["glyphs_low", "glyphs_high", "font", "video", "game", "app"]