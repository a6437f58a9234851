"""Screen geometry and shared constants for the game."""

WIDTH = 900
HEIGHT = 900
BITS_PER_PIXEL = 32

BACKGROUND_COLOR = (167, 175, 180)

TILE_SIZE = 32
MAP_COLUMNS = 400
MAP_ROWS = 10

SCREEN_SIZE = (WIDTH, HEIGHT)