"""World constants. Row 0 is the top; y grows downward."""

from world.color import hex_to_rgb

# Canvas background; vacated cells take this color so they blend with the clear.
CLEAR_HEX = "#0d1117"
CLEAR_COLOR = hex_to_rgb(CLEAR_HEX)

DEFAULT_WIDTH, DEFAULT_HEIGHT = 200, 150
MIN_GRID_CELLS = 50

BRUSH_MIN, BRUSH_MAX = 1, 10

# Gas rise rows per tick = floor(|weight| * RISE_SCALE).
RISE_SCALE = 10
