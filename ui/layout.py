"""Window -> grid dimensioning. The grid fills the window left of the sidebar in whole cells."""

from world.constants import MIN_GRID_CELLS


def grid_size_for_window(
    window_w: int, window_h: int, pixel_size: int, sidebar_width: int, fill: float = 1.0
) -> tuple[int, int]:
    """(columns, rows) for a window; `fill` is the usable fraction of the window. Never below MIN_GRID_CELLS."""
    px = max(1, pixel_size)
    cols = int((window_w * fill - sidebar_width) // px)
    rows = int((window_h * fill) // px)
    return max(MIN_GRID_CELLS, cols), max(MIN_GRID_CELLS, rows)


def min_window_size(pixel_size: int, sidebar_width: int) -> tuple[int, int]:
    """Smallest window that shows a minimum-size grid without clipping."""
    side = MIN_GRID_CELLS * max(1, pixel_size)
    return side + sidebar_width, side


def screen_to_cell(pos: tuple[int, int], origin: tuple[int, int], pixel_size: int) -> tuple[int, int]:
    """Pointer position -> grid cell (may be outside the grid; painting tolerates that)."""
    px = max(1, pixel_size)
    return (pos[0] - origin[0]) // px, (pos[1] - origin[1]) // px
