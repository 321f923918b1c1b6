"""
Per-tick cell transitions: cohesion, straight fall, diagonal flow, then buoyancy.
Rows are scanned bottom to top; columns left to right on even frames and right to left on odd
frames, and the diagonal preference flips with them. The tick works on a copy ("next") of the
grid and every occupancy test reads that copy, so a cell moved earlier in the tick blocks cells
processed after it.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from world.constants import CLEAR_COLOR
from world.grid import Grid
from world.materials import FALL_LIMIT, MOVABLE, RISE_LIMIT, SELF_STICKY, STICKINESS, MaterialId

EMPTY = int(MaterialId.EMPTY)


def _is_supported(mat: np.ndarray, x: int, y: int, m: int, width: int, height: int) -> bool:
    """Self-sticky support: something below, or a same-material side neighbor that has something below it."""
    below = y + 1
    if below >= height:
        return False
    if mat[below, x] != EMPTY:
        return True
    if x > 0 and mat[y, x - 1] == m and mat[below, x - 1] != EMPTY:
        return True
    if x < width - 1 and mat[y, x + 1] == m and mat[below, x + 1] != EMPTY:
        return True
    return False


def _fall_distance(mat: np.ndarray, x: int, y: int, limit: int, height: int) -> int:
    """Rows the cell can drop straight down, up to limit; 0 if the cell below is taken."""
    dist = 0
    for i in range(1, limit + 1):
        if y + i < height and mat[y + i, x] == EMPTY:
            dist = i
        else:
            break
    return dist


def _rise_distance(mat: np.ndarray, x: int, y: int, limit: int) -> int:
    dist = 0
    for i in range(1, limit + 1):
        if y - i >= 0 and mat[y - i, x] == EMPTY:
            dist = i
        else:
            break
    return dist


def _diagonal_target(
    mat: np.ndarray, x: int, y: int, stickiness: float, order: Sequence[int], width: int
) -> Optional[Tuple[int, int]]:
    """First diagonal below in `order` that is free. Sticky materials also need the side cell free."""
    below = y + 1
    for dx in order:
        nx = x + dx
        if 0 <= nx < width and mat[below, nx] == EMPTY:
            if stickiness == 0 or mat[y, nx] == EMPTY:
                return nx, below
    return None


def _target(
    mat: np.ndarray, x: int, y: int, m: int, order: Sequence[int], width: int, height: int
) -> Optional[Tuple[int, int]]:
    if SELF_STICKY[m] and _is_supported(mat, x, y, m, width, height):
        return None

    target = None
    if y + 1 < height:
        dist = _fall_distance(mat, x, y, FALL_LIMIT[m], height)
        if dist:
            target = (x, y + dist)
        else:
            target = _diagonal_target(mat, x, y, STICKINESS[m], order, width)

    # Buoyancy wins over any downward choice made above.
    rise = RISE_LIMIT[m]
    if rise:
        dist = _rise_distance(mat, x, y, rise)
        if dist:
            target = (x, y - dist)
    return target


def step(grid: Grid, frame: int) -> Grid:
    """One tick. Returns the next grid; `grid` is left untouched. Only the parity of `frame` matters."""
    nxt = grid.copy()
    mat = nxt.material
    col = nxt.color
    height, width = grid.shape
    assert mat.shape == (height, width) and col.shape == (height, width, 3), "grid buffers out of shape"

    even = frame % 2 == 0
    order = (-1, 1) if even else (1, -1)
    current = grid.material

    for y in range(height - 1, -1, -1):
        xs = np.flatnonzero(MOVABLE[current[y]])
        if xs.size == 0:
            continue
        if not even:
            xs = xs[::-1]
        for x in xs.tolist():
            m = int(current[y, x])
            assert mat[y, x] == m, f"cell at ({x}, {y}) displaced before its turn"
            target = _target(mat, x, y, m, order, width, height)
            if target is None:
                continue
            tx, ty = target
            assert 0 <= tx < width and 0 <= ty < height, f"move out of grid: ({x}, {y}) -> {target}"
            assert mat[ty, tx] == EMPTY, f"move onto occupied cell: ({x}, {y}) -> {target}"
            mat[ty, tx] = m
            col[ty, tx] = col[y, x]
            mat[y, x] = EMPTY
            col[y, x] = CLEAR_COLOR
    return nxt
