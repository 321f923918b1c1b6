"""Which cells a gesture paints: square brush stamps along Bresenham lines. Pure geometry, no grid access."""

from typing import Iterator, List, Tuple

Point = Tuple[int, int]


def brush_cells(cx: int, cy: int, size: int) -> List[Point]:
    """Square stamp, offsets -size//2 .. size//2 on each axis (even sizes round up to the next odd)."""
    half = max(1, size) // 2
    return [
        (cx + dx, cy + dy)
        for dy in range(-half, half + 1)
        for dx in range(-half, half + 1)
    ]


def line_cells(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point]:
    """Bresenham line from (x0, y0) to (x1, y1), both ends included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def stroke_cells(x0: int, y0: int, x1: int, y1: int, size: int) -> List[Point]:
    """Unique cells covered by stamping the brush at every point of the line, in paint order."""
    seen = set()
    out: List[Point] = []
    for px, py in line_cells(x0, y0, x1, y1):
        for cell in brush_cells(px, py, size):
            if cell not in seen:
                seen.add(cell)
                out.append(cell)
    return out
