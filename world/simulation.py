"""
Simulation context: the live grid, frame counter and brush state in one object, so the driver
and tests share the same entry points without any module-level state.
"""

import logging
from typing import Optional

from world import transition
from world.brush import brush_cells, stroke_cells
from world.constants import BRUSH_MAX, BRUSH_MIN, DEFAULT_HEIGHT, DEFAULT_WIDTH
from world.grid import Grid
from world.materials import MaterialId, lookup
from world.seed_util import make_rng

logger = logging.getLogger(__name__)


class Simulation:
    """Owns the grid. Renderers read `grid` between ticks and never write to it."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        seed: int = -1,
        material: int = MaterialId.SAND,
        brush_size: int = BRUSH_MIN,
    ) -> None:
        self.rng, self.seed_used = make_rng(seed)
        self.grid = Grid(width, height, rng=self.rng)
        self.frame = 0
        self.material = MaterialId(material)
        self.brush_size = _clamp_brush(brush_size)
        self._last: Optional[tuple[int, int]] = None

    @property
    def shape(self) -> tuple[int, int]:
        return self.grid.shape

    def tick(self) -> Grid:
        self.grid = transition.step(self.grid, self.frame)
        self.frame += 1
        return self.grid

    def advance(self, ticks: int) -> Grid:
        for _ in range(ticks):
            self.tick()
        return self.grid

    def resize(self, width: int, height: int) -> bool:
        """Reallocate for new dimensions; all cells are lost. No-op (False) when the size is unchanged."""
        if (height, width) == self.grid.shape:
            return False
        logger.info("Resizing grid %dx%d -> %dx%d", self.grid.width, self.grid.height, width, height)
        self.grid = Grid(width, height, rng=self.rng)
        self._last = None
        return True

    def clear(self) -> None:
        self.grid.clear()
        logger.info("Grid cleared")

    def select(self, material: int) -> MaterialId:
        self.material = MaterialId(material)
        logger.debug("Selected %s", lookup(self.material).name)
        return self.material

    def set_brush_size(self, size: int) -> int:
        self.brush_size = _clamp_brush(size)
        return self.brush_size

    def paint(self, x: int, y: int, material: Optional[int] = None) -> int:
        """Stamp the brush at (x, y). Returns how many cells landed inside the grid."""
        m = self.material if material is None else material
        return sum(self.grid.set(cx, cy, m) for cx, cy in brush_cells(x, y, self.brush_size))

    def stroke(self, x0: int, y0: int, x1: int, y1: int, material: Optional[int] = None) -> int:
        m = self.material if material is None else material
        return sum(self.grid.set(cx, cy, m) for cx, cy in stroke_cells(x0, y0, x1, y1, self.brush_size))

    def begin_stroke(self, x: int, y: int) -> int:
        self._last = (x, y)
        return self.paint(x, y)

    def continue_stroke(self, x: int, y: int) -> int:
        """Line from the last pointer cell; ignored when no stroke is active or the cell is unchanged."""
        if self._last is None or self._last == (x, y):
            return 0
        lx, ly = self._last
        self._last = (x, y)
        return self.stroke(lx, ly, x, y)

    def end_stroke(self) -> None:
        self._last = None

    @property
    def drawing(self) -> bool:
        return self._last is not None


def _clamp_brush(size: int) -> int:
    return max(BRUSH_MIN, min(BRUSH_MAX, int(size)))
