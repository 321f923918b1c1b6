"""2D grid of cells: a material id and a realized RGB color per cell. Shape (height, width), y down."""

import random
from typing import NamedTuple, Optional

import numpy as np

from world.color import RGB, sample_color
from world.constants import CLEAR_COLOR, DEFAULT_HEIGHT, DEFAULT_WIDTH
from world.materials import MaterialId, lookup


class Cell(NamedTuple):
    material: MaterialId
    color: RGB


class Grid:
    """Material ids and colors in parallel arrays. Colors are stamped on placement and travel with the cell."""

    __slots__ = ("width", "height", "material", "color", "rng")

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT, rng: Optional[random.Random] = None) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"grid needs at least one cell, got {width}x{height}")
        self.width = width
        self.height = height
        self.material = np.zeros((height, width), dtype=np.uint8)
        self.color = np.empty((height, width, 3), dtype=np.uint8)
        self.color[:] = CLEAR_COLOR
        self.rng = rng if rng is not None else random.Random()

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        c = self.color[y, x]
        return Cell(MaterialId(int(self.material[y, x])), (int(c[0]), int(c[1]), int(c[2])))

    def set(self, x: int, y: int, material: int) -> bool:
        """Place material with a freshly sampled color. Out of range is ignored (returns False)."""
        if not self.in_bounds(x, y):
            return False
        definition = lookup(material)
        self.material[y, x] = int(material)
        self.color[y, x] = sample_color(definition, self.rng)
        return True

    def clear(self) -> None:
        self.material.fill(MaterialId.EMPTY)
        self.color[:] = CLEAR_COLOR

    def copy(self) -> "Grid":
        """Independent buffers; the placement rng is shared."""
        out = Grid.__new__(Grid)
        out.width = self.width
        out.height = self.height
        out.material = self.material.copy()
        out.color = self.color.copy()
        out.rng = self.rng
        return out

    def count_occupied(self) -> int:
        return int(np.count_nonzero(self.material))

    def count(self, material: int) -> int:
        return int(np.count_nonzero(self.material == int(material)))
