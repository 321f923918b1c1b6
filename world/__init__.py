"""World: material registry, grid, and the per-tick transition."""

from world.grid import Cell, Grid
from world.transition import step
from world.materials import MATERIALS, MaterialDef, MaterialId, lookup
from world.simulation import Simulation
from world.constants import CLEAR_COLOR, DEFAULT_WIDTH, DEFAULT_HEIGHT

__all__ = [
    "Cell", "Grid", "step", "MATERIALS", "MaterialDef", "MaterialId", "lookup",
    "Simulation", "CLEAR_COLOR", "DEFAULT_WIDTH", "DEFAULT_HEIGHT",
]
