"""Unit tests for Grid."""

import numpy as np
import pytest

from world.constants import CLEAR_COLOR
from world.grid import Cell, Grid
from world.materials import MaterialId


class TestGridCreation:
    """Tests for Grid allocation."""

    def test_creation(self, make_grid):
        g = make_grid(5, 3)
        assert g.shape == (3, 5)
        assert g.material.shape == (3, 5)
        assert g.color.shape == (3, 5, 3)
        assert g.count_occupied() == 0
        assert np.all(g.color == np.array(CLEAR_COLOR, dtype=np.uint8))

    def test_every_cell_empty(self, make_grid):
        g = make_grid(2, 2)
        for y in range(2):
            for x in range(2):
                assert g.get(x, y) == Cell(MaterialId.EMPTY, CLEAR_COLOR)

    @pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 3)])
    def test_bad_dimensions(self, w, h):
        with pytest.raises(ValueError):
            Grid(w, h)


class TestGridAccess:
    """Tests for get / set / clear."""

    def test_set_and_get(self, make_grid):
        g = make_grid(4, 4)
        assert g.set(1, 2, MaterialId.SAND)
        cell = g.get(1, 2)
        assert cell.material == MaterialId.SAND
        assert isinstance(cell.material, MaterialId)
        assert cell.color != CLEAR_COLOR
        assert g.count_occupied() == 1
        assert g.count(MaterialId.SAND) == 1

    def test_set_out_of_range_is_ignored(self, make_grid):
        g = make_grid(4, 4)
        for x, y in [(-1, 0), (0, -1), (4, 0), (0, 4), (100, 100)]:
            assert not g.set(x, y, MaterialId.STONE)
        assert g.count_occupied() == 0

    def test_get_out_of_range_raises(self, make_grid):
        g = make_grid(4, 4)
        with pytest.raises(IndexError):
            g.get(4, 0)
        with pytest.raises(IndexError):
            g.get(0, -1)

    def test_set_unknown_material_raises(self, make_grid):
        g = make_grid(4, 4)
        with pytest.raises(ValueError):
            g.set(0, 0, 250)

    def test_erase_restores_clear_color(self, make_grid):
        g = make_grid(3, 3)
        g.set(0, 0, MaterialId.WATER)
        g.set(0, 0, MaterialId.EMPTY)
        assert g.get(0, 0) == Cell(MaterialId.EMPTY, CLEAR_COLOR)

    def test_clear(self, make_grid):
        g = make_grid(3, 3)
        g.set(0, 0, MaterialId.SAND)
        g.set(2, 2, MaterialId.STONE)
        g.clear()
        assert g.shape == (3, 3)
        assert g.count_occupied() == 0
        assert g.get(2, 2).color == CLEAR_COLOR

    def test_copy_is_independent(self, make_grid):
        g = make_grid(3, 3)
        g.set(1, 1, MaterialId.SAND)
        c = g.copy()
        c.set(0, 0, MaterialId.STONE)
        c.material[1, 1] = MaterialId.EMPTY
        assert g.get(1, 1).material == MaterialId.SAND
        assert g.get(0, 0).material == MaterialId.EMPTY
        assert c.rng is g.rng

    def test_in_bounds(self, make_grid):
        g = make_grid(2, 3)
        assert g.in_bounds(1, 2)
        assert not g.in_bounds(2, 0)
        assert not g.in_bounds(0, 3)
