"""Unit tests for the pygame-free parts of the UI: layout, tooltips text, toast timing."""

import pytest

from ui.layout import grid_size_for_window, min_window_size, screen_to_cell
from ui.toast import Toast
from ui.tooltips import material_tooltip
from world.constants import MIN_GRID_CELLS
from world.materials import MaterialId


class TestLayout:
    def test_grid_size(self):
        assert grid_size_for_window(1250, 800, 4, 250) == (250, 200)

    def test_partial_cells_floored(self):
        assert grid_size_for_window(1253, 803, 4, 250) == (250, 200)

    def test_fill_fraction(self):
        assert grid_size_for_window(1000, 1000, 4, 100, fill=0.9) == (200, 225)

    def test_minimum(self):
        assert grid_size_for_window(100, 100, 4, 250) == (MIN_GRID_CELLS, MIN_GRID_CELLS)

    def test_min_window(self):
        assert min_window_size(4, 250) == (MIN_GRID_CELLS * 4 + 250, MIN_GRID_CELLS * 4)

    @pytest.mark.parametrize("pos,cell", [((0, 0), (0, 0)), ((7, 9), (1, 2)), ((-1, 3), (-1, 0))])
    def test_screen_to_cell(self, pos, cell):
        assert screen_to_cell(pos, (0, 0), 4) == cell


class TestTooltips:
    def test_eraser(self):
        desc, detail = material_tooltip(MaterialId.EMPTY)
        assert "Erase" in desc
        assert detail is None

    def test_solid_has_no_coefficients(self):
        desc, detail = material_tooltip(MaterialId.STONE)
        assert "immovable" in desc
        assert detail is None

    def test_liquid_detail(self):
        desc, detail = material_tooltip(MaterialId.WATER)
        assert desc.startswith("Water")
        assert detail == "Weight 0.7, stickiness 0"

    def test_note_included(self):
        desc, _ = material_tooltip(MaterialId.ACID)
        assert "not simulated" in desc

    def test_gas(self):
        desc, _ = material_tooltip(MaterialId.HELIUM)
        assert "rises" in desc


class TestToast:
    def test_expires(self):
        t = Toast()
        assert not t.visible(0)
        t.show("Selected: Sand", now_ms=1000)
        assert t.visible(1000)
        assert t.visible(3999)
        assert not t.visible(4000)

    def test_replaced(self):
        t = Toast()
        t.show("a", now_ms=0, duration_ms=100)
        t.show("b", now_ms=50, duration_ms=100)
        assert t.message == "b"
        assert t.visible(120)
