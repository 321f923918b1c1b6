"""Unit tests for the Simulation context."""

import pytest

from world.constants import BRUSH_MAX, BRUSH_MIN
from world.materials import MaterialId
from world.simulation import Simulation

M = MaterialId


@pytest.fixture
def sim():
    return Simulation(10, 8, seed=99)


class TestSimulation:
    def test_defaults(self, sim):
        assert sim.shape == (8, 10)
        assert sim.frame == 0
        assert sim.material == M.SAND
        assert sim.brush_size == BRUSH_MIN
        assert sim.seed_used == 99

    def test_random_seed_recorded(self):
        s = Simulation(5, 5, seed=-1)
        assert 0 <= s.seed_used < 2**31

    def test_tick_advances_frame_and_grid(self, sim):
        sim.grid.set(4, 0, M.SAND)
        grid = sim.tick()
        assert sim.frame == 1
        assert grid is sim.grid
        assert grid.get(4, 1).material == M.SAND

    def test_advance(self, sim):
        sim.grid.set(4, 0, M.SAND)
        sim.advance(20)
        assert sim.frame == 20
        assert sim.grid.get(4, 7).material == M.SAND

    def test_same_seed_same_colors(self):
        a, b = Simulation(6, 6, seed=5), Simulation(6, 6, seed=5)
        a.paint(2, 2)
        b.paint(2, 2)
        assert a.grid.get(2, 2) == b.grid.get(2, 2)

    def test_resize_drops_state(self, sim):
        sim.grid.set(0, 0, M.STONE)
        assert sim.resize(12, 9)
        assert sim.shape == (9, 12)
        assert sim.grid.count_occupied() == 0

    def test_resize_same_size_keeps_state(self, sim):
        sim.grid.set(0, 0, M.STONE)
        assert not sim.resize(10, 8)
        assert sim.grid.count_occupied() == 1

    def test_clear(self, sim):
        sim.paint(3, 3)
        sim.clear()
        assert sim.grid.count_occupied() == 0
        assert sim.shape == (8, 10)

    def test_select(self, sim):
        assert sim.select(7) == M.WATER
        sim.paint(1, 1)
        assert sim.grid.get(1, 1).material == M.WATER
        with pytest.raises(ValueError):
            sim.select(200)

    def test_brush_size_clamped(self, sim):
        assert sim.set_brush_size(0) == BRUSH_MIN
        assert sim.set_brush_size(BRUSH_MAX + 5) == BRUSH_MAX
        assert sim.set_brush_size(3) == 3

    def test_paint_at_edge_clips(self, sim):
        sim.set_brush_size(3)
        assert sim.paint(0, 0) == 4
        assert sim.grid.count_occupied() == 4

    def test_paint_explicit_material(self, sim):
        sim.paint(5, 5, M.STONE)
        assert sim.grid.get(5, 5).material == M.STONE

    def test_eraser(self, sim):
        sim.paint(5, 5)
        sim.select(M.EMPTY)
        sim.paint(5, 5)
        assert sim.grid.count_occupied() == 0


class TestStrokes:
    def test_gesture(self, sim):
        sim.select(M.STONE)
        sim.begin_stroke(0, 4)
        assert sim.drawing
        sim.continue_stroke(5, 4)
        sim.continue_stroke(5, 4)
        sim.end_stroke()
        assert not sim.drawing
        assert [sim.grid.get(x, 4).material for x in range(6)] == [M.STONE] * 6
        assert sim.grid.count_occupied() == 6

    def test_continue_without_begin_is_ignored(self, sim):
        assert sim.continue_stroke(3, 3) == 0
        assert sim.grid.count_occupied() == 0

    def test_stroke_off_grid_tolerated(self, sim):
        sim.select(M.STONE)
        painted = sim.stroke(-5, 2, 3, 2)
        assert painted == 4
        assert sim.grid.count(M.STONE) == 4

    def test_resize_ends_stroke(self, sim):
        sim.begin_stroke(1, 1)
        sim.resize(20, 20)
        assert not sim.drawing
