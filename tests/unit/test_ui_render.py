"""Rendering and panel input under the SDL dummy video driver."""

import pytest

from world.constants import CLEAR_COLOR
from world.grid import Grid
from world.materials import MaterialId


@pytest.fixture
def panel_calls():
    return {"select": [], "clear": 0, "brush": []}


@pytest.fixture
def panel(pygame_display, panel_calls):
    from ui.panel import MaterialPanel

    def on_clear():
        panel_calls["clear"] += 1

    p = MaterialPanel(
        pygame_display.Rect(0, 0, 250, 2000),
        {"material": MaterialId.SAND},
        on_select=panel_calls["select"].append,
        on_clear=on_clear,
        on_brush=panel_calls["brush"].append,
    )
    p.draw(pygame_display.Surface((250, 2000)))
    return p


def _click(pygame, pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


class TestDrawGrid:
    """Cells are blitted with their stored colors, scaled by pixel size."""

    def test_rect_and_pixels(self, pygame_display, color_rng):
        from ui.grid_view import draw_grid

        grid = Grid(3, 2, rng=color_rng)
        grid.set(1, 0, MaterialId.SAND)
        surface = pygame_display.Surface((40, 40))
        rect = draw_grid(surface, (2, 3), grid, 4)
        assert rect == pygame_display.Rect(2, 3, 12, 8)
        assert tuple(surface.get_at((2 + 4 + 1, 3 + 1)))[:3] == grid.get(1, 0).color
        assert tuple(surface.get_at((2 + 1, 3 + 4 + 1)))[:3] == CLEAR_COLOR

    def test_unscaled(self, pygame_display, color_rng):
        from ui.grid_view import grid_image

        grid = Grid(4, 2, rng=color_rng)
        grid.set(3, 1, MaterialId.WATER)
        img = grid_image(grid)
        assert img.get_size() == (4, 2)
        assert tuple(img.get_at((3, 1)))[:3] == grid.get(3, 1).color


class TestMaterialPanel:
    """Clicks on the drawn panel reach the right callbacks."""

    def test_select_material(self, pygame_display, panel, panel_calls):
        r = dict(panel._material_rects)[MaterialId.STONE]
        assert panel.handle_event(_click(pygame_display, r.center))
        assert panel_calls["select"] == [MaterialId.STONE]
        assert panel.params["material"] == MaterialId.STONE

    def test_collapsed_section_opens(self, pygame_display, panel):
        assert MaterialId.WATER not in dict(panel._material_rects)
        assert panel.handle_event(_click(pygame_display, panel._header_rects["liquids"].center))
        assert not panel.collapsed["liquids"]
        panel.draw(pygame_display.Surface((250, 2000)))
        assert MaterialId.WATER in dict(panel._material_rects)

    def test_clear_and_pause(self, pygame_display, panel, panel_calls):
        assert panel.handle_event(_click(pygame_display, panel._button_rects["clear"].center))
        assert panel_calls["clear"] == 1
        assert panel.handle_event(_click(pygame_display, panel._button_rects["pause"].center))
        assert panel.params["paused"]

    def test_slider_sets_brush(self, pygame_display, panel, panel_calls):
        r = panel._slider_rect
        assert panel.handle_event(_click(pygame_display, (r.right - 1, r.centery)))
        assert panel_calls["brush"] == [10]
        assert panel.params["brush_size"] == 10

    def test_click_outside_not_consumed(self, pygame_display, panel):
        assert not panel.handle_event(_click(pygame_display, (300, 10)))
