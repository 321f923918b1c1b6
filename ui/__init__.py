"""UI: grid view, material panel, tooltips and toast messages."""

from ui.grid_view import draw_grid
from ui.panel import MaterialPanel
from ui.toast import Toast
from ui.layout import grid_size_for_window, screen_to_cell

__all__ = ["draw_grid", "MaterialPanel", "Toast", "grid_size_for_window", "screen_to_cell"]
