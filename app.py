"""
App shell: display and main loop. One simulation tick per presented frame; the grid is drawn
after the tick, read-only. World, UI, and config are wired here.
"""

import logging
import sys

import pygame

from world import MaterialId, Simulation, lookup
from world.materials import by_name
from ui.grid_view import draw_grid
from ui.layout import grid_size_for_window, min_window_size, screen_to_cell
from ui.panel import MaterialPanel
from ui.toast import Toast
import config

TITLE = "Sandfall"
BACKGROUND = (13, 17, 23)

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """One console handler on the root logger; replaces any handler installed earlier."""
    root = logging.getLogger()
    root.setLevel(level)
    if root.hasHandlers():
        root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"))
    root.addHandler(handler)


def _initial_material(name) -> MaterialId:
    if not isinstance(name, str):
        logger.warning("Material in config is not a name (%r); using Sand", name)
        return MaterialId.SAND
    try:
        return by_name(name)
    except KeyError:
        logger.warning("Unknown material %r in config; using Sand", name)
        return MaterialId.SAND


def run() -> None:
    cfg = config.load_config()
    setup_logging(str(cfg["log_level"]).upper())

    pixel_size = cfg["pixel_size"]
    sidebar_width = cfg["sidebar_width"]
    fps = cfg["fps"]

    pygame.init()
    min_w, min_h = min_window_size(pixel_size, sidebar_width)
    win_w = max(min_w, cfg["window"]["width"])
    win_h = max(min_h, cfg["window"]["height"])
    screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    cols, rows = grid_size_for_window(win_w, win_h, pixel_size, sidebar_width)
    sim = Simulation(
        cols, rows,
        seed=cfg["seed"],
        material=_initial_material(cfg["material"]),
        brush_size=cfg["brush_size"],
    )
    logger.info("Started %dx%d grid (seed %d)", cols, rows, sim.seed_used)
    toast = Toast()

    def on_select(material: MaterialId) -> None:
        sim.select(material)
        toast.show(f"Selected: {lookup(material).name}", pygame.time.get_ticks())

    def on_clear() -> None:
        sim.clear()
        toast.show("Canvas Cleared!", pygame.time.get_ticks())

    def on_brush(size: int) -> None:
        sim.set_brush_size(size)
        toast.show(f"Brush Size: {sim.brush_size}", pygame.time.get_ticks())

    def panel_rect() -> pygame.Rect:
        w, h = screen.get_size()
        return pygame.Rect(w - sidebar_width, 0, sidebar_width, h)

    panel = MaterialPanel(
        panel_rect(),
        {"material": sim.material, "brush_size": sim.brush_size},
        on_select=on_select,
        on_clear=on_clear,
        on_brush=on_brush,
    )

    origin = (0, 0)
    running = True

    while running:
        clock.tick(fps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type == pygame.VIDEORESIZE:
                w, h = max(min_w, event.w), max(min_h, event.h)
                screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                panel.rect = panel_rect()
                sim.resize(*grid_size_for_window(w, h, pixel_size, sidebar_width))
                continue
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break
                if event.key == pygame.K_SPACE:
                    panel.params["paused"] = not panel.params["paused"]
                elif event.key == pygame.K_c:
                    on_clear()
                elif event.key in (pygame.K_LEFTBRACKET, pygame.K_RIGHTBRACKET):
                    delta = 1 if event.key == pygame.K_RIGHTBRACKET else -1
                    on_brush(sim.brush_size + delta)
                    panel.set_brush_size(sim.brush_size)
                continue
            if panel.handle_event(event):
                continue
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                sim.begin_stroke(*screen_to_cell(event.pos, origin, pixel_size))
            elif event.type == pygame.MOUSEMOTION and sim.drawing:
                sim.continue_stroke(*screen_to_cell(event.pos, origin, pixel_size))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                sim.end_stroke()
            elif event.type == pygame.WINDOWLEAVE:
                sim.end_stroke()

        if not running:
            break

        if not panel.params["paused"]:
            sim.tick()

        now = pygame.time.get_ticks()
        screen.fill(BACKGROUND)
        draw_grid(screen, origin, sim.grid, pixel_size)
        panel.draw(screen, tick_count=sim.frame)
        panel.draw_tooltip(screen)
        toast.draw(screen, now)
        pygame.display.flip()

    w, h = screen.get_size()
    config.save_config({
        **cfg,
        "window": {"width": w, "height": h},
        "material": lookup(sim.material).name,
        "brush_size": sim.brush_size,
    })
    logger.info("Stopped after %d ticks", sim.frame)
    pygame.quit()


if __name__ == "__main__":
    run()
