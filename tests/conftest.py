"""
Pytest configuration and shared fixtures.
"""

import os
import random

import numpy as np
import pytest


@pytest.fixture
def color_rng():
    """Seeded generator for placement colors."""
    return random.Random(1234)


@pytest.fixture
def make_grid(color_rng):
    """Factory: empty grid of the given size with a seeded color rng."""
    from world.grid import Grid

    def _make(width, height):
        return Grid(width, height, rng=color_rng)
    return _make


@pytest.fixture
def rng():
    """Reproducible random number generator for random fills."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def fill_random(rng):
    """Factory: scatter the given materials over a grid at the given density."""
    def _fill(grid, materials, density=0.4):
        for y in range(grid.height):
            for x in range(grid.width):
                if rng.random() < density:
                    grid.set(x, y, materials[int(rng.integers(len(materials)))])
        return grid
    return _fill


@pytest.fixture
def pygame_display():
    """Headless pygame: SDL dummy video driver and a 1x1 display."""
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    import pygame

    pygame.init()
    pygame.display.set_mode((1, 1))
    yield pygame
    pygame.quit()
