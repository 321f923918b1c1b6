"""Left area: the simulation grid, one pixel_size square per cell, colors taken as stored."""

import pygame

from world.grid import Grid

BORDER_COLOR = (48, 54, 61)
BORDER_PX = 1


def grid_image(grid: Grid) -> pygame.Surface:
    """One surface pixel per cell. grid.color is (height, width, 3) row-major, which is what pygame reads."""
    size = (grid.width, grid.height)
    data = grid.color.tobytes()
    return pygame.image.frombytes(data, size, "RGB")


def draw_grid(surface: pygame.Surface, origin: tuple[int, int], grid: Grid, pixel_size: int) -> pygame.Rect:
    """Blit the grid scaled by pixel_size at origin. Returns the rect covered (for pointer hit tests)."""
    rect = pygame.Rect(origin[0], origin[1], grid.width * pixel_size, grid.height * pixel_size)
    img = grid_image(grid)
    if pixel_size > 1:
        img = pygame.transform.scale(img, rect.size)
    surface.blit(img, rect.topleft)
    pygame.draw.rect(surface, BORDER_COLOR, rect.inflate(2 * BORDER_PX, 2 * BORDER_PX), BORDER_PX)
    return rect
