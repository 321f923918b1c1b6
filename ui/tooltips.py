"""Tooltip text for palette buttons, and drawing."""

import pygame
from typing import Optional

from world.materials import MaterialId, lookup

TOOLTIP_BG = (28, 28, 32)
TOOLTIP_BORDER = (60, 60, 68)
TOOLTIP_TEXT = (240, 240, 235)
TOOLTIP_DETAIL = (150, 150, 148)
TOOLTIP_MAX_WIDTH = 220
TOOLTIP_PADDING = 6
TOOLTIP_OFFSET_Y = 8
TOOLTIP_DESC_DETAIL_GAP = 4


def _fmt(value: float) -> str:
    return f"{value:g}"


def material_tooltip(material: MaterialId) -> tuple[str, Optional[str]]:
    """(description, detail line). Description is the behaviour summary; detail lists the coefficients."""
    d = lookup(material)
    if material == MaterialId.EMPTY:
        return "Erase cells back to empty.", None
    if d.solid:
        desc = f"{d.name}: immovable."
    elif d.weight < 0:
        desc = f"{d.name}: rises straight up."
    elif d.stickiness == 0:
        desc = f"{d.name}: falls and flows freely past neighbours."
    else:
        desc = f"{d.name}: falls and piles; needs a clear side to slide."
    if d.self_sticky:
        desc += " Clings to itself."
    if d.note:
        desc += " " + d.note
    detail = None if d.solid else f"Weight {_fmt(d.weight)}, stickiness {_fmt(d.stickiness)}"
    return desc, detail


def wrap_tooltip_text(text: str, font: pygame.font.Font, max_width: int) -> list[str]:
    words = text.split()
    lines = []
    current: list[str] = []
    for word in words:
        w, _ = font.size(" ".join(current + [word]))
        if current and w > max_width:
            lines.append(" ".join(current))
            current = [word]
        else:
            current.append(word)
    if current:
        lines.append(" ".join(current))
    return lines


def draw_tooltip(
    surface: pygame.Surface,
    font: pygame.font.Font,
    small_font: pygame.font.Font,
    tooltip: Optional[tuple[str, Optional[str]]],
    mouse_pos: tuple[int, int],
) -> None:
    if not tooltip or not tooltip[0]:
        return
    desc, detail = tooltip
    mx, my = mouse_pos
    lines_desc = wrap_tooltip_text(desc, font, TOOLTIP_MAX_WIDTH)
    line_h_desc = font.get_height()
    box_w = max((font.size(l)[0] for l in lines_desc), default=0) + 2 * TOOLTIP_PADDING
    box_h = len(lines_desc) * line_h_desc + 2 * TOOLTIP_PADDING
    lines_detail: list[str] = []
    line_h_detail = small_font.get_height()
    if detail:
        lines_detail = wrap_tooltip_text(detail, small_font, TOOLTIP_MAX_WIDTH)
        box_h += TOOLTIP_DESC_DETAIL_GAP + len(lines_detail) * line_h_detail
        box_w = max(box_w, max((small_font.size(l)[0] for l in lines_detail), default=0) + 2 * TOOLTIP_PADDING)
    box_w = min(box_w, TOOLTIP_MAX_WIDTH + 2 * TOOLTIP_PADDING)
    # Palette sits on the right, so prefer opening to the left of the pointer.
    tx = mx - box_w - 12
    ty = my + TOOLTIP_OFFSET_Y
    sw, sh = surface.get_size()
    if tx < 0:
        tx = mx + 12
    if ty + box_h > sh:
        ty = my - box_h - TOOLTIP_OFFSET_Y
    tx = max(0, min(tx, sw - box_w))
    ty = max(0, min(ty, sh - box_h))
    tooltip_rect = pygame.Rect(tx, ty, box_w, box_h)
    pygame.draw.rect(surface, TOOLTIP_BG, tooltip_rect)
    pygame.draw.rect(surface, TOOLTIP_BORDER, tooltip_rect, 1)
    y_off = ty + TOOLTIP_PADDING
    for line in lines_desc:
        surface.blit(font.render(line, True, TOOLTIP_TEXT), (tx + TOOLTIP_PADDING, y_off))
        y_off += line_h_desc
    if lines_detail:
        y_off += TOOLTIP_DESC_DETAIL_GAP
        for line in lines_detail:
            surface.blit(small_font.render(line, True, TOOLTIP_DETAIL), (tx + TOOLTIP_PADDING, y_off))
            y_off += line_h_detail
