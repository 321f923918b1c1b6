"""Right panel: tick counter, pause/clear, brush size slider, and collapsible material sections."""

import pygame
from typing import Callable

from ui import tooltips
from world.constants import BRUSH_MAX, BRUSH_MIN
from world.materials import CATEGORIES, MATERIALS, MaterialId, by_category

FONT_SIZE = 18
TOOLTIP_FONT_SIZE = 19
TOOLTIP_SMALL_FONT_SIZE = 16
PANEL_BG = (22, 27, 34)
LABEL_COLOR = (200, 200, 200)
SLIDER_COLOR = (100, 100, 100)
KNOB_COLOR = (180, 180, 180)
BUTTON_COLOR = (60, 60, 60)
BUTTON_HOVER = (80, 80, 80)
SELECTED_BORDER = (246, 173, 85)

SECTION_LABELS = {
    "tools": "Tools",
    "solids": "Solids",
    "powders": "Powders",
    "liquids": "Liquids",
    "gases": "Gases",
    "misc": "Misc",
}
# Sections open at startup; the rest start collapsed.
OPEN_SECTIONS = ("tools", "solids", "powders")

ROW_H = 20
GAP = 4


class MaterialPanel:
    """State: params dict (material, brush_size, paused); draw and handle events. Select/clear/brush callbacks."""

    def __init__(
        self,
        rect: pygame.Rect,
        initial: dict,
        on_select: Callable[[MaterialId], None],
        on_clear: Callable[[], None],
        on_brush: Callable[[int], None],
    ) -> None:
        self.rect = rect
        self.params = {
            "material": MaterialId(initial.get("material", MaterialId.SAND)),
            "brush_size": initial.get("brush_size", BRUSH_MIN),
            "paused": initial.get("paused", False),
        }
        self.on_select = on_select
        self.on_clear = on_clear
        self.on_brush = on_brush
        self.collapsed = {c: c not in OPEN_SECTIONS for c in CATEGORIES}
        self._sections = by_category()
        self._font = None
        self._tooltip_font = None
        self._tooltip_small_font = None
        self._slider_rect: pygame.Rect | None = None
        self._button_rects: dict[str, pygame.Rect] = {}
        self._header_rects: dict[str, pygame.Rect] = {}
        self._material_rects: list[tuple[MaterialId, pygame.Rect]] = []
        self._dragging = False
        self._hover_tooltip = None

    def _ensure_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def _ensure_tooltip_fonts(self) -> tuple[pygame.font.Font, pygame.font.Font]:
        if self._tooltip_font is None:
            self._tooltip_font = pygame.font.Font(None, TOOLTIP_FONT_SIZE)
            self._tooltip_small_font = pygame.font.Font(None, TOOLTIP_SMALL_FONT_SIZE)
        return self._tooltip_font, self._tooltip_small_font

    def set_brush_size(self, size: int) -> None:
        self.params["brush_size"] = size

    def draw(self, surface: pygame.Surface, tick_count: int = 0) -> None:
        font = self._ensure_font()
        pygame.draw.rect(surface, PANEL_BG, self.rect)
        x, y = self.rect.x + 8, self.rect.y + 6
        width = self.rect.width - 16
        mouse = pygame.mouse.get_pos()
        self._button_rects.clear()
        self._header_rects.clear()
        self._material_rects.clear()

        label = font.render(f"Tick: {tick_count}", True, LABEL_COLOR)
        surface.blit(label, (x, y))
        y += ROW_H + GAP

        # Pause / Resume and Clear (side by side)
        btn_h = 26
        btn_w = (width - GAP) // 2
        pause_rect = pygame.Rect(x, y, btn_w, btn_h)
        clear_rect = pygame.Rect(x + btn_w + GAP, y, btn_w, btn_h)
        for key, r, text in (
            ("pause", pause_rect, "Resume" if self.params["paused"] else "Pause"),
            ("clear", clear_rect, "Clear"),
        ):
            pygame.draw.rect(surface, BUTTON_HOVER if r.collidepoint(mouse) else BUTTON_COLOR, r)
            t = font.render(text, True, LABEL_COLOR)
            surface.blit(t, (r.x + 6, r.y + 6))
            self._button_rects[key] = r
        y += btn_h + GAP * 2

        # Brush size
        size = self.params["brush_size"]
        label = font.render(f"Brush size: {size}", True, LABEL_COLOR)
        surface.blit(label, (x, y))
        y += ROW_H
        self._slider_rect = _draw_slider(surface, x, y, width, 12, size, BRUSH_MIN, BRUSH_MAX)
        y += 12 + GAP * 2

        for category in CATEGORIES:
            header = pygame.Rect(x, y, width, ROW_H)
            pygame.draw.rect(surface, BUTTON_COLOR, header)
            _draw_arrow(surface, header, self.collapsed[category])
            t = font.render(SECTION_LABELS[category], True, LABEL_COLOR)
            surface.blit(t, (header.x + 18, header.y + 3))
            self._header_rects[category] = header
            y += ROW_H + 1
            if self.collapsed[category]:
                y += GAP
                continue
            for material in self._sections[category]:
                y = self._draw_material_button(surface, font, material, x, y, width, mouse)
            y += GAP

    def _draw_material_button(self, surface, font, material, x, y, width, mouse) -> int:
        d = MATERIALS[material]
        r = pygame.Rect(x + 6, y, width - 6, ROW_H)
        pygame.draw.rect(surface, BUTTON_HOVER if r.collidepoint(mouse) else PANEL_BG, r)
        swatch = pygame.Rect(r.x + 3, r.y + 3, ROW_H - 6, ROW_H - 6)
        pygame.draw.rect(surface, d.button_color, swatch)
        pygame.draw.rect(surface, d.button_text_color, swatch, 1)
        t = font.render(d.name, True, LABEL_COLOR)
        surface.blit(t, (swatch.right + 6, r.y + 3))
        if material == self.params["material"]:
            pygame.draw.rect(surface, SELECTED_BORDER, r, 1)
        self._material_rects.append((material, r))
        return y + ROW_H + 1

    def update_hover_tooltip(self, pos: tuple[int, int]) -> None:
        self._hover_tooltip = None
        for material, r in self._material_rects:
            if r.collidepoint(pos):
                self._hover_tooltip = tooltips.material_tooltip(material)
                return

    def draw_tooltip(self, surface: pygame.Surface) -> None:
        tf, sf = self._ensure_tooltip_fonts()
        tooltips.draw_tooltip(surface, tf, sf, self._hover_tooltip, pygame.mouse.get_pos())

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if event was consumed."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not self.rect.collidepoint(event.pos):
                return False
            if self._slider_rect is not None and self._slider_rect.collidepoint(event.pos):
                self._dragging = True
                self._set_slider_value(event.pos)
                return True
            for key, r in self._button_rects.items():
                if r.collidepoint(event.pos):
                    if key == "pause":
                        self.params["paused"] = not self.params["paused"]
                    elif key == "clear":
                        self.on_clear()
                    return True
            for category, r in self._header_rects.items():
                if r.collidepoint(event.pos):
                    self.collapsed[category] = not self.collapsed[category]
                    return True
            for material, r in self._material_rects:
                if r.collidepoint(event.pos):
                    self.params["material"] = material
                    self.on_select(material)
                    return True
            return True
        if event.type == pygame.MOUSEBUTTONUP:
            was_dragging = self._dragging
            self._dragging = False
            return was_dragging
        if event.type == pygame.MOUSEMOTION:
            self.update_hover_tooltip(event.pos)
            if self._dragging:
                self._set_slider_value(event.pos)
                return True
        return False

    def _set_slider_value(self, pos: tuple[int, int]) -> None:
        r = self._slider_rect
        t = (pos[0] - r.x) / max(1, r.width - 8)
        t = max(0, min(1, t))
        val = int(round(BRUSH_MIN + t * (BRUSH_MAX - BRUSH_MIN)))
        if val != self.params["brush_size"]:
            self.params["brush_size"] = val
            self.on_brush(val)


def _draw_slider(
    surface: pygame.Surface, x: int, y: int, w: int, h: int, value: int, vmin: int, vmax: int
) -> pygame.Rect:
    rect = pygame.Rect(x, y, w, h)
    pygame.draw.rect(surface, SLIDER_COLOR, rect)
    t = (value - vmin) / max(1, vmax - vmin)
    knob_x = x + 4 + int(t * (w - 8))
    pygame.draw.rect(surface, KNOB_COLOR, (knob_x - 4, y, 8, h))
    return rect


def _draw_arrow(surface: pygame.Surface, header: pygame.Rect, collapsed: bool) -> None:
    cx, cy = header.x + 8, header.centery
    if collapsed:
        points = [(cx - 3, cy - 5), (cx - 3, cy + 5), (cx + 4, cy)]
    else:
        points = [(cx - 5, cy - 3), (cx + 5, cy - 3), (cx, cy + 4)]
    pygame.draw.polygon(surface, LABEL_COLOR, points)
