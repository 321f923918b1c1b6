"""Short-lived message box centred at the top of the window."""

import pygame

TOAST_BG = (45, 55, 72)
TOAST_TEXT = (226, 232, 240)
TOAST_PADDING = 8
TOAST_TOP = 12
DEFAULT_DURATION_MS = 3000


class Toast:
    """show() replaces the current message; expires `duration_ms` after it was shown."""

    def __init__(self) -> None:
        self.message = ""
        self._expires_at = 0
        self._font = None

    def show(self, message: str, now_ms: int, duration_ms: int = DEFAULT_DURATION_MS) -> None:
        self.message = message
        self._expires_at = now_ms + duration_ms

    def visible(self, now_ms: int) -> bool:
        return bool(self.message) and now_ms < self._expires_at

    def draw(self, surface: pygame.Surface, now_ms: int) -> None:
        if not self.visible(now_ms):
            return
        if self._font is None:
            self._font = pygame.font.Font(None, 22)
        text = self._font.render(self.message, True, TOAST_TEXT)
        box = text.get_rect()
        box.inflate_ip(2 * TOAST_PADDING, 2 * TOAST_PADDING)
        box.midtop = (surface.get_width() // 2, TOAST_TOP)
        pygame.draw.rect(surface, TOAST_BG, box, border_radius=6)
        surface.blit(text, (box.x + TOAST_PADDING, box.y + TOAST_PADDING))
