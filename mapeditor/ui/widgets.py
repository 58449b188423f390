"""
Retro Tile Studio - UI Widgets

Basic UI widget components for the editor.
"""

import pygame
from pygame import Rect, Surface

from mapeditor.core.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_ACTIVE,
    COLOR_BUTTON_HOVER,
    COLOR_GRID,
    COLOR_TEXT,
)


class Button:
    """Simple button widget."""

    def __init__(self, rect: Rect, text: str, callback, is_active=None):
        self.rect = rect
        self.text = text
        self.callback = callback
        self.hovered = False
        self.is_active = is_active

    @property
    def active(self) -> bool:
        """Whether the button shows as switched on."""
        return self.is_active is not None and bool(self.is_active())

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

    def render(self, screen: Surface, font: pygame.font.Font):
        if self.active:
            color = COLOR_BUTTON_ACTIVE
        elif self.hovered:
            color = COLOR_BUTTON_HOVER
        else:
            color = COLOR_BUTTON
        pygame.draw.rect(screen, color, self.rect, border_radius=4)
        pygame.draw.rect(screen, COLOR_GRID, self.rect, 1, border_radius=4)

        text_surf = font.render(self.text, True, COLOR_TEXT)
        text_rect = text_surf.get_rect(center=self.rect.center)
        screen.blit(text_surf, text_rect)
