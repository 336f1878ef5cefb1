"""
Tile Wave - UI Widgets

Toolbar buttons for the viewer. Labels, highlight and availability can be
bound to viewer state so buttons follow it without manual syncing.
"""

from typing import Callable, Optional, Union

import pygame
from pygame import Surface, Rect

from viewer.core.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_ACTIVE,
    COLOR_BUTTON_DISABLED,
    COLOR_BUTTON_HOVER,
    COLOR_GRID,
    COLOR_TEXT,
    COLOR_TEXT_DISABLED,
)

Label = Union[str, Callable[[], str]]


class Button:
    """
    Toolbar button.

    Args:
        rect: Button area on screen
        label: Fixed text, or a callable returning the current text
        callback: Called on left click while enabled
        is_active: Optional predicate; a true result draws the button highlighted
        is_enabled: Optional predicate; a false result greys the button out
            and ignores clicks
    """

    def __init__(
        self,
        rect: Rect,
        label: Label,
        callback: Callable[[], None],
        is_active: Optional[Callable[[], bool]] = None,
        is_enabled: Optional[Callable[[], bool]] = None,
    ):
        self.rect = rect
        self.label = label
        self.callback = callback
        self.is_active = is_active
        self.is_enabled = is_enabled
        self.hovered = False

    @property
    def text(self) -> str:
        return self.label() if callable(self.label) else self.label

    @property
    def active(self) -> bool:
        return self.is_active is not None and self.is_active()

    @property
    def enabled(self) -> bool:
        return self.is_enabled is None or self.is_enabled()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Track hover and fire the callback on click. Returns True if clicked."""
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.enabled and self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

    def _fill_color(self):
        if not self.enabled:
            return COLOR_BUTTON_DISABLED
        if self.active:
            return COLOR_BUTTON_ACTIVE
        return COLOR_BUTTON_HOVER if self.hovered else COLOR_BUTTON

    def render(self, screen: Surface, font: pygame.font.Font):
        pygame.draw.rect(screen, self._fill_color(), self.rect)
        pygame.draw.rect(screen, COLOR_GRID, self.rect, 1)

        text_color = COLOR_TEXT if self.enabled else COLOR_TEXT_DISABLED
        text_surf = font.render(self.text, True, text_color)
        screen.blit(text_surf, text_surf.get_rect(center=self.rect.center))
