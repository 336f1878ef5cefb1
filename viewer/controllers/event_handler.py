"""
Tile Wave - Event Handler

Handles user input events: keyboard shortcuts, toolbar buttons and window
close.
"""

from typing import Callable, List

import pygame

from .viewer_state import ViewerState
from viewer.ui.widgets import Button


class EventHandler:
    """Handles all user input events."""

    def __init__(
        self,
        state: ViewerState,
        buttons: List[Button],
        on_regenerate: Callable[[], None],
    ):
        """
        Initialize event handler.

        Args:
            state: Viewer state
            buttons: List of UI buttons
            on_regenerate: Callback for regenerate action
        """
        self.state = state
        self.buttons = buttons
        self.on_regenerate = on_regenerate

    def handle_events(self, events: List[pygame.event.Event]) -> bool:
        """
        Handle all pygame events.

        Args:
            events: List of pygame events to process

        Returns:
            True if application should continue running, False if quit requested
        """
        for event in events:
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                if not self._handle_key(event):
                    return False

            for button in self.buttons:
                button.handle_event(event)

        return True

    def _handle_key(self, event: pygame.event.Event) -> bool:
        """Handle a key press. Returns False if quit requested."""
        if event.key == pygame.K_ESCAPE:
            return False
        elif event.key == pygame.K_r:
            self.on_regenerate()
        elif event.key == pygame.K_SPACE:
            self.state.toggle_pause()
        elif event.key in (pygame.K_s, pygame.K_RIGHT):
            self.state.request_step()
        elif event.key == pygame.K_g:
            self.state.toggle_grid()
        elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.state.faster()
        elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.state.slower()
        return True
