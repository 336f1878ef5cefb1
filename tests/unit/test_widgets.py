"""Unit tests for toolbar buttons."""

from unittest.mock import Mock

import pygame
import pytest
from pygame import Rect

from viewer.core.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_ACTIVE,
    COLOR_BUTTON_DISABLED,
    COLOR_BUTTON_HOVER,
)
from viewer.ui.widgets import Button


@pytest.fixture
def mock_pygame():
    """Initialize pygame for tests."""
    pygame.init()
    yield
    pygame.quit()


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


class TestButton:
    def test_fixed_label(self):
        assert Button(Rect(0, 0, 50, 30), "Grid", Mock()).text == "Grid"

    def test_label_follows_callable(self):
        state = {"paused": False}
        button = Button(
            Rect(0, 0, 70, 30), lambda: "Resume" if state["paused"] else "Pause", Mock()
        )
        assert button.text == "Pause"
        state["paused"] = True
        assert button.text == "Resume"

    def test_active_follows_predicate(self):
        state = {"on": False}
        button = Button(Rect(0, 0, 50, 30), "Grid", Mock(), is_active=lambda: state["on"])
        assert not button.active
        assert button._fill_color() == COLOR_BUTTON
        state["on"] = True
        assert button.active
        assert button._fill_color() == COLOR_BUTTON_ACTIVE

    def test_without_predicates(self):
        button = Button(Rect(0, 0, 50, 30), "Step", Mock())
        assert button.enabled
        assert not button.active

    def test_click_inside_fires(self, mock_pygame):
        callback = Mock()
        button = Button(Rect(0, 0, 50, 30), "Step", callback)
        assert button.handle_event(click((10, 10)))
        callback.assert_called_once()

    def test_click_outside_ignored(self, mock_pygame):
        callback = Mock()
        button = Button(Rect(0, 0, 50, 30), "Step", callback)
        assert not button.handle_event(click((80, 10)))
        callback.assert_not_called()

    def test_disabled_ignores_clicks(self, mock_pygame):
        callback = Mock()
        button = Button(Rect(0, 0, 50, 30), "Step", callback, is_enabled=lambda: False)
        assert not button.handle_event(click((10, 10)))
        callback.assert_not_called()
        assert button._fill_color() == COLOR_BUTTON_DISABLED

    def test_hover_tracking(self, mock_pygame):
        button = Button(Rect(0, 0, 50, 30), "Step", Mock())
        button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 5)))
        assert button.hovered
        assert button._fill_color() == COLOR_BUTTON_HOVER
        button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(90, 5)))
        assert not button.hovered

    def test_render_disabled(self, mock_pygame):
        screen = pygame.Surface((60, 40))
        button = Button(Rect(0, 0, 50, 30), "Step", Mock(), is_enabled=lambda: False)
        button.render(screen, pygame.font.Font(None, 18))
        assert tuple(screen.get_at((2, 2)))[:3] == COLOR_BUTTON_DISABLED
