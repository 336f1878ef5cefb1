"""Unit tests for EventHandler keyboard and button handling."""

from unittest.mock import Mock

import pygame
import pytest
from pygame import Rect

from viewer.controllers.event_handler import EventHandler
from viewer.controllers.viewer_state import ViewerState
from viewer.ui.widgets import Button


@pytest.fixture
def mock_pygame():
    """Initialize pygame for tests."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def viewer_state():
    return ViewerState(steps_per_frame=2)


@pytest.fixture
def on_regenerate():
    return Mock()


@pytest.fixture
def event_handler(viewer_state, on_regenerate):
    return EventHandler(viewer_state, buttons=[], on_regenerate=on_regenerate)


def key_event(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0)


class TestKeyboardShortcuts:
    def test_r_regenerates(self, mock_pygame, event_handler, on_regenerate):
        assert event_handler.handle_events([key_event(pygame.K_r)])
        on_regenerate.assert_called_once()

    def test_space_toggles_pause(self, mock_pygame, event_handler, viewer_state):
        event_handler.handle_events([key_event(pygame.K_SPACE)])
        assert viewer_state.paused
        event_handler.handle_events([key_event(pygame.K_SPACE)])
        assert not viewer_state.paused

    def test_step_keys_queue_steps(self, mock_pygame, event_handler, viewer_state):
        event_handler.handle_events([key_event(pygame.K_s), key_event(pygame.K_RIGHT)])
        assert viewer_state.pending_steps == 2

    def test_grid_toggle(self, mock_pygame, event_handler, viewer_state):
        event_handler.handle_events([key_event(pygame.K_g)])
        assert not viewer_state.show_grid

    def test_speed_keys(self, mock_pygame, event_handler, viewer_state):
        event_handler.handle_events([key_event(pygame.K_EQUALS)])
        assert viewer_state.steps_per_frame == 4
        event_handler.handle_events([key_event(pygame.K_MINUS), key_event(pygame.K_MINUS)])
        assert viewer_state.steps_per_frame == 1

    def test_escape_quits(self, mock_pygame, event_handler):
        assert not event_handler.handle_events([key_event(pygame.K_ESCAPE)])

    def test_window_close_quits(self, mock_pygame, event_handler):
        assert not event_handler.handle_events([pygame.event.Event(pygame.QUIT)])


class TestButtons:
    def test_click_triggers_callback(self, mock_pygame, viewer_state, on_regenerate):
        button = Button(Rect(10, 5, 100, 30), "Regenerate", on_regenerate)
        handler = EventHandler(viewer_state, [button], on_regenerate=Mock())
        click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(20, 10))
        assert handler.handle_events([click])
        on_regenerate.assert_called_once()

    def test_click_outside_ignored(self, mock_pygame, viewer_state):
        callback = Mock()
        button = Button(Rect(10, 5, 100, 30), "Pause", callback)
        handler = EventHandler(viewer_state, [button], on_regenerate=Mock())
        handler.handle_events([pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(300, 300))])
        callback.assert_not_called()

    def test_hover(self, mock_pygame, viewer_state):
        button = Button(Rect(10, 5, 100, 30), "Step", Mock())
        handler = EventHandler(viewer_state, [button], on_regenerate=Mock())
        handler.handle_events([pygame.event.Event(pygame.MOUSEMOTION, pos=(15, 15))])
        assert button.hovered
