"""
Tile Wave - Controllers Module

Viewer state management and event handling.
"""

from .viewer_state import ViewerState
from .event_handler import EventHandler

__all__ = ['ViewerState', 'EventHandler']
