"""
Tile Wave - Viewer Package

A Pygame-based viewer that animates the solver one step per frame.
"""

from .application import ViewerApplication
from .main import main

__all__ = ['ViewerApplication', 'main']
