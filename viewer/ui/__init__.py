"""
Tile Wave - UI Module

UI widgets.
"""

from .widgets import Button

__all__ = ["Button"]
