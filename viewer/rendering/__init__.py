"""
Tile Wave - Rendering Module

Rendering components for grid snapshots.
"""

from .grid_renderer import GridRenderer

__all__ = ['GridRenderer']
