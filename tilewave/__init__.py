"""
Tile Wave

Wave-function-collapse tile grid generation: a step-driven solver core plus
tileset loading and image rendering.
"""

__version__ = "0.1.0"
