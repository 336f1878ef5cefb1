"""
File formats.

Tileset JSON loading and grid export.
"""

from .grid_data import save_snapshot, snapshot_to_dict
from .tileset_data import DEFAULT_TILESET_PATH, TileEntry, TilesetData

__all__ = [
    "save_snapshot",
    "snapshot_to_dict",
    "DEFAULT_TILESET_PATH",
    "TileEntry",
    "TilesetData",
]
