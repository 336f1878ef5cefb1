"""
Rendering.

PIL-based tile artwork and grid snapshot images.
"""

from .pil_renderer import (
    TileArtwork,
    render_catalog_sheet,
    render_snapshot_to_image,
    render_tile_image,
)

__all__ = [
    "TileArtwork",
    "render_catalog_sheet",
    "render_snapshot_to_image",
    "render_tile_image",
]
