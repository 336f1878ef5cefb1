"""
Tile Wave - Pygame Rendering

Turns procedural tile artwork into pygame surfaces and draws placeholders
for undetermined cells.
"""

import pygame
from pygame import Surface

from tilewave.core.palettes import placeholder_color
from tilewave.core.tiles import TileCatalog
from tilewave.rendering.pil_renderer import TileArtwork


class TileSurfaces:
    """Caches pygame surfaces per (tile id, size), painted via the PIL artwork."""

    def __init__(self, catalog: TileCatalog):
        self.catalog = catalog
        self.artwork = TileArtwork(catalog)
        self._cache: dict[tuple[int, int], Surface] = {}
        self._placeholder_cache: dict[tuple[int, int], Surface] = {}

    def tile(self, tile_id: int, size: int) -> Surface:
        """Get the surface for a collapsed cell's tile."""
        key = (tile_id, size)
        if key not in self._cache:
            img = self.artwork.get(tile_id, size)
            self._cache[key] = pygame.image.frombytes(img.tobytes(), img.size, "RGB")
        return self._cache[key]

    def placeholder(self, candidate_count: int, size: int) -> Surface:
        """Get a checkered placeholder shaded by remaining candidates."""
        key = (candidate_count, size)
        if key in self._placeholder_cache:
            return self._placeholder_cache[key]

        base = placeholder_color(candidate_count, len(self.catalog))
        alt = tuple(min(255, c + 16) for c in base)
        surf = Surface((size, size))
        surf.fill(base)
        checker_size = max(1, size // 4)
        for row in range(4):
            for col in range(4):
                color = base if (row + col) % 2 == 0 else alt
                rect = (col * checker_size, row * checker_size, checker_size, checker_size)
                pygame.draw.rect(surf, color, rect)

        self._placeholder_cache[key] = surf
        return surf
