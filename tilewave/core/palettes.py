"""
Tile Wave - Colors and Dimensions

Shared constants for tile artwork colors and default grid sizes used by the
viewer and the command-line tools.
"""

from typing import Tuple

# Type alias for RGB color
RGBColor = Tuple[int, int, int]

# Tile background color by classification tag; first matching tag wins
TAG_COLORS: dict[str, RGBColor] = {
    "water": (0x3C, 0x78, 0xD8),
    "tree": (0x1E, 0x6B, 0x2A),
    "road": (0x5C, 0xB8, 0x4A),
}
TAG_PRIORITY = ("water", "tree", "road")

# Untagged tiles (plain grass)
DEFAULT_TILE_COLOR: RGBColor = (0x5C, 0xB8, 0x4A)

# Socket stubs painted on edges; symbols not listed draw nothing
SOCKET_COLORS: dict[str, RGBColor] = {
    "1": (0x8A, 0x6A, 0x4A),
}
SOCKET_RAIL_COLOR: RGBColor = (0x40, 0x40, 0x40)
TREE_CANOPY_COLOR: RGBColor = (0x0E, 0x4A, 0x18)
WATER_RIPPLE_COLOR: RGBColor = (0x9C, 0xC8, 0xFF)

# Undetermined cell placeholder shading (darkest = fewest candidates)
PLACEHOLDER_DARK: RGBColor = (0x20, 0x20, 0x20)
PLACEHOLDER_LIGHT: RGBColor = (0x70, 0x70, 0x70)

GRID_LINE_COLOR: RGBColor = (0x50, 0x50, 0x50)

# Grid defaults
DEFAULT_DIM = 20
DEFAULT_CANVAS_SIZE = 600
DEFAULT_CELL_SIZE = DEFAULT_CANVAS_SIZE // DEFAULT_DIM


def tile_base_color(tags: frozenset[str]) -> RGBColor:
    """Pick the background color for a tile from its tags."""
    for tag in TAG_PRIORITY:
        if tag in tags:
            return TAG_COLORS[tag]
    for tag in sorted(tags):
        if tag in TAG_COLORS:
            return TAG_COLORS[tag]
    return DEFAULT_TILE_COLOR


def placeholder_color(candidate_count: int, tile_count: int) -> RGBColor:
    """Shade an undetermined cell; more candidates render lighter."""
    if tile_count <= 1:
        return PLACEHOLDER_LIGHT
    t = max(0.0, min(1.0, (candidate_count - 1) / (tile_count - 1)))
    return tuple(
        int(dark + (light - dark) * t)
        for dark, light in zip(PLACEHOLDER_DARK, PLACEHOLDER_LIGHT)
    )
