"""
Tile Wave - PIL Renderer

PIL-based rendering of procedural tile artwork and grid snapshots.
Used by the generate tool to write PNG images.
"""

try:
    from PIL import Image, ImageDraw
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.directions import DOWN, LEFT, RIGHT, UP
from ..core.edges import split_edge
from ..core.grid import GridSnapshot
from ..core.palettes import (
    DEFAULT_CELL_SIZE,
    GRID_LINE_COLOR,
    SOCKET_COLORS,
    SOCKET_RAIL_COLOR,
    TREE_CANOPY_COLOR,
    WATER_RIPPLE_COLOR,
    placeholder_color,
    tile_base_color,
)
from ..core.tiles import Tile, TileCatalog


def socket_anchor(direction: int, position: float, size: int) -> tuple[float, float]:
    """
    Get the pixel point on a tile edge for a socket.

    Edges are read clockwise, so position 0.0 is the top-left corner for the
    up edge, top-right for the right edge, bottom-right for the down edge
    and bottom-left for the left edge.
    """
    last = size - 1
    if direction == UP:
        return position * last, 0
    if direction == RIGHT:
        return last, position * last
    if direction == DOWN:
        return last - position * last, last
    return 0, last - position * last


def render_tile_image(tile: Tile, size: int) -> Image.Image:
    """
    Paint placeholder artwork for a tile.

    The background comes from the tile's tags; every socket whose symbol has
    a socket color gets a stub running from the edge to the tile center.
    """
    img = Image.new("RGB", (size, size), tile_base_color(tile.tags))
    draw = ImageDraw.Draw(img)
    center = (size - 1) / 2

    if tile.has_tag("water"):
        for i in range(1, 4):
            y = i * size / 4
            draw.line([(size * 0.2, y), (size * 0.45, y - size / 16), (size * 0.8, y)],
                      fill=WATER_RIPPLE_COLOR, width=max(1, size // 24))

    if tile.has_tag("tree"):
        r = size * 0.3
        draw.ellipse([center - r, center - r, center + r, center + r], fill=TREE_CANOPY_COLOR)

    band = max(2, size // 5)
    for direction in (UP, RIGHT, DOWN, LEFT):
        symbols = split_edge(tile.edge(direction))
        for k, symbol in enumerate(symbols):
            color = SOCKET_COLORS.get(symbol)
            if color is None:
                continue
            x, y = socket_anchor(direction, (k + 0.5) / len(symbols), size)
            draw.line([(x, y), (center, center)], fill=color, width=band)
            draw.line([(x, y), (center, center)], fill=SOCKET_RAIL_COLOR, width=max(1, band // 4))

    return img


class TileArtwork:
    """Caches painted tile images per (tile id, size)."""

    def __init__(self, catalog: TileCatalog):
        self.catalog = catalog
        self._cache: dict[tuple[int, int], Image.Image] = {}

    def get(self, tile_id: int, size: int) -> Image.Image:
        key = (tile_id, size)
        if key not in self._cache:
            self._cache[key] = render_tile_image(self.catalog[tile_id], size)
        return self._cache[key]


def render_snapshot_to_image(
    snapshot: GridSnapshot,
    catalog: TileCatalog,
    cell_size: int = DEFAULT_CELL_SIZE,
    draw_grid: bool = True,
    artwork: TileArtwork | None = None,
) -> Image.Image:
    """
    Render a grid snapshot to a PIL Image.

    Args:
        snapshot: Grid snapshot from the solver
        catalog: Catalog the snapshot's tile ids refer to
        cell_size: Size of each cell in pixels
        draw_grid: Whether to outline cells
        artwork: Shared tile image cache (optional)

    Returns:
        PIL Image object of dim * cell_size pixels square
    """
    if artwork is None:
        artwork = TileArtwork(catalog)

    img_size = snapshot.dim * cell_size
    img = Image.new("RGB", (img_size, img_size))
    draw = ImageDraw.Draw(img)

    for row in range(snapshot.dim):
        for col in range(snapshot.dim):
            cell = snapshot.cell_at(col, row)
            x, y = col * cell_size, row * cell_size
            if cell.collapsed:
                img.paste(artwork.get(cell.tile_id, cell_size), (x, y))
            else:
                color = placeholder_color(cell.candidate_count, len(catalog))
                draw.rectangle([x, y, x + cell_size - 1, y + cell_size - 1], fill=color)
            if draw_grid:
                draw.rectangle([x, y, x + cell_size - 1, y + cell_size - 1], outline=GRID_LINE_COLOR)

    return img


def render_catalog_sheet(catalog: TileCatalog, size: int = 48, columns: int = 8) -> Image.Image:
    """Render every tile side by side, in id order, for inspection."""
    count = len(catalog)
    rows = max(1, (count + columns - 1) // columns)
    cols = max(1, min(columns, count))
    sheet = Image.new("RGB", (cols * (size + 2), rows * (size + 2)), GRID_LINE_COLOR)
    for tile in catalog:
        row, col = divmod(tile.id, columns)
        sheet.paste(render_tile_image(tile, size), (col * (size + 2) + 1, row * (size + 2) + 1))
    return sheet
