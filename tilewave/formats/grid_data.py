"""
Tile Wave - Grid Data Export

Writes solved (or partially solved) grids to JSON for other tools.
"""

from pathlib import Path
from typing import Any

from . import compact_json
from ..core.grid import GridSnapshot
from ..core.tiles import TileCatalog


def snapshot_to_dict(
    snapshot: GridSnapshot,
    catalog: TileCatalog,
    metadata: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Convert a snapshot to a JSON-friendly dictionary.

    Rows hold tile ids (null where undetermined); "tiles" maps ids to names
    so the file can be read without the tileset.
    """
    return {
        "dim": snapshot.dim,
        "converged": snapshot.converged,
        "tiles": [tile.name for tile in catalog],
        "rows": snapshot.tile_ids(),
        **(metadata or {}),
    }


def save_snapshot(
    path: str | Path,
    snapshot: GridSnapshot,
    catalog: TileCatalog,
    metadata: dict[str, Any] | None = None,
):
    """Save a snapshot as compact JSON."""
    with open(path, "w") as f:
        compact_json.dump(snapshot_to_dict(snapshot, catalog, metadata), f)


def load_rows(path: str | Path) -> list[list[int | None]]:
    """Load the tile id rows from a saved grid file."""
    with open(path) as f:
        data = compact_json.load(f)
    return data["rows"]
