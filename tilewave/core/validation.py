"""
Tile Wave - Assignment Validation

Checks a grid snapshot against the catalog's adjacency lists.
"""

from .directions import DIRECTION_DELTAS, RIGHT, DOWN, direction_name
from .grid import GridSnapshot
from .tiles import TileCatalog


def find_adjacency_violations(
    catalog: TileCatalog, snapshot: GridSnapshot
) -> list[tuple[int, int, str]]:
    """
    Find adjacent collapsed cells whose tiles do not fit together.

    Each pair is checked once (toward the right and downward neighbor).
    Undetermined cells are skipped.

    Returns:
        List of (col, row, direction_name) naming the first cell of each
        offending pair and the side it was checked on.
    """
    violations = []
    dim = snapshot.dim

    for row in range(dim):
        for col in range(dim):
            cell = snapshot.cell_at(col, row)
            if not cell.collapsed:
                continue
            for direction in (RIGHT, DOWN):
                dc, dr = DIRECTION_DELTAS[direction]
                nc, nr = col + dc, row + dr
                if nc >= dim or nr >= dim:
                    continue
                neighbor = snapshot.cell_at(nc, nr)
                if not neighbor.collapsed:
                    continue
                if not catalog.can_neighbor(cell.tile_id, neighbor.tile_id, direction):
                    violations.append((col, row, direction_name(direction)))

    return violations


def validate_assignment(catalog: TileCatalog, snapshot: GridSnapshot) -> set[tuple[int, int]]:
    """
    Get all cell positions involved in an adjacency violation.

    Returns:
        Set of (col, row) tuples
    """
    invalid = set()
    for col, row, name in find_adjacency_violations(catalog, snapshot):
        invalid.add((col, row))
        if name == "right":
            invalid.add((col + 1, row))
        else:
            invalid.add((col, row + 1))
    return invalid
