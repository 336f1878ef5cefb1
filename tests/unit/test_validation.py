"""Unit tests for adjacency validation of snapshots."""

from tilewave.core.cell import Cell
from tilewave.core.grid import Grid
from tilewave.core.validation import find_adjacency_violations, validate_assignment

GRASS, WATER, TREE = 0, 1, 2


class TestValidation:
    def test_valid_grid(self, simple_catalog):
        grid = Grid(2, [Cell.collapsed_to(WATER), Cell.collapsed_to(GRASS),
                        Cell.collapsed_to(GRASS), Cell.collapsed_to(TREE)])
        assert validate_assignment(simple_catalog, grid.snapshot()) == set()

    def test_water_next_to_tree(self, simple_catalog):
        grid = Grid(2, [Cell.collapsed_to(WATER), Cell.collapsed_to(TREE),
                        Cell.collapsed_to(GRASS), Cell.collapsed_to(GRASS)])
        snapshot = grid.snapshot()
        assert find_adjacency_violations(simple_catalog, snapshot) == [(0, 0, "right")]
        assert validate_assignment(simple_catalog, snapshot) == {(0, 0), (1, 0)}

    def test_vertical_violation(self, simple_catalog):
        grid = Grid(2, [Cell.collapsed_to(GRASS), Cell.collapsed_to(TREE),
                        Cell.collapsed_to(GRASS), Cell.collapsed_to(WATER)])
        assert validate_assignment(simple_catalog, grid.snapshot()) == {(1, 0), (1, 1)}

    def test_undetermined_cells_skipped(self, simple_catalog):
        grid = Grid(2, [Cell.collapsed_to(WATER), Cell([TREE]),
                        Cell.full(3), Cell.collapsed_to(TREE)])
        assert validate_assignment(simple_catalog, grid.snapshot()) == set()
