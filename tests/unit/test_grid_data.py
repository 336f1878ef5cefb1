"""Unit tests for grid JSON export."""

from tilewave.core.cell import Cell
from tilewave.core.grid import Grid
from tilewave.formats.grid_data import load_rows, save_snapshot, snapshot_to_dict


class TestGridData:
    def test_snapshot_to_dict(self, simple_catalog):
        grid = Grid(2, [Cell.collapsed_to(0), Cell.collapsed_to(1), Cell([0, 2]), Cell.collapsed_to(2)])
        data = snapshot_to_dict(grid.snapshot(), simple_catalog, {"seed": 3})
        assert data == {
            "dim": 2,
            "converged": False,
            "tiles": ["grass", "water", "tree"],
            "rows": [[0, 1], [None, 2]],
            "seed": 3,
        }

    def test_save_snapshot(self, simple_catalog, tmp_path):
        grid = Grid(1, [Cell.collapsed_to(1)])
        path = tmp_path / "grid.json"
        save_snapshot(path, grid.snapshot(), simple_catalog)
        assert load_rows(path) == [[1]]
