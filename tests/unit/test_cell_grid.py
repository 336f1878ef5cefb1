"""Unit tests for Cell, Grid and GridSnapshot."""

import pytest

from tilewave.core.cell import Cell
from tilewave.core.directions import DOWN, LEFT, RIGHT, UP
from tilewave.core.grid import Grid


class TestCell:
    def test_full_cell(self):
        cell = Cell.full(4)
        assert not cell.collapsed
        assert cell.options == (0, 1, 2, 3)
        assert cell.entropy == 4
        assert cell.tile_id is None

    def test_options_are_sorted_and_unique(self):
        assert Cell([3, 1, 3, 0]).options == (0, 1, 3)

    def test_collapsed_cell(self):
        cell = Cell.collapsed_to(5)
        assert cell.collapsed
        assert cell.tile_id == 5
        assert cell.entropy == 1

    def test_single_option_is_not_collapsed(self):
        cell = Cell([2])
        assert not cell.collapsed
        assert cell.tile_id is None

    def test_collapsed_needs_one_option(self):
        with pytest.raises(ValueError, match="exactly one option"):
            Cell([1, 2], collapsed=True)

    def test_equality(self):
        assert Cell([1, 2]) == Cell([2, 1])
        assert Cell([1]) != Cell.collapsed_to(1)
        assert len({Cell([1, 2]), Cell([2, 1])}) == 1


class TestGrid:
    def test_reset(self):
        grid = Grid.reset(3, 5)
        assert len(grid) == 9
        assert all(cell == Cell.full(5) for cell in grid)
        assert grid.collapsed_count() == 0
        assert not grid.is_converged()

    def test_cell_count_must_match(self):
        with pytest.raises(ValueError, match="needs 4 cells"):
            Grid(2, [Cell.full(1)] * 3)

    def test_row_major_indexing(self):
        grid = Grid.reset(4, 1)
        assert grid.index(1, 2) == 9
        assert grid.position(9) == (1, 2)

    def test_corner_neighbors(self):
        grid = Grid.reset(3, 1)
        assert grid.neighbors(0) == [(RIGHT, 1), (DOWN, 3)]

    def test_center_neighbors(self):
        grid = Grid.reset(3, 1)
        assert grid.neighbors(4) == [(UP, 1), (RIGHT, 5), (DOWN, 7), (LEFT, 3)]

    def test_edge_neighbors(self):
        grid = Grid.reset(3, 1)
        assert grid.neighbors(8) == [(UP, 5), (LEFT, 7)]

    def test_single_cell_has_no_neighbors(self):
        assert Grid.reset(1, 1).neighbors(0) == []

    def test_replace_returns_new_grid(self):
        grid = Grid.reset(2, 3)
        updated = grid.replace(1, Cell.collapsed_to(2))
        assert grid[1] == Cell.full(3)
        assert updated[1].tile_id == 2
        assert updated.undetermined_indices() == [0, 2, 3]

    def test_converged(self):
        grid = Grid(1, [Cell.collapsed_to(0)])
        assert grid.is_converged()


class TestGridSnapshot:
    def test_snapshot_fields(self):
        grid = Grid(2, [Cell.collapsed_to(1), Cell([0, 2]), Cell.full(3), Cell.collapsed_to(0)])
        snapshot = grid.snapshot()
        assert snapshot.dim == 2
        assert snapshot.cell_at(0, 0) == (True, 1, 1)
        assert snapshot.cell_at(1, 0) == (False, None, 2)
        assert snapshot.cell_at(0, 1).candidate_count == 3
        assert snapshot.collapsed_count == 2
        assert not snapshot.converged
        assert snapshot.tile_ids() == [[1, None], [None, 0]]

    def test_snapshot_is_detached(self):
        grid = Grid.reset(2, 2)
        snapshot = grid.snapshot()
        grid.replace(0, Cell.collapsed_to(1))
        assert not snapshot.cell_at(0, 0).collapsed

    def test_to_text_default_glyphs(self):
        grid = Grid(2, [Cell.collapsed_to(1), Cell([0, 2]), Cell.collapsed_to(11), Cell.collapsed_to(0)])
        assert grid.snapshot().to_text() == "1.\nb0"

    def test_to_text_custom_glyphs(self):
        grid = Grid(2, [Cell.collapsed_to(1), Cell.collapsed_to(0), Cell([0]), Cell.collapsed_to(1)])
        assert grid.snapshot().to_text([",", "~"]) == "~,\n.~"
