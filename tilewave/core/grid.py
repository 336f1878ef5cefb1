"""
Tile Wave - Grid

DIM x DIM cells in row-major order (index = col + row * DIM) plus the
read-only snapshot handed to renderers between solver steps.
"""

from typing import Iterator, NamedTuple, Sequence

from .cell import Cell
from .directions import DIRECTION_DELTAS, DIRECTIONS


class Grid:
    """
    Square grid of cells.

    The solver never edits a grid in place during a step; it builds a new
    Grid from a list of cells and swaps it in.
    """

    def __init__(self, dim: int, cells: Sequence[Cell]):
        if len(cells) != dim * dim:
            raise ValueError(f"Grid of dimension {dim} needs {dim * dim} cells, got {len(cells)}")
        self.dim = dim
        self._cells = tuple(cells)

    @classmethod
    def reset(cls, dim: int, tile_count: int) -> "Grid":
        """Create a grid of undetermined cells, each allowing every tile id."""
        return cls(dim, [Cell.full(tile_count) for _ in range(dim * dim)])

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    @property
    def cells(self) -> tuple[Cell, ...]:
        return self._cells

    def index(self, col: int, row: int) -> int:
        return col + row * self.dim

    def position(self, index: int) -> tuple[int, int]:
        """Convert an index to (col, row)."""
        return index % self.dim, index // self.dim

    def cell_at(self, col: int, row: int) -> Cell:
        return self._cells[self.index(col, row)]

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.dim and 0 <= row < self.dim

    def neighbors(self, index: int) -> list[tuple[int, int]]:
        """
        Get in-bounds neighbors of a cell.

        Returns:
            List of (direction, neighbor_index) in up, right, down, left order
        """
        col, row = self.position(index)
        result = []
        for direction in DIRECTIONS:
            dc, dr = DIRECTION_DELTAS[direction]
            nc, nr = col + dc, row + dr
            if self.in_bounds(nc, nr):
                result.append((direction, self.index(nc, nr)))
        return result

    def undetermined_indices(self) -> list[int]:
        return [i for i, cell in enumerate(self._cells) if not cell.collapsed]

    def collapsed_count(self) -> int:
        return sum(1 for cell in self._cells if cell.collapsed)

    def is_converged(self) -> bool:
        return all(cell.collapsed for cell in self._cells)

    def replace(self, index: int, cell: Cell) -> "Grid":
        """Return a new grid with one cell swapped out."""
        cells = list(self._cells)
        cells[index] = cell
        return Grid(self.dim, cells)

    def snapshot(self) -> "GridSnapshot":
        return GridSnapshot(
            self.dim,
            tuple(
                CellSnapshot(cell.collapsed, cell.tile_id, len(cell.options))
                for cell in self._cells
            ),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.dim == other.dim and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(dim={self.dim}, collapsed={self.collapsed_count()}/{len(self._cells)})"


class CellSnapshot(NamedTuple):
    """What the presentation layer may know about one cell."""

    collapsed: bool
    tile_id: int | None
    candidate_count: int


class GridSnapshot(NamedTuple):
    """Immutable view of a grid between solver steps."""

    dim: int
    cells: tuple[CellSnapshot, ...]

    def cell_at(self, col: int, row: int) -> CellSnapshot:
        return self.cells[col + row * self.dim]

    def rows(self) -> list[list[CellSnapshot]]:
        return [list(self.cells[row * self.dim:(row + 1) * self.dim]) for row in range(self.dim)]

    def tile_ids(self) -> list[list[int | None]]:
        """Finalized tile ids as rows of columns (None where undetermined)."""
        return [[cell.tile_id for cell in row] for row in self.rows()]

    @property
    def collapsed_count(self) -> int:
        return sum(1 for cell in self.cells if cell.collapsed)

    @property
    def converged(self) -> bool:
        return all(cell.collapsed for cell in self.cells)

    def to_text(self, glyphs: Sequence[str] | None = None) -> str:
        """
        Render one character per cell.

        Args:
            glyphs: Character per tile id (default: base-36 digit of the id)

        Returns:
            Multi-line string; undetermined cells are shown as "."
        """
        lines = []
        for row in self.rows():
            chars = []
            for cell in row:
                if not cell.collapsed:
                    chars.append(".")
                elif glyphs is not None and cell.tile_id < len(glyphs):
                    chars.append(glyphs[cell.tile_id])
                else:
                    chars.append(_base36(cell.tile_id))
            lines.append("".join(chars))
        return "\n".join(lines)


def _base36(value: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    return digits[value] if value < len(digits) else "#"
