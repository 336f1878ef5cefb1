"""
Tile Wave - Cell State

A cell is either collapsed to a single tile id or holds the set of tile ids
still possible at its position.
"""

from typing import Iterable


class Cell:
    """
    Per-position solver state.

    Options are kept as a sorted tuple so random draws over them are
    reproducible for a given seed. A collapsed cell keeps exactly one option,
    its finalized tile id.
    """

    __slots__ = ("collapsed", "options")

    def __init__(self, options: Iterable[int], collapsed: bool = False):
        self.options: tuple[int, ...] = tuple(sorted(set(options)))
        self.collapsed = collapsed
        if collapsed and len(self.options) != 1:
            raise ValueError(f"Collapsed cell needs exactly one option, got {self.options}")

    @classmethod
    def full(cls, tile_count: int) -> "Cell":
        """Create an undetermined cell allowing every tile id."""
        return cls(range(tile_count))

    @classmethod
    def collapsed_to(cls, tile_id: int) -> "Cell":
        return cls((tile_id,), collapsed=True)

    @property
    def tile_id(self) -> int | None:
        """Finalized tile id, or None while undetermined."""
        return self.options[0] if self.collapsed else None

    @property
    def entropy(self) -> int:
        return len(self.options)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.collapsed == other.collapsed and self.options == other.options

    def __hash__(self) -> int:
        return hash((self.collapsed, self.options))

    def __repr__(self) -> str:
        if self.collapsed:
            return f"Cell(collapsed={self.options[0]})"
        return f"Cell(options={list(self.options)})"
