"""
Tile Wave - Edge Compatibility

Edges are strings of one-character socket symbols read clockwise around the
tile. Two tiles meet cleanly when one edge, compared against the reversed
opposing edge of the neighbor, is compatible symbol by symbol.
"""

from typing import Iterable, Mapping

# Reference socket alphabet: "0" grass, "W" water shore, "T" tree line, "1" track
DEFAULT_EDGE_COMPAT: dict[str, tuple[str, ...]] = {
    "0": ("0", "W", "T"),
    "W": ("W", "0"),
    "T": ("T", "0"),
    "1": ("1",),
}


def split_edge(edge: str | Iterable[str]) -> tuple[str, ...]:
    """Decompose an edge into its ordered socket symbols."""
    return tuple(edge)


def reverse_edge(edge: str | Iterable[str]) -> tuple[str, ...]:
    """Reverse an edge so it reads in the neighbor's orientation."""
    return tuple(reversed(split_edge(edge)))


class EdgeCompatibilityTable:
    """
    Symmetric socket compatibility relation.

    Declaring "b" compatible with "a" also allows "a" next to "b", so a
    one-sided declaration can never make tiles fit in one direction only.
    """

    def __init__(self, declared: Mapping[str, Iterable[str]]):
        compat: dict[str, set[str]] = {}
        for symbol, partners in declared.items():
            compat.setdefault(symbol, set())
            for partner in partners:
                compat[symbol].add(partner)
                compat.setdefault(partner, set()).add(symbol)
        self._compat = {symbol: frozenset(partners) for symbol, partners in compat.items()}

    @classmethod
    def default(cls) -> "EdgeCompatibilityTable":
        return cls(DEFAULT_EDGE_COMPAT)

    @property
    def symbols(self) -> frozenset[str]:
        """All socket symbols known to the table."""
        return frozenset(self._compat)

    def knows(self, symbol: str) -> bool:
        return symbol in self._compat

    def compatible(self, a: str, b: str) -> bool:
        """Check whether socket a may abut socket b."""
        return b in self.partners(a)

    def partners(self, symbol: str) -> frozenset[str]:
        return self._compat.get(symbol, frozenset())

    def edges_match(self, edge: str | Iterable[str], other: str | Iterable[str]) -> bool:
        """
        Check whether two opposing edges fit together.

        Args:
            edge: Edge of the first tile, in its own clockwise order
            other: Opposing edge of the neighbor, in the neighbor's clockwise order

        Returns:
            True if the edges have equal length and every symbol of edge is
            compatible with the symbol at the same position of the reversed other.
        """
        a = split_edge(edge)
        b = reverse_edge(other)
        if len(a) != len(b):
            return False
        return all(self.compatible(x, y) for x, y in zip(a, b))

    def to_dict(self) -> dict[str, list[str]]:
        """Convert the table to a JSON-friendly dictionary."""
        return {symbol: sorted(partners) for symbol, partners in sorted(self._compat.items())}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeCompatibilityTable):
            return NotImplemented
        return self._compat == other._compat

    def __repr__(self) -> str:
        return f"EdgeCompatibilityTable({self.to_dict()!r})"
