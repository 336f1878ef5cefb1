"""
Tile Wave - Tile Catalog

Immutable catalog of tile definitions and the per-direction adjacency lists
derived from their edges. Built once; the solver only reads it.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from .directions import DIRECTIONS, OPPOSITE, direction_name
from .edges import EdgeCompatibilityTable, split_edge
from .errors import TileDefinitionError

logger = logging.getLogger(__name__)

EDGE_COUNT = 4


@dataclass(frozen=True)
class TileDefinition:
    """
    A tile as supplied by an asset collaborator, before it has an id.

    Attributes:
        name: Human-readable name, also used by renderers to pick artwork
        edges: Edge strings ordered up, right, down, left
        tags: Classification tags such as "water" or "road"
        rotation: Quarter turns applied to produce this definition
        base_name: Name of the unrotated tile (defaults to name)
    """

    name: str
    edges: tuple[str, ...]
    tags: frozenset[str] = field(default_factory=frozenset)
    rotation: int = 0
    base_name: str = ""

    def __post_init__(self):
        if not self.base_name:
            object.__setattr__(self, "base_name", self.name)
        object.__setattr__(self, "edges", tuple(self.edges))
        object.__setattr__(self, "tags", frozenset(self.tags))

    def rotate(self, turns: int) -> "TileDefinition":
        """
        Rotate the tile clockwise by 90 degrees per turn.

        Edges are cyclically permuted so that new[i] = old[i - turns]. The
        result is a new definition; the catalog gives it its own id.
        """
        count = len(self.edges)
        if count == 0:
            raise TileDefinitionError("cannot rotate a tile without edges", self.name)
        new_edges = tuple(self.edges[(i - turns) % count] for i in range(count))
        rotation = (self.rotation + turns) % 4
        name = self.base_name if rotation == 0 else f"{self.base_name}@{rotation * 90}"
        return TileDefinition(name, new_edges, self.tags, rotation, self.base_name)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


def expand_rotations(definition: TileDefinition, rotations: Iterable[int]) -> list[TileDefinition]:
    """Produce one definition per requested quarter-turn count, in order."""
    return [definition.rotate(turns) for turns in rotations]


@dataclass(frozen=True)
class Tile:
    """A catalog entry: a definition with a stable id and derived adjacency."""

    id: int
    definition: TileDefinition
    # compat[direction] = tile ids allowed in the cell on that side
    compat: tuple[tuple[int, ...], ...]

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def edges(self) -> tuple[str, ...]:
        return self.definition.edges

    @property
    def tags(self) -> frozenset[str]:
        return self.definition.tags

    def edge(self, direction: int) -> str:
        return self.definition.edges[direction]

    def allowed(self, direction: int) -> tuple[int, ...]:
        return self.compat[direction]

    def has_tag(self, tag: str) -> bool:
        return tag in self.definition.tags


class TileCatalog:
    """
    Ordered, immutable collection of tiles.

    Tile ids are positions in the catalog. For every tile t, direction d and
    tile u (t itself included), u is listed in t.compat[d] when t's edge d
    matches u's opposite edge through the edge compatibility table.
    """

    def __init__(self, tiles: Sequence[Tile], edge_table: EdgeCompatibilityTable):
        self._tiles = tuple(tiles)
        self.edge_table = edge_table
        self._tag_index: dict[str, frozenset[int]] = {}
        for tile in self._tiles:
            for tag in tile.tags:
                self._tag_index[tag] = self._tag_index.get(tag, frozenset()) | {tile.id}

    @classmethod
    def build(
        cls,
        definitions: Iterable[TileDefinition],
        edge_table: EdgeCompatibilityTable | None = None,
    ) -> "TileCatalog":
        """
        Build a catalog, deriving adjacency lists for every tile.

        Args:
            definitions: Tile definitions in catalog order
            edge_table: Socket compatibility (default: reference table)

        Returns:
            A new TileCatalog

        Raises:
            TileDefinitionError: If any definition is malformed. No partial
                catalog is produced.
        """
        if edge_table is None:
            edge_table = EdgeCompatibilityTable.default()

        definitions = list(definitions)
        for definition in definitions:
            _validate_definition(definition, edge_table)

        tiles = []
        for tile_id, definition in enumerate(definitions):
            compat = []
            for direction in DIRECTIONS:
                facing = OPPOSITE[direction]
                compat.append(tuple(
                    other_id
                    for other_id, other in enumerate(definitions)
                    if edge_table.edges_match(definition.edges[direction], other.edges[facing])
                ))
            tiles.append(Tile(tile_id, definition, tuple(compat)))

        catalog = cls(tiles, edge_table)
        logger.debug("Built tile catalog with %d tiles", len(catalog))
        return catalog

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __getitem__(self, tile_id: int) -> Tile:
        return self._tiles[tile_id]

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return self._tiles

    @property
    def all_ids(self) -> frozenset[int]:
        return frozenset(range(len(self._tiles)))

    def ids_with_tag(self, tag: str) -> frozenset[int]:
        """Get ids of all tiles carrying a classification tag."""
        return self._tag_index.get(tag, frozenset())

    def find(self, name: str) -> Tile | None:
        """Look up a tile by name."""
        for tile in self._tiles:
            if tile.name == name:
                return tile
        return None

    def can_neighbor(self, tile_id: int, other_id: int, direction: int) -> bool:
        """Check whether other_id may sit on the given side of tile_id."""
        return other_id in self._tiles[tile_id].allowed(direction)

    def describe(self) -> list[str]:
        """One line per tile summarising edges, tags and adjacency."""
        lines = []
        for tile in self._tiles:
            tags = ",".join(sorted(tile.tags)) or "-"
            lines.append(f"{tile.id:3d} {tile.name:<16} edges={list(tile.edges)} tags={tags}")
            for direction in DIRECTIONS:
                allowed = " ".join(str(i) for i in tile.compat[direction]) or "(none)"
                lines.append(f"      {direction_name(direction):<5} -> {allowed}")
        return lines


def _validate_definition(definition: TileDefinition, edge_table: EdgeCompatibilityTable):
    if len(definition.edges) != EDGE_COUNT:
        raise TileDefinitionError(
            f"expected {EDGE_COUNT} edges, got {len(definition.edges)}", definition.name
        )
    for direction, edge in enumerate(definition.edges):
        symbols = split_edge(edge)
        if not symbols:
            raise TileDefinitionError(f"{direction_name(direction)} edge is empty", definition.name)
        for symbol in symbols:
            if not edge_table.knows(symbol):
                raise TileDefinitionError(
                    f"unknown edge symbol '{symbol}' on {direction_name(direction)} edge",
                    definition.name,
                )
