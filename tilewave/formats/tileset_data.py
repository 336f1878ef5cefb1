"""
Tile Wave - Tileset Data

Loads and saves tileset JSON files and turns them into tile catalogs.

File layout:
    {
      "name": "Countryside",
      "edge_compat": {"0": ["0", "W", "T"], ...},
      "tiles": [
        {"name": "grass", "edges": ["0", "0", "0", "0"], "tags": [], "glyph": ","},
        {"name": "track_t", "edges": ["1", "1", "0", "1"], "tags": ["road"],
         "rotations": [0, 1, 2, 3], "glyph": "^>v<"}
      ]
    }

Each entry of "rotations" adds one catalog tile, in order. A glyph string
with one character per rotation gives each rotated tile its own glyph.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from . import compact_json
from ..core.edges import DEFAULT_EDGE_COMPAT, EdgeCompatibilityTable
from ..core.errors import TileDefinitionError
from ..core.tiles import TileCatalog, TileDefinition, expand_rotations

DEFAULT_TILESET_PATH = (
    Path(__file__).parent.parent.parent / "data" / "tilesets" / "countryside.json"
)


@dataclass
class TileEntry:
    """One "tiles" entry of a tileset file."""

    name: str
    edges: list[str]
    tags: list[str] = field(default_factory=list)
    rotations: list[int] = field(default_factory=lambda: [0])
    glyph: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "edges": self.edges, "tags": self.tags}
        if self.rotations != [0]:
            data["rotations"] = self.rotations
        if self.glyph:
            data["glyph"] = self.glyph
        return data

    @staticmethod
    def from_dict(data: dict[str, Any], index: int) -> "TileEntry":
        if not isinstance(data, dict):
            raise TileDefinitionError(f"Tile entry {index} must be an object")
        name = data.get("name", f"tile_{index}")
        if not isinstance(name, str) or not name:
            raise TileDefinitionError(f"Tile entry {index}: 'name' must be a non-empty string")
        edges = data.get("edges")
        if not isinstance(edges, list) or not all(isinstance(e, str) for e in edges):
            raise TileDefinitionError("'edges' must be a list of strings", name)
        tags = data.get("tags", [])
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise TileDefinitionError("'tags' must be a list of strings", name)
        rotations = data.get("rotations", [0])
        if (
            not isinstance(rotations, list)
            or not rotations
            or not all(isinstance(r, int) and not isinstance(r, bool) for r in rotations)
        ):
            raise TileDefinitionError("'rotations' must be a non-empty list of integers", name)
        glyph = data.get("glyph", "")
        if not isinstance(glyph, str):
            raise TileDefinitionError("'glyph' must be a string", name)
        return TileEntry(name, list(edges), list(tags), list(rotations), glyph)

    def definitions(self) -> list[TileDefinition]:
        base = TileDefinition(self.name, tuple(self.edges), frozenset(self.tags))
        return expand_rotations(base, self.rotations)

    def glyphs(self) -> list[str]:
        if len(self.glyph) == len(self.rotations):
            return list(self.glyph)
        char = self.glyph[:1] or self.name[:1] or "?"
        return [char] * len(self.rotations)


class TilesetData:
    """Manages a tileset: socket compatibility plus ordered tile entries."""

    def __init__(self):
        self.name: str = ""
        self.edge_compat: dict[str, list[str]] = {
            symbol: list(partners) for symbol, partners in DEFAULT_EDGE_COMPAT.items()
        }
        self.entries: list[TileEntry] = []
        self.filepath: Optional[str] = None

    @classmethod
    def from_file(cls, path: str | Path) -> "TilesetData":
        tileset = cls()
        tileset.load(path)
        return tileset

    @classmethod
    def default(cls) -> "TilesetData":
        """Load the bundled countryside tileset."""
        return cls.from_file(DEFAULT_TILESET_PATH)

    def load(self, path: str | Path):
        """
        Load a tileset from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            TileDefinitionError: If the file is not valid tileset JSON
        """
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise TileDefinitionError(f"Invalid tileset JSON in {path}: {e}") from e

        self.apply_dict(data)
        self.filepath = str(path)

    def apply_dict(self, data: dict[str, Any]):
        """Replace this tileset's contents from a parsed JSON dictionary."""
        if not isinstance(data, dict):
            raise TileDefinitionError("Tileset must be a JSON object")
        tiles = data.get("tiles")
        if not isinstance(tiles, list):
            raise TileDefinitionError("Tileset is missing a 'tiles' list")

        edge_compat = data.get("edge_compat")
        if edge_compat is None:
            edge_compat = DEFAULT_EDGE_COMPAT
        elif not _is_symbol_map(edge_compat):
            raise TileDefinitionError("'edge_compat' must map symbols to lists of symbols")

        name = data.get("name", "")
        if not isinstance(name, str):
            raise TileDefinitionError("Tileset 'name' must be a string")

        self.name = name
        self.edge_compat = {symbol: list(partners) for symbol, partners in edge_compat.items()}
        self.entries = [TileEntry.from_dict(entry, i) for i, entry in enumerate(tiles)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "edge_compat": self.edge_compat,
            "tiles": [entry.to_dict() for entry in self.entries],
        }

    def save(self, path: str | Path | None = None):
        """Save tileset to a JSON file."""
        if path is None:
            path = self.filepath
        if path is None:
            raise ValueError("No save path specified")

        with open(path, "w", encoding="utf-8") as f:
            compact_json.dump(self.to_dict(), f)

        self.filepath = str(path)

    def edge_table(self) -> EdgeCompatibilityTable:
        return EdgeCompatibilityTable(self.edge_compat)

    def definitions(self) -> list[TileDefinition]:
        """All tile definitions in catalog order, rotations expanded."""
        result = []
        for entry in self.entries:
            result.extend(entry.definitions())
        return result

    def glyphs(self) -> list[str]:
        """One text glyph per catalog tile id."""
        result = []
        for entry in self.entries:
            result.extend(entry.glyphs())
        return result

    def build_catalog(self) -> TileCatalog:
        return TileCatalog.build(self.definitions(), self.edge_table())


def _is_symbol_map(value: Any) -> bool:
    if not isinstance(value, dict):
        return False
    for symbol, partners in value.items():
        if not isinstance(symbol, str) or not isinstance(partners, list):
            return False
        if not all(isinstance(partner, str) for partner in partners):
            return False
    return True
