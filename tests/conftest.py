"""Shared pytest fixtures for tile wave tests."""

import os
import random

import pytest

# Viewer tests run pygame without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from tilewave.core.edges import EdgeCompatibilityTable
from tilewave.core.tiles import TileCatalog, TileDefinition
from tilewave.formats.tileset_data import TilesetData


@pytest.fixture
def default_tileset():
    """Load the bundled countryside tileset."""
    return TilesetData.default()


@pytest.fixture
def catalog(default_tileset):
    """Catalog built from the bundled tileset (grass, water, tree, 4 track pieces)."""
    return default_tileset.build_catalog()


@pytest.fixture
def simple_catalog():
    """
    Three terrain tiles without tracks.

    grass fits anything; water and tree only fit themselves and grass.
    """
    return TileCatalog.build([
        TileDefinition("grass", ("0", "0", "0", "0")),
        TileDefinition("water", ("W", "W", "W", "W"), frozenset({"water"})),
        TileDefinition("tree", ("T", "T", "T", "T"), frozenset({"tree"})),
    ])


@pytest.fixture
def single_tile_catalog():
    """One tile that fits next to itself."""
    return TileCatalog.build(
        [TileDefinition("only", ("g", "g", "g", "g"))],
        EdgeCompatibilityTable({"g": ["g"]}),
    )


@pytest.fixture
def exclusive_catalog():
    """Two tiles that fit neither each other nor themselves."""
    return TileCatalog.build(
        [
            TileDefinition("a", ("a", "a", "a", "a")),
            TileDefinition("b", ("b", "b", "b", "b")),
        ],
        EdgeCompatibilityTable({"a": [], "b": []}),
    )


@pytest.fixture
def rng():
    """Seeded random source for repeatable runs."""
    return random.Random(1234)
