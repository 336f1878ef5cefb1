#!/usr/bin/env python3
"""
Tile Wave - Tileset Inspector

Prints the catalog built from a tileset (every tile with its edges, tags
and per-direction compatibility lists) and optionally renders a sheet of
the tile artwork.
"""

import argparse
import sys

from tilewave.core.errors import TilewaveError
from tilewave.formats.tileset_data import DEFAULT_TILESET_PATH, TilesetData
from tilewave.rendering.pil_renderer import render_catalog_sheet


def main(argv=None):
    parser = argparse.ArgumentParser(description="Inspect a tileset's catalog")
    parser.add_argument(
        "tileset",
        nargs="?",
        default=str(DEFAULT_TILESET_PATH),
        help="Tileset JSON file (default: bundled countryside set)",
    )
    parser.add_argument("-o", "--output", help="Write a PNG sheet of all tiles")
    parser.add_argument("--size", type=int, default=48, help="Tile size in the sheet (default: 48)")

    args = parser.parse_args(argv)

    try:
        tileset = TilesetData.from_file(args.tileset)
        catalog = tileset.build_catalog()
    except FileNotFoundError:
        print(f"Error: Tileset file not found: {args.tileset}")
        sys.exit(1)
    except TilewaveError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if tileset.name:
        print(f"Tileset: {tileset.name}")
    for line in catalog.describe():
        print(line)

    if args.output:
        img = render_catalog_sheet(catalog, size=args.size)
        img.save(args.output)
        print(f"Saved: {args.output} ({img.width}x{img.height})")


if __name__ == "__main__":
    main()
