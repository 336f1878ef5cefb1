"""
Tile Wave - Viewer Main

Command-line entry point for the viewer application.

Usage:
    tilewave-viewer [tileset.json] [--dim N] [--seed N] [--cell-size PX]
"""

import argparse
import logging
import sys

from tilewave.core.errors import TilewaveError
from tilewave.core.palettes import DEFAULT_CANVAS_SIZE, DEFAULT_DIM
from tilewave.core.solver import Solver
from tilewave.formats.tileset_data import DEFAULT_TILESET_PATH, TilesetData
from .application import ViewerApplication
from .core.constants import FPS, STEPS_PER_FRAME


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Watch a tile grid solve itself, one collapse per frame",
    )
    parser.add_argument(
        "tileset",
        nargs="?",
        default=str(DEFAULT_TILESET_PATH),
        help="Tileset JSON file (default: bundled countryside set)",
    )
    parser.add_argument("--dim", type=int, default=DEFAULT_DIM, help=f"Grid size in cells (default: {DEFAULT_DIM})")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a repeatable run")
    parser.add_argument(
        "--cell-size",
        type=int,
        default=None,
        help=f"Cell size in pixels (default: fit {DEFAULT_CANVAS_SIZE}px canvas)",
    )
    parser.add_argument("--fps", type=int, default=FPS, help=f"Frame rate (default: {FPS})")
    parser.add_argument(
        "--steps-per-frame",
        type=int,
        default=STEPS_PER_FRAME,
        help=f"Solver steps per frame (default: {STEPS_PER_FRAME})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log solver restarts")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the viewer."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.dim <= 0:
        print(f"Error: --dim must be positive, got {args.dim}")
        sys.exit(1)

    cell_size = args.cell_size if args.cell_size is not None else max(4, DEFAULT_CANVAS_SIZE // args.dim)
    if cell_size <= 0:
        print(f"Error: --cell-size must be positive, got {cell_size}")
        sys.exit(1)

    try:
        tileset = TilesetData.from_file(args.tileset)
        solver = Solver(tileset.build_catalog(), args.dim, seed=args.seed)
    except FileNotFoundError:
        print(f"Error: Tileset file not found: {args.tileset}")
        sys.exit(1)
    except TilewaveError as e:
        print(f"Error: {e}")
        sys.exit(1)

    title = f"Tile Wave - {tileset.name}" if tileset.name else "Tile Wave"
    app = ViewerApplication(
        solver,
        cell_size,
        fps=args.fps,
        steps_per_frame=args.steps_per_frame,
        title=title,
    )
    app.run()


if __name__ == "__main__":
    main()
