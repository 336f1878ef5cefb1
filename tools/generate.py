#!/usr/bin/env python3
"""
Tile Wave - Grid Generator

Solves a tile grid without a window and writes the result as PNG, JSON
and/or text.
"""

import argparse
import logging
import sys
from pathlib import Path

from tilewave.core.errors import TilewaveError
from tilewave.core.palettes import DEFAULT_CELL_SIZE
from tilewave.core.solver import SolveResult, Solver
from tilewave.core.validation import find_adjacency_violations
from tilewave.formats.grid_data import save_snapshot
from tilewave.formats.tileset_data import DEFAULT_TILESET_PATH, TilesetData
from tilewave.rendering.pil_renderer import render_snapshot_to_image

DEFAULT_DIM = 10
DEFAULT_MAX_RESTARTS = 1000


def generate_grid(
    tileset: TilesetData,
    dim: int,
    seed: int | None = None,
    max_steps: int | None = None,
    max_restarts: int | None = DEFAULT_MAX_RESTARTS,
) -> tuple[Solver, SolveResult]:
    """
    Build a solver for a tileset and run it until converged or a bound is hit.

    Returns:
        (solver, result) so callers can read the final snapshot
    """
    solver = Solver(tileset.build_catalog(), dim, seed=seed)
    result = solver.run(max_steps=max_steps, max_restarts=max_restarts)
    return solver, result


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a tile grid with the step solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Print a 10x10 grid:
    tilewave-generate --text

  Repeatable 16x16 grid as PNG and JSON:
    tilewave-generate --dim 16 --seed 7 -o grid.png --json grid.json

  Custom tileset:
    tilewave-generate data/tilesets/countryside.json --dim 8 --text
        """,
    )
    parser.add_argument(
        "tileset",
        nargs="?",
        default=str(DEFAULT_TILESET_PATH),
        help="Tileset JSON file (default: bundled countryside set)",
    )
    parser.add_argument("--dim", type=int, default=DEFAULT_DIM, help=f"Grid size in cells (default: {DEFAULT_DIM})")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a repeatable grid")
    parser.add_argument("--max-steps", type=int, default=None, help="Give up after this many steps")
    parser.add_argument(
        "--max-restarts",
        type=int,
        default=DEFAULT_MAX_RESTARTS,
        help=f"Give up after this many restarts (default: {DEFAULT_MAX_RESTARTS})",
    )
    parser.add_argument("-o", "--output", help="Write the grid as a PNG image")
    parser.add_argument("--json", dest="json_path", help="Write the grid tile ids as JSON")
    parser.add_argument(
        "--cell-size",
        type=int,
        default=DEFAULT_CELL_SIZE,
        help=f"PNG cell size in pixels (default: {DEFAULT_CELL_SIZE})",
    )
    parser.add_argument("--text", action="store_true", help="Print the grid using tile glyphs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log solver restarts and steps")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cell_size <= 0:
        print(f"Error: --cell-size must be positive, got {args.cell_size}")
        sys.exit(1)

    try:
        tileset = TilesetData.from_file(args.tileset)
        solver, result = generate_grid(
            tileset,
            args.dim,
            seed=args.seed,
            max_steps=args.max_steps,
            max_restarts=args.max_restarts,
        )
    except FileNotFoundError:
        print(f"Error: Tileset file not found: {args.tileset}")
        sys.exit(1)
    except TilewaveError as e:
        print(f"Error: {e}")
        sys.exit(1)

    snapshot = solver.snapshot()
    status = "Converged" if result.converged else "Stopped"
    print(f"{status} after {result.steps} steps, {result.restarts} restarts "
          f"({snapshot.collapsed_count}/{args.dim * args.dim} cells collapsed)")

    violations = find_adjacency_violations(solver.catalog, snapshot)
    for col, row, side in violations:
        print(f"Warning: cell ({col}, {row}) does not fit its {side} neighbor")

    if args.text:
        print(snapshot.to_text(tileset.glyphs()))

    if args.output:
        img = render_snapshot_to_image(snapshot, solver.catalog, cell_size=args.cell_size)
        img.save(args.output)
        print(f"Saved: {args.output} ({img.width}x{img.height})")

    if args.json_path:
        metadata = {"seed": args.seed, "tileset": Path(args.tileset).name}
        save_snapshot(args.json_path, snapshot, solver.catalog, metadata)
        print(f"Saved: {args.json_path}")

    if not result.converged:
        sys.exit(1)


if __name__ == "__main__":
    main()
