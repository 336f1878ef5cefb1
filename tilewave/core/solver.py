"""
Tile Wave - Solver Step Engine

Wave-function-collapse style solver that advances one collapse per step.

Each step:
    1. Stops if every cell is collapsed
    2. Picks a minimum-entropy undetermined cell (uniform random tie-break)
    3. Collapses it to a random option
    4. Recomputes every other undetermined cell's domain from its neighbors
       in a single pass over the grid as it stood before the step, with only
       the new collapse in place, then applies classification rules
    5. Commits the new grid, or resets the whole grid if any domain is empty

Constraints travel one cell per step rather than to a fixpoint, so a choice
can turn out infeasible several steps later. That surfaces as an empty
domain and is repaired by restarting from a full-domain grid.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .cell import Cell
from .directions import opposite
from .errors import SolverConfigError
from .grid import Grid, GridSnapshot
from .rules import ClassificationRule, RuleContext, apply_rules, default_rules
from .tiles import TileCatalog

logger = logging.getLogger(__name__)


class SolverState(Enum):
    RUNNING = "running"
    CONVERGED = "converged"
    RESTARTING = "restarting"


@dataclass
class StepOutcome:
    """Grid produced by one step and how it was reached."""

    grid: Grid
    state: SolverState
    collapsed_index: int | None = None
    tile_id: int | None = None
    reason: str | None = None


@dataclass
class SolveResult:
    """Summary of a bounded run."""

    converged: bool
    steps: int
    restarts: int


def relax_cell(
    grid: Grid,
    index: int,
    catalog: TileCatalog,
    rules: Sequence[ClassificationRule],
) -> tuple[frozenset[int] | None, str | None]:
    """
    Recompute one cell's domain from scratch.

    Starts from every tile id and intersects, for each in-bounds neighbor,
    the union of what the neighbor's candidates allow on the facing side.
    Undetermined neighbors contribute all of their candidates. Rules run
    afterwards on the narrowed domain.

    Returns:
        (options, None) with a non-empty domain, or (None, reason) when the
        cell has no legal tile left.
    """
    options = set(range(len(catalog)))
    collapsed_neighbors = []

    for direction, neighbor_index in grid.neighbors(index):
        neighbor = grid[neighbor_index]
        facing = opposite(direction)
        allowed: set[int] = set()
        for option in neighbor.options:
            allowed.update(catalog[option].allowed(facing))
        options &= allowed
        if neighbor.collapsed:
            collapsed_neighbors.append(neighbor.tile_id)

    if not options:
        return None, f"no compatible tile at {grid.position(index)}"

    narrowed, reason = apply_rules(rules, frozenset(options), RuleContext(catalog, collapsed_neighbors))
    if narrowed is None:
        return None, f"{reason} at {grid.position(index)}"
    if not narrowed:
        return None, f"rules left no tile at {grid.position(index)}"
    return narrowed, None


def advance(
    grid: Grid,
    catalog: TileCatalog,
    rules: Sequence[ClassificationRule],
    rng: random.Random,
) -> StepOutcome:
    """
    Perform one solver step without touching the input grid.

    Returns:
        StepOutcome whose grid is the input grid itself when already
        converged, a fresh full-domain grid on contradiction, or the
        committed next grid otherwise.
    """
    undetermined = grid.undetermined_indices()
    if not undetermined:
        return StepOutcome(grid, SolverState.CONVERGED)

    min_entropy = min(grid[i].entropy for i in undetermined)
    lowest = [i for i in undetermined if grid[i].entropy == min_entropy]
    chosen = rng.choice(lowest)

    options = grid[chosen].options
    if not options:
        return StepOutcome(
            Grid.reset(grid.dim, len(catalog)),
            SolverState.RESTARTING,
            collapsed_index=chosen,
            reason=f"empty domain at {grid.position(chosen)}",
        )

    pick = rng.choice(options)
    staged = grid.replace(chosen, Cell.collapsed_to(pick))

    next_cells = list(staged.cells)
    for index, cell in enumerate(staged):
        if cell.collapsed:
            continue
        relaxed, reason = relax_cell(staged, index, catalog, rules)
        if relaxed is None:
            return StepOutcome(
                Grid.reset(grid.dim, len(catalog)),
                SolverState.RESTARTING,
                collapsed_index=chosen,
                tile_id=pick,
                reason=reason,
            )
        next_cells[index] = Cell(relaxed)

    next_grid = Grid(grid.dim, next_cells)
    state = SolverState.CONVERGED if next_grid.is_converged() else SolverState.RUNNING
    return StepOutcome(next_grid, state, collapsed_index=chosen, tile_id=pick)


class Solver:
    """
    Owns the grid and drives it one step per external tick.

    The rendering side only sees snapshots; step() and regenerate() are the
    whole control surface.
    """

    def __init__(
        self,
        catalog: TileCatalog,
        dim: int,
        rules: Sequence[ClassificationRule] | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        """
        Args:
            catalog: Tile catalog; must contain at least one tile
            dim: Grid width and height in cells
            rules: Classification rules in priority order (default: reference rules)
            rng: Random source for tie-breaks and picks
            seed: Seed for a new random source when rng is not given

        Raises:
            SolverConfigError: On a bad dimension, empty catalog, or bad
                random source or seed.
        """
        if isinstance(dim, bool) or not isinstance(dim, int) or dim <= 0:
            raise SolverConfigError(f"Grid dimension must be a positive integer, got {dim!r}")
        _check_catalog(catalog)

        if rng is not None and seed is not None:
            raise SolverConfigError("Pass either rng or seed, not both")
        if rng is not None and not isinstance(rng, random.Random):
            raise SolverConfigError(f"Random source must be a random.Random, got {type(rng).__name__}")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise SolverConfigError(f"Seed must be an integer, got {seed!r}")

        self.catalog = catalog
        self.dim = dim
        self.rules = list(default_rules() if rules is None else rules)
        self.rng = rng if rng is not None else random.Random(seed)

        self.grid = Grid.reset(dim, len(catalog))
        self.step_count = 0
        self.restart_count = 0
        self.last_restart_reason: str | None = None

    @property
    def state(self) -> SolverState:
        return SolverState.CONVERGED if self.grid.is_converged() else SolverState.RUNNING

    def step(self) -> SolverState:
        """
        Advance one selection and relaxation cycle.

        Returns:
            CONVERGED when nothing is left to do (the grid is untouched),
            RESTARTING when a contradiction reset the grid, RUNNING otherwise.
        """
        outcome = advance(self.grid, self.catalog, self.rules, self.rng)
        if outcome.state == SolverState.CONVERGED and outcome.grid is self.grid:
            return SolverState.CONVERGED

        self.grid = outcome.grid
        self.step_count += 1

        if outcome.state == SolverState.RESTARTING:
            self.restart_count += 1
            self.last_restart_reason = outcome.reason
            logger.info("Contradiction (%s); restarting grid (restart #%d)", outcome.reason, self.restart_count)
        else:
            logger.debug(
                "Step %d: collapsed cell %s to tile %d",
                self.step_count,
                self.grid.position(outcome.collapsed_index),
                outcome.tile_id,
            )
            if outcome.state == SolverState.CONVERGED:
                logger.info("Converged after %d steps and %d restarts", self.step_count, self.restart_count)

        return outcome.state

    def regenerate(self):
        """Discard all progress and start again from a full-domain grid."""
        self.grid = Grid.reset(self.dim, len(self.catalog))
        self.step_count = 0
        self.restart_count = 0
        self.last_restart_reason = None
        logger.debug("Regenerated %dx%d grid", self.dim, self.dim)

    def load_catalog(self, catalog: TileCatalog):
        """Swap in redefined tiles; the grid restarts since old ids are meaningless."""
        _check_catalog(catalog)
        self.catalog = catalog
        self.regenerate()

    def snapshot(self) -> GridSnapshot:
        return self.grid.snapshot()

    def run(self, max_steps: int | None = None, max_restarts: int | None = None) -> SolveResult:
        """
        Step until converged or a bound is reached.

        Args:
            max_steps: Stop after this many steps in this call
            max_restarts: Stop once this many restarts happened in this call

        Returns:
            SolveResult with the counts for this call only
        """
        steps = 0
        restarts = 0
        while True:
            if self.grid.is_converged():
                return SolveResult(True, steps, restarts)
            if max_steps is not None and steps >= max_steps:
                return SolveResult(False, steps, restarts)
            if max_restarts is not None and restarts >= max_restarts:
                return SolveResult(False, steps, restarts)

            state = self.step()
            steps += 1
            if state == SolverState.RESTARTING:
                restarts += 1


def _check_catalog(catalog: TileCatalog):
    if not isinstance(catalog, TileCatalog):
        raise SolverConfigError(f"Expected a TileCatalog, got {type(catalog).__name__}")
    if len(catalog) == 0:
        raise SolverConfigError("Tile catalog is empty")
