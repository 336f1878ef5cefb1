"""
Core solver functionality.

This package contains edge compatibility, the tile catalog, grid and cell
state, classification rules and the step engine.
"""

from .cell import Cell
from .edges import DEFAULT_EDGE_COMPAT, EdgeCompatibilityTable
from .errors import SolverConfigError, TileDefinitionError, TilewaveError
from .grid import CellSnapshot, Grid, GridSnapshot
from .rules import AffinityRule, ClusterRule, RuleContext, RuleResult, default_rules
from .solver import SolveResult, Solver, SolverState, advance
from .tiles import Tile, TileCatalog, TileDefinition
from .validation import validate_assignment

__all__ = [
    "Cell",
    "DEFAULT_EDGE_COMPAT",
    "EdgeCompatibilityTable",
    "SolverConfigError",
    "TileDefinitionError",
    "TilewaveError",
    "CellSnapshot",
    "Grid",
    "GridSnapshot",
    "AffinityRule",
    "ClusterRule",
    "RuleContext",
    "RuleResult",
    "default_rules",
    "SolveResult",
    "Solver",
    "SolverState",
    "advance",
    "Tile",
    "TileCatalog",
    "TileDefinition",
    "validate_assignment",
]
