"""Unit tests for classification rules and their effect on relaxation."""

import pytest

from tilewave.core.cell import Cell
from tilewave.core.grid import Grid
from tilewave.core.rules import (
    AffinityRule,
    ClusterRule,
    RuleContext,
    RuleResult,
    apply_rules,
    default_rules,
)
from tilewave.core.solver import relax_cell


GRASS, WATER, TREE = 0, 1, 2
TRACK_WEST = 6  # track_t@270: track sockets up, down and left


def grid_around_center(tile_count, up=None, right=None, down=None, left=None):
    """3x3 grid with an undetermined center and optional collapsed neighbors."""
    cells = [Cell.full(tile_count) for _ in range(9)]
    for index, tile_id in ((1, up), (5, right), (7, down), (3, left)):
        if tile_id is not None:
            cells[index] = Cell.collapsed_to(tile_id)
    return Grid(3, cells)


class TestClusterRule:
    def test_below_threshold_unchanged(self, simple_catalog):
        context = RuleContext(simple_catalog, [WATER])
        result = ClusterRule().apply(frozenset({GRASS, WATER}), context)
        assert result.outcome == RuleResult.UNCHANGED

    def test_two_water_neighbors_force_water(self, simple_catalog):
        context = RuleContext(simple_catalog, [WATER, WATER, GRASS])
        result = ClusterRule().apply(frozenset({GRASS, WATER}), context)
        assert result.outcome == RuleResult.REPLACE
        assert result.options == frozenset({WATER})

    def test_no_water_option_is_infeasible(self, simple_catalog):
        context = RuleContext(simple_catalog, [WATER, WATER])
        result = ClusterRule().apply(frozenset({GRASS}), context)
        assert result.is_infeasible

    def test_custom_tag(self, simple_catalog):
        context = RuleContext(simple_catalog, [TREE, TREE, TREE])
        rule = ClusterRule("tree", min_neighbors=3)
        assert rule.apply(frozenset({GRASS, TREE}), context).options == frozenset({TREE})


class TestAffinityRule:
    def test_water_neighbor_attracts_water(self, simple_catalog):
        context = RuleContext(simple_catalog, [WATER])
        result = AffinityRule().apply(frozenset({GRASS, WATER}), context)
        assert result.options == frozenset({WATER})

    def test_road_neighbor_blocks_affinity(self, catalog):
        context = RuleContext(catalog, [WATER, TRACK_WEST])
        result = AffinityRule().apply(frozenset({GRASS, WATER}), context)
        assert result.outcome == RuleResult.UNCHANGED

    def test_never_infeasible(self, simple_catalog):
        context = RuleContext(simple_catalog, [WATER, WATER])
        result = AffinityRule().apply(frozenset({GRASS}), context)
        assert result.outcome == RuleResult.UNCHANGED


class TestApplyRules:
    def test_rules_chain(self, simple_catalog):
        options, reason = apply_rules(default_rules(), frozenset({GRASS, WATER}), RuleContext(simple_catalog, [WATER]))
        assert options == frozenset({WATER})
        assert reason is None

    def test_infeasible_reports_rule(self, simple_catalog):
        options, reason = apply_rules(default_rules(), frozenset({GRASS}), RuleContext(simple_catalog, [WATER, WATER]))
        assert options is None
        assert "cluster:water" in reason

    def test_no_rules(self, simple_catalog):
        options, reason = apply_rules([], frozenset({GRASS, TREE}), RuleContext(simple_catalog, [WATER, WATER]))
        assert options == frozenset({GRASS, TREE})


class TestRelaxCellWithRules:
    def test_two_water_neighbors(self, simple_catalog):
        grid = grid_around_center(3, up=WATER, left=WATER)
        options, reason = relax_cell(grid, 4, simple_catalog, default_rules())
        assert options == frozenset({WATER})
        assert reason is None

    def test_water_and_tree_neighbors_contradict(self, simple_catalog):
        # Compatibility leaves only grass; the cluster rule demands water
        grid = grid_around_center(3, up=WATER, left=WATER, right=TREE)
        options, reason = relax_cell(grid, 4, simple_catalog, default_rules())
        assert options is None
        assert "(1, 1)" in reason

    def test_water_and_tree_without_rules(self, simple_catalog):
        grid = grid_around_center(3, up=WATER, left=WATER, right=TREE)
        options, _ = relax_cell(grid, 4, simple_catalog, [])
        assert options == frozenset({GRASS})

    def test_single_water_neighbor(self, catalog):
        grid = grid_around_center(len(catalog), up=WATER)
        options, _ = relax_cell(grid, 4, catalog, default_rules())
        assert options == frozenset({WATER})

    def test_road_neighbor_keeps_grass(self, catalog):
        grid = grid_around_center(len(catalog), up=WATER, left=TRACK_WEST)
        options, _ = relax_cell(grid, 4, catalog, default_rules())
        assert options == frozenset({GRASS, WATER})

    def test_undetermined_neighbors_do_not_count(self, simple_catalog):
        cells = [Cell.full(3) for _ in range(9)]
        cells[1] = Cell([WATER])
        cells[3] = Cell([WATER])
        options, _ = relax_cell(Grid(3, cells), 4, simple_catalog, default_rules())
        assert options == frozenset({GRASS, WATER})
