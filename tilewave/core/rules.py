"""
Tile Wave - Classification Rules

Tag-based constraints consulted while relaxing a cell's candidate domain.
Rules are plain objects in an ordered list; each one sees the domain as
left by the rules before it.
"""

from typing import Iterable, Protocol, Sequence

from .tiles import TileCatalog

WATER_TAG = "water"
ROAD_TAG = "road"


class RuleContext:
    """
    What a rule may know about the cell being relaxed.

    Only collapsed neighbors are visible; undetermined neighbors carry no
    tags yet.
    """

    def __init__(self, catalog: TileCatalog, collapsed_neighbors: Sequence[int]):
        self.catalog = catalog
        self.collapsed_neighbors = tuple(collapsed_neighbors)

    def count_neighbors_with(self, tag: str) -> int:
        """Count collapsed neighbors whose tile carries the tag."""
        return sum(1 for tile_id in self.collapsed_neighbors if self.catalog[tile_id].has_tag(tag))

    def tagged(self, options: Iterable[int], tag: str) -> frozenset[int]:
        """Subset of options whose tiles carry the tag."""
        return frozenset(options) & self.catalog.ids_with_tag(tag)


class RuleResult:
    """Outcome of a rule: no change, a replacement domain, or infeasible."""

    UNCHANGED = "unchanged"
    REPLACE = "replace"
    INFEASIBLE = "infeasible"

    def __init__(self, outcome: str, options: frozenset[int] | None = None, reason: str | None = None):
        self.outcome = outcome
        self.options = options
        self.reason = reason

    @staticmethod
    def unchanged() -> "RuleResult":
        return RuleResult(RuleResult.UNCHANGED)

    @staticmethod
    def replace(options: Iterable[int]) -> "RuleResult":
        """Narrow the domain to the given subset."""
        return RuleResult(RuleResult.REPLACE, frozenset(options))

    @staticmethod
    def infeasible(reason: str | None = None) -> "RuleResult":
        """No tile can satisfy the rule here; the grid must restart."""
        return RuleResult(RuleResult.INFEASIBLE, reason=reason)

    @property
    def is_infeasible(self) -> bool:
        return self.outcome == RuleResult.INFEASIBLE

    def __repr__(self) -> str:
        if self.outcome == RuleResult.REPLACE:
            return f"RuleResult(replace={sorted(self.options)})"
        return f"RuleResult({self.outcome})"


class ClassificationRule(Protocol):
    """Protocol for rules. Rules don't need to inherit from this."""

    name: str

    def apply(self, options: frozenset[int], context: RuleContext) -> RuleResult:
        """Inspect a candidate domain and return the rule outcome."""
        ...


class ClusterRule:
    """
    Force a tag to spread once enough neighbors already carry it.

    With at least min_neighbors collapsed neighbors tagged `tag`, the domain
    is replaced by its tagged subset. An empty tagged subset is infeasible.
    """

    def __init__(self, tag: str = WATER_TAG, min_neighbors: int = 2):
        self.tag = tag
        self.min_neighbors = min_neighbors
        self.name = f"cluster:{tag}"

    def apply(self, options: frozenset[int], context: RuleContext) -> RuleResult:
        if context.count_neighbors_with(self.tag) < self.min_neighbors:
            return RuleResult.unchanged()
        tagged = context.tagged(options, self.tag)
        if not tagged:
            return RuleResult.infeasible(
                f"{self.min_neighbors}+ {self.tag} neighbors but no {self.tag} option left"
            )
        return RuleResult.replace(tagged)


class AffinityRule:
    """
    Soft preference for a tag next to tiles already carrying it.

    With at least min_neighbors collapsed neighbors tagged `tag` and none
    tagged with any of `blocked_by`, the domain narrows to its tagged subset
    when that subset is non-empty. Never infeasible.
    """

    def __init__(self, tag: str = WATER_TAG, blocked_by: Iterable[str] = (ROAD_TAG,), min_neighbors: int = 1):
        self.tag = tag
        self.blocked_by = tuple(blocked_by)
        self.min_neighbors = min_neighbors
        self.name = f"affinity:{tag}"

    def apply(self, options: frozenset[int], context: RuleContext) -> RuleResult:
        if context.count_neighbors_with(self.tag) < self.min_neighbors:
            return RuleResult.unchanged()
        if any(context.count_neighbors_with(blocker) > 0 for blocker in self.blocked_by):
            return RuleResult.unchanged()
        tagged = context.tagged(options, self.tag)
        if not tagged:
            return RuleResult.unchanged()
        return RuleResult.replace(tagged)


def default_rules() -> list[ClassificationRule]:
    """Reference rule order: water clustering limit, then water affinity."""
    return [
        ClusterRule(WATER_TAG, min_neighbors=2),
        AffinityRule(WATER_TAG, blocked_by=(ROAD_TAG,)),
    ]


def apply_rules(
    rules: Sequence[ClassificationRule],
    options: frozenset[int],
    context: RuleContext,
) -> tuple[frozenset[int] | None, str | None]:
    """
    Run rules in order over a domain.

    Returns:
        (options, None) with the narrowed domain, or (None, reason) when a
        rule declares the cell infeasible.
    """
    for rule in rules:
        result = rule.apply(options, context)
        if result.is_infeasible:
            return None, f"{rule.name}: {result.reason}" if result.reason else rule.name
        if result.outcome == RuleResult.REPLACE:
            options = result.options
    return options, None
