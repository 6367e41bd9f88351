"""
Query evaluation.

An item matches a query when every active filter matches it. Filters are
pure predicates, so the result never depends on their order; cheap filters
run first only to reject items sooner.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

from stash_search.criteria import FilterCriteria
from stash_search.filters.base import Filter
from stash_search.logging import get_logger
from stash_search.models import ItemRecord

logger = get_logger("query")


class ActiveFilter(NamedTuple):
    """A filter paired with the criteria it evaluates."""

    filter: Filter
    criteria: FilterCriteria


@dataclass
class MatchResult:
    """Result of checking one item."""

    item: ItemRecord
    matched: bool
    failed_filter: str | None = None  # Key of the first rejecting filter


def evaluate(item: ItemRecord, active: Iterable[tuple[Filter, FilterCriteria]]) -> bool:
    """Check an item against every (filter, criteria) pair."""
    return all(flt.matches(item, criteria) for flt, criteria in active)


def snapshot(
    active: Iterable[tuple[Filter, FilterCriteria]],
    order_by_cost: bool = True,
) -> tuple[ActiveFilter, ...]:
    """
    Freeze an active filter sequence for a scan.

    Criteria are copied so later captures cannot change a scan in flight.
    With ``order_by_cost`` the pairs are stably sorted cheapest first.
    """
    pairs = [ActiveFilter(flt, copy.deepcopy(criteria)) for flt, criteria in active]
    if order_by_cost:
        pairs.sort(key=lambda pair: pair.filter.cost)
    return tuple(pairs)


class QueryEvaluator:
    """
    Evaluates items against a fixed set of active filters.

    Example:
        evaluator = QueryEvaluator([(name_filter, TextCriteria("orb"))])
        matching = evaluator.filter_items(items)
    """

    def __init__(
        self,
        active: Iterable[tuple[Filter, FilterCriteria]] = (),
        order_by_cost: bool = True,
    ):
        self.order_by_cost = order_by_cost
        self.active = snapshot(active, order_by_cost)

    def set_active(self, active: Iterable[tuple[Filter, FilterCriteria]]) -> None:
        """Replace the active filters with a new snapshot."""
        self.active = snapshot(active, self.order_by_cost)

    def evaluate(self, item: ItemRecord) -> bool:
        """Check if an item matches every active filter."""
        return evaluate(item, self.active)

    def check(self, item: ItemRecord) -> MatchResult:
        """Check an item, reporting the first filter that rejects it."""
        for flt, criteria in self.active:
            if not flt.matches(item, criteria):
                return MatchResult(item=item, matched=False, failed_filter=flt.key)
        return MatchResult(item=item, matched=True)

    def check_all(self, items: Iterable[ItemRecord]) -> list[MatchResult]:
        """Check multiple items."""
        return [self.check(item) for item in items]

    def filter_items(self, items: Iterable[ItemRecord]) -> list[ItemRecord]:
        """Get matching items, in input order."""
        active = self.active
        candidates = list(items)
        matching = [item for item in candidates if evaluate(item, active)]
        logger.debug(
            "Matched %d of %d items with %d filters",
            len(matching),
            len(candidates),
            len(active),
        )
        return matching
