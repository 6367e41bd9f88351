"""
Saved searches.

A ``Search`` is a named set of criteria, one per filter in a layout. Several
searches can share the same filters; switching searches means displaying a
different search's criteria in the forms.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from stash_search.criteria import FilterCriteria
from stash_search.filters.base import Filter
from stash_search.forms import FilterForm
from stash_search.logging import get_logger
from stash_search.models import ItemRecord
from stash_search.query import ActiveFilter, QueryEvaluator

logger = get_logger("search")


class Search:
    """Named criteria set bound to a filter layout."""

    def __init__(self, name: str, filters: Sequence[Filter]):
        keys = [flt.key for flt in filters]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"Duplicate filter keys: {', '.join(duplicates)}")

        self.name = name
        self.filters = list(filters)
        self.criteria: list[FilterCriteria] = [flt.default_criteria() for flt in self.filters]

    def create_forms(self) -> list[FilterForm]:
        """Create one blank form per filter, in layout order."""
        return [flt.create_form() for flt in self.filters]

    def capture_all(self, forms: Sequence[FilterForm]) -> None:
        """Replace every criteria value with what the forms currently hold."""
        self._check_forms(forms)
        self.criteria = [flt.capture(form) for flt, form in zip(self.filters, forms)]

    def display_all(self, forms: Sequence[FilterForm]) -> None:
        """Write this search's criteria into the forms."""
        self._check_forms(forms)
        for flt, criteria, form in zip(self.filters, self.criteria, forms):
            flt.display(criteria, form)

    def reset_forms(self, forms: Sequence[FilterForm]) -> None:
        """Clear every form."""
        self._check_forms(forms)
        for flt, form in zip(self.filters, forms):
            flt.clear(form)

    def reset(self) -> None:
        """Drop all criteria back to their defaults."""
        self.criteria = [flt.default_criteria() for flt in self.filters]

    def get_criteria(self, key: str) -> FilterCriteria:
        for flt, criteria in zip(self.filters, self.criteria):
            if flt.key == key:
                return criteria
        raise KeyError(key)

    def set_criteria(self, key: str, criteria: FilterCriteria) -> None:
        for index, flt in enumerate(self.filters):
            if flt.key == key:
                self.criteria[index] = criteria
                return
        raise KeyError(key)

    def active_filters(self) -> list[ActiveFilter]:
        """Filters with something set; unset filters match every item."""
        return [
            ActiveFilter(flt, criteria)
            for flt, criteria in zip(self.filters, self.criteria)
            if not criteria.is_empty()
        ]

    def evaluator(self) -> QueryEvaluator:
        """Snapshot the current criteria for a scan."""
        return QueryEvaluator(self.active_filters())

    def matches(self, item: ItemRecord) -> bool:
        return self.evaluator().evaluate(item)

    def filter_items(self, items: Iterable[ItemRecord]) -> list[ItemRecord]:
        return self.evaluator().filter_items(items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "criteria": {
                flt.key: criteria.to_dict()
                for flt, criteria in zip(self.filters, self.criteria)
                if not criteria.is_empty()
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], filters: Sequence[Filter]) -> Search:
        """Restore a search saved with ``to_dict`` onto a filter layout."""
        search = cls(str(data.get("name", "")), filters)
        known = {flt.key: flt for flt in search.filters}
        criteria = data.get("criteria") or {}
        if not isinstance(criteria, dict):
            raise ValueError("'criteria' must be a mapping of filter keys")
        for key, values in criteria.items():
            flt = known.get(key)
            if flt is None:
                logger.warning("Search %r: ignoring criteria for unknown filter %r", search.name, key)
                continue
            if values is not None and not isinstance(values, dict):
                raise ValueError(f"criteria for {key!r} must be a mapping, got {values!r}")
            search.set_criteria(key, flt.criteria_from_dict(values or {}))
        return search

    def _check_forms(self, forms: Sequence[FilterForm]) -> None:
        if len(forms) != len(self.filters):
            raise ValueError(f"Expected {len(self.filters)} forms, got {len(forms)}")

    def __repr__(self) -> str:
        return f"Search(name={self.name!r}, filters={len(self.filters)})"
