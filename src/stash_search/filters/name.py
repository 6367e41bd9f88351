"""
Name search filter.
"""

from __future__ import annotations

from stash_search.criteria import TextCriteria
from stash_search.filters.base import Filter
from stash_search.forms import FilterForm
from stash_search.models import ItemRecord


class NameSearchFilter(Filter):
    """Case-insensitive substring match on the item's display name."""

    key = "name"
    caption = "Name"
    cost = 0
    fields = ("query",)

    def default_criteria(self) -> TextCriteria:
        return TextCriteria()

    def capture(self, form: FilterForm | None) -> TextCriteria:
        if form is None:
            return self.default_criteria()
        return TextCriteria(query=form.get_text("query"))

    def display(self, criteria: TextCriteria, form: FilterForm) -> None:
        form.set_text("query", criteria.query)

    def matches(self, item: ItemRecord, criteria: TextCriteria) -> bool:
        return criteria.query.lower() in item.name.lower()
