"""
Numeric range filters.

``MinMaxFilter`` holds the shared bounds logic; subclasses only decide where
the value comes from and whether it is present:

- ``SimplePropertyFilter``: item property, absent when the item lacks it
- ``RequiredStatFilter``: item requirement, a missing requirement counts as 0
- ``ItemMethodFilter``: any numeric function of the item, always present
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable

from stash_search.criteria import RangeCriteria
from stash_search.filters.base import Filter
from stash_search.forms import FilterForm, format_number, to_float
from stash_search.models import ItemRecord

ItemMetric = Callable[[ItemRecord], float]


class MinMaxFilter(Filter):
    """Inclusive min/max bounds on a per-item numeric value."""

    cost = 1
    fields = ("min", "max")

    def __init__(self, property: str, caption: str | None = None):
        self.property = property
        self.caption = caption or property

    @abstractmethod
    def value(self, item: ItemRecord) -> float | None:
        """The item's value, or None when the item has no such value."""

    def default_criteria(self) -> RangeCriteria:
        return RangeCriteria()

    def capture(self, form: FilterForm | None) -> RangeCriteria:
        if form is None:
            return self.default_criteria()
        return RangeCriteria(
            min=to_float(form.get_text("min")) if form.is_filled("min") else None,
            max=to_float(form.get_text("max")) if form.is_filled("max") else None,
        )

    def display(self, criteria: RangeCriteria, form: FilterForm) -> None:
        form.set_text("min", "" if criteria.min is None else format_number(criteria.min))
        form.set_text("max", "" if criteria.max is None else format_number(criteria.max))

    def matches(self, item: ItemRecord, criteria: RangeCriteria) -> bool:
        value = self.value(item)
        if value is None:
            # Items without the value only pass an unconstrained filter
            return criteria.is_empty()
        if criteria.min is not None and criteria.min > value:
            return False
        if criteria.max is not None and criteria.max < value:
            return False
        return True


class SimplePropertyFilter(MinMaxFilter):
    """Range over a named item property."""

    @property
    def key(self) -> str:
        return f"property:{self.property}"

    def value(self, item: ItemRecord) -> float | None:
        return item.property_value(self.property)


class RequiredStatFilter(MinMaxFilter):
    """
    Range over a named item requirement.

    Unlike properties, a missing requirement is compared as 0, so
    ``max=10`` keeps items with no requirement and ``min=5`` drops them.
    """

    @property
    def key(self) -> str:
        return f"requirement:{self.property}"

    def value(self, item: ItemRecord) -> float:
        requirement = item.requirement(self.property)
        return 0.0 if requirement is None else requirement


class ItemMethodFilter(MinMaxFilter):
    """Range over a value computed from the item by ``func``."""

    def __init__(self, func: ItemMetric, caption: str):
        super().__init__(caption, caption)
        self.func = func

    @property
    def key(self) -> str:
        return f"metric:{self.caption}"

    def value(self, item: ItemRecord) -> float:
        return float(self.func(item))


class SocketsFilter(ItemMethodFilter):
    """Range over the total number of sockets."""

    key = "sockets"

    def __init__(self, caption: str = "Sockets"):
        super().__init__(lambda item: item.sockets_count, caption)


class LinksFilter(ItemMethodFilter):
    """Range over the size of the largest link group."""

    key = "links"

    def __init__(self, caption: str = "Links"):
        super().__init__(lambda item: item.links, caption)
