"""
Base filter interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from stash_search.criteria import FilterCriteria
from stash_search.forms import FilterForm
from stash_search.models import ItemRecord


class Filter(ABC):
    """
    Abstract base class for filters.

    A filter is one search dimension. It turns form input into criteria,
    writes criteria back into a form, and decides whether an item matches
    a given criteria value. Filters hold no criteria themselves, so one
    instance can evaluate any number of saved criteria sets.
    """

    key: str = ""  # Stable identifier for persisted criteria
    caption: str = ""  # Display label
    cost: int = 0  # Evaluation order hint, cheapest first
    fields: tuple[str, ...] = ()  # Form field names

    def create_form(self, values: dict[str, str] | None = None) -> FilterForm:
        """Create a blank (or pre-filled) form for this filter."""
        return FilterForm(self.fields, values)

    @abstractmethod
    def default_criteria(self) -> FilterCriteria:
        """Criteria with nothing set; matches every item."""

    @abstractmethod
    def capture(self, form: FilterForm | None) -> FilterCriteria:
        """
        Read a form into a fresh criteria value.

        Args:
            form: The filter's input form; None yields default criteria

        Returns:
            New criteria; the form is not modified
        """

    @abstractmethod
    def display(self, criteria: FilterCriteria, form: FilterForm) -> None:
        """Write criteria into a form. Absent values render as empty text."""

    def clear(self, form: FilterForm) -> None:
        """Reset the form to empty."""
        form.clear()

    @abstractmethod
    def matches(self, item: ItemRecord, criteria: FilterCriteria) -> bool:
        """
        Determine if an item matches.

        Args:
            item: The item to check
            criteria: Criteria previously captured for this filter

        Returns:
            True if the item satisfies the criteria
        """

    def criteria_from_dict(self, data: dict[str, Any]) -> FilterCriteria:
        """Restore criteria saved with ``to_dict``."""
        return type(self.default_criteria()).from_dict(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"
