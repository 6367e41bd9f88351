"""
Item filters.
"""

from stash_search.filters.base import Filter
from stash_search.filters.colors import LinksColorsFilter, SocketsColorsFilter, satisfies
from stash_search.filters.name import NameSearchFilter
from stash_search.filters.ranges import (
    ItemMethodFilter,
    LinksFilter,
    MinMaxFilter,
    RequiredStatFilter,
    SimplePropertyFilter,
    SocketsFilter,
)

__all__ = [
    "Filter",
    "ItemMethodFilter",
    "LinksColorsFilter",
    "LinksFilter",
    "MinMaxFilter",
    "NameSearchFilter",
    "RequiredStatFilter",
    "SimplePropertyFilter",
    "SocketsColorsFilter",
    "SocketsFilter",
    "satisfies",
]
