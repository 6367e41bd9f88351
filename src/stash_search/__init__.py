"""
Stash Search - filtering layer for an inventory browser.

Decides which items match a set of search criteria: name substring,
numeric ranges on properties, requirements and socket counts, and socket
or linked-socket color requests where white sockets act as wildcards.

Example:
    from stash_search import SearchConfig, Search

    config = SearchConfig()
    search = Search("default", config.build_filters())

    forms = search.create_forms()
    forms[0].set_text("query", "orb")
    search.capture_all(forms)

    matching = search.filter_items(items)
"""

from stash_search.config import ConfigError, FilterSpec, SearchConfig
from stash_search.criteria import ColorCriteria, FilterCriteria, RangeCriteria, TextCriteria
from stash_search.filters import (
    Filter,
    ItemMethodFilter,
    LinksColorsFilter,
    LinksFilter,
    MinMaxFilter,
    NameSearchFilter,
    RequiredStatFilter,
    SimplePropertyFilter,
    SocketsColorsFilter,
    SocketsFilter,
    satisfies,
)
from stash_search.forms import FilterForm
from stash_search.models import ItemRecord, Socket, SocketColor, SocketCounts
from stash_search.query import ActiveFilter, MatchResult, QueryEvaluator, evaluate
from stash_search.search import Search

__version__ = "0.1.0"

__all__ = [
    "ActiveFilter",
    "ColorCriteria",
    "ConfigError",
    "Filter",
    "FilterCriteria",
    "FilterForm",
    "FilterSpec",
    "ItemMethodFilter",
    "ItemRecord",
    "LinksColorsFilter",
    "LinksFilter",
    "MatchResult",
    "MinMaxFilter",
    "NameSearchFilter",
    "QueryEvaluator",
    "RangeCriteria",
    "RequiredStatFilter",
    "Search",
    "SearchConfig",
    "SimplePropertyFilter",
    "Socket",
    "SocketColor",
    "SocketCounts",
    "SocketsColorsFilter",
    "SocketsFilter",
    "TextCriteria",
    "evaluate",
    "satisfies",
]
