"""
Configuration models for stash search.

Describes the filter layout and saved searches. Can be loaded from
YAML/JSON-shaped data or constructed programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from stash_search.filters import (
    Filter,
    ItemMethodFilter,
    LinksColorsFilter,
    LinksFilter,
    NameSearchFilter,
    RequiredStatFilter,
    SimplePropertyFilter,
    SocketsColorsFilter,
    SocketsFilter,
)
from stash_search.filters.ranges import ItemMetric
from stash_search.search import Search


class ConfigError(ValueError):
    """Raised for an invalid filter layout or saved search."""


# ---------------------------------------------------------------------------
# Item metrics available to "metric" filters
# ---------------------------------------------------------------------------

ITEM_METRICS: dict[str, ItemMetric] = {
    "sockets": lambda item: item.sockets_count,
    "links": lambda item: item.links,
    "red_sockets": lambda item: item.socket_counts.r,
    "green_sockets": lambda item: item.socket_counts.g,
    "blue_sockets": lambda item: item.socket_counts.b,
    "white_sockets": lambda item: item.socket_counts.w,
}

FILTER_KINDS = (
    "name",
    "property",
    "requirement",
    "sockets",
    "links",
    "metric",
    "sockets_colors",
    "links_colors",
)


@dataclass
class FilterSpec:
    """One entry of the filter layout."""

    kind: str
    property: str | None = None  # Property, requirement or metric name
    caption: str | None = None  # Display label override

    def build(self) -> Filter:
        """Create the filter this entry describes."""
        if self.kind not in FILTER_KINDS:
            raise ConfigError(f"Unknown filter kind: {self.kind!r}")
        if self.kind in ("property", "requirement", "metric") and not self.property:
            raise ConfigError(f"Filter kind {self.kind!r} needs a 'property'")

        if self.kind == "name":
            return NameSearchFilter()
        if self.kind == "property":
            return SimplePropertyFilter(self.property, self.caption)
        if self.kind == "requirement":
            return RequiredStatFilter(self.property, self.caption)
        if self.kind == "sockets":
            return SocketsFilter(self.caption or "Sockets")
        if self.kind == "links":
            return LinksFilter(self.caption or "Links")
        if self.kind == "metric":
            func = ITEM_METRICS.get(self.property)
            if func is None:
                raise ConfigError(f"Unknown item metric: {self.property!r}")
            return ItemMethodFilter(func, self.caption or self.property)
        if self.kind == "sockets_colors":
            return SocketsColorsFilter(self.caption)
        return LinksColorsFilter(self.caption)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FilterSpec:
        if not isinstance(data, dict) or "kind" not in data:
            raise ConfigError(f"Filter entry without 'kind': {data!r}")
        return cls(
            kind=str(data["kind"]),
            property=data.get("property"),
            caption=data.get("caption"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind}
        if self.property is not None:
            data["property"] = self.property
        if self.caption is not None:
            data["caption"] = self.caption
        return data


def default_filters() -> list[FilterSpec]:
    """The standard search form layout."""
    return [
        FilterSpec("name"),
        FilterSpec("property", "Quality", "Q"),
        FilterSpec("property", "Level"),
        FilterSpec("requirement", "Level", "R.Level"),
        FilterSpec("requirement", "Str", "R.Str"),
        FilterSpec("requirement", "Dex", "R.Dex"),
        FilterSpec("requirement", "Int", "R.Int"),
        FilterSpec("sockets"),
        FilterSpec("links"),
        FilterSpec("sockets_colors"),
        FilterSpec("links_colors"),
    ]


@dataclass
class SearchConfig:
    """
    Main configuration.

    Example YAML:
        log_level: INFO
        filters:
          - kind: name
          - kind: property
            property: Quality
            caption: Q
          - kind: requirement
            property: Str
          - kind: links_colors
        saved_searches:
          six-link:
            criteria:
              links:
                min: 6
    """

    filters: list[FilterSpec] = field(default_factory=default_filters)
    log_level: str = "WARNING"
    saved_searches: dict[str, dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchConfig:
        """Create config from a dictionary."""
        if not isinstance(data, dict):
            raise ConfigError("Config must be a mapping")
        filters = data.get("filters")
        saved = data.get("saved_searches") or {}
        if not isinstance(saved, dict):
            raise ConfigError("'saved_searches' must be a mapping")

        return cls(
            filters=[FilterSpec.from_dict(f) for f in filters] if filters else default_filters(),
            log_level=str(data.get("log_level", "WARNING")),
            saved_searches={
                str(name): _saved_search_body(name, body) for name, body in saved.items()
            },
        )

    @classmethod
    def from_yaml(cls, path: Path) -> SearchConfig:
        """Load config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_string(cls, content: str) -> SearchConfig:
        """Load config from a YAML string."""
        data = yaml.safe_load(content)
        return cls.from_dict(data or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "log_level": self.log_level,
            "filters": [spec.to_dict() for spec in self.filters],
            "saved_searches": self.saved_searches,
        }

    def build_filters(self) -> list[Filter]:
        """Instantiate the filter layout."""
        filters = [spec.build() for spec in self.filters]
        keys = [flt.key for flt in filters]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ConfigError(f"Duplicate filters in layout: {', '.join(duplicates)}")
        return filters

    def build_searches(self, filters: list[Filter] | None = None) -> dict[str, Search]:
        """Restore saved searches onto a filter layout."""
        filters = filters if filters is not None else self.build_filters()
        searches = {}
        for name, body in self.saved_searches.items():
            try:
                searches[name] = Search.from_dict({"name": name, **body}, filters)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid saved search {name!r}: {e}") from e
        return searches


def _saved_search_body(name: Any, body: Any) -> dict[str, Any]:
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ConfigError(f"Saved search {name!r} must be a mapping")
    return dict(body)
