"""
Criteria models.

Criteria hold the values a filter captured from user input. They carry no
matching behavior of their own; filters read them when evaluating items.
An absent bound (``None``) never constrains, independent of a zero value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class TextCriteria:
    """Substring query for name search."""

    query: str = ""

    def is_empty(self) -> bool:
        return not self.query

    def to_dict(self) -> dict[str, Any]:
        return {"query": self.query}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TextCriteria:
        return cls(query=str(data.get("query", "")))


@dataclass
class RangeCriteria:
    """Inclusive numeric bounds; either side may be absent."""

    min: float | None = None
    max: float | None = None

    def is_empty(self) -> bool:
        return self.min is None and self.max is None

    def to_dict(self) -> dict[str, Any]:
        return {"min": self.min, "max": self.max}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RangeCriteria:
        return cls(
            min=_optional(data.get("min"), float),
            max=_optional(data.get("max"), float),
        )


@dataclass
class ColorCriteria:
    """Requested socket color counts per channel."""

    r: int | None = None
    g: int | None = None
    b: int | None = None

    def is_empty(self) -> bool:
        return self.r is None and self.g is None and self.b is None

    def needs(self) -> tuple[int, int, int]:
        """Needed (r, g, b) counts; an absent channel needs 0."""
        return (self.r or 0, self.g or 0, self.b or 0)

    def to_dict(self) -> dict[str, Any]:
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ColorCriteria:
        return cls(
            r=_optional(data.get("r"), int),
            g=_optional(data.get("g"), int),
            b=_optional(data.get("b"), int),
        )


FilterCriteria = TextCriteria | RangeCriteria | ColorCriteria


def _optional(value: Any, cast: type) -> Any:
    return None if value is None else cast(value)
