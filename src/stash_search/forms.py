"""
Input surface for filters.

A ``FilterForm`` is the text-field view of one filter's input, as produced by
whatever front end captures user input (widgets, CLI flags, saved state).
Empty text means "not set"; non-empty text that is not a number coerces to 0.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_FLOAT = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_INT = re.compile(r"^[+-]?\d+$")


def to_float(text: str) -> float:
    """Parse a float; anything that is not a plain decimal number yields 0.0."""
    text = text.strip()
    if not _FLOAT.match(text):
        return 0.0
    return float(text)


def to_int(text: str) -> int:
    """Parse an integer; anything that is not a plain integer yields 0."""
    text = text.strip()
    if not _INT.match(text):
        return 0
    return int(text)


def format_number(value: float) -> str:
    """Render a number the way users type it (``5.0`` -> ``"5"``)."""
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


class FilterForm:
    """Named text fields backing one filter's input."""

    def __init__(self, fields: Iterable[str], values: dict[str, str] | None = None):
        self._fields: dict[str, str] = {name: "" for name in fields}
        for name, text in (values or {}).items():
            self.set_text(name, text)

    @property
    def fields(self) -> list[str]:
        return list(self._fields)

    def get_text(self, name: str) -> str:
        return self._fields[name]

    def set_text(self, name: str, text: str) -> None:
        if name not in self._fields:
            raise KeyError(f"Unknown form field: {name}")
        self._fields[name] = text

    def is_filled(self, name: str) -> bool:
        return len(self._fields[name]) > 0

    def clear(self) -> None:
        for name in self._fields:
            self._fields[name] = ""

    def to_dict(self) -> dict[str, str]:
        return dict(self._fields)

    def __repr__(self) -> str:
        return f"FilterForm({self._fields!r})"
