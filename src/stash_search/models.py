"""
Item data models.

An ``ItemRecord`` is the read-only view of an inventory item that filters
query: display name, named properties and requirements, and an ordered
socket sequence. Records are built programmatically or ingested from
stash-API-shaped JSON with ``ItemRecord.from_dict``.
"""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from stash_search.logging import get_logger

logger = get_logger("models")

_MARKUP = re.compile(r"<<[^>]*>>")
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Any) -> float:
    """
    Parse the leading numeric part of a stored value.

    ``"+20%"`` -> 20.0, ``"1.50"`` -> 1.5, ``"abc"`` -> 0.0. Numbers pass through.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_PREFIX.match(str(value))
    if match is None:
        return 0.0
    return float(match.group(0))


def strip_markup(text: str) -> str:
    """Remove ``<<set:...>>`` style markup from item text."""
    return _MARKUP.sub("", text)


# ---------------------------------------------------------------------------
# Sockets
# ---------------------------------------------------------------------------


class SocketColor(str, Enum):
    """Socket color channel. WHITE sockets accept any color."""

    RED = "R"
    GREEN = "G"
    BLUE = "B"
    WHITE = "W"


# Stash API socket attributes: strength, dexterity, intelligence, generic
_ATTR_COLORS = {
    "S": SocketColor.RED,
    "D": SocketColor.GREEN,
    "I": SocketColor.BLUE,
    "G": SocketColor.WHITE,
}


@dataclass(frozen=True)
class Socket:
    """A single socket: its color and the link group it belongs to."""

    color: SocketColor
    group: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Socket | None:
        """Create a socket from its JSON form, or None for unknown colors."""
        group = int(data.get("group", 0))
        if "attr" in data:
            color = _ATTR_COLORS.get(str(data["attr"])[:1])
        else:
            raw = data.get("color", data.get("sColour"))
            try:
                color = SocketColor(str(raw).upper()[:1]) if raw is not None else None
            except ValueError:
                color = None
        if color is None:
            logger.debug("Ignoring socket with unknown color: %r", data)
            return None
        return cls(color=color, group=group)


@dataclass(frozen=True)
class SocketCounts:
    """Per-channel socket totals."""

    r: int = 0
    g: int = 0
    b: int = 0
    w: int = 0

    @classmethod
    def from_sockets(cls, sockets: list[Socket]) -> SocketCounts:
        counts = {color: 0 for color in SocketColor}
        for socket in sockets:
            counts[socket.color] += 1
        return cls(
            r=counts[SocketColor.RED],
            g=counts[SocketColor.GREEN],
            b=counts[SocketColor.BLUE],
            w=counts[SocketColor.WHITE],
        )

    @property
    def total(self) -> int:
        return self.r + self.g + self.b + self.w


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


@dataclass
class ItemRecord:
    """
    Read-only view of an item as seen by filters.

    ``sockets`` is in physical order; consecutive sockets sharing a group id
    are linked together.
    """

    name: str = ""  # Display name
    properties: dict[str, str | float] = field(default_factory=dict)
    requirements: dict[str, float] = field(default_factory=dict)
    sockets: list[Socket] = field(default_factory=list)

    @property
    def socket_counts(self) -> SocketCounts:
        return SocketCounts.from_sockets(self.sockets)

    @property
    def sockets_count(self) -> int:
        """Total number of sockets."""
        return len(self.sockets)

    @property
    def links(self) -> int:
        """Size of the largest link group."""
        return max((len(group) for group in self.link_groups()), default=0)

    def link_groups(self) -> list[list[Socket]]:
        """Consecutive runs of sockets sharing a group id, in socket order."""
        return [list(run) for _, run in itertools.groupby(self.sockets, key=lambda s: s.group)]

    def has_property(self, key: str) -> bool:
        return key in self.properties

    def property_value(self, key: str) -> float | None:
        """Numeric form of a property, or None when the item lacks it."""
        if key not in self.properties:
            return None
        return parse_number(self.properties[key])

    def requirement(self, key: str) -> float | None:
        """Requirement value, or None when the item has no such requirement."""
        if key not in self.requirements:
            return None
        return float(self.requirements[key])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ItemRecord:
        """
        Create an item from stash-API-shaped JSON.

        Accepts ``properties``/``requirements`` either as flat mappings or as
        lists of ``{"name": ..., "values": [[text, kind], ...]}`` entries.
        """
        name = strip_markup(str(data.get("name", ""))).strip()
        type_line = strip_markup(str(data.get("typeLine", ""))).strip()
        pretty = f"{name} {type_line}".strip() if name else type_line

        properties = _named_values(data.get("properties"))
        requirements = {
            key: parse_number(value)
            for key, value in _named_values(data.get("requirements")).items()
        }

        sockets = []
        for raw in data.get("sockets") or []:
            socket = Socket.from_dict(raw)
            if socket is not None:
                sockets.append(socket)

        return cls(
            name=pretty,
            properties=properties,
            requirements=requirements,
            sockets=sockets,
        )


def _named_values(raw: Any) -> dict[str, Any]:
    """Normalize a mapping or a list of name/values entries to a flat mapping."""
    if not raw:
        return {}
    if isinstance(raw, dict):
        return dict(raw)

    result: dict[str, Any] = {}
    for entry in raw:
        values = entry.get("values") or []
        if not values:
            continue
        first = values[0]
        result[str(entry["name"])] = first[0] if isinstance(first, (list, tuple)) else first
    return result
