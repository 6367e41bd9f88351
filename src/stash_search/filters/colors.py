"""
Socket color filters.

White sockets can stand in for any color, colored sockets cannot stand in
for each other. A request is therefore feasible exactly when the summed
per-color shortfall fits in the white sockets available.
"""

from __future__ import annotations

from stash_search.criteria import ColorCriteria
from stash_search.filters.base import Filter
from stash_search.forms import FilterForm, format_number, to_int
from stash_search.models import ItemRecord, SocketColor


def satisfies(
    need_r: int,
    need_g: int,
    need_b: int,
    got_r: int,
    got_g: int,
    got_b: int,
    got_w: int,
) -> bool:
    """Check whether the given sockets can supply the needed colors."""
    deficiency = max(0, need_r - got_r) + max(0, need_g - got_g) + max(0, need_b - got_b)
    return deficiency <= got_w


class SocketsColorsFilter(Filter):
    """Requested colors across all of the item's sockets."""

    key = "sockets_colors"
    caption = "Colors"
    cost = 2
    fields = ("r", "g", "b")

    def __init__(self, caption: str | None = None):
        if caption:
            self.caption = caption

    def default_criteria(self) -> ColorCriteria:
        return ColorCriteria()

    def capture(self, form: FilterForm | None) -> ColorCriteria:
        if form is None:
            return self.default_criteria()
        values = {
            name: to_int(form.get_text(name)) if form.is_filled(name) else None
            for name in self.fields
        }
        return ColorCriteria(**values)

    def display(self, criteria: ColorCriteria, form: FilterForm) -> None:
        for name in self.fields:
            value = getattr(criteria, name)
            form.set_text(name, "" if value is None else format_number(value))

    def matches(self, item: ItemRecord, criteria: ColorCriteria) -> bool:
        if criteria.is_empty():
            return True
        counts = item.socket_counts
        return satisfies(*criteria.needs(), counts.r, counts.g, counts.b, counts.w)


class LinksColorsFilter(SocketsColorsFilter):
    """Requested colors within a single link group."""

    key = "links_colors"
    caption = "Linked"
    cost = 3

    def matches(self, item: ItemRecord, criteria: ColorCriteria) -> bool:
        if criteria.is_empty():
            return True
        need = criteria.needs()

        current: int | None = None
        got = dict.fromkeys(SocketColor, 0)
        for socket in item.sockets:
            if current is not None and socket.group != current:
                if _group_satisfies(need, got):
                    return True
                got = dict.fromkeys(SocketColor, 0)
            current = socket.group
            got[socket.color] += 1

        if current is None:
            return False
        return _group_satisfies(need, got)


def _group_satisfies(need: tuple[int, int, int], got: dict[SocketColor, int]) -> bool:
    return satisfies(
        *need,
        got[SocketColor.RED],
        got[SocketColor.GREEN],
        got[SocketColor.BLUE],
        got[SocketColor.WHITE],
    )
