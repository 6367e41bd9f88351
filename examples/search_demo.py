#!/usr/bin/env python3
"""
Search a small inventory with the default filter layout.

Shows capturing criteria from forms, saving a search and restoring it.
"""

import yaml
from rich.console import Console

from stash_search import ItemRecord, Search, SearchConfig
from stash_search.cli import find_filter
from stash_search.logging import setup_logging

console = Console()

ITEMS = [
    {
        "name": "Tabula Rasa",
        "typeLine": "Simple Robe",
        "sockets": [{"group": 0, "attr": "G"} for _ in range(6)],
    },
    {
        "name": "",
        "typeLine": "Astral Plate",
        "properties": [{"name": "Quality", "values": [["+12%", 1]]}],
        "requirements": [
            {"name": "Level", "values": [["62", 0]]},
            {"name": "Str", "values": [["180", 0]]},
        ],
        "sockets": [
            {"group": 0, "attr": "S"},
            {"group": 0, "attr": "S"},
            {"group": 1, "attr": "D"},
            {"group": 1, "attr": "I"},
        ],
    },
    {"name": "", "typeLine": "Chaos Orb"},
]


def main() -> None:
    setup_logging("DEBUG")

    config = SearchConfig()
    filters = config.build_filters()
    items = [ItemRecord.from_dict(data) for data in ITEMS]

    # Four linked sockets, at least two of them blue
    search = Search("blue-four-link", filters)
    forms = search.create_forms()
    forms[find_filter(filters, "links")].set_text("min", "4")
    forms[find_filter(filters, "links_colors")].set_text("b", "2")
    search.capture_all(forms)

    for item in search.filter_items(items):
        console.print(f"[green]match[/green] {item.name} ({item.links}L)")

    saved = yaml.safe_dump(search.to_dict(), sort_keys=False)
    console.print(f"\n[bold]Saved search:[/bold]\n{saved}")

    restored = Search.from_dict(yaml.safe_load(saved), filters)
    console.print(f"Restored search matches: {[i.name for i in restored.filter_items(items)]}")


if __name__ == "__main__":
    main()
