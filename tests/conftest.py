"""Shared pytest fixtures for stash-search tests."""

import json
from pathlib import Path

import pytest

from stash_search.models import ItemRecord, Socket, SocketColor


def make_sockets(*groups: str) -> list[Socket]:
    """Build sockets from link groups written as color letters, e.g. ("RR", "GGB")."""
    return [
        Socket(color=SocketColor(letter), group=index)
        for index, group in enumerate(groups)
        for letter in group
    ]


@pytest.fixture
def chaos_orb() -> ItemRecord:
    """A plain currency item without sockets or requirements."""
    return ItemRecord(name="Chaos Orb", properties={"Stack Size": "7/10"})


@pytest.fixture
def split_sockets_item() -> ItemRecord:
    """Armour with two link groups: R-R and G-G-B."""
    return ItemRecord(
        name="Kaom's Heart Glorious Plate",
        properties={"Quality": "+20%", "Armour": "1200"},
        requirements={"Level": 68, "Str": 191},
        sockets=make_sockets("RR", "GGB"),
    )


@pytest.fixture
def white_socket_item() -> ItemRecord:
    """Gloves with one link group R-G-W."""
    return ItemRecord(
        name="Rare Gloves",
        properties={"Quality": "+5%"},
        requirements={"Level": 40, "Dex": 50},
        sockets=make_sockets("RGW"),
    )


@pytest.fixture
def items(chaos_orb, split_sockets_item, white_socket_item) -> list[ItemRecord]:
    return [chaos_orb, split_sockets_item, white_socket_item]


@pytest.fixture
def stash_tab_json() -> dict:
    """A stash tab in the shape returned by the stash API."""
    return {
        "items": [
            {
                "name": "<<set:MS>><<set:M>><<set:S>>Corruption Sanctuary",
                "typeLine": "Vaal Regalia",
                "properties": [
                    {"name": "Quality", "values": [["+20%", 1]], "displayMode": 0},
                    {"name": "Energy Shield", "values": [["412", 1]], "displayMode": 0},
                    {"name": "Two Handed Sword", "displayMode": 0},
                ],
                "requirements": [
                    {"name": "Level", "values": [["68", 0]], "displayMode": 0},
                    {"name": "Int", "values": [["194", 0]], "displayMode": 1},
                ],
                "sockets": [
                    {"group": 0, "attr": "I"},
                    {"group": 0, "attr": "I"},
                    {"group": 0, "attr": "I"},
                    {"group": 0, "attr": "G"},
                    {"group": 1, "attr": "S"},
                    {"group": 1, "attr": "D"},
                ],
            },
            {
                "name": "",
                "typeLine": "Chaos Orb",
                "properties": [{"name": "Stack Size", "values": [["3/10", 0]]}],
            },
        ]
    }


@pytest.fixture
def items_file(tmp_path: Path, stash_tab_json: dict) -> Path:
    path = tmp_path / "items.json"
    path.write_text(json.dumps(stash_tab_json))
    return path
