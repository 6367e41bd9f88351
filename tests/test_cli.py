"""Tests for CLI commands."""

import argparse
import json
import logging
from pathlib import Path
from textwrap import dedent

import pytest

from stash_search.cli import apply_arguments, find_filter, format_sockets, load_items, main
from stash_search.config import SearchConfig
from stash_search.models import ItemRecord
from stash_search.search import Search


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    """Keep the real user config out of CLI runs and undo CLI logging setup."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    yield
    root = logging.getLogger("stash_search")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.disabled = False


def run_json(capsys, *argv: str) -> list[dict]:
    main([*argv, "--json"])
    return json.loads(capsys.readouterr().out)


class TestHelpers:
    """Tests for CLI helpers."""

    def test_load_stash_tab(self, items_file: Path) -> None:
        items = load_items(items_file)

        assert [item.name for item in items] == [
            "Corruption Sanctuary Vaal Regalia",
            "Chaos Orb",
        ]

    def test_load_list(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text(json.dumps([{"typeLine": "Exalted Orb"}]))

        assert [item.name for item in load_items(path)] == ["Exalted Orb"]

    def test_load_rejects_scalar(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("3")

        with pytest.raises(ValueError):
            load_items(path)

    def test_format_sockets(self, split_sockets_item: ItemRecord) -> None:
        assert format_sockets(split_sockets_item) == "R-R G-G-B"

    def test_find_filter_by_key_or_caption(self) -> None:
        filters = SearchConfig().build_filters()

        assert find_filter(filters, "q") == 1
        assert find_filter(filters, "property:Quality") == 1
        assert find_filter(filters, "R.Str") == 4
        with pytest.raises(KeyError):
            find_filter(filters, "dps")

    def test_apply_arguments(self) -> None:
        search = Search("cli", SearchConfig().build_filters())
        forms = search.create_forms()
        args = argparse.Namespace(
            name="orb", ranges=["Links=5:6", "Q=10"], colors="1,,2", linked=None
        )

        apply_arguments(args, search, forms)

        assert forms[0].get_text("query") == "orb"
        assert forms[8].to_dict() == {"min": "5", "max": "6"}
        assert forms[1].to_dict() == {"min": "10", "max": ""}
        assert forms[9].to_dict() == {"r": "1", "g": "", "b": "2"}
        assert forms[10].to_dict() == {"r": "", "g": "", "b": ""}

    def test_apply_arguments_rejects_range_without_bounds(self) -> None:
        search = Search("cli", SearchConfig().build_filters())
        args = argparse.Namespace(name=None, ranges=["Q"], colors=None, linked=None)

        with pytest.raises(ValueError, match="FILTER=MIN:MAX"):
            apply_arguments(args, search, search.create_forms())

    def test_apply_arguments_rejects_range_on_color_filter(self) -> None:
        search = Search("cli", SearchConfig().build_filters())
        args = argparse.Namespace(name=None, ranges=["links_colors=1:2"], colors=None, linked=None)

        with pytest.raises(ValueError, match="does not take a range"):
            apply_arguments(args, search, search.create_forms())


class TestQueryCommand:
    """Tests for the query command."""

    def test_name(self, items_file: Path, capsys) -> None:
        data = run_json(capsys, "query", str(items_file), "--name", "orb")

        assert [entry["name"] for entry in data] == ["Chaos Orb"]

    def test_linked_colors_with_wildcard(self, items_file: Path, capsys) -> None:
        data = run_json(capsys, "query", str(items_file), "--linked", ",,4")

        assert data == [
            {
                "name": "Corruption Sanctuary Vaal Regalia",
                "sockets": "B-B-B-W R-G",
                "links": 4,
            }
        ]

    def test_property_range_excludes_items_without_property(self, items_file, capsys) -> None:
        data = run_json(capsys, "query", str(items_file), "--range", "Q=20:")

        assert [entry["name"] for entry in data] == ["Corruption Sanctuary Vaal Regalia"]

    def test_requirement_range_keeps_items_without_requirement(self, items_file, capsys) -> None:
        data = run_json(capsys, "query", str(items_file), "--range", "R.Int=:100")

        assert [entry["name"] for entry in data] == ["Chaos Orb"]

    def test_table_output(self, items_file: Path, capsys) -> None:
        main(["query", str(items_file), "--colors", "1,1,"])

        captured = capsys.readouterr()
        assert "Matching Items" in captured.out
        assert "Total: 1 of 2 items" in captured.out

    def test_unknown_filter(self, items_file: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["query", str(items_file), "--range", "DPS=100:"])

        assert exc.value.code == 1

    @pytest.mark.parametrize("entry", ["Q", "sockets_colors=1:2"])
    def test_malformed_range(self, items_file: Path, capsys, entry: str) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["query", str(items_file), "--range", entry])

        assert exc.value.code == 1
        assert "Unknown filter" not in capsys.readouterr().out

    @pytest.mark.parametrize(
        "content",
        [
            "saved_searches:\n  six: hello\n",
            "saved_searches:\n  six:\n    criteria:\n      links: 6\n",
            "filters:\n  - kind: links_colors\n  - kind: links_colors\n",
        ],
    )
    def test_malformed_config(self, items_file: Path, tmp_path: Path, capsys, content) -> None:
        (tmp_path / "stash-search.yaml").write_text(content)

        with pytest.raises(SystemExit) as exc:
            main(["query", str(items_file)])

        assert exc.value.code == 1
        assert "Invalid config" in capsys.readouterr().out

    def test_quiet_disables_logging(self, items_file: Path, capsys) -> None:
        main(["-q", "query", str(items_file), "--json"])

        assert logging.getLogger("stash_search").disabled
        assert len(json.loads(capsys.readouterr().out)) == 2

    def test_missing_items_file(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["query", str(tmp_path / "missing.json")])

    def test_saved_search(self, items_file: Path, tmp_path: Path, capsys) -> None:
        config_path = tmp_path / "custom.yaml"
        config_path.write_text(
            dedent("""
            saved_searches:
              currency:
                criteria:
                  name:
                    query: orb
            """)
        )

        data = run_json(
            capsys, "-c", str(config_path), "query", str(items_file), "--search", "currency"
        )

        assert [entry["name"] for entry in data] == ["Chaos Orb"]

    def test_unknown_saved_search(self, items_file: Path) -> None:
        with pytest.raises(SystemExit):
            main(["query", str(items_file), "--search", "nope"])


class TestConfigCommand:
    """Tests for the config command."""

    def test_init_and_show(self, tmp_path: Path, capsys) -> None:
        main(["config", "init"])

        assert (tmp_path / "stash-search.yaml").exists()
        assert "Created config file" in capsys.readouterr().out

        main(["config", "show"])

        captured = capsys.readouterr()
        assert "Loaded from" in captured.out
        assert "links_colors" in captured.out

    def test_init_refuses_overwrite(self, tmp_path: Path) -> None:
        (tmp_path / "stash-search.yaml").write_text("{}")

        with pytest.raises(SystemExit):
            main(["config", "init"])

    def test_invalid_config(self, tmp_path: Path) -> None:
        (tmp_path / "stash-search.yaml").write_text("filters:\n  - property: Quality\n")

        with pytest.raises(SystemExit):
            main(["config", "show"])
